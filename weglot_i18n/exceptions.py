"""
Generator Exceptions

This module contains exception classes shared by the provider, storage
and translation modules. Kept separate to avoid circular imports.
"""


class TranslationError(Exception):
    """Translation run error with optional code and details."""

    code = "translation_failed"

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        if code:
            self.code = code
        self.details = details or {}


class ConfigurationMissing(TranslationError):
    """A required setting (credentials, paths, languages) is absent or invalid."""

    code = "config_missing"


class ProviderCallFailure(TranslationError):
    """The translation provider could not be reached or answered with an error."""

    code = "provider_call_failed"


class MisalignedBatchResponse(TranslationError):
    """The provider returned a different number of results than requested."""

    code = "batch_misaligned"


class MissingSourceDocument(TranslationError):
    """The source-language locale file is absent or not valid JSON."""

    code = "source_missing"


class OutputWriteFailure(TranslationError):
    """A translated locale file could not be written."""

    code = "output_write_failed"
