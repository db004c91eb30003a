"""
Provider Module

Translation provider interface and the Weglot HTTP implementation.
"""

from weglot_i18n.provider.base import (
    BatchTranslation,
    ProjectSettings,
    TranslationProvider,
    build_words,
)
from weglot_i18n.provider.weglot import WeglotProvider, fetch_project_settings

__all__ = [
    'BatchTranslation',
    'ProjectSettings',
    'TranslationProvider',
    'WeglotProvider',
    'build_words',
    'fetch_project_settings',
]
