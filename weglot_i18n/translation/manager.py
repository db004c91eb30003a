"""
Translation Manager Module

TranslationBatchOrchestrator coordinates a run:
- Flatten the source tree once
- Per target language: encode placeholders, call the provider with the
  whole batch, map results back by position, rebuild the tree
- Languages are processed one at a time; any error aborts the run
"""

import json
import time
from typing import Callable, Dict, List, Optional

from weglot_i18n import language_codes as lc
from weglot_i18n.exceptions import MisalignedBatchResponse
from weglot_i18n.logger import get_logger
from weglot_i18n.provider.base import BatchTranslation, TranslationProvider, build_words
from weglot_i18n.translation.placeholders import encode_placeholders
from weglot_i18n.translation.progress import TranslationProgress
from weglot_i18n.translation.utils import (
    JsonScalar,
    JsonValue,
    TranslationRecord,
    ValueMap,
    collect_values,
    replace_values,
    value_key,
)

logger = get_logger(__name__)

LanguageDoneCallback = Callable[[str, JsonValue], None]
ProgressCallback = Callable[[TranslationProgress], None]


def _as_text(value: JsonScalar) -> str:
    """Provider text for a leaf; numbers and booleans as they read in JSON."""
    return value if isinstance(value, str) else json.dumps(value)


class TranslationBatchOrchestrator:
    """
    Translates one source locale tree into every target language.

    Features:
    - One provider call per language, carrying every unique leaf
    - Identical source strings always get identical translations
    - Placeholders survive translation via positional markers
    - Output trees keep the source shape and key order
    """

    def __init__(
        self,
        provider: TranslationProvider,
        request_url: str = "",
        translate_non_string_leaves: bool = False,
        strict_batch_alignment: bool = True,
    ):
        """
        Args:
            provider: Batch translation provider
            request_url: Context URL passed to the provider with each batch
            translate_non_string_leaves: Send numbers and booleans as text too
            strict_batch_alignment: Fail when the provider returns a different
                number of results than requested
        """
        self.provider = provider
        self.request_url = request_url
        self.translate_non_string_leaves = translate_non_string_leaves
        self.strict_batch_alignment = strict_batch_alignment

    def resolve_target_languages(self, source_language: str, requested: List[str]) -> List[str]:
        """Drop blank, repeated and source-language codes, keeping order."""
        resolved: List[str] = []
        for code in requested:
            if not isinstance(code, str) or not code.strip():
                continue
            code = code.strip()
            if lc.languages_match(code, source_language):
                logger.info(f"Skipping {code}: same as source language")
                continue
            if code in resolved:
                continue
            resolved.append(code)
        return resolved

    def _is_translatable(self, value: JsonScalar) -> bool:
        if isinstance(value, str):
            return bool(value.strip())
        if value is None:
            return False
        return self.translate_non_string_leaves

    def build_batch(self, leaves: List[JsonScalar]) -> List[JsonScalar]:
        """
        Unique translatable leaves in first-occurrence order.

        Blank strings and nulls are never sent; numbers and booleans only
        when translate_non_string_leaves is set.
        """
        batch: List[JsonScalar] = []
        seen = set()
        for value in leaves:
            if not self._is_translatable(value):
                continue
            key = value_key(value)
            if key in seen:
                continue
            seen.add(key)
            batch.append(value)
        return batch

    def _check_alignment(self, target_language: str, requested: List[str], result: BatchTranslation):
        returned = len(result.translated)
        if returned == len(requested):
            return

        message = (
            f"Provider returned {returned} translations for {len(requested)} "
            f"requested strings ({target_language})"
        )
        if self.strict_batch_alignment:
            raise MisalignedBatchResponse(
                message,
                details={
                    "target_language": target_language,
                    "requested": len(requested),
                    "returned": returned,
                },
            )
        logger.warning(f"{message}; results are matched by position")

    def build_value_map(
        self,
        batch: List[JsonScalar],
        requested: List[str],
        result: BatchTranslation,
    ) -> ValueMap:
        """Correlate request and response by position into a leaf -> record map."""
        value_map: ValueMap = {}
        for index, original in enumerate(batch):
            translated = result.translated[index] if index < len(result.translated) else None
            if translated is not None and not isinstance(translated, str):
                logger.warning(f"Ignoring non-text translation for '{original}': {translated!r}")
                translated = None
            value_map[value_key(original)] = TranslationRecord(
                original=original,
                requested=requested[index],
                translated=translated,
            )
        return value_map

    def translate_language(
        self,
        source_tree: JsonValue,
        batch: List[JsonScalar],
        source_language: str,
        target_language: str,
    ) -> JsonValue:
        """Translate the batch into one language and rebuild the tree."""
        if not batch:
            logger.info(f"Nothing to translate for {target_language}")
            return replace_values(source_tree, {})

        requested = [encode_placeholders(_as_text(value))[0] for value in batch]

        result = self.provider.translate(
            source_language,
            target_language,
            self.request_url,
            build_words(requested),
        )
        self._check_alignment(target_language, requested, result)

        value_map = self.build_value_map(batch, requested, result)
        return replace_values(source_tree, value_map)

    def run(
        self,
        source_tree: JsonValue,
        source_language: str,
        target_languages: List[str],
        on_language_done: Optional[LanguageDoneCallback] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Dict[str, JsonValue]:
        """
        Translate source_tree into each target language, in order.

        Args:
            source_tree: Parsed source locale document
            source_language: Source language code
            target_languages: Target language codes
            on_language_done: Called with (language, tree) as soon as a
                language is finished, before the next one starts
            progress_callback: Receives a TranslationProgress per phase

        Returns:
            Dict mapping language code to translated tree
        """
        start_time = time.time()
        languages = self.resolve_target_languages(source_language, target_languages)

        leaves = collect_values(source_tree)
        batch = self.build_batch(leaves)
        logger.info(
            f"Collected {len(leaves)} values ({len(batch)} to translate), "
            f"translating to {len(languages)} languages"
        )

        results: Dict[str, JsonValue] = {}
        for completed, language in enumerate(languages):
            language_name = lc.describe_language(language)
            logger.info(f"Translating to {language_name}...")

            if progress_callback:
                progress_callback(TranslationProgress(
                    current_language=language,
                    current_language_name=language_name,
                    total_languages=len(languages),
                    completed_languages=completed,
                    total_items=len(leaves),
                    batch_size=len(batch),
                    phase="translating",
                ))

            results[language] = self.translate_language(source_tree, batch, source_language, language)

            if on_language_done:
                on_language_done(language, results[language])

            if progress_callback:
                progress_callback(TranslationProgress(
                    current_language=language,
                    current_language_name=language_name,
                    total_languages=len(languages),
                    completed_languages=completed + 1,
                    total_items=len(leaves),
                    batch_size=len(batch),
                    phase="completed",
                ))

        logger.info(f"Translated {len(results)} languages in {time.time() - start_time:.1f}s")
        return results
