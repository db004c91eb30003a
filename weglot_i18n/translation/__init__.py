"""
Translation module - Core translation functionality

This module provides:
- TranslationBatchOrchestrator: per-language translation workflow
- TranslationProgress: Progress tracking dataclass
- Placeholder encoding and restoration
- Flatten/rebuild utilities for nested locale trees
"""

from weglot_i18n.translation.progress import TranslationProgress
from weglot_i18n.translation.manager import TranslationBatchOrchestrator
from weglot_i18n.translation.placeholders import (
    encode_placeholders,
    decode_placeholders,
    extract_placeholders,
    restore_from_original,
)
from weglot_i18n.translation.utils import (
    TranslationRecord,
    collect_values,
    replace_values,
)
