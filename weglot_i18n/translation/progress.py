"""
Translation Progress Data Class

Contains the TranslationProgress dataclass reported once per language phase.
"""

from dataclasses import dataclass


@dataclass
class TranslationProgress:
    """Progress information for an ongoing run."""
    current_language: str
    current_language_name: str
    total_languages: int
    completed_languages: int
    total_items: int                 # Leaves in the source tree
    batch_size: int = 0              # Unique strings sent to the provider
    phase: str = "translating"       # "translating", "completed"
