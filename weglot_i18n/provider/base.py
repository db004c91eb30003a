"""
Translation provider interface.

The orchestrator only needs a batch translate call; anything that returns
a BatchTranslation in request order can stand in for Weglot (tests use
in-memory fakes).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# Weglot word type for plain text
WORD_TYPE_TEXT = 1


@dataclass
class BatchTranslation:
    """Result of one provider call, positionally aligned with the request."""
    requested: List[str]
    translated: List[str]


@dataclass
class ProjectSettings:
    """Languages configured for a Weglot project."""
    source_language: str
    target_languages: List[str] = field(default_factory=list)


def build_words(texts: List[str]) -> List[Dict[str, Any]]:
    """Build the provider word list: one {w, t} entry per text, in order."""
    return [{"w": text, "t": WORD_TYPE_TEXT} for text in texts]


class TranslationProvider:
    """Base class for batch translation providers."""

    def translate(
        self,
        source_language: str,
        target_language: str,
        request_url: str,
        words: List[Dict[str, Any]],
    ) -> BatchTranslation:
        """
        Translate a batch of words.

        Results must come back in the same order and count as `words`.
        Must be implemented by subclasses.
        """
        raise NotImplementedError
