"""
Placeholder Codec

Interpolation placeholders such as {{name}} are swapped for positional
markers ({{1}}, {{2}}, ...) before a string goes to the provider, and put
back into the translated string afterwards.
"""

import re
from typing import List, Tuple

# Non-greedy, so "{{a}} and {{b}}" yields two placeholders
PLACEHOLDER_PATTERN = re.compile(r"\{\{(.*?)\}\}")

# Positional markers as written by encode_placeholders()
MARKER_PATTERN = re.compile(r"\{\{([1-9][0-9]*)\}\}")


def positional_marker(index: int) -> str:
    """Marker for the 1-based placeholder position."""
    return f"{{{{{index}}}}}"


def extract_placeholders(text: str) -> List[str]:
    """Placeholders in text, in order of appearance (repeats included)."""
    return [match.group(0) for match in PLACEHOLDER_PATTERN.finditer(text)]


def encode_placeholders(text: str) -> Tuple[str, List[str]]:
    """
    Replace each placeholder with its positional marker.

    Args:
        text: Source string, e.g. "Hi {{name}}, you have {{count}} messages"

    Returns:
        Tuple of (encoded_text, tokens), e.g.
        ("Hi {{1}}, you have {{2}} messages", ["{{name}}", "{{count}}"]).
        Text without placeholders comes back unchanged with no tokens.
    """
    tokens: List[str] = []

    def _to_marker(match: re.Match) -> str:
        tokens.append(match.group(0))
        return positional_marker(len(tokens))

    encoded = PLACEHOLDER_PATTERN.sub(_to_marker, text)
    if not tokens:
        return text, []
    return encoded, tokens


def decode_placeholders(translated: str, tokens: List[str]) -> str:
    """
    Put the original placeholders back into a translated string.

    For token i (1-based) the first {{i}} marker is replaced, in a single
    pass so restored text is never rescanned. Markers the provider dropped
    are skipped; repeats and markers without a token are left as-is.
    """
    if not tokens:
        return translated

    restored = set()

    def _to_token(match: re.Match) -> str:
        index = int(match.group(1))
        if index > len(tokens) or index in restored:
            return match.group(0)
        restored.add(index)
        return tokens[index - 1]

    return MARKER_PATTERN.sub(_to_token, translated)


def restore_from_original(original: str, translated: str) -> str:
    """Decode using the placeholder positions of the original string."""
    return decode_placeholders(translated, extract_placeholders(original))
