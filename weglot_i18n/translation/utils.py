"""
Translation utility functions for flattening and rebuilding locale trees.

Both walks visit object values in key insertion order and array elements
in index order, so the n-th leaf collected by collect_values() is the n-th
leaf replaced by replace_values(). Shape is never recorded: the rebuild
walks the source tree again.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from weglot_i18n.translation.placeholders import restore_from_original

JsonScalar = Union[str, int, float, bool, None]
JsonValue = Union[JsonScalar, List[Any], Dict[str, Any]]


@dataclass(frozen=True)
class TranslationRecord:
    """One source leaf and what became of it for a single target language."""
    original: JsonScalar
    requested: str
    translated: Optional[str]


ValueKey = Tuple[type, JsonScalar]
ValueMap = Dict[ValueKey, TranslationRecord]


def value_key(value: JsonScalar) -> ValueKey:
    """Map key for a leaf; 1, 1.0 and True are equal in a dict, so the type is part of it."""
    return (type(value), value)


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def collect_values(obj: JsonValue, values: List[JsonScalar] = None) -> List[JsonScalar]:
    """
    Collect every leaf of a JSON tree, in traversal order.

    Args:
        obj: Parsed JSON document
        values: Accumulator list (created if None)

    Returns:
        List of leaf values, duplicates and non-strings included

    Example:
        >>> collect_values({"home": {"title": "Hello"}, "tags": ["a", 1]})
        ['Hello', 'a', 1]
    """
    if values is None:
        values = []

    if isinstance(obj, dict):
        children = obj.values()
    elif isinstance(obj, list):
        children = obj
    else:
        # A bare scalar document has no keyed leaves
        return values

    for value in children:
        if is_container(value):
            collect_values(value, values)
        else:
            values.append(value)

    return values


def lookup_translation(value: JsonScalar, value_map: ValueMap) -> JsonScalar:
    """
    Translated form of a leaf, or the leaf itself when there is none.

    Placeholders are restored from the original string into the translated one.
    """
    record = value_map.get(value_key(value))
    if record is None or record.translated is None:
        return value
    return restore_from_original(str(record.original), record.translated)


def replace_values(obj: JsonValue, value_map: ValueMap) -> JsonValue:
    """
    Build a new tree with the same shape as obj and each leaf translated.

    Keys, key order, array lengths and nesting are copied as-is. Leaves
    missing from value_map are passed through unchanged.
    """
    if isinstance(obj, dict):
        return {key: replace_values(value, value_map) for key, value in obj.items()}
    if isinstance(obj, list):
        return [replace_values(item, value_map) for item in obj]
    return lookup_translation(obj, value_map)
