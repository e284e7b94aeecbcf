"""
Classification dictionary

Maps each character allowed in a marker's class run ([a-z0-9]) to the
classification name it stands for. The built-in table is read-only;
caller overrides are merged into a new mapping, never into the default.
"""

import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Characters that may appear in a class run (besides the "|" separator)
DICTIONARY_KEY = re.compile(r'^[a-z0-9]$')

DEFAULT_DICTIONARY: Mapping[str, str] = MappingProxyType({
    'a': 'alert',
    'b': 'blue',
    'c': 'caution',
    'd': 'danger',
    'e': 'error',
    'f': 'framed',
    'g': 'green',
    'h': 'horizontal',
    'i': 'info',
    'j': 'jumbo',
    'k': 'kindle',
    'l': 'lokum',
    'm': 'menu',
    'n': 'note',
    'o': 'ordinary',
    'p': 'pack',
    'q': 'quantity',
    'r': 'red',
    's': 'success',
    't': 'tip',
    'u': 'unified',
    'v': 'verticle',
    'w': 'warning',
    'x': 'xray',
    'y': 'yellow',
    'z': 'zigzag',
    '0': 'type-0',
    '1': 'type-1',
    '2': 'type-2',
    '3': 'type-3',
    '4': 'type-4',
    '5': 'type-5',
    '6': 'type-6',
    '7': 'type-7',
    '8': 'type-8',
    '9': 'type-9',
})


def dictionary_validate(overrides: Mapping[str, Optional[str]]) -> None:
    """
    Check caller-supplied dictionary entries

    Args:
        overrides: Candidate entries

    Raises:
        ValueError: If a key is not a single [a-z0-9] character, or a value
                    is neither a string nor None
    """
    for key, value in overrides.items():
        if not isinstance(key, str) or not DICTIONARY_KEY.match(key):
            raise ValueError(
                f"Invalid dictionary key {key!r}: expected one of [a-z0-9]"
            )
        if value is not None and not isinstance(value, str):
            raise ValueError(
                f"Invalid classification for {key!r}: expected a string, got {type(value).__name__}"
            )


def dictionary_merge(overrides: Optional[Mapping[str, Optional[str]]] = None) -> Mapping[str, str]:
    """
    Build the effective dictionary for one transform instance

    Overrides replace defaults key by key. An empty or missing override
    mapping leaves the defaults untouched. A key overridden with "" or None
    becomes unmapped: its character is accepted in markers but contributes
    no classification.

    Args:
        overrides: Caller entries, may be None or empty

    Returns:
        Read-only mapping (the shared default when there is nothing to merge)

    Raises:
        ValueError: See dictionary_validate()

    Example:
        >>> merged = dictionary_merge({'s': 'solid'})
        >>> merged['s'], merged['w']
        ('solid', 'warning')
    """
    if not overrides:
        return DEFAULT_DICTIONARY

    dictionary_validate(overrides)

    merged: Dict[str, str] = dict(DEFAULT_DICTIONARY)
    for key, value in overrides.items():
        if value:
            merged[key] = value
        else:
            merged.pop(key, None)
    return MappingProxyType(merged)


def classification_lookup(dictionary: Mapping[str, str], char: str) -> Optional[str]:
    """Return the classification for char, or None when it is unmapped"""
    if char not in dictionary:
        return None
    return dictionary[char] or None
