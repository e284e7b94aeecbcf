"""
Marker interpreter

Resolves what a recognized marker means: plain or wrapped output, the
alignment, and the ordered classification names.

Alignment rules, highest precedence first:
    1. class run exactly "|" with a colon  -> colons decide (":|" is left)
    2. "|" anywhere in the class run       -> center
    3. both colons                         -> justify
    4. left colon only / right colon only  -> left / right
    5. nothing                             -> no alignment
"""

from typing import List, Mapping, Optional

from ..models.marker import Alignment, Interpretation, MarkerKind, MarkerMatch
from .dictionary import classification_lookup
from .grammar import SEPARATOR

MARKER_KINDS: Mapping[str, MarkerKind] = {
    '~': MarkerKind.PARAGRAPH,
    '=': MarkerKind.WRAPPER,
}


def alignment_resolve(left: bool, right: bool, classes: str) -> Optional[Alignment]:
    """
    Resolve alignment from colon modifiers and the class run

    Args:
        left: Left colon present
        right: Right colon present
        classes: Class run (may contain the separator)

    Returns:
        The resolved Alignment, or None

    Example:
        >>> alignment_resolve(True, False, "w|")
        <Alignment.CENTER: 'center'>
        >>> alignment_resolve(True, False, "|")
        <Alignment.LEFT: 'left'>
    """
    alignment: Optional[Alignment] = None
    if left and right:
        alignment = Alignment.JUSTIFY
    elif left:
        alignment = Alignment.LEFT
    elif right:
        alignment = Alignment.RIGHT

    if SEPARATOR in classes:
        # A lone separator next to a colon is an alignment-only marker
        if classes == SEPARATOR and alignment is not None:
            return alignment
        return Alignment.CENTER

    return alignment


def classifications_resolve(classes: str, dictionary: Mapping[str, str]) -> List[str]:
    """
    Map class run characters to classification names, left to right

    The separator and unmapped characters are skipped; duplicates are kept.
    """
    classifications: List[str] = []
    for char in classes:
        if char == SEPARATOR:
            continue
        name = classification_lookup(dictionary, char)
        if name:
            classifications.append(name)
    return classifications


def match_interpret(match: MarkerMatch, dictionary: Mapping[str, str]) -> Interpretation:
    """
    Interpret one marker

    Total over every match the grammar produces.

    Args:
        match: Recognized marker
        dictionary: Effective classification dictionary

    Returns:
        Interpretation with kind, alignment and classifications

    Example:
        For "~w2|g>" with the default dictionary:
        Interpretation(kind=PARAGRAPH, alignment=CENTER,
                       classifications=("warning", "type-2", "green"))
    """
    return Interpretation(
        kind=MARKER_KINDS[match.marker],
        alignment=alignment_resolve(match.left, match.right, match.classes),
        classifications=tuple(classifications_resolve(match.classes, dictionary)),
    )
