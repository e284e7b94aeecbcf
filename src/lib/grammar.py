"""
Marker grammar for flexible paragraphs

A marker is a single token found anywhere in paragraph text:

    (~|=)(:)?(classes)?(:)?>

- "~" starts a plain flexible paragraph, "=" one inside a wrapper
- the optional colons set left / right / justify alignment
- classes are lowercase ASCII letters and digits with at most one "|"
  (which requests center alignment and is never a classification)
- ">" ends the marker; whitespace right after it, newlines included,
  belongs to the marker and is dropped from the content

Anything else is ordinary text: "~A>", "~ç>", "~:::>", "~::|>", "~dg::>"
never match.

Example:
    >>> match = marker_search("intro ~:w2> hello")
    >>> match.marker, match.left, match.classes, match.right
    ('~', True, 'w2', False)
"""

import re
from typing import List, Optional

from ..models.marker import MarkerMatch

# Both halves of the class run are atomic (lookahead + backreference); a run is
# always followed by ':' or '>', so backtracking into it never yields a match.
MARKER_PATTERN = (
    r'(?P<marker>[~=])'
    r'(?P<left>:)?'
    r'(?P<classes>'
    r'(?=(?P<head>[a-z0-9]*))(?P=head)'
    r'\|?'
    r'(?=(?P<tail>[a-z0-9]*))(?P=tail)'
    r')?'
    r'(?P<right>:)?'
    r'>\s*'
)

REGEX = re.compile(MARKER_PATTERN)

SEPARATOR = '|'


def match_convert(match: 're.Match[str]') -> MarkerMatch:
    """
    Convert a regex match of REGEX into a MarkerMatch

    An absent class run is normalized to the empty string.
    """
    return MarkerMatch(
        marker=match.group('marker'),
        left=match.group('left') is not None,
        classes=match.group('classes') or '',
        right=match.group('right') is not None,
        start=match.start(),
        end=match.end(),
    )


def marker_search(text: str) -> Optional[MarkerMatch]:
    """
    Find the leftmost marker in text

    Args:
        text: Text fragment to scan

    Returns:
        MarkerMatch for the first marker, or None if the text has none
    """
    match = REGEX.search(text)
    if not match:
        return None
    return match_convert(match)


def markers_find(text: str) -> List[MarkerMatch]:
    """
    Find all non-overlapping markers in text, left to right

    Args:
        text: Text fragment to scan

    Returns:
        List of MarkerMatch in source order (empty if none)

    Example:
        >>> [m.start for m in markers_find("~w:> hello\\n~:s> xxx")]
        [0, 11]
    """
    return [match_convert(match) for match in REGEX.finditer(text)]


def marker_has(text: str) -> bool:
    """Check whether text contains at least one marker"""
    return REGEX.search(text) is not None
