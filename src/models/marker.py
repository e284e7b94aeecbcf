"""
Marker-specific data models

Type-safe structures for the values produced while recognizing and
interpreting flexible paragraph markers (e.g. "~:w2:>" or "=|>").
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple


class MarkerKind(Enum):
    """
    Output kind selected by the marker character

    "~" produces a plain flexible paragraph, "=" produces a flexible
    paragraph inside a wrapper element.
    """
    PARAGRAPH = "paragraph"
    WRAPPER = "wrapper"


class Alignment(Enum):
    """Text alignment resolved from the colon modifiers and separator"""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class MarkerMatch:
    """
    One marker occurrence found in a text fragment

    Returned by grammar.markers_find() for each non-overlapping match of
    the marker pattern in a string.

    Attributes:
        marker: The marker character, "~" or "="
        left: Whether the left colon modifier is present
        classes: Classification run between the modifiers, possibly
                 containing one "|" separator (empty string when absent)
        right: Whether the right colon modifier is present
        start: Offset of the marker character in the text
        end: Offset just past the match, trailing whitespace included

    Example:
        For text "abc ~:w|> hello":
        MarkerMatch(marker="~", left=True, classes="w|", right=False,
                    start=4, end=10)
    """
    marker: str
    left: bool
    classes: str
    right: bool
    start: int
    end: int


@dataclass(frozen=True)
class Interpretation:
    """
    Semantic outcome of a marker

    Attributes:
        kind: Whether the paragraph is emitted plain or wrapped
        alignment: Resolved alignment, None when no alignment applies
        classifications: Classification names in marker character order
                         (duplicates kept, unmapped characters dropped)
    """
    kind: MarkerKind
    alignment: Optional[Alignment]
    classifications: Tuple[str, ...]

    @property
    def alignment_name(self) -> Optional[str]:
        """Alignment as the plain string handed to option callables"""
        return self.alignment.value if self.alignment else None
