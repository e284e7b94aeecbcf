"""
Inline content and output node models

The core never sees the host document tree. A paragraph is handed over as
an ordered list of inline items (text fragments and opaque inline nodes),
and the result comes back as output blocks and wrappers that the host
turns into its own elements.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, Union

from .marker import Interpretation


@dataclass(frozen=True)
class TextFragment:
    """Plain text inline item, the only kind scanned for markers"""
    value: str


@dataclass(frozen=True)
class InlineNode:
    """
    Opaque inline item (emphasis, link, image, code span, ...)

    Attributes:
        node: Host object, moved as-is into the output block
    """
    node: Any


InlineItem = Union[TextFragment, InlineNode]


@dataclass
class ContentGroup:
    """
    Slice of a paragraph's inline items delimited by markers

    Built by partitioner.groups_partition(). Only the leading remainder
    before the first marker has no interpretation.

    Attributes:
        interpretation: Interpretation of the marker that opened the group
        items: Inline items owned by the group, in source order
    """
    interpretation: Optional[Interpretation] = None
    items: List[InlineItem] = field(default_factory=list)


@dataclass(frozen=True)
class OutputBlock:
    """
    Paragraph to emit in place of (part of) the original one

    Attributes:
        class_names: Ordered class names (may be empty for unstyled blocks)
        attributes: Extra attributes (style, custom properties)
        children: Inline items of the paragraph
    """
    class_names: Tuple[str, ...]
    attributes: Mapping[str, Any]
    children: Tuple[InlineItem, ...]


@dataclass(frozen=True)
class OutputWrapper:
    """
    Container around exactly one OutputBlock, emitted for "=" markers

    Attributes:
        tag_name: Element name of the wrapper (e.g. "div", "section")
        class_names: Ordered class names of the wrapper
        attributes: Extra wrapper attributes
        child: The wrapped paragraph
    """
    tag_name: str
    class_names: Tuple[str, ...]
    attributes: Mapping[str, Any]
    child: OutputBlock


OutputNode = Union[OutputBlock, OutputWrapper]
