"""
Models package for flexigraph

Contains data structures and type definitions for marker recognition,
paragraph splitting, and the compilation pipeline.
"""

from .state import ProgramState, pipeline
from .marker import Alignment, Interpretation, MarkerKind, MarkerMatch
from .nodes import (
    ContentGroup,
    InlineItem,
    InlineNode,
    OutputBlock,
    OutputNode,
    OutputWrapper,
    TextFragment,
)
from .options import Computable, Computed, Constant, FlexigraphOptions, computable_coerce

__all__ = [
    "ProgramState",
    "pipeline",
    "Alignment",
    "Interpretation",
    "MarkerKind",
    "MarkerMatch",
    "ContentGroup",
    "InlineItem",
    "InlineNode",
    "OutputBlock",
    "OutputNode",
    "OutputWrapper",
    "TextFragment",
    "Computable",
    "Computed",
    "Constant",
    "FlexigraphOptions",
    "computable_coerce",
]
