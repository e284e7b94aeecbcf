"""
Option models for the flexible paragraph transform

Several options are either a literal value or a function of the resolved
alignment and classifications (tag name, class names, properties). Both
shapes are modelled as a Computable with a single compute() method so the
assembler never has to inspect what the caller passed in.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")

# (alignment, classifications) -> value
OptionFunction = Callable[[Optional[str], List[str]], Any]


class Computable(Generic[T]):
    """Option value computed from a marker's alignment and classifications"""

    def compute(self, alignment: Optional[str], classifications: List[str]) -> T:
        raise NotImplementedError


@dataclass(frozen=True)
class Constant(Computable[T]):
    """Option that ignores the marker and always yields the same value"""
    value: T

    def compute(self, alignment: Optional[str], classifications: List[str]) -> T:
        return self.value


@dataclass(frozen=True)
class Computed(Computable[T]):
    """
    Option delegated to a caller-supplied function

    The function receives the alignment name (or None) and a fresh copy of
    the classification list, so it may mutate its argument freely.
    """
    function: OptionFunction

    def compute(self, alignment: Optional[str], classifications: List[str]) -> T:
        return self.function(alignment, list(classifications))


def computable_coerce(value: Any) -> Computable:
    """
    Wrap a plain option value into the matching Computable variant

    Args:
        value: A Computable (returned as-is), a callable, or a literal

    Returns:
        Computed for callables, Constant for everything else
    """
    if isinstance(value, Computable):
        return value
    if callable(value):
        return Computed(value)
    return Constant(value)


@dataclass(frozen=True)
class FlexigraphOptions:
    """
    Effective, immutable configuration of one transform instance

    Built once by lib.options.options_resolve() and shared read-only by the
    rewriter and assembler for every paragraph they process.

    Attributes:
        dictionary: Character to classification name mapping (read-only)
        paragraph_class_name: Constant base class, or Computed class list
        paragraph_classification_prefix: Prefix joined with "-" to each
                                         classification/alignment token;
                                         "" means bare tokens
        wrapper_tag_name: Constant or Computed wrapper element name
        wrapper_class_name: Constant base class, or Computed class list
        paragraph_properties: Optional Computed extra paragraph attributes
        wrapper_properties: Optional Computed extra wrapper attributes
    """
    dictionary: Mapping[str, str]
    paragraph_class_name: Computable
    paragraph_classification_prefix: str
    wrapper_tag_name: Computable
    wrapper_class_name: Computable
    paragraph_properties: Optional[Computable] = None
    wrapper_properties: Optional[Computable] = None

