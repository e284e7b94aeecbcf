"""
Node assembler

Turns ContentGroups into OutputBlocks, and into OutputWrappers around them
for "=" markers. All class names and attributes are computed here from the
group's interpretation and the transform options.

Class names of a marker-styled paragraph (constant class name option):

    [base] + [prefix-<classification>, ...] + [prefix-align-<alignment>]

With a computed class name option the callable's list is used as-is.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config import appsettings
from ..models.marker import Interpretation, MarkerKind
from ..models.nodes import ContentGroup, InlineItem, OutputBlock, OutputNode, OutputWrapper
from ..models.options import Computable, Constant, FlexigraphOptions

# Keys through which a caller might try to set class names as properties
CLASS_NAME_KEYS = frozenset({"class", "className", "class_name"})


def properties_filter(properties: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Drop unset and forbidden entries from computed properties

    Empty strings, empty sequences and None count as unset. Class names can
    only be controlled through the class name options, so class keys are
    removed as well.

    Example:
        >>> properties_filter({"title": ["alert"], "dummy": "", "empty": [],
        ...                    "className": "x"})
        {'title': ['alert']}
    """
    filtered: Dict[str, Any] = {}
    for key, value in (properties or {}).items():
        if key in CLASS_NAME_KEYS or value is None:
            continue
        if isinstance(value, str) and value == "":
            continue
        if isinstance(value, (list, tuple, set, frozenset)) and len(value) == 0:
            continue
        filtered[key] = value
    return filtered


def classNames_clean(class_names: Any) -> Tuple[str, ...]:
    """Normalize a computed class name value to a tuple without blanks"""
    if class_names is None:
        return ()
    if isinstance(class_names, str):
        class_names = class_names.split()
    return tuple(str(name) for name in class_names if name)


class Assembler:
    """
    Builds output nodes for one transform instance

    Stateless apart from the (immutable) options it was created with, so a
    single instance serves every paragraph of every document.
    """

    def __init__(self, options: FlexigraphOptions) -> None:
        self.options = options

    def className_make(self, token: str) -> str:
        """Apply the classification prefix to a token"""
        return appsettings.className_make(self.options.paragraph_classification_prefix, token)

    def group_assemble(self, group: ContentGroup) -> OutputNode:
        """
        Build the output node of one group

        Args:
            group: Partitioned group

        Returns:
            Unstyled OutputBlock for the leading remainder, a styled
            OutputBlock for "~" markers, an OutputWrapper for "=" markers
        """
        interpretation = group.interpretation
        if interpretation is None:
            return OutputBlock(class_names=(), attributes={}, children=tuple(group.items))

        block = self.block_assemble(group.items, interpretation)
        if interpretation.kind is MarkerKind.WRAPPER:
            return self.wrapper_assemble(block, interpretation)
        return block

    def groups_assemble(self, groups: Sequence[ContentGroup]) -> List[OutputNode]:
        """Build output nodes for all groups, preserving their order"""
        return [self.group_assemble(group) for group in groups]

    def paragraphClassNames_compute(self, interpretation: Interpretation) -> Tuple[str, ...]:
        """
        Compute the class names of a marker-styled paragraph

        Example:
            For "~:w2:>" with default options:
            ("flexible-paragraph", "flexiparaph-warning",
             "flexiparaph-type-2", "flexiparaph-align-justify")
        """
        option = self.options.paragraph_class_name
        alignment = interpretation.alignment_name
        classifications = list(interpretation.classifications)

        if not isinstance(option, Constant):
            return classNames_clean(option.compute(alignment, classifications))

        class_names: List[str] = []
        if option.value:
            class_names.append(str(option.value))
        for classification in classifications:
            class_names.append(self.className_make(classification))
        if alignment:
            class_names.append(self.className_make(f"align-{alignment}"))
        return tuple(class_names)

    def properties_compute(
        self, option: Optional[Computable], interpretation: Interpretation
    ) -> Dict[str, Any]:
        """Evaluate a properties option and filter its result"""
        if option is None:
            return {}
        return properties_filter(
            option.compute(interpretation.alignment_name, list(interpretation.classifications))
        )

    def block_assemble(
        self, items: Sequence[InlineItem], interpretation: Interpretation
    ) -> OutputBlock:
        """
        Build a marker-styled paragraph

        The style attribute belongs to the transform: it is set to
        "text-align:<alignment>" when there is an alignment and is never
        taken from custom properties.
        """
        attributes = self.properties_compute(self.options.paragraph_properties, interpretation)
        attributes.pop("style", None)
        if interpretation.alignment is not None:
            attributes["style"] = f"text-align:{interpretation.alignment_name}"

        return OutputBlock(
            class_names=self.paragraphClassNames_compute(interpretation),
            attributes=attributes,
            children=tuple(items),
        )

    def wrapper_assemble(self, block: OutputBlock, interpretation: Interpretation) -> OutputWrapper:
        """Wrap a paragraph for a "=" marker"""
        alignment = interpretation.alignment_name
        classifications = list(interpretation.classifications)

        tag_name = str(self.options.wrapper_tag_name.compute(alignment, classifications))

        option = self.options.wrapper_class_name
        if isinstance(option, Constant):
            class_names = classNames_clean([option.value])
        else:
            class_names = classNames_clean(option.compute(alignment, classifications))

        return OutputWrapper(
            tag_name=tag_name,
            class_names=class_names,
            attributes=self.properties_compute(self.options.wrapper_properties, interpretation),
            child=block,
        )
