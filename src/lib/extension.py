"""
Python-Markdown extension for flexible paragraphs.

Usage:

    import markdown
    from flexigraph.lib.extension import FlexigraphExtension

    html = markdown.markdown(
        "~> Standard flexible paragraph\\n=:a:> Alert paragraph in a wrapper",
        extensions=[FlexigraphExtension(wrapper_tag_name="section")],
    )

or by name: markdown.markdown(text, extensions=["flexigraph.lib.extension"]).

The treeprocessor runs after inline parsing, so a paragraph is an element
whose `text`, inline children and their `tail`s map directly onto the
core's inline items:

    <p>abc <em>it</em> ~w|> hello</p>
    -> [Text("abc "), Node(<em>), Text(" ~w|> hello")]

Tight list items and definitions (<li>, <dd> without a <p>) are treated the
same way; their rewritten paragraphs stay inside the container:

    <li>~w> item</li>  ->  <li><p class="...">item</p></li>
"""

from typing import Any, Callable, List, Optional
from xml.etree import ElementTree as ET

from markdown import Markdown, util
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from ..config import appsettings
from ..models.nodes import InlineItem, InlineNode, OutputBlock, OutputNode, OutputWrapper, TextFragment
from .log import LOG
from .options import options_resolve
from .rewriter import BlockRewriter

# After "inline" (20), before "prettify" (10)
TREEPROCESSOR_PRIORITY = 15

# Tight list items and definitions hold their inline content directly
CONTAINER_TAGS = frozenset({"li", "dd"})


def inlineItems_extract(element: Any) -> Optional[List[InlineItem]]:
    """
    Read the inline items of a <p> element

    Args:
        element: Any child of the tree

    Returns:
        Inline items for paragraphs, None for every other element
    """
    if not isinstance(element.tag, str) or element.tag != "p":
        return None

    items: List[InlineItem] = []
    if element.text:
        items.append(TextFragment(element.text))
    for child in element:
        items.append(InlineNode(child))
        if child.tail:
            items.append(TextFragment(child.tail))
    return items


def containerItems_extract(element: Any, block_check: Callable[[Any], bool]) -> Optional[List[InlineItem]]:
    """
    Read the leading inline content of a tight <li> or <dd>

    Python-Markdown only wraps the content of loose items in <p>. In a tight
    item the text and inline children sit directly in the container, up to
    the first block-level child (a nested list, for instance).

    Args:
        element: Any element of the tree
        block_check: Tells whether a tag is block-level

    Returns:
        Inline items before the first block-level child, None for other
        elements or when there is no leading inline content
    """
    if not isinstance(element.tag, str) or element.tag not in CONTAINER_TAGS:
        return None

    items: List[InlineItem] = []
    if element.text:
        items.append(TextFragment(element.text))
    for child in element:
        if block_check(child.tag):
            break
        items.append(InlineNode(child))
        if child.tail:
            items.append(TextFragment(child.tail))
    return items or None


def attributes_apply(element: ET.Element, class_names, attributes) -> None:
    """
    Set class and generic attributes on an element

    Lists are joined with spaces, True becomes a boolean attribute (value
    equal to its name, which the serializer writes bare), None and False
    are skipped.
    """
    if class_names:
        element.set("class", " ".join(class_names))
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            element.set(key, key)
        elif isinstance(value, (list, tuple, set, frozenset)):
            element.set(key, " ".join(str(v) for v in value))
        else:
            element.set(key, str(value))


def paragraph_build(block: OutputBlock) -> ET.Element:
    """Build a <p> element from an output block, re-attaching text as text/tail"""
    paragraph = ET.Element("p")
    attributes_apply(paragraph, block.class_names, block.attributes)

    last: Optional[ET.Element] = None
    for item in block.children:
        if isinstance(item, TextFragment):
            if last is None:
                paragraph.text = (paragraph.text or "") + item.value
            else:
                last.tail = (last.tail or "") + item.value
        else:
            last = item.node
            last.tail = None
            paragraph.append(last)
    return paragraph


def element_build(output: OutputNode) -> ET.Element:
    """Build the host element of an output node"""
    if isinstance(output, OutputWrapper):
        wrapper = ET.Element(output.tag_name)
        attributes_apply(wrapper, output.class_names, output.attributes)
        wrapper.append(paragraph_build(output.child))
        return wrapper
    return paragraph_build(output)


class FlexigraphTreeprocessor(Treeprocessor):
    """
    Splits and styles paragraphs containing flexible paragraph markers

    Attributes:
        rewriter: Core rewriter bound to this instance's options
        rewritten: Paragraphs rewritten during the last run
    """

    def __init__(self, md: Optional[Markdown] = None, rewriter: Optional[BlockRewriter] = None):
        super().__init__(md)
        self.rewriter = rewriter or BlockRewriter(options_resolve())
        self.rewritten = 0

    def blockLevel_check(self, tag: Any) -> bool:
        if self.md is not None:
            return self.md.is_block_level(tag)
        return isinstance(tag, str) and tag.lower() in util.BLOCK_LEVEL_ELEMENTS

    def container_rewrite(self, element: ET.Element) -> bool:
        """
        Rewrite the leading inline content of a tight <li> or <dd>

        The resulting paragraphs and wrappers become the first children of
        the container; block-level children (nested lists) follow unchanged.

        Returns:
            True if the container was rewritten
        """
        items = containerItems_extract(element, self.blockLevel_check)
        if not items or not self.rewriter.target_check(items):
            return False

        inline_count = sum(1 for item in items if isinstance(item, InlineNode))
        remaining = list(element)[inline_count:]
        nodes = [element_build(output) for output in self.rewriter.block_rewrite(items)]

        element.text = None
        element[:] = nodes + remaining
        LOG(f"Rewrote tight <{element.tag}> into {len(nodes)} node(s)", level=3)
        return True

    def run(self, root: ET.Element) -> None:
        self.rewritten = 0

        # Snapshot: inserted elements are not visited again
        for parent in list(root.iter()):
            children = list(parent)
            count = self.rewriter.children_rewrite(children, inlineItems_extract, element_build)
            if count:
                parent[:] = children
                self.rewritten += count
            if self.container_rewrite(parent):
                self.rewritten += 1

        LOG(f"Flexible paragraphs rewritten: {self.rewritten}", level=2)


class FlexigraphExtension(Extension):
    """
    Registers FlexigraphTreeprocessor with a Markdown instance

    Every option of options_resolve() is available as an extension config
    key. Literal defaults come from the application settings.
    """

    def __init__(self, **kwargs):
        # Python-Markdown coerces options whose default is None to bool,
        # so "unset" is spelled "" for the function-valued options
        self.config = {
            "dictionary": [{}, "Entries merged over the default classification dictionary"],
            "paragraph_class_name": [
                appsettings.paragraph_class_name,
                "Base paragraph class, or function (alignment, classifications) -> list",
            ],
            "paragraph_classification_prefix": [
                appsettings.paragraph_classification_prefix,
                "Prefix of classification and alignment classes ('' for bare names)",
            ],
            "paragraph_properties": ["", "Function (alignment, classifications) -> dict"],
            "wrapper_tag_name": [
                appsettings.wrapper_tag_name,
                "Wrapper tag, or function (alignment, classifications) -> str",
            ],
            "wrapper_class_name": [
                appsettings.wrapper_class_name,
                "Base wrapper class, or function (alignment, classifications) -> list",
            ],
            "wrapper_properties": ["", "Function (alignment, classifications) -> dict"],
        }
        super().__init__(**kwargs)
        self.processor: Optional[FlexigraphTreeprocessor] = None

    def options_build(self):
        """Resolve the configured values into FlexigraphOptions"""
        configs = self.getConfigs()
        return options_resolve(
            dictionary=configs["dictionary"] or None,
            paragraph_class_name=configs["paragraph_class_name"],
            paragraph_classification_prefix=configs["paragraph_classification_prefix"],
            paragraph_properties=configs["paragraph_properties"] or None,
            wrapper_tag_name=configs["wrapper_tag_name"],
            wrapper_class_name=configs["wrapper_class_name"],
            wrapper_properties=configs["wrapper_properties"] or None,
        )

    def extendMarkdown(self, md: Markdown) -> None:
        self.processor = FlexigraphTreeprocessor(md, BlockRewriter(self.options_build()))
        md.treeprocessors.register(self.processor, "flexigraph", TREEPROCESSOR_PRIORITY)


def makeExtension(**kwargs):
    return FlexigraphExtension(**kwargs)
