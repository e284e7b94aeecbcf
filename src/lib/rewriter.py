"""
Block rewriter

Ties the pieces together for one parent's list of children: every
paragraph-like child whose text contains a marker is partitioned,
assembled, and replaced in place by the resulting nodes. Children without
markers, and children that are not paragraphs at all, are left untouched.

The rewriter knows nothing about the host tree. The caller provides two
functions: one extracting inline items from a child (None for children
that are not paragraphs), and one building a host node from an output node.
"""

from typing import Any, Callable, List, Optional, Sequence

from ..models.nodes import InlineItem, OutputNode, TextFragment
from ..models.options import FlexigraphOptions
from .assembler import Assembler
from .grammar import marker_has
from .log import LOG
from .partitioner import groups_partition

ItemsGetter = Callable[[Any], Optional[List[InlineItem]]]
NodeBuilder = Callable[[OutputNode], Any]


class BlockRewriter:
    """
    Rewrites paragraphs that contain flexible paragraph markers

    Example:
        >>> rewriter = BlockRewriter(options_resolve())
        >>> outputs = rewriter.block_rewrite([TextFragment("~:s> done")])
        >>> outputs[0].class_names
        ('flexible-paragraph', 'flexiparaph-success', 'flexiparaph-align-left')
    """

    def __init__(self, options: FlexigraphOptions) -> None:
        self.options = options
        self.assembler = Assembler(options)

    def target_check(self, items: Sequence[InlineItem]) -> bool:
        """Check whether any text item of a paragraph holds a marker"""
        return any(
            isinstance(item, TextFragment) and marker_has(item.value)
            for item in items
        )

    def block_rewrite(self, items: Sequence[InlineItem]) -> List[OutputNode]:
        """
        Split and style one paragraph

        Args:
            items: Inline items of a paragraph known to contain a marker

        Returns:
            One or more output nodes, in source order
        """
        groups = groups_partition(items, self.options.dictionary)
        return self.assembler.groups_assemble(groups)

    def children_rewrite(
        self,
        children: List[Any],
        items_get: ItemsGetter,
        node_build: NodeBuilder,
    ) -> int:
        """
        Rewrite matching paragraphs of a child list in place

        Each matching child is replaced at its own position by the nodes
        built from its output; unrelated siblings keep their order and the
        inserted nodes are not visited again.

        Args:
            children: Mutable list of host children
            items_get: Returns the inline items of a paragraph child, or
                       None for children that are not paragraphs
            node_build: Converts one output node into a host node

        Returns:
            Number of paragraphs rewritten
        """
        rewritten = 0
        index = 0

        while index < len(children):
            items = items_get(children[index])
            if items is None or not self.target_check(items):
                index += 1
                continue

            nodes = [node_build(output) for output in self.block_rewrite(items)]
            children[index:index + 1] = nodes
            index += len(nodes)
            rewritten += 1

        if rewritten:
            LOG(f"Rewrote {rewritten} paragraph(s) among {len(children)} children", level=3)
        return rewritten
