"""
Fragment partitioner

Cuts the inline items of one paragraph into ContentGroups at marker
boundaries. Each marker opens a new group tagged with its interpretation;
text before the first marker stays in an untagged leading group.

Example:
    Items: [Text("**"), Strong, Text(" with\\n~w:> hello\\n~:s> xxx")]

    Groups:
        0: (no marker)   [Text("**"), Strong, Text(" with")]
        1: right/warning [Text("hello")]
        2: left/success  [Text("xxx")]

Markers are found by pattern, not by position: a marker in the middle of a
sentence or right after an inline node splits the paragraph exactly like
one at the start of a line.
"""

from typing import List, Mapping, Sequence

from ..models.nodes import ContentGroup, InlineItem, TextFragment
from .grammar import markers_find
from .interpreter import match_interpret
from .log import LOG


def groups_partition(
    items: Sequence[InlineItem], dictionary: Mapping[str, str]
) -> List[ContentGroup]:
    """
    Partition a paragraph's inline items into marker-delimited groups

    Walks the items once, keeping the last group of the list as the
    current one:

    - non-text items go to the current group unchanged
    - text items without a marker go to the current group unchanged
    - text items with markers are sliced: text before the first marker
      goes to the current group, then every marker opens a new group
      (tagged with its interpretation) that receives the text up to the
      next marker or the end of the item

    A marker at offset 0 of the very first item tags the initial group
    instead of opening a new one, so no empty leading group is produced.

    Args:
        items: Inline items of one paragraph, in source order
        dictionary: Effective classification dictionary

    Returns:
        Groups in source order; always at least one. The last text fragment
        of every group has its trailing whitespace removed.
    """
    groups: List[ContentGroup] = [ContentGroup()]

    for position, item in enumerate(items):
        if not isinstance(item, TextFragment):
            groups[-1].items.append(item)
            continue

        value = item.value
        matches = markers_find(value)

        if not matches:
            groups[-1].items.append(item)
            continue

        for idx, match in enumerate(matches):
            LOG(
                f"Marker {value[match.start:match.end].strip()!r} at offset {match.start} of item {position}",
                level=3,
            )

            if idx == 0 and match.start > 0:
                groups[-1].items.append(TextFragment(value[:match.start]))

            interpretation = match_interpret(match, dictionary)

            if position == 0 and match.start == 0:
                groups[-1].interpretation = interpretation
            else:
                groups.append(ContentGroup(interpretation=interpretation))

            following = matches[idx + 1].start if idx + 1 < len(matches) else len(value)
            text = value[match.end:following]
            if text:
                groups[-1].items.append(TextFragment(text))

    groups_trim(groups)

    LOG(f"Partitioned {len(items)} inline items into {len(groups)} groups", level=3)
    return groups


def groups_trim(groups: List[ContentGroup]) -> None:
    """
    Strip trailing whitespace from the last text fragment of each group

    Removes the newline left behind by the line that holds the next
    marker. A fragment left empty is dropped. Leading and inner whitespace
    is kept; groups ending with a non-text item are left alone.
    """
    for group in groups:
        if not group.items:
            continue
        last = group.items[-1]
        if not isinstance(last, TextFragment):
            continue
        value = last.value.rstrip()
        if value:
            group.items[-1] = TextFragment(value)
        else:
            group.items.pop()
