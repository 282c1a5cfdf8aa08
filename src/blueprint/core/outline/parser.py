from __future__ import annotations

"""
Outline Parser.

Converts indentation-delimited outline text into an ordered forest of
folder nodes. Every four leading spaces add one nesting level; a node is
attached to the nearest preceding line with a strictly smaller depth.
Parsing never fails: any text yields some forest.
"""

import logging
from typing import List, Optional, Tuple

from blueprint.domain.constants import INDENT_CHAR, INDENT_WIDTH
from blueprint.domain.outline_models import Forest, LineRecord, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(line: str) -> Optional[LineRecord]:
    """
    Derive the depth and folder name of a single outline line.

    Only the space character counts towards indentation; tabs and other
    whitespace contribute nothing to the depth.

    Args:
        line: One physical line of the outline.

    Returns:
        Optional[LineRecord]: None for empty or whitespace-only lines.
    """
    name = line.strip()
    if not name:
        return None

    leading = len(line) - len(line.lstrip(INDENT_CHAR))
    return LineRecord(depth=leading // INDENT_WIDTH, name=name)


def parse_outline(text: str) -> Forest:
    """
    Build the folder forest described by an outline.

    Uses an explicit ancestry stack of (depth, children) frames seeded with
    a sentinel at depth -1 whose children list is the resulting forest.

    Args:
        text: Raw outline text, lines separated by newlines.

    Returns:
        Forest: Ordered root-level nodes.
    """
    forest: Forest = []
    stack: List[Tuple[int, List[TreeNode]]] = [(-1, forest)]

    for line in text.split("\n"):
        record = parse_line(line)
        if record is None:
            continue

        node = TreeNode(name=record.name)

        # The sentinel sits at depth -1 and is never popped
        while stack[-1][0] >= record.depth:
            stack.pop()

        stack[-1][1].append(node)
        stack.append((record.depth, node.children))

    logger.debug(f"Parsed outline into {len(forest)} root(s), {count_nodes(forest)} node(s).")
    return forest


def count_nodes(forest: Forest) -> int:
    """Return the total number of nodes in a forest."""
    return sum(1 + count_nodes(node.children) for node in forest)
