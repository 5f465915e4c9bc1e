"""
Parent lookup over a window tree snapshot.

The snapshot only holds tiled children, so a lookup returns None when:
1. The id is not in the tree (closed, or the tree changed since the event)
2. The id belongs to a floating window
3. The id is the root itself
"""

import logging
from typing import Optional

from ..models.tree import ContainerNode

logger = logging.getLogger(__name__)


def find_parent(child_id: int, tree: ContainerNode) -> Optional[ContainerNode]:
    """Find the node that has ``child_id`` as a direct child.

    Depth-first: each node's children are scanned in order before descending
    into them, also in order. Uses an explicit stack, so nesting depth is only
    bounded by memory.

    Args:
        child_id: Container id to look for
        tree: Root of the snapshot

    Returns:
        The direct parent, or None if ``child_id`` has no parent in the snapshot
    """
    stack = [tree]
    visited = 0

    while stack:
        node = stack.pop()
        visited += 1

        for child in node.nodes:
            if child.id == child_id:
                logger.debug(f"Found parent {node.id} for {child_id} after {visited} node(s)")
                return node

        stack.extend(reversed(node.nodes))

    logger.debug(f"No parent for {child_id} after visiting {visited} node(s)")
    return None
