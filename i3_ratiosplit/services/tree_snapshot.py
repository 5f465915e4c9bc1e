"""Fetch a fresh window tree snapshot from i3.

A snapshot is taken for every new-window event and dropped afterwards; the tree
may have changed between events, so nothing is cached.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..errors import TreeFetchError
from ..models.tree import ContainerNode

if TYPE_CHECKING:
    from i3ipc.aio import Connection

logger = logging.getLogger(__name__)


async def fetch_tree(conn: Connection) -> ContainerNode:
    """Query i3 for the current tree and convert it to an immutable snapshot.

    Raises:
        TreeFetchError: If get_tree() fails
    """
    logger.debug("Retrieving current tree")
    try:
        con = await conn.get_tree()
    except Exception as e:
        raise TreeFetchError(f"{type(e).__name__}: {e}") from e

    try:
        tree = ContainerNode.from_i3_con(con)
    except ValidationError as e:
        raise TreeFetchError(f"unexpected tree payload: {e}") from e

    logger.debug(f"Retrieved tree rooted at {tree.id}")
    return tree
