"""
Window tree snapshot models.

Immutable Pydantic mirror of the i3 container tree as returned by get_tree().
Only tiled children (``nodes``) are kept; ``floating_nodes`` are never part of a
snapshot, so floating windows have no parent here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """i3 node type (``con.type``)."""

    ROOT = "root"
    OUTPUT = "output"
    WORKSPACE = "workspace"
    CON = "con"
    FLOATING_CON = "floating_con"
    DOCKAREA = "dockarea"
    UNKNOWN = "unknown"

    @classmethod
    def from_i3(cls, value: Optional[str]) -> "NodeKind":
        """Parse an i3 node type, mapping anything unrecognised to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class NodeLayout(str, Enum):
    """i3 container layout (``con.layout``)."""

    SPLITH = "splith"
    SPLITV = "splitv"
    STACKED = "stacked"
    TABBED = "tabbed"
    DOCKAREA = "dockarea"
    OUTPUT = "output"
    NONE = "none"

    @classmethod
    def from_i3(cls, value: Optional[str]) -> "NodeLayout":
        """Parse an i3 layout, mapping anything unrecognised to NONE."""
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class SplitOrientation(str, Enum):
    """Orientation of a binary split."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def opposite(self) -> "SplitOrientation":
        if self is SplitOrientation.HORIZONTAL:
            return SplitOrientation.VERTICAL
        return SplitOrientation.HORIZONTAL

    @property
    def resize_axis(self) -> str:
        """Dimension that a split in this orientation divides."""
        return "width" if self is SplitOrientation.HORIZONTAL else "height"


_LAYOUT_ORIENTATION = {
    NodeLayout.SPLITH: SplitOrientation.HORIZONTAL,
    NodeLayout.SPLITV: SplitOrientation.VERTICAL,
}


class ContainerNode(BaseModel):
    """One node of the window tree.

    Attributes:
        id: i3 container id (con_id), unique within a tree
        name: Window title or container name, if any
        kind: Node type
        layout: Split/stack layout of this node
        window: X11 window id for leaf windows, None for containers
        nodes: Tiled children in on-screen order

    Example:
        >>> node = ContainerNode(id=1, kind=NodeKind.WORKSPACE, layout=NodeLayout.SPLITH)
        >>> node.split_orientation
        <SplitOrientation.HORIZONTAL: 'horizontal'>
    """

    id: int = Field(..., description="i3 container id")
    name: Optional[str] = Field(None, description="Window title or container name")
    kind: NodeKind = Field(NodeKind.CON, description="Node type")
    layout: NodeLayout = Field(NodeLayout.NONE, description="Container layout")
    window: Optional[int] = Field(None, description="X11 window id for leaf windows")
    nodes: Tuple[ContainerNode, ...] = Field(default=(), description="Tiled children")

    model_config = {"frozen": True}

    @property
    def child_count(self) -> int:
        return len(self.nodes)

    @property
    def child_ids(self) -> list[int]:
        return [child.id for child in self.nodes]

    @property
    def split_orientation(self) -> Optional[SplitOrientation]:
        """Orientation for splith/splitv layouts, None for every other layout."""
        return _LAYOUT_ORIENTATION.get(self.layout)

    def describe(self) -> str:
        """Short one-line description for log messages."""
        return (
            f"{self.kind.value} {self.id} ({self.name!r}, layout={self.layout.value}, "
            f"{self.child_count} children)"
        )

    @classmethod
    def from_i3_con(cls, con: Any) -> ContainerNode:
        """Build an immutable snapshot from an i3ipc Con tree.

        Conversion is iterative (post-order with an explicit stack), so deep
        trees are not bounded by the interpreter recursion limit.

        Args:
            con: i3ipc Con (or any object exposing id/name/type/layout/nodes)

        Returns:
            ContainerNode mirroring ``con`` and all of its tiled descendants
        """
        built: dict[int, ContainerNode] = {}
        stack: list[tuple[Any, bool]] = [(con, False)]

        while stack:
            current, children_done = stack.pop()
            children = list(getattr(current, "nodes", None) or [])

            if not children_done:
                stack.append((current, True))
                for child in reversed(children):
                    stack.append((child, False))
                continue

            built[id(current)] = cls(
                id=current.id,
                name=getattr(current, "name", None),
                kind=NodeKind.from_i3(getattr(current, "type", None)),
                layout=NodeLayout.from_i3(getattr(current, "layout", None)),
                window=getattr(current, "window", None),
                nodes=tuple(built.pop(id(child)) for child in children),
            )

        return built[id(con)]


ContainerNode.model_rebuild()
