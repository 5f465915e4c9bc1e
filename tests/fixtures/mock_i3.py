"""Mock i3 IPC objects for testing without a running i3."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MockI3Con:
    """Mock i3ipc Con (tree node) for testing."""
    id: int
    name: Optional[str] = None
    type: str = "con"  # "root", "output", "workspace", "con", "floating_con"
    layout: str = "splith"  # "splith", "splitv", "stacked", "tabbed", "none"
    window: Optional[int] = None  # X11 window ID for leaf windows
    nodes: List["MockI3Con"] = field(default_factory=list)
    floating_nodes: List["MockI3Con"] = field(default_factory=list)


@dataclass
class MockI3Event:
    """Mock i3 window event for testing."""
    change: str  # "new", "close", "focus", "title", "move", ...
    container: Optional[Any] = None


@dataclass
class MockCommandReply:
    """Mock i3ipc CommandReply."""
    success: bool = True
    error: Optional[str] = None
    ipc_data: Dict[str, Any] = field(default_factory=dict)


# Fixture factory functions

def create_window(con_id: int, name: str = "") -> MockI3Con:
    """Create a leaf window fixture."""
    return MockI3Con(
        id=con_id,
        name=name or f"window-{con_id}",
        type="con",
        layout="splith",
        window=0x1000000 + con_id,
    )


def create_container(con_id: int, layout: str, *children: MockI3Con) -> MockI3Con:
    """Create a split container fixture."""
    return MockI3Con(id=con_id, name=None, type="con", layout=layout, nodes=list(children))


def create_workspace(con_id: int, name: str, layout: str, *children: MockI3Con) -> MockI3Con:
    """Create a workspace fixture."""
    return MockI3Con(id=con_id, name=name, type="workspace", layout=layout, nodes=list(children))


def create_tree(*workspaces: MockI3Con, output_name: str = "HDMI-1") -> MockI3Con:
    """Wrap workspaces in root -> output -> content, like i3's get_tree()."""
    content = MockI3Con(id=3, name="content", type="con", layout="splith", nodes=list(workspaces))
    output = MockI3Con(id=2, name=output_name, type="output", layout="output", nodes=[content])
    return MockI3Con(id=1, name="root", type="root", layout="splith", nodes=[output])
