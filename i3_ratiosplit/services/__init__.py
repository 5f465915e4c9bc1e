"""
Services for the ratio split daemon.

- tree_snapshot: Fetch the current tree from i3
- parent_locator: Find a window's direct parent
- eligibility: Decide whether a parent gets resized
- spiral_planner: Plan golden spiral layout commands
- command_dispatcher: Send commands to i3, stopping on first failure
"""

from .tree_snapshot import fetch_tree
from .parent_locator import find_parent
from .eligibility import Eligibility, classify_parent
from .spiral_planner import plan_spiral
from .command_dispatcher import CommandDispatcher, CommandOutcome, DispatchResult

__all__ = [
    "fetch_tree",
    "find_parent",
    "Eligibility",
    "classify_parent",
    "plan_spiral",
    "CommandDispatcher",
    "CommandOutcome",
    "DispatchResult",
]
