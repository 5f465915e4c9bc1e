"""
Golden spiral layout planning.

Given an eligible two-child parent split in orientation O, the plan is:

1. For each child, in order: focus it, then split it in the opposite of O.
   Both children get the perpendicular split before any resize, so a future
   window in either slot continues the spiral.
2. Focus the new window by id (its tree position may shift while siblings
   are reconfigured).
3. Resize the new window along O's axis (width for splith, height for splitv)
   to the configured percentage.

The planner is pure; it never talks to i3.
"""

from typing import List

from ..errors import PlanningError
from ..models.layout_command import LayoutCommand
from ..models.settings import DEFAULT_RATIO
from ..models.tree import ContainerNode
from .eligibility import classify_parent

DEFAULT_RATIO_PERCENT = round(DEFAULT_RATIO * 100)


def plan_spiral(
    parent: ContainerNode,
    new_window_id: int,
    ratio_percent: int = DEFAULT_RATIO_PERCENT,
) -> List[LayoutCommand]:
    """Plan the commands that put ``new_window_id`` on the golden spiral.

    Args:
        parent: Eligible parent container (two children, splith or splitv)
        new_window_id: Container id of the newly created window
        ratio_percent: Share of the parent's extent for the new window

    Returns:
        Commands in execution order

    Raises:
        PlanningError: If ``parent`` is not eligible

    Example:
        >>> [c.to_i3_command() for c in plan_spiral(parent, 7)]  # splith parent [5, 7]
        ['[con_id=5] focus', 'split vertical', '[con_id=7] focus', 'split vertical',
         '[con_id=7] focus', 'resize set width 33 ppt']
    """
    eligibility = classify_parent(parent)
    if not eligibility.eligible:
        raise PlanningError(parent.id, eligibility.reason)

    orientation = parent.split_orientation
    child_split = orientation.opposite

    commands: List[LayoutCommand] = []
    for child in parent.nodes:
        commands.append(LayoutCommand.focus(child.id))
        commands.append(LayoutCommand.split(child.id, child_split))

    commands.append(LayoutCommand.focus(new_window_id))
    commands.append(LayoutCommand.resize(new_window_id, orientation.resize_axis, ratio_percent))

    return commands
