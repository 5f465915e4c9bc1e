"""Window event handlers.

One ``window::new`` event drives one decision cycle:
fetch tree -> find parent -> classify -> plan -> dispatch.
Every other window change is logged and ignored.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from .errors import EventStreamError, TreeFetchError
from .models.settings import Settings
from .services.command_dispatcher import CommandDispatcher, DispatchResult
from .services.eligibility import classify_parent
from .services.parent_locator import find_parent
from .services.spiral_planner import plan_spiral
from .services.tree_snapshot import fetch_tree

if TYPE_CHECKING:
    from i3ipc.aio import Connection

logger = logging.getLogger(__name__)

NEW_WINDOW_CHANGE = "new"


def validate_window_event(event: Any) -> None:
    """Check that a window event is well formed.

    Raises:
        EventStreamError: If the event has no change, or a new-window event
            has no container with an integer id
    """
    change = getattr(event, "change", None)
    if not isinstance(change, str) or not change:
        raise EventStreamError("window event without a change field", event)

    if change == NEW_WINDOW_CHANGE:
        container = getattr(event, "container", None)
        if container is None or not isinstance(getattr(container, "id", None), int):
            raise EventStreamError("window::new event without a container id", event)


async def on_window_event(
    conn: Connection,
    event: Any,
    settings: Settings,
) -> Optional[DispatchResult]:
    """Handle one event from the window subscription.

    Returns:
        DispatchResult when commands were dispatched, None when the event was
        ignored or skipped

    Raises:
        EventStreamError: If the event is malformed
        CommandFailedError: If i3 rejected a planned command
    """
    validate_window_event(event)

    if event.change != NEW_WINDOW_CHANGE:
        container = getattr(event, "container", None)
        logger.debug(
            f"Ignoring event {event.change}: {getattr(container, 'name', None)!r}"
        )
        return None

    container = event.container
    logger.info(f"New window created {container.name!r}")
    logger.debug(f"Container properties: {getattr(container, 'ipc_data', None)!r}")
    return await handle_new_window(conn, container.id, container.name, settings)


async def handle_new_window(
    conn: Connection,
    window_id: int,
    window_name: Optional[str],
    settings: Settings,
) -> Optional[DispatchResult]:
    """Run one golden spiral decision cycle for a new window.

    A tree fetch failure is logged and ends the cycle. A rejected command ends
    the cycle with CommandFailedError, which the event worker logs before moving
    on to the next event.

    Raises:
        CommandFailedError: If i3 rejected one of the planned commands
    """
    try:
        tree = await fetch_tree(conn)
    except TreeFetchError as e:
        logger.error(e.message)
        return None

    parent = find_parent(window_id, tree)
    if parent is None:
        logger.info(f"Could not find parent node for {window_name!r}.")
        logger.debug(f"Searched tree from {tree.describe()}")
        return None

    logger.debug(f"Found parent node for {window_name!r}: {parent.describe()}")

    eligibility = classify_parent(parent)
    if not eligibility:
        logger.info(eligibility.reason)
        logger.debug(f"Parent properties: {parent.describe()}")
        return None

    logger.debug(eligibility.reason)

    commands = plan_spiral(parent, window_id, settings.ratio_percent)
    logger.debug(
        f"Resizing {parent.split_orientation.resize_axis} to {settings.ratio_percent}%: "
        f"{[command.to_i3_command() for command in commands]}"
    )

    result = await CommandDispatcher(conn).dispatch(commands)
    result.raise_for_failure()

    logger.info(f"Resized {window_name!r} successfully")
    return result
