"""i3 IPC connection setup.

The daemon does not reconnect: if i3 cannot be reached, or the event
subscription fails, startup is aborted.
"""

import logging
from typing import Callable, List

from i3ipc import Event, aio
from i3ipc.events import IpcBaseEvent

from .errors import I3ConnectionError, SubscriptionError

logger = logging.getLogger(__name__)

WindowEventCallback = Callable[[aio.Connection, IpcBaseEvent], None]

SUBSCRIPTIONS: List[Event] = [Event.WINDOW]


async def connect() -> aio.Connection:
    """Connect to i3 and probe the connection with get_version().

    Raises:
        I3ConnectionError: If the socket cannot be reached
    """
    logger.info("Connecting to i3")
    try:
        conn = await aio.Connection(auto_reconnect=False).connect()
        version = await conn.get_version()
    except Exception as e:
        raise I3ConnectionError(f"{type(e).__name__}: {e}") from e

    logger.info(f"Connected to i3 version {version.human_readable}")
    return conn


async def subscribe_window_events(conn: aio.Connection, callback: WindowEventCallback) -> None:
    """Register ``callback`` for every window event and subscribe explicitly.

    conn.on() schedules its own subscribe() as a task; subscribing here as
    well guarantees the subscription exists before conn.main() starts.

    Raises:
        SubscriptionError: If i3 rejects the subscription
    """
    names = [event.value for event in SUBSCRIPTIONS]
    logger.info(f"Subscribing to events: {names}")

    for event in SUBSCRIPTIONS:
        conn.on(event, callback)

    try:
        await conn.subscribe(SUBSCRIPTIONS)
    except Exception as e:
        raise SubscriptionError(names, f"{type(e).__name__}: {e}") from e
