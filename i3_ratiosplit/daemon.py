"""Main daemon entry point.

Events are handled strictly one at a time: the i3ipc window callback only
enqueues the event, and a single worker runs each decision cycle to
completion before taking the next one.
"""

import asyncio
import logging
import os
import signal
import sys
from typing import Any, Optional

from i3ipc import aio

from .config import load_settings
from .connection import connect, subscribe_window_events
from .errors import EventStreamError, RatioSplitError
from .handlers import on_window_event
from .logging_setup import setup_logging
from .models.settings import Settings

logger = logging.getLogger(__name__)


class RatioSplitDaemon:
    """Golden spiral daemon."""

    def __init__(self, settings: Settings) -> None:
        """Initialize daemon.

        Args:
            settings: Settings loaded at startup
        """
        self.settings = settings
        self.conn: Optional[aio.Connection] = None
        self.event_queue: asyncio.Queue = asyncio.Queue()
        self.shutdown_event = asyncio.Event()
        self.events_handled = 0

    async def start(self) -> None:
        """Connect to i3 and subscribe to window events.

        Raises:
            I3ConnectionError, SubscriptionError: Startup failures (fatal)
        """
        logger.info("Starting i3 ratiosplit, connecting to i3")
        self.conn = await connect()
        await subscribe_window_events(self.conn, self._enqueue_event)

    def _enqueue_event(self, conn: aio.Connection, event: Any) -> None:
        """i3ipc callback: queue the event for the worker."""
        self.event_queue.put_nowait(event)

    async def process_events(self) -> None:
        """Worker loop: handle queued events in arrival order.

        Per-event errors are logged and the worker moves on.

        Raises:
            RatioSplitError: A fatal error, e.g. EventStreamError on a malformed event
        """
        while True:
            event = await self.event_queue.get()
            try:
                await on_window_event(self.conn, event, self.settings)
            except RatioSplitError as e:
                if e.is_fatal:
                    raise
                logger.warning(f"Event handling failed: {e.to_dict()}")
            except Exception as e:
                logger.error(f"Unexpected error handling event: {e}", exc_info=True)
            finally:
                self.events_handled += 1
                self.event_queue.task_done()

    async def run(self) -> int:
        """Run until i3 goes away, a fatal error occurs, or a signal arrives.

        Returns:
            Exit code (0 = clean shutdown, 1 = fatal error)
        """
        main_task = asyncio.create_task(self.conn.main(), name="i3-main")
        worker_task = asyncio.create_task(self.process_events(), name="event-worker")
        shutdown_task = asyncio.create_task(self.shutdown_event.wait(), name="shutdown")

        done, pending = await asyncio.wait(
            [main_task, worker_task, shutdown_task],
            return_when=asyncio.FIRST_COMPLETED,
        )

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        exit_code = 0
        if worker_task in done:
            error = worker_task.exception()
            logger.error(f"Fatal event stream error: {error}")
            exit_code = 1
        elif main_task in done:
            error = main_task.exception()
            if error is not None:
                stream_error = EventStreamError(f"{type(error).__name__}: {error}")
                logger.error(stream_error.message)
                exit_code = 1
            else:
                logger.info("i3 connection closed")
        else:
            logger.info("Shutdown requested")

        self.stop()
        logger.info(f"Handled {self.events_handled} event(s)")
        return exit_code

    def stop(self) -> None:
        if self.conn:
            self.conn.main_quit()

    def setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown."""

        def shutdown_handler(signum, frame):
            logger.info(f"Received signal {signum}, initiating shutdown...")
            loop = asyncio.get_event_loop()
            loop.call_soon_threadsafe(self.shutdown_event.set)

        signal.signal(signal.SIGTERM, shutdown_handler)
        signal.signal(signal.SIGINT, shutdown_handler)


async def main_async(settings: Settings) -> int:
    """Async main function.

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    daemon = RatioSplitDaemon(settings)

    try:
        daemon.setup_signal_handlers()
        await daemon.start()
    except RatioSplitError as e:
        logger.error(e.message)
        return 1

    return await daemon.run()


def main() -> None:
    """Main entry point."""
    settings = load_settings()
    setup_logging(settings)

    logger.info(f"PID: {os.getpid()}")

    try:
        exit_code = asyncio.run(main_async(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 0
    except Exception as e:
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
