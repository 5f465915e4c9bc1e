"""
Sequential dispatch of layout commands to i3.

Commands are sent one IPC call at a time, in plan order. The first command
that raises or comes back with ``success == false`` stops the dispatch; later
commands are never sent and nothing already applied is undone. There are no
retries: a failure means the tree went stale or i3 rejected the command, and
re-sending split/resize commands blindly could apply them twice.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..errors import CommandFailedError
from ..models.layout_command import LayoutCommand

if TYPE_CHECKING:
    from i3ipc.aio import Connection

logger = logging.getLogger(__name__)


@dataclass
class CommandOutcome:
    """Result of one i3 IPC command.

    Attributes:
        command: The layout command that was sent
        success: Whether i3 accepted it
        error: Error text from i3 or the IPC layer
        duration_ms: Round-trip time in milliseconds
    """

    command: LayoutCommand
    success: bool
    error: Optional[str] = None
    duration_ms: float = 0.0

    def __repr__(self) -> str:
        status = "✓" if self.success else "✗"
        return f"CommandOutcome({status} {self.command.describe()} {self.duration_ms:.1f}ms)"


@dataclass
class DispatchResult:
    """Result of dispatching a whole plan."""

    executed: List[CommandOutcome] = field(default_factory=list)
    failed: Optional[CommandOutcome] = None

    @property
    def success(self) -> bool:
        return self.failed is None

    def raise_for_failure(self) -> None:
        """Raise CommandFailedError if a command failed."""
        if self.failed is not None:
            raise CommandFailedError(
                self.failed.command.to_i3_command(),
                self.failed.command.target_id,
                self.failed.error or "unknown error",
            )


class CommandDispatcher:
    """Sends planned layout commands to i3, stopping at the first failure.

    Example:
        >>> dispatcher = CommandDispatcher(connection)
        >>> result = await dispatcher.dispatch(plan_spiral(parent, new_id))
        >>> result.success
        True
    """

    def __init__(self, conn: Connection):
        """Initialize the dispatcher.

        Args:
            conn: Active i3ipc.aio Connection
        """
        self.conn = conn

    async def dispatch(self, commands: Sequence[LayoutCommand]) -> DispatchResult:
        """Send ``commands`` in order.

        Args:
            commands: Planned commands

        Returns:
            DispatchResult; ``failed`` names the command that stopped the run
        """
        result = DispatchResult()

        for index, command in enumerate(commands, start=1):
            logger.debug(f"Running {command.to_i3_command()} ({index}/{len(commands)})")
            outcome = await self._send(command)
            logger.debug(f"{outcome!r}")

            if not outcome.success:
                logger.warning(
                    f"Error {outcome.error!r} running {command.describe()}, "
                    f"skipping {len(commands) - index} remaining command(s)"
                )
                result.failed = outcome
                return result

            result.executed.append(outcome)

        logger.debug(f"Dispatched {len(commands)} command(s)")
        return result

    async def _send(self, command: LayoutCommand) -> CommandOutcome:
        command_str = command.to_i3_command()
        loop = asyncio.get_running_loop()
        start = loop.time()

        try:
            replies = await self.conn.command(command_str)
        except Exception as e:
            return CommandOutcome(
                command=command,
                success=False,
                error=f"{type(e).__name__}: {e}",
                duration_ms=(loop.time() - start) * 1000,
            )

        duration_ms = (loop.time() - start) * 1000
        for reply in replies or []:
            if not reply.success:
                return CommandOutcome(
                    command=command,
                    success=False,
                    error=getattr(reply, "error", None) or "command rejected",
                    duration_ms=duration_ms,
                )

        return CommandOutcome(command=command, success=True, duration_ms=duration_ms)
