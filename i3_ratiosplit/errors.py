"""
Error taxonomy for the ratio split daemon.

Errors fall into two groups:
- Fatal: the daemon cannot continue (connection, subscription, event stream)
- Per-event: the current new-window cycle is aborted, the daemon keeps running
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for the ratio split daemon.

    - 1400-1499: i3 IPC errors (fatal)
    - 1500-1599: Per-event errors (recovered)
    """

    # i3 IPC errors (1400-1499)
    I3_NOT_RUNNING = 1400
    SUBSCRIBE_FAILED = 1401
    EVENT_STREAM_BROKEN = 1402

    # Per-event errors (1500-1599)
    TREE_FETCH_FAILED = 1500
    PLANNING_FAILED = 1501
    COMMAND_FAILED = 1502


FATAL_CODES = frozenset({
    ErrorCode.I3_NOT_RUNNING,
    ErrorCode.SUBSCRIBE_FAILED,
    ErrorCode.EVENT_STREAM_BROKEN,
})


class RatioSplitError(Exception):
    """Base exception for the ratio split daemon."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize daemon error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(message)

    @property
    def is_fatal(self) -> bool:
        """Whether the daemon must exit after this error."""
        return self.code in FATAL_CODES

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.context:
            result["context"] = self.context

        return result


class I3ConnectionError(RatioSplitError):
    """Could not connect to the i3 IPC socket."""

    def __init__(self, reason: str):
        super().__init__(
            code=ErrorCode.I3_NOT_RUNNING,
            message=f"Failed to connect to i3 IPC: {reason}",
            context={"reason": reason}
        )


class SubscriptionError(RatioSplitError):
    """Could not subscribe to the i3 event stream."""

    def __init__(self, events: list, reason: str):
        super().__init__(
            code=ErrorCode.SUBSCRIBE_FAILED,
            message=f"Failed to subscribe to events {events}: {reason}",
            context={"events": events, "reason": reason}
        )


class EventStreamError(RatioSplitError):
    """The event stream delivered something the daemon cannot trust."""

    def __init__(self, reason: str, event: Any = None):
        super().__init__(
            code=ErrorCode.EVENT_STREAM_BROKEN,
            message=f"Unexpected event or error on i3 event stream: {reason}",
            context={"reason": reason, "event": repr(event)}
        )


class TreeFetchError(RatioSplitError):
    """get_tree() failed for the current event."""

    def __init__(self, reason: str):
        super().__init__(
            code=ErrorCode.TREE_FETCH_FAILED,
            message=f"Error retrieving the current i3 tree: {reason}",
            context={"reason": reason}
        )


class PlanningError(RatioSplitError):
    """The spiral planner was handed a parent it cannot plan for."""

    def __init__(self, parent_id: int, reason: str):
        super().__init__(
            code=ErrorCode.PLANNING_FAILED,
            message=f"Cannot plan spiral layout for container {parent_id}: {reason}",
            context={"parent_id": parent_id, "reason": reason}
        )


class CommandFailedError(RatioSplitError):
    """A layout command was rejected by i3."""

    def __init__(self, command: str, target_id: Optional[int], reason: str):
        super().__init__(
            code=ErrorCode.COMMAND_FAILED,
            message=f"Command '{command}' failed on node {target_id}: {reason}",
            context={"command": command, "target_id": target_id, "reason": reason}
        )
        self.command = command
        self.target_id = target_id
