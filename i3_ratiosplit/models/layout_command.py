"""
Layout command models.

Pydantic models for the i3 IPC commands issued to establish the golden spiral:
focusing a container, setting the split orientation of the focused container,
and resizing the focused container along one axis.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from .tree import SplitOrientation


class CommandType(str, Enum):
    """Type of layout command."""

    FOCUS = "focus"
    SPLIT = "split"
    RESIZE = "resize"


class LayoutCommand(BaseModel):
    """Single i3 IPC layout command.

    ``split`` and ``resize`` act on whatever is focused, so they are always
    preceded by a ``focus`` in a plan. ``target_id`` records the node the
    command is meant for, for logging and failure reports.

    Attributes:
        command_type: Type of command
        target_id: Container the command acts on
        params: Command-specific parameters (orientation, axis, percent)

    Example:
        >>> LayoutCommand.focus(94).to_i3_command()
        '[con_id=94] focus'
        >>> LayoutCommand.resize(94, "width", 33).to_i3_command()
        'resize set width 33 ppt'
    """

    command_type: CommandType = Field(..., description="Type of command")
    target_id: Optional[int] = Field(None, description="Container the command acts on")
    params: dict[str, Any] = Field(default_factory=dict, description="Command parameters")

    model_config = {"frozen": True}

    @classmethod
    def focus(cls, con_id: int) -> LayoutCommand:
        return cls(command_type=CommandType.FOCUS, target_id=con_id)

    @classmethod
    def split(cls, con_id: int, orientation: SplitOrientation) -> LayoutCommand:
        return cls(
            command_type=CommandType.SPLIT,
            target_id=con_id,
            params={"orientation": orientation},
        )

    @classmethod
    def resize(cls, con_id: int, axis: str, percent: int) -> LayoutCommand:
        return cls(
            command_type=CommandType.RESIZE,
            target_id=con_id,
            params={"axis": axis, "percent": percent},
        )

    def to_i3_command(self) -> str:
        """Generate the i3 IPC command string.

        Raises:
            ValueError: If required parameters are missing for the command type
        """
        match self.command_type:
            case CommandType.FOCUS:
                if self.target_id is None:
                    raise ValueError("FOCUS requires a target_id")
                return f"[con_id={self.target_id}] focus"

            case CommandType.SPLIT:
                if "orientation" not in self.params:
                    raise ValueError("SPLIT requires 'orientation' parameter")
                orientation = SplitOrientation(self.params["orientation"])
                return f"split {orientation.value}"

            case CommandType.RESIZE:
                if "axis" not in self.params or "percent" not in self.params:
                    raise ValueError("RESIZE requires 'axis' and 'percent' parameters")
                return f"resize set {self.params['axis']} {self.params['percent']} ppt"

    def describe(self) -> str:
        """Command string plus the node it targets, for log messages."""
        return f"{self.to_i3_command()} (node {self.target_id})"
