"""
Data models for the ratio split daemon.

- tree: Immutable window tree snapshot
- layout_command: i3 layout commands
- settings: Startup configuration
"""

from .tree import ContainerNode, NodeKind, NodeLayout, SplitOrientation
from .layout_command import CommandType, LayoutCommand
from .settings import DEFAULT_LOG_PATH, DEFAULT_RATIO, LogLevel, Settings

__all__ = [
    "ContainerNode",
    "NodeKind",
    "NodeLayout",
    "SplitOrientation",
    "CommandType",
    "LayoutCommand",
    "DEFAULT_LOG_PATH",
    "DEFAULT_RATIO",
    "LogLevel",
    "Settings",
]
