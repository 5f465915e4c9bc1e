"""Pytest configuration and fixtures for ratio split tests."""

import logging

import pytest
from unittest.mock import AsyncMock
from i3ipc.aio import Connection

from i3_ratiosplit.models.settings import Settings
from tests.fixtures.mock_i3 import MockCommandReply


@pytest.fixture
def mock_i3_connection():
    """Mock i3 IPC connection where every command succeeds."""
    conn = AsyncMock(spec=Connection)
    conn.command.return_value = [MockCommandReply(success=True)]
    return conn


@pytest.fixture
def settings(tmp_path):
    """Default settings with the log file inside tmp_path."""
    return Settings(log_file=tmp_path / "ratiosplit.log")


@pytest.fixture
def sent_commands(mock_i3_connection):
    """Command strings sent through mock_i3_connection, in order."""
    def _sent():
        return [call.args[0] for call in mock_i3_connection.command.await_args_list]
    return _sent


@pytest.fixture
def restore_root_logger():
    """Remove handlers added by a test and restore the root level."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
