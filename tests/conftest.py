"""Shared fixtures for WPMCP tests."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep log files out of the real home directory before wpmcp is imported
os.environ.setdefault("WPMCP_DATA_DIR", tempfile.mkdtemp(prefix="wpmcp-tests-"))

from wpmcp.server.registry import Registry, ResourceDescriptor, ToolDescriptor  # noqa: E402


@pytest.fixture
def tmp_data_dir(tmp_path):
    """Point Config at a temp data directory for isolated tests."""
    data_dir = tmp_path / ".wpmcp"
    data_dir.mkdir()
    (data_dir / "logs").mkdir()

    from wpmcp import config
    saved = {
        key: getattr(config.Config, key)
        for key in ("DATA_DIR", "LOG_DIR", "LOG_FILE", "ERROR_LOG")
    }
    config.Config.DATA_DIR = data_dir
    config.Config.LOG_DIR = data_dir / "logs"
    config.Config.LOG_FILE = data_dir / "logs" / "wpmcp.log"
    config.Config.ERROR_LOG = data_dir / "logs" / "wpmcp-errors.log"

    yield data_dir

    for key, value in saved.items():
        setattr(config.Config, key, value)


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def echo_tool():
    return ToolDescriptor(
        name="echo",
        description="Echo the text argument",
        input_schema={
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        },
        handler=lambda args: args["text"],
    )


@pytest.fixture
def hello_resource():
    return ResourceDescriptor(
        uri="res://a",
        name="Hello",
        description="Says hello",
        provider=lambda: "hello",
    )
