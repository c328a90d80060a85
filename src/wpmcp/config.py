"""
WPMCP Configuration — Unified settings for the MCP server

Load order: env vars > ~/.wpmcp/config.env > defaults
"""

import os
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def _load_config_env():
    """Load key=value pairs from ~/.wpmcp/config.env if it exists."""
    config_file = Path.home() / ".wpmcp" / "config.env"
    if not config_file.exists():
        return
    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


# Load config.env before reading env vars
_load_config_env()


class Config:
    # Server identity
    SERVER_NAME = "wordpress-gutenberg-mcp-server"
    SERVER_VERSION = "1.0.0"
    PROTOCOL_VERSION = "2024-11-05"

    # Paths
    DATA_DIR = Path(os.environ.get("WPMCP_DATA_DIR", str(Path.home() / ".wpmcp")))
    LOG_DIR = DATA_DIR / "logs"
    RESOURCES_DIR = Path(os.environ.get(
        "WPMCP_RESOURCES_DIR",
        str(Path(__file__).parent / "resources"),
    ))

    # Logging (NEVER to stdout — would corrupt MCP protocol)
    LOG_LEVEL = os.environ.get("WPMCP_LOG_LEVEL", "INFO").upper()
    LOG_FILE = LOG_DIR / "wpmcp.log"
    ERROR_LOG = LOG_DIR / "wpmcp-errors.log"

    # Check tool arguments against their inputSchema before invoking handlers
    VALIDATE_INPUT = env_flag("WPMCP_VALIDATE_INPUT")

    @classmethod
    def ensure_dirs(cls):
        """Create required directories."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
