"""
Default configuration values.
"""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG_PATH = "config/microkernel.json"


def build_default_config() -> dict[str, Any]:
    """Build the default configuration."""
    return {
        # Application name, available to services as the "app" parameter
        "app": "microkernel",
        "debug": False,
        "log": {
            "level": "INFO",
            "file": None,
        },
    }
