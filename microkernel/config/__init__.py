"""
Config module - loads kernel parameters from JSON files.
"""

from microkernel.config.defaults import DEFAULT_CONFIG_PATH, build_default_config
from microkernel.config.loader import ConfigLoader

__all__ = ["ConfigLoader", "DEFAULT_CONFIG_PATH", "build_default_config"]
