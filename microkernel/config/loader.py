"""
Config loader - reads a JSON file and turns it into kernel parameters.

Defaults are merged in without overwriting values present in the file,
and nested keys can be read with dotted paths such as ``"log.level"``.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from microkernel.kernel.errors import ConfigError
from microkernel.kernel.interface import KernelInterface

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads one JSON object and applies it to a kernel.

    Supports:
    - nested key access ("log.level")
    - recursive default merging
    - flattening nested objects into dotted parameter keys
    """

    def __init__(
        self,
        path: str | Path | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._defaults = defaults or {}
        self._config: dict[str, Any] = {}

    def load(self) -> dict[str, Any]:
        """
        Load the configuration file and merge defaults into it.

        Without a path only the defaults are used.
        """
        config: dict[str, Any] = {}
        if self._path is not None:
            try:
                with self._path.open(encoding="utf-8") as f:
                    config = json.load(f)
            except FileNotFoundError:
                raise
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Invalid JSON in {self._path}: {exc}") from exc
            except OSError as exc:
                raise ConfigError(f"Cannot read {self._path}: {exc}") from exc
            if not isinstance(config, dict):
                raise ConfigError(f"Top level of {self._path} must be an object.")
            logger.info("Configuration loaded from %s", self._path)

        self._merge_defaults(config, copy.deepcopy(self._defaults))
        self._config = config
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dotted key."""
        current: Any = self._config
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return default
            current = current[k]
        return current

    def as_dict(self) -> dict[str, Any]:
        return dict(self._config)

    def apply_to(self, kernel: KernelInterface, flatten: bool = False) -> list[str]:
        """
        Store the configuration as kernel parameters.

        Top-level keys become parameters. With ``flatten`` nested objects
        are written as dotted keys instead. Returns the keys written.
        """
        items = self._flatten(self._config) if flatten else self._config.items()
        written = []
        for key, value in items:
            kernel.set_parameter(key, value)
            written.append(key)
        logger.debug("Applied %d parameters to kernel", len(written))
        return written

    @classmethod
    def _flatten(cls, config: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
        items: list[tuple[str, Any]] = []
        for key, value in config.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict) and value:
                items.extend(cls._flatten(value, f"{full_key}."))
            else:
                items.append((full_key, value))
        return items

    def _merge_defaults(self, config: dict[str, Any], defaults: dict[str, Any]) -> None:
        """Recursively merge defaults into config (does not overwrite)."""
        for key, default_value in defaults.items():
            if key not in config:
                config[key] = default_value
            elif isinstance(default_value, dict) and isinstance(config[key], dict):
                self._merge_defaults(config[key], default_value)
