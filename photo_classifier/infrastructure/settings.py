"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULT_LOG_LEVEL = "INFO"


class JsonSettings:
    """JSON settings reader with dotted-key access (e.g. `logging.level`)."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings file not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"settings root must be an object: {self._path}")
        self._data: dict[str, Any] = data

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Like `get`, but ignores non-string values with a warning."""
        value = self.get(key, default)
        if value is None or isinstance(value, str):
            return value
        logger.warning("Setting {} in {} is not a string: {!r}", key, self._path, value)
        return default

    @property
    def log_dir(self) -> str | None:
        return self.get_str("logging.dir")

    @property
    def log_level(self) -> str:
        return self.get_str("logging.level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL
