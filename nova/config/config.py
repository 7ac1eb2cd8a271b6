"""Async settings manager with file-based persistence.

Settings are stored as JSON at ``~/.nova/config.json`` (the directory can
be moved with ``NOVA_HOME``).  The manager deep-merges user values over
defaults and provides typed helpers.
"""

from __future__ import annotations

import asyncio
import copy
import json
import os
from pathlib import Path
from typing import Any

import aiofiles

from nova.config.defaults import DEFAULT_CONFIG

_CONFIG_FILENAME = "config.json"
_DB_FILENAME = "nova.db"

# Serialises reads/writes of the settings file within one process.
_lock = asyncio.Lock()


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into a copy of *base*."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class Config:
    """Async settings manager for nova.

    Usage::

        cfg = await Config.load()
        editor = cfg.get("editor.command")
        cfg.set("editor.command", "nvim")
        await cfg.save()
    """

    __slots__ = ("_data", "_path")

    def __init__(self, data: dict, path: Path | None = None) -> None:
        self._data = data
        self._path = path or Config.config_path()

    # ── Factory ─────────────────────────────────────────────────────

    @classmethod
    async def load(cls, path: Path | None = None) -> "Config":
        """Load settings from disk, falling back to defaults if absent."""
        path = path or cls.config_path()
        if path.exists():
            async with _lock:
                async with aiofiles.open(path, "r") as f:
                    raw = await f.read()
            try:
                user_data = json.loads(raw)
            except json.JSONDecodeError:
                user_data = {}
            if not isinstance(user_data, dict):
                user_data = {}
            data = _deep_merge(DEFAULT_CONFIG, user_data)
        else:
            data = copy.deepcopy(DEFAULT_CONFIG)
        return cls(data, path)

    # ── Persistence ─────────────────────────────────────────────────

    async def save(self) -> None:
        """Write the current settings to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self._data, indent=2, default=str)
        async with _lock:
            async with aiofiles.open(self._path, "w") as f:
                await f.write(payload)

    # ── Accessors ───────────────────────────────────────────────────

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Get a value via dotted key, e.g. ``editor.command``."""
        keys = dotted_key.split(".")
        node: Any = self._data
        for k in keys:
            if isinstance(node, dict) and k in node:
                node = node[k]
            else:
                return default
        return node

    def set(self, dotted_key: str, value: Any) -> None:
        """Set a value via dotted key."""
        keys = dotted_key.split(".")
        node = self._data
        for k in keys[:-1]:
            if k not in node or not isinstance(node[k], dict):
                node[k] = {}
            node = node[k]
        node[keys[-1]] = value

    @property
    def data(self) -> dict:
        """Return the raw settings dict."""
        return self._data

    @property
    def path(self) -> Path:
        return self._path

    @property
    def db_path(self) -> Path:
        """Location of the record database."""
        raw = self.get("store.path")
        if raw:
            return Path(os.path.expanduser(raw))
        return Config.config_dir() / _DB_FILENAME

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def config_dir() -> Path:
        raw = os.environ.get("NOVA_HOME")
        if raw:
            return Path(os.path.expanduser(raw))
        return Path.home() / ".nova"

    @staticmethod
    def config_path() -> Path:
        return Config.config_dir() / _CONFIG_FILENAME
