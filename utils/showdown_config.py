"""Central loader for ``config.yaml``.

Reads ``config.yaml`` from the project root and exposes every setting
through dotted keys.  ``SHOWDOWN_*`` environment variables **always win**
over the YAML file; the file is the friendly fallback.

Usage::

    from utils.showdown_config import cfg

    print(cfg.get_int("server.port"))               # 8080
    print(cfg.get_int("simulation.max_players"))    # 10

Equivalent environment variable: ``SHOWDOWN_SERVER_PORT``
  → YAML key ``server.port`` becomes ``SHOWDOWN_SERVER_PORT``.

Loading is lazy (on first access) and thread-safe.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

import yaml

_log = logging.getLogger("showdown.config")


def _find_config_path() -> Path:
    """Resolve ``config.yaml`` walking up towards the project root."""
    env_path = os.getenv("SHOWDOWN_CONFIG_FILE", "").strip()
    if env_path:
        return Path(env_path)

    start = Path(__file__).resolve().parent
    for ancestor in [start, start.parent, start.parent.parent]:
        candidate = ancestor / "config.yaml"
        if candidate.exists():
            return candidate

    return start.parent / "config.yaml"


class ShowdownConfig:
    """Settings access with env > yaml > default priority.

    Attributes:
        _data: Raw mapping loaded from the YAML file.
        _loaded: Whether the YAML file has been read.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._loaded: bool = False
        self._lock = threading.Lock()

    # ── Lazy loading ──────────────────────────────────────────────

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()
            self._loaded = True

    def _load(self) -> None:
        config_path = _find_config_path()
        if not config_path.exists():
            self._data = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as error:
            _log.warning("ignoring unreadable config %s: %s", config_path, error)
            raw = None
        self._data = raw if isinstance(raw, dict) else {}

    def reload(self) -> None:
        """Force a re-read of the file (tests, hot reload)."""
        with self._lock:
            self._loaded = False
            self._load()
            self._loaded = True

    # ── Dotted-key access ─────────────────────────────────────────

    def _resolve(self, dotted_key: str) -> Any:
        """Resolve ``server.port`` → data[server][port]."""
        self._ensure_loaded()
        node: Any = self._data
        for part in dotted_key.split("."):
            if isinstance(node, dict):
                node = node.get(part)
            else:
                return None
        return node

    @staticmethod
    def _env_key(dotted_key: str) -> str:
        """Convert ``server.port`` → ``SHOWDOWN_SERVER_PORT``."""
        return "SHOWDOWN_" + dotted_key.upper().replace(".", "_")

    # ── Typed getters ─────────────────────────────────────────────

    def get_str(self, key: str, default: str = "") -> str:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            return env_val
        yaml_val = self._resolve(key)
        if yaml_val is not None:
            return str(yaml_val)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        env_val = os.getenv(self._env_key(key), "").strip()
        if env_val:
            try:
                return int(env_val)
            except ValueError:
                _log.warning("ignoring non-integer %s=%r", self._env_key(key), env_val)
        yaml_val = self._resolve(key)
        if yaml_val is not None:
            try:
                return int(yaml_val)
            except (ValueError, TypeError):
                _log.warning("ignoring non-integer config value %s=%r", key, yaml_val)
        return default

    def __repr__(self) -> str:
        self._ensure_loaded()
        return f"<ShowdownConfig sections={list(self._data.keys())}>"


# ── Global singleton ─────────────────────────────────────────────
cfg = ShowdownConfig()
