"""Runtime configuration dataclasses for the HTTP server and simulator limits.

Each dataclass reads its defaults from ``config.yaml`` / ``SHOWDOWN_*``
environment variables (see :mod:`utils.showdown_config`) at construction
time.  Override individual fields when constructing from code (e.g. in
tests).

NOTE: every field uses ``default_factory`` so the environment is read at
**instantiation** time, not at import time; ``monkeypatch.setenv`` in tests
relies on this.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from utils.showdown_config import cfg


def _port_default() -> int:
    # PORT is the hosting platform's convention and beats the config file.
    raw = os.getenv("PORT", "").strip()
    if raw.isdigit():
        return int(raw)
    return cfg.get_int("server.port", 8080)


@dataclass(slots=True)
class ServerConfig:
    """HTTP adapter configuration."""

    host: str = field(default_factory=lambda: cfg.get_str("server.host", "0.0.0.0"))
    port: int = field(default_factory=_port_default)
    cors_origin: str = field(default_factory=lambda: cfg.get_str("server.cors_origin", "*"))


@dataclass(slots=True)
class SimulationLimits:
    """Bounds the adapters enforce before calling the simulator."""

    min_players: int = field(default_factory=lambda: cfg.get_int("simulation.min_players", 2))
    max_players: int = field(default_factory=lambda: cfg.get_int("simulation.max_players", 10))
    min_trials: int = field(default_factory=lambda: cfg.get_int("simulation.min_trials", 100))
    max_trials: int = field(default_factory=lambda: cfg.get_int("simulation.max_trials", 100_000))
    default_trials: int = field(default_factory=lambda: cfg.get_int("simulation.default_trials", 10_000))

    def check_players(self, num_players: int) -> str | None:
        """Return an error message when *num_players* is out of range."""
        if not self.min_players <= num_players <= self.max_players:
            return f"Number of players must be between {self.min_players} and {self.max_players}"
        return None

    def check_trials(self, num_trials: int) -> str | None:
        """Return an error message when *num_trials* is out of range."""
        if not self.min_trials <= num_trials <= self.max_trials:
            return f"Number of simulations must be between {self.min_trials} and {self.max_trials}"
        return None
