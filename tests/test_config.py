"""Tests for utils.config and utils.showdown_config: env > yaml > default."""

from __future__ import annotations

from pathlib import Path

import pytest

from utils.config import ServerConfig, SimulationLimits
from utils.showdown_config import ShowdownConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "PORT",
        "SHOWDOWN_CONFIG_FILE",
        "SHOWDOWN_SERVER_HOST",
        "SHOWDOWN_SERVER_PORT",
        "SHOWDOWN_SERVER_CORS_ORIGIN",
        "SHOWDOWN_SIMULATION_MIN_PLAYERS",
        "SHOWDOWN_SIMULATION_MAX_PLAYERS",
        "SHOWDOWN_SIMULATION_MIN_TRIALS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "server:\n"
        "  port: 9100\n"
        "  cors_origin: https://example.test\n"
        "simulation:\n"
        "  max_players: 8\n",
        encoding="utf-8",
    )
    return path


class TestShowdownConfig:
    def test_reads_yaml(self, clean_env: pytest.MonkeyPatch, yaml_file: Path) -> None:
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(yaml_file))
        config = ShowdownConfig()
        assert config.get_int("server.port") == 9100
        assert config.get_str("server.cors_origin") == "https://example.test"
        assert config.get_int("simulation.max_players") == 8
        assert config.get_int("simulation.min_players", 2) == 2

    def test_env_overrides_yaml(self, clean_env: pytest.MonkeyPatch, yaml_file: Path) -> None:
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(yaml_file))
        clean_env.setenv("SHOWDOWN_SERVER_PORT", "9200")
        assert ShowdownConfig().get_int("server.port") == 9200

    def test_bad_env_value_falls_back(self, clean_env: pytest.MonkeyPatch, yaml_file: Path) -> None:
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(yaml_file))
        clean_env.setenv("SHOWDOWN_SERVER_PORT", "not-a-port")
        assert ShowdownConfig().get_int("server.port") == 9100

    def test_missing_file_uses_defaults(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(tmp_path / "absent.yaml"))
        config = ShowdownConfig()
        assert config.get_int("server.port", 8080) == 8080
        assert config.get_str("server.host", "0.0.0.0") == "0.0.0.0"

    def test_broken_yaml_uses_defaults(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("server: [unclosed\n", encoding="utf-8")
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(path))
        assert ShowdownConfig().get_int("server.port", 8080) == 8080

    def test_reload_picks_up_changes(self, clean_env: pytest.MonkeyPatch, yaml_file: Path) -> None:
        clean_env.setenv("SHOWDOWN_CONFIG_FILE", str(yaml_file))
        config = ShowdownConfig()
        assert config.get_int("server.port") == 9100
        yaml_file.write_text("server:\n  port: 9300\n", encoding="utf-8")
        config.reload()
        assert config.get_int("server.port") == 9300


class TestRuntimeConfig:
    def test_port_env_wins(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "9000")
        assert ServerConfig().port == 9000

    def test_project_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = ServerConfig()
        assert config.port == 8080
        assert config.cors_origin == "*"

        limits = SimulationLimits()
        assert (limits.min_players, limits.max_players) == (2, 10)
        assert (limits.min_trials, limits.max_trials) == (100, 100_000)

    def test_limits_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SHOWDOWN_SIMULATION_MAX_PLAYERS", "6")
        assert SimulationLimits().max_players == 6

    def test_limit_checks(self) -> None:
        limits = SimulationLimits(min_players=2, max_players=10, min_trials=100, max_trials=100_000)
        assert limits.check_players(2) is None
        assert limits.check_players(10) is None
        assert limits.check_players(11) == "Number of players must be between 2 and 10"
        assert limits.check_trials(100) is None
        assert limits.check_trials(99) == "Number of simulations must be between 100 and 100000"
