"""Tests for loading and reloading the game rules file."""

from decimal import Decimal
from pathlib import Path

import pytest

from src.betting.infrastructure import GameConfigManager
from src.core import ConfigurationException


def test_missing_file_uses_defaults(tmp_path):
    manager = GameConfigManager()
    config = manager.load(tmp_path / "absent.yaml")

    assert config.odds == {"2D": 85, "3D": 500}
    assert manager.get_config() is config


def test_loads_yaml(tmp_path):
    path = tmp_path / "game_config.yaml"
    path.write_text(
        'odds:\n  "2D": 80\n  "3D": 450\nmin_bet: 100\nmax_bet: 50000\nmin_deposit: 500\n'
    )

    config = GameConfigManager().load(path)

    assert config.get_odds("2D") == 80
    assert config.get_odds("3D") == 450
    assert config.min_bet == Decimal("100")
    assert config.max_bet == Decimal("50000")
    assert config.min_deposit == Decimal("500")


def test_invalid_file_fails_load(tmp_path):
    path = tmp_path / "game_config.yaml"
    path.write_text('odds:\n  "2D": -1\n')

    with pytest.raises(ConfigurationException):
        GameConfigManager().load(path)


def test_reload_picks_up_changes(tmp_path):
    path = tmp_path / "game_config.yaml"
    path.write_text('odds:\n  "2D": 85\n')
    manager = GameConfigManager()
    manager.load(path)

    path.write_text('odds:\n  "2D": 90\n')

    assert manager.reload() is True
    assert manager.get_config().get_odds("2D") == 90


def test_bad_reload_keeps_previous_config(tmp_path):
    path = tmp_path / "game_config.yaml"
    path.write_text('odds:\n  "2D": 85\n')
    manager = GameConfigManager()
    manager.load(path)

    path.write_text("odds: [not, a, mapping\n")

    assert manager.reload() is False
    assert manager.get_config().get_odds("2D") == 85


def test_unloaded_manager_raises():
    with pytest.raises(RuntimeError):
        GameConfigManager().get_config()


def test_watching_can_be_stopped(tmp_path):
    path = tmp_path / "game_config.yaml"
    path.write_text('odds:\n  "2D": 85\n')
    manager = GameConfigManager()
    manager.load(path)

    manager.start_watching()
    if not manager.is_watching:
        pytest.skip("file watching unavailable")
    try:
        assert manager.is_watching
    finally:
        manager.stop_watching()
    assert not manager.is_watching


def test_repository_game_config_is_valid():
    config = GameConfigManager().load(Path(__file__).parent.parent / "game_config.yaml")
    assert config.odds == {"2D": 85, "3D": 500}
    assert config.max_bet is None
