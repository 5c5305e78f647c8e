"""
Betting External Integrations
=============================

Game rules file loader with hot reload:
- YAML parsing into GameConfig
- watchdog observer that reloads on file change
"""

import threading
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from src.betting.domain import GameConfig, IGameConfigProvider
from src.core import ConfigurationException
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ConfigFileHandler(FileSystemEventHandler):
    """Watchdog event handler for game config file changes."""

    def __init__(self, config_manager: "GameConfigManager", config_path: Path):
        self.config_manager = config_manager
        self.config_path = config_path
        super().__init__()

    def on_modified(self, event):
        if event.is_directory:
            return
        if Path(event.src_path).resolve() == self.config_path.resolve():
            logger.info(f"Game config file changed: {event.src_path}")
            self.config_manager.reload()


class GameConfigManager(IGameConfigProvider):
    """
    Thread-safe game rules holder with hot-reload support.

    Odds changes apply to bets placed after the reload; placed bets keep
    the payout fixed at placement.
    """

    def __init__(self):
        self._config: Optional[GameConfig] = None
        self._lock = threading.Lock()
        self._path: Optional[Path] = None
        self._observer = None

    def load(self, path: Path) -> GameConfig:
        """
        Initial configuration load.

        Raises:
            ConfigurationException: If the file exists but is invalid
        """
        self._path = Path(path)
        try:
            config = self._load_from_file(self._path)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise ConfigurationException(f"Invalid game config {self._path}: {e}")

        with self._lock:
            self._config = config
        logger.info(
            "Game configuration loaded",
            extra={"path": str(self._path), "odds": config.odds}
        )
        return config

    def _load_from_file(self, path: Path) -> GameConfig:
        if not path.exists():
            logger.warning(f"Game config file not found: {path}, using defaults")
            return GameConfig()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return GameConfig(**data)

    def reload(self) -> bool:
        """Reload configuration from file, keeping the old one on error."""
        if self._path is None:
            return False

        try:
            new_config = self._load_from_file(self._path)
        except (yaml.YAMLError, ValidationError, TypeError, OSError) as e:
            logger.error(f"Failed to reload game config: {e}")
            return False

        with self._lock:
            self._config = new_config
        logger.info("Game configuration reloaded", extra={"odds": new_config.odds})
        return True

    def start_watching(self) -> None:
        """
        Start watching the configuration file for changes.

        Skipped when the file does not exist or inotify is unavailable.
        """
        if self._path is None:
            raise RuntimeError("Config not loaded. Call load() first.")

        if not self._path.exists():
            logger.info(f"Game config file doesn't exist, skipping file watch: {self._path}")
            return

        try:
            self._observer = Observer()
            handler = ConfigFileHandler(self, self._path)
            self._observer.schedule(handler, str(self._path.parent), recursive=False)
            self._observer.start()
            logger.info(f"Started watching game config file: {self._path}")
        except OSError as e:
            logger.warning(f"File watching not available, using static config: {e}")
            self._observer = None

    def stop_watching(self) -> None:
        """Stop watching (safe to call even if not watching)."""
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=5)
            self._observer = None

    @property
    def is_watching(self) -> bool:
        return self._observer is not None

    @property
    def config(self) -> GameConfig:
        with self._lock:
            if self._config is None:
                raise RuntimeError("Game configuration not loaded")
            return self._config

    def get_config(self) -> GameConfig:
        return self.config


# Process-wide instance loaded at startup
game_config_manager = GameConfigManager()


def get_game_config_provider() -> IGameConfigProvider:
    """FastAPI dependency returning the shared game config holder."""
    return game_config_manager
