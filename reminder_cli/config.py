"""Configuration for the reminder tracker."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import StorageUnavailable

STORAGE_DIR_NAME = "rm"
STORE_FILE_NAME = "current"
CONFIG_FILE_NAME = "config.toml"


def resolve_home() -> Path:
    """Return the user's home directory, or raise StorageUnavailable."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageUnavailable(f"Can't find current user information. {e}") from e


@dataclass
class AppConfig:
    """Settings for the reminder tracker."""
    storage_dir: Path
    store_file: str = STORE_FILE_NAME
    prompt: str = "> "
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.storage_dir, str):
            self.storage_dir = Path(self.storage_dir).expanduser()

    @property
    def store_path(self) -> Path:
        return self.storage_dir / self.store_file

    @classmethod
    def from_dict(cls, settings: dict, default_storage_dir: Path) -> "AppConfig":
        """Create an AppConfig from a dictionary."""
        store_file = settings.get("store_file", STORE_FILE_NAME)
        if not isinstance(store_file, str) or not store_file or "/" in store_file:
            raise ValueError(f"Invalid 'store_file' value: {store_file!r}")

        for key in ("storage_dir", "prompt", "log_level"):
            if key in settings and not isinstance(settings[key], str):
                raise ValueError(f"Invalid '{key}' value: {settings[key]!r}")

        return cls(
            storage_dir=settings.get("storage_dir", default_storage_dir),
            store_file=store_file,
            prompt=settings.get("prompt", "> "),
            log_level=settings.get("log_level", "WARNING").upper(),
        )


def load_config_file(config_file: Path) -> dict:
    """Load and parse a TOML configuration file."""
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, "rb") as f:
        return tomllib.load(f)


class ConfigManager:
    """
    Resolves the storage location and optional settings file.

    Without a settings file the defaults are used: reminders live in
    ``~/rm/current``.
    """

    def __init__(self, home_dir: Optional[Path] = None):
        self.home_dir = Path(home_dir) if home_dir else resolve_home()
        self.default_storage_dir = self.home_dir / STORAGE_DIR_NAME
        self.config_file = self.default_storage_dir / CONFIG_FILE_NAME
        self.config = AppConfig(storage_dir=self.default_storage_dir)

    def load_config(self) -> AppConfig:
        """
        Load settings from the config file if there is one.

        A malformed file is reported and the defaults are kept.
        """
        if not self.config_file.exists():
            return self.config

        try:
            data = load_config_file(self.config_file)
            self.config = AppConfig.from_dict(data, self.default_storage_dir)
        except (tomllib.TOMLDecodeError, ValueError, OSError) as e:
            print(f"Warning: ignoring {self.config_file} :: {e}")
        return self.config
