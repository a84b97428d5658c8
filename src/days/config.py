"""Configuration management for days."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "days.conf"
DEFAULT_EVENTS_FILE = "events.csv"


class ConfigError(Exception):
    """Configuration could not be resolved."""


def home_directory() -> Path:
    """Resolve the user's home directory from HOME, falling back to USERPROFILE."""
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    # HOME not found, maybe this is Windows?
    profile = os.environ.get("USERPROFILE")
    if profile:
        return Path(profile)
    raise ConfigError("Unable to determine home directory")


def days_home() -> Path:
    """Data directory: $DAYS_HOME, or ~/.days."""
    override = os.environ.get("DAYS_HOME")
    if override:
        return Path(override).expanduser()
    return home_directory() / ".days"


@dataclass
class Config:
    """days configuration."""

    data_dir: Path
    events_file: str = DEFAULT_EVENTS_FILE

    @property
    def config_file(self) -> Path:
        return self.data_dir / CONFIG_FILENAME

    @property
    def events_path(self) -> Path:
        """Absolute path of the events CSV. Relative names live in data_dir."""
        path = Path(self.events_file).expanduser()
        if path.is_absolute():
            return path
        return self.data_dir / path


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(data_dir: Path | None = None) -> Config:
    """Load configuration from days.conf in the data directory."""
    config = Config(data_dir=data_dir or days_home())

    if not config.config_file.exists():
        return config

    for line in config.config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "events_file":
                if value:
                    config.events_file = value
            case _:
                logger.warning(f"Unknown key in {config.config_file}: {key}")

    return config
