"""Notelog configuration management."""

import json
import logging
import os
from pathlib import Path
from typing import Callable, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .log import MessageLog

logger = logging.getLogger(__name__)

# Config stores terminators by name so the JSON file stays readable
NEWLINE_NAMES: Dict[str, str] = {"lf": "\n", "crlf": "\r\n"}


class Config(BaseModel):
    """Notelog configuration."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
    )

    default_prefix: str = ""
    newline: Optional[Literal["lf", "crlf"]] = None  # None = host default
    color: bool = True

    def resolved_newline(self) -> Optional[str]:
        """Terminator to hand to MessageLog, None to let it pick the host's."""
        if self.newline is None:
            return None
        return NEWLINE_NAMES[self.newline]


def get_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/notelog/config.json``, or under ``~/.config`` when unset."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_config) / "notelog" / "config.json"


def load_config(path: Optional[Path] = None) -> Config:
    """Load Notelog configuration from JSON file.

    Args:
        path: Path to config.json file. If None, uses default path

    Returns:
        Config object with loaded settings. Returns default config if the file
        doesn't exist or can't be parsed.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Config.model_validate(data)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return Config()
    except (OSError, ValidationError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return Config()


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """Save Notelog configuration to JSON file.

    Args:
        config: Config object to save
        path: Path to config.json file. If None, uses default path

    Raises:
        OSError: If file cannot be written
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    # Unset newline is left out so the host default applies
    config_data = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_data, f, indent=2)


def update_config(path: Optional[Path], mutator: Callable[[Config], None]) -> Config:
    """Load the config, apply ``mutator`` to it and save the result.

    The mutated config is validated again before saving.

    Returns:
        The saved config

    Raises:
        ValidationError: If the mutator left the config in an invalid state
    """
    config = load_config(path)
    mutator(config)
    config = Config.model_validate(config.model_dump())
    save_config(config, path)
    return config


def set_default_prefix(prefix: str, path: Optional[Path] = None) -> None:
    """Set the prefix new logs tag their messages with.

    Args:
        prefix: Prefix string, empty to disable the tag
        path: Path to config.json file. If None, uses default path
    """
    update_config(path, lambda cfg: setattr(cfg, "default_prefix", prefix))


def set_newline(newline: Optional[str], path: Optional[Path] = None) -> None:
    """Set the line terminator used when rendering.

    Args:
        newline: "lf", "crlf", or None for the host default
        path: Path to config.json file. If None, uses default path
    """
    update_config(path, lambda cfg: setattr(cfg, "newline", newline))


def create_log(config: Optional[Config] = None) -> MessageLog:
    """Build a MessageLog from configuration.

    Args:
        config: Config to use. If None, loads it from the default path
    """
    if config is None:
        config = load_config()
    return MessageLog(prefix=config.default_prefix, newline=config.resolved_newline())
