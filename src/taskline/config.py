"""Configuration management for Taskline."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .utils.datetime import DEFAULT_DISPLAY_FORMAT

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigModel:
    """Global configuration model for Taskline."""

    # File paths
    data_dir: str = "~/.taskline"

    # Display preferences
    display_datetime_format: str = DEFAULT_DISPLAY_FORMAT
    prompt: str = "> "
    no_color: bool = False

    # Minimum fuzzy ratio for "did you mean" suggestions (0-100)
    suggestion_cutoff: int = 70

    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            logger.warning(f"Unknown log_level {self.log_level!r}, using WARNING")
            self.log_level = "WARNING"
        if not 0 <= self.suggestion_cutoff <= 100:
            logger.warning(f"suggestion_cutoff {self.suggestion_cutoff} out of range, using 70")
            self.suggestion_cutoff = 70

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "display_datetime_format": self.display_datetime_format,
            "prompt": self.prompt,
            "no_color": self.no_color,
            "suggestion_cutoff": self.suggestion_cutoff,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        known = set(cls.__dataclass_fields__)
        unknown = [key for key in data if key not in known]
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for Taskline."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w') as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
