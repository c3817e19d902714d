"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class DatabaseConfig:
    """Database configuration settings."""
    url: str = "sqlite:///database/quizgrader.db"
    echo: bool = False
    pool_size: int = 5


# Base score multiplier per question type value
DEFAULT_TYPE_MULTIPLIERS = {
    "single_choice": 2,
    "fill_blank": 3,
    "short_answer": 5,
    "calculation": 10,
}


@dataclass
class GradingConfig:
    """Scoring rules for answer evaluation.

    ``type_multipliers`` overrides are merged onto the defaults, so a file
    that only changes one type keeps the others.
    """
    type_multipliers: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_TYPE_MULTIPLIERS))
    fill_blank_threshold: float = 0.5    # correct when accuracy >= threshold
    keyword_threshold: float = 0.3       # correct when accuracy > threshold
    min_keyword_length: int = 2

    def __post_init__(self):
        multipliers = dict(DEFAULT_TYPE_MULTIPLIERS)
        for name, multiplier in (self.type_multipliers or {}).items():
            try:
                value = int(multiplier)
            except (TypeError, ValueError):
                value = 0
            if value <= 0:
                raise ConfigurationError(
                    f"Multiplier for question type '{name}' must be a positive integer",
                    {"type": name, "multiplier": multiplier}
                )
            multipliers[name] = value
        self.type_multipliers = multipliers

        for name in ("fill_blank_threshold", "keyword_threshold"):
            try:
                value = float(getattr(self, name))
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"{name} must be a number", {name: getattr(self, name)}) from e
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1]", {name: value})
            setattr(self, name, value)
        if self.min_keyword_length < 1:
            raise ConfigurationError("min_keyword_length must be at least 1")


@dataclass
class PersistenceConfig:
    """Answer record persistence settings."""
    max_concurrent_writes: int = 10

    def __post_init__(self):
        self.max_concurrent_writes = int(self.max_concurrent_writes)
        if self.max_concurrent_writes < 1:
            raise ConfigurationError("max_concurrent_writes must be at least 1")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/quizgrader.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Quiz Grader"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    grading: GradingConfig = field(default_factory=GradingConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        config_data = cls._apply_env_overrides(dict(config_data))

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        sections = {
            'database': DatabaseConfig,
            'grading': GradingConfig,
            'persistence': PersistenceConfig,
            'logging': LoggingConfig,
        }

        try:
            for key, section_cls in sections.items():
                if key in config_data and isinstance(config_data[key], dict):
                    config_data[key] = section_cls(**config_data[key])

            if isinstance(config_data.get('debug'), str):
                config_data['debug'] = config_data['debug'].lower() in ('1', 'true', 'yes')

            return cls(**config_data)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {str(e)}") from e

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'DATABASE_URL': ['database', 'url'],
            'LOG_LEVEL': ['logging', 'level'],
            'MAX_CONCURRENT_WRITES': ['persistence', 'max_concurrent_writes'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
