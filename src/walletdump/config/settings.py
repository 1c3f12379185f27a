"""
Application configuration

Small dataclass based configuration loaded from YAML or JSON.
Record layout constants are deliberately absent: they are fixed by the
wallet format and live in common.constants.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..common.constants import FileConstants
from ..common.enums import OutputFormat
from ..common.exceptions import ConfigurationError

logger = logging.getLogger("walletdump.config")

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class LoggingSettings:
    """Logging settings"""
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_to_file: bool = False
    log_file_max_size: int = FileConstants.LOG_MAX_SIZE
    log_backup_count: int = FileConstants.LOG_BACKUP_COUNT
    performance_logging: bool = False


@dataclass
class OutputSettings:
    """Report output settings"""
    default_format: str = OutputFormat.TEXT.value  # text, json
    show_offsets: bool = False
    show_summary: bool = False


@dataclass
class AppConfig:
    """Main application configuration"""
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    output: OutputSettings = field(default_factory=OutputSettings)

    # Metadata
    config_version: str = "1.0"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.now().isoformat()
        self.updated_at = datetime.now().isoformat()

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> 'AppConfig':
        """Load a configuration file, falling back to defaults"""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_path = Path(config_path)

        if not config_path.exists():
            return cls.default()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)

            data = data or {}
            logging_data = data.get('logging', {})
            output_data = data.get('output', {})

            return cls(
                logging=LoggingSettings(**logging_data) if logging_data else LoggingSettings(),
                output=OutputSettings(**output_data) if output_data else OutputSettings(),
                config_version=data.get('config_version', '1.0'),
                created_at=data.get('created_at'),
                updated_at=data.get('updated_at'),
            )

        except Exception as e:
            logger.warning(f"Failed to load config {config_path}: {e}, using defaults")
            return cls.default()

    def save(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Save the configuration file"""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_path = Path(config_path)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            self.updated_at = datetime.now().isoformat()
            data = asdict(self)

            with open(config_path, 'w', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    yaml.dump(data, f, default_flow_style=False,
                              allow_unicode=True, indent=2)

            return True

        except Exception as e:
            logger.warning(f"Failed to save config {config_path}: {e}")
            return False

    @classmethod
    def default(cls) -> 'AppConfig':
        """Default configuration"""
        return cls()

    @staticmethod
    def get_default_config_path() -> Path:
        """Default configuration file path"""
        return Path.home() / FileConstants.CONFIG_DIR_NAME / FileConstants.DEFAULT_CONFIG_FILE

    def _find_problems(self) -> List[Tuple[str, str]]:
        """(config key, message) for every invalid value"""
        problems = []

        if self.logging.log_level.upper() not in VALID_LOG_LEVELS:
            problems.append(("logging.log_level", f"Invalid log level: {self.logging.log_level}"))

        if self.logging.log_file_max_size <= 0:
            problems.append(("logging.log_file_max_size", "log_file_max_size must be greater than 0"))

        if self.logging.log_backup_count < 0:
            problems.append(("logging.log_backup_count", "log_backup_count must not be negative"))

        valid_formats = [fmt.value for fmt in OutputFormat]
        if self.output.default_format not in valid_formats:
            problems.append(("output.default_format", f"Invalid output format: {self.output.default_format}"))

        return problems

    def validate(self) -> tuple[bool, list]:
        """Validate configuration values"""
        errors = [message for _, message in self._find_problems()]
        return len(errors) == 0, errors

    def ensure_valid(self) -> None:
        """Raise ConfigurationError for the first invalid value"""
        problems = self._find_problems()
        if problems:
            config_key, message = problems[0]
            raise ConfigurationError(message, config_key=config_key)

    def get_summary(self) -> Dict[str, Any]:
        """Flat view used by the `config` command"""
        return {
            'log_level': self.logging.log_level,
            'log_to_file': self.logging.log_to_file,
            'performance_logging': self.logging.performance_logging,
            'default_format': self.output.default_format,
            'show_offsets': self.output.show_offsets,
            'show_summary': self.output.show_summary,
        }


# Global configuration instance
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """Get the global application configuration"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.load()
    return _app_config


def reload_app_config(config_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Reload the global configuration"""
    global _app_config
    _app_config = AppConfig.load(config_path)
    return _app_config
