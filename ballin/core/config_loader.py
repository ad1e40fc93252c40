"""
ballin Configuration Loader

Configuration management for the interpreter:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates with dot-notation keys

Author: ballin developers
Version: 0.4.2.0
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional
import threading

from ballin.exceptions import ConfigError, ConfigValidationError
from ballin.logger import LogLevel, get_logger


@dataclass
class InterpreterConfig:
    """Interpreter identification and execution settings."""
    name: str = "ballin"
    version: str = "0.4.2.0"
    print_results: bool = False

    @property
    def banner(self) -> str:
        return f"{self.name} interpreter v{self.version}"


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = ">> "
    history_size: int = 1000


@dataclass
class SuggestionConfig:
    """Settings for "did you mean" suggestions on unknown commands."""
    enabled: bool = True
    threshold: float = 70.0  # percent similarity a candidate must exceed


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the interpreter.
    """
    interpreter: InterpreterConfig = field(default_factory=InterpreterConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    suggestion: SuggestionConfig = field(default_factory=SuggestionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.interpreter.name)
        ballin
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be loaded or parsed
            ConfigValidationError: If a setting has an invalid value
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                path=str(path)
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                path=str(path)
            )
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                path=str(path)
            )

        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a JSON object",
                path=str(path)
            )

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        get_logger('config').debug(
            "Configuration loaded",
            context={'path': str(path)}
        )
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        interp_data = self._section(data, 'interpreter')
        if interp_data is not None:
            config.interpreter = InterpreterConfig(
                name=interp_data.get('name', config.interpreter.name),
                version=interp_data.get('version', config.interpreter.version),
                print_results=interp_data.get('print_results', config.interpreter.print_results),
            )

        shell_data = self._section(data, 'shell')
        if shell_data is not None:
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                history_size=shell_data.get('history_size', config.shell.history_size),
            )

        sugg_data = self._section(data, 'suggestion')
        if sugg_data is not None:
            config.suggestion = SuggestionConfig(
                enabled=sugg_data.get('enabled', config.suggestion.enabled),
                threshold=sugg_data.get('threshold', config.suggestion.threshold),
            )

        log_data = self._section(data, 'logging')
        if log_data is not None:
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> Optional[dict[str, Any]]:
        """Return the named section, or None if the file leaves it out."""
        if name not in data:
            return None

        section = data[name]
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration section '{name}' must be a JSON object")
        return section

    @staticmethod
    def _check_types(config: Config) -> None:
        """Reject values of the wrong JSON type."""
        expected = [
            ('interpreter.name', config.interpreter.name, (str,)),
            ('interpreter.version', config.interpreter.version, (str,)),
            ('interpreter.print_results', config.interpreter.print_results, (bool,)),
            ('shell.prompt', config.shell.prompt, (str,)),
            ('shell.history_size', config.shell.history_size, (int,)),
            ('suggestion.enabled', config.suggestion.enabled, (bool,)),
            ('suggestion.threshold', config.suggestion.threshold, (int, float)),
            ('logging.level', config.logging.level, (str,)),
            ('logging.log_file', config.logging.log_file, (str, type(None))),
            ('logging.console_output', config.logging.console_output, (bool,)),
        ]

        for key, value, types in expected:
            # bool is an int subclass but never a valid number here
            wrong_bool = isinstance(value, bool) and bool not in types
            if wrong_bool or not isinstance(value, types):
                raise ConfigValidationError(
                    f"Invalid type for {key}: {type(value).__name__}",
                    key=key
                )

    @classmethod
    def _validate(cls, config: Config) -> None:
        """Reject settings the interpreter cannot run with."""
        cls._check_types(config)
        config.suggestion.threshold = float(config.suggestion.threshold)

        if not 0 <= config.suggestion.threshold <= 100:
            raise ConfigValidationError(
                f"Suggestion threshold must be between 0 and 100, got {config.suggestion.threshold}",
                key='suggestion.threshold'
            )

        if config.shell.history_size <= 0:
            raise ConfigValidationError(
                f"History size must be positive, got {config.shell.history_size}",
                key='shell.history_size'
            )

        try:
            LogLevel.from_name(config.logging.level)
        except ValueError as e:
            raise ConfigValidationError(str(e), key='logging.level')

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'suggestion.threshold')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if hasattr(obj, '__dataclass_fields__') and final_key in obj.__dataclass_fields__:
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Drop any loaded settings and return to the defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    f.name: dataclass_to_dict(getattr(obj, f.name))
                    for f in fields(obj)
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
