"""
System configuration for StratScope.

One configuration object for the whole program, loaded from YAML:

    generator:     bounds of the random trade data source
    output:        dataset file formatting
    logging:       console/file logging

Lookup order for the config file:
    1. Explicit path passed to SystemConfig.load() / reload_system_config()
    2. STRATSCOPE_CONFIG environment variable
    3. config/system.yaml in the current directory

Missing files are not an error: built-in defaults are used. Values may
reference environment variables with ${VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import yaml

from stratscope.system.log_system import LoggingConfig as LoggerConfig

CONFIG_ENV_VAR = "STRATSCOPE_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/system.yaml")

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

_Section = TypeVar("_Section")


@dataclass
class GeneratorConfig:
    """Bounds for the random trade data source."""

    row_count: int = 100
    min_row_length: int = 1
    max_row_length: int = 1000
    min_profit: float = -1000.0
    max_profit: float = 1000.0
    min_duration: float = 1.0
    max_duration: float = 1200.0


@dataclass
class OutputConfig:
    """Dataset file output settings."""

    float_precision: int = 6  # Significant digits per number (%g style)


@dataclass
class LoggingConfig:
    """Logging section of the system config (plain dataclass mirror of log_system.LoggingConfig)."""

    level: str = "INFO"
    format: str = "console"
    timestamp_format: str = "compact"
    enable_file: bool = True
    file_path: str = "logs/stratscope.log"
    file_level: str = "WARNING"
    file_rotation: bool = True
    max_file_size_mb: int = 10
    backup_count: int = 3

    def to_logger_config(self) -> LoggerConfig:
        """Convert to the pydantic config consumed by LoggerFactory."""
        return LoggerConfig(
            level=self.level.upper(),  # type: ignore[arg-type]
            format=self.format,  # type: ignore[arg-type]
            timestamp_format=self.timestamp_format,  # type: ignore[arg-type]
            enable_file=self.enable_file,
            file_path=Path(self.file_path),
            file_level=self.file_level.upper(),  # type: ignore[arg-type]
            file_rotation=self.file_rotation,
            max_file_size_mb=self.max_file_size_mb,
            backup_count=self.backup_count,
        )


@dataclass
class SystemConfig:
    """Complete system configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "SystemConfig":
        """
        Load configuration from YAML, merged over built-in defaults.

        Args:
            path: Config file path. If None, uses $STRATSCOPE_CONFIG or config/system.yaml.

        Returns:
            SystemConfig instance

        Raises:
            ValueError: If the file is not a mapping or a section is invalid
            yaml.YAMLError: If the file is not valid YAML
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        config_path = Path(path)
        if not config_path.exists():
            return cls()

        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"System config must be a mapping: {config_path}")

        return cls._from_dict(_substitute_env_vars(raw))

    @classmethod
    def _from_dict(cls, config_dict: dict[str, Any]) -> "SystemConfig":
        """Build config from a (possibly partial) dictionary."""
        defaults = {
            "generator": GeneratorConfig().__dict__,
            "output": OutputConfig().__dict__,
            "logging": LoggingConfig().__dict__,
        }
        unknown = set(config_dict) - set(defaults)
        if unknown:
            raise ValueError(f"Unknown config section(s): {', '.join(sorted(map(str, unknown)))}")

        merged = _deep_merge(defaults, config_dict)

        return cls(
            generator=_build_section(GeneratorConfig, "generator", merged["generator"]),
            output=_build_section(OutputConfig, "output", merged["output"]),
            logging=_build_section(LoggingConfig, "logging", merged["logging"]),
        )


def _build_section(section_cls: type[_Section], name: str, values: Any) -> _Section:
    """
    Build one config section, checking keys and value types against its defaults.

    Ints are accepted where a float is expected. Booleans are never accepted as numbers.

    Raises:
        ValueError: If the section is not a mapping, has unknown keys or mistyped values
    """
    if not isinstance(values, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(values).__name__}")

    defaults = section_cls()
    unknown = set(values) - set(defaults.__dict__)
    if unknown:
        raise ValueError(f"Unknown key(s) in '{name}': {', '.join(sorted(map(str, unknown)))}")

    checked: dict[str, Any] = {}
    for key, value in values.items():
        expected = type(getattr(defaults, key))
        if expected is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        elif not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
            raise ValueError(f"{name}.{key} must be {expected.__name__}, got {value!r}")
        checked[key] = value

    return section_cls(**checked)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base. Override wins on conflicts."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _substitute_env_vars(value: Any) -> Any:
    """Replace ${VAR} placeholders with environment values. Undefined variables are left as-is."""
    if isinstance(value, dict):
        return {key: _substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)
    return value


_system_config: SystemConfig | None = None


def get_system_config() -> SystemConfig:
    """Get the system config singleton (loaded on first access)."""
    global _system_config
    if _system_config is None:
        _system_config = SystemConfig.load()
    return _system_config


def reload_system_config(path: Path | str | None = None) -> SystemConfig:
    """Force reload of the system config singleton."""
    global _system_config
    _system_config = SystemConfig.load(path)
    return _system_config
