"""Configuration loading and validation for textguard."""
from __future__ import annotations

import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Any

from textguard.constants import DEFAULT_EXCLUDES, DEFAULT_FORMATTER, DEFAULT_INCLUDES
from textguard.severity import get_severity
from textguard.types import ConfigError, TextGuardConfig


class ConfigLoader:
    """Loads and validates textguard configuration."""

    @staticmethod
    def find_config_file(start_path: Path | None = None) -> Path | None:
        """
        Find pyproject.toml by walking up from start_path.

        Args:
            start_path: Directory to start searching from. Defaults to cwd.

        Returns:
            Path to pyproject.toml if found, None otherwise.
        """
        if start_path is None:
            start_path = Path.cwd()

        start_path = start_path.resolve()

        for directory in [start_path, *start_path.parents]:
            config_path: Path = directory / "pyproject.toml"
            if config_path.is_file():
                return config_path

        return None

    @staticmethod
    def load(path: Path | None = None) -> TextGuardConfig:
        """
        Load configuration from pyproject.toml.

        Args:
            path: Explicit path to pyproject.toml. If None, searches upward.

        Returns:
            Validated TextGuardConfig instance.

        Raises:
            ConfigError: If configuration is invalid.
        """
        if path is None:
            path = ConfigLoader.find_config_file()

        if path is None:
            return TextGuardConfig()

        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", path=path) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=path) from e

        tool_config: dict[str, Any] = data.get("tool", {}).get("textguard", {})

        return ConfigLoader._parse_config(tool_config, config_path=path)

    @staticmethod
    def _parse_config(
        data: dict[str, Any],
        *,
        config_path: Path | None = None,
    ) -> TextGuardConfig:
        """Parse and validate configuration dictionary."""
        errors: list[str] = []

        include: tuple[str, ...] = ConfigLoader._parse_patterns(
            data, "include", DEFAULT_INCLUDES, errors
        )
        exclude: tuple[str, ...] = ConfigLoader._parse_patterns(
            data, "exclude", DEFAULT_EXCLUDES, errors
        )

        formatter: str = data.get("formatter", DEFAULT_FORMATTER)
        if not isinstance(formatter, str) or not formatter:
            errors.append("formatter must be a non-empty string")
            formatter = DEFAULT_FORMATTER

        color: bool = data.get("color", True)
        if not isinstance(color, bool):
            errors.append("color must be a boolean")
            color = True

        rules: dict[str, Any] = ConfigLoader._parse_rules(data.get("rules", {}), errors)

        if errors:
            error_msg: str = "Configuration errors:\n" + "\n".join(
                f"  - {e}" for e in errors
            )
            raise ConfigError(error_msg, path=config_path)

        return TextGuardConfig(
            config_path=config_path,
            include=include,
            exclude=exclude,
            formatter=formatter,
            color=color,
            rules=MappingProxyType(rules),
        )

    @staticmethod
    def _parse_patterns(
        data: dict[str, Any],
        key: str,
        default: tuple[str, ...],
        errors: list[str],
    ) -> tuple[str, ...]:
        raw: Any = data.get(key, default)
        if isinstance(raw, list) and all(isinstance(p, str) for p in raw):
            return tuple(raw)
        if isinstance(raw, tuple):
            return raw
        errors.append(f"{key} must be a list of strings, got {type(raw).__name__}")
        return default

    @staticmethod
    def _parse_rules(data: Any, errors: list[str]) -> dict[str, Any]:
        """Validate rule entries; values are kept as given for the rule to read."""
        if not isinstance(data, dict):
            errors.append("rules must be a table")
            return {}

        rules: dict[str, Any] = {}
        for name, value in data.items():
            if not isinstance(value, (bool, str, dict)):
                errors.append(
                    f"rules.{name} must be a boolean, severity or table, "
                    f"got {type(value).__name__}"
                )
                continue
            try:
                get_severity(value)
            except ValueError as e:
                errors.append(f"rules.{name}: {e}")
                continue
            rules[name] = MappingProxyType(value) if isinstance(value, dict) else value
        return rules


def load_config(path: Path | None = None) -> TextGuardConfig:
    """
    Convenience function to load configuration.

    Args:
        path: Optional explicit path to pyproject.toml.

    Returns:
        Validated configuration.
    """
    return ConfigLoader.load(path)
