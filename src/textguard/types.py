"""Common types and dataclasses for textguard."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from textguard.constants import (
    DEFAULT_EXCLUDES,
    DEFAULT_FORMATTER,
    DEFAULT_INCLUDES,
    Severity,
)
from textguard.severity import get_severity


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Configuration handed to a formatter on every ``format`` call.

    ``options`` carries any extra keys through to the formatter untouched.
    """

    formatter_name: str = DEFAULT_FORMATTER
    color: bool = True
    options: MappingProxyType[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True, slots=True)
class TextGuardConfig:
    """Complete textguard configuration."""

    config_path: Path | None = None
    include: tuple[str, ...] = DEFAULT_INCLUDES
    exclude: tuple[str, ...] = DEFAULT_EXCLUDES
    formatter: str = DEFAULT_FORMATTER
    color: bool = True
    rules: MappingProxyType[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get_rule_config(self, rule_name: str) -> Any:
        """Return the already-resolved configuration value for a rule."""
        return self.rules.get(rule_name)

    def get_severity(self, rule_name: str) -> Severity:
        return get_severity(self.get_rule_config(rule_name))

    def enabled_rules(self) -> tuple[str, ...]:
        """Rule names whose severity is not OFF, in configuration order."""
        return tuple(
            name for name in self.rules if self.get_severity(name) != Severity.OFF
        )

    def formatter_config(self) -> FormatterConfig:
        return FormatterConfig(formatter_name=self.formatter, color=self.color)


class ConfigError(Exception):
    """Error during configuration loading or validation."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(message)
