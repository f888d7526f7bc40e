"""Constants and enums for textguard."""
from __future__ import annotations

from enum import Enum
from typing import Final

__version__: Final[str] = "0.1.0"


class Severity(Enum):
    """Rule severity levels, ordered off < warning < error."""

    OFF = "off"
    WARNING = "warning"
    ERROR = "error"

    @property
    def level(self) -> int:
        return _SEVERITY_ORDER[self]


_SEVERITY_ORDER: Final[dict[Severity, int]] = {
    Severity.OFF: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}

SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "off": Severity.OFF,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
}


class ResolutionStrategy(Enum):
    """How an extension name was turned into a loadable path."""

    FILE = "file"
    CWD = "cwd"
    BUNDLED = "bundled"
    PACKAGE = "package"


# Export member each extension family is called through
FORMATTER_MEMBER: Final[str] = "format"
RULE_MEMBER: Final[str] = "create"


PRIMARY_SUFFIX: Final[str] = ".py"
COMPILED_SUFFIX: Final[str] = ".pyc"
DECLARATION_SUFFIX: Final[str] = ".pyi"

FORMATTER_PACKAGE_PREFIX: Final[str] = "textguard-formatter-"
FIX_FORMATTER_PACKAGE_PREFIX: Final[str] = "textguard-fix-formatter-"
RULE_PACKAGE_PREFIX: Final[str] = "textguard-rule-"

DEFAULT_FORMATTER: Final[str] = "stylish"

DEFAULT_INCLUDES: Final[tuple[str, ...]] = (
    "**/*.md",
    "**/*.txt",
)

DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (
    "**/.*",
    "**/.git/**",
    "**/node_modules/**",
    "**/.venv/**",
    "**/venv/**",
    "build/**",
    "dist/**",
)
