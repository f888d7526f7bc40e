"""Reading the already-resolved severity out of a rule configuration value."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from textguard.constants import SEVERITY_ALIASES, Severity


def parse_severity(value: Any) -> Severity:
    """Convert a severity name, ordinal (0/1/2) or Severity to a Severity.

    Raises:
        ValueError: If the value does not name a known severity.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        severity: Severity | None = SEVERITY_ALIASES.get(value.lower())
        if severity is not None:
            return severity
    elif isinstance(value, int) and not isinstance(value, bool):
        for candidate in Severity:
            if candidate.level == value:
                return candidate
    valid: list[str] = sorted(SEVERITY_ALIASES)
    raise ValueError(f"Unknown severity {value!r}, expected one of {valid} or 0-2")


def get_severity(rule_config: Any) -> Severity:
    """Return the severity a rule runs at given its configuration value.

    ``False``/``None`` disables the rule, ``True`` or an options mapping without
    a ``severity`` key runs it at ERROR, and a severity string or a mapping
    carrying ``severity`` is taken as given.
    """
    if rule_config is None or rule_config is False:
        return Severity.OFF
    if rule_config is True:
        return Severity.ERROR
    if isinstance(rule_config, (str, Severity)):
        return parse_severity(rule_config)
    if isinstance(rule_config, Mapping):
        if "severity" in rule_config:
            return parse_severity(rule_config["severity"])
        return Severity.ERROR
    return Severity.ERROR


def get_rule_options(rule_config: Any) -> dict[str, Any]:
    """Return the rule-specific options, without the ``severity`` key."""
    if isinstance(rule_config, Mapping):
        return {k: v for k, v in rule_config.items() if k != "severity"}
    return {}
