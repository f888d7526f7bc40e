"""Per-rule, per-file context object passed to every rule."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from textguard.constants import Severity
from textguard.errors import RuleMisuseError
from textguard.fixer import RuleFixer
from textguard.rule_error import RuleError
from textguard.severity import get_severity, parse_severity
from textguard.source import SourceCode


@dataclass(frozen=True, slots=True)
class ReportedMessage:
    """One ``report()`` call, as handed to the driver's report sink."""

    rule_id: str
    node: Any
    severity: Severity
    rule_error: Any


ReportCallback = Callable[[ReportedMessage], None]


def _payload_severity(payload: Any) -> Any:
    if isinstance(payload, Mapping):
        return payload.get("severity")
    return getattr(payload, "severity", None)


class RuleContext:
    """Facade binding reporting, source access and fix commands for one rule run.

    Created by the driver once per (rule, file) pair and discarded afterwards.
    The severity is read from ``rule_config`` once, here; ``syntax`` is read
    from the source every time it is accessed.
    """

    RuleError = RuleError

    def __init__(
        self,
        rule_id: str,
        source_code: SourceCode,
        report: ReportCallback,
        config: Any,
        rule_config: Any,
    ) -> None:
        self._rule_id: str = rule_id
        self._source_code: SourceCode = source_code
        self._report: ReportCallback = report
        self._config: Any = config
        self._severity: Severity = get_severity(rule_config)
        self.fixer: RuleFixer = RuleFixer()
        self.get_file_path: Callable[[], Path | None] = source_code.get_file_path
        self.get_source: Callable[[], str] = source_code.get_source

    @property
    def id(self) -> str:
        return self._rule_id

    @property
    def config(self) -> Any:
        return self._config

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def syntax(self) -> MappingProxyType[str, str]:
        return self._source_code.get_syntax()

    def report(self, node: Any, rule_error: Any) -> None:
        """Report a problem found at ``node``.

        A :class:`RuleError` is reported at the rule's configured severity. Any
        other payload may carry its own ``severity`` (name or 0/1/2 ordinal)
        for this one message and otherwise defaults to ERROR.

        Raises:
            RuleMisuseError: If a RuleError is passed as ``node``, or the
                payload carries a severity that is not recognized.
        """
        if isinstance(node, RuleError):
            raise RuleMisuseError("should be `report(node, rule_error)`")
        if isinstance(rule_error, RuleError):
            severity: Severity = self._severity
        else:
            own: Any = _payload_severity(rule_error)
            if own is None:
                severity = Severity.ERROR
            else:
                try:
                    severity = parse_severity(own)
                except ValueError as e:
                    raise RuleMisuseError(f"{self._rule_id}: {e}") from e
        self._report(
            ReportedMessage(
                rule_id=self._rule_id,
                node=node,
                severity=severity,
                rule_error=rule_error,
            )
        )
