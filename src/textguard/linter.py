"""Lint orchestrator: loads rules, runs them per file, collects messages."""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from textguard.constants import RULE_MEMBER, RULE_PACKAGE_PREFIX, Severity
from textguard.extensions.loader import LoadedExtension, load_extension
from textguard.extensions.resolver import (
    Resolution,
    ResolvedPath,
    SearchContext,
    resolve_extension,
)
from textguard.fixer import FixCommand
from textguard.formatting import Formatter, lint_formatters
from textguard.results import LintMessage, LintResult, has_errors
from textguard.rule_context import ReportedMessage, RuleContext
from textguard.rule_error import RuleError
from textguard.scanner import scan_files
from textguard.severity import get_rule_options
from textguard.source import TextSourceCode
from textguard.types import TextGuardConfig

logger: logging.Logger = logging.getLogger(__name__)

BUNDLED_RULES_DIR: Final[Path] = Path(__file__).resolve().parent / "rules"

Handler = Callable[[Any], None]


@dataclass(frozen=True, slots=True)
class LoadedRule:
    rule_id: str
    create: Callable[..., Any]
    rule_config: Any


@dataclass(frozen=True, slots=True)
class LintRun:
    results: tuple[LintResult, ...]
    files_checked: int
    exit_code: int


def rule_search_context(*, cwd: Path | None = None) -> SearchContext:
    return SearchContext(
        bundled_dir=BUNDLED_RULES_DIR,
        package_prefix=RULE_PACKAGE_PREFIX,
        cwd=cwd,
    )


def resolve_rule(name: str, *, cwd: Path | None = None) -> str | None:
    """Return the path a rule would be loaded from, or None, without importing it."""
    resolution: Resolution = resolve_extension(name, rule_search_context(cwd=cwd))
    if isinstance(resolution, ResolvedPath):
        return str(resolution.path)
    return None


async def load_rules(*, config: TextGuardConfig, cwd: Path | None = None) -> list[LoadedRule]:
    """Load every rule that is not OFF, concurrently.

    Raises:
        ExtensionLoadError: If any enabled rule cannot be loaded.
    """
    names: tuple[str, ...] = config.enabled_rules()
    context: SearchContext = rule_search_context(cwd=cwd)
    loaded: list[LoadedExtension] = list(
        await asyncio.gather(
            *(
                load_extension(resolve_extension(name, context), member=RULE_MEMBER)
                for name in names
            )
        )
    )
    return [
        LoadedRule(
            rule_id=name,
            create=extension.function,
            rule_config=config.get_rule_config(name),
        )
        for name, extension in zip(names, loaded, strict=True)
    ]


def _payload_field(payload: Any, key: str) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(key)
    value: Any = getattr(payload, key, None)
    # str.index and friends are not payload fields
    return None if callable(value) else value


def _node_start(node: Any) -> int:
    node_range: Any = _payload_field(node, "range")
    if node_range is None:
        return 0
    return int(node_range[0])


def _to_lint_message(
    *,
    reported: ReportedMessage,
    source: TextSourceCode,
) -> LintMessage:
    payload: Any = reported.rule_error
    start: int = _node_start(reported.node)

    if isinstance(payload, RuleError):
        message: str = payload.message
    else:
        raw_message: Any = _payload_field(payload, "message")
        message = str(raw_message) if raw_message is not None else str(payload)

    index: int = start
    relative_index: Any = _payload_field(payload, "index")
    relative_line: Any = _payload_field(payload, "line")
    if relative_index is not None:
        index = start + int(relative_index)
    elif relative_line is not None:
        node_line, node_column = source.index_to_position(start)
        relative_column: int = int(_payload_field(payload, "column") or 0)
        line: int = node_line + int(relative_line)
        column: int = (
            node_column + relative_column if int(relative_line) == 0 else relative_column + 1
        )
        index = source.position_to_index(line, column)

    fix: Any = _payload_field(payload, "fix")
    if fix is not None and not isinstance(fix, FixCommand):
        fix = FixCommand(range=tuple(fix["range"]), text=fix["text"])

    line_no, column_no = source.index_to_position(index)
    return LintMessage(
        rule_id=reported.rule_id,
        message=message,
        index=index,
        line=line_no,
        column=column_no,
        severity=reported.severity,
        fix=fix,
    )


def lint_source(
    *,
    source: TextSourceCode,
    rules: list[LoadedRule],
    config: TextGuardConfig,
) -> tuple[LintMessage, ...]:
    """Run loaded rules over one source and return its messages sorted by position."""
    reported: list[ReportedMessage] = []
    dispatch: list[Mapping[str, Handler]] = []

    for rule in rules:
        context: RuleContext = RuleContext(
            rule.rule_id,
            source,
            reported.append,
            config,
            rule.rule_config,
        )
        handlers: Mapping[str, Handler] | None = rule.create(
            context, get_rule_options(rule.rule_config)
        )
        dispatch.append(handlers or {})

    for node in source.nodes():
        for handlers in dispatch:
            handler: Handler | None = handlers.get(node.type)
            if handler is not None:
                handler(node)

    messages: list[LintMessage] = [
        _to_lint_message(reported=item, source=source)
        for item in reported
        if item.severity != Severity.OFF
    ]
    messages.sort(key=lambda m: (m.line, m.column, m.rule_id))
    return tuple(messages)


async def lint_paths(
    *,
    paths: tuple[Path, ...],
    config: TextGuardConfig,
    cwd: Path | None = None,
) -> LintRun:
    started: float = time.perf_counter()
    files: list[Path] = scan_files(paths=paths, config=config)
    logger.info("Found %d files", len(files))

    rules: list[LoadedRule] = await load_rules(config=config, cwd=cwd)
    logger.info("Loaded %d rules", len(rules))

    results: list[LintResult] = []
    for file in files:
        logger.debug("Checking %s", file)
        source: TextSourceCode = TextSourceCode.from_file(file)
        messages: tuple[LintMessage, ...] = lint_source(
            source=source, rules=rules, config=config
        )
        logger.debug("%s: %d diagnostics", file, len(messages))
        results.append(LintResult(file_path=file, messages=messages))

    logger.info("Completed in %.3fs", time.perf_counter() - started)
    return LintRun(
        results=tuple(results),
        files_checked=len(files),
        exit_code=1 if has_errors(results) else 0,
    )


async def format_results(*, run: LintRun, config: TextGuardConfig) -> str:
    formatter: Formatter = await lint_formatters.load_formatter(config.formatter_config())
    return formatter.format(run.results)
