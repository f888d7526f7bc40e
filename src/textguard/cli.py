"""Command-line interface for textguard using Click."""
from __future__ import annotations

import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

import click

from textguard.config import load_config
from textguard.constants import __version__
from textguard.errors import TextGuardError
from textguard.formatting import FormatterDetail, fix_formatters, lint_formatters
from textguard.linter import LintRun, format_results, lint_paths
from textguard.types import ConfigError, TextGuardConfig


def format_config_text(*, config: TextGuardConfig) -> str:
    """Format configuration as human-readable text."""
    lines: list[str] = [
        "textguard Configuration",
        "=" * 40,
        "",
        f"Config file: {config.config_path or '(defaults)'}",
        "",
        "File Discovery:",
        f"  Include: {', '.join(config.include)}",
        f"  Exclude: {', '.join(config.exclude[:5])}{'...' if len(config.exclude) > 5 else ''}",
        "",
        "Output:",
        f"  Formatter: {config.formatter}",
        f"  Color: {config.color}",
        "",
        "Rules:",
    ]
    if not config.rules:
        lines.append("  (none)")
    for name in config.rules:
        lines.append(f"  {name}: {config.get_severity(name).value.upper()}")
    return "\n".join(lines)


def format_config_json(*, config: TextGuardConfig) -> str:
    """Format configuration as JSON."""
    data: dict[str, Any] = {
        "config_path": str(config.config_path) if config.config_path else None,
        "include": list(config.include),
        "exclude": list(config.exclude),
        "formatter": config.formatter,
        "color": config.color,
        "rules": {
            name: dict(value) if isinstance(value, MappingProxyType) else value
            for name, value in config.rules.items()
        },
    }
    return json.dumps(data, indent=2)


class ConfigType(click.ParamType):
    """Custom Click parameter type for config path."""

    name: str = "path"

    def convert(
        self,
        value: str | Path | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Path | None:
        if value is None:
            return None
        return Path(value)


CONFIG_TYPE: Final[ConfigType] = ConfigType()


@click.group()
@click.version_option(version=__version__, prog_name="textguard")
@click.option(
    "--config",
    "config_path",
    type=CONFIG_TYPE,
    default=None,
    help="Path to pyproject.toml (default: search upward from current directory)",
)
@click.option("--verbose", is_flag=True, help="Show progress and timing")
@click.option("--debug", is_flag=True, help="Show detailed trace")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    config_path: Path | None,
    verbose: bool,
    debug: bool,
) -> None:
    """textguard - A pluggable linter for prose and plain text."""
    level: int = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    ctx.ensure_object(dict)
    try:
        cfg: TextGuardConfig = load_config(path=config_path)
        ctx.obj["config"] = cfg
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        if e.path:
            click.echo(f"  in: {e.path}", err=True)
        ctx.exit(1)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output configuration as JSON")
@click.pass_context
def config(ctx: click.Context, *, as_json: bool) -> None:
    """Show resolved configuration."""
    cfg: TextGuardConfig = ctx.obj["config"]
    if as_json:
        click.echo(format_config_json(config=cfg))
    else:
        click.echo(format_config_text(config=cfg))


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "formatter_name",
    default=None,
    help="Formatter name, file path or package (overrides config)",
)
@click.option("--color/--no-color", default=None, help="Colorize output (overrides config)")
@click.option(
    "--rule",
    "extra_rules",
    multiple=True,
    help="Enable a rule by name, file path or package (repeatable)",
)
@click.pass_context
def lint(
    ctx: click.Context,
    paths: tuple[Path, ...],
    *,
    formatter_name: str | None,
    color: bool | None,
    extra_rules: tuple[str, ...],
) -> None:
    """Run linting on text files."""
    cfg: TextGuardConfig = ctx.obj["config"]

    overrides: dict[str, Any] = {}
    if formatter_name is not None:
        if lint_formatters.resolve_formatter(formatter_name) is None:
            raise click.BadParameter(
                f"Could not find formatter {formatter_name}", param_hint="'--format'"
            )
        overrides["formatter"] = formatter_name
    if color is not None:
        overrides["color"] = color
    if extra_rules:
        rules: dict[str, Any] = dict(cfg.rules)
        for name in extra_rules:
            rules.setdefault(name, True)
        overrides["rules"] = MappingProxyType(rules)
    if overrides:
        cfg = replace(cfg, **overrides)

    if not paths:
        paths = (Path("."),)

    try:
        run: LintRun = asyncio.run(lint_paths(paths=paths, config=cfg))
        output: str = asyncio.run(format_results(run=run, config=cfg))
    except TextGuardError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
        return

    if output:
        click.echo(output)
    ctx.exit(run.exit_code)


@cli.command()
@click.option("--fix", "for_fix", is_flag=True, help="List fix-result formatters instead")
def formatters(*, for_fix: bool) -> None:
    """List bundled formatters."""
    details: list[FormatterDetail] = (
        fix_formatters.get_formatter_list() if for_fix else lint_formatters.get_formatter_list()
    )
    for detail in details:
        click.echo(detail.name)


def main() -> None:
    """Main entry point for textguard CLI."""
    cli()


if __name__ == "__main__":
    main()
