"""Loading formatters by name and listing the bundled ones."""
from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from textguard.constants import (
    COMPILED_SUFFIX,
    DECLARATION_SUFFIX,
    FIX_FORMATTER_PACKAGE_PREFIX,
    FORMATTER_MEMBER,
    FORMATTER_PACKAGE_PREFIX,
    PRIMARY_SUFFIX,
)
from textguard.errors import ExtensionLoadError
from textguard.extensions.loader import LoadedExtension, load_extension, load_extension_sync
from textguard.extensions.resolver import Resolution, ResolvedPath, SearchContext, resolve_extension
from textguard.types import FormatterConfig

logger: logging.Logger = logging.getLogger(__name__)

_PACKAGE_DIR: Final[Path] = Path(__file__).resolve().parent


@dataclass(frozen=True, slots=True)
class FormatterDetail:
    name: str


class Formatter:
    """A loaded formatter bound to its configuration."""

    def __init__(
        self,
        function: Callable[[Sequence[Any], FormatterConfig], str],
        config: FormatterConfig,
    ) -> None:
        self._function = function
        self._config: FormatterConfig = config

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format(self, results: Sequence[Any]) -> str:
        return self._function(results, self._config)


class FormatterService:
    """Resolves, loads and lists formatters of one family."""

    def __init__(self, *, bundled_dir: Path, package_prefix: str) -> None:
        self.bundled_dir: Path = bundled_dir
        self.package_prefix: str = package_prefix

    def search_context(self, *, cwd: Path | None = None) -> SearchContext:
        return SearchContext(
            bundled_dir=self.bundled_dir,
            package_prefix=self.package_prefix,
            cwd=cwd,
        )

    def resolve(self, name: str, *, cwd: Path | None = None) -> Resolution:
        return resolve_extension(name, self.search_context(cwd=cwd))

    def resolve_formatter(self, name: str, *, cwd: Path | None = None) -> str | None:
        """Check that a formatter can be found, without importing it.

        Returns:
            The path the formatter would be loaded from, or None.
        """
        resolution: Resolution = self.resolve(name, cwd=cwd)
        if isinstance(resolution, ResolvedPath):
            return str(resolution.path)
        return None

    async def load_formatter(self, config: FormatterConfig) -> Formatter:
        """Load the formatter named in ``config``.

        Raises:
            ExtensionLoadError: If the formatter cannot be resolved or loaded.
        """
        name: str = config.formatter_name
        logger.debug("formatter name: %s", name)
        try:
            loaded: LoadedExtension = await load_extension(
                self.resolve(name), member=FORMATTER_MEMBER
            )
        except ExtensionLoadError as e:
            raise ExtensionLoadError(
                name, e.cause, message=f"Could not find formatter {name}"
            ) from e.cause
        logger.debug("use formatter: %s", loaded.path)
        return Formatter(loaded.function, config)

    def create_formatter(self, config: FormatterConfig) -> Callable[[Sequence[Any]], str]:
        """Deprecated synchronous loader; use :meth:`load_formatter`."""
        warnings.warn(
            "create_formatter() is deprecated, use load_formatter()",
            DeprecationWarning,
            stacklevel=2,
        )
        name: str = config.formatter_name
        try:
            loaded: LoadedExtension = load_extension_sync(
                self.resolve(name), member=FORMATTER_MEMBER
            )
        except ExtensionLoadError as e:
            raise ExtensionLoadError(
                name, e.cause, message=f"Could not find formatter {name}"
            ) from e.cause
        return Formatter(loaded.function, config).format

    def get_formatter_list(self) -> list[FormatterDetail]:
        """List bundled formatters, skipping stubs and private modules."""
        names: set[str] = set()
        for file in self.bundled_dir.iterdir():
            if not file.is_file() or file.name.startswith("_"):
                continue
            if file.suffix == DECLARATION_SUFFIX:
                continue
            if file.suffix in (PRIMARY_SUFFIX, COMPILED_SUFFIX):
                names.add(file.stem)
        return [FormatterDetail(name=name) for name in sorted(names)]


lint_formatters: Final[FormatterService] = FormatterService(
    bundled_dir=_PACKAGE_DIR / "formatters",
    package_prefix=FORMATTER_PACKAGE_PREFIX,
)

fix_formatters: Final[FormatterService] = FormatterService(
    bundled_dir=_PACKAGE_DIR / "fix_formatters",
    package_prefix=FIX_FORMATTER_PACKAGE_PREFIX,
)


async def load_formatter(config: FormatterConfig) -> Formatter:
    return await lint_formatters.load_formatter(config)


def resolve_formatter(name: str) -> str | None:
    return lint_formatters.resolve_formatter(name)


def get_formatter_list() -> list[FormatterDetail]:
    return lint_formatters.get_formatter_list()


async def load_fixer_formatter(config: FormatterConfig) -> Formatter:
    return await fix_formatters.load_formatter(config)


def resolve_fixer_formatter(name: str) -> str | None:
    return fix_formatters.resolve_formatter(name)


def get_fixer_formatter_list() -> list[FormatterDetail]:
    return fix_formatters.get_formatter_list()
