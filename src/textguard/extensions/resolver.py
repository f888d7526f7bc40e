"""Resolve extension names to loadable paths without executing anything."""
from __future__ import annotations

import importlib.util
import logging
from dataclasses import dataclass
from importlib.machinery import ModuleSpec, PathFinder
from pathlib import Path

from textguard.constants import COMPILED_SUFFIX, PRIMARY_SUFFIX, ResolutionStrategy

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchContext:
    """Where and how to look for an extension.

    ``cwd`` defaults to the process working directory at resolution time.
    """

    bundled_dir: Path
    package_prefix: str
    primary_suffix: str = PRIMARY_SUFFIX
    compiled_suffix: str = COMPILED_SUFFIX
    cwd: Path | None = None


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """A loadable location for an extension.

    ``module`` is the dotted import name for PACKAGE resolutions and ``None``
    for everything loaded straight from a file.
    """

    name: str
    path: Path
    strategy: ResolutionStrategy
    module: str | None = None


@dataclass(frozen=True, slots=True)
class NotFound:
    """No resolution strategy matched ``name``."""

    name: str


Resolution = ResolvedPath | NotFound


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def find_module_spec(module_name: str) -> ModuleSpec | None:
    """Locate a module through the import system without importing it.

    The top-level name goes through every finder on ``sys.meta_path``, which
    covers editable installs and other custom finders. Submodules are then
    walked one part at a time with ``PathFinder`` so parent packages are
    never executed.
    """
    parts: list[str] = module_name.split(".")
    if not all(part.isidentifier() for part in parts):
        return None
    try:
        spec: ModuleSpec | None = importlib.util.find_spec(parts[0])
        for part in parts[1:]:
            if spec is None or spec.submodule_search_locations is None:
                return None
            spec = PathFinder.find_spec(part, list(spec.submodule_search_locations))
    except (ImportError, ValueError):
        return None
    return spec


def _module_origin(module_name: str) -> Path | None:
    spec: ModuleSpec | None = find_module_spec(module_name)
    if spec is None or spec.origin is None or not spec.has_location:
        return None
    return Path(spec.origin)


def _package_module_name(prefix: str, name: str) -> str:
    return (prefix + name).replace("-", "_")


def resolve_extension(name: str, context: SearchContext) -> Resolution:
    """Turn an extension name into a path, first match wins.

    1. ``name`` is an existing file as given.
    2. ``name`` relative to the working directory is a file.
    3. A bundled module ``<bundled_dir>/<name><suffix>``, primary suffix first.
    4. An importable module ``<prefix><name>``, then plain ``<name>``.

    Returns:
        The ResolvedPath, or NotFound when nothing matches.
    """
    if not name:
        return NotFound(name=name)

    given: Path = Path(name)
    if _is_file(given):
        logger.debug("Resolved %s as a file path", name)
        return ResolvedPath(name=name, path=given, strategy=ResolutionStrategy.FILE)

    cwd: Path = context.cwd if context.cwd is not None else Path.cwd()
    relative: Path = (cwd / name).resolve()
    if _is_file(relative):
        logger.debug("Resolved %s relative to %s", name, cwd)
        return ResolvedPath(name=name, path=relative, strategy=ResolutionStrategy.CWD)

    for suffix in (context.primary_suffix, context.compiled_suffix):
        bundled: Path = context.bundled_dir / f"{name}{suffix}"
        if bundled.parent == context.bundled_dir and _is_file(bundled):
            logger.debug("Resolved %s to bundled %s", name, bundled)
            return ResolvedPath(
                name=name, path=bundled, strategy=ResolutionStrategy.BUNDLED
            )

    for module_name in (_package_module_name(context.package_prefix, name), name):
        origin: Path | None = _module_origin(module_name)
        if origin is not None:
            logger.debug("Resolved %s to module %s (%s)", name, module_name, origin)
            return ResolvedPath(
                name=name,
                path=origin,
                strategy=ResolutionStrategy.PACKAGE,
                module=module_name,
            )

    logger.debug("Could not resolve %s", name)
    return NotFound(name=name)
