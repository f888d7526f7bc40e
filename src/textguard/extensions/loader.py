"""The single entry point through which extension code is executed."""
from __future__ import annotations

import asyncio
import hashlib
import importlib
import importlib.util
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from importlib.machinery import ModuleSpec, SourceFileLoader
from pathlib import Path
from types import ModuleType
from typing import Any

from textguard.errors import ExtensionLoadError
from textguard.extensions.interop import module_interop
from textguard.extensions.resolver import NotFound, Resolution, ResolvedPath

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedExtension:
    """An extension reduced to its canonical callable."""

    name: str
    path: Path
    function: Callable[..., Any]


def _file_module_name(path: Path) -> str:
    digest: str = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    return f"_textguard_ext_{path.stem.replace('-', '_')}_{digest}"


def _exec_file(path: Path) -> ModuleType:
    path = path.resolve()
    module_name: str = _file_module_name(path)
    spec: ModuleSpec | None = importlib.util.spec_from_file_location(module_name, path)
    if spec is None:
        # Unrecognized suffix: treat the file as Python source.
        spec = importlib.util.spec_from_file_location(
            module_name, path, loader=SourceFileLoader(module_name, str(path))
        )
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot create an import spec for {path}")

    module: ModuleType = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def _import(resolved: ResolvedPath) -> ModuleType:
    if resolved.module is not None:
        return importlib.import_module(resolved.module)
    return _exec_file(resolved.path)


def _load(resolution: Resolution, member: str) -> LoadedExtension:
    if isinstance(resolution, NotFound):
        raise ExtensionLoadError(
            resolution.name,
            LookupError(f"No extension named {resolution.name!r} could be resolved"),
        )
    logger.debug("Loading %s from %s", resolution.name, resolution.path)
    try:
        exports: ModuleType = _import(resolution)
        function: Callable[..., Any] = module_interop(exports, member=member)
    except (Exception, SystemExit) as e:
        raise ExtensionLoadError(resolution.name, e) from e
    return LoadedExtension(name=resolution.name, path=resolution.path, function=function)


async def load_extension(resolution: Resolution, *, member: str) -> LoadedExtension:
    """Import a resolved extension and normalize its export shape.

    The module body runs in a worker thread; the caller is suspended until it
    finishes. File resolutions are not cached, so loading the same file twice
    executes it twice; PACKAGE resolutions go through ``import_module`` and
    share the interpreter's module cache.

    Raises:
        ExtensionLoadError: If ``resolution`` is NotFound, or importing or
            normalizing the module failed.
    """
    return await asyncio.to_thread(_load, resolution, member)


def load_extension_sync(resolution: Resolution, *, member: str) -> LoadedExtension:
    """Blocking variant of :func:`load_extension` for synchronous callers."""
    return _load(resolution, member)
