"""Normalize an extension's exports to one canonical callable."""
from __future__ import annotations

from collections.abc import Callable
from types import ModuleType
from typing import Any


def module_interop(exports: Any, *, member: str) -> Callable[..., Any]:
    """Return the callable an extension module exposes.

    Accepted shapes, in order:

    * a plain callable (not a module),
    * a module or object whose ``default`` attribute is callable,
    * a module or object whose ``member`` attribute is callable.

    Raises:
        TypeError: If none of the shapes match.
    """
    if callable(exports) and not isinstance(exports, (ModuleType, type)):
        return exports

    default: Any = getattr(exports, "default", None)
    if callable(default):
        return default

    named: Any = getattr(exports, member, None)
    if callable(named):
        return named

    label: str = getattr(exports, "__name__", type(exports).__name__)
    raise TypeError(
        f"{label} does not export a callable: expected `default` or `{member}`"
    )
