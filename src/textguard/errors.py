"""Exceptions raised by extension loading and rule invocation."""
from __future__ import annotations


class TextGuardError(Exception):
    """Base class for textguard errors."""


class ExtensionLoadError(TextGuardError):
    """An extension could not be resolved, imported or normalized."""

    def __init__(
        self,
        name: str,
        cause: BaseException | None = None,
        *,
        message: str | None = None,
    ) -> None:
        self.name: str = name
        self.cause: BaseException | None = cause
        text: str = message or f"Could not load extension {name}"
        if cause is not None:
            text = f"{text}\n{cause}"
        super().__init__(text)


class InvalidFixError(TextGuardError, ValueError):
    """A fix command was requested with an invalid range or empty insertion."""


class RuleMisuseError(TextGuardError, AssertionError):
    """A rule called the context API incorrectly, e.g. swapped report() arguments."""
