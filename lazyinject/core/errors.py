"""
Exceptions raised by the injector.

Producer and target failures are not wrapped: the original exception
propagates to every awaiting caller.
"""

from __future__ import annotations

from typing import Any


class InjectorError(Exception):
    """Base class for injector errors."""


class UnresolvedDependencyError(InjectorError, LookupError):
    """Raised when a dependency name has no registration."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        self.message = message or f"No registration for dependency '{name}'"
        super().__init__(self.message)


class MalformedSignatureError(InjectorError, TypeError):
    """Raised when a callable's parameters cannot be mapped to dependency names."""

    def __init__(
        self,
        target: Any,
        parameter: str | None = None,
        reason: str | None = None,
    ):
        self.target = target
        self.parameter = parameter
        self.reason = reason or "unsupported signature"
        label = getattr(target, "__qualname__", None) or repr(target)
        if parameter is not None:
            self.message = f"Cannot inject {label}: parameter '{parameter}' is {self.reason}"
        else:
            self.message = f"Cannot inject {label}: {self.reason}"
        super().__init__(self.message)
