"""
Dependency name extraction.

A callable declares its dependencies through its positional parameter
names. A parameter wrapped in a single pair of underscores (``_service_``)
resolves to the unwrapped name (``service``), which lets callers shadow a
module-level name without a lint warning.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from .errors import MalformedSignatureError

_UNSUPPORTED_KINDS = {
    inspect.Parameter.VAR_POSITIONAL: "variadic (*args)",
    inspect.Parameter.VAR_KEYWORD: "variadic (**kwargs)",
    inspect.Parameter.KEYWORD_ONLY: "keyword-only",
}


def strip_underscores(identifier: str) -> str:
    """Drop one leading/trailing underscore pair, if both are present."""
    if len(identifier) > 2 and identifier[0] == "_" and identifier[-1] == "_":
        return identifier[1:-1]
    return identifier


def parse_dependency_names(fn: Callable[..., Any]) -> list[str]:
    """Return the dependency names declared by ``fn``, in parameter order.

    Args:
        fn: Function, bound method, class or other callable

    Returns:
        List of dependency names (underscore pairs stripped)

    Raises:
        MalformedSignatureError: If ``fn`` is not callable, cannot be
            introspected, or declares anything but plain positional
            parameters without defaults
    """
    if not callable(fn):
        raise MalformedSignatureError(fn, reason="not callable")

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise MalformedSignatureError(fn, reason=f"not introspectable ({exc})") from exc

    names: list[str] = []
    for param in signature.parameters.values():
        if param.kind in _UNSUPPORTED_KINDS:
            raise MalformedSignatureError(fn, param.name, _UNSUPPORTED_KINDS[param.kind])
        if param.default is not inspect.Parameter.empty:
            raise MalformedSignatureError(fn, param.name, "declared with a default value")
        names.append(strip_underscores(param.name))
    return names
