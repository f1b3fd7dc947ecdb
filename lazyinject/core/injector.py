"""
Asynchronous dependency injection container.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Mapping
from typing import Any

from lazyinject.logging_config import get_logger

from .cells import Cell, Deferred, EagerCell, LazyCell
from .names import parse_dependency_names

logger = get_logger(__name__)


class Injector:
    """Dependency injection container keyed by name.

    Usage:
        injector = Injector()
        injector.instance("config", {"dsn": "sqlite://"})
        injector.factory("db", lambda config: connect(config["dsn"]))
        rows = await injector.invoke(lambda db: db.fetch_all())

    Factories run lazily, at most once, and their results are shared by
    every consumer. Callables declare dependencies through their
    positional parameter names.
    """

    def __init__(self) -> None:
        self._cells: dict[str, Cell] = {}

    def instance(self, name: str, value: Any) -> None:
        """Register a ready-made value.

        Args:
            name: Dependency name
            value: Value to inject (stored as-is, even if callable)
        """
        _check_name(name)
        self._cells[name] = EagerCell(name, value)
        logger.debug("instance_registered", name=name)

    def factory(
        self,
        name: str,
        producer: Callable[..., Any],
        locals: Mapping[str, Any] | None = None,
    ) -> None:
        """Register a lazily produced singleton.

        The producer is invoked through ``invoke`` the first time the name
        is awaited, with ``locals`` as captured here. Its signature is
        checked now so a malformed producer fails at registration.

        Args:
            name: Dependency name
            producer: Callable whose parameters are dependency names; may
                return a plain value or an awaitable
            locals: Optional overrides for the producer's own dependencies

        Raises:
            MalformedSignatureError: If the producer's parameters cannot be
                mapped to dependency names
        """
        _check_name(name)
        parse_dependency_names(producer)
        self._cells[name] = LazyCell(name, lambda: self.invoke(producer, locals))
        logger.debug("factory_registered", name=name)

    def get(self, name: str) -> Deferred:
        """Get an awaitable handle on the value registered under ``name``.

        Calling ``get`` does not start production; awaiting the handle
        does. Awaiting the handle of an unregistered name raises
        ``UnresolvedDependencyError``.
        """
        return Deferred(name, self._cells.get(name))

    def has(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self._cells

    async def invoke(
        self,
        fn: Callable[..., Any],
        locals: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call ``fn`` with its dependencies resolved.

        Args:
            fn: Callable whose parameters are dependency names
            locals: Values that take precedence over the registry for this
                call only; presence of the key counts, not truthiness

        Returns:
            Return value of ``fn``, awaited if it is awaitable

        Raises:
            MalformedSignatureError: Before resolution, for unsupported
                signatures
            UnresolvedDependencyError: If a dependency is not registered
        """
        names = parse_dependency_names(fn)
        locals = locals or {}

        args: list[Any] = []
        pending: dict[int, Deferred] = {}
        for index, name in enumerate(names):
            if name in locals:
                args.append(locals[name])
            else:
                args.append(None)
                pending[index] = self.get(name)

        if pending:
            values = await asyncio.gather(*pending.values())
            for index, value in zip(pending, values):
                args[index] = value

        result = fn(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    def __repr__(self) -> str:
        return f"<Injector names={sorted(self._cells)}>"


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")
