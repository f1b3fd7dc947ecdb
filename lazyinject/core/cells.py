"""
Value holders backing each registered name.

- EagerCell: a value known at registration time
- LazyCell: a producer run at most once, on first observation
- Deferred: the awaitable handle returned by ``Injector.get``
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Generator
from enum import Enum
from typing import Any

from lazyinject.logging_config import get_logger

from .errors import UnresolvedDependencyError

logger = get_logger(__name__)


class CellState(Enum):
    """
    Cell lifecycle states.

    - UNSTARTED: Producer has not been triggered
    - PRODUCING: Producer is running; observers share its future
    - SETTLED: Value available
    - FAILED: Producer raised; the error is replayed to every observer
    """

    UNSTARTED = "unstarted"
    PRODUCING = "producing"
    SETTLED = "settled"
    FAILED = "failed"


class EagerCell:
    """Cell wrapping an already-known value, returned as-is (awaitables included)."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self._value = value

    @property
    def state(self) -> CellState:
        return CellState.SETTLED

    async def resolve(self) -> Any:
        return self._value


class LazyCell:
    """Cell wrapping a producer that runs once, when first observed.

    The first call to ``resolve`` schedules the producer as a task and
    stores it; every later call, concurrent or not, awaits that same task.
    Nothing between the "already started?" check and the assignment of the
    task can suspend, so two observers can never both start production.
    """

    def __init__(self, name: str, producer: Callable[[], Any]):
        self.name = name
        self._producer = producer
        self._future: asyncio.Future[Any] | None = None

    @property
    def state(self) -> CellState:
        future = self._future
        if future is None:
            return CellState.UNSTARTED
        if not future.done():
            return CellState.PRODUCING
        if future.cancelled() or future.exception() is not None:
            return CellState.FAILED
        return CellState.SETTLED

    async def resolve(self) -> Any:
        # Shielded so a cancelled observer leaves production running for the others.
        return await asyncio.shield(self._start())

    def _start(self) -> asyncio.Future[Any]:
        if self._future is None:
            logger.debug("cell_production_started", name=self.name)
            self._future = asyncio.ensure_future(self._produce())
            self._future.add_done_callback(self._on_done)
        return self._future

    async def _produce(self) -> Any:
        result = self._producer()
        if inspect.isawaitable(result):
            result = await result
        return result

    def _on_done(self, future: asyncio.Future[Any]) -> None:
        if not future.cancelled() and future.exception() is None:
            logger.debug("cell_settled", name=self.name)


Cell = EagerCell | LazyCell


class Deferred:
    """Awaitable handle on the eventual value of a name.

    Creating a handle does nothing; awaiting it observes the cell, which
    starts a lazy cell's production on the first observation. A handle may
    be awaited any number of times. A handle for an unregistered name
    raises ``UnresolvedDependencyError`` when awaited.
    """

    __slots__ = ("name", "_cell")

    def __init__(self, name: str, cell: Cell | None):
        self.name = name
        self._cell = cell

    def __await__(self) -> Generator[Any, None, Any]:
        return self._observe().__await__()

    async def _observe(self) -> Any:
        if self._cell is None:
            raise UnresolvedDependencyError(self.name)
        return await self._cell.resolve()

    def __repr__(self) -> str:
        state = self._cell.state.value if self._cell is not None else "unresolved"
        return f"<Deferred {self.name!r} {state}>"
