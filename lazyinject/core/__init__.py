"""
Core primitives for lazyinject.
"""

from .cells import CellState, Deferred, EagerCell, LazyCell
from .errors import InjectorError, MalformedSignatureError, UnresolvedDependencyError
from .injector import Injector
from .names import parse_dependency_names, strip_underscores

__all__ = [
    "CellState",
    "Deferred",
    "EagerCell",
    "Injector",
    "InjectorError",
    "LazyCell",
    "MalformedSignatureError",
    "UnresolvedDependencyError",
    "parse_dependency_names",
    "strip_underscores",
]
