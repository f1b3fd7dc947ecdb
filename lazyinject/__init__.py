"""
lazyinject package.

A small asyncio dependency-injection container:
- Registry of named, lazily produced singletons
- Resolution of a callable's parameters by name
- Structured logging and environment-driven settings
"""

from lazyinject.core import (
    Deferred,
    Injector,
    InjectorError,
    MalformedSignatureError,
    UnresolvedDependencyError,
    parse_dependency_names,
)
from lazyinject.logging_config import configure_logging, get_logger
from lazyinject.settings import InjectorSettings

__version__ = "0.1.0"

__all__ = [
    "Deferred",
    "Injector",
    "InjectorError",
    "InjectorSettings",
    "MalformedSignatureError",
    "UnresolvedDependencyError",
    "configure_logging",
    "get_logger",
    "parse_dependency_names",
]
