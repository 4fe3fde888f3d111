"""Process-wide registry of named introspection variables.

Variables are published once under a unique name and rendered together as a
single JSON object by ``GET /debug/vars``.
"""
from __future__ import annotations

import sys
from threading import Lock
from typing import Any, Callable, Dict, Optional, Protocol


class Var(Protocol):
    def value(self) -> Any:
        ...


class Func:
    """Adapter publishing the return value of ``fn``."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn

    def value(self) -> Any:
        return self._fn()


class Registry:
    def __init__(self) -> None:
        self._lock = Lock()
        self._vars: Dict[str, Var] = {}

    def publish(self, name: str, var: Var) -> None:
        with self._lock:
            if name in self._vars:
                raise ValueError(f"Reuse of exported var name: {name}")
            self._vars[name] = var

    def get(self, name: str) -> Optional[Var]:
        with self._lock:
            return self._vars.get(name)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            items = sorted(self._vars.items())
        return {name: var.value() for name, var in items}


def new_registry() -> Registry:
    """Return a registry holding the standard ``cmdline`` variable."""
    registry = Registry()
    registry.publish("cmdline", Func(lambda: list(sys.argv)))
    return registry


_REGISTRY = new_registry()


def default_registry() -> Registry:
    return _REGISTRY


def publish(name: str, var: Var) -> None:
    _REGISTRY.publish(name, var)


def get(name: str) -> Optional[Var]:
    return _REGISTRY.get(name)


def snapshot() -> Dict[str, Any]:
    return _REGISTRY.snapshot()

