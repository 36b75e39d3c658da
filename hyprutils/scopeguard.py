"""A context manager that runs a function when its block is left."""

from __future__ import annotations

from types import TracebackType
from typing import Callable, Optional


class ScopeGuard:
    """Run ``fn`` when the ``with`` block exits, however it exits."""

    def __init__(self, fn: Optional[Callable[[], object]]) -> None:
        self._fn = fn

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if self._fn is not None:
            self._fn()
        return False