"""Signals with weakly held listeners."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Optional


class SignalListener:
    """A listener whose handler receives the emitted data."""

    def __init__(self, handler: Optional[Callable[[Any], Any]]) -> None:
        self._handler = handler

    def emit(self, data: Any = None) -> None:
        """Call the handler with ``data`` if there is one."""
        if self._handler is None:
            return
        self._handler(data)


class StaticSignalListener:
    """A listener owned by its signal, called with an owner and the data."""

    def __init__(self, handler: Callable[[Any, Any], Any], owner: Any) -> None:
        self._handler = handler
        self._owner = owner

    def emit(self, data: Any = None) -> None:
        """Call the handler with the owner and ``data``."""
        self._handler(self._owner, data)


class Signal:
    """Dispatches data to registered listeners.

    Listeners from :meth:`register_listener` are held weakly: dropping the
    returned object unregisters it. Static listeners live as long as the signal.
    """

    def __init__(self) -> None:
        self._listeners: list[weakref.ref[SignalListener]] = []
        self._static_listeners: list[StaticSignalListener] = []

    def emit(self, data: Any = None) -> None:
        """Send ``data`` to every live listener, then to the static ones."""
        listeners = [ref for ref in self._listeners if ref() is not None]
        statics = list(self._static_listeners)

        for ref in listeners:
            # A listener dropped by an earlier handler is skipped.
            listener = ref()
            if listener is None:
                continue
            listener.emit(data)

        for static in statics:
            static.emit(data)

    def register_listener(self, handler: Callable[[Any], Any]) -> SignalListener:
        """Register ``handler``; keep the returned listener to stay registered."""
        listener = SignalListener(handler)
        self._listeners.append(weakref.ref(listener))
        self._listeners = [ref for ref in self._listeners if ref() is not None]
        return listener

    def register_static_listener(self, handler: Callable[[Any, Any], Any], owner: Any) -> None:
        """Register a listener that lives as long as this signal."""
        self._static_listeners.append(StaticSignalListener(handler, owner))