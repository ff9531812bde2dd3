"""
SimpSig Listener Registry
=========================

Per-signal pub/sub: an ordered collection of listener entries, each holding
its callback, a ``once`` flag and an optional link to an ``AbortHandle``.

Dispatch is a direct iteration over a snapshot of the entries in
registration order:

- entries removed while a dispatch is running are skipped for the rest of it
- ``once`` entries are removed before their callback runs
- a callback that raises is logged and the remaining listeners still run
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .abort import AbortHandle
from .event import SignalValueChangedEvent

logger = logging.getLogger(__name__)

Listener = Callable[[SignalValueChangedEvent], Any]


@dataclass(eq=False)
class ListenerEntry:
    """A single registration on a ``ListenerRegistry``."""

    callback: Listener
    once: bool = False
    abort: Optional[AbortHandle] = None
    _detach_abort: Optional[Callable[[], None]] = field(default=None, repr=False)


class ListenerRegistry:
    """Ordered listener collection owned by exactly one signal."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: List[ListenerEntry] = []

    def add(
        self,
        callback: Listener,
        once: bool = False,
        abort: Optional[AbortHandle] = None,
    ) -> Callable[[], None]:
        """
        Register ``callback`` and return a function that removes it.

        Registering a callback that is already present keeps the existing
        entry. Registering against an already aborted handle does nothing.
        """
        existing = self._find(callback)
        if existing is not None:
            return lambda: self._discard(existing)

        if abort is not None and abort.aborted:
            return lambda: None

        entry = ListenerEntry(callback, once=once, abort=abort)
        self._entries.append(entry)
        if abort is not None:
            entry._detach_abort = abort.on_abort(lambda: self._discard(entry))

        return lambda: self._discard(entry)

    def remove(self, callback: Listener) -> None:
        """Remove ``callback``; unknown callbacks are ignored."""
        entry = self._find(callback)
        if entry is not None:
            self._discard(entry)

    def dispatch(self, event: SignalValueChangedEvent) -> None:
        for entry in tuple(self._entries):
            if entry not in self._entries:
                continue
            if entry.once:
                self._discard(entry)
            try:
                entry.callback(event)
            except Exception:
                logger.exception(
                    "Listener %r failed while handling %s", entry.callback, event.name
                )

    def _find(self, callback: Listener) -> Optional[ListenerEntry]:
        for entry in self._entries:
            if entry.callback == callback:
                return entry
        return None

    def _discard(self, entry: ListenerEntry) -> None:
        try:
            self._entries.remove(entry)
        except ValueError:
            return
        if entry._detach_abort is not None:
            entry._detach_abort()
            entry._detach_abort = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, callback: object) -> bool:
        return any(entry.callback == callback for entry in self._entries)
