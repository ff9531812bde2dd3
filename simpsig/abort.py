"""
SimpSig AbortHandle - External Cancellation
===========================================

A small cancellation handle that listener registrations can be linked to.
Aborting the handle detaches every listener registered with it, at any time,
without touching the signal's value or its other listeners.

Example:
    ```python
    from simpsig import AbortHandle, create_signal

    counter = create_signal(0)
    handle = AbortHandle()
    counter.listen(lambda event: print(event.cur), abort=handle)

    counter.update(lambda n: n + 1)  # prints 1
    handle.abort()
    counter.update(lambda n: n + 1)  # prints nothing
    ```
"""

import logging
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


class AbortHandle:
    """One-shot cancellation handle with abort callbacks."""

    __slots__ = ("_aborted", "_reason", "_callbacks")

    def __init__(self) -> None:
        self._aborted = False
        self._reason: Optional[Any] = None
        self._callbacks: List[Callable[[], None]] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def reason(self) -> Optional[Any]:
        return self._reason

    def abort(self, reason: Optional[Any] = None) -> None:
        """Abort the handle and run its callbacks. Aborting twice is a no-op."""
        if self._aborted:
            return
        self._aborted = True
        self._reason = reason

        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Abort callback %r failed", callback)

    def on_abort(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Run ``callback`` once when the handle aborts.

        Returns a function that detaches the callback again. If the handle is
        already aborted the callback runs immediately.
        """
        if self._aborted:
            try:
                callback()
            except Exception:
                logger.exception("Abort callback %r failed", callback)
            return _noop

        self._callbacks.append(callback)

        def _detach() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass  # already ran or detached

        return _detach

    def __repr__(self) -> str:
        state = "aborted" if self._aborted else "active"
        return f"AbortHandle({state})"


def _noop() -> None:
    pass
