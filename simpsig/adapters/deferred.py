"""
Dependent-Future-to-Signal Adapter
==================================

Tracks a sub-signal whose existence depends on another signal's value.

``checker`` maps each value of the base signal to either a signal or
``None``. Whenever it produces a signal, the adapter follows that signal and
republishes each of its changes as ``DeferredStarted(state)``. Until the
first one appears the output reads ``DeferredPending()``.

Two behaviours are deliberate:

- ``started`` is sticky: once a sub-signal has been followed, a later
  ``None`` from the checker leaves the output as it is.
- Listeners on earlier sub-signals are kept when the checker produces a new
  one, so every sub-signal produced so far keeps writing to the output.
  Each activation registers a new listener, even when the checker
  returns a sub-signal it returned before. Pass an ``AbortHandle`` to
  detach all of them at once.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from ..abort import AbortHandle
from ..event import SignalValueChangedEvent
from ..signal import BaseSignal, Signal, create_signal
from ..types import is_signal
from .states import DeferredPending, DeferredStarted, DeferredState

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def create_deferred_signal(
    base: Signal[T],
    checker: Callable[[T], Optional[Signal[U]]],
    abort: Optional[AbortHandle] = None,
) -> BaseSignal[DeferredState]:
    """
    Follow whichever signal ``checker(base.value)`` currently yields.

    Args:
        base: Signal whose value decides which sub-signal to follow.
        checker: Returns a signal to follow, or ``None``.
        abort: Optional handle; aborting it detaches every listener this
            adapter registered. The output keeps its last value.

    Returns:
        A base signal reading ``DeferredPending()`` until a followed
        sub-signal first changes, then ``DeferredStarted(state)``.
    """
    checked = base.computed(checker, key=f"<deferred:{base.key}>")
    output = create_signal(DeferredPending(), key="<deferred>")
    started = False

    def _on_checked(event: SignalValueChangedEvent) -> None:
        nonlocal started
        sub_signal = event.cur
        if not is_signal(sub_signal):
            return

        if started:
            logger.debug("Following additional sub-signal %r", sub_signal)
        started = True

        # fresh callback per activation; the registry drops duplicate callbacks
        def _on_state(event: SignalValueChangedEvent) -> None:
            state = event.cur
            output.update(lambda _: DeferredStarted(state))

        sub_signal.listen(_on_state, abort=abort)

    checked.listen(_on_checked, abort=abort)
    return output
