"""
SimpSig Adapters - Async Sources as Signals
===========================================

Adapters translate the progress of an asynchronous source into synchronous
signal commits:

- ``create_future_signal``: a single awaitable
- ``create_async_iterator_signal``: an async iterable
- ``create_deferred_signal``: a sub-signal chosen by another signal's value
"""

from .deferred import create_deferred_signal
from .future import create_future_signal
from .sequence import create_async_iterator_signal
from .states import (
    DeferredPending,
    DeferredStarted,
    DeferredState,
    FuturePending,
    FutureSettled,
    FutureState,
    SequenceDone,
    SequenceItem,
    SequenceState,
)

__all__ = [
    "create_async_iterator_signal",
    "create_deferred_signal",
    "create_future_signal",
    "DeferredPending",
    "DeferredStarted",
    "DeferredState",
    "FuturePending",
    "FutureSettled",
    "FutureState",
    "SequenceDone",
    "SequenceItem",
    "SequenceState",
]
