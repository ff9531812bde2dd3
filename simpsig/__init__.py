"""
SimpSig - Simple Signals

A minimal reactive-value primitive: mutable signals that notify listeners on
change, computed signals that recompute synchronously from a parent, and
adapters that expose awaitables and async iterables as signals.
"""

from .abort import AbortHandle
from .adapters import (
    DeferredPending,
    DeferredStarted,
    DeferredState,
    FuturePending,
    FutureSettled,
    FutureState,
    SequenceDone,
    SequenceItem,
    SequenceState,
    create_async_iterator_signal,
    create_deferred_signal,
    create_future_signal,
)
from .event import SignalValueChangedEvent
from .listeners import ListenerEntry, ListenerRegistry
from .signal import BaseSignal, ComputedSignal, Signal, SignalKind, create_signal
from .types import is_base_signal, is_computed_signal, is_signal, is_signal_instance

__version__ = "0.1.0"

__all__ = [
    # Signals
    "Signal",
    "BaseSignal",
    "ComputedSignal",
    "SignalKind",
    "create_signal",
    # Events and listeners
    "SignalValueChangedEvent",
    "ListenerEntry",
    "ListenerRegistry",
    "AbortHandle",
    # Predicates
    "is_signal",
    "is_signal_instance",
    "is_base_signal",
    "is_computed_signal",
    # Adapters
    "create_future_signal",
    "create_async_iterator_signal",
    "create_deferred_signal",
    # Adapter states
    "FuturePending",
    "FutureSettled",
    "FutureState",
    "SequenceItem",
    "SequenceDone",
    "SequenceState",
    "DeferredPending",
    "DeferredStarted",
    "DeferredState",
]
