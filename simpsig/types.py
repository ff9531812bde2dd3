"""
SimpSig Signal Type Helpers
===========================

Predicates for telling signals apart from other values. They never raise:
anything that is not a signal simply returns ``False``.
"""

from typing import Any

from .listeners import ListenerRegistry
from .signal import BaseSignal, ComputedSignal, Signal, SignalKind


def is_signal(obj: Any) -> bool:
    """
    Check if an object is a signal produced by this library.

    Example:
        ```python
        from simpsig import create_signal, is_signal

        print(is_signal(create_signal(5)))  # True
        print(is_signal(5))                 # False
        ```
    """
    return isinstance(obj, Signal)


def is_signal_instance(obj: Any) -> bool:
    """
    Check if an object is an internally well-formed signal.

    Stricter than ``is_signal``: the object must also carry a valid ``kind``
    discriminant and own its listener registry and dependants list. A
    subclass that skipped ``Signal.__init__`` passes ``is_signal`` but
    fails here.
    """
    if not isinstance(obj, Signal):
        return False
    if not isinstance(getattr(obj, "kind", None), SignalKind):
        return False
    state = getattr(obj, "__dict__", {})
    return isinstance(state.get("_listeners"), ListenerRegistry) and isinstance(
        state.get("_dependants"), list
    )


def is_base_signal(obj: Any) -> bool:
    return isinstance(obj, BaseSignal)


def is_computed_signal(obj: Any) -> bool:
    return isinstance(obj, ComputedSignal)
