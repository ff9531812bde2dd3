"""
SimpSig Signal - Reactive Cells and Derived Values
==================================================

This module provides the two signal variants and the propagation step that
ties them together.

- ``BaseSignal``: a mutable cell written through ``update(f)``.
- ``ComputedSignal``: a cell derived from a parent through a mapper and
  recomputed every time the parent commits.

Both share the ``Signal`` interface: a read-only ``value`` property, the
``update`` commit entry point, ``listen``/``unlisten`` and ``computed`` for
chaining further derivations.

Commit and Propagation
----------------------

A write runs in two phases, synchronously, on the caller's turn:

1. **Plan**: snapshot the previous value, run the transform, then walk the
   dependants depth-first (registration order) running each mapper against
   its parent's planned value. Nothing is assigned yet, so a transform or
   mapper that raises leaves every signal in the subtree untouched.
2. **Commit**: in the same depth-first order, assign each planned value and
   dispatch its ``SignalValueChangedEvent`` to the signal's listeners.

A listener may write to a signal while its commit is being dispatched. That
nested write runs to completion, cascading through the subtree with the
newer value, so the outer commit then skips every planned entry whose parent
has been committed again since it was planned. Each signal carries a commit
counter for this.

By the time ``update`` returns every transitively derived signal holds the
mapped value. Derivation graphs are trees (a computed signal has exactly one
parent); making one cyclic by hand is caller error and is not detected.

```python
from simpsig import create_signal

name = create_signal("Foo")
lower = name.computed(str.lower)
print(lower.value)  # "foo"

name.update(lambda _: "Bar")
print(lower.value)  # "bar"
```
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .abort import AbortHandle
from .event import SignalValueChangedEvent
from .listeners import Listener, ListenerRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Transform = Callable[[T], T]
Mapper = Callable[[Any], Any]


class SignalKind(Enum):
    """Discriminant set on every signal at construction."""

    BASE = "base"
    COMPUTED = "computed"


@dataclass(frozen=True)
class Dependant:
    """A derived signal registered on its parent, with the mapper that feeds it."""

    signal: "ComputedSignal[Any]"
    mapper: Mapper


# (signal, parent it is derived from within this plan, planned next value)
_PlannedCommit = Tuple["Signal[Any]", Optional["Signal[Any]"], Any]


def _snapshot(value: Any) -> Any:
    """Shallow copy plain aggregates; keep everything else by reference."""
    if isinstance(value, (list, dict, set)):
        return value.copy()
    return value


class Signal(Generic[T]):
    """
    Common interface of base and computed signals.

    Subclasses only pick the ``kind`` discriminant; the commit, listen and
    propagation machinery lives here.
    """

    kind: SignalKind

    def __init__(self, initial_value: Optional[T] = None, key: Optional[str] = None):
        self._key = key or "<unnamed>"
        self._value = initial_value
        self._listeners = ListenerRegistry()
        self._dependants: List[Dependant] = []
        self._task: Optional[asyncio.Task] = None
        self._version = 0

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> T:
        """The last committed value."""
        return self._value

    @property
    def is_computed(self) -> bool:
        return self.kind is SignalKind.COMPUTED

    @property
    def task(self) -> Optional[asyncio.Task]:
        """Background task an adapter drives this signal from, if any."""
        return self._task

    def update(self, f: Transform) -> None:
        """
        Commit ``f(value)`` as the new value.

        ``f`` is called exactly once. Listeners are notified and every
        dependant is recomputed before this returns. If ``f`` or any mapper
        downstream raises, the exception propagates and nothing commits.
        """
        prv = _snapshot(self._value)
        plan: List[_PlannedCommit] = []
        self._plan(None, f(self._value), plan)

        produced: Dict[int, int] = {}
        for signal, parent, next_value in plan:
            if parent is not None:
                # parent skipped, or re-committed by a listener since we planned
                if produced.get(id(parent)) != parent._version:
                    continue
                prv = _snapshot(signal._value)
            produced[id(signal)] = signal._commit(prv, next_value)

    def listen(
        self,
        callback: Listener,
        once: bool = False,
        abort: Optional[AbortHandle] = None,
    ) -> Callable[[], None]:
        """
        Call ``callback(event)`` on every commit of this signal.

        Args:
            callback: Receives a ``SignalValueChangedEvent``.
            once: Remove the listener after its first call.
            abort: Remove the listener when this handle aborts.

        Returns:
            A function that removes the listener.
        """
        return self._listeners.add(callback, once=once, abort=abort)

    def unlisten(self, callback: Listener) -> None:
        self._listeners.remove(callback)

    def computed(
        self, mapper: Callable[[T], U], key: Optional[str] = None
    ) -> "ComputedSignal[U]":
        """
        Derive a signal whose value is always ``mapper(self.value)``.

        The mapper runs once now to seed the derived value, and again on
        every later commit of this signal. The derived signal stays
        registered for the lifetime of this one.
        """
        derived = ComputedSignal(
            mapper(self._value), key=key or f"<computed:{self._key}>"
        )
        derived._parent = self
        derived._mapper = mapper
        self._dependants.append(Dependant(derived, mapper))
        return derived

    # ============================================================
    # Propagation
    # ============================================================

    def _plan(
        self,
        parent: Optional["Signal[Any]"],
        next_value: Any,
        plan: List[_PlannedCommit],
    ) -> None:
        plan.append((self, parent, next_value))
        for dependant in self._dependants:
            dependant.signal._plan(self, dependant.mapper(next_value), plan)

    def _commit(self, prv: Any, next_value: Any) -> int:
        """Assign, notify, and return the version this commit produced."""
        self._value = next_value
        self._version += 1
        version = self._version
        self._listeners.dispatch(SignalValueChangedEvent(cur=next_value, prv=prv))
        return version

    def _bind_task(self, task: asyncio.Task) -> None:
        self._task = task

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._key!r}, {self._value!r})"


class BaseSignal(Signal[T]):
    """A signal written directly by external code."""

    kind = SignalKind.BASE


class ComputedSignal(Signal[T]):
    """
    A signal derived from a parent through a mapper.

    Its value is driven by the parent's propagation step. Calling ``update``
    on it directly is accepted, but the next parent commit overwrites
    whatever was written.
    """

    kind = SignalKind.COMPUTED

    def __init__(self, initial_value: Optional[T] = None, key: Optional[str] = None):
        super().__init__(initial_value, key)
        self._parent: Optional[Signal[Any]] = None
        self._mapper: Optional[Mapper] = None

    @property
    def parent(self) -> Optional[Signal[Any]]:
        return self._parent

    @property
    def mapper(self) -> Optional[Mapper]:
        return self._mapper

    def update(self, f: Transform) -> None:
        logger.debug("External write to computed signal %r", self._key)
        super().update(f)


def create_signal(
    initial_value: Optional[T] = None, key: Optional[str] = None
) -> BaseSignal[T]:
    """
    Create a base signal.

    Example:
        ```python
        count = create_signal(0)
        count.listen(lambda event: print(event.prv, "->", event.cur))
        count.update(lambda n: n + 1)  # prints "0 -> 1"
        ```
    """
    return BaseSignal(initial_value, key)
