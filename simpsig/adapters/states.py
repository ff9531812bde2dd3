"""
State records published by the async adapters.

Each adapter publishes a closed set of frozen records; the ``done`` or
``started`` field is the discriminant consumers switch on.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from result import Ok, Result

T = TypeVar("T")


@dataclass(frozen=True)
class FuturePending:
    done: bool = field(default=False, init=False)


@dataclass(frozen=True)
class FutureSettled(Generic[T]):
    """The wrapped awaitable settled; ``result`` is ``Ok(value)`` or ``Err(exc)``."""

    result: Result[T, Exception]
    done: bool = field(default=True, init=False)


FutureState = Union[FuturePending, FutureSettled[T]]


@dataclass(frozen=True)
class SequenceItem(Generic[T]):
    value: T
    done: bool = field(default=False, init=False)


@dataclass(frozen=True)
class SequenceDone:
    """
    The async sequence is finished.

    ``result`` is ``Ok(None)`` when the sequence was exhausted normally and
    ``Err(exc)`` when iterating it (or mapping an element) raised.
    """

    result: Result[None, Exception] = field(default_factory=lambda: Ok(None))
    done: bool = field(default=True, init=False)


SequenceState = Union[SequenceItem[T], SequenceDone]


@dataclass(frozen=True)
class DeferredPending:
    started: bool = field(default=False, init=False)


@dataclass(frozen=True)
class DeferredStarted(Generic[T]):
    state: T
    started: bool = field(default=True, init=False)


DeferredState = Union[DeferredPending, DeferredStarted[Any]]
