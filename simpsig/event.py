"""
SimpSig Change Event
====================

The record delivered to listeners every time a signal commits a value.

One event is built per commit and handed synchronously to every listener of
the committing signal before the write call returns.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SignalValueChangedEvent(Generic[T]):
    """
    Immutable ``(cur, prv)`` pair describing one value transition.

    ``prv`` is a snapshot taken before the transform ran, so in-place edits
    made by the transform to a list, dict or set value do not leak into it.
    """

    cur: T
    prv: T

    EVENT_NAME: ClassVar[str] = "signal:value-changed"

    @property
    def name(self) -> str:
        return self.EVENT_NAME
