"""
Async-Sequence-to-Signal Adapter
================================

Exposes an async iterable as a computed signal that publishes
``SequenceItem(value)`` for every element, in emission order, followed by a
single ``SequenceDone`` once the sequence is exhausted.

The source is iterated exactly once and is never restarted. A source that
never ends never publishes ``SequenceDone``.
"""

import asyncio
import logging
from typing import Any, AsyncIterable, Callable, Optional, TypeVar

from result import Err, Ok, Result

from ..signal import ComputedSignal, create_signal
from .states import SequenceDone, SequenceItem, SequenceState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_async_iterator_signal(
    source: AsyncIterable[T], mapper: Optional[Callable[[T], Any]] = None
) -> ComputedSignal[SequenceState]:
    """
    Drive a signal from the elements of ``source``.

    Each element (passed through ``mapper`` when given) is committed as it
    arrives. When iteration ends a final commit republishes the view as
    ``SequenceDone(Ok(None))``; if iterating or mapping raises, iteration
    stops and the view becomes ``SequenceDone(Err(exc))``.

    Must be called while an event loop is running. The iterating task is kept
    on the returned signal as ``signal.task``.
    """
    loop = asyncio.get_running_loop()
    value_signal = create_signal(None, key="<sequence:value>")
    done = False
    outcome: Result[None, Exception] = Ok(None)

    async def _drain() -> None:
        nonlocal done, outcome
        try:
            async for item in source:
                value = mapper(item) if mapper is not None else item
                value_signal.update(lambda _: value)
        except Exception as exc:
            logger.debug("Async sequence %r failed: %r", source, exc)
            outcome = Err(exc)
        else:
            logger.debug("Async sequence %r exhausted", source)
        done = True
        value_signal.update(lambda _: None)

    view = value_signal.computed(
        lambda value: SequenceDone(outcome) if done else SequenceItem(value),
        key="<sequence>",
    )
    view._bind_task(loop.create_task(_drain()))
    return view
