"""
Future-to-Signal Adapter
========================

Exposes a single awaitable as a computed signal that moves from
``FuturePending()`` to ``FutureSettled(result)`` exactly once.

```python
import asyncio
from simpsig import create_future_signal

async def main():
    async def answer():
        return 42

    sig = create_future_signal(answer())
    print(sig.value)   # FuturePending(done=False)
    await sig.task
    print(sig.value)   # FutureSettled(result=Ok(42), done=True)

asyncio.run(main())
```
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from result import Err, Ok, Result

from ..signal import ComputedSignal, create_signal
from .states import FuturePending, FutureSettled, FutureState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_future_signal(
    awaitable: Awaitable[T], mapper: Optional[Callable[[T], Any]] = None
) -> ComputedSignal[FutureState]:
    """
    Drive a signal from the settlement of ``awaitable``.

    The awaited value (passed through ``mapper`` when given) is wrapped in
    ``Ok``. If the awaitable or the mapper raises, the exception is wrapped
    in ``Err`` instead; it is never re-raised.

    Must be called while an event loop is running. The task awaiting the
    source is kept on the returned signal as ``signal.task``.
    """
    loop = asyncio.get_running_loop()
    done_signal = create_signal(False, key="<future:done>")
    result: Result[Any, Exception] = Ok(None)

    async def _settle() -> None:
        nonlocal result
        try:
            value = await awaitable
            if mapper is not None:
                value = mapper(value)
        except Exception as exc:
            logger.debug("Awaitable %r failed: %r", awaitable, exc)
            result = Err(exc)
        else:
            result = Ok(value)
        done_signal.update(lambda _: True)

    view = done_signal.computed(
        lambda done: FutureSettled(result) if done else FuturePending(),
        key="<future>",
    )
    view._bind_task(loop.create_task(_settle()))
    return view
