"""Integration tests for the async-sequence-to-signal adapter."""

import asyncio

import pytest
from result import Err, Ok

from simpsig import SequenceDone, SequenceItem, create_async_iterator_signal


async def count_to(n):
    for i in range(1, n + 1):
        await asyncio.sleep(0)
        yield i


@pytest.mark.integration
@pytest.mark.adapter
def test_sequence_values_published_in_order_then_done():
    async def scenario():
        sig = create_async_iterator_signal(count_to(3))
        seen = []
        sig.listen(lambda event: seen.append(event.cur))
        await sig.task
        return seen, sig.value

    seen, final = asyncio.run(scenario())

    assert seen == [
        SequenceItem(1),
        SequenceItem(2),
        SequenceItem(3),
        SequenceDone(),
    ]
    assert final == SequenceDone(Ok(None))
    assert final.done is True


@pytest.mark.integration
@pytest.mark.adapter
def test_initial_value_is_placeholder_item():
    async def scenario():
        sig = create_async_iterator_signal(count_to(1))
        initial = sig.value
        await sig.task
        return initial

    initial = asyncio.run(scenario())

    assert initial == SequenceItem(None)
    assert initial.done is False


@pytest.mark.integration
@pytest.mark.adapter
def test_mapper_applies_to_each_element():
    async def scenario():
        sig = create_async_iterator_signal(count_to(3), lambda n: n * n)
        seen = []
        sig.listen(lambda event: seen.append(event.cur))
        await sig.task
        return seen

    seen = asyncio.run(scenario())

    assert [state.value for state in seen[:-1]] == [1, 4, 9]
    assert seen[-1] == SequenceDone()


@pytest.mark.integration
@pytest.mark.adapter
def test_empty_sequence_goes_straight_to_done():
    async def empty():
        return
        yield

    async def scenario():
        sig = create_async_iterator_signal(empty())
        await sig.task
        return sig.value

    assert asyncio.run(scenario()) == SequenceDone()


@pytest.mark.integration
@pytest.mark.adapter
def test_failing_sequence_is_captured_as_err():
    error = RuntimeError("stream broke")

    async def flaky():
        yield 1
        raise error

    async def scenario():
        sig = create_async_iterator_signal(flaky())
        seen = []
        sig.listen(lambda event: seen.append(event.cur))
        await sig.task
        return seen

    seen = asyncio.run(scenario())

    assert seen[0] == SequenceItem(1)
    assert len(seen) == 2
    assert isinstance(seen[1].result, Err)
    assert seen[1].result.err_value is error


@pytest.mark.integration
@pytest.mark.adapter
def test_endless_sequence_never_reports_done():
    async def scenario():
        queue = asyncio.Queue()

        async def endless():
            while True:
                yield await queue.get()

        sig = create_async_iterator_signal(endless())
        for item in ("a", "b"):
            queue.put_nowait(item)
        for _ in range(5):
            await asyncio.sleep(0)
        value = sig.value

        sig.task.cancel()
        await asyncio.gather(sig.task, return_exceptions=True)
        return value, sig.value

    during, after_cancel = asyncio.run(scenario())

    assert during == SequenceItem("b")
    assert after_cancel == SequenceItem("b")
