"""Integration tests for the future-to-signal adapter."""

import asyncio

import pytest
from result import Err, Ok

from simpsig import FuturePending, FutureSettled, create_future_signal


async def resolve(value, delay=0):
    await asyncio.sleep(delay)
    return value


async def reject(error, delay=0):
    await asyncio.sleep(delay)
    raise error


@pytest.mark.integration
@pytest.mark.adapter
def test_resolving_future_settles_with_ok():
    async def scenario():
        sig = create_future_signal(resolve(42))
        assert sig.value == FuturePending()
        assert sig.value.done is False
        assert sig.is_computed is True

        await sig.task
        return sig.value

    state = asyncio.run(scenario())

    assert state == FutureSettled(Ok(42))
    assert state.done is True


@pytest.mark.integration
@pytest.mark.adapter
def test_rejecting_future_settles_with_err():
    error = ValueError("nope")

    async def scenario():
        sig = create_future_signal(reject(error))
        await sig.task
        return sig.value

    state = asyncio.run(scenario())

    assert state.done is True
    assert isinstance(state.result, Err)
    assert state.result.err_value is error


@pytest.mark.integration
@pytest.mark.adapter
def test_mapper_applies_to_success_value():
    async def scenario():
        sig = create_future_signal(resolve(21), lambda n: n * 2)
        await sig.task
        return sig.value

    assert asyncio.run(scenario()) == FutureSettled(Ok(42))


@pytest.mark.integration
@pytest.mark.adapter
def test_failing_mapper_is_captured_as_err():
    async def scenario():
        sig = create_future_signal(resolve("x"), int)
        await sig.task
        return sig.value

    state = asyncio.run(scenario())

    assert isinstance(state.result, Err)
    assert isinstance(state.result.err_value, ValueError)


@pytest.mark.integration
@pytest.mark.adapter
def test_listener_sees_exactly_one_transition():
    async def scenario():
        sig = create_future_signal(resolve("done", delay=0.01))
        events = []
        sig.listen(events.append)
        await sig.task
        await asyncio.sleep(0.01)
        return events

    events = asyncio.run(scenario())

    assert len(events) == 1
    assert events[0].prv == FuturePending()
    assert events[0].cur == FutureSettled(Ok("done"))


@pytest.mark.integration
@pytest.mark.adapter
def test_wraps_plain_asyncio_future():
    async def scenario():
        future = asyncio.get_running_loop().create_future()
        sig = create_future_signal(future)
        await asyncio.sleep(0)
        assert sig.value == FuturePending()

        future.set_result("ready")
        await sig.task
        return sig.value

    assert asyncio.run(scenario()) == FutureSettled(Ok("ready"))


@pytest.mark.integration
@pytest.mark.adapter
def test_derived_signal_follows_settlement():
    async def scenario():
        sig = create_future_signal(resolve(3))
        label = sig.computed(lambda state: "ready" if state.done else "loading")
        assert label.value == "loading"
        await sig.task
        return label.value

    assert asyncio.run(scenario()) == "ready"


@pytest.mark.integration
@pytest.mark.adapter
def test_requires_running_event_loop():
    coro = resolve(1)
    try:
        with pytest.raises(RuntimeError):
            create_future_signal(coro)
    finally:
        coro.close()
