"""Tests for the tick schedulers."""

import asyncio

from sortreplay.scheduler import AsyncioScheduler, ManualScheduler


class TestManualScheduler:
    def test_callback_runs_when_due(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(1.0, lambda: calls.append(scheduler.now))
        assert scheduler.advance(0.5) == 0
        assert scheduler.advance(0.5) == 1
        assert calls == [1.0]

    def test_cancelled_callback_never_runs(self):
        scheduler = ManualScheduler()
        calls = []
        handle = scheduler.call_later(1.0, lambda: calls.append(1))
        handle.cancel()
        scheduler.advance(5.0)
        assert calls == []
        assert scheduler.pending == 0

    def test_callbacks_run_in_due_order(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(2.0, lambda: calls.append("b"))
        scheduler.call_later(1.0, lambda: calls.append("a"))
        scheduler.advance(3.0)
        assert calls == ["a", "b"]

    def test_rescheduled_callback_fires_within_same_advance(self):
        scheduler = ManualScheduler()
        calls = []

        def tick():
            calls.append(scheduler.now)
            if len(calls) < 3:
                scheduler.call_later(1.0, tick)

        scheduler.call_later(1.0, tick)
        scheduler.advance(10.0)
        assert calls == [1.0, 2.0, 3.0]
        assert scheduler.now == 10.0

    def test_run_until_idle(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(3.0, lambda: calls.append(1))
        scheduler.call_later(7.0, lambda: calls.append(2))
        assert scheduler.run_until_idle() == 2
        assert scheduler.now == 7.0


class TestAsyncioScheduler:
    def test_runs_on_event_loop(self):
        async def scenario():
            fired = asyncio.Event()
            AsyncioScheduler().call_later(0.001, fired.set)
            await asyncio.wait_for(fired.wait(), timeout=1.0)
            return fired.is_set()

        assert asyncio.run(scenario())

    def test_cancel(self):
        async def scenario():
            calls = []
            handle = AsyncioScheduler().call_later(0.001, lambda: calls.append(1))
            handle.cancel()
            await asyncio.sleep(0.01)
            return calls

        assert asyncio.run(scenario()) == []
