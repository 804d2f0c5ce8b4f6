import asyncio

import pytest

from echo_server import Tracker, handle_corrupt, handle_silent, serve
from loadgen import DataMismatchError, RunConfig, run
from loadgen.runner import RunSummary
from loadgen.worker import WorkerResult

HOST = "127.0.0.1"


def test_run_all_workers_complete():
    async def scenario():
        async with serve() as port:
            return await run(RunConfig(HOST, port, connections=50, iterations=20, payload_size=512))

    summary = asyncio.run(scenario())
    assert summary.connections == 50
    assert summary.total_sent == summary.total_received == 50 * 20 * 512
    assert 0 < summary.min_time <= summary.avg_time <= summary.max_time <= summary.elapsed


def test_run_zero_connections():
    summary = asyncio.run(run(RunConfig(HOST, 1, connections=0)))
    assert summary.connections == 0
    assert summary.total_sent == 0


@pytest.mark.timeout(10)
def test_run_fails_fast_and_cancels_the_rest():
    # Connection 0 gets a corrupted echo, every other one hangs forever.
    # The run must stop on the mismatch instead of waiting on the others.
    tracker = Tracker(first=handle_corrupt, rest=handle_silent)

    async def scenario():
        async with serve(tracker) as port:
            config = RunConfig(HOST, port, connections=20, iterations=10, payload_size=128)
            with pytest.raises(DataMismatchError):
                await run(config)
            for _ in range(200):
                if tracker.opened and tracker.closed == tracker.opened:
                    break
                await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert tracker.opened >= 1
    assert tracker.closed == tracker.opened


def test_summary_from_results():
    results = [
        WorkerResult(0, 100, 100, 0.5),
        WorkerResult(1, 100, 100, 1.5),
        WorkerResult(2, 100, 100, 1.0),
    ]
    summary = RunSummary.from_results(results, 2.0)
    assert summary.connections == 3
    assert summary.total_sent == 300
    assert summary.total_received == 300
    assert (summary.min_time, summary.max_time, summary.avg_time) == (0.5, 1.5, 1.0)
    assert "3 connections: sent 300 bytes" in str(summary)


@pytest.mark.timeout(10)
def test_cancelled_run_closes_every_connection():
    tracker = Tracker(first=handle_silent, rest=handle_silent)

    async def scenario():
        async with serve(tracker) as port:
            config = RunConfig(HOST, port, connections=10, iterations=10, payload_size=128)
            task = asyncio.create_task(run(config))
            for _ in range(500):
                if tracker.opened == config.connections:
                    break
                await asyncio.sleep(0.01)
            assert tracker.opened == config.connections

            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            for _ in range(200):
                if tracker.closed == tracker.opened:
                    break
                await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert tracker.closed == tracker.opened == 10
