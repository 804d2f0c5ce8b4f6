import asyncio
import logging
import time
from dataclasses import dataclass

from .config import RunConfig
from .worker import WorkerResult, genload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    connections: int
    total_sent: int
    total_received: int
    elapsed: float
    min_time: float
    max_time: float
    avg_time: float

    @classmethod
    def from_results(cls, results: list[WorkerResult], elapsed: float) -> "RunSummary":
        durations = [r.duration for r in results]
        if not durations:
            return cls(0, 0, 0, elapsed, 0.0, 0.0, 0.0)
        return cls(
            connections=len(results),
            total_sent=sum(r.sent for r in results),
            total_received=sum(r.received for r in results),
            elapsed=elapsed,
            min_time=min(durations),
            max_time=max(durations),
            avg_time=sum(durations) / len(durations),
        )

    def __str__(self):
        return (
            f"{self.connections} connections: sent {self.total_sent} bytes, "
            f"received {self.total_received} bytes in {self.elapsed:.2f}s "
            f"(connection time min={self.min_time:.3f}s max={self.max_time:.3f}s "
            f"avg={self.avg_time:.3f}s)"
        )


async def run(config: RunConfig) -> RunSummary:
    """Start every worker at once and wait for all of them.

    The first worker to fail cancels the rest and its error is re-raised.
    """
    logger.info(
        f"Starting {config.connections} connections to {config.address}, "
        f"{config.iterations} x {config.payload_size} bytes each"
    )
    start = time.perf_counter()
    tasks = [
        asyncio.create_task(genload(config, i), name=f"genload-{i}")
        for i in range(config.connections)
    ]
    if not tasks:
        return RunSummary.from_results([], 0.0)

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_all(tasks)
        raise

    failed = [t for t in done if not t.cancelled() and t.exception() is not None]
    if failed:
        await _cancel_all(pending)
        # Several workers can fail in the same loop pass, report the lowest id
        first = min(failed, key=tasks.index)
        logger.debug(f"{len(pending)} workers cancelled after failure")
        raise first.exception()

    elapsed = time.perf_counter() - start
    return RunSummary.from_results([t.result() for t in tasks], elapsed)


async def _cancel_all(tasks):
    for task in tasks:
        task.cancel()
    # return_exceptions keeps other workers' errors from escaping here
    await asyncio.gather(*tasks, return_exceptions=True)
