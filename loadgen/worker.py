import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass

from .config import RunConfig
from .errors import DataMismatchError, DialError, ReadError, ShortReadError, WriteError
from .payload import random_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkerResult:
    worker_id: int
    sent: int
    received: int
    duration: float


async def genload(config: RunConfig, worker_id: int = 0) -> WorkerResult:
    """Run one connection: write the same random payload ``config.iterations``
    times and check that each echo matches it byte for byte.
    """
    start = time.perf_counter()
    try:
        reader, writer = await asyncio.open_connection(config.host, config.port)
    except (OSError, UnicodeError) as e:
        # UnicodeError: the host name fails IDNA encoding
        raise DialError(str(e), worker_id) from e

    data = random_payload(config.payload_size)
    sent = 0
    received = 0

    try:
        for k in range(config.iterations):
            try:
                writer.write(data)
                await writer.drain()
            except OSError as e:
                raise WriteError(str(e), worker_id) from e
            sent += len(data)

            try:
                buf = await reader.readexactly(len(data))
            except asyncio.IncompleteReadError as e:
                raise ShortReadError(len(data), len(e.partial), worker_id) from e
            except OSError as e:
                raise ReadError(str(e), worker_id) from e
            received += len(buf)

            if buf != data:
                raise DataMismatchError(k, worker_id)
    finally:
        writer.close()
        # The peer may already have reset the connection
        with contextlib.suppress(OSError):
            await writer.wait_closed()

    duration = time.perf_counter() - start
    logger.debug(f"worker {worker_id}: {config.iterations} round trips in {duration:.3f}s")
    return WorkerResult(worker_id, sent, received, duration)
