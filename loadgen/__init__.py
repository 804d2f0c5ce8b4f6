from .config import CONNECTIONS, ITERATIONS, PAYLOAD_SIZE, RunConfig, parse_target
from .errors import (
    DataMismatchError,
    DialError,
    LoadGenError,
    ReadError,
    ShortReadError,
    UsageError,
    WriteError,
)
from .runner import RunSummary, run
from .worker import WorkerResult, genload

__all__ = [
    "CONNECTIONS",
    "ITERATIONS",
    "PAYLOAD_SIZE",
    "RunConfig",
    "parse_target",
    "LoadGenError",
    "UsageError",
    "DialError",
    "WriteError",
    "ReadError",
    "ShortReadError",
    "DataMismatchError",
    "RunSummary",
    "run",
    "WorkerResult",
    "genload",
]
