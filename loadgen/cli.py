import asyncio
import logging
import sys

from .config import USAGE, RunConfig, parse_target
from .errors import LoadGenError, UsageError
from .log import setup_logging
from .runner import run

logger = logging.getLogger("loadgen")


def main(argv=None) -> int:
    setup_logging()
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        logger.error(USAGE)
        return 1

    try:
        host, port = parse_target(args[0])
    except UsageError as e:
        logger.error(f"{e}\n{USAGE}")
        return 1

    config = RunConfig(host, port)
    try:
        summary = asyncio.run(run(config))
    except LoadGenError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130

    logger.info(f"Done: {summary}")
    return 0

