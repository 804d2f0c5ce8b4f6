import os

from .config import PAYLOAD_SIZE


def random_payload(size: int = PAYLOAD_SIZE) -> bytes:
    if size < 0:
        raise ValueError(f"negative payload size: {size}")
    return os.urandom(size)
