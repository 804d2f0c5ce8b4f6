from dataclasses import dataclass

from .errors import UsageError

# Fixed load shape
CONNECTIONS = 1000
ITERATIONS = 1000
PAYLOAD_SIZE = 1024

USAGE = "Usage: loadgen host:port"


@dataclass(frozen=True)
class RunConfig:
    host: str
    port: int
    connections: int = CONNECTIONS
    iterations: int = ITERATIONS
    payload_size: int = PAYLOAD_SIZE

    @property
    def address(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def parse_target(text: str) -> tuple[str, int]:
    host, sep, port = text.rpartition(":")
    if not sep or not host or not port:
        raise UsageError(f"invalid address {text!r}, expected host:port")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
        if "[" in host or "]" in host:
            raise UsageError(f"invalid address {text!r}, unbalanced brackets")
    elif "[" in host or "]" in host:
        raise UsageError(f"invalid address {text!r}, unbalanced brackets")
    elif ":" in host:
        # Unbracketed IPv6 literal, the port split is ambiguous
        raise UsageError(f"invalid address {text!r}, use [host]:port for IPv6")
    if not host:
        raise UsageError(f"invalid address {text!r}, empty host")

    if not (port.isascii() and port.isdigit()):
        raise UsageError(f"invalid port {port!r}")
    number = int(port)
    if not 0 < number < 65536:
        raise UsageError(f"port out of range: {number}")

    return host, number
