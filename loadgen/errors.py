class LoadGenError(Exception):
    """Base error. ``context`` names the step that failed (dial, write, ...)."""

    context = "loadgen"

    def __init__(self, message: str, worker_id: int | None = None):
        super().__init__(message)
        self.worker_id = worker_id

    def __str__(self):
        message = super().__str__()
        if self.worker_id is None:
            return f"{self.context}: {message}"
        return f"{self.context}: [worker {self.worker_id}] {message}"


class UsageError(LoadGenError):
    context = "usage"


class DialError(LoadGenError):
    context = "dial"


class WriteError(LoadGenError):
    context = "write"


class ReadError(LoadGenError):
    context = "read"


class ShortReadError(ReadError):
    def __init__(self, written: int, read: int, worker_id: int | None = None):
        super().__init__(f"nr != nw ({read} != {written})", worker_id)
        self.written = written
        self.read = read


class DataMismatchError(LoadGenError):
    context = "verify"

    def __init__(self, iteration: int, worker_id: int | None = None):
        super().__init__(f"data mismatch on iteration {iteration}", worker_id)
        self.iteration = iteration
