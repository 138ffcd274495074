""" Exceptions raised while interpreting a command line. """
from constants import (
    STATUS_FAILURE,
    STATUS_NOT_EXECUTABLE,
    STATUS_NOT_FOUND,
    STATUS_SPAWN_FAILED,
)


class ShellExit(Exception):
    """ Raised by the exit builtin to stop the read-eval loop. """
    def __init__(self, status: int):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """
    A recoverable error for one segment.

    The reason becomes the last field of the diagnostic and the status
    becomes the segment's exit status.
    """
    status = STATUS_FAILURE

    def __init__(self, reason: str, status: int | None = None):
        super().__init__(reason)
        self.reason = reason
        if status is not None:
            self.status = status


class CommandNotFound(ShellError):
    status = STATUS_NOT_FOUND

    def __init__(self, reason: str = "not found"):
        super().__init__(reason)


class CommandNotExecutable(ShellError):
    status = STATUS_NOT_EXECUTABLE

    def __init__(self, reason: str = "Permission denied"):
        super().__init__(reason)


class SpawnError(ShellError):
    status = STATUS_SPAWN_FAILED


class BuiltinError(ShellError):
    pass
