""" Run external programs in a child process. """
import contextlib
import errno
import logging
import signal
import subprocess
import sys

from constants import STATUS_SIGNAL_BASE
from exceptions import CommandNotExecutable, CommandNotFound, SpawnError
from shell_state import ShellState

logger = logging.getLogger(__name__)


def _reset_interrupt():
    # Runs in the child between fork and exec.
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def status_from_returncode(returncode: int) -> int:
    """ Popen reports death by signal N as -N; shells report 128 + N. """
    if returncode < 0:
        return STATUS_SIGNAL_BASE - returncode
    return returncode


class ProcessSpawner:
    """ Capability to start a program and wait for it. """
    def spawn(self, path: str, argv: list[str], env: dict):
        raise NotImplementedError

    def wait(self, handle) -> int:
        raise NotImplementedError


class SubprocessSpawner(ProcessSpawner):
    def spawn(self, path, argv, env):
        return subprocess.Popen(argv, executable=path, env=env,
                                preexec_fn=_reset_interrupt)

    def wait(self, handle):
        return status_from_returncode(handle.wait())


@contextlib.contextmanager
def interrupts_ignored():
    """
    Ignore SIGINT in the shell while a child runs in the foreground.

    The previous disposition is restored on the way out, so the prompt
    handling is back in place once control returns to the loop.
    """
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        # signal.signal only works in the main thread
        yield
        return
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def execute(path: str, state: ShellState, spawner: ProcessSpawner) -> int:
    """ Spawn path with the current tokens as argv and return its exit status. """
    argv = list(state.tokens)
    env = state.environment.to_dict()
    sys.stdout.flush()

    with interrupts_ignored():
        try:
            handle = spawner.spawn(path, argv, env)
        except FileNotFoundError:
            raise CommandNotFound() from None
        except PermissionError:
            raise CommandNotExecutable() from None
        except OSError as e:
            if e.errno == errno.ENOEXEC:
                raise CommandNotExecutable(e.strerror) from None
            raise SpawnError(e.strerror or str(e)) from e
        except ValueError as e:
            # embedded null byte in argv or the environment
            raise SpawnError(str(e)) from None

        logger.debug("started %s as %r", path, handle)
        status = spawner.wait(handle)

    logger.debug("%s exited with status %d", path, status)
    return status
