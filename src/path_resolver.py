""" Locate the executable for a command name. """
import logging
import os

from exceptions import CommandNotExecutable, CommandNotFound
from shell_state import EnvStore

logger = logging.getLogger(__name__)


def _check_candidate(path: str) -> bool | None:
    """
    Return True for an executable file, False for an entry that exists
    but cannot be run, and None when nothing is there.
    """
    if not os.path.exists(path):
        return None
    if os.path.isdir(path):
        return False
    return os.access(path, os.X_OK)


def search_path(environment: EnvStore) -> list[str]:
    path_var = environment.get("PATH", "")
    return [d for d in path_var.split(":") if d]


def resolve_command(name: str, environment: EnvStore) -> str:
    """
    Resolve a command name to an executable path.

    Raises CommandNotFound when nothing matches and CommandNotExecutable
    when matches exist but none of them can be executed.
    """
    if os.sep in name:
        found = _check_candidate(name)
        if found is None:
            raise CommandNotFound()
        if os.path.isdir(name):
            raise CommandNotExecutable("Is a directory")
        if not found:
            raise CommandNotExecutable()
        return name

    blocked = False
    for directory in search_path(environment):
        candidate = os.path.join(directory, name)
        found = _check_candidate(candidate)
        if found is None:
            continue
        if not found:
            logger.debug("skipping %s: not executable", candidate)
            blocked = True
            continue
        logger.debug("resolved %s to %s", name, candidate)
        return candidate

    if blocked:
        raise CommandNotExecutable()
    raise CommandNotFound()
