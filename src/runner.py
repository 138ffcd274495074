""" Dispatch a segment to a builtin or an external program. """
import logging

from exceptions import ShellError
from executor import ProcessSpawner, SubprocessSpawner, execute
from path_resolver import resolve_command
from shell_builtins import BUILTINS
from shell_state import ShellState

logger = logging.getLogger(__name__)


def execute_command(state: ShellState, spawner: ProcessSpawner | None = None) -> int | None:
    """
    Run the tokens held in state and return the resulting status.

    Returns None for an empty segment, which leaves the last status alone.
    Errors are reported here and turned into a status.
    """
    if not state.tokens:
        return None

    name, args = state.tokens[0], state.tokens[1:]
    state.leading_command = name
    try:
        if name in BUILTINS:
            logger.debug("builtin %s %s", name, args)
            return BUILTINS[name](args, state) or 0

        path = resolve_command(name, state.environment)
        return execute(path, state, spawner or SubprocessSpawner())
    except ShellError as e:
        state.report_error(e.reason)
        return e.status
