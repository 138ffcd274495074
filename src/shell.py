""" Implement the core of the shell. """
import logging
import sys

from command import should_run
from exceptions import ShellExit
from expander import expand
from lexer import split_logical, tokenize
from runner import execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(state: ShellState) -> str:
    """
    Read one line from the input source, without its newline.

    A prompt is shown only in interactive mode. Raises EOFError at the
    end of input.
    """
    if state.interactive:
        if state.input_source is sys.stdin:
            return input(state.prompt)
        sys.stdout.write(state.prompt)
        sys.stdout.flush()

    line = state.input_source.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


class Shell:
    def __init__(self, state=None, spawner=None):
        self.state = state if state is not None else ShellState()
        self.spawner = spawner

    def run_line(self, line: str):
        """ Run every segment of one line, honoring short-circuit operators. """
        state = self.state
        state.begin_line(line)

        for segment in split_logical(line):
            if not should_run(segment.operator, state.last_status):
                logger.debug("skipping %r after %s", segment.text, segment.operator.name)
                continue

            state.tokens = expand(tokenize(segment.text), state)
            status = execute_command(state, self.spawner)
            if status is not None:
                state.set_status(status)

        state.tokens = []

    def run(self) -> int:
        """ Read-eval loop. Returns the exit status for the process. """
        while True:
            try:
                line = read_command(self.state)
                self.run_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                if self.state.interactive:
                    print()
                return self.state.last_status

            except KeyboardInterrupt:
                # Interrupt outside a child: drop the line, prompt again.
                print()
