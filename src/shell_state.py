""" Current state of the shell. """
import os
import sys

from constants import DEFAULT_PROGRAM_NAME, DEFAULT_PROMPT


class EnvStore:
    """ Environment variables of the session, seeded from the process environment. """
    def __init__(self, initial=None):
        self._vars = dict(os.environ if initial is None else initial)

    @staticmethod
    def valid_name(name: str) -> bool:
        return bool(name) and "=" not in name

    def get(self, name, default=None):
        return self._vars.get(name, default)

    def set(self, name, value):
        if not self.valid_name(name):
            raise ValueError(f"invalid variable name: {name!r}")
        self._vars[name] = value

    def remove(self, name) -> bool:
        """ Remove a variable, returning False if it was not set. """
        return self._vars.pop(name, None) is not None

    def items(self):
        return list(self._vars.items())

    def to_dict(self) -> dict:
        """ Snapshot handed to child processes. """
        return dict(self._vars)

    def __contains__(self, name):
        return name in self._vars

    def __len__(self):
        return len(self._vars)


class AliasStore:
    """ Alias name to replacement command text, kept in definition order. """
    def __init__(self):
        self._aliases = {}

    def get(self, name):
        return self._aliases.get(name)

    def set(self, name, value):
        if not name or "=" in name:
            raise ValueError(f"invalid alias name: {name!r}")
        self._aliases[name] = value

    def remove(self, name) -> bool:
        return self._aliases.pop(name, None) is not None

    def items(self):
        return list(self._aliases.items())

    def __contains__(self, name):
        return name in self._aliases

    def __len__(self):
        return len(self._aliases)


class ShellState:
    def __init__(self, program_name=DEFAULT_PROGRAM_NAME, environ=None,
                 input_source=None, interactive=None):
        self.program_name = program_name
        self.current_line = ""
        self.leading_command = ""
        self.command_counter = 0
        self.input_source = input_source if input_source is not None else sys.stdin
        if interactive is None:
            isatty = getattr(self.input_source, "isatty", None)
            interactive = bool(isatty and isatty())
        self.interactive = interactive
        self.tokens = []
        self.environment = EnvStore(environ)
        self.aliases = AliasStore()
        self.last_status = 0
        self.pid = os.getpid()

    @property
    def prompt(self) -> str:
        return self.environment.get("PS1", DEFAULT_PROMPT)

    def set_status(self, status: int):
        self.last_status = int(status) & 0xFF

    def begin_line(self, line: str):
        """ Reset the per-line fields for a freshly read line. """
        self.current_line = line
        self.command_counter += 1
        self.tokens = []
        self.leading_command = ""

    def report_error(self, reason: str, command: str | None = None):
        """ Write a diagnostic in the form name: counter: command: reason. """
        if command is None:
            command = self.leading_command
        print(f"{self.program_name}: {self.command_counter}: {command}: {reason}",
              file=sys.stderr)
