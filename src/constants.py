import os
import re

DEFAULT_PROMPT = "$ "
DEFAULT_PROGRAM_NAME = "pysh"

# $NAME, keeping whatever follows the name run: $HOME/bin
VAR_REF_RX = re.compile(r"^\$(?P<name>[A-Za-z0-9_]+)(?P<rest>.*)$")
# name=value, value optionally wrapped in matching quotes
ALIAS_ARG_RX = re.compile(r"""(?P<name>[^\s=]+)=(?P<value>'[^']*'|"[^"]*"|\S*)|(?P<bare>\S+)""")

TOKEN_DELIMS_RX = re.compile(r"[ \t]+")

STATUS_OK = 0
STATUS_FAILURE = 1
STATUS_USAGE = 2
STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
STATUS_SIGNAL_BASE = 128
# Reserved for failure to create a child process.
STATUS_SPAWN_FAILED = os.EX_OSERR

HELP_TEXT = {
    "exit": "exit [n]\n\tExit the shell with status n, or the last status if n is omitted.",
    "cd": "cd [dir|-]\n\tChange the working directory. No argument goes to $HOME, '-' to $OLDPWD.",
    "env": "env\n\tPrint the environment, one KEY=VALUE per line.",
    "setenv": "setenv NAME VALUE\n\tCreate or overwrite an environment variable.",
    "unsetenv": "unsetenv NAME [NAME ...]\n\tRemove environment variables.",
    "help": "help [builtin]\n\tShow usage for the shell or for one builtin.",
    "alias": "alias [name[=value] ...]\n\tList, show or define aliases.",
    "unalias": "unalias name [name ...]\n\tRemove aliases.",
}

GENERAL_HELP = (
    "Simple shell. Commands may be joined with '&&', '||' and ';'.\n"
    "Variables: $?, $$ and $NAME are expanded. Builtins:\n"
)
