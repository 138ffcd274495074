#!/usr/bin/env python3
""" Command line entry point for the shell. """
import argparse
import logging
import os
import sys

from constants import (
    DEFAULT_PROGRAM_NAME,
    STATUS_NOT_EXECUTABLE,
    STATUS_NOT_FOUND,
    STATUS_SPAWN_FAILED,
)
from shell import Shell
from shell_state import ShellState

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="A small interactive shell with &&, || and ; chaining"
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="read commands from this file instead of standard input"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PYSH_LOG_LEVEL", "WARNING"),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging verbosity (default: $PYSH_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="write log records to PATH instead of stderr"
    )
    return parser


def configure_logging(level, log_file=None):
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        filename=log_file,
    )


def open_script(path, program_name):
    """ Open the script file, or return the exit status for the failure. """
    try:
        return open(path, "r", encoding="utf-8", errors="replace"), None
    except PermissionError:
        status = STATUS_NOT_EXECUTABLE
    except OSError:
        status = STATUS_NOT_FOUND
    print(f"{program_name}: 0: Can't open {path}", file=sys.stderr)
    return None, status


def main(argv=None):
    argv = sys.argv if argv is None else argv
    program_name = argv[0] if argv else DEFAULT_PROGRAM_NAME
    args = build_arg_parser().parse_args(argv[1:])
    configure_logging(args.log_level, args.log_file)

    source = None
    if args.script:
        source, status = open_script(args.script, program_name)
        if source is None:
            return status

    try:
        state = ShellState(program_name=program_name, input_source=source)
        return Shell(state).run()
    except MemoryError:
        print(f"{program_name}: out of memory", file=sys.stderr)
        return STATUS_SPAWN_FAILED
    finally:
        if source is not None:
            source.close()


if __name__ == "__main__":
    sys.exit(main())
