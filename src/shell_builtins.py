""" Registry of builtin commands. """
import os

from constants import (
    ALIAS_ARG_RX,
    GENERAL_HELP,
    HELP_TEXT,
    STATUS_FAILURE,
    STATUS_OK,
    STATUS_USAGE,
)
from exceptions import BuiltinError, ShellExit

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("exit")
def builtin_exit(args, state):
    if not args:
        raise ShellExit(state.last_status)

    arg = args[0]
    if not arg.isdecimal():
        raise BuiltinError(f"Illegal number: {arg}", STATUS_USAGE)
    raise ShellExit(int(arg) % 256)


def _change_directory(target, state):
    old = os.getcwd()
    try:
        os.chdir(target)
    except (OSError, ValueError):
        raise BuiltinError(f"can't cd to {target}", STATUS_USAGE) from None
    state.environment.set("OLDPWD", old)
    state.environment.set("PWD", os.getcwd())


@builtin("cd")
def builtin_cd(args, state):
    if not args:
        home = state.environment.get("HOME")
        if not home:
            return STATUS_OK
        _change_directory(home, state)
        return STATUS_OK

    if args[0] == "-":
        previous = state.environment.get("OLDPWD")
        if not previous:
            raise BuiltinError("OLDPWD not set")
        _change_directory(previous, state)
        print(state.environment.get("PWD"))
        return STATUS_OK

    _change_directory(args[0], state)
    return STATUS_OK


@builtin("env")
def builtin_env(args, state):
    for name, value in state.environment.items():
        print(f"{name}={value}")
    return STATUS_OK


@builtin("setenv")
def builtin_setenv(args, state):
    if len(args) != 2:
        raise BuiltinError("usage: setenv NAME VALUE")
    name, value = args
    if not state.environment.valid_name(name):
        raise BuiltinError("invalid variable name")
    state.environment.set(name, value)
    return STATUS_OK


@builtin("unsetenv")
def builtin_unsetenv(args, state):
    if not args:
        raise BuiltinError("usage: unsetenv NAME [NAME ...]")
    for name in args:
        state.environment.remove(name)
    return STATUS_OK


@builtin("help")
def builtin_help(args, state):
    if not args:
        print(GENERAL_HELP, end="")
        for name in BUILTINS:
            print(f"  {HELP_TEXT[name].splitlines()[0]}")
        return STATUS_OK

    for topic in args:
        if topic not in HELP_TEXT:
            raise BuiltinError(f"no help topics match '{topic}'")
        print(HELP_TEXT[topic])
    return STATUS_OK


def _strip_quotes(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _print_alias(name, value):
    print(f"{name}='{value}'")


@builtin("alias")
def builtin_alias(args, state):
    """
    alias              list every alias
    alias name         show one alias
    alias name=value   define an alias; quotes let the value hold spaces
    """
    if not args:
        for name, value in state.aliases.items():
            _print_alias(name, value)
        return STATUS_OK

    rc = STATUS_OK
    # Re-join so a quoted value split by the tokenizer is whole again.
    for match in ALIAS_ARG_RX.finditer(" ".join(args)):
        if match.group("bare") is not None:
            name = match.group("bare")
            value = state.aliases.get(name)
            if value is None:
                state.report_error(f"{name} not found", command="alias")
                rc = STATUS_FAILURE
            else:
                _print_alias(name, value)
        else:
            state.aliases.set(match.group("name"), _strip_quotes(match.group("value")))
    return rc


@builtin("unalias")
def builtin_unalias(args, state):
    if not args:
        raise BuiltinError("usage: unalias name [name ...]")

    rc = STATUS_OK
    for name in args:
        if not state.aliases.remove(name):
            state.report_error(f"{name} not found", command="unalias")
            rc = STATUS_FAILURE
    return rc
