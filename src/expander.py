""" Variable and alias expansion of a segment's tokens. """
import logging

from constants import VAR_REF_RX
from lexer import tokenize
from shell_state import ShellState

logger = logging.getLogger(__name__)


def expand_token(token: str, state: ShellState) -> str:
    if token == "$?":
        return str(state.last_status)
    if token == "$$":
        return str(state.pid)

    match = VAR_REF_RX.match(token)
    if match is None:
        return token
    value = state.environment.get(match.group("name"), "")
    return value + match.group("rest")


def expand_variables(tokens: list[str], state: ShellState) -> list[str]:
    """
    Substitute $?, $$ and $NAME tokens.

    Tokens that expand to nothing are dropped.
    """
    expanded = []
    for tok in tokens:
        value = expand_token(tok, state)
        if value:
            expanded.append(value)
    return expanded


def expand_alias(tokens: list[str], state: ShellState) -> list[str]:
    """ Replace the leading token by its alias, once. The result is not re-expanded. """
    if not tokens:
        return tokens

    body = state.aliases.get(tokens[0])
    if body is None:
        return tokens

    logger.debug("alias %s -> %r", tokens[0], body)
    return tokenize(body) + tokens[1:]


def expand(tokens: list[str], state: ShellState) -> list[str]:
    tokens = expand_variables(tokens, state)
    tokens = expand_alias(tokens, state)
    logger.debug("expanded tokens: %s", tokens)
    return tokens
