""" Lexical analysis for shell commands. """
import logging

from command import Operator, Segment
from constants import TOKEN_DELIMS_RX

logger = logging.getLogger(__name__)

# Two-character operators are tried first so "&&" never reads as "&".
OPERATORS = (
    ("&&", Operator.AND),
    ("||", Operator.OR),
    (";", Operator.SEQUENCE),
)


def split_logical(line: str) -> list[Segment]:
    """
    Split a raw line on '&&', '||' and ';'.

    Each segment carries the operator that came before it; the first one
    carries Operator.NONE. Blank segments, including the one a leading
    operator produces, are kept and later run as no-ops.
    """
    segments = []
    current = []
    operator = Operator.NONE
    i = 0
    n = len(line)

    while i < n:
        for text, op in OPERATORS:
            if line.startswith(text, i):
                segments.append(Segment("".join(current), operator))
                current = []
                operator = op
                i += len(text)
                break
        else:
            current.append(line[i])
            i += 1

    segments.append(Segment("".join(current), operator))
    logger.debug("split %r into %s", line, segments)
    return segments


def tokenize(text: str) -> list[str]:
    """ Split a segment on runs of spaces and tabs. """
    return [tok for tok in TOKEN_DELIMS_RX.split(text) if tok]
