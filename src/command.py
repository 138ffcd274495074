""" Segments of a command line and the operators joining them. """
from enum import Enum


class Operator(Enum):
    NONE = ""
    AND = "&&"
    OR = "||"
    SEQUENCE = ";"


class Segment:
    """ Text of one command together with the operator that precedes it. """
    def __init__(self, text: str, operator: Operator = Operator.NONE):
        self.text = text
        self.operator = operator

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.text, self.operator) == (other.text, other.operator)

    def __repr__(self):
        return f"Segment({self.text!r}, {self.operator.name})"


def should_run(operator: Operator, last_status: int) -> bool:
    """ Short-circuit test applied before each segment. """
    if operator is Operator.AND:
        return last_status == 0
    if operator is Operator.OR:
        return last_status != 0
    return True
