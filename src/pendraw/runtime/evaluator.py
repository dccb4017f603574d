import operator
from typing import Tuple

from ..errors import MalformedCondition, UnknownOperator
from .variables import VariableStore

# Plain IEEE-754 comparisons: == and != are exact, with no tolerance.
COMPARISONS = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}


def split_condition(condition: str) -> Tuple[str, str, str]:
    """Splits ``<lhs> <op> <rhs>`` on single spaces and checks the operator.

    Tabs or repeated spaces make the condition malformed.
    """
    parts = condition.split(" ")
    if len(parts) != 3:
        raise MalformedCondition(f"Invalid condition: '{condition}'")

    left, op, right = parts
    if op not in COMPARISONS:
        raise UnknownOperator(f"Invalid comparison operator: '{op}'")
    return left, op, right


class Evaluator:
    def __init__(self, variables: VariableStore):
        self.variables = variables

    def number(self, token: str) -> float:
        return self.variables.resolve(token)

    def evaluate_condition(self, condition: str) -> bool:
        """Evaluates ``<lhs> <op> <rhs>`` where the operands are literals or variables."""
        left, op, right = split_condition(condition)
        return COMPARISONS[op](self.number(left), self.number(right))
