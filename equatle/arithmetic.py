"""
Arithmetic shared by generation and guess checking.

Division is exact (no truncation): 6 / 4 is 3/2, which is never a valid
result. Results are kept as Fractions so that check is exact too.
"""

from fractions import Fraction
from typing import Optional

from .row import AnyRow, is_complete
from .types import Operator

MAX_RESULT = 99  # two display columns


def get_result(operand_a: int, operator: Operator, operand_b: int) -> Optional[Fraction]:
    """Evaluate `operand_a operator operand_b`. None when undefined (x / 0, x % 0)."""
    if operator == Operator.ADD:
        return Fraction(operand_a + operand_b)
    if operator == Operator.SUBTRACT:
        return Fraction(operand_a - operand_b)
    if operator == Operator.MULTIPLY:
        return Fraction(operand_a * operand_b)
    if operator == Operator.DIVIDE:
        if operand_b == 0:
            return None
        return Fraction(operand_a, operand_b)
    if operator == Operator.POWER:
        return Fraction(operand_a ** operand_b)
    if operator == Operator.MODULO:
        if operand_b == 0:
            return None
        return Fraction(operand_a % operand_b)
    return None


def valid_equation(row: AnyRow) -> bool:
    """
    True when the row is complete and its arithmetic holds:
    the computed value is a whole number in 0..99 equal to row.result.
    """
    if not is_complete(row):
        return False

    correct_result = get_result(row.operand_a, row.operator, row.operand_b)
    if correct_result is None:
        return False

    return (
        correct_result.denominator == 1
        and 0 <= correct_result <= MAX_RESULT
        and correct_result == row.result
    )
