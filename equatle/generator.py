"""
Answer generation (no UI, no storage).

generate() picks one operator for the difficulty, then keeps drawing two
random digits until the equation is both valid and "fun". The operator is
not re-drawn inside the loop.

Every operator has at least one valid, fun pair (2+3=5, 9-4=5, 3*3=9,
8/4=2, 2^3=8, 5%3=2), so the loop ends after a handful of draws on average.
"""

import logging
from typing import Optional, Tuple

from .arithmetic import get_result, valid_equation
from .random_client import fetch_choice, fetch_digit, make_source
from .row import Answer
from .types import Difficulty, Operator

logger = logging.getLogger(__name__)

EASY_OPERATORS: Tuple[Operator, ...] = (
    Operator.ADD,
    Operator.SUBTRACT,
    Operator.MULTIPLY,
    Operator.DIVIDE,
)
NORMAL_OPERATORS: Tuple[Operator, ...] = (Operator.POWER,)
HARD_OPERATORS: Tuple[Operator, ...] = (Operator.MODULO,)
ALL_OPERATORS: Tuple[Operator, ...] = EASY_OPERATORS + NORMAL_OPERATORS + HARD_OPERATORS


def valid_operators(difficulty: Difficulty) -> Tuple[Operator, ...]:
    """Each tier adds to the one below: easy < normal < hard."""
    if difficulty == Difficulty.EASY:
        return EASY_OPERATORS
    if difficulty == Difficulty.NORMAL:
        return EASY_OPERATORS + NORMAL_OPERATORS
    if difficulty == Difficulty.HARD:
        return ALL_OPERATORS
    raise ValueError(f"Unknown difficulty: {difficulty!r}")


def is_fun_answer(answer: Answer) -> bool:
    """Reject trivial equations like 4+0=4, 1*7=7 or 5/5=1."""
    a = answer.operand_a
    b = answer.operand_b
    operator = answer.operator

    if operator == Operator.ADD:
        return a != 0 and b != 0
    if operator == Operator.SUBTRACT:
        return b != 0
    if operator == Operator.MULTIPLY:
        return a > 1 and b > 1
    if operator == Operator.DIVIDE:
        if a == b:
            return False
        return a != 0 and b != 1
    if operator == Operator.POWER:
        return a > 1 and b > 1
    if operator == Operator.MODULO:
        return a != 0 and b != 1
    return False


def _candidate(operand_a: int, operator: Operator, operand_b: int) -> Optional[Answer]:
    value = get_result(operand_a, operator, operand_b)
    if value is None or value.denominator != 1:
        return None
    return Answer(operand_a, operator, operand_b, int(value))


def generate(difficulty: Difficulty, rng=None) -> Answer:
    difficulty = Difficulty(difficulty)
    if rng is None:
        rng = make_source()

    operator = fetch_choice(rng, valid_operators(difficulty))

    draws = 0
    while True:
        draws += 1
        operand_a = fetch_digit(rng)
        operand_b = fetch_digit(rng)

        answer = _candidate(operand_a, operator, operand_b)
        if answer is not None and valid_equation(answer) and is_fun_answer(answer):
            logger.debug(
                "generated %s answer after %d draw(s) with operator %s",
                difficulty.value, draws, operator.value,
            )
            return answer
