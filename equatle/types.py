"""
Labels for clarity.
Closed sets (operators, difficulty, cell colours, play state, column roles)
are enums so every dispatch over them can be checked for completeness.
"""

from enum import Enum
from typing import Sequence, Tuple


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    MODULO = "%"


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class CellStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    GRAY = "gray"
    UNGUESSED = "unguessed"


class PlayState(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class ColumnRole(Enum):
    OPERAND_A = "operand_a"
    OPERATOR = "operator"
    OPERAND_B = "operand_b"
    SEPARATOR = "separator"
    RESULT_TENS = "result_tens"
    RESULT_ONES = "result_ones"


Digit = int  # 0 -> 9
Column = int  # 0 -> 5
StatusRow = Tuple[CellStatus, ...]  # one status per column
StatusGrid = Sequence[StatusRow]  # rows x columns
