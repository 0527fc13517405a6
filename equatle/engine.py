"""
Pure game logic (no UI, no storage).
For each submitted row we colour the five comparable columns:
- green: same character in the same column of the answer
- yellow: character appears in an answer column that was not matched green
- gray: otherwise

Column 3 is always "=" and is never coloured.

Grids are never changed in place. score() returns a new tuple grid that
reuses every row object it did not touch.
"""

import logging
from typing import List, Tuple

from .arithmetic import valid_equation
from .row import (
    COLUMNS,
    COMPARABLE_COLUMNS,
    ROW_COUNT,
    AnyRow,
    Answer,
    row_character,
)
from .types import CellStatus, StatusGrid, StatusRow

__all__ = ["new_grid", "score", "is_correct", "valid_equation"]

logger = logging.getLogger(__name__)


def new_grid(row_count: int = ROW_COUNT) -> Tuple[StatusRow, ...]:
    empty_row = tuple(CellStatus.UNGUESSED for _ in COLUMNS)
    return tuple(empty_row for _ in range(row_count))


def score(grid: StatusGrid, row_index: int, row: AnyRow, answer: Answer) -> Tuple[StatusRow, ...]:
    """
    Example:
      answer = 5-4=1
      guess  = 5+5=10
      column 0 "5" -> green  (consumes the answer's only "5")
      column 1 "+" -> gray
      column 2 "5" -> gray   (no "5" left to credit)
      column 4 "1" -> green
      column 5 "0" -> gray   (answer has no second result digit)
    Returns a new grid with row `row_index` replaced.
    """
    if row_index < 0 or row_index >= len(grid):
        logger.debug("score() called with row_index %d outside %d rows", row_index, len(grid))
        return tuple(grid)

    statuses: List[CellStatus] = list(grid[row_index])

    # 0. Pad short rows so every column has a status
    while len(statuses) < len(COLUMNS):
        statuses.append(CellStatus.UNGUESSED)

    # 1. Start every comparable column as gray
    for col in COMPARABLE_COLUMNS:
        statuses[col] = CellStatus.GRAY

    # 2. Greens, right to left. Each match removes that answer column from
    #    `remaining` so it cannot also pay out a yellow.
    remaining = {col: row_character(answer, col) for col in COMPARABLE_COLUMNS}
    for col in reversed(COMPARABLE_COLUMNS):
        if row_character(row, col) == row_character(answer, col):
            statuses[col] = CellStatus.GREEN
            del remaining[col]

    # 3. Yellows, left to right, against what is left of the answer
    leftover = list(remaining.values())
    for col in COMPARABLE_COLUMNS:
        if statuses[col] == CellStatus.GREEN:
            continue
        character = row_character(row, col)
        if character != "" and character in leftover:
            statuses[col] = CellStatus.YELLOW

    new_rows = list(grid)
    new_rows[row_index] = tuple(statuses)
    return tuple(new_rows)


def is_correct(row: AnyRow, answer: Answer) -> bool:
    """
    Win = every comparable column matches the answer.
    """
    for col in COMPARABLE_COLUMNS:
        if row_character(row, col) != row_character(answer, col):
            return False
    return True
