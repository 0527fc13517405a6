"""
Row model and the fixed 6-column layout.

A guess is typed one character at a time, always left to right:
  operand_a -> operator -> operand_b -> result digit 1 -> result digit 2

It is rendered as 6 columns:
  [operand_a][operator][operand_b]["="][result tens][result ones]

Column 3 always shows "=" and is never compared. Everything that needs to
know which column is which reads LAYOUT instead of hard-coding indexes.
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple, Union

from .types import Column, ColumnRole, Digit, Operator

ROW_COUNT = 6
SEPARATOR = "="
DIGITS = "0123456789"

LAYOUT: Tuple[ColumnRole, ...] = (
    ColumnRole.OPERAND_A,
    ColumnRole.OPERATOR,
    ColumnRole.OPERAND_B,
    ColumnRole.SEPARATOR,
    ColumnRole.RESULT_TENS,
    ColumnRole.RESULT_ONES,
)
COLUMNS: Tuple[Column, ...] = tuple(range(len(LAYOUT)))
COMPARABLE_COLUMNS: Tuple[Column, ...] = tuple(
    col for col, role in enumerate(LAYOUT) if role is not ColumnRole.SEPARATOR
)


@dataclass
class Row:
    """An in-progress guess. Owned by exactly one guess; edited in place."""
    operand_a: Optional[Digit] = None
    operator: Optional[Operator] = None
    operand_b: Optional[Digit] = None
    result: Optional[int] = None

    def __post_init__(self) -> None:
        if self.operator is not None:
            self.operator = Operator(self.operator)

    def copy(self) -> "Row":
        return replace(self)


@dataclass(frozen=True)
class Answer:
    """A fully resolved equation. Created once per game, never changed."""
    operand_a: Digit
    operator: Operator
    operand_b: Digit
    result: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", Operator(self.operator))

    def to_row(self) -> Row:
        return Row(self.operand_a, self.operator, self.operand_b, self.result)


AnyRow = Union[Row, Answer]


def _to_digit(character: str) -> Optional[int]:
    if len(character) == 1 and character in DIGITS:
        return int(character)
    return None


def _to_operator(character: str) -> Optional[Operator]:
    try:
        return Operator(character)
    except ValueError:
        return None


def is_complete(row: AnyRow) -> bool:
    return (
        row.operand_a is not None
        and row.operator is not None
        and row.operand_b is not None
        and row.result is not None
    )


def next_char_is_an_operator(row: Optional[Row]) -> bool:
    # keyboard switches to the operator keys right after the first digit
    return row is not None and row.operand_a is not None and row.operator is None


def add_character(row: Row, character: str) -> Row:
    """
    Put `character` into the next empty field.

    A second result digit shifts the first one left: result 4 + "2" -> 42.
    Characters that do not fit the next field are ignored, and so is
    anything typed after the row is full.
    """
    if row.operand_a is None:
        digit = _to_digit(character)
        if digit is not None:
            row.operand_a = digit
    elif row.operator is None:
        operator = _to_operator(character)
        if operator is not None:
            row.operator = operator
    elif row.operand_b is None:
        digit = _to_digit(character)
        if digit is not None:
            row.operand_b = digit
    elif row.result is None:
        digit = _to_digit(character)
        if digit is not None:
            row.result = digit
    elif row.result < 10:
        digit = _to_digit(character)
        if digit is not None:
            row.result = row.result * 10 + digit
    return row


def backspace(row: Row) -> Row:
    """Remove the most recently typed character."""
    if row.result is not None:
        if row.result >= 10:
            row.result = row.result // 10
        else:
            row.result = None
    elif row.operand_b is not None:
        row.operand_b = None
    elif row.operator is not None:
        row.operator = None
    elif row.operand_a is not None:
        row.operand_a = None
    return row


def last_character(row: AnyRow) -> str:
    """The character that backspace() would remove ("" for an empty row)."""
    if row.result is not None:
        return str(row.result % 10) if row.result >= 10 else str(row.result)
    if row.operand_b is not None:
        return str(row.operand_b)
    if row.operator is not None:
        return row.operator.value
    if row.operand_a is not None:
        return str(row.operand_a)
    return ""


def _digit_text(value: Optional[int]) -> str:
    return "" if value is None else str(value)


def _result_digit(row: AnyRow, index: int) -> str:
    if row.result is None:
        return ""
    text = str(row.result)
    return text[index] if index < len(text) else ""


_PROJECTIONS: Dict[ColumnRole, Callable[[AnyRow], str]] = {
    ColumnRole.OPERAND_A: lambda row: _digit_text(row.operand_a),
    ColumnRole.OPERATOR: lambda row: row.operator.value if row.operator is not None else "",
    ColumnRole.OPERAND_B: lambda row: _digit_text(row.operand_b),
    ColumnRole.SEPARATOR: lambda row: SEPARATOR,
    ColumnRole.RESULT_TENS: lambda row: _result_digit(row, 0),
    ColumnRole.RESULT_ONES: lambda row: _result_digit(row, 1),
}


def row_character(row: AnyRow, column: Column) -> str:
    if column < 0 or column >= len(LAYOUT):
        return ""
    return _PROJECTIONS[LAYOUT[column]](row)


def row_characters(row: AnyRow) -> List[str]:
    return [row_character(row, col) for col in COLUMNS]


def row_to_string(row: AnyRow) -> str:
    return "".join(row_characters(row))


def parse_row(text: str) -> Row:
    """
    Type a whole string into a fresh row, e.g. "5+5=10".
    The "=" and any whitespace are skipped; the layout supplies them.
    """
    row = Row()
    for character in text:
        if character == SEPARATOR or character.isspace():
            continue
        add_character(row, character)
    return row
