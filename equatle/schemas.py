"""
Explicit validation & Pydantic models
- GuessRequest checks a typed guess before it reaches the store.
- The *Out models are what a renderer reads; they never expose the answer
  while the game is still being played.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .row import DIGITS, SEPARATOR, Row, parse_row
from .types import CellStatus, Difficulty, Operator, PlayState

ALLOWED_CHARACTERS = set(DIGITS) | {op.value for op in Operator} | {SEPARATOR, " "}


# 1. Validates a player's typed guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="The equation as typed, e.g. '5+5=10'")

    @field_validator("guess")
    @classmethod
    def validate_characters(cls, guess: str) -> str:
        """
        We only check the alphabet here. Whether the equation is complete and
        true is the store's job, so the player gets the same message either way.
        """
        if guess.strip() == "":
            raise ValueError("Guess must not be empty.")
        for character in guess:
            if character not in ALLOWED_CHARACTERS:
                raise ValueError(f"Unexpected character {character!r} in guess.")
        return guess

    def to_row(self) -> Row:
        return parse_row(self.guess)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "5+5=10"},
                {"guess": "8/4=2"},
                {"guess": "2^3=8"},
            ]
        }
    }


# 2. One submitted row with its colours
class GuessEntryOut(BaseModel):
    characters: List[str] = Field(..., description="The 6 column characters")
    statuses: List[CellStatus] = Field(..., description="Colour per column")
    text: str = Field(..., description="The row as a string")
    timestamp: float = Field(..., description="When the row was submitted")


# 3. Represents the overall state of the game
class GameStateOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    difficulty: Difficulty = Field(..., description="Chosen difficulty level")
    status: PlayState = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many rows remain")
    history: List[GuessEntryOut] = Field(..., description="Submitted rows so far")
    grid: List[List[CellStatus]] = Field(..., description="Colour of every cell on the board")
    current: List[str] = Field(..., description="Characters typed into the row being edited")
    next_char_is_an_operator: bool = Field(..., description="Show operator keys next")
    answer: Optional[str] = Field(None, description="The answer (only revealed once the game is over)")
