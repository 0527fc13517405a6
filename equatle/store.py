"""
In-memory store
Holds game sessions in memory and runs the play loop around the pure engine:
type characters into the current row, submit it, colour it, decide won/lost.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from .config import get_settings
from .engine import is_correct, new_grid, score, valid_equation
from .generator import generate
from .row import (
    ROW_COUNT,
    Answer,
    Row,
    add_character,
    backspace,
    is_complete,
    next_char_is_an_operator,
    row_characters,
    row_to_string,
)
from .schemas import GameStateOut, GuessEntryOut
from .types import Difficulty, PlayState, StatusRow

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    row: Answer
    statuses: StatusRow
    timestamp: float


@dataclass
class Game:
    id: str
    answer: Answer
    difficulty: Difficulty = Difficulty.NORMAL
    attempts_left: int = ROW_COUNT
    status: PlayState = PlayState.PLAYING
    current: Row = field(default_factory=Row)
    grid: Tuple[StatusRow, ...] = field(default_factory=new_grid)
    history: List[GuessEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)


class GameStore:
    def __init__(self, rng=None) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()
        self._rng = rng

    def create(self, difficulty: Optional[Difficulty] = None, answer: Optional[Answer] = None) -> Game:
        if difficulty is None:
            difficulty = get_settings().default_difficulty
        difficulty = Difficulty(difficulty)
        if answer is None:
            answer = generate(difficulty, self._rng)

        new_id = str(uuid4())
        game = Game(id=new_id, answer=answer, difficulty=difficulty)
        with self._lock:
            self._games[new_id] = game
        logger.info("created %s game %s", difficulty.value, new_id)
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def type_character(self, game_id: str, character: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            if game.status == PlayState.PLAYING:
                add_character(game.current, character)
                game.updated_at = time()
            return game

    def backspace(self, game_id: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            if game.status == PlayState.PLAYING:
                backspace(game.current)
                game.updated_at = time()
            return game

    def guess(self, game_id: str, row: Row) -> Optional[Game]:
        """Replace the current row with `row` and submit it."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None
            if game.status == PlayState.PLAYING:
                game.current = row.copy()
            return self.submit(game_id)

    def submit(self, game_id: str) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.status != PlayState.PLAYING:
                # If game already ended, just return it (ignore extra guesses)
                return game

            # --- row guards: a rejected row does not use up an attempt ---
            row = game.current
            if not is_complete(row):
                raise ValueError("Not enough characters.")
            if not valid_equation(row):
                raise ValueError(f"{row_to_string(row)} is not a valid equation.")

            row_index = len(game.history)
            game.grid = score(game.grid, row_index, row, game.answer)

            submitted = Answer(row.operand_a, row.operator, row.operand_b, row.result)
            game.history.append(
                GuessEntry(row=submitted, statuses=game.grid[row_index], timestamp=time())
            )
            game.attempts_left -= 1
            game.current = Row()

            if is_correct(submitted, game.answer):
                game.status = PlayState.WON
            elif game.attempts_left <= 0:
                game.status = PlayState.LOST

            game.updated_at = time()
            if game.status != PlayState.PLAYING:
                logger.info("game %s %s after %d guess(es)", game_id, game.status.value, len(game.history))
            return game

    def snapshot(self, game_id: str) -> Optional[GameStateOut]:
        """Read-only view for rendering. The answer is only shown once the game is over."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            history = []
            for entry in game.history:
                history.append(
                    GuessEntryOut(
                        characters=row_characters(entry.row),
                        statuses=list(entry.statuses),
                        text=row_to_string(entry.row),
                        timestamp=entry.timestamp,
                    )
                )

            answer = None
            if game.status != PlayState.PLAYING:
                answer = row_to_string(game.answer)

            return GameStateOut(
                game_id=game.id,
                difficulty=game.difficulty,
                status=game.status,
                attempts_left=game.attempts_left,
                history=history,
                grid=[list(statuses) for statuses in game.grid],
                current=row_characters(game.current),
                next_char_is_an_operator=next_char_is_an_operator(game.current),
                answer=answer,
            )
