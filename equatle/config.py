"""
Single place to:
- Read settings from env (a local .env is loaded if present)
- Turn them into typed values
- Fail loudly on values we cannot use

Keys:
  APP_ENV              local | test | ...      (default "local")
  EQUATLE_DIFFICULTY   easy | normal | hard    (default "normal")
  EQUATLE_SEED         integer seed for reproducible answers (default: unseeded)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .types import Difficulty

# dev convenience; in prod the environment is injected directly
load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_env: str = "local"
    default_difficulty: Difficulty = Difficulty.NORMAL
    random_seed: Optional[int] = None


def get_settings() -> Settings:
    """Read the environment now (not at import) so tests can monkeypatch it."""
    app_env = os.getenv("APP_ENV", "local")

    raw_difficulty = os.getenv("EQUATLE_DIFFICULTY", Difficulty.NORMAL.value).strip().lower()
    try:
        difficulty = Difficulty(raw_difficulty)
    except ValueError:
        raise RuntimeError(
            f"EQUATLE_DIFFICULTY={raw_difficulty!r} is not one of: easy, normal, hard."
        ) from None

    raw_seed = os.getenv("EQUATLE_SEED")
    seed = None
    if raw_seed is not None and raw_seed.strip() != "":
        try:
            seed = int(raw_seed)
        except ValueError:
            raise RuntimeError(f"EQUATLE_SEED={raw_seed!r} must be an integer.") from None

    return Settings(app_env=app_env, default_difficulty=difficulty, random_seed=seed)
