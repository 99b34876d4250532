"""
Runtime settings for the snake game.

Values come from the environment (optionally a local .env file):

    SNAKE_BOARD_WIDTH   board width for a fresh game (default 20)
    SNAKE_BOARD_HEIGHT  board height for a fresh game (default 10)
    SNAKE_TICK_MS       milliseconds to wait for input per tick (default 300)
    SNAKE_SEED          seed for food placement (default: unseeded)
    LOG_LEVEL           logging level name (default WARNING)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, TICK_MS


@dataclass
class Settings:
    board_width: int = DEFAULT_WIDTH
    board_height: int = DEFAULT_HEIGHT
    tick_ms: int = TICK_MS
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Load settings from the environment, reading .env first."""
    load_dotenv()
    return Settings(
        board_width=_int_env("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH),
        board_height=_int_env("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT),
        tick_ms=_int_env("SNAKE_TICK_MS", TICK_MS),
        seed=_int_env("SNAKE_SEED", None),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
