"""
Engine options.

Options come from the environment first and can be overridden on the
command line. They are validated once, at startup, by a pydantic model so
that a bad variant name or log level fails before the first command is read.
"""

import logging
import os
import random
import time
from typing import Mapping

from pydantic import BaseModel, field_validator

from antichess.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_VARIANT,
    ENV_CHESS960,
    ENV_LOG_LEVEL,
    ENV_SEED,
    ENV_VARIANT,
)
from antichess.position import board_class


class EngineOptions(BaseModel):
    """
    Startup configuration.

    Fields:
        chess960:  Relaxed castling mode (castling printed as king-takes-rook).
        variant:   python-chess variant name, e.g. "chess" or "antichess".
        seed:      Seed for the move-selection RNG. None seeds from the clock.
        log_level: Level name for diagnostics on stderr.
    """

    chess960: bool = False
    variant: str = DEFAULT_VARIANT
    seed: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("variant")
    @classmethod
    def check_variant(cls, v: str) -> str:
        """Reject variants python-chess cannot play, or that need drops."""
        board_class(v)
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineOptions":
        """
        Build options from environment variables.

        Unset variables keep their defaults. Values are handed to pydantic
        as strings, so "1", "true" and "yes" all enable UCI_CHESS960.
        """
        if environ is None:
            environ = os.environ
        fields = {
            "chess960": environ.get(ENV_CHESS960),
            "variant": environ.get(ENV_VARIANT),
            "seed": environ.get(ENV_SEED),
            "log_level": environ.get(ENV_LOG_LEVEL),
        }
        return cls(**{k: v for k, v in fields.items() if v is not None})


def make_rng(options: EngineOptions) -> random.Random:
    """Create the process-wide RNG, seeded from the options or the clock."""
    seed = options.seed if options.seed is not None else time.time_ns()
    return random.Random(seed)
