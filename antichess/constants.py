"""
Protocol and notation constants.

Every literal that appears on the wire, plus the environment variable names
read by the configuration layer, lives here so the codec and the command
loop never carry magic strings of their own.
"""

# ---------------------------------------------------------------------------
# Move notation
# ---------------------------------------------------------------------------
# Promotion suffix letters indexed by piece type, pawn first. Only n/b/r/q
# are ever produced, but the full row keeps the index arithmetic trivial.
PROMOTION_LETTERS: str = "pnbrqk"

NONE_TEXT: str = "(none)"
NULL_TEXT: str = "0000"

# ---------------------------------------------------------------------------
# Command loop literals
# ---------------------------------------------------------------------------

COLOR_WHITE: str = "white"
COLOR_BLACK: str = "black"
COLOR_TOKENS: frozenset[str] = frozenset({COLOR_WHITE, COLOR_BLACK})

QUIT_TOKEN: str = "quit"
SKIP_REPLY: str = "skip"
COMMENT_PREFIX: str = "#"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

ENV_CHESS960: str = "UCI_CHESS960"
ENV_VARIANT: str = "UCI_VARIANT"
ENV_SEED: str = "ENGINE_SEED"
ENV_LOG_LEVEL: str = "ENGINE_LOG_LEVEL"

DEFAULT_VARIANT: str = "chess"
DEFAULT_LOG_LEVEL: str = "WARNING"
