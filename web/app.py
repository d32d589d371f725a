"""
FastAPI web application for the antichess reply engine.

Exposes a single REST endpoint (POST /api/move) that takes a FEN, optionally
plays the opponent's move on it, and answers with the engine's reply in
coordinate notation together with the resulting FEN.

Architecture notes:
- Sync endpoint (not async): reply selection is pure CPU work and finishes in
  microseconds, so FastAPI's thread pool is more than enough.
- Stateless per request: the client sends the full FEN each time; no session
  survives between requests. The stdin command loop in interface/uci.py is
  the stateful interface.
"""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from antichess.codec import decode, encode
from antichess.config import EngineOptions, make_rng
from antichess.constants import DEFAULT_VARIANT
from antichess.moves import MOVE_NONE
from antichess.position import Position, Snapshot
from antichess.selector import select_move

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Antichess reply engine", version="1.0.0")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Client request to the engine.

    Fields:
        fen:           Position to move in. Omitted means the variant's
                       start position.
        chess960:      Relaxed castling mode for both decoding and encoding.
        variant:       python-chess variant name.
        opponent_move: Optional move in coordinate notation to play first.
        seed:          Optional RNG seed for a reproducible reply.
    """

    fen: str | None = None
    chess960: bool = False
    variant: str = DEFAULT_VARIANT
    opponent_move: str | None = None
    seed: int | None = None

    @field_validator("opponent_move")
    @classmethod
    def strip_move(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class MoveResponse(BaseModel):
    """
    Engine reply.

    Fields:
        move: Reply in coordinate notation (e.g. "e7e5", "e1g1", "a2a1q").
        fen:  Position after the reply has been played.
    """

    move: str
    fen: str


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Play the optional opponent move, then compute and play the engine's reply.

    Raises:
        HTTPException 400: Malformed FEN, unknown variant, an opponent move
                           that names nothing in the position, or no reply
                           available (game over).
    """
    try:
        position = Position(request.fen, chess960=request.chess960, variant=request.variant)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid position: {exc}") from exc

    if request.opponent_move is not None:
        move = decode(request.opponent_move, position)
        if move == MOVE_NONE:
            raise HTTPException(status_code=400, detail=f"Unknown move: {request.opponent_move!r}")
        position.apply(move, Snapshot())

    rng = make_rng(EngineOptions(seed=request.seed))
    reply = select_move(position, rng)
    if reply == MOVE_NONE:
        raise HTTPException(status_code=400, detail=f"No move available in {position.fen()}")

    text = encode(reply, position.is_chess960())
    position.apply(reply, Snapshot())

    _log.info("reply=%s fen=%s", text, position.fen()[:40])

    return MoveResponse(move=text, fen=position.fen())
