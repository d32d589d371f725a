"""
Command loop for the antichess reply engine.

The engine speaks a deliberately small line protocol on stdin/stdout. It is
started with the colour it plays; after that every line it reads is one of:

    e2e4, a7a8q   opponent move in coordinate notation; the engine plays it
                  and immediately answers with its own move on one line
    white, black  acknowledged with "skip" (colour is fixed at startup)
    quit          stop the loop
    # ...         comment, ignored
    (blank)       ignored

Anything else gets "Unknown command: '<line>'". End of input counts as quit.

Threading model:
    None. Reading, decoding, selecting and printing all happen on the
    calling thread; the only wait is the blocking read of the next line.

Critical rule: NEVER print to stdout except for protocol replies.
Diagnostics go to stderr through the logging module.
"""

import argparse
import logging
import os
import random
import sys
from typing import TextIO

# ---------------------------------------------------------------------------
# Path setup: make 'antichess' importable when this script is run directly.
# When run as `python interface/uci.py` from the repo root, sys.path holds
# interface/ rather than the repo root, so we insert the parent directory of
# this file's parent directory at the front of sys.path.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from pydantic import ValidationError

from antichess.codec import encode
from antichess.config import EngineOptions, make_rng
from antichess.constants import (
    COLOR_BLACK,
    COLOR_TOKENS,
    COLOR_WHITE,
    COMMENT_PREFIX,
    QUIT_TOKEN,
    SKIP_REPLY,
)
from antichess.moves import MOVE_NONE
from antichess.selector import select_move
from antichess.session import GameSession

_log = logging.getLogger(__name__)


class UciHandler:
    """
    Stateful handler for the command protocol.

    Holds the game session, the RNG and the output stream. The loop creates
    one instance and dispatches each input line to it.

    Attributes:
        session: The live position and its snapshot history.
        rng:     Random source for reply selection.
        out:     Stream protocol replies are written to.
    """

    def __init__(
        self,
        session: GameSession,
        rng: random.Random,
        out: TextIO = sys.stdout,
    ) -> None:
        self.session = session
        self.rng = rng
        self.out = out

    def send(self, line: str) -> None:
        """
        Write one reply line and flush.

        The line and its newline go out in a single write so a reader never
        sees half a reply.
        """
        self.out.write(line + "\n")
        self.out.flush()

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_color(self) -> None:
        """Colour tokens after startup are acknowledged and otherwise ignored."""
        self.send(SKIP_REPLY)

    def handle_move(self, token: str) -> bool:
        """
        Try to play `token` as the opponent's move and answer it.

        Returns:
            False if the token does not name a move in the current position,
            in which case nothing is printed and nothing changes.
        """
        move = self.session.apply_opponent_move(token)
        if move == MOVE_NONE:
            _log.warning("not a move here: %r", token)
            return False
        self.play_reply()
        return True

    def handle_unknown(self, line: str) -> None:
        self.send(f"Unknown command: '{line}'")

    def play_reply(self) -> None:
        """Select a move for the side to move, print it, then play it."""
        position = self.session.position
        reply = select_move(position, self.rng)
        if reply == MOVE_NONE:
            _log.warning("no reply available at %s", position.fen())
        self.send(encode(reply, position.is_chess960()))
        self.session.apply_self_move(reply)

    # -----------------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------------

    def dispatch(self, line: str) -> bool:
        """
        Handle one input line.

        Returns:
            False when the line asks the loop to stop, True otherwise.
        """
        tokens = line.split()
        token = tokens[0] if tokens else ""

        if token == QUIT_TOKEN:
            return False

        if token in COLOR_TOKENS:
            self.handle_color()
        elif not token or token.startswith(COMMENT_PREFIX):
            pass
        elif not self.handle_move(token):
            self.handle_unknown(line)

        return True


def run_uci_loop(
    color: str,
    options: EngineOptions | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: random.Random | None = None,
) -> None:
    """
    Play one game over the given streams.

    Sets up the start position, makes the first move if the engine plays
    white, then reads and dispatches lines until "quit" or end of input.

    Error handling:
        A failure while handling one line is logged with its traceback and
        the loop moves on to the next line; only quit ends the game.

    Args:
        color:   "white" to move first; any other value waits for the opponent.
        options: Engine options. Defaults to EngineOptions().
        stdin:   Command source. Defaults to sys.stdin.
        stdout:  Reply sink. Defaults to sys.stdout.
        rng:     Random source. Defaults to make_rng(options).
    """
    options = options or EngineOptions()
    if rng is None:
        rng = make_rng(options)
    stdin = stdin or sys.stdin
    session = GameSession(chess960=options.chess960, variant=options.variant)
    handler = UciHandler(session, rng, stdout or sys.stdout)

    _log.info(
        "starting as %s, variant=%s chess960=%s seed=%s",
        color,
        options.variant,
        options.chess960,
        options.seed,
    )

    if color == COLOR_WHITE:
        handler.play_reply()

    while True:
        raw_line = stdin.readline()
        # readline() returns "" only at end of input; a blank line is "\n".
        line = raw_line.rstrip("\r\n") if raw_line else QUIT_TOKEN
        _log.debug("received %r", line)

        try:
            if not handler.dispatch(line):
                break
        except Exception:
            _log.exception("error while handling %r", line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="antichess-uci",
        description="Capture-first random reply engine speaking a line protocol on stdin/stdout.",
    )
    parser.add_argument("color", help=f"'{COLOR_WHITE}' to move first, anything else (e.g. '{COLOR_BLACK}') to wait")
    parser.add_argument("--chess960", action="store_true", default=None, help="print castling as king-takes-rook")
    parser.add_argument("--variant", help="python-chess variant name (default: chess)")
    parser.add_argument("--seed", type=int, help="seed for move selection (default: current time)")
    parser.add_argument("--log-level", help="stderr log level (default: WARNING)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point: parse arguments, configure logging, run the loop."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = EngineOptions.from_env()
        overrides = {
            "chess960": args.chess960,
            "variant": args.variant,
            "seed": args.seed,
            "log_level": args.log_level,
        }
        options = EngineOptions(
            **{**options.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
        )
    except ValidationError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        stream=sys.stderr,
        level=options.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_uci_loop(args.color, options)


if __name__ == "__main__":
    main()
