from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol

import click
from tabulate import tabulate

from fifteen.core.engine import PuzzleEngine
from fifteen.core.game_state import GameState
from fifteen.movelog import QUIT_SENTINEL, MoveLog
from fifteen.render import BoardRenderer

__all__ = [
    "SessionConfig",
    "Outcome",
    "SessionResult",
    "InputSource",
    "PromptInputSource",
    "GameSession",
    "summary_table",
]

logger = logging.getLogger(__name__)

GREETING = "WELCOME TO GAME OF FIFTEEN"
WIN_MESSAGE = "ftw!"
ILLEGAL_MESSAGE = "\nIllegal move."


@dataclass
class SessionConfig:
    """Caller-side settings for one game: log destination, pacing and colour."""

    log_path: Path = Path("log.txt")
    frame_delay: float = 0.5
    illegal_delay: float = 0.5
    greet_delay: float = 2.0
    color: bool = True


class Outcome(Enum):
    WON = "won"
    QUIT = "quit"


@dataclass
class SessionResult:
    size: int
    outcome: Outcome
    accepted: int
    illegal: int
    final_state: GameState


class InputSource(Protocol):
    def read_tile(self) -> int: ...


class PromptInputSource:
    """Ask the player for one tile per turn on the terminal.

    click re-prompts until it gets an integer.  End of input or Ctrl-C is
    reported as the quit sentinel.
    """

    prompt = "Tile to move"

    def read_tile(self) -> int:
        try:
            return click.prompt(self.prompt, type=int)
        except click.Abort:
            click.echo()
            return QUIT_SENTINEL


class GameSession:
    """Drive one game: render, log, read a tile, move, until won or quit."""

    def __init__(
        self,
        size: int,
        move_log: MoveLog,
        input_source: Optional[InputSource] = None,
        config: Optional[SessionConfig] = None,
        engine: Optional[PuzzleEngine] = None,
        renderer: Optional[BoardRenderer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.size = size
        self.move_log = move_log
        self.input_source = input_source or PromptInputSource()
        self.config = config or SessionConfig()
        self.engine = engine or PuzzleEngine()
        self.renderer = renderer or BoardRenderer(self.engine, color=self.config.color)
        self.sleep = sleep
        self.state: Optional[GameState] = None

    def greet(self) -> None:
        click.clear()
        click.echo(GREETING)
        self._pause(self.config.greet_delay)

    def run(self) -> SessionResult:
        self.greet()
        self.state = state = self.engine.initialize(self.size)
        logger.debug("Started %dx%d game", self.size, self.size)

        accepted = illegal = 0
        while True:
            click.clear()
            click.echo(self.renderer.render(state))
            self.move_log.write_frame(state)

            if self.engine.is_won(state):
                click.echo(WIN_MESSAGE)
                outcome = Outcome.WON
                break

            tile = self.input_source.read_tile()
            self.move_log.write_move(tile)
            if tile == QUIT_SENTINEL:
                outcome = Outcome.QUIT
                break

            if self.engine.apply_move(state, tile):
                accepted += 1
                logger.debug("Moved tile %d", tile)
            else:
                illegal += 1
                logger.debug("Rejected tile %d", tile)
                click.echo(ILLEGAL_MESSAGE)
                self._pause(self.config.illegal_delay)

            self._pause(self.config.frame_delay)

        logger.debug(
            "Game ended: %s after %d moves (%d illegal)", outcome.value, accepted, illegal
        )
        return SessionResult(
            size=self.size,
            outcome=outcome,
            accepted=accepted,
            illegal=illegal,
            final_state=state,
        )

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self.sleep(seconds)


def summary_table(result: SessionResult) -> str:
    rows = [
        ["Board", f"{result.size} x {result.size}"],
        ["Outcome", result.outcome.value],
        ["Moves", result.accepted],
        ["Illegal moves", result.illegal],
    ]
    return tabulate(rows, tablefmt="simple")
