"""Text log of a game session and a verifier that replays it.

A log interleaves two kinds of records, each written as soon as it happens:

* a *frame*: one line per board row, cell values joined with ``|``;
* a *move*: one line holding the raw integer the player entered, including
  the quit sentinel ``0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Optional, Sequence, Union

from fifteen.core.engine import PuzzleEngine
from fifteen.core.game_state import GameState

__all__ = [
    "QUIT_SENTINEL",
    "FrameRecord",
    "MoveRecord",
    "MoveLog",
    "LogMismatch",
    "ReplaySummary",
    "parse_log",
    "read_log",
    "replay_log",
]

logger = logging.getLogger(__name__)

QUIT_SENTINEL = 0
CELL_SEPARATOR = "|"


@dataclass(frozen=True)
class FrameRecord:
    rows: tuple[tuple[int, ...], ...]
    line: int = 0

    @property
    def size(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class MoveRecord:
    tile: int
    line: int = 0


Record = Union[FrameRecord, MoveRecord]


class MoveLog:
    """Append frames and moves to a text stream, flushing after each record."""

    def __init__(self, handle: IO[str]):
        self._handle = handle

    @classmethod
    def open(cls, path: Union[str, Path]) -> "MoveLog":
        """Open ``path`` for writing, truncating any previous log.

        Raises:
            OSError: If the file cannot be created or written.
        """
        return cls(Path(path).open("w", encoding="utf-8"))

    def write_frame(self, state: GameState) -> None:
        for row in state.rows():
            self._handle.write(CELL_SEPARATOR.join(str(v) for v in row) + "\n")
        self._handle.flush()

    def write_move(self, tile: int) -> None:
        self._handle.write(f"{tile}\n")
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "MoveLog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class LogMismatch(ValueError):
    """A logged frame or move disagrees with what the engine produces."""

    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f"line {line}: {message}")


def parse_log(lines: Iterable[str]) -> list[Record]:
    """Split raw log lines into frame and move records.

    Consecutive row lines are grouped into frames of ``size`` rows, where
    ``size`` is the number of cells on each row.

    Raises:
        ValueError: On a non-integer value, a ragged row or a truncated frame.
    """
    records: list[Record] = []
    pending: list[tuple[int, ...]] = []
    pending_start = 0

    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        try:
            values = tuple(int(v) for v in text.split(CELL_SEPARATOR))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: not an integer record: {text!r}") from exc

        if len(values) == 1 and CELL_SEPARATOR not in text:
            if pending:
                raise ValueError(
                    f"line {lineno}: frame starting at line {pending_start} is truncated"
                )
            records.append(MoveRecord(tile=values[0], line=lineno))
            continue

        if pending and len(values) != len(pending[0]):
            raise ValueError(
                f"line {lineno}: expected {len(pending[0])} cells, got {len(values)}"
            )
        if not pending:
            pending_start = lineno
        pending.append(values)
        if len(pending) == len(values):
            records.append(FrameRecord(rows=tuple(pending), line=pending_start))
            pending = []

    if pending:
        raise ValueError(f"frame starting at line {pending_start} is truncated")
    return records


def read_log(path: Union[str, Path]) -> list[Record]:
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_log(handle)


@dataclass
class ReplaySummary:
    """Outcome of replaying a log."""

    size: int
    moves: list[int] = field(default_factory=list)
    accepted: int = 0
    illegal: int = 0
    won: bool = False
    quit: bool = False
    final_state: Optional[GameState] = None


def replay_log(
    records: Sequence[Record], engine: Optional[PuzzleEngine] = None
) -> ReplaySummary:
    """Re-run a logged session on a fresh board and check every frame.

    The first record must be a frame equal to ``engine.initialize(size)``.
    Every later frame must match the board after the preceding moves.

    Raises:
        LogMismatch: At the first record that disagrees with the engine.
    """
    engine = engine or PuzzleEngine()
    if not records or not isinstance(records[0], FrameRecord):
        raise LogMismatch("log must start with a board frame", 1)

    first = records[0]
    state = engine.initialize(first.size)
    summary = ReplaySummary(size=state.size)

    for record in records:
        if summary.won or summary.quit:
            raise LogMismatch("record after the end of the game", record.line)

        if isinstance(record, FrameRecord):
            if record.rows != state.rows():
                raise LogMismatch(
                    f"frame does not match the board {state.rows()}", record.line
                )
            summary.won = engine.is_won(state)
            continue

        summary.moves.append(record.tile)
        if record.tile == QUIT_SENTINEL:
            summary.quit = True
            continue
        if engine.apply_move(state, record.tile):
            summary.accepted += 1
        else:
            summary.illegal += 1

    summary.final_state = state
    logger.debug(
        "Replayed %d moves on a %dx%d board (won=%s, quit=%s)",
        len(summary.moves),
        summary.size,
        summary.size,
        summary.won,
        summary.quit,
    )
    return summary
