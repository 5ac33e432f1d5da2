"""CLI tool to check a game log against the rules engine.

Example::

    python -m scripts.verify_log log.txt

Every frame in the log is compared with the board obtained by replaying the
logged moves from the starting layout.  Exits with status 1 on the first
disagreement.
"""

from __future__ import annotations

from pathlib import Path

import click

from fifteen.core.game_state import InvalidDimension
from fifteen.movelog import LogMismatch, read_log, replay_log
from fifteen.render import BoardRenderer


@click.command()
@click.argument(
    "log_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--show-board/--no-show-board",
    default=False,
    help="Print the final board reconstructed from the log.",
)
def verify_log(log_path: Path, show_board: bool) -> None:
    try:
        records = read_log(log_path)
        summary = replay_log(records)
    except (LogMismatch, InvalidDimension) as exc:
        raise click.ClickException(f"{log_path}: {exc}")
    except ValueError as exc:
        raise click.ClickException(f"{log_path}: malformed log ({exc})")

    click.echo(f"Board: {summary.size} x {summary.size}")
    click.echo(f"Moves entered: {len(summary.moves)}")
    click.echo(f"Accepted: {summary.accepted}  Illegal: {summary.illegal}")
    if summary.won:
        status = "won"
    elif summary.quit:
        status = "quit"
    else:
        status = "unfinished"
    click.echo(f"Result: {status}")

    if show_board:
        click.echo(BoardRenderer(color=False).render(summary.final_state))


if __name__ == "__main__":
    verify_log()
