"""Command line entry point: ``fifteen d`` plays a d x d game of fifteen.

Exit codes::

    0  normal termination (puzzle solved or player quit)
    1  wrong number of arguments
    2  dimension is not an integer in [DIM_MIN, DIM_MAX]
    3  the log file cannot be opened
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from fifteen.core.game_state import DIM_MAX, DIM_MIN
from fifteen.movelog import MoveLog
from fifteen.session import GameSession, SessionConfig, summary_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_DIMENSION = 2
EXIT_LOG_UNAVAILABLE = 3

USAGE_MESSAGE = "Usage: fifteen d"
DIMENSION_MESSAGE = (
    f"Board must be between {DIM_MIN} x {DIM_MIN} and {DIM_MAX} x {DIM_MAX}, inclusive."
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True}
)
@click.argument("dimension", type=click.IntRange(DIM_MIN, DIM_MAX))
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=Path("log.txt"),
    show_default=True,
    help="File receiving every board frame and move, truncated on start.",
)
@click.option(
    "--frame-delay",
    type=click.FloatRange(min=0),
    default=0.5,
    show_default=True,
    help="Seconds to wait after each turn.",
)
@click.option(
    "--illegal-delay",
    type=click.FloatRange(min=0),
    default=0.5,
    show_default=True,
    help="Extra seconds to wait after an illegal move.",
)
@click.option(
    "--greet-delay",
    type=click.FloatRange(min=0),
    default=2.0,
    show_default=True,
    help="Seconds the welcome screen stays up.",
)
@click.option("--color/--no-color", default=True, help="Highlight movable and placed tiles.")
@click.option(
    "-v", "--verbose", is_flag=True, help="Log debug messages and print a game summary."
)
@click.pass_context
def fifteen(
    ctx: click.Context,
    dimension: int,
    log_file: Path,
    frame_delay: float,
    illegal_delay: float,
    greet_delay: float,
    color: bool,
    verbose: bool,
) -> None:
    """Play the game of fifteen on a DIMENSION x DIMENSION board.

    Enter the number of a tile next to the blank to slide it; enter 0 to quit.
    """
    _configure_logging(verbose)
    config = SessionConfig(
        log_path=log_file,
        frame_delay=frame_delay,
        illegal_delay=illegal_delay,
        greet_delay=greet_delay,
        color=color,
    )

    try:
        move_log = MoveLog.open(config.log_path)
    except OSError as exc:
        logger.debug("Cannot open log %s: %s", config.log_path, exc)
        click.echo(f"Cannot open log file {config.log_path}: {exc.strerror}", err=True)
        ctx.exit(EXIT_LOG_UNAVAILABLE)

    logger.debug("Logging to %s", config.log_path)
    with move_log:
        result = GameSession(dimension, move_log, config=config).run()
    if verbose:
        click.echo(summary_table(result))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and map click's errors onto the game's exit codes."""
    try:
        rv = fifteen.main(
            args=list(argv) if argv is not None else None,
            prog_name="fifteen",
            standalone_mode=False,
        )
    except click.MissingParameter:
        click.echo(USAGE_MESSAGE, err=True)
        return EXIT_USAGE
    except click.BadParameter as exc:
        if exc.param is not None and exc.param.name == "dimension":
            click.echo(DIMENSION_MESSAGE, err=True)
            return EXIT_BAD_DIMENSION
        exc.show()
        return EXIT_USAGE
    except click.UsageError:
        click.echo(USAGE_MESSAGE, err=True)
        return EXIT_USAGE
    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_OK
    return EXIT_OK if rv is None else rv


def run() -> None:
    sys.exit(main())
