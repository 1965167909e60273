import logging
from pathlib import Path
from typing import Callable, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from dilemma.config import MAX_ROUNDS, MIN_ROUNDS, STATS_FILE, Settings
from dilemma.game.models import Difficulty
from dilemma.session.runner import SessionRunner

app = typer.Typer(help="Dilemma: the Iterated Prisoner's Dilemma in your terminal.")
console = Console()

logger = logging.getLogger(__name__)

def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True
    )

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    stats_file: Path = typer.Option(Path(STATS_FILE), envvar="DILEMMA_STATS_FILE", help="Path to the statistics file"),
    speed: float = typer.Option(1.0, min=0.0, envvar="DILEMMA_SPEED", help="Animation speed multiplier, 0 disables delays"),
    seed: Optional[int] = typer.Option(None, help="Seed for the computer's random choices"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")
):
    """
    Opens the main menu when no command is given.
    """
    _setup_logging(verbose)
    ctx.obj = Settings(stats_file=stats_file, speed=speed, seed=seed, verbose=verbose)
    logger.debug(f"Settings: {ctx.obj}")

    if ctx.invoked_subcommand is None:
        _run(ctx.obj, lambda runner: runner.run())

@app.command()
def play(
    ctx: typer.Context,
    difficulty: Optional[Difficulty] = typer.Option(None, case_sensitive=False, help="Skip the difficulty menu"),
    rounds: Optional[int] = typer.Option(None, min=MIN_ROUNDS, max=MAX_ROUNDS, help="Skip the round count prompt")
):
    """
    Starts a game straight away.
    """
    _run(ctx.obj, lambda runner: runner.play(difficulty=difficulty, rounds=rounds))

@app.command()
def stats(ctx: typer.Context):
    """
    Displays your lifetime statistics.
    """
    _run(ctx.obj, lambda runner: runner.show_stats())

@app.command()
def rules(ctx: typer.Context):
    """
    Explains the payoff matrix and the rules.
    """
    _run(ctx.obj, lambda runner: runner.show_rules())

def _run(settings: Settings, action: Callable[[SessionRunner], object]):
    runner = SessionRunner(settings, console=console)
    try:
        action(runner)
    except (KeyboardInterrupt, EOFError):
        # Leaving mid-game discards it; only finished games are recorded
        runner.goodbye()

if __name__ == "__main__":
    app()
