import time
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from dilemma.game.models import GameState, Move, RoundResult, Statistics
from dilemma.game.rules import payoff
from dilemma.prompts.templates import (
    DIFFICULTY_DESCRIPTIONS,
    DIFFICULTY_OPTIONS,
    DIFFICULTY_STYLES,
    MAIN_MENU_OPTIONS,
    MOVE_LABELS,
    NO_GAMES_YET,
    PAYOFF_LABELS,
    ROUND_VERDICTS,
    RULES,
    STRATEGY_TIPS,
    SUBTITLE,
    TITLE,
    VERDICTS
)

# Base delays in seconds, scaled by the configured speed
CHAR_DELAY = 0.02
REVEAL_DELAY = 0.8
RESULT_DELAY = 1.5
PROGRESS_WIDTH = 30

def _score_style(mine: int, theirs: int) -> str:
    if mine > theirs:
        return "bright_green"
    if mine < theirs:
        return "bright_red"
    return "yellow"

def _move_text(move: Move) -> Text:
    if move is Move.COOPERATE:
        return Text("[C] COOPERATE", style="green")
    return Text("[D] DEFECT", style="red")

def _signed(value: int) -> Text:
    if value > 0:
        return Text(f"+{value}", style="bright_green")
    if value < 0:
        return Text(str(value), style="bright_red")
    return Text("0", style="yellow")

class GameView:
    """
    Renders every screen of the game on a rich Console.
    """

    def __init__(self, console: Console, speed: float = 1.0):
        self.console = console
        self.speed = speed

    def _pause(self, seconds: float):
        if self.speed > 0:
            time.sleep(seconds * self.speed)

    def _section(self, title: str):
        self.console.print(Rule(style="bright_black"))
        self.console.print(Text(title, style="bold yellow"))
        self.console.print(Rule(style="bright_black"))

    def clear(self):
        self.console.clear()

    def title(self):
        self.clear()
        banner = Group(
            Text(TITLE, style="bold", justify="center"),
            Text(SUBTITLE, style="italic", justify="center"),
        )
        self.console.print(Panel(banner, border_style="bright_cyan", padding=(1, 2)))
        self.console.print()

    def payoff_matrix(self):
        table = Table(
            title="PAYOFF MATRIX (Your Points / Computer Points)",
            title_style="bold yellow",
            border_style="bright_black"
        )
        table.add_column("Choices")
        table.add_column("Points", justify="center")
        table.add_column("Name")

        for player_move, opponent_move, description, name, style in PAYOFF_LABELS:
            mine, theirs = payoff(player_move, opponent_move)
            table.add_row(
                Text(description, style=style),
                Text(f"{mine} / {theirs}", style=f"bright_{style}"),
                Text(name, style=f"bright_{style}")
            )
        self.console.print(table)
        self.console.print()

    def main_menu(self):
        self.title()
        self._section("MAIN MENU")
        self.console.print()
        for key, label in MAIN_MENU_OPTIONS.items():
            self.console.print(Text(f"  [{key}] {label}"))
        self.console.print()

    def difficulty_menu(self):
        self.console.print(Text("Choose Difficulty Level:", style="bold yellow"))
        self.console.print()
        for key, difficulty in DIFFICULTY_OPTIONS.items():
            line = Text("  ")
            line.append(f"[{key}] {difficulty.value.upper()}", style=f"bold {DIFFICULTY_STYLES[difficulty]}")
            line.append(f" - {DIFFICULTY_DESCRIPTIONS[difficulty]}")
            self.console.print(line)
        self.console.print()

    def game_state(self, state: GameState):
        # Shown before the round is played, so the bar counts the round in progress
        current = min(state.round + 1, state.total_rounds)
        grid = Table.grid(padding=(0, 1))
        grid.add_row(
            ProgressBar(total=state.total_rounds, completed=current, width=PROGRESS_WIDTH),
            Text(f"{current}/{state.total_rounds}", style="cyan")
        )
        self.console.print()
        self.console.print(grid)
        self.console.print()

        scores = Text("  ")
        scores.append("You: ", style="bold cyan")
        scores.append(str(state.player_score), style=_score_style(state.player_score, state.opponent_score))
        scores.append(" │ ")
        scores.append("Computer: ", style="bold magenta")
        scores.append(str(state.opponent_score), style=_score_style(state.opponent_score, state.player_score))
        self.console.print(scores)
        self.console.print()

    def animate(self, text: str, suffix: str = ""):
        self.console.print("  ", end="")
        for char in text:
            self.console.print(Text(char, style="cyan"), end="")
            self._pause(CHAR_DELAY)
        self.console.print(Text(f" {suffix}"))

    def move_menu(self):
        self.console.print()
        self.console.print(Text("Your Turn - Choose your strategy:", style="bold yellow"))
        self.console.print()
        for label, symbol, description in MOVE_LABELS.values():
            self.animate(label, symbol)
            self.console.print(Text(f"       {description}"))
            self.console.print()

    def round_result(self, result: RoundResult):
        self._pause(REVEAL_DELAY)

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("You:", _move_text(result.player_move))
        table.add_row("Computer:", _move_text(result.opponent_move))
        table.add_row("", "")
        table.add_row(
            "You earned:",
            Text(f"{result.player_points} points",
                 style=_score_style(result.player_points, result.opponent_points))
        )
        table.add_row(
            "Computer earned:",
            Text(f"{result.opponent_points} points",
                 style=_score_style(result.opponent_points, result.player_points))
        )
        self.console.print()
        self.console.print(Panel(
            table,
            title=f"ROUND {result.round_number} RESOLUTION",
            border_style="bright_cyan",
            expand=False
        ))

        verdict, style = ROUND_VERDICTS[result.outcome.value]
        self.console.print()
        self.console.print(Text(verdict, style=style))
        self._pause(RESULT_DELAY)

    def _record(self, stats: Statistics) -> Text:
        record = Text("  ")
        record.append("Record: ", style="cyan")
        record.append(f"{stats.games_won} W", style="bold bright_green")
        record.append(" / ")
        record.append(f"{stats.games_lost} L", style="bold bright_red")
        record.append(" / ")
        record.append(f"{stats.games_tied} T", style="bold yellow")
        return record

    def game_summary(self, state: GameState, stats: Statistics):
        self.clear()
        self.console.print(Panel(
            Text("GAME OVER", style="bold", justify="center"),
            border_style="bright_cyan"
        ))
        self.console.print()

        summary = Table.grid(padding=(0, 1))
        summary.add_column(style="bold")
        summary.add_column()
        summary.add_row(
            Text("Your Final Score:", style="bold cyan"),
            Text(str(state.player_score), style=_score_style(state.player_score, state.opponent_score))
        )
        summary.add_row(
            Text("Computer Final Score:", style="bold magenta"),
            Text(str(state.opponent_score), style=_score_style(state.opponent_score, state.player_score))
        )
        summary.add_row(Text("Score Differential:", style="bold yellow"), _signed(state.score_differential))
        self.console.print(Rule(style="bright_black"))
        self.console.print(summary)
        self.console.print(Rule(style="bright_black"))
        self.console.print()

        headline, message, style = VERDICTS[state.outcome.value]
        self.console.print(Text(headline, style=f"bold bright_{style}"))
        self.console.print()
        self.console.print(Text(message, style=style))
        self.console.print()
        self.console.print(Text(f"Total Rounds Played: {state.total_rounds}", style="cyan"))
        self.console.print(Text(f"Difficulty: {state.difficulty.value.capitalize()}", style="yellow"))
        self.console.print()

        self._section("YOUR STATISTICS")
        self.console.print(Text(f"  Games Played: {stats.games_played}", style="cyan"))
        self.console.print(self._record(stats))
        self.console.print(Text(f"  Win Rate: {stats.win_rate:.1f}%", style="cyan"))
        self.console.print()

    def statistics(self, stats: Statistics):
        self.title()
        self._section("YOUR GAME STATISTICS")
        self.console.print()

        if stats.games_played == 0:
            self.console.print(Text(NO_GAMES_YET, style="yellow"))
        else:
            table = Table(show_header=False, box=None, padding=(0, 2))
            table.add_column(style="bold")
            table.add_column(justify="right")
            table.add_row(Text("Total Games Played:", style="bold cyan"), Text(str(stats.games_played), style="bright_cyan"))
            table.add_row(Text("Games Won:", style="bold green"), Text(str(stats.games_won), style="bright_green"))
            table.add_row(Text("Games Lost:", style="bold red"), Text(str(stats.games_lost), style="bright_red"))
            table.add_row(Text("Games Tied:", style="bold yellow"), Text(str(stats.games_tied), style="bright_yellow"))
            table.add_row(Text("Win Rate:", style="bold magenta"), Text(f"{stats.win_rate:.1f}%", style="bright_magenta"))
            table.add_row(Text("Total Points Earned:", style="bold cyan"), Text(str(stats.total_points), style="bright_cyan"))
            table.add_row(Text("Best Score Differential:", style="bold green"), _signed(stats.best_score_differential))
            table.add_row(Text("Worst Score Differential:", style="bold red"), _signed(stats.worst_score_differential))
            self.console.print(table)

        self.console.print()
        self.console.print(Rule(style="bright_black"))

    def rules(self):
        self.title()
        self.payoff_matrix()
        self._section("GAME RULES & STRATEGY TIPS")
        self.console.print()
        for line in RULES:
            self.console.print(Text(line, style="cyan"))
        self.console.print()
        self.console.print(Text("STRATEGIC TIPS:", style="bold bright_yellow"))
        for tip, style in STRATEGY_TIPS:
            self.console.print(Text(f"  {tip}", style=style))
        self.console.print()
        self.console.print(Rule(style="bright_black"))

    def message(self, text: str, style: str = ""):
        self.console.print(Text(text, style=style))
