import logging
import random
from typing import TextIO
from rich.console import Console
from dilemma.config import Settings
from dilemma.game.engine import GameEngine
from dilemma.game.models import Difficulty, GameState, Statistics
from dilemma.players.adapters import ConsolePlayer
from dilemma.prompts.templates import GOODBYE
from dilemma.stats.aggregator import record_game
from dilemma.storage.json_store import JsonStorage
from dilemma.ui.console import GameView
from dilemma.ui.prompts import (
    ask_difficulty,
    ask_menu_choice,
    ask_play_again,
    ask_rounds,
    wait_for_enter
)

logger = logging.getLogger(__name__)

class SessionRunner:
    """
    Runs the interactive menu loop: play, view statistics, read the rules, quit.
    """

    def __init__(
        self,
        settings: Settings,
        console: Console | None = None,
        stream: TextIO | None = None
    ):
        self.settings = settings
        self.console = console or Console()
        self.stream = stream
        self.view = GameView(self.console, speed=settings.speed)
        self.storage = JsonStorage(settings.stats_file)
        self.engine = GameEngine(rng=random.Random(settings.seed))

    def run(self):
        while True:
            self.view.main_menu()
            choice = ask_menu_choice(self.console, stream=self.stream)

            if choice == "1":
                self.play()
            elif choice == "2":
                self.show_stats()
            elif choice == "3":
                self.show_rules()
            elif choice == "4":
                self.goodbye()
                return

    def play(self, difficulty: Difficulty | None = None, rounds: int | None = None) -> Statistics:
        """
        Plays games until the player declines another one.

        The difficulty is chosen once and kept for every replay; the round
        count is asked again before each game unless it was given up front.
        """
        stats = self.storage.load_stats()
        self.view.title()
        self.view.payoff_matrix()

        if difficulty is None:
            self.view.difficulty_menu()
            difficulty = ask_difficulty(self.console, stream=self.stream)
            self.view.message("Excellent choice! Let's play!", style="bold bright_green")
            self.console.print()

        while True:
            total_rounds = rounds if rounds is not None else ask_rounds(self.console, stream=self.stream)
            state = self.play_game(total_rounds, difficulty)

            stats = record_game(stats, state)
            self.storage.save_stats(stats)
            logger.debug(f"Recorded {state.outcome.value}, {stats.games_played} games played")

            self.view.game_summary(state, stats)
            wait_for_enter(self.console, stream=self.stream)
            if not ask_play_again(self.console, stream=self.stream):
                return stats

    def play_game(self, total_rounds: int, difficulty: Difficulty) -> GameState:
        state = self.engine.new_game(total_rounds, difficulty)
        player = ConsolePlayer("You", self.view, stream=self.stream)
        return self.engine.run_game(state, player)

    def show_stats(self):
        stats = self.storage.load_stats()
        self.view.statistics(stats)
        wait_for_enter(self.console, "Press Enter to return to menu", stream=self.stream)

    def show_rules(self):
        self.view.rules()
        wait_for_enter(self.console, "Press Enter to return to menu", stream=self.stream)

    def goodbye(self):
        self.console.print()
        self.view.message(GOODBYE, style="bold bright_green")
