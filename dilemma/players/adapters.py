import logging
from typing import Iterable, TextIO
from dilemma.game.models import GameState, Move, RoundResult
from dilemma.players.base import Player
from dilemma.ui.console import GameView
from dilemma.ui.prompts import ask_move

logger = logging.getLogger(__name__)

class ConsolePlayer(Player):
    """
    A human at the terminal: shows the board, asks for a move, renders the outcome.
    """

    def __init__(self, name: str, view: GameView, stream: TextIO | None = None):
        super().__init__(name)
        self.view = view
        self.stream = stream

    def choose_move(self, state: GameState) -> Move:
        self.view.title()
        self.view.game_state(state)
        self.view.move_menu()
        return ask_move(self.view.console, stream=self.stream)

    def round_completed(self, state: GameState, result: RoundResult) -> None:
        self.view.round_result(result)

class ScriptedPlayer(Player):
    """
    Replays a fixed sequence of moves, one per round.
    """

    def __init__(self, name: str, moves: Iterable[Move]):
        super().__init__(name)
        self.moves = list(moves)
        self.results: list[RoundResult] = []

    def choose_move(self, state: GameState) -> Move:
        index = state.round
        if index >= len(self.moves):
            raise ValueError(f"{self.name} has no move scripted for round {index + 1}")
        return self.moves[index]

    def round_completed(self, state: GameState, result: RoundResult) -> None:
        logger.debug(f"{self.name} saw round {result.round_number}: {result.outcome.value}")
        self.results.append(result)
