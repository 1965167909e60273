from abc import ABC, abstractmethod
from dilemma.game.models import GameState, Move, RoundResult

class Player(ABC):
    """
    Abstract base class for whoever sits across from the scripted opponent.
    The engine asks it for a move each round and reports the result back.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_move(self, state: GameState) -> Move:
        """
        Return the move for the round about to be played.
        """
        pass

    def round_completed(self, state: GameState, result: RoundResult) -> None:
        """
        Called once the round has been scored and recorded in state.
        """
        pass
