import logging
import random
from typing import Callable, Sequence
from dilemma.game.models import (
    Difficulty,
    GameState,
    HistoryEntry,
    Move,
    RoundResult
)
from dilemma.game.rules import payoff
from dilemma.game.strategies import RandomSource, next_move
from dilemma.players.base import Player

logger = logging.getLogger(__name__)

Strategy = Callable[[Sequence[HistoryEntry], Difficulty, RandomSource], Move]

class GameEngine:
    """
    Drives a single game against the scripted opponent, one round at a time.
    """

    def __init__(self, rng: RandomSource | None = None, strategy: Strategy = next_move):
        self.rng = rng or random.Random()
        self.strategy = strategy

    def new_game(self, total_rounds: int, difficulty: Difficulty) -> GameState:
        # Raises a ValidationError (a ValueError) for counts outside 1..50
        state = GameState(total_rounds=total_rounds, difficulty=difficulty)
        logger.debug(f"New {difficulty.value} game over {total_rounds} rounds")
        return state

    def play_round(self, state: GameState, player_move: Move) -> RoundResult:
        if state.is_finished:
            raise ValueError(
                f"Game already finished after {state.total_rounds} rounds"
            )

        # The opponent only sees the rounds completed before this one
        opponent_move = self.strategy(tuple(state.history), state.difficulty, self.rng)
        player_points, opponent_points = payoff(player_move, opponent_move)

        state.round += 1
        state.player_score += player_points
        state.opponent_score += opponent_points
        state.history.append(HistoryEntry(player_move=player_move, opponent_move=opponent_move))

        result = RoundResult(
            round_number=state.round,
            player_move=player_move,
            opponent_move=opponent_move,
            player_points=player_points,
            opponent_points=opponent_points
        )
        logger.debug(
            f"Round {state.round}/{state.total_rounds}: "
            f"{player_move.symbol}/{opponent_move.symbol} -> {player_points}/{opponent_points}"
        )
        return result

    def run_game(self, state: GameState, player: Player) -> GameState:
        while not state.is_finished:
            player_move = player.choose_move(state)
            result = self.play_round(state, player_move)
            player.round_completed(state, result)

        logger.debug(
            f"Game over: {state.player_score} - {state.opponent_score} ({state.outcome.value})"
        )
        return state
