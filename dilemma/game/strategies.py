import random
from typing import Callable, Protocol, Sequence
from dilemma.game.models import Difficulty, HistoryEntry, Move

class RandomSource(Protocol):
    def random(self) -> float: ...

def _chance(rng: RandomSource, probability: float) -> bool:
    return rng.random() < probability

def player_defect_rate(history: Sequence[HistoryEntry]) -> float:
    """
    Fraction of the player's past moves that were defections.
    """
    if not history:
        return 0.0
    defections = sum(1 for entry in history if entry.player_move is Move.DEFECT)
    return defections / len(history)

def _easy(history: Sequence[HistoryEntry], rng: RandomSource) -> Move:
    return Move.COOPERATE if _chance(rng, 0.7) else Move.DEFECT

def _medium(history: Sequence[HistoryEntry], rng: RandomSource) -> Move:
    # Tit-for-tat with a 15% chance of defecting anyway
    if not history:
        return Move.COOPERATE
    last_player_move = history[-1].player_move
    return last_player_move if _chance(rng, 0.85) else Move.DEFECT

def _hard(history: Sequence[HistoryEntry], rng: RandomSource) -> Move:
    if not history:
        return Move.COOPERATE if _chance(rng, 0.6) else Move.DEFECT
    if player_defect_rate(history) > 0.4:
        return Move.DEFECT
    return Move.COOPERATE if _chance(rng, 0.6) else Move.DEFECT

def _legendary(history: Sequence[HistoryEntry], rng: RandomSource) -> Move:
    if not history:
        return Move.COOPERATE if _chance(rng, 0.5) else Move.DEFECT

    if player_defect_rate(history) > 0.3:
        move = Move.DEFECT
    elif history[-1].player_move is Move.DEFECT:
        move = Move.DEFECT
    elif _chance(rng, 0.5):
        move = Move.DEFECT
    else:
        move = Move.COOPERATE

    # Applied after the base choice, however it was reached
    if _chance(rng, 0.15):
        move = move.opposite
    return move

_STRATEGIES: dict[Difficulty, Callable[[Sequence[HistoryEntry], RandomSource], Move]] = {
    Difficulty.EASY: _easy,
    Difficulty.MEDIUM: _medium,
    Difficulty.HARD: _hard,
    Difficulty.LEGENDARY: _legendary,
}

def next_move(
    history: Sequence[HistoryEntry],
    difficulty: Difficulty,
    rng: RandomSource | None = None
) -> Move:
    """
    Picks the opponent's move for the coming round.

    Only the rounds already played are considered; the history is never
    modified. Each probabilistic branch draws one value from rng, in the order
    the branches are evaluated, so a seeded or scripted source replays exactly.
    """
    return _STRATEGIES[difficulty](history, rng or random)
