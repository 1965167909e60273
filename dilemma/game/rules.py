from dilemma.game.models import Move, Outcome

# (player move, opponent move) -> (player points, opponent points)
PAYOFF_MATRIX: dict[tuple[Move, Move], tuple[int, int]] = {
    (Move.COOPERATE, Move.COOPERATE): (3, 3),  # Reward for mutual cooperation
    (Move.COOPERATE, Move.DEFECT): (0, 5),     # Sucker's payoff
    (Move.DEFECT, Move.COOPERATE): (5, 0),     # Temptation payoff
    (Move.DEFECT, Move.DEFECT): (1, 1),        # Mutual punishment
}

def payoff(player_move: Move, opponent_move: Move) -> tuple[int, int]:
    """
    Points earned by each side for one round.
    """
    return PAYOFF_MATRIX[(player_move, opponent_move)]

def classify(player_score: int, opponent_score: int) -> Outcome:
    if player_score > opponent_score:
        return Outcome.WIN
    if player_score < opponent_score:
        return Outcome.LOSS
    return Outcome.TIE
