from dilemma.game.models import HistoryEntry, Move

C = Move.COOPERATE
D = Move.DEFECT

class StubRandom:
    """
    Stands in for random.Random, handing out scripted values in order.
    """
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if not self.values:
            raise AssertionError("StubRandom ran out of scripted values")
        self.calls += 1
        return self.values.pop(0)

def make_history(player_moves, opponent_move=C):
    return [HistoryEntry(player_move=m, opponent_move=opponent_move) for m in player_moves]
