from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from dilemma.config import MAX_ROUNDS, MIN_ROUNDS

class Move(str, Enum):
    COOPERATE = "cooperate"
    DEFECT = "defect"

    @property
    def opposite(self) -> "Move":
        return Move.DEFECT if self is Move.COOPERATE else Move.COOPERATE

    @property
    def symbol(self) -> str:
        return "C" if self is Move.COOPERATE else "D"

class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    LEGENDARY = "legendary"

class Outcome(str, Enum):
    WIN = "win"      # From the player's point of view
    LOSS = "loss"
    TIE = "tie"

class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_move: Move
    opponent_move: Move

class RoundResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    round_number: int
    player_move: Move
    opponent_move: Move
    player_points: int
    opponent_points: int

    @property
    def outcome(self) -> Outcome:
        from dilemma.game.rules import classify
        return classify(self.player_points, self.opponent_points)

class GameState(BaseModel):
    player_score: int = 0
    opponent_score: int = 0
    round: int = Field(0, ge=0)                              # 0 means not started
    total_rounds: int = Field(ge=MIN_ROUNDS, le=MAX_ROUNDS)  # Fixed at creation
    history: list[HistoryEntry] = Field(default_factory=list)  # Append-only, one entry per round
    difficulty: Difficulty

    @property
    def is_finished(self) -> bool:
        return self.round >= self.total_rounds

    @property
    def score_differential(self) -> int:
        return self.player_score - self.opponent_score

    @property
    def outcome(self) -> Outcome:
        from dilemma.game.rules import classify
        return classify(self.player_score, self.opponent_score)

class Statistics(BaseModel):
    """
    Lifetime record folded from every completed game.
    """
    model_config = ConfigDict(extra="forbid")

    games_played: NonNegativeInt = 0
    games_won: NonNegativeInt = 0
    games_lost: NonNegativeInt = 0
    games_tied: NonNegativeInt = 0
    total_points: int = 0                # Sum of the player's final scores
    best_score_differential: int = 0     # Running max of player - opponent
    worst_score_differential: int = 0    # Running min of player - opponent

    @property
    def win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played * 100.0
