from pathlib import Path
from pydantic import BaseModel, Field

STATS_FILE = "game_stats.json"
MIN_ROUNDS = 1
MAX_ROUNDS = 50

class Settings(BaseModel):
    """
    Runtime options collected by the CLI and passed down to the session.
    """
    stats_file: Path = Path(STATS_FILE)
    speed: float = Field(1.0, ge=0.0)   # Multiplier for animation delays, 0 disables them
    seed: int | None = None             # Seeds the opponent's random source
    verbose: bool = False
