import logging
from pathlib import Path
from dilemma.config import STATS_FILE
from dilemma.game.models import Statistics

logger = logging.getLogger(__name__)

class JsonStorage:
    """
    Handles persistence of the lifetime statistics record to a JSON file.

    Stats I/O must never get in the way of play: anything that goes wrong
    while loading yields a fresh record, and a failed save is ignored.
    """

    def __init__(self, path: str | Path = STATS_FILE):
        self.path = Path(path)

    def load_stats(self) -> Statistics:
        if not self.path.exists():
            logger.debug(f"No statistics at {self.path}, starting fresh")
            return Statistics()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
            stats = Statistics.model_validate_json(content, strict=True)
        except (OSError, ValueError) as e:
            # ValueError covers decoding errors and pydantic's ValidationError
            logger.debug(f"Ignoring unreadable statistics at {self.path}: {e}")
            return Statistics()

        # A record missing any field is treated as corrupt, not merged with defaults
        missing = set(Statistics.model_fields) - stats.model_fields_set
        if missing:
            logger.debug(f"Ignoring statistics at {self.path}, missing {sorted(missing)}")
            return Statistics()

        return stats

    def save_stats(self, stats: Statistics) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(stats.model_dump_json(indent=2))
        except OSError as e:
            logger.debug(f"Could not save statistics to {self.path}: {e}")
            return False
        return True
