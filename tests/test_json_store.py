import json
import pytest
from dilemma.game.models import Statistics
from dilemma.storage.json_store import JsonStorage

FIELDS = {
    "games_played": 5,
    "games_won": 2,
    "games_lost": 2,
    "games_tied": 1,
    "total_points": 61,
    "best_score_differential": 9,
    "worst_score_differential": -4,
}

def test_missing_file_gives_fresh_record(tmp_path):
    storage = JsonStorage(tmp_path / "game_stats.json")
    assert storage.load_stats() == Statistics()

def test_save_then_load_round_trip(tmp_path):
    storage = JsonStorage(tmp_path / "nested" / "game_stats.json")
    stats = Statistics(**FIELDS)

    assert storage.save_stats(stats) is True
    loaded = storage.load_stats()

    assert loaded == stats
    assert json.loads(storage.path.read_text()) == FIELDS

def test_reads_existing_record(tmp_path):
    path = tmp_path / "game_stats.json"
    path.write_text(json.dumps(FIELDS))
    assert JsonStorage(path).load_stats() == Statistics(**FIELDS)

@pytest.mark.parametrize("content", [
    "",
    "not json",
    "[1, 2, 3]",
    json.dumps({**FIELDS, "games_won": "2"}),
    json.dumps({**FIELDS, "total_points": 1.5}),
    json.dumps({**FIELDS, "games_lost": -1}),
    json.dumps({k: v for k, v in FIELDS.items() if k != "games_tied"}),
    json.dumps({**FIELDS, "favourite_move": "defect"}),
])
def test_malformed_record_gives_fresh_record(tmp_path, content):
    path = tmp_path / "game_stats.json"
    path.write_text(content)
    assert JsonStorage(path).load_stats() == Statistics()

def test_undecodable_file_gives_fresh_record(tmp_path):
    path = tmp_path / "game_stats.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert JsonStorage(path).load_stats() == Statistics()

def test_unreadable_path_gives_fresh_record(tmp_path):
    # A directory exists but cannot be read as a file
    path = tmp_path / "game_stats.json"
    path.mkdir()
    assert JsonStorage(path).load_stats() == Statistics()

def test_failed_save_is_swallowed(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    storage = JsonStorage(blocker / "game_stats.json")

    assert storage.save_stats(Statistics(**FIELDS)) is False
    assert storage.load_stats() == Statistics()

def test_save_overwrites_previous_record(tmp_path):
    storage = JsonStorage(tmp_path / "game_stats.json")
    storage.save_stats(Statistics(**FIELDS))
    storage.save_stats(Statistics(games_played=1, games_tied=1, total_points=3))

    loaded = storage.load_stats()
    assert loaded.games_played == 1
    assert loaded.best_score_differential == 0
