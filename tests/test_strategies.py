import random
import pytest
from dilemma.game.models import Difficulty, Move
from dilemma.game.strategies import next_move, player_defect_rate
from conftest import C, D, StubRandom, make_history

TRIALS = 10_000
TOLERANCE = 0.02

def _cooperation_rate(history, difficulty, seed=2024):
    rng = random.Random(seed)
    moves = [next_move(history, difficulty, rng) for _ in range(TRIALS)]
    return moves.count(Move.COOPERATE) / TRIALS

def test_defect_rate():
    assert player_defect_rate([]) == 0.0
    assert player_defect_rate(make_history([D, C, C, D])) == 0.5

# Easy

def test_easy_threshold():
    assert next_move([], Difficulty.EASY, StubRandom([0.69])) is C
    assert next_move([], Difficulty.EASY, StubRandom([0.7])) is D

def test_easy_ignores_history():
    history = make_history([D] * 10)
    assert next_move(history, Difficulty.EASY, StubRandom([0.1])) is C

def test_easy_distribution():
    assert _cooperation_rate([], Difficulty.EASY) == pytest.approx(0.7, abs=TOLERANCE)
    assert _cooperation_rate(make_history([D, D, C]), Difficulty.EASY) == pytest.approx(0.7, abs=TOLERANCE)

# Medium

def test_medium_opens_with_cooperation_without_drawing():
    rng = StubRandom([])
    for _ in range(100):
        assert next_move([], Difficulty.MEDIUM, rng) is C
    assert rng.calls == 0

def test_medium_mirrors_or_defects():
    assert next_move(make_history([C]), Difficulty.MEDIUM, StubRandom([0.5])) is C
    assert next_move(make_history([C, D]), Difficulty.MEDIUM, StubRandom([0.5])) is D
    # Noise branch defects whatever was mirrored
    assert next_move(make_history([C]), Difficulty.MEDIUM, StubRandom([0.85])) is D

def test_medium_mirror_distribution():
    history = make_history([D, C])
    assert _cooperation_rate(history, Difficulty.MEDIUM) == pytest.approx(0.85, abs=TOLERANCE)

# Hard

def test_hard_noisy_opening():
    assert next_move([], Difficulty.HARD, StubRandom([0.59])) is C
    assert next_move([], Difficulty.HARD, StubRandom([0.6])) is D

def test_hard_punishes_frequent_defectors():
    history = make_history([D, D, C])
    rng = StubRandom([])
    assert next_move(history, Difficulty.HARD, rng) is D
    assert rng.calls == 0
    assert _cooperation_rate(history, Difficulty.HARD) == 0.0

def test_hard_rate_at_threshold_is_not_punished():
    history = make_history([D, D, C, C, C])   # exactly 0.4
    assert next_move(history, Difficulty.HARD, StubRandom([0.1])) is C
    assert next_move(history, Difficulty.HARD, StubRandom([0.9])) is D

# Legendary

def test_legendary_coin_flip_opening():
    assert next_move([], Difficulty.LEGENDARY, StubRandom([0.49])) is C
    assert next_move([], Difficulty.LEGENDARY, StubRandom([0.5])) is D

def test_legendary_punishment_then_flip():
    history = make_history([D, C, C])   # one third defections
    rng = StubRandom([0.5])
    assert next_move(history, Difficulty.LEGENDARY, rng) is D
    assert rng.calls == 1   # only the flip is drawn
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.1])) is C

def test_legendary_retaliates_against_last_defection():
    history = make_history([C, C, C, C, D])   # rate 0.2, last move D
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.9])) is D
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.14])) is C

def test_legendary_coin_flip_when_player_behaves():
    history = make_history([C, C])
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.4, 0.9])) is D
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.6, 0.9])) is C
    assert next_move(history, Difficulty.LEGENDARY, StubRandom([0.6, 0.1])) is D

def test_legendary_flip_distribution_in_punishment_mode():
    history = make_history([D, D, C])
    # Punishment mode always picks D, so every cooperation is a flip
    assert _cooperation_rate(history, Difficulty.LEGENDARY) == pytest.approx(0.15, abs=TOLERANCE)

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_history_is_never_mutated(difficulty):
    history = make_history([D, C, D])
    snapshot = list(history)
    for seed in range(20):
        next_move(history, difficulty, random.Random(seed))
    assert history == snapshot

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_default_random_source(difficulty):
    assert next_move([], difficulty) in (C, D)
