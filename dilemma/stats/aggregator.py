from dilemma.game.models import GameState, Outcome, Statistics

def record_game(stats: Statistics, game: GameState) -> Statistics:
    """
    Folds one completed game into the lifetime statistics.

    Returns a new Statistics; the one passed in is left untouched, so a
    failure part-way through can never leave a half-updated record.
    """
    if not game.is_finished:
        raise ValueError(
            f"Cannot record an unfinished game (round {game.round} of {game.total_rounds})"
        )

    outcome = game.outcome
    diff = game.score_differential

    return stats.model_copy(update={
        "games_played": stats.games_played + 1,
        "total_points": stats.total_points + game.player_score,
        "games_won": stats.games_won + (outcome is Outcome.WIN),
        "games_lost": stats.games_lost + (outcome is Outcome.LOSS),
        "games_tied": stats.games_tied + (outcome is Outcome.TIE),
        "best_score_differential": max(stats.best_score_differential, diff),
        "worst_score_differential": min(stats.worst_score_differential, diff),
    })
