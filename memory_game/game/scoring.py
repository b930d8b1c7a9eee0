"""Score calculation."""

from memory_game.models.difficulty import Difficulty, GameMode, get_profile


def calculate_score(
    mode: GameMode | str,
    difficulty: Difficulty | str,
    matched_pairs: int,
    time_remaining: int,
) -> int:
    """Compute the score of a game.

    Normal mode scores base_score per matched pair. Chrono mode adds a
    time bonus proportional to the share of time left:
    floor(time_remaining / time_limit * base_score * matched_pairs).

    The caller clamps time_remaining to [0, time_limit].

    Args:
        mode: Game mode.
        difficulty: Difficulty tier.
        matched_pairs: Number of pairs found.
        time_remaining: Seconds left on the clock (ignored in normal mode).

    Returns:
        Score.
    """
    profile = get_profile(difficulty)
    match_score = matched_pairs * profile.base_score
    if GameMode(mode) == GameMode.NORMAL:
        return match_score

    # Integer floor of the exact ratio
    time_bonus = (
        time_remaining * profile.base_score * matched_pairs
    ) // profile.time_limit
    return match_score + time_bonus
