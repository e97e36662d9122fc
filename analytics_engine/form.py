"""Form, consistency and impact analysis from per-match history.

All functions read ``runs_per_match`` / ``wickets_per_match`` (oldest
first) so that a 40 scored last week counts for more than one scored at
the start of the season. A player with no history is scored as neutral.
"""

from __future__ import annotations

from .models import CurrentForm, FormAnalysis, FormTrend, Player, Streak
from .stats import calculate_mean, calculate_standard_deviation

# Runs at or above this count as a good innings; below half of it, a failure.
STREAK_THRESHOLD = 30
RECENT_MATCHES = 5


def calculate_consistency(player: Player) -> float:
    """0-100 where a lower coefficient of variation of runs scores higher."""
    runs = player.runs_per_match
    if not runs:
        return 50.0

    mean = calculate_mean(runs)
    std_dev = calculate_standard_deviation(runs)
    cv = (std_dev / mean) * 100 if mean > 0 else 100.0
    return max(100 - cv, 0.0)


def calculate_impact_score(player: Player) -> float:
    """Reward match-defining innings (50+, 75+) and three-wicket hauls."""
    runs = player.runs_per_match
    high_impact = sum(1 for r in runs if r >= 50)
    match_winning = sum(1 for r in runs if r >= 75)
    impactful_bowling = sum(1 for w in player.wickets_per_match if w >= 3)

    ratio = (high_impact * 2 + match_winning * 3 + impactful_bowling * 2) / (len(runs) or 1)
    return min(ratio * 20, 100.0)


def calculate_form_index(player: Player) -> float:
    """Recent-vs-career run ratio scaled around 50, plus 10 per recent wicket.

    Returns a value in [0, 100].
    """
    runs = player.runs_per_match
    if not runs:
        return 50.0

    recent_runs = runs[-RECENT_MATCHES:]
    recent_wickets = player.wickets_per_match[-RECENT_MATCHES:]

    avg_recent_runs = calculate_mean(recent_runs)
    avg_recent_wickets = calculate_mean(recent_wickets)
    overall_avg_runs = calculate_mean(runs)

    multiplier = avg_recent_runs / overall_avg_runs if overall_avg_runs > 0 else 1.0
    score = 50 * multiplier + avg_recent_wickets * 10
    return min(max(score, 0.0), 100.0)


def calculate_recent_improvement(player: Player) -> float:
    """Percent change between the two halves of the history, halved.

    Needs at least six matches; otherwise 0.
    """
    runs = player.runs_per_match
    if len(runs) < 6:
        return 0.0

    half = len(runs) // 2
    first_avg = calculate_mean(runs[:half])
    second_avg = calculate_mean(runs[half:])
    if first_avg <= 0:
        return 0.0
    return ((second_avg - first_avg) / first_avg) * 50


def calculate_potential(player: Player) -> float:
    fitness_bonus = 10 if player.fitness_score > 85 else 0
    experience_factor = min(player.matches_played / 200, 1) * 20
    return min(70 + calculate_recent_improvement(player) + fitness_bonus - experience_factor, 100.0)


def classify_form(form_score: float) -> CurrentForm:
    if form_score >= 80:
        return CurrentForm.EXCELLENT
    elif form_score >= 60:
        return CurrentForm.GOOD
    elif form_score >= 40:
        return CurrentForm.AVERAGE
    elif form_score >= 20:
        return CurrentForm.POOR
    return CurrentForm.CRITICAL


def determine_form_trend(runs: list) -> FormTrend:
    """Last three innings against the three before them (±15%)."""
    if len(runs) < 6:
        return FormTrend.STABLE

    recent3 = sum(runs[-3:]) / 3
    previous3 = sum(runs[-6:-3]) / 3
    change = ((recent3 - previous3) / previous3) * 100 if previous3 > 0 else 0

    if change > 15:
        return FormTrend.RISING
    if change < -15:
        return FormTrend.DECLINING
    return FormTrend.STABLE


def calculate_streak(runs: list) -> Streak:
    """Length of the current run of good (or poor) innings, newest first.

    The latest innings sets the streak type; an in-between score
    (15-29) starts a neutral streak of one.
    """
    if not runs:
        return Streak("neutral", 0)

    streak_type = "neutral"
    count = 0
    for r in reversed(runs):
        is_positive = r >= STREAK_THRESHOLD
        is_negative = r < STREAK_THRESHOLD / 2

        if count == 0:
            streak_type = "positive" if is_positive else "negative" if is_negative else "neutral"
            count = 1
        elif (streak_type == "positive" and is_positive) or (streak_type == "negative" and is_negative):
            count += 1
        else:
            break

    return Streak(streak_type, count)


def analyze_form(player: Player) -> FormAnalysis:
    runs = player.runs_per_match
    form_score = calculate_form_index(player)

    return FormAnalysis(
        current_form=classify_form(form_score),
        form_trend=determine_form_trend(runs),
        last5_matches_avg=round(calculate_mean(runs[-RECENT_MATCHES:]), 1),
        form_score=round(form_score, 1),
        streak=calculate_streak(runs),
    )
