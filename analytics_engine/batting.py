"""Batting ratings on a 0-100 scale.

The career rating blends average, strike rate and boundary hitting.
Advanced metrics break a player's scoring down by pressure and phase
(powerplay, middle overs, death overs) when ball-by-ball splits exist.
"""

from __future__ import annotations

from typing import Optional

from .models import Player


def calculate_batting_rating(player: Player) -> float:
    """Career batting rating from 0-100.

    - Average: 1.5 points per run of average, capped at 100 (weight 0.5)
    - Strike rate: half the SR, capped at 50 (weight 0.3)
    - Boundaries per match, sixes counting 1.5x (weight 0.2)
    """
    avg_score = min(player.batting_average * 1.5, 100)
    sr_score = min(player.strike_rate / 2, 50)
    boundary_score = _boundary_score(player)
    return min(avg_score * 0.5 + sr_score * 0.3 + boundary_score * 0.2, 100)


def _boundary_score(player: Player) -> float:
    if player.matches_played == 0:
        return 0.0
    return ((player.fours + player.sixes * 1.5) / player.matches_played) * 2


def calculate_advanced_batting_metrics(player: Player) -> Optional[dict]:
    """Pressure and phase breakdown of a batter's scoring.

    Returns:
        None when no ball-by-ball data exists, otherwise a dict of
        percentages and rates rounded for display.
    """
    batting = player.advanced_batting
    if batting is None or batting.balls_faced == 0:
        return None

    # ── 1. Scoring efficiency ──
    impact_per_ball = player.total_runs / batting.balls_faced
    if player.total_runs > 0:
        boundary_dependency = (player.boundary_runs / player.total_runs) * 100
    else:
        boundary_dependency = 0.0

    # ── 2. Pressure and dot balls ──
    if batting.balls_in_pressure > 0:
        pressure_strike_rate = (batting.runs_in_pressure / batting.balls_in_pressure) * 100
    else:
        pressure_strike_rate = 0.0
    dot_ball_pct = (batting.dot_balls_played / batting.balls_faced) * 100
    boundary_ball_pct = (batting.boundary_balls / batting.balls_faced) * 100

    # ── 3. Phase distribution ──
    phase_total = batting.powerplay_runs + batting.middle_overs_runs + batting.death_overs_runs

    def _share(runs: int) -> float:
        return (runs / phase_total) * 100 if phase_total > 0 else 0.0

    return {
        "impact_per_ball": round(impact_per_ball, 2),
        "boundary_dependency": round(boundary_dependency, 1),
        "pressure_strike_rate": round(pressure_strike_rate, 1),
        "dot_ball_percentage": round(dot_ball_pct, 1),
        "boundary_percentage": round(boundary_ball_pct, 1),
        "powerplay_share": round(_share(batting.powerplay_runs), 1),
        "middle_overs_share": round(_share(batting.middle_overs_runs), 1),
        "death_overs_share": round(_share(batting.death_overs_runs), 1),
    }
