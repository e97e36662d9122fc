"""Bowling ratings on a 0-100 scale.

Economy and strike power (wickets per match) count equally.
A player without wickets has no bowling rating.
"""

from __future__ import annotations

from typing import Optional

from .models import Player


def calculate_bowling_rating(player: Player) -> float:
    """Career bowling rating from 0-100; 0 for non-wicket-takers."""
    if player.wickets == 0 or player.matches_played == 0:
        return 0.0

    economy_score = max(100 - player.bowling_economy * 10, 0)
    wicket_rate = (player.wickets / player.matches_played) * 25
    return min(economy_score * 0.5 + wicket_rate * 0.5, 100)


def calculate_advanced_bowling_metrics(player: Player) -> Optional[dict]:
    """Death-over control, wicket impact and phase split of a bowler.

    Returns:
        None when no ball-by-ball data exists, otherwise a dict of
        rounded rates and percentages.
    """
    bowling = player.advanced_bowling
    if bowling is None or bowling.balls_bowled == 0:
        return None

    # ── 1. Death overs ──
    if bowling.death_overs_bowled > 0:
        death_economy = (bowling.death_overs_runs / bowling.death_overs_bowled) * 6
    else:
        death_economy = 0.0

    # ── 2. Wicket impact ──
    wicket_impact = 0.0
    turning_rate = 0.0
    if player.matches_played > 0:
        turning_rate = bowling.match_turning_wickets / player.matches_played
        if player.wickets > 0:
            wicket_impact = (
                (bowling.match_turning_wickets / player.wickets) * 100
                + (player.wickets / player.matches_played) * 10
            )

    # ── 3. Control ──
    dot_ball_pct = (bowling.dot_balls_bowled / bowling.balls_bowled) * 100
    boundary_rate = bowling.boundaries_conceded / (bowling.balls_bowled / 6)

    # ── 4. Phase distribution ──
    phase_total = (
        bowling.powerplay_wickets + bowling.middle_overs_wickets + bowling.death_overs_wickets
    )

    def _share(wkts: int) -> float:
        return (wkts / phase_total) * 100 if phase_total > 0 else 0.0

    return {
        "death_over_economy": round(death_economy, 2),
        "wicket_impact_score": round(wicket_impact, 1),
        "match_turning_overs_rate": round(turning_rate, 2),
        "dot_ball_percentage": round(dot_ball_pct, 1),
        "boundary_rate": round(boundary_rate, 2),
        "powerplay_wickets_share": round(_share(bowling.powerplay_wickets), 1),
        "middle_overs_wickets_share": round(_share(bowling.middle_overs_wickets), 1),
        "death_overs_wickets_share": round(_share(bowling.death_overs_wickets), 1),
    }
