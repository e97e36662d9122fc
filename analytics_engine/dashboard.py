"""Aggregate views for the squad, player and prediction dashboards."""

from __future__ import annotations

from typing import List, Optional

from .calculator import AnalyticsEngine
from .form import analyze_form
from .models import CareerTrajectory, CurrentForm, Player, PlayerRole
from .stats import calculate_mean

ROLE_LABELS = {
    PlayerRole.BATSMAN: "Batsmen",
    PlayerRole.BOWLER: "Bowlers",
    PlayerRole.ALL_ROUNDER: "All-Rounders",
    PlayerRole.WICKET_KEEPER: "Wicket-Keepers",
}


def squad_composition(players: List[Player]) -> dict:
    counts = {role: sum(1 for p in players if p.role == role) for role in PlayerRole}
    return {
        "total": len(players),
        "batsmen": counts[PlayerRole.BATSMAN],
        "bowlers": counts[PlayerRole.BOWLER],
        "all_rounders": counts[PlayerRole.ALL_ROUNDER],
        "keepers": counts[PlayerRole.WICKET_KEEPER],
        "distribution": [
            {"name": ROLE_LABELS[role], "value": counts[role]} for role in PlayerRole
        ],
    }


def aggregate_stats(players: List[Player]) -> dict:
    """Squad totals and averages. Averages of an empty squad are 0."""
    total_runs = sum(p.total_runs for p in players)
    total_wickets = sum(p.wickets for p in players)
    total_matches = sum(p.matches_played for p in players)

    return {
        "total_runs": total_runs,
        "total_wickets": total_wickets,
        "avg_batting_average": round(calculate_mean([p.batting_average for p in players]), 1),
        "avg_strike_rate": round(calculate_mean([p.strike_rate for p in players]), 1),
        "avg_fitness": round(calculate_mean([p.fitness_score for p in players]), 1),
        "avg_fielding": round(calculate_mean([p.fielding_rating for p in players]), 1),
        "total_matches": total_matches,
        "total_boundaries": sum(p.fours + p.sixes for p in players),
        "runs_per_match": round(total_runs / (total_matches or 1)),
        "wickets_per_match": round(total_wickets / (total_matches or 1), 2),
    }


def match_trends(players: List[Player], match_count: int = 10) -> dict:
    """Squad runs and wickets for each of the first ``match_count`` history slots."""
    def _at(values: list, i: int) -> int:
        return values[i] if i < len(values) else 0

    return {
        "runs_trend": [
            {"match": f"M{i + 1}", "runs": sum(_at(p.runs_per_match, i) for p in players)}
            for i in range(match_count)
        ],
        "wickets_trend": [
            {"match": f"M{i + 1}", "wickets": sum(_at(p.wickets_per_match, i) for p in players)}
            for i in range(match_count)
        ],
    }


def team_radar(players: List[Player]) -> List[dict]:
    if not players:
        return [
            {"attribute": a, "value": 0}
            for a in ("Batting", "Bowling", "Fielding", "Fitness", "Experience")
        ]

    wicket_takers = [p for p in players if p.wickets > 0]
    if wicket_takers:
        bowling = calculate_mean([max(100 - p.bowling_economy * 10, 0) for p in wicket_takers])
    else:
        bowling = 0
    experience = min(sum(p.matches_played for p in players) / len(players) / 2, 100)

    return [
        {"attribute": "Batting", "value": calculate_mean([p.batting_average for p in players]) * 1.5},
        {"attribute": "Bowling", "value": bowling},
        {"attribute": "Fielding", "value": calculate_mean([p.fielding_rating for p in players])},
        {"attribute": "Fitness", "value": calculate_mean([p.fitness_score for p in players])},
        {"attribute": "Experience", "value": experience},
    ]


def player_ranking(engine: AnalyticsEngine, players: List[Player], player_id: str) -> Optional[dict]:
    ranked = sorted(
        players,
        key=lambda p: engine.calculate_performance_metrics(p).overall_rating,
        reverse=True,
    )
    for index, p in enumerate(ranked):
        if p.id == player_id:
            rank = index + 1
            return {
                "overall": rank,
                "total": len(players),
                "percentile": round((1 - (rank - 1) / len(players)) * 100),
            }
    return None


def recent_performance(player: Player) -> dict:
    runs = player.runs_per_match[-5:]
    wickets = player.wickets_per_match[-5:]
    return {
        "runs": runs,
        "wickets": wickets,
        "avg_runs": calculate_mean(runs),
        "avg_wickets": calculate_mean(wickets),
        "high_score": max(runs + [0]),
        "best_bowling": max(wickets + [0]),
    }


def prediction_overview(engine: AnalyticsEngine, players: List[Player]) -> dict:
    """Rising star, peak performers, watch list and season totals."""
    entries = []
    for p in players:
        entries.append({
            "player": p,
            "prediction": engine.predict_player_performance(p),
            "metrics": engine.calculate_performance_metrics(p),
            "form": analyze_form(p),
        })

    rising = [e for e in entries if e["prediction"].career_trajectory == CareerTrajectory.ASCENDING]
    rising.sort(key=lambda e: e["metrics"].potential_rating, reverse=True)

    peak = [e for e in entries if e["prediction"].career_trajectory == CareerTrajectory.PEAK]
    peak.sort(key=lambda e: e["metrics"].overall_rating, reverse=True)

    watch = [
        e["player"] for e in entries
        if e["form"].current_form in (CurrentForm.POOR, CurrentForm.CRITICAL)
    ]

    top_runs = max(entries, key=lambda e: e["prediction"].season_projection.total_runs, default=None)
    top_wkts = max(entries, key=lambda e: e["prediction"].season_projection.total_wickets, default=None)

    return {
        "rising_star": rising[0]["player"].to_dict() if rising else None,
        "peak_performers": [e["player"].to_dict() for e in peak],
        "watch_list": [p.to_dict() for p in watch],
        "season_projections": {
            "total_runs": sum(e["prediction"].season_projection.total_runs for e in entries),
            "total_wickets": sum(e["prediction"].season_projection.total_wickets for e in entries),
            "top_run_scorer": top_runs["player"].to_dict() if top_runs else None,
            "top_wicket_taker": top_wkts["player"].to_dict() if top_wkts else None,
        },
    }
