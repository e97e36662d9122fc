"""Data models for the AthleteEdge analytics engine."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import List, Optional


class PlayerRole(Enum):
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-Rounder"
    WICKET_KEEPER = "Wicket-Keeper"


class CurrentForm(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    CRITICAL = "Critical"


class FormTrend(Enum):
    RISING = "Rising"
    STABLE = "Stable"
    DECLINING = "Declining"


class CareerTrajectory(Enum):
    ASCENDING = "ascending"
    PEAK = "peak"
    DECLINING = "declining"
    STABLE = "stable"


def _from_dict(cls, data: Optional[dict]):
    """Build a flat dataclass of counts from a dict, ignoring unknown keys."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TypeError(f"{cls.__name__} must be an object")
    names = {f.name for f in fields(cls)}
    return cls(**{k: int(v) for k, v in data.items() if k in names})


def _finite(value) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{value!r} is not a finite number")
    return number


@dataclass
class AdvancedBatting:
    """Ball-by-ball batting splits."""
    balls_faced: int = 0
    balls_in_pressure: int = 0
    runs_in_pressure: int = 0
    dot_balls_played: int = 0
    boundary_balls: int = 0
    powerplay_runs: int = 0
    middle_overs_runs: int = 0
    death_overs_runs: int = 0


@dataclass
class AdvancedBowling:
    """Ball-by-ball bowling splits."""
    balls_bowled: int = 0
    death_overs_bowled: int = 0  # legal deliveries in overs 16-20
    death_overs_runs: int = 0
    match_turning_wickets: int = 0
    dot_balls_bowled: int = 0
    boundaries_conceded: int = 0
    powerplay_wickets: int = 0
    middle_overs_wickets: int = 0
    death_overs_wickets: int = 0


@dataclass
class AdvancedFielding:
    catch_attempts: int = 0
    catches_taken: int = 0
    run_out_attempts: int = 0
    direct_hits: int = 0
    ground_fielding_actions: int = 0
    runs_saved: int = 0
    misfields: int = 0


@dataclass
class Player:
    """A squad member with career totals and recent per-match history."""
    name: str
    role: PlayerRole = PlayerRole.BATSMAN
    id: str = ""
    batting_average: float = 0.0
    strike_rate: float = 0.0
    total_runs: int = 0
    wickets: int = 0
    bowling_economy: float = 0.0
    fielding_rating: float = 0.0
    fitness_score: float = 0.0
    matches_played: int = 0
    fours: int = 0
    sixes: int = 0
    catches: int = 0
    # Oldest first, newest last
    runs_per_match: List[int] = field(default_factory=list)
    wickets_per_match: List[int] = field(default_factory=list)
    image: str = ""
    advanced_batting: Optional[AdvancedBatting] = None
    advanced_bowling: Optional[AdvancedBowling] = None
    advanced_fielding: Optional[AdvancedFielding] = None

    @property
    def boundary_runs(self) -> int:
        return (self.fours * 4) + (self.sixes * 6)

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Parse the snake_case JSON shape used by the API and export files."""
        role = data.get("role", PlayerRole.BATSMAN.value)
        if not isinstance(role, PlayerRole):
            role = PlayerRole(role)
        return cls(
            id=str(data.get("id", "") or ""),
            name=str(data.get("name", "")),
            role=role,
            batting_average=_finite(data.get("batting_average", 0)),
            strike_rate=_finite(data.get("strike_rate", 0)),
            total_runs=int(data.get("total_runs", 0)),
            wickets=int(data.get("wickets", 0)),
            bowling_economy=_finite(data.get("bowling_economy", 0)),
            fielding_rating=_finite(data.get("fielding_rating", 0)),
            fitness_score=_finite(data.get("fitness_score", 0)),
            matches_played=int(data.get("matches_played", 0)),
            fours=int(data.get("fours", 0)),
            sixes=int(data.get("sixes", 0)),
            catches=int(data.get("catches", 0)),
            runs_per_match=[int(r) for r in data.get("runs_per_match") or []],
            wickets_per_match=[int(w) for w in data.get("wickets_per_match") or []],
            image=str(data.get("image", "") or ""),
            advanced_batting=_from_dict(AdvancedBatting, data.get("advanced_batting")),
            advanced_bowling=_from_dict(AdvancedBowling, data.get("advanced_bowling")),
            advanced_fielding=_from_dict(AdvancedFielding, data.get("advanced_fielding")),
        )

    def to_dict(self) -> dict:
        d = asdict(self)
        d["role"] = self.role.value
        return d


@dataclass
class PerformanceMetrics:
    overall_rating: float = 0.0
    batting_rating: float = 0.0
    bowling_rating: float = 0.0
    fielding_rating: float = 0.0
    consistency_score: float = 50.0
    impact_score: float = 0.0
    form_index: float = 50.0
    potential_rating: float = 70.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Streak:
    type: str = "neutral"  # positive / negative / neutral
    count: int = 0


@dataclass
class FormAnalysis:
    current_form: CurrentForm
    form_trend: FormTrend
    last5_matches_avg: float
    form_score: float
    streak: Streak

    def to_dict(self) -> dict:
        return {
            "current_form": self.current_form.value,
            "form_trend": self.form_trend.value,
            "last5_matches_avg": self.last5_matches_avg,
            "form_score": self.form_score,
            "streak": asdict(self.streak),
        }


@dataclass
class ComparisonMetric:
    category: str
    player1_value: float
    player2_value: float
    winner: str  # player1 / player2 / tie


@dataclass
class PlayerComparison:
    player1: Player
    player2: Player
    batting_edge: str
    bowling_edge: str
    fielding_edge: str
    overall_edge: str
    metrics: List[ComparisonMetric] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict(),
            "batting_edge": self.batting_edge,
            "bowling_edge": self.bowling_edge,
            "fielding_edge": self.fielding_edge,
            "overall_edge": self.overall_edge,
            "metrics": [asdict(m) for m in self.metrics],
        }


@dataclass
class ProjectionRange:
    min: int
    max: int
    expected: int


@dataclass
class SeasonProjection:
    total_runs: int
    total_wickets: int
    average: float


@dataclass
class PlayerPrediction:
    next_match_runs: ProjectionRange
    next_match_wickets: ProjectionRange
    season_projection: SeasonProjection
    peak_performance_age: int
    career_trajectory: CareerTrajectory

    def to_dict(self) -> dict:
        return {
            "next_match_runs": asdict(self.next_match_runs),
            "next_match_wickets": asdict(self.next_match_wickets),
            "season_projection": asdict(self.season_projection),
            "peak_performance_age": self.peak_performance_age,
            "career_trajectory": self.career_trajectory.value,
        }


@dataclass
class TeamAnalytics:
    team_strength: float = 0.0
    batting_depth: float = 0.0
    bowling_strength: float = 0.0
    fielding_efficiency: float = 0.0
    balance_score: float = 0.0
    weaknesses: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MatchPrediction:
    win_probability: int
    expected_runs: int
    expected_wickets: int
    key_players: List[Player] = field(default_factory=list)
    risk_factors: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "win_probability": self.win_probability,
            "expected_runs": self.expected_runs,
            "expected_wickets": self.expected_wickets,
            "key_players": [p.to_dict() for p in self.key_players],
            "risk_factors": list(self.risk_factors),
            "recommendations": list(self.recommendations),
        }
