"""Squad analytics engine combining batting, bowling, fielding and form.

Overall rating weights depend on the player's role:
- Batsman:        35% batting + 10% bowling
- Bowler:         15% batting + 30% bowling
- All-rounder / wicket-keeper: 35% batting + 30% bowling
Every role adds 15% fielding, 15% consistency, 15% impact and 10% fitness,
and the sum is normalised by the total weight.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .batting import calculate_batting_rating
from .bowling import calculate_bowling_rating
from .form import (
    analyze_form,
    calculate_consistency,
    calculate_form_index,
    calculate_impact_score,
    calculate_potential,
)
from .models import (
    CareerTrajectory,
    ComparisonMetric,
    CurrentForm,
    FormTrend,
    MatchPrediction,
    PerformanceMetrics,
    Player,
    PlayerComparison,
    PlayerPrediction,
    PlayerRole,
    ProjectionRange,
    SeasonProjection,
    TeamAnalytics,
)
from .stats import calculate_mean, calculate_standard_deviation, clamp

logger = logging.getLogger(__name__)

# Role-based weights: (batting_weight, bowling_weight)
ROLE_WEIGHTS = {
    PlayerRole.BATSMAN: (0.35, 0.10),
    PlayerRole.BOWLER: (0.15, 0.30),
    PlayerRole.ALL_ROUNDER: (0.35, 0.30),
    PlayerRole.WICKET_KEEPER: (0.35, 0.30),
}
FIELDING_WEIGHT = 0.15
CONSISTENCY_WEIGHT = 0.15
IMPACT_WEIGHT = 0.15
FITNESS_WEIGHT = 0.10

# Typical age at which each role peaks
PEAK_AGE = {
    PlayerRole.BATSMAN: 32,
    PlayerRole.BOWLER: 29,
}
DEFAULT_PEAK_AGE = 30

SEASON_MATCHES = 15
DEFAULT_OPPONENT_STRENGTH = 75
TOP_CATEGORIES = ("batting", "bowling", "fielding", "overall")

_IN_FORM = (CurrentForm.EXCELLENT, CurrentForm.GOOD)
_OUT_OF_FORM = (CurrentForm.POOR, CurrentForm.CRITICAL)


def _weighted_average(items: List[tuple]) -> float:
    """items: [(value, weight), ...]"""
    total_weight = sum(w for _, w in items)
    if total_weight == 0:
        return 0.0
    return sum(v * w for v, w in items) / total_weight


def _winner(val1: float, val2: float) -> str:
    if abs(val1 - val2) < 0.01:
        return "tie"
    return "player1" if val1 > val2 else "player2"


class AnalyticsEngine:
    """Analytics over one squad. All methods are read-only over the roster."""

    def __init__(self, players: List[Player]):
        self.players = list(players)

    def update_players(self, players: List[Player]) -> None:
        self.players = list(players)

    # ───── Performance metrics ─────

    def calculate_performance_metrics(self, player: Player) -> PerformanceMetrics:
        batting = calculate_batting_rating(player)
        bowling = calculate_bowling_rating(player)
        consistency = calculate_consistency(player)
        impact = calculate_impact_score(player)
        form_index = calculate_form_index(player)
        potential = calculate_potential(player)

        bat_w, bowl_w = ROLE_WEIGHTS.get(player.role, ROLE_WEIGHTS[PlayerRole.ALL_ROUNDER])
        overall = _weighted_average([
            (batting, bat_w),
            (bowling, bowl_w),
            (player.fielding_rating, FIELDING_WEIGHT),
            (consistency, CONSISTENCY_WEIGHT),
            (impact, IMPACT_WEIGHT),
            (player.fitness_score, FITNESS_WEIGHT),
        ])

        return PerformanceMetrics(
            overall_rating=round(overall, 1),
            batting_rating=round(batting, 1),
            bowling_rating=round(bowling, 1),
            fielding_rating=player.fielding_rating,
            consistency_score=round(consistency, 1),
            impact_score=round(impact, 1),
            form_index=round(form_index, 1),
            potential_rating=round(potential, 1),
        )

    # ───── Player comparison ─────

    def compare_players(self, player1: Player, player2: Player) -> PlayerComparison:
        rows = [
            ("Batting Average", player1.batting_average, player2.batting_average, False),
            ("Strike Rate", player1.strike_rate, player2.strike_rate, False),
            ("Total Runs", player1.total_runs, player2.total_runs, False),
            ("Wickets", player1.wickets, player2.wickets, False),
            ("Economy Rate", player1.bowling_economy, player2.bowling_economy, True),
            ("Fielding Rating", player1.fielding_rating, player2.fielding_rating, False),
            ("Fitness Score", player1.fitness_score, player2.fitness_score, False),
        ]
        metrics = []
        for category, v1, v2, lower_is_better in rows:
            # Arguments swapped so the lower economy wins
            winner = _winner(v2, v1) if lower_is_better else _winner(v1, v2)
            metrics.append(ComparisonMetric(category, v1, v2, winner))

        m1 = self.calculate_performance_metrics(player1)
        m2 = self.calculate_performance_metrics(player2)

        def _edge(a: float, b: float) -> str:
            return player1.name if a > b else player2.name

        return PlayerComparison(
            player1=player1,
            player2=player2,
            batting_edge=_edge(m1.batting_rating, m2.batting_rating),
            bowling_edge=_edge(m1.bowling_rating, m2.bowling_rating),
            fielding_edge=_edge(player1.fielding_rating, player2.fielding_rating),
            overall_edge=_edge(m1.overall_rating, m2.overall_rating),
            metrics=metrics,
        )

    # ───── Predictions ─────

    def predict_player_performance(self, player: Player) -> PlayerPrediction:
        runs = player.runs_per_match
        wickets = player.wickets_per_match

        avg_runs = calculate_mean(runs)
        avg_wickets = calculate_mean(wickets)
        std_runs = calculate_standard_deviation(runs)
        std_wickets = calculate_standard_deviation(wickets)

        form = analyze_form(player)
        if form.form_trend == FormTrend.RISING:
            multiplier = 1.1
        elif form.form_trend == FormTrend.DECLINING:
            multiplier = 0.9
        else:
            multiplier = 1.0

        return PlayerPrediction(
            next_match_runs=ProjectionRange(
                min=max(0, round(avg_runs - std_runs)),
                max=round(avg_runs + std_runs * 1.5),
                expected=round(avg_runs * multiplier),
            ),
            next_match_wickets=ProjectionRange(
                min=max(0, round(avg_wickets - std_wickets)),
                max=round(avg_wickets + std_wickets),
                expected=round(avg_wickets * multiplier),
            ),
            season_projection=SeasonProjection(
                total_runs=round(avg_runs * SEASON_MATCHES * multiplier),
                total_wickets=round(avg_wickets * SEASON_MATCHES * multiplier),
                average=round(player.batting_average * multiplier, 1),
            ),
            peak_performance_age=PEAK_AGE.get(player.role, DEFAULT_PEAK_AGE),
            career_trajectory=self._career_trajectory(player),
        )

    def _career_trajectory(self, player: Player) -> CareerTrajectory:
        form = analyze_form(player)
        if player.matches_played < 50:
            if form.form_trend == FormTrend.RISING:
                return CareerTrajectory.ASCENDING
            return CareerTrajectory.STABLE
        elif player.matches_played < 150:
            if form.current_form in _IN_FORM:
                return CareerTrajectory.PEAK
            return CareerTrajectory.STABLE
        if form.form_trend == FormTrend.DECLINING:
            return CareerTrajectory.DECLINING
        return CareerTrajectory.STABLE

    # ───── Team analytics ─────

    def analyze_team(self) -> TeamAnalytics:
        batting_depth = self._batting_depth()
        bowling_strength = self._bowling_strength()
        fielding_efficiency = self._fielding_efficiency()
        balance = self._team_balance()
        strength = (batting_depth + bowling_strength + fielding_efficiency + balance) / 4

        return TeamAnalytics(
            team_strength=round(strength, 1),
            batting_depth=round(batting_depth, 1),
            bowling_strength=round(bowling_strength, 1),
            fielding_efficiency=round(fielding_efficiency, 1),
            balance_score=round(balance, 1),
            weaknesses=self._weaknesses(),
            strengths=self._strengths(),
        )

    def _by_role(self, role: PlayerRole) -> List[Player]:
        return [p for p in self.players if p.role == role]

    def _batting_depth(self) -> float:
        batters = [p for p in self.players if p.batting_average > 20]
        if not batters:
            return 0.0
        avg = calculate_mean([p.batting_average for p in batters])
        depth_score = (len(batters) / 7) * 50  # ideal: 7 batters
        quality_score = min(avg * 1.5, 50)
        return depth_score + quality_score

    def _bowling_strength(self) -> float:
        bowlers = [p for p in self.players if p.wickets > 10]
        avg_economy = calculate_mean([p.bowling_economy for p in bowlers]) if bowlers else 10.0
        variety_score = (len(bowlers) / 5) * 40  # ideal: 5 bowlers
        economy_score = max(60 - avg_economy * 6, 0)
        return variety_score + economy_score

    def _fielding_efficiency(self) -> float:
        if not self.players:
            return 0.0
        avg_fielding = calculate_mean([p.fielding_rating for p in self.players])
        catch_rate = calculate_mean([p.catches for p in self.players]) / 10
        return min(avg_fielding * 0.7 + catch_rate * 30, 100)

    def _team_balance(self) -> float:
        batsmen = len(self._by_role(PlayerRole.BATSMAN))
        bowlers = len(self._by_role(PlayerRole.BOWLER))
        all_rounders = len(self._by_role(PlayerRole.ALL_ROUNDER))
        keepers = len(self._by_role(PlayerRole.WICKET_KEEPER))

        # Ideal: 4-5 batsmen, 4-5 bowlers, 2-3 all-rounders, 1-2 keepers
        score = 100
        if batsmen < 3 or batsmen > 6:
            score -= 20
        if bowlers < 3 or bowlers > 6:
            score -= 20
        if all_rounders < 1 or all_rounders > 4:
            score -= 15
        if keepers < 1 or keepers > 2:
            score -= 10
        return max(score, 0)

    def _weaknesses(self) -> List[str]:
        weaknesses = []
        if len(self._by_role(PlayerRole.BATSMAN)) < 4:
            weaknesses.append("Insufficient batting depth")
        if len(self._by_role(PlayerRole.BOWLER)) < 4:
            weaknesses.append("Limited bowling options")
        if len(self._by_role(PlayerRole.ALL_ROUNDER)) < 2:
            weaknesses.append("Lack of all-rounders")
        if len(self._by_role(PlayerRole.WICKET_KEEPER)) < 1:
            weaknesses.append("No dedicated wicket-keeper")

        if self.players:
            if calculate_mean([p.fitness_score for p in self.players]) < 80:
                weaknesses.append("Overall team fitness below optimal")
            if len(self.get_players_out_of_form()) >= 3:
                weaknesses.append("Multiple players out of form")
        return weaknesses

    def _strengths(self) -> List[str]:
        strengths = []
        top_batsmen = [p for p in self._by_role(PlayerRole.BATSMAN) if p.batting_average > 45]
        if len(top_batsmen) >= 2:
            strengths.append("Strong top-order batting")

        top_bowlers = [p for p in self._by_role(PlayerRole.BOWLER) if p.bowling_economy < 5]
        if len(top_bowlers) >= 2:
            strengths.append("Economical bowling attack")

        if self.players and calculate_mean([p.fielding_rating for p in self.players]) > 80:
            strengths.append("Excellent fielding unit")

        if len(self._by_role(PlayerRole.ALL_ROUNDER)) >= 3:
            strengths.append("Deep all-round capability")

        if self.players and len(self.get_players_in_form()) >= len(self.players) * 0.6:
            strengths.append("Majority of squad in good form")
        return strengths

    # ───── Match simulation ─────

    def simulate_match(self, opponent_strength: float = DEFAULT_OPPONENT_STRENGTH) -> MatchPrediction:
        """Estimate the result against an opponent rated 0-100.

        Win probability moves half a point per point of strength difference
        from an even 50 and never leaves [10, 90].
        """
        team = self.analyze_team()
        diff = team.team_strength - opponent_strength
        win_probability = clamp(50 + diff * 0.5, 10, 90)

        expected_runs = sum(calculate_mean(p.runs_per_match) for p in self.players)
        expected_wickets = sum(calculate_mean(p.wickets_per_match) for p in self.players)

        logger.debug(
            "Simulated match vs strength %s: team %.1f, win %.0f%%",
            opponent_strength, team.team_strength, win_probability,
        )

        return MatchPrediction(
            win_probability=round(win_probability),
            expected_runs=round(expected_runs),
            expected_wickets=round(expected_wickets),
            key_players=self._key_players(),
            risk_factors=self._risk_factors(),
            recommendations=self._recommendations(team),
        )

    def _key_players(self) -> List[Player]:
        return self.get_top_performers("overall", 3)

    def _risk_factors(self) -> List[str]:
        risks = []
        low_fitness = [p for p in self.players if p.fitness_score < 75]
        if low_fitness:
            risks.append(f"{len(low_fitness)} player(s) with fitness concerns")

        out_of_form = self.get_players_out_of_form()
        if out_of_form:
            risks.append(f"{len(out_of_form)} player(s) out of form")

        inexperienced = [p for p in self.players if p.matches_played < 30]
        if len(inexperienced) >= 3:
            risks.append("Several inexperienced players in squad")
        return risks

    def _recommendations(self, team: TeamAnalytics) -> List[str]:
        recommendations = []
        if team.batting_depth < 70:
            recommendations.append("Consider promoting an all-rounder up the order")
        if team.bowling_strength < 70:
            recommendations.append("May need additional bowling support")

        names = ", ".join(p.name for p in self._key_players())
        recommendations.append(f"Rely on key players: {names}")
        return recommendations

    # ───── Utility ─────

    def get_top_performers(self, category: str = "overall", count: int = 5) -> List[Player]:
        """Best players by batting, bowling, fielding or overall rating."""
        def score(player: Player) -> float:
            metrics = self.calculate_performance_metrics(player)
            if category == "batting":
                return metrics.batting_rating
            elif category == "bowling":
                return metrics.bowling_rating
            elif category == "fielding":
                return metrics.fielding_rating
            return metrics.overall_rating

        return sorted(self.players, key=score, reverse=True)[:count]

    def get_players_in_form(self) -> List[Player]:
        return [p for p in self.players if analyze_form(p).current_form in _IN_FORM]

    def get_players_out_of_form(self) -> List[Player]:
        return [p for p in self.players if analyze_form(p).current_form in _OUT_OF_FORM]


_engine: Optional[AnalyticsEngine] = None


def get_analytics_engine(players: List[Player]) -> AnalyticsEngine:
    """Return the shared engine, refreshed with the current roster."""
    global _engine
    if _engine is None:
        _engine = AnalyticsEngine(players)
    else:
        _engine.update_players(players)
    return _engine
