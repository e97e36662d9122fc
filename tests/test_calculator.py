import pytest

from analytics_engine.calculator import AnalyticsEngine, get_analytics_engine
from analytics_engine.models import CareerTrajectory, PlayerRole, TeamAnalytics


@pytest.fixture
def batter(make_player):
    return make_player(
        id="b1", name="Opening Bat", role=PlayerRole.BATSMAN,
        batting_average=40, strike_rate=100, matches_played=10,
        fielding_rating=80, fitness_score=90,
        runs_per_match=[40, 40], wickets_per_match=[0, 0],
    )


def test_performance_metrics(batter):
    metrics = AnalyticsEngine([batter]).calculate_performance_metrics(batter)
    assert metrics.batting_rating == 45.0
    assert metrics.bowling_rating == 0
    assert metrics.consistency_score == 100
    assert metrics.impact_score == 0
    # 45 * 0.35 + 80 * 0.15 + 100 * 0.15 + 90 * 0.10
    assert metrics.overall_rating == pytest.approx(51.75, abs=0.06)
    assert metrics.form_index == 50
    assert metrics.potential_rating == 79


def test_bowler_weights_bowling_more(make_player):
    common = dict(
        batting_average=10, strike_rate=80, wickets=80, bowling_economy=6,
        matches_played=40, fielding_rating=70, fitness_score=80,
    )
    bowler = make_player(role=PlayerRole.BOWLER, **common)
    batsman = make_player(role=PlayerRole.BATSMAN, **common)
    engine = AnalyticsEngine([bowler, batsman])
    assert (
        engine.calculate_performance_metrics(bowler).overall_rating
        > engine.calculate_performance_metrics(batsman).overall_rating
    )


class TestCompare:
    def test_metric_winners(self, make_player):
        p1 = make_player(id="a", name="Alpha", batting_average=50, bowling_economy=6, fitness_score=85)
        p2 = make_player(id="b", name="Bravo", batting_average=20, bowling_economy=8, fitness_score=85)
        comparison = AnalyticsEngine([p1, p2]).compare_players(p1, p2)
        winners = {m.category: m.winner for m in comparison.metrics}

        assert len(comparison.metrics) == 7
        assert winners["Batting Average"] == "player1"
        assert winners["Economy Rate"] == "player1"
        assert winners["Fitness Score"] == "tie"
        assert comparison.batting_edge == "Alpha"

    def test_tied_edge_goes_to_second_player(self, make_player):
        p1 = make_player(id="a", name="Alpha")
        p2 = make_player(id="b", name="Bravo")
        comparison = AnalyticsEngine([p1, p2]).compare_players(p1, p2)
        assert comparison.bowling_edge == "Bravo"
        assert comparison.to_dict()["player1"]["name"] == "Alpha"


class TestPrediction:
    def test_ranges(self, make_player):
        player = make_player(
            batting_average=30, matches_played=10,
            runs_per_match=[20, 40], wickets_per_match=[1, 1],
        )
        prediction = AnalyticsEngine([player]).predict_player_performance(player)

        runs = prediction.next_match_runs
        assert (runs.min, runs.max, runs.expected) == (20, 45, 30)
        wickets = prediction.next_match_wickets
        assert (wickets.min, wickets.max, wickets.expected) == (1, 1, 1)
        season = prediction.season_projection
        assert (season.total_runs, season.total_wickets, season.average) == (450, 15, 30.0)
        assert prediction.peak_performance_age == 32
        assert prediction.career_trajectory is CareerTrajectory.STABLE

    def test_rising_young_player(self, make_player):
        player = make_player(matches_played=10, runs_per_match=[10, 10, 10, 30, 30, 30])
        prediction = AnalyticsEngine([player]).predict_player_performance(player)
        assert prediction.career_trajectory is CareerTrajectory.ASCENDING
        assert prediction.next_match_runs.expected == 22
        assert prediction.season_projection.total_runs == 330

    def test_in_form_regular_is_at_peak(self, make_player):
        player = make_player(role=PlayerRole.BOWLER, matches_played=100, runs_per_match=[10] * 5 + [30] * 5)
        prediction = AnalyticsEngine([player]).predict_player_performance(player)
        assert prediction.career_trajectory is CareerTrajectory.PEAK
        assert prediction.peak_performance_age == 29

    def test_fading_veteran(self, make_player):
        player = make_player(role=PlayerRole.ALL_ROUNDER, matches_played=200, runs_per_match=[30, 30, 30, 10, 10, 10])
        prediction = AnalyticsEngine([player]).predict_player_performance(player)
        assert prediction.career_trajectory is CareerTrajectory.DECLINING
        assert prediction.peak_performance_age == 30


def test_empty_squad_analysis():
    team = AnalyticsEngine([]).analyze_team()
    assert team.batting_depth == 0
    assert team.bowling_strength == 0
    assert team.fielding_efficiency == 0
    assert team.balance_score == 35
    assert "No dedicated wicket-keeper" in team.weaknesses
    assert team.strengths == []


def test_balanced_squad_has_full_balance(make_player):
    roles = (
        [PlayerRole.BATSMAN] * 4 + [PlayerRole.BOWLER] * 4
        + [PlayerRole.ALL_ROUNDER] * 2 + [PlayerRole.WICKET_KEEPER]
    )
    squad = [make_player(id=str(i), role=role) for i, role in enumerate(roles)]
    assert AnalyticsEngine(squad).analyze_team().balance_score == 100


class TestSimulateMatch:
    def test_floor(self):
        assert AnalyticsEngine([]).simulate_match(100).win_probability == 10

    def test_ceiling(self, monkeypatch):
        engine = AnalyticsEngine([])
        monkeypatch.setattr(engine, "analyze_team", lambda: TeamAnalytics(team_strength=100))
        assert engine.simulate_match(0).win_probability == 90

    def test_even_contest(self, monkeypatch):
        engine = AnalyticsEngine([])
        monkeypatch.setattr(engine, "analyze_team", lambda: TeamAnalytics(team_strength=75))
        assert engine.simulate_match(75).win_probability == 50

    def test_expected_totals(self, batter, make_player):
        no_history = make_player(id="x", name="New Cap")
        prediction = AnalyticsEngine([batter, no_history]).simulate_match()
        assert prediction.expected_runs == 40
        assert prediction.expected_wickets == 0
        assert prediction.key_players[0].id == "b1"
        assert prediction.recommendations[-1].startswith("Rely on key players: Opening Bat")


def test_top_performers_by_category(batter, make_player):
    bowler = make_player(
        id="w1", name="Strike Bowler", role=PlayerRole.BOWLER,
        wickets=60, bowling_economy=6.5, matches_played=40,
    )
    engine = AnalyticsEngine([batter, bowler])
    assert [p.id for p in engine.get_top_performers("bowling", 1)] == ["w1"]
    assert [p.id for p in engine.get_top_performers("batting", 1)] == ["b1"]
    assert len(engine.get_top_performers("overall", 10)) == 2


def test_form_lists(make_player):
    hot = make_player(id="h", runs_per_match=[10] * 5 + [30] * 5)
    cold = make_player(id="c", runs_per_match=[30] * 5 + [1] * 5)
    engine = AnalyticsEngine([hot, cold])
    assert [p.id for p in engine.get_players_in_form()] == ["h"]
    assert [p.id for p in engine.get_players_out_of_form()] == ["c"]


def test_shared_engine_tracks_latest_roster(batter):
    engine = get_analytics_engine([])
    assert get_analytics_engine([batter]) is engine
    assert engine.players == [batter]
