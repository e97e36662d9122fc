import pytest

from analytics_engine import dashboard
from analytics_engine.calculator import AnalyticsEngine
from analytics_engine.models import PlayerRole


@pytest.fixture
def squad(make_player):
    return [
        make_player(id="1", name="Top Bat", role=PlayerRole.BATSMAN, batting_average=40,
                    total_runs=400, matches_played=10, fours=30, sixes=10, fitness_score=90,
                    fielding_rating=80, runs_per_match=[5, 6]),
        make_player(id="2", name="Pace Man", role=PlayerRole.BOWLER, wickets=20, bowling_economy=8,
                    matches_played=10, fitness_score=70, fielding_rating=60,
                    runs_per_match=[1, 2, 3], wickets_per_match=[2, 0, 1]),
        make_player(id="3", name="Part Timer", role=PlayerRole.BATSMAN, wickets=1, bowling_economy=6),
    ]


def test_squad_composition(squad):
    comp = dashboard.squad_composition(squad)
    assert comp["total"] == 3
    assert (comp["batsmen"], comp["bowlers"], comp["all_rounders"], comp["keepers"]) == (2, 1, 0, 0)
    assert comp["distribution"][0] == {"name": "Batsmen", "value": 2}


def test_aggregate_stats(squad):
    stats = dashboard.aggregate_stats(squad)
    assert stats["total_runs"] == 400
    assert stats["total_wickets"] == 21
    assert stats["total_matches"] == 20
    assert stats["total_boundaries"] == 40
    assert stats["runs_per_match"] == 20
    assert stats["avg_fitness"] == pytest.approx(53.3)


def test_aggregate_stats_empty_squad():
    stats = dashboard.aggregate_stats([])
    assert stats["total_runs"] == 0
    assert stats["avg_batting_average"] == 0
    assert stats["runs_per_match"] == 0


def test_match_trends_pads_short_histories(squad):
    trends = dashboard.match_trends(squad, match_count=4)
    assert [t["runs"] for t in trends["runs_trend"]] == [6, 8, 3, 0]
    assert [t["wickets"] for t in trends["wickets_trend"]] == [2, 0, 1, 0]
    assert trends["runs_trend"][0]["match"] == "M1"


def test_team_radar_bowling_averages_wicket_takers_only(squad):
    radar = {r["attribute"]: r["value"] for r in dashboard.team_radar(squad)}
    # economy 8 -> 20, economy 6 -> 40
    assert radar["Bowling"] == pytest.approx(30.0)
    assert radar["Batting"] == pytest.approx(20.0)


def test_team_radar_empty():
    assert all(r["value"] == 0 for r in dashboard.team_radar([]))


def test_player_ranking(squad):
    engine = AnalyticsEngine(squad)
    ranking = dashboard.player_ranking(engine, squad, "1")
    assert ranking == {"overall": 1, "total": 3, "percentile": 100}
    assert dashboard.player_ranking(engine, squad, "missing") is None


def test_recent_performance(squad):
    recent = dashboard.recent_performance(squad[1])
    assert recent["runs"] == [1, 2, 3]
    assert recent["high_score"] == 3
    assert recent["best_bowling"] == 2
    assert recent["avg_wickets"] == pytest.approx(1.0)
    assert dashboard.recent_performance(squad[2])["high_score"] == 0


def test_prediction_overview(make_player):
    rising = make_player(id="r", name="Young Gun", matches_played=12,
                         runs_per_match=[10, 10, 10, 30, 30, 30], wickets_per_match=[0] * 6)
    slump = make_player(id="s", name="Out Of Touch", matches_played=60,
                        runs_per_match=[30] * 5 + [1] * 5, wickets_per_match=[0] * 10)
    engine = AnalyticsEngine([rising, slump])
    overview = dashboard.prediction_overview(engine, [rising, slump])

    assert overview["rising_star"]["id"] == "r"
    assert [p["id"] for p in overview["watch_list"]] == ["s"]
    assert overview["season_projections"]["top_run_scorer"]["id"] == "r"


def test_prediction_overview_empty():
    overview = dashboard.prediction_overview(AnalyticsEngine([]), [])
    assert overview["rising_star"] is None
    assert overview["season_projections"]["total_runs"] == 0
    assert overview["season_projections"]["top_wicket_taker"] is None
