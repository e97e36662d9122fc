import json


def test_list_players(client):
    resp = client.get("/api/players")
    assert resp.status_code == 200
    assert len(resp.get_json()) == 12


def test_create_player(client):
    resp = client.post("/api/players", json={"name": "Tilak Rao", "role": "Batsman", "strike_rate": 142})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["player"]["name"] == "Tilak Rao"
    assert len(client.get("/api/players").get_json()) == 13


def test_create_player_validation_error(client):
    resp = client.post("/api/players", json={"name": "T", "role": "Batsman"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Player name must be at least 2 characters"}


def test_non_numeric_stats_are_rejected(client):
    resp = client.post("/api/players", json={
        "name": "Count Less", "role": "Batsman", "advanced_batting": {"balls_faced": "lots"},
    })
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.post(
        "/api/players",
        data='{"name": "Nan Man", "role": "Batsman", "fielding_rating": NaN}',
        content_type="application/json",
    )
    assert resp.status_code == 400

    resp = client.put("/api/players/1", json={"advanced_batting": {"balls_faced": "lots"}})
    assert resp.status_code == 400
    assert client.get("/api/players/1/advanced").get_json()["batting"]["impact_per_ball"] > 0
    assert len(client.get("/api/players").get_json()) == 12


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/players", json=["not", "an", "object"])
    assert resp.status_code == 400


def test_unknown_player_is_404(client):
    assert client.get("/api/players/missing").status_code == 404
    assert client.get("/api/players/missing/metrics").status_code == 404
    assert client.get("/api/players/missing/ranking").status_code == 404
    assert client.delete("/api/players/missing").status_code == 404


def test_update_and_delete(client):
    resp = client.patch("/api/players/2", json={"fitness_score": 91})
    assert resp.get_json()["player"]["fitness_score"] == 91
    assert client.delete("/api/players/2").get_json() == {"success": True}
    assert client.get("/api/players/2").status_code == 404


def test_record_match(client):
    resp = client.post("/api/players/1/match", json={"runs": 50, "wickets": 0})
    player = resp.get_json()["player"]
    assert player["matches_played"] == 143
    assert player["runs_per_match"][-1] == 50
    assert client.post("/api/players/1/match", json={"runs": "lots"}).status_code == 400
    assert client.post("/api/players/1/match", json={"runs": 3.7}).status_code == 400
    assert client.post("/api/players/1/match", json={"wickets": "2.5"}).status_code == 400
    assert client.get("/api/players/1").get_json()["matches_played"] == 143


def test_search_and_filter(client):
    assert len(client.get("/api/players/search?q=bowl").get_json()) == 4
    resp = client.get("/api/players/filter?role=Batsman&sort=batting_average&direction=asc")
    names = [p["name"] for p in resp.get_json()]
    assert names == ["Karan Desai", "Vikram Singh", "Rohan Kapoor", "Arjun Mehta"]
    assert client.get("/api/players/filter?role=Umpire").status_code == 400


def test_player_analytics(client):
    metrics = client.get("/api/players/1/metrics").get_json()
    assert 0 <= metrics["overall_rating"] <= 100
    assert len(metrics["radar"]) == 6

    form = client.get("/api/players/1/form").get_json()
    assert form["current_form"] in ("Excellent", "Good", "Average", "Poor", "Critical")

    prediction = client.get("/api/players/1/prediction").get_json()
    assert prediction["peak_performance_age"] == 32

    advanced = client.get("/api/players/5/advanced").get_json()
    assert advanced["batting"] is None
    assert advanced["bowling"]["death_over_economy"] > 0

    ranking = client.get("/api/players/1/ranking").get_json()
    assert ranking["total"] == 12

    recent = client.get("/api/players/1/recent").get_json()
    assert recent["runs"] == [51, 73, 9, 66, 58]


def test_compare(client):
    body = client.get("/api/compare?p1=1&p2=5").get_json()
    assert len(body["metrics"]) == 7
    assert body["batting_edge"] == "Arjun Mehta"
    assert body["bowling_edge"] == "Siddharth Rao"
    assert client.get("/api/compare?p1=1").status_code == 400


def test_simulate(client):
    prediction = client.get("/api/simulate?opponent_strength=75").get_json()
    assert 10 <= prediction["win_probability"] <= 90
    assert len(prediction["key_players"]) == 3
    assert client.post("/api/simulate", json={"opponent_strength": 150}).status_code == 400
    assert client.get("/api/simulate?opponent_strength=abc").status_code == 400


def test_top_performers(client):
    assert len(client.get("/api/top/bowling?count=3").get_json()) == 3
    assert client.get("/api/top/captaincy").status_code == 400
    assert client.get("/api/top/overall?count=0").status_code == 400
    assert client.get("/api/top/overall?count=-1").status_code == 400


def test_dashboards(client):
    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["squad_composition"]["total"] == 12
    assert len(dashboard["match_trends"]["runs_trend"]) == 10
    assert "team_strength" in dashboard["team_analytics"]

    predictions = client.get("/api/predictions").get_json()
    assert set(predictions) == {"rising_star", "peak_performers", "watch_list", "season_projections"}

    team = client.get("/api/team").get_json()
    assert team["balance_score"] == 100


def test_export_import_reset(client):
    resp = client.get("/api/export")
    assert resp.headers["Content-Disposition"].startswith("attachment; filename=athleteedge-export-")
    exported = resp.get_data(as_text=True)

    client.delete("/api/players/1")
    resp = client.post("/api/import", data=exported, content_type="application/json")
    assert resp.get_json() == {"success": True, "imported": 12}

    bad = client.post("/api/import", data="{oops", content_type="application/json")
    assert bad.status_code == 400
    bad_settings = json.dumps({"version": "1.0", "players": [], "settings": ["dark"]})
    resp = client.post("/api/import", data=bad_settings, content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid data format"

    client.post("/api/players", json={"name": "Extra Man", "role": "Bowler"})
    assert client.post("/api/reset").get_json() == {"success": True, "players": 12}


def test_history_and_settings(client):
    client.delete("/api/players/3")
    history = client.get("/api/history?limit=5").get_json()
    assert history[-1]["action"] == "delete"
    assert client.delete("/api/history").get_json() == {"success": True}
    assert client.get("/api/history").get_json() == []

    assert client.get("/api/settings").get_json()["theme"] == "neon"
    resp = client.put("/api/settings", data=json.dumps({"theme": "dark"}), content_type="application/json")
    assert resp.get_json()["settings"]["theme"] == "dark"
    assert client.patch("/api/settings", json={"theme": "plaid"}).status_code == 400
