"""AthleteEdge - cricket squad management and analytics.

Flask application serving the squad roster, dashboards, comparisons,
match simulation and performance predictions as JSON.
"""

import logging
import os
from datetime import date

from flask import Flask, Response, jsonify, request

from analytics_engine.batting import calculate_advanced_batting_metrics
from analytics_engine.bowling import calculate_advanced_bowling_metrics
from analytics_engine.calculator import TOP_CATEGORIES, get_analytics_engine
from analytics_engine.dashboard import (
    aggregate_stats,
    match_trends,
    player_ranking,
    prediction_overview,
    recent_performance,
    squad_composition,
    team_radar,
)
from analytics_engine.fielding import calculate_advanced_fielding_metrics
from analytics_engine.form import analyze_form
from analytics_engine.stats import generate_radar_data
import database as db

app = Flask(__name__)


def _configure_logging():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if os.environ.get("FLASK_DEBUG") == "1" else logging.INFO)


_configure_logging()


def _engine():
    return get_analytics_engine(db.get_all_players())


def _whole_number(value, message: str) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise db.ValidationError(message) from e
    if not number.is_integer():
        raise db.ValidationError(message)
    return int(number)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise db.ValidationError("Request body must be a JSON object")
    return data


# ───── Errors ─────

@app.errorhandler(db.ValidationError)
def handle_validation_error(e):
    app.logger.warning("Rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"success": False, "error": str(e)}), 400


@app.errorhandler(db.PlayerNotFoundError)
def handle_not_found(e):
    return jsonify({"success": False, "error": "Player not found"}), 404


# ───── Players ─────

@app.route("/api/players", methods=["GET"])
def list_players():
    return jsonify([p.to_dict() for p in db.get_all_players()])


@app.route("/api/players", methods=["POST"])
def create_player():
    player = db.add_player(_json_body())
    return jsonify({"success": True, "player": player.to_dict()}), 201


@app.route("/api/players/search")
def search_players():
    q = request.args.get("q", "").strip()
    return jsonify([p.to_dict() for p in db.search_players(q)])


@app.route("/api/players/filter")
def filter_players():
    players = db.filter_players(
        role=request.args.get("role") or None,
        min_batting_average=request.args.get("min_batting_average", type=float),
        max_bowling_economy=request.args.get("max_bowling_economy", type=float),
        min_fitness_score=request.args.get("min_fitness_score", type=float),
    )
    sort_key = request.args.get("sort")
    if sort_key:
        direction = request.args.get("direction", "desc")
        order = {p.id: i for i, p in enumerate(db.sort_players(sort_key, direction))}
        players.sort(key=lambda p: order[p.id])
    return jsonify([p.to_dict() for p in players])


@app.route("/api/players/<player_id>", methods=["GET"])
def get_player(player_id):
    return jsonify(db.get_player(player_id).to_dict())


@app.route("/api/players/<player_id>", methods=["PUT", "PATCH"])
def update_player(player_id):
    player = db.update_player(player_id, _json_body())
    return jsonify({"success": True, "player": player.to_dict()})


@app.route("/api/players/<player_id>", methods=["DELETE"])
def delete_player(player_id):
    db.delete_player(player_id)
    return jsonify({"success": True})


@app.route("/api/players/<player_id>/match", methods=["POST"])
def record_match(player_id):
    """Add one match's runs and wickets to a player's record."""
    data = _json_body()
    message = "Runs and wickets must be whole numbers"
    runs = _whole_number(data.get("runs", 0), message)
    wickets = _whole_number(data.get("wickets", 0), message)
    player = db.update_player_stats(player_id, runs, wickets)
    return jsonify({"success": True, "player": player.to_dict()})


# ───── Player analytics ─────

@app.route("/api/players/<player_id>/metrics")
def player_metrics(player_id):
    player = db.get_player(player_id)
    metrics = _engine().calculate_performance_metrics(player)
    return jsonify({**metrics.to_dict(), "radar": generate_radar_data(player)})


@app.route("/api/players/<player_id>/form")
def player_form(player_id):
    player = db.get_player(player_id)
    return jsonify(analyze_form(player).to_dict())


@app.route("/api/players/<player_id>/prediction")
def player_prediction(player_id):
    player = db.get_player(player_id)
    return jsonify(_engine().predict_player_performance(player).to_dict())


@app.route("/api/players/<player_id>/advanced")
def player_advanced(player_id):
    player = db.get_player(player_id)
    return jsonify({
        "batting": calculate_advanced_batting_metrics(player),
        "bowling": calculate_advanced_bowling_metrics(player),
        "fielding": calculate_advanced_fielding_metrics(player),
    })


@app.route("/api/players/<player_id>/ranking")
def player_rank(player_id):
    players = db.get_all_players()
    ranking = player_ranking(get_analytics_engine(players), players, player_id)
    if ranking is None:
        raise db.PlayerNotFoundError(player_id)
    return jsonify(ranking)


@app.route("/api/players/<player_id>/recent")
def player_recent(player_id):
    return jsonify(recent_performance(db.get_player(player_id)))


@app.route("/api/compare")
def compare_players():
    """Head-to-head player comparison."""
    p1 = request.args.get("p1", "").strip()
    p2 = request.args.get("p2", "").strip()
    if not p1 or not p2:
        raise db.ValidationError("Both p1 and p2 are required")
    comparison = _engine().compare_players(db.get_player(p1), db.get_player(p2))
    return jsonify(comparison.to_dict())


# ───── Team ─────

@app.route("/api/team")
def team_analytics():
    return jsonify(_engine().analyze_team().to_dict())


@app.route("/api/simulate", methods=["GET", "POST"])
def simulate():
    """Simulate a match against an opponent of the given strength (0-100)."""
    if request.method == "POST":
        raw = _json_body().get("opponent_strength", 75)
    else:
        raw = request.args.get("opponent_strength", 75)
    try:
        strength = float(raw)
    except (TypeError, ValueError) as e:
        raise db.ValidationError("Opponent strength must be a number") from e
    if not 0 <= strength <= 100:
        raise db.ValidationError("Opponent strength must be between 0 and 100")
    return jsonify(_engine().simulate_match(strength).to_dict())


@app.route("/api/top/<category>")
def top_performers(category):
    if category not in TOP_CATEGORIES:
        raise db.ValidationError(f"Category must be one of: {', '.join(TOP_CATEGORIES)}")
    count = request.args.get("count", 5, type=int)
    if count < 1:
        raise db.ValidationError("Count must be at least 1")
    return jsonify([p.to_dict() for p in _engine().get_top_performers(category, count)])


@app.route("/api/form/in")
def in_form():
    return jsonify([p.to_dict() for p in _engine().get_players_in_form()])


@app.route("/api/form/out")
def out_of_form():
    return jsonify([p.to_dict() for p in _engine().get_players_out_of_form()])


@app.route("/api/dashboard")
def dashboard():
    """Everything the squad dashboard shows in one response."""
    players = db.get_all_players()
    engine = get_analytics_engine(players)
    return jsonify({
        "squad_composition": squad_composition(players),
        "aggregate_stats": aggregate_stats(players),
        "match_trends": match_trends(players),
        "team_radar": team_radar(players),
        "team_analytics": engine.analyze_team().to_dict(),
        "match_prediction": engine.simulate_match().to_dict(),
        "top_batsmen": [p.to_dict() for p in engine.get_top_performers("batting", 5)],
        "top_bowlers": [p.to_dict() for p in engine.get_top_performers("bowling", 5)],
        "top_all_rounders": [p.to_dict() for p in engine.get_top_performers("overall", 5)],
        "players_in_form": [p.to_dict() for p in engine.get_players_in_form()],
        "players_out_of_form": [p.to_dict() for p in engine.get_players_out_of_form()],
    })


@app.route("/api/predictions")
def predictions():
    players = db.get_all_players()
    return jsonify(prediction_overview(get_analytics_engine(players), players))


# ───── Data management ─────

@app.route("/api/export")
def export_data():
    filename = f"athleteedge-export-{date.today().isoformat()}.json"
    return Response(
        db.export_data(),
        mimetype="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@app.route("/api/import", methods=["POST"])
def import_data():
    players = db.import_data(request.get_data(as_text=True))
    return jsonify({"success": True, "imported": len(players)})


@app.route("/api/reset", methods=["POST"])
def reset():
    players = db.reset_to_defaults()
    return jsonify({"success": True, "players": len(players)})


@app.route("/api/history", methods=["GET"])
def history():
    limit = request.args.get("limit", type=int)
    return jsonify(db.get_history(limit))


@app.route("/api/history", methods=["DELETE"])
def clear_history():
    db.clear_history()
    return jsonify({"success": True})


@app.route("/api/settings", methods=["GET"])
def get_settings():
    return jsonify(db.get_settings())


@app.route("/api/settings", methods=["PUT", "PATCH"])
def update_settings():
    settings = db.update_settings(_json_body())
    return jsonify({"success": True, "settings": settings})


if __name__ == "__main__":
    app.run(debug=os.environ.get("FLASK_DEBUG") == "1", port=5050)
