"""SQLite store for the squad roster, app settings and change history."""

import json
import logging
import os
import sqlite3
import time
import uuid
from dataclasses import asdict
from datetime import datetime
from typing import List, Optional

from analytics_engine.models import Player, PlayerRole
from analytics_engine.stats import is_valid_player_data
from default_players import INITIAL_PLAYERS

logger = logging.getLogger(__name__)

DB_PATH = os.environ.get(
    "ATHLETEEDGE_DB_PATH",
    os.path.join(os.path.dirname(__file__), "athleteedge.db"),
)

EXPORT_VERSION = "1.0"
MAX_HISTORY = 100
MAX_MATCH_HISTORY = 10

DEFAULT_SETTINGS = {
    "theme": "neon",
    "auto_save": True,
    "analytics_refresh_rate": 30,
    "show_predictions": True,
    "default_view": "analytics",
}
THEMES = ("dark", "light", "neon")
VIEWS = ("coach", "player", "analytics")

PLAYER_COLUMNS = (
    "id", "position", "name", "role", "batting_average", "strike_rate",
    "total_runs", "wickets", "bowling_economy", "fielding_rating",
    "fitness_score", "matches_played", "fours", "sixes", "catches",
    "runs_per_match", "wickets_per_match", "image",
    "advanced_batting", "advanced_bowling", "advanced_fielding",
)


class ValidationError(ValueError):
    """Player, settings or import data failed validation."""


class PlayerNotFoundError(LookupError):
    pass


def get_db():
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Create tables if they don't exist."""
    conn = get_db()
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS players (
            id TEXT PRIMARY KEY,
            position INTEGER NOT NULL,
            name TEXT NOT NULL,
            role TEXT NOT NULL,
            batting_average REAL NOT NULL DEFAULT 0,
            strike_rate REAL NOT NULL DEFAULT 0,
            total_runs INTEGER NOT NULL DEFAULT 0,
            wickets INTEGER NOT NULL DEFAULT 0,
            bowling_economy REAL NOT NULL DEFAULT 0,
            fielding_rating REAL NOT NULL DEFAULT 0,
            fitness_score REAL NOT NULL DEFAULT 0,
            matches_played INTEGER NOT NULL DEFAULT 0,
            fours INTEGER NOT NULL DEFAULT 0,
            sixes INTEGER NOT NULL DEFAULT 0,
            catches INTEGER NOT NULL DEFAULT 0,
            runs_per_match TEXT NOT NULL DEFAULT '[]',
            wickets_per_match TEXT NOT NULL DEFAULT '[]',
            image TEXT NOT NULL DEFAULT '',
            advanced_batting TEXT,
            advanced_bowling TEXT,
            advanced_fielding TEXT
        );

        CREATE TABLE IF NOT EXISTS app_state (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS history (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL,
            timestamp INTEGER NOT NULL,
            action TEXT NOT NULL,
            player_id TEXT NOT NULL,
            player_name TEXT NOT NULL,
            details TEXT NOT NULL DEFAULT ''
        );

        CREATE INDEX IF NOT EXISTS idx_player_position ON players(position);
    """)
    conn.commit()
    conn.close()


# ───── Row mapping ─────

def _dump_optional(block) -> Optional[str]:
    if block is None:
        return None
    return json.dumps(asdict(block))


def _player_row(player: Player, position: int) -> tuple:
    return (
        player.id, position, player.name, player.role.value,
        player.batting_average, player.strike_rate, player.total_runs,
        player.wickets, player.bowling_economy, player.fielding_rating,
        player.fitness_score, player.matches_played, player.fours,
        player.sixes, player.catches,
        json.dumps(player.runs_per_match), json.dumps(player.wickets_per_match),
        player.image,
        _dump_optional(player.advanced_batting),
        _dump_optional(player.advanced_bowling),
        _dump_optional(player.advanced_fielding),
    )


def _row_to_player(row) -> Player:
    d = dict(row)
    d.pop("position", None)
    for key in ("runs_per_match", "wickets_per_match"):
        d[key] = json.loads(d[key])
    for key in ("advanced_batting", "advanced_bowling", "advanced_fielding"):
        d[key] = json.loads(d[key]) if d[key] else None
    return Player.from_dict(d)


def _insert_player(conn, player: Player, position: int):
    placeholders = ", ".join("?" for _ in PLAYER_COLUMNS)
    conn.execute(
        f"INSERT INTO players ({', '.join(PLAYER_COLUMNS)}) VALUES ({placeholders})",
        _player_row(player, position),
    )


def _generate_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def _parse_player(data: dict) -> Player:
    """Validate raw player data and build a Player, or raise ValidationError."""
    valid, errors = is_valid_player_data(data)
    if not valid:
        raise ValidationError(errors[0])
    try:
        return Player.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Malformed player data: {e}") from e


# ───── Players ─────

def _get_state(conn, key: str) -> Optional[str]:
    row = conn.execute("SELECT value FROM app_state WHERE key = ?", (key,)).fetchone()
    return row["value"] if row else None


def _set_state(conn, key: str, value: str):
    conn.execute(
        "INSERT INTO app_state (key, value) VALUES (?, ?) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
        (key, value),
    )


def _write_players(conn, players: List[Player]):
    conn.execute("DELETE FROM players")
    for position, player in enumerate(players):
        _insert_player(conn, player, position)
    _set_state(conn, "seeded", "1")


def default_players() -> List[Player]:
    return [Player.from_dict(d) for d in INITIAL_PLAYERS]


def get_all_players() -> List[Player]:
    """Return the roster in squad order, seeding the default squad on first use."""
    conn = get_db()
    try:
        if _get_state(conn, "seeded") is None:
            logger.info("Empty store, seeding %d default players", len(INITIAL_PLAYERS))
            _write_players(conn, default_players())
            conn.commit()
        rows = conn.execute("SELECT * FROM players ORDER BY position").fetchall()
        return [_row_to_player(r) for r in rows]
    finally:
        conn.close()


def save_players(players: List[Player]):
    """Replace the whole roster."""
    conn = get_db()
    try:
        _write_players(conn, players)
        conn.commit()
    finally:
        conn.close()


def get_player(player_id: str) -> Player:
    for player in get_all_players():
        if player.id == player_id:
            return player
    raise PlayerNotFoundError(f"Player not found: {player_id}")


def add_player(data: dict) -> Player:
    """Validate and append a new player. Any ``id`` in ``data`` is replaced."""
    player = _parse_player(data)
    player.id = _generate_id()

    get_all_players()  # make sure the default squad is in place first
    conn = get_db()
    try:
        row = conn.execute("SELECT COALESCE(MAX(position), -1) AS p FROM players").fetchone()
        _insert_player(conn, player, row["p"] + 1)
        _add_history_entry(conn, "add", player.id, player.name,
                           f"Added {player.role.value} to squad")
        conn.commit()
    finally:
        conn.close()

    logger.info("Added player %s (%s)", player.name, player.id)
    return player


def update_player(player_id: str, updates: dict) -> Player:
    """Merge ``updates`` into the stored player; the id cannot change."""
    current = get_player(player_id)
    merged = current.to_dict()
    merged.update(updates)
    merged["id"] = player_id
    player = _parse_player(merged)

    conn = get_db()
    try:
        row = conn.execute("SELECT position FROM players WHERE id = ?", (player_id,)).fetchone()
        conn.execute("DELETE FROM players WHERE id = ?", (player_id,))
        _insert_player(conn, player, row["position"])
        _add_history_entry(conn, "update", player_id, player.name, "Updated player stats")
        conn.commit()
    finally:
        conn.close()

    logger.info("Updated player %s (%s)", player.name, player_id)
    return player


def delete_player(player_id: str):
    player = get_player(player_id)
    conn = get_db()
    try:
        conn.execute("DELETE FROM players WHERE id = ?", (player_id,))
        _add_history_entry(conn, "delete", player_id, player.name, "Removed from squad")
        conn.commit()
    finally:
        conn.close()
    logger.info("Deleted player %s (%s)", player.name, player_id)


def update_player_stats(player_id: str, runs: int, wickets: int) -> Player:
    """Record one more match: totals grow, per-match history keeps the last 10."""
    if runs < 0 or wickets < 0:
        raise ValidationError("Runs and wickets must not be negative")
    player = get_player(player_id)

    total_runs = player.total_runs + runs
    matches = player.matches_played + 1
    return update_player(player_id, {
        "total_runs": total_runs,
        "wickets": player.wickets + wickets,
        "matches_played": matches,
        "runs_per_match": (player.runs_per_match + [runs])[-MAX_MATCH_HISTORY:],
        "wickets_per_match": (player.wickets_per_match + [wickets])[-MAX_MATCH_HISTORY:],
        "batting_average": round(total_runs / matches, 2),
    })


# ───── Search & filter ─────

def search_players(query: str) -> List[Player]:
    """Case-insensitive match on name or role."""
    q = query.lower()
    return [
        p for p in get_all_players()
        if q in p.name.lower() or q in p.role.value.lower()
    ]


def filter_players(role: Optional[str] = None,
                   min_batting_average: Optional[float] = None,
                   max_bowling_economy: Optional[float] = None,
                   min_fitness_score: Optional[float] = None) -> List[Player]:
    players = get_all_players()
    if role:
        try:
            wanted = PlayerRole(role)
        except ValueError as e:
            raise ValidationError("Invalid player role") from e
        players = [p for p in players if p.role == wanted]
    if min_batting_average is not None:
        players = [p for p in players if p.batting_average >= min_batting_average]
    if max_bowling_economy is not None:
        players = [p for p in players if p.bowling_economy <= max_bowling_economy]
    if min_fitness_score is not None:
        players = [p for p in players if p.fitness_score >= min_fitness_score]
    return players


def sort_players(key: str, direction: str = "desc") -> List[Player]:
    players = get_all_players()
    if key not in Player.__dataclass_fields__ or key.startswith("advanced_"):
        raise ValidationError(f"Cannot sort by {key}")

    def sort_value(p: Player):
        value = getattr(p, key)
        if isinstance(value, PlayerRole):
            return value.value
        if isinstance(value, str):
            return value.lower()
        if isinstance(value, list):
            return sum(value)
        return value

    return sorted(players, key=sort_value, reverse=(direction == "desc"))


# ───── Settings ─────

def _validate_settings(settings: dict) -> dict:
    if not isinstance(settings, dict):
        raise ValidationError("Invalid data format")
    merged = dict(DEFAULT_SETTINGS)
    merged.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    if merged["theme"] not in THEMES:
        raise ValidationError(f"Theme must be one of: {', '.join(THEMES)}")
    if merged["default_view"] not in VIEWS:
        raise ValidationError(f"Default view must be one of: {', '.join(VIEWS)}")
    rate = merged["analytics_refresh_rate"]
    if isinstance(rate, bool) or not isinstance(rate, (int, float)) or rate <= 0:
        raise ValidationError("Analytics refresh rate must be a positive number")
    merged["auto_save"] = bool(merged["auto_save"])
    merged["show_predictions"] = bool(merged["show_predictions"])
    return merged


def get_settings() -> dict:
    """Return stored settings, writing the defaults on first read."""
    conn = get_db()
    try:
        stored = _get_state(conn, "settings")
        if stored is None:
            _set_state(conn, "settings", json.dumps(DEFAULT_SETTINGS))
            conn.commit()
            return dict(DEFAULT_SETTINGS)
        return json.loads(stored)
    finally:
        conn.close()


def save_settings(settings: dict) -> dict:
    settings = _validate_settings(settings)
    conn = get_db()
    try:
        _set_state(conn, "settings", json.dumps(settings))
        conn.commit()
    finally:
        conn.close()
    return settings


def update_settings(changes: dict) -> dict:
    current = get_settings()
    current.update(changes)
    return save_settings(current)


# ───── History ─────

def _add_history_entry(conn, action: str, player_id: str, player_name: str, details: str):
    conn.execute("""
        INSERT INTO history (id, timestamp, action, player_id, player_name, details)
        VALUES (?, ?, ?, ?, ?, ?)
    """, (_generate_id(), int(time.time() * 1000), action, player_id, player_name, details))
    # Keep only the newest entries
    conn.execute("""
        DELETE FROM history WHERE seq NOT IN (
            SELECT seq FROM history ORDER BY seq DESC LIMIT ?
        )
    """, (MAX_HISTORY,))


def get_history(limit: Optional[int] = None) -> List[dict]:
    """History oldest first; ``limit`` keeps only the newest entries."""
    conn = get_db()
    try:
        rows = conn.execute("""
            SELECT id, timestamp, action, player_id, player_name, details
            FROM history ORDER BY seq ASC
        """).fetchall()
    finally:
        conn.close()
    history = [dict(r) for r in rows]
    if limit:
        history = history[-limit:]
    return history


def clear_history():
    conn = get_db()
    try:
        conn.execute("DELETE FROM history")
        conn.commit()
    finally:
        conn.close()


# ───── Export / import ─────

def export_data() -> str:
    payload = {
        "version": EXPORT_VERSION,
        "export_date": datetime.now().isoformat(),
        "players": [p.to_dict() for p in get_all_players()],
        "settings": get_settings(),
        "history": get_history(),
    }
    return json.dumps(payload, indent=2)


def import_data(json_data: str) -> List[Player]:
    """Replace the roster (and settings, when present) from an export payload.

    Nothing is written unless every player validates.
    """
    try:
        data = json.loads(json_data)
    except (TypeError, ValueError) as e:
        raise ValidationError("Failed to import data: invalid JSON") from e

    if not isinstance(data, dict) or not data.get("version") or not isinstance(data.get("players"), list):
        raise ValidationError("Invalid data format")

    players = []
    seen_ids = set()
    for raw in data["players"]:
        if not isinstance(raw, dict):
            raise ValidationError("Invalid player data: expected an object")
        try:
            player = _parse_player(raw)
        except ValidationError as e:
            raise ValidationError(f"Invalid player data: {e}") from e
        if not player.id:
            player.id = _generate_id()
        if player.id in seen_ids:
            raise ValidationError(f"Invalid player data: duplicate id {player.id}")
        seen_ids.add(player.id)
        players.append(player)

    settings = None
    if data.get("settings") is not None:
        settings = _validate_settings(data["settings"])

    conn = get_db()
    try:
        _write_players(conn, players)
        if settings is not None:
            _set_state(conn, "settings", json.dumps(settings))
        conn.commit()
    finally:
        conn.close()

    logger.info("Imported %d players (export version %s)", len(players), data["version"])
    return players


def reset_to_defaults() -> List[Player]:
    players = default_players()
    save_players(players)
    logger.info("Roster reset to the default squad")
    return players


# Initialize DB on import
init_db()
