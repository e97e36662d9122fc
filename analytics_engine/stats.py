"""Statistical helpers shared by the rating, form and dashboard code.

Every function is a pure map from numbers (or a Player) to a number or
label. Empty inputs and zero denominators return 0 rather than raising.
"""

from __future__ import annotations

import math
import time
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from .models import Player, PlayerRole

T = TypeVar("T")

VALID_ROLES = tuple(r.value for r in PlayerRole)


# ───── Basic statistics ─────

def calculate_mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_median(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def calculate_variance(values: Sequence[float]) -> float:
    """Population variance."""
    if not values:
        return 0.0
    mean = calculate_mean(values)
    return calculate_mean([(v - mean) ** 2 for v in values])


def calculate_standard_deviation(values: Sequence[float]) -> float:
    return math.sqrt(calculate_variance(values))


def calculate_percentile(values: Sequence[float], percentile: float) -> float:
    """Percentile with linear interpolation between closest ranks."""
    if not values:
        return 0.0
    ordered = sorted(values)
    index = (percentile / 100) * (len(ordered) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return ordered[lower]
    return ordered[lower] * (upper - index) + ordered[upper] * (index - lower)


def calculate_z_score(value: float, mean: float, std_dev: float) -> float:
    if std_dev == 0:
        return 0.0
    return (value - mean) / std_dev


def normalize_value(value: float, min_value: float, max_value: float) -> float:
    if max_value == min_value:
        return 0.0
    return (value - min_value) / (max_value - min_value)


def clamp(value: float, min_value: float, max_value: float) -> float:
    return min(max(value, min_value), max_value)


# ───── Cricket-specific calculations ─────

def calculate_consistency_score(values: Sequence[float]) -> float:
    """Map the coefficient of variation to 0-100 (lower CV = higher score).

    Fewer than two values, or a zero mean, is treated as neutral (50).
    """
    if len(values) < 2:
        return 50.0
    mean = calculate_mean(values)
    if mean == 0:
        return 50.0
    cv = (calculate_standard_deviation(values) / mean) * 100
    return clamp(100 - cv, 0, 100)


def calculate_batting_index(player: Player) -> float:
    avg_score = min(player.batting_average / 60, 1) * 100
    sr_score = min(player.strike_rate / 180, 1) * 100
    consistency = calculate_consistency_score(player.runs_per_match)
    experience = min(player.matches_played / 200, 1) * 100
    return avg_score * 0.4 + sr_score * 0.3 + consistency * 0.2 + experience * 0.1


def calculate_bowling_index(player: Player) -> float:
    if player.wickets == 0 or player.matches_played == 0:
        return 0.0
    economy_score = max(0.0, (10 - player.bowling_economy) / 10) * 100
    wickets_score = min(player.wickets / player.matches_played * 20, 100)
    consistency = calculate_consistency_score(player.wickets_per_match)
    experience = min(player.matches_played / 150, 1) * 100
    return economy_score * 0.35 + wickets_score * 0.35 + consistency * 0.2 + experience * 0.1


def calculate_strike_rotation(player: Player) -> float:
    """Share of runs (%) that did not come from boundaries."""
    if player.total_runs == 0:
        return 0.0
    return ((player.total_runs - player.boundary_runs) / player.total_runs) * 100


def calculate_boundary_percentage(player: Player) -> float:
    if player.total_runs == 0:
        return 0.0
    return (player.boundary_runs / player.total_runs) * 100


def calculate_six_to_four_ratio(player: Player) -> float:
    if player.fours == 0:
        return math.inf if player.sixes > 0 else 0.0
    return player.sixes / player.fours


def calculate_runs_per_match(player: Player) -> float:
    if player.matches_played == 0:
        return 0.0
    return player.total_runs / player.matches_played


def calculate_wickets_per_match(player: Player) -> float:
    if player.matches_played == 0:
        return 0.0
    return player.wickets / player.matches_played


# ───── Form & trend analysis ─────

def calculate_trend_direction(values: Sequence[float]) -> str:
    """Compare the second half of a series with the first: up / down / stable."""
    if len(values) < 4:
        return "stable"
    half = len(values) // 2
    first_avg = calculate_mean(values[:half])
    second_avg = calculate_mean(values[half:])
    change = ((second_avg - first_avg) / first_avg) * 100 if first_avg > 0 else 0
    if change > 10:
        return "up"
    if change < -10:
        return "down"
    return "stable"


def calculate_moving_average(values: Sequence[float], window: int = 3) -> List[float]:
    if len(values) < window:
        return list(values)
    return [
        calculate_mean(values[i - window + 1:i + 1])
        for i in range(window - 1, len(values))
    ]


def calculate_exponential_moving_average(values: Sequence[float], alpha: float = 0.3) -> List[float]:
    if not values:
        return []
    result = [float(values[0])]
    for v in values[1:]:
        result.append(alpha * v + (1 - alpha) * result[-1])
    return result


def predict_next_value(values: Sequence[float]) -> float:
    """EMA-based estimate of the next value, nudged by the trend."""
    if not values:
        return 0.0
    if len(values) == 1:
        return float(values[0])
    last_ema = calculate_exponential_moving_average(values, 0.4)[-1]
    trend = calculate_trend_direction(values)
    multiplier = 1.05 if trend == "up" else 0.95 if trend == "down" else 1.0
    return last_ema * multiplier


# ───── Comparison utilities ─────

def compare_values(a: float, b: float) -> str:
    if abs(a - b) < 0.01:
        return "equal"
    return "higher" if a > b else "lower"


def calculate_percentage_difference(a: float, b: float) -> float:
    if b == 0:
        return 100.0 if a > 0 else 0.0
    return ((a - b) / b) * 100


def rank_players(players: Sequence[Player], key: str, ascending: bool = False) -> List[Player]:
    """Sort by a numeric Player attribute. Non-numeric keys keep roster order."""
    ranked = list(players)
    if ranked and isinstance(getattr(ranked[0], key, None), (int, float)):
        ranked.sort(key=lambda p: getattr(p, key), reverse=not ascending)
    return ranked


def get_top_n(items: Sequence[T], n: int, scorer: Callable[[T], float]) -> List[T]:
    return sorted(items, key=scorer, reverse=True)[:n]


# ───── Chart data helpers ─────

def generate_chart_data(players: Sequence[Player], x_key: str, y_key: str) -> List[dict]:
    return [
        {"x": getattr(p, x_key), "y": getattr(p, y_key), "name": p.name}
        for p in players
    ]


def generate_radar_data(player: Player) -> List[dict]:
    bowling = max(100 - player.bowling_economy * 10, 0) if player.wickets > 0 else 0
    return [
        {"attribute": "Batting", "value": min(player.batting_average * 1.5, 100), "full_mark": 100},
        {"attribute": "Strike Rate", "value": min(player.strike_rate / 2, 100), "full_mark": 100},
        {"attribute": "Bowling", "value": bowling, "full_mark": 100},
        {"attribute": "Wickets", "value": min(player.wickets / 3, 100), "full_mark": 100},
        {"attribute": "Fielding", "value": player.fielding_rating, "full_mark": 100},
        {"attribute": "Fitness", "value": player.fitness_score, "full_mark": 100},
    ]


def generate_time_series_data(values: Sequence[float], label_prefix: str = "M") -> List[dict]:
    return [{"label": f"{label_prefix}{i + 1}", "value": v} for i, v in enumerate(values)]


# ───── Formatting ─────

def format_number(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def format_large_number(value: float) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1000:
        return f"{value / 1000:.1f}K"
    return str(value)


def get_relative_time(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
    """Human readable age of a millisecond timestamp."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    diff = now_ms - timestamp_ms
    minutes = diff // 60000
    hours = diff // 3600000
    days = diff // 86400000
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} min ago"
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    return f"{days} day{'s' if days > 1 else ''} ago"


# ───── Validation ─────

def is_valid_player_data(data: dict) -> Tuple[bool, List[str]]:
    """Check raw player fields; returns (valid, errors)."""
    errors: List[str] = []

    name = data.get("name")
    if not isinstance(name, str) or len(name.strip()) < 2:
        errors.append("Player name must be at least 2 characters")

    role = data.get("role")
    if isinstance(role, PlayerRole):
        role = role.value
    if role not in VALID_ROLES:
        errors.append("Invalid player role")

    ranges = (
        ("batting_average", 0, 100, "Batting average must be between 0 and 100"),
        ("strike_rate", 0, 300, "Strike rate must be between 0 and 300"),
        ("bowling_economy", 0, 20, "Bowling economy must be between 0 and 20"),
        ("fitness_score", 0, 100, "Fitness score must be between 0 and 100"),
    )
    for key, low, high, message in ranges:
        value = data.get(key)
        if value is None:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            errors.append(message)
            continue
        if not math.isfinite(value) or value < low or value > high:
            errors.append(message)

    return len(errors) == 0, errors
