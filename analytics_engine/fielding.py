"""Fielding metrics from catch, run-out and ground-fielding counts.

The career fielding rating is stored on the player directly (0-100);
this module derives the composite impact score from advanced counts.
"""

from __future__ import annotations

from typing import Optional

from .models import Player

# Composite weights: (catch efficiency, direct hits, clean fielding, runs saved)
IMPACT_WEIGHTS = (0.4, 0.3, 0.2, 0.1)


def calculate_advanced_fielding_metrics(player: Player) -> Optional[dict]:
    """Returns None without catch attempts, else the fielding breakdown."""
    fielding = player.advanced_fielding
    if fielding is None or fielding.catch_attempts == 0:
        return None

    catch_efficiency = (fielding.catches_taken / fielding.catch_attempts) * 100

    if fielding.run_out_attempts > 0:
        direct_hit_success = (fielding.direct_hits / fielding.run_out_attempts) * 100
    else:
        direct_hit_success = 0.0

    if fielding.ground_fielding_actions > 0:
        run_saving_index = fielding.runs_saved / fielding.ground_fielding_actions
        misfield_rate = (fielding.misfields / fielding.ground_fielding_actions) * 100
    else:
        run_saving_index = 0.0
        misfield_rate = 0.0

    w_catch, w_direct, w_clean, w_saved = IMPACT_WEIGHTS
    impact = (
        catch_efficiency * w_catch
        + direct_hit_success * w_direct
        + (100 - misfield_rate) * w_clean
        + run_saving_index * 10 * w_saved
    )

    return {
        "catch_efficiency": round(catch_efficiency, 1),
        "direct_hit_success": round(direct_hit_success, 1),
        "run_saving_index": round(run_saving_index, 3),
        "misfield_rate": round(misfield_rate, 1),
        "fielding_impact_score": round(min(100.0, impact), 1),
        "total_catches": fielding.catches_taken,
        "direct_hits": fielding.direct_hits,
        "runs_saved": fielding.runs_saved,
    }
