"""AthleteEdge Analytics Engine - ratings, form and predictions for a cricket squad."""

from .calculator import AnalyticsEngine, get_analytics_engine
from .models import (
    AdvancedBatting,
    AdvancedBowling,
    AdvancedFielding,
    FormAnalysis,
    MatchPrediction,
    PerformanceMetrics,
    Player,
    PlayerComparison,
    PlayerPrediction,
    PlayerRole,
    TeamAnalytics,
)

__all__ = [
    "AnalyticsEngine",
    "get_analytics_engine",
    "AdvancedBatting",
    "AdvancedBowling",
    "AdvancedFielding",
    "FormAnalysis",
    "MatchPrediction",
    "PerformanceMetrics",
    "Player",
    "PlayerComparison",
    "PlayerPrediction",
    "PlayerRole",
    "TeamAnalytics",
]
