"""MVP scoring and placement ranking.

Pure domain logic (zero I/O). The formula is fixed:
kills x 3 + assists x 1.5 - deaths x 1.2 + creep score x 0.012.
"""

from src.core.scoring.calculator import calculate_score, score_breakdown
from src.core.scoring.models import PlacementEntry, PlayerScoreInput, ScoreBreakdown
from src.core.scoring.ranking import rank_players, select_mvp, team_average_scores, team_mvps

__all__ = [
    "PlayerScoreInput",
    "ScoreBreakdown",
    "PlacementEntry",
    "calculate_score",
    "score_breakdown",
    "rank_players",
    "select_mvp",
    "team_mvps",
    "team_average_scores",
]
