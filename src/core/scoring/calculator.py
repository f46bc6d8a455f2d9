"""MVP score calculation - pure domain functions with zero I/O.

The same formula applies to completed matches and live poll snapshots:

    score = kills * 3 + assists * 1.5 - deaths * 1.2 + creep_score * 0.012

The score is a display-ranking aid, not an authoritative match record.
"""

from src.core.scoring.models import PlayerScoreInput, ScoreBreakdown

KILL_WEIGHT = 3.0
ASSIST_WEIGHT = 1.5
DEATH_WEIGHT = 1.2
CREEP_SCORE_WEIGHT = 0.012


def score_breakdown(player: PlayerScoreInput) -> ScoreBreakdown:
    """Return each weighted term plus their sum."""
    kills_term = player.kills * KILL_WEIGHT
    assists_term = player.assists * ASSIST_WEIGHT
    deaths_term = -(player.deaths * DEATH_WEIGHT)
    creep_score_term = player.creep_score * CREEP_SCORE_WEIGHT
    return ScoreBreakdown(
        kills_term=kills_term,
        assists_term=assists_term,
        deaths_term=deaths_term,
        creep_score_term=creep_score_term,
        total=kills_term + assists_term + deaths_term + creep_score_term,
    )


def calculate_score(player: PlayerScoreInput) -> float:
    """MVP score for one box-score snapshot."""
    return score_breakdown(player).total
