"""Placement ranking over MVP scores.

Ranks are 1-based and consecutive. Equal scores keep their input order
(``sorted`` is stable, including with ``reverse=True``), so two tied players
are never swapped between calls.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from src.contracts.common import TeamId
from src.core.observability import trace_performance
from src.core.scoring.calculator import calculate_score
from src.core.scoring.models import PlacementEntry, PlayerScoreInput

logger = logging.getLogger(__name__)


@trace_performance
def rank_players(
    roster: Iterable[PlayerScoreInput], team_id: TeamId | None = None
) -> list[PlacementEntry]:
    """Rank a match-wide or team-scoped roster by descending MVP score.

    Args:
        roster: Box-score snapshots in display order
        team_id: When set, only players on this team are ranked

    Returns:
        Full ranking; callers decide how many ranks to highlight
    """
    candidates = [p for p in roster if team_id is None or p.team_id == team_id]
    scored = [(calculate_score(p), p) for p in candidates]
    scored.sort(key=lambda pair: pair[0], reverse=True)

    return [
        PlacementEntry(
            player_key=player.player_key,
            team_id=player.team_id,
            rank=rank,
            score=score,
            input=player,
        )
        for rank, (score, player) in enumerate(scored, start=1)
    ]


def select_mvp(roster: Iterable[PlayerScoreInput]) -> PlacementEntry | None:
    """Match-wide rank 1, or None for an empty roster."""
    ranking = rank_players(roster)
    return ranking[0] if ranking else None


def team_mvps(roster: Sequence[PlayerScoreInput]) -> dict[TeamId, PlacementEntry]:
    """Rank 1 of each team that has at least one player."""
    result: dict[TeamId, PlacementEntry] = {}
    for team in TeamId:
        ranking = rank_players(roster, team_id=team)
        if ranking:
            result[team] = ranking[0]
    return result


def team_average_scores(roster: Sequence[PlayerScoreInput]) -> dict[TeamId, float]:
    """Mean MVP score per team; teams without players are omitted."""
    averages: dict[TeamId, float] = {}
    for team in TeamId:
        scores = [calculate_score(p) for p in roster if p.team_id == team]
        if scores:
            averages[team] = float(np.mean(scores))
    unassigned = sum(1 for p in roster if p.team_id is None)
    if unassigned:
        logger.debug("team_average_scores skipped %d players without a team", unassigned)
    return averages
