"""Assemble both engine paths into one report for a match snapshot.

The kill-feed path (normalize, classify) and the scoring path (score, rank)
share no state; this module only runs them side by side on the same
snapshot so a presentation layer gets a single consistent result.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from src.contracts.common import TeamId
from src.contracts.events import ClassifiedKillEvent, RawKillEvent
from src.contracts.participants import ParticipantIdentity
from src.core.observability import trace_performance
from src.core.scoring import PlacementEntry, PlayerScoreInput, rank_players, team_average_scores
from src.core.timeline import (
    KillFeedSummary,
    build_kill_event_keys,
    classify_kill_feed,
    summarize_kill_feed,
)


@dataclass(frozen=True)
class MatchReport:
    """Kill feed plus placements for one snapshot (completed match or live tick)."""

    kill_feed: list[ClassifiedKillEvent]
    kill_feed_keys: list[str]
    summary: KillFeedSummary
    placements: list[PlacementEntry]
    team_placements: dict[TeamId, list[PlacementEntry]] = field(default_factory=dict)
    team_average_scores: dict[TeamId, float] = field(default_factory=dict)

    @property
    def mvp(self) -> PlacementEntry | None:
        return self.placements[0] if self.placements else None

    def placement_for(self, player_key: str) -> PlacementEntry | None:
        return next((p for p in self.placements if p.player_key == player_key), None)


@trace_performance
def build_match_report(
    events: Sequence[RawKillEvent],
    identities: Mapping[int, ParticipantIdentity] | None,
    roster: Sequence[PlayerScoreInput],
    *,
    multi_kill_window_ms: int | None = None,
) -> MatchReport:
    """Run classification and ranking over a complete, fresh snapshot."""
    kill_feed = classify_kill_feed(events, identities, multi_kill_window_ms=multi_kill_window_ms)
    team_placements = {team: rank_players(roster, team_id=team) for team in TeamId}
    return MatchReport(
        kill_feed=kill_feed,
        kill_feed_keys=build_kill_event_keys(kill_feed),
        summary=summarize_kill_feed(kill_feed),
        placements=rank_players(roster),
        team_placements={team: ranks for team, ranks in team_placements.items() if ranks},
        team_average_scores=team_average_scores(roster),
    )
