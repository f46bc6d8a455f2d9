"""Scoring data models with strict type safety.

Data structures only; the formula lives in ``calculator`` and the ordering
in ``ranking``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.contracts.common import TeamId


class PlayerScoreInput(BaseModel):
    """Box-score snapshot, final (completed match) or partial (live poll tick)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    creep_score: int = Field(0, ge=0, description="Minions + neutral monsters")

    # Identity used by the ranker; opaque to the formula
    player_key: str = Field("", description="Display name or persistent player id")
    team_id: TeamId | None = None

    @classmethod
    def from_live_player(cls, player: dict[str, Any]) -> "PlayerScoreInput":
        """Live client player item: ``scores`` may be nested or flattened."""
        scores = player.get("scores") or player
        return cls(
            kills=int(scores.get("kills", 0) or 0),
            deaths=int(scores.get("deaths", 0) or 0),
            assists=int(scores.get("assists", 0) or 0),
            creep_score=int(scores.get("creepScore", 0) or 0),
            player_key=str(player.get("summonerName") or player.get("riotId") or ""),
            team_id=TeamId.from_side(player.get("team")),
        )

    @classmethod
    def from_match_participant(cls, participant: dict[str, Any]) -> "PlayerScoreInput":
        """Match-V5 ``info.participants[]`` item."""
        creep_score = int(participant.get("totalMinionsKilled", 0) or 0) + int(
            participant.get("neutralMinionsKilled", 0) or 0
        )
        return cls(
            kills=int(participant.get("kills", 0) or 0),
            deaths=int(participant.get("deaths", 0) or 0),
            assists=int(participant.get("assists", 0) or 0),
            creep_score=creep_score,
            player_key=str(
                participant.get("riotIdGameName")
                or participant.get("summonerName")
                or participant.get("puuid")
                or ""
            ),
            team_id=TeamId.from_side(participant.get("teamId")),
        )


class ScoreBreakdown(BaseModel):
    """Weighted terms of the MVP score, for audit display."""

    model_config = ConfigDict(frozen=True)

    kills_term: float
    assists_term: float
    deaths_term: float = Field(..., le=0, description="Penalty, never positive")
    creep_score_term: float
    total: float


class PlacementEntry(BaseModel):
    """Ranked roster entry; ``rank`` is 1-based."""

    model_config = ConfigDict(frozen=True)

    player_key: str
    team_id: TeamId | None = None
    rank: int = Field(..., ge=1)
    score: float
    input: PlayerScoreInput
