"""
Participant identity contracts.

A match maps small participant slot ids (1-10 on Summoner's Rift) to stable
player identities. Kill events only carry slot ids, so every display-facing
field is resolved through these models.
"""

from typing import Any

from pydantic import Field

from .common import FrozenContract, TeamId


class ParticipantIdentity(FrozenContract):
    """Identity of one participant, immutable for the duration of a match."""

    slot_id: int = Field(..., ge=1, le=16, description="Participant slot id within the match")
    puuid: str = Field("", description="Opaque persistent player id")
    champion_id: str = Field(..., description="Champion id name, e.g. 'MissFortune'")
    team_id: TeamId
    summoner_name: str | None = Field(None, description="Display name at time of match")
    champion_name: str | None = Field(None, description="Localized champion display name")

    @property
    def display_name(self) -> str:
        return self.summoner_name or self.champion_name or self.champion_id

    @classmethod
    def from_match_participant(cls, participant: dict[str, Any]) -> "ParticipantIdentity":
        """Build from a Match-V5 ``info.participants[]`` item."""
        game_name = participant.get("riotIdGameName") or participant.get("summonerName")
        champion = participant.get("championName") or str(participant.get("championId", ""))
        return cls(
            slot_id=int(participant["participantId"]),
            puuid=str(participant.get("puuid") or ""),
            champion_id=champion,
            team_id=TeamId(int(participant["teamId"])),
            summoner_name=game_name or None,
            champion_name=participant.get("championName"),
        )

    @classmethod
    def from_live_player(cls, slot_id: int, player: dict[str, Any]) -> "ParticipantIdentity":
        """Build from a live client / spectator player item (``team`` is ORDER or CHAOS)."""
        team = TeamId.from_side(player.get("team"))
        if team is None:
            raise ValueError(f"unknown team side: {player.get('team')!r}")
        return cls(
            slot_id=slot_id,
            puuid=str(player.get("puuid") or player.get("riotId") or ""),
            champion_id=str(player.get("championName") or ""),
            team_id=team,
            summoner_name=player.get("summonerName") or player.get("riotId") or None,
            champion_name=player.get("championName"),
        )


class DisplayIdentity(FrozenContract):
    """Resolved side of a kill event as shown in the feed."""

    slot_id: int = Field(..., ge=0)
    display_name: str
    champion: str
    team_id: TeamId | None = None
    is_placeholder: bool = False

    @classmethod
    def from_participant(cls, identity: ParticipantIdentity) -> "DisplayIdentity":
        return cls(
            slot_id=identity.slot_id,
            display_name=identity.display_name,
            champion=identity.champion_id,
            team_id=identity.team_id,
        )


ENVIRONMENT_IDENTITY = DisplayIdentity(
    slot_id=0,
    display_name="Executed",
    champion="_Environment",
    team_id=None,
    is_placeholder=True,
)

UNKNOWN_IDENTITY = DisplayIdentity(
    slot_id=0,
    display_name="Unknown",
    champion="_Unknown",
    team_id=None,
    is_placeholder=True,
)
