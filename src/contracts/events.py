"""
Kill event contracts.

``RawKillEvent`` is the decoded Match-V5 ``CHAMPION_KILL`` shape the engine
consumes; ``ClassifiedKillEvent`` is the annotated kill-feed row it emits.
"""

from enum import Enum
from typing import Any

from pydantic import Field

from .common import BaseContract, FrozenContract, TeamId
from .participants import DisplayIdentity


class EventType(str, Enum):
    """Timeline event types the engine reads."""

    CHAMPION_KILL = "CHAMPION_KILL"
    CHAMPION_SPECIAL_KILL = "CHAMPION_SPECIAL_KILL"


class MultiKillType(str, Enum):
    """Announcer multi-kill labels."""

    NONE = "none"
    DOUBLE = "double"
    TRIPLE = "triple"
    QUADRA = "quadra"
    PENTA = "penta"


class KillStreakType(str, Enum):
    """Announcer kill-streak labels."""

    NONE = "none"
    SPREE = "spree"
    RAMPAGE = "rampage"
    UNSTOPPABLE = "unstoppable"
    GODLIKE = "godlike"
    LEGENDARY = "legendary"


class LengthSource(str, Enum):
    """Which algorithm produced a multi-kill or kill-streak label."""

    REPORTED = "reported"  # taken from the source's multiKillLength / killStreakLength
    DERIVED = "derived"  # counted locally during the scan


class RawKillEvent(BaseContract):
    """Champion kill as reported by the match data source."""

    timestamp: int = Field(..., description="Game time in milliseconds")
    killer_id: int = Field(..., ge=0, description="0 for execute")
    victim_id: int = Field(..., ge=0)
    assisting_participant_ids: list[int] = Field(default_factory=list)
    bounty: int = Field(0, description="Base bounty gold")
    shutdown_bounty: int = Field(0, description="Shutdown bounty gold")
    multi_kill_length: int = Field(0, description="0 when the source did not report one")
    kill_streak_length: int = Field(0, description="0 when the source did not report one")
    ace: bool = Field(False, description="Supplied upstream; not derived by the engine")

    @property
    def is_execute(self) -> bool:
        return self.killer_id == 0

    @classmethod
    def from_timeline_event(cls, event: dict[str, Any]) -> "RawKillEvent":
        """Decode a Match-V5 timeline ``CHAMPION_KILL`` item (camelCase keys)."""
        return cls(
            timestamp=int(event.get("timestamp", 0) or 0),
            killer_id=int(event.get("killerId", 0) or 0),
            victim_id=int(event.get("victimId", 0) or 0),
            assisting_participant_ids=[
                int(pid) for pid in event.get("assistingParticipantIds", []) or []
            ],
            bounty=int(event.get("bounty", 0) or 0),
            shutdown_bounty=int(event.get("shutdownBounty", 0) or 0),
            multi_kill_length=int(event.get("multiKillLength", 0) or 0),
            kill_streak_length=int(event.get("killStreakLength", 0) or 0),
            ace=bool(event.get("ace", False)),
        )


class ClassifiedKillEvent(FrozenContract):
    """One annotated kill-feed row."""

    timestamp: int
    killer: DisplayIdentity
    victim: DisplayIdentity
    assisters: list[DisplayIdentity] = Field(default_factory=list)
    killer_team_id: TeamId | None = None
    victim_team_id: TeamId | None = None

    first_blood: bool = False
    multi_kill: MultiKillType = MultiKillType.NONE
    kill_streak: KillStreakType = KillStreakType.NONE
    shutdown: bool = False
    execute: bool = False
    ace: bool = False

    # Nth time this killer earned this exact label in the match (0 when unlabeled)
    multi_kill_count: int = Field(0, ge=0)
    kill_streak_count: int = Field(0, ge=0)
    multi_kill_source: LengthSource | None = None
    kill_streak_source: LengthSource | None = None
