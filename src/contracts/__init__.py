"""Contract models for data validation."""

from .common import BaseContract, FrozenContract, TeamId
from .events import (
    ClassifiedKillEvent,
    EventType,
    KillStreakType,
    LengthSource,
    MultiKillType,
    RawKillEvent,
)
from .participants import (
    ENVIRONMENT_IDENTITY,
    UNKNOWN_IDENTITY,
    DisplayIdentity,
    ParticipantIdentity,
)

__all__ = [
    "BaseContract",
    "FrozenContract",
    "TeamId",
    "EventType",
    "RawKillEvent",
    "ClassifiedKillEvent",
    "MultiKillType",
    "KillStreakType",
    "LengthSource",
    "ParticipantIdentity",
    "DisplayIdentity",
    "ENVIRONMENT_IDENTITY",
    "UNKNOWN_IDENTITY",
]
