"""Participant slot resolution for kill events.

Slot 0 is always the environment (turret, minion, monster). Any other slot
missing from the identity map resolves to the unknown placeholder; this is
expected for live games whose spectator data has not populated every
participant yet.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from src.contracts.common import TeamId
from src.contracts.events import EventType, RawKillEvent
from src.contracts.participants import (
    ENVIRONMENT_IDENTITY,
    UNKNOWN_IDENTITY,
    DisplayIdentity,
    ParticipantIdentity,
)

logger = logging.getLogger(__name__)


class TimelineNormalizer:
    """Resolve slot ids to display identities. Never raises for unknown slots."""

    def __init__(self, identities: Mapping[int, ParticipantIdentity] | None = None) -> None:
        self._identities = dict(identities or {})
        self._display = {
            slot: DisplayIdentity.from_participant(identity)
            for slot, identity in self._identities.items()
        }

    def resolve(self, slot_id: int) -> DisplayIdentity:
        if slot_id == 0:
            return ENVIRONMENT_IDENTITY
        return self._display.get(slot_id, UNKNOWN_IDENTITY)

    def resolve_assisters(self, slot_ids: Iterable[int]) -> list[DisplayIdentity]:
        return [self.resolve(slot_id) for slot_id in slot_ids]

    def team_of(self, slot_id: int) -> TeamId | None:
        identity = self._identities.get(slot_id)
        return identity.team_id if identity else None

    def is_known(self, slot_id: int) -> bool:
        return slot_id in self._identities


def build_identity_map(participants: Iterable[dict[str, Any]]) -> dict[int, ParticipantIdentity]:
    """Identity map from Match-V5 ``info.participants``; malformed items are skipped."""
    identities: dict[int, ParticipantIdentity] = {}
    for participant in participants:
        try:
            identity = ParticipantIdentity.from_match_participant(participant)
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("skipping malformed match participant: %s", exc)
            continue
        identities[identity.slot_id] = identity
    return identities


def build_live_identity_map(players: Iterable[dict[str, Any]]) -> dict[int, ParticipantIdentity]:
    """Identity map from a live player list; slot ids are 1-based list positions."""
    identities: dict[int, ParticipantIdentity] = {}
    for slot_id, player in enumerate(players, start=1):
        try:
            identities[slot_id] = ParticipantIdentity.from_live_player(slot_id, player)
        except (TypeError, ValueError, ValidationError) as exc:
            logger.warning("skipping malformed live player in slot %d: %s", slot_id, exc)
    return identities


def extract_kill_events(timeline: dict[str, Any]) -> list[RawKillEvent]:
    """Collect ``CHAMPION_KILL`` events from a Match-V5 timeline, in source order.

    Match-V5 reports multi-kills as a separate ``CHAMPION_SPECIAL_KILL`` at the
    same timestamp; its ``multiKillLength`` is folded into the matching kill.
    """
    info = timeline.get("info") or {}
    frames: list[dict[str, Any]] = info.get("frames", []) or []

    raw_kills: list[dict[str, Any]] = []
    multi_kill_lengths: dict[tuple[int, int], int] = {}
    for frame in frames:
        for event in frame.get("events", []) or []:
            event_type = event.get("type")
            if event_type == EventType.CHAMPION_KILL.value:
                raw_kills.append(event)
            elif event_type == EventType.CHAMPION_SPECIAL_KILL.value:
                length = int(event.get("multiKillLength", 0) or 0)
                if length:
                    key = (int(event.get("timestamp", 0) or 0), int(event.get("killerId", 0) or 0))
                    multi_kill_lengths[key] = max(length, multi_kill_lengths.get(key, 0))

    kills: list[RawKillEvent] = []
    for event in raw_kills:
        try:
            kill = RawKillEvent.from_timeline_event(event)
        except (TypeError, ValueError, ValidationError) as exc:
            logger.warning("skipping malformed CHAMPION_KILL event: %s", exc)
            continue
        reported = multi_kill_lengths.get((kill.timestamp, kill.killer_id), 0)
        if reported and not kill.multi_kill_length:
            kill = kill.model_copy(update={"multi_kill_length": reported})
        kills.append(kill)
    return kills
