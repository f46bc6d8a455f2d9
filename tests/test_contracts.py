"""
Test file to validate the Pydantic V2 engine contracts.
"""

import pytest
from pydantic import ValidationError

from src.contracts import (
    ClassifiedKillEvent,
    DisplayIdentity,
    ParticipantIdentity,
    RawKillEvent,
    TeamId,
    UNKNOWN_IDENTITY,
)


def test_raw_kill_event() -> None:
    """Test RawKillEvent model."""
    event = RawKillEvent(
        timestamp=120000,
        killer_id=1,
        victim_id=6,
        assisting_participant_ids=[2, 3],
        bounty=300,
        shutdown_bounty=500,
        kill_streak_length=3,
    )
    assert event.killer_id == 1
    assert event.victim_id == 6
    assert event.multi_kill_length == 0
    assert len(event.assisting_participant_ids) == 2
    assert not event.is_execute


def test_raw_kill_event_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        RawKillEvent(timestamp=0, killer_id=1, victim_id=6, position={"x": 1, "y": 2})


def test_raw_kill_event_rejects_negative_killer() -> None:
    with pytest.raises(ValidationError):
        RawKillEvent(timestamp=0, killer_id=-1, victim_id=6)


def test_participant_identity_is_frozen() -> None:
    identity = ParticipantIdentity(
        slot_id=1, puuid="p", champion_id="Garen", team_id=TeamId.BLUE
    )
    assert identity.display_name == "Garen"

    with pytest.raises(ValidationError):
        identity.slot_id = 2  # type: ignore


def test_participant_from_live_player_requires_known_side() -> None:
    with pytest.raises(ValueError):
        ParticipantIdentity.from_live_player(1, {"championName": "Ahri", "team": "???"})


@pytest.mark.parametrize(
    ("side", "expected"),
    [
        ("ORDER", TeamId.BLUE),
        ("chaos", TeamId.RED),
        (100, TeamId.BLUE),
        (200, TeamId.RED),
        (300, None),
        (None, None),
    ],
)
def test_team_id_from_side(side, expected) -> None:
    assert TeamId.from_side(side) is expected


def test_classified_event_defaults() -> None:
    killer = DisplayIdentity(slot_id=1, display_name="A", champion="Garen", team_id=TeamId.BLUE)
    event = ClassifiedKillEvent(timestamp=0, killer=killer, victim=UNKNOWN_IDENTITY)

    assert event.multi_kill == "none"
    assert event.kill_streak == "none"
    assert event.first_blood is False
    assert event.multi_kill_count == 0

    with pytest.raises(ValidationError):
        event.first_blood = True  # type: ignore
