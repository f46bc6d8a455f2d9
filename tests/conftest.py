"""Pytest configuration and shared fixtures for the kill-feed engine tests.

Import resolution comes from pyproject.toml (``pythonpath = ["."]``), so the
``src`` package is importable with or without an editable install.
"""

import pytest

from src.contracts import ParticipantIdentity, RawKillEvent, TeamId


def make_kill(
    timestamp: int,
    killer_id: int,
    victim_id: int,
    *,
    assisters: list[int] | None = None,
    shutdown_bounty: int = 0,
    multi_kill_length: int = 0,
    kill_streak_length: int = 0,
    ace: bool = False,
) -> RawKillEvent:
    return RawKillEvent(
        timestamp=timestamp,
        killer_id=killer_id,
        victim_id=victim_id,
        assisting_participant_ids=assisters or [],
        bounty=300,
        shutdown_bounty=shutdown_bounty,
        multi_kill_length=multi_kill_length,
        kill_streak_length=kill_streak_length,
        ace=ace,
    )


_CHAMPIONS = [
    "Garen", "LeeSin", "Ahri", "Jinx", "Thresh",
    "Darius", "Vi", "Zed", "Caitlyn", "Leona",
]  # fmt: skip


@pytest.fixture
def identities() -> dict[int, ParticipantIdentity]:
    """Full 5v5 identity map: slots 1-5 blue, 6-10 red."""
    return {
        slot: ParticipantIdentity(
            slot_id=slot,
            puuid=f"puuid-{slot}",
            champion_id=_CHAMPIONS[slot - 1],
            team_id=TeamId.BLUE if slot <= 5 else TeamId.RED,
            summoner_name=f"Player{slot}",
        )
        for slot in range(1, 11)
    }


@pytest.fixture
def kill():
    """Factory for ``RawKillEvent`` with sensible defaults."""
    return make_kill
