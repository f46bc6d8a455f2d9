"""Helpers over a classified kill feed: stable row keys and team totals."""

from collections import Counter
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from src.contracts.common import TeamId
from src.contracts.events import ClassifiedKillEvent


class KillFeedSummary(BaseModel):
    """Scoreboard header numbers derived from a classified feed."""

    model_config = ConfigDict(frozen=True)

    team_kills: dict[TeamId, int] = Field(default_factory=dict)
    execute_count: int = 0
    unattributed_count: int = Field(0, description="Player kills whose killer team is unknown")
    first_blood_index: int | None = None


def _base_key(event: ClassifiedKillEvent) -> str:
    return "|".join(
        [
            str(event.timestamp),
            event.killer.display_name,
            event.victim.display_name,
            event.killer.champion,
            event.victim.champion,
            ",".join(a.display_name for a in event.assisters),
        ]
    )


def build_kill_event_keys(events: Sequence[ClassifiedKillEvent]) -> list[str]:
    """One stable key per row; repeated identical rows get an occurrence suffix."""
    seen: Counter[str] = Counter()
    keys: list[str] = []
    for event in events:
        base = _base_key(event)
        seen[base] += 1
        keys.append(f"{base}|{seen[base]}")
    return keys


def summarize_kill_feed(events: Sequence[ClassifiedKillEvent]) -> KillFeedSummary:
    team_kills = {team: 0 for team in TeamId}
    execute_count = 0
    unattributed = 0
    first_blood_index: int | None = None

    for index, event in enumerate(events):
        if event.first_blood and first_blood_index is None:
            first_blood_index = index
        if event.execute:
            execute_count += 1
        elif event.killer_team_id is None:
            unattributed += 1
        else:
            team_kills[TeamId(event.killer_team_id)] += 1

    return KillFeedSummary(
        team_kills=team_kills,
        execute_count=execute_count,
        unattributed_count=unattributed,
        first_blood_index=first_blood_index,
    )
