"""Kill-feed classification: a single forward scan over time-ordered kills.

Per-match state threaded through the scan, all keyed by participant slot id:

- ``had_first_blood``: flips on the first non-execute kill and never again
- ``last_kill_time_by_slot`` / ``multi_kill_chain_by_slot``: multi-kill window
- ``kill_streak_by_slot``: kills since the player's own last death

Multi-kill and kill-streak labels each come from one of two algorithms: the
length the source reported, or the counter derived during the scan. A
reported length leaves the killer's chain and streak counters untouched; only
the last kill time is recorded on every player kill.

No event's classification depends on a later event. Input is assumed sorted
by timestamp; unsorted input is classified without raising, but the labels
are then meaningless.
"""

import logging
from collections import defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from src.config.settings import get_settings
from src.contracts.events import (
    ClassifiedKillEvent,
    KillStreakType,
    LengthSource,
    MultiKillType,
    RawKillEvent,
)
from src.contracts.participants import ParticipantIdentity
from src.core.observability import trace_performance
from src.core.timeline.normalizer import TimelineNormalizer
from src.core.utils.clamp import label_for_length

logger = logging.getLogger(__name__)

MULTI_KILL_WINDOW_MS = 10_000

MULTI_KILL_LABELS: dict[int, MultiKillType] = {
    2: MultiKillType.DOUBLE,
    3: MultiKillType.TRIPLE,
    4: MultiKillType.QUADRA,
    5: MultiKillType.PENTA,
}

KILL_STREAK_LABELS: dict[int, KillStreakType] = {
    3: KillStreakType.SPREE,
    4: KillStreakType.RAMPAGE,
    5: KillStreakType.UNSTOPPABLE,
    6: KillStreakType.GODLIKE,
    7: KillStreakType.LEGENDARY,
}

# Reported lengths below these are treated as "not reported"
MIN_REPORTED_MULTI_KILL = 2
MIN_REPORTED_KILL_STREAK = 3


def multi_kill_from_length(length: int) -> MultiKillType:
    """2 double, 3 triple, 4 quadra, 5 or more penta, otherwise none."""
    return label_for_length(length, MULTI_KILL_LABELS, MultiKillType.NONE)


def kill_streak_from_length(length: int) -> KillStreakType:
    """3 spree up to 7 or more legendary, otherwise none."""
    return label_for_length(length, KILL_STREAK_LABELS, KillStreakType.NONE)


def choose_multi_kill(reported: int, derived: int) -> tuple[MultiKillType, LengthSource]:
    if reported >= MIN_REPORTED_MULTI_KILL:
        return multi_kill_from_length(reported), LengthSource.REPORTED
    return multi_kill_from_length(derived), LengthSource.DERIVED


def choose_kill_streak(reported: int, derived: int) -> tuple[KillStreakType, LengthSource]:
    if reported >= MIN_REPORTED_KILL_STREAK:
        return kill_streak_from_length(reported), LengthSource.REPORTED
    return kill_streak_from_length(derived), LengthSource.DERIVED


@dataclass
class _ScanState:
    """Mutable bookkeeping for one scan; never outlives a ``classify`` call."""

    had_first_blood: bool = False
    last_kill_time_by_slot: dict[int, int] = field(default_factory=dict)
    multi_kill_chain_by_slot: dict[int, int] = field(default_factory=dict)
    kill_streak_by_slot: dict[int, int] = field(default_factory=dict)
    label_counts: defaultdict[tuple[int, str], int] = field(
        default_factory=lambda: defaultdict(int)
    )

    def advance_chain(self, slot: int, timestamp: int, window_ms: int) -> int:
        last = self.last_kill_time_by_slot.get(slot)
        if last is not None and timestamp - last < window_ms:
            chain = self.multi_kill_chain_by_slot.get(slot, 0) + 1
        else:
            chain = 1
        self.multi_kill_chain_by_slot[slot] = chain
        return chain

    def record_kill_time(self, slot: int, timestamp: int) -> None:
        self.last_kill_time_by_slot[slot] = timestamp

    def advance_streak(self, slot: int) -> int:
        streak = self.kill_streak_by_slot.get(slot, 0) + 1
        self.kill_streak_by_slot[slot] = streak
        return streak

    def reset_streak(self, slot: int) -> None:
        self.kill_streak_by_slot[slot] = 0

    def count_label(self, slot: int, label: str) -> int:
        self.label_counts[(slot, label)] += 1
        return self.label_counts[(slot, label)]


class KillClassifier:
    """Annotate kills with first blood, multi-kill, streak, shutdown and execute."""

    def __init__(
        self,
        normalizer: TimelineNormalizer,
        multi_kill_window_ms: int = MULTI_KILL_WINDOW_MS,
    ) -> None:
        self._normalizer = normalizer
        self._window_ms = multi_kill_window_ms

    def classify(self, events: Sequence[RawKillEvent]) -> list[ClassifiedKillEvent]:
        """Return one classified event per input event, in input order."""
        state = _ScanState()
        classified: list[ClassifiedKillEvent] = []
        previous_timestamp: int | None = None
        warned_unsorted = False

        for event in events:
            if (
                previous_timestamp is not None
                and event.timestamp < previous_timestamp
                and not warned_unsorted
            ):
                logger.warning(
                    "kill events out of order at %d ms (previous %d ms); labels are unreliable",
                    event.timestamp,
                    previous_timestamp,
                )
                warned_unsorted = True
            previous_timestamp = event.timestamp
            classified.append(self._classify_event(event, state))

        return classified

    def _classify_event(self, event: RawKillEvent, state: _ScanState) -> ClassifiedKillEvent:
        killer_slot = event.killer_id
        victim_slot = event.victim_id
        execute = event.is_execute

        multi_kill = MultiKillType.NONE
        kill_streak = KillStreakType.NONE
        multi_kill_source: LengthSource | None = None
        kill_streak_source: LengthSource | None = None
        multi_kill_count = 0
        kill_streak_count = 0
        first_blood = False

        if not execute:
            chain = 0
            if event.multi_kill_length < MIN_REPORTED_MULTI_KILL:
                chain = state.advance_chain(killer_slot, event.timestamp, self._window_ms)
            state.record_kill_time(killer_slot, event.timestamp)
            multi_kill, multi_kill_source = choose_multi_kill(event.multi_kill_length, chain)

            streak = 0
            if event.kill_streak_length < MIN_REPORTED_KILL_STREAK:
                streak = state.advance_streak(killer_slot)
            kill_streak, kill_streak_source = choose_kill_streak(event.kill_streak_length, streak)

            if not state.had_first_blood:
                first_blood = True
                state.had_first_blood = True

            if multi_kill != MultiKillType.NONE:
                multi_kill_count = state.count_label(killer_slot, multi_kill.value)
            if kill_streak != KillStreakType.NONE:
                kill_streak_count = state.count_label(killer_slot, kill_streak.value)

        # The victim dies whoever the killer was
        if victim_slot != 0:
            state.reset_streak(victim_slot)

        return ClassifiedKillEvent(
            timestamp=event.timestamp,
            killer=self._normalizer.resolve(killer_slot),
            victim=self._normalizer.resolve(victim_slot),
            assisters=self._normalizer.resolve_assisters(event.assisting_participant_ids),
            killer_team_id=self._normalizer.team_of(killer_slot),
            victim_team_id=self._normalizer.team_of(victim_slot),
            first_blood=first_blood,
            multi_kill=multi_kill,
            kill_streak=kill_streak,
            shutdown=event.shutdown_bounty > 0,
            execute=execute,
            ace=event.ace,
            multi_kill_count=multi_kill_count,
            kill_streak_count=kill_streak_count,
            multi_kill_source=multi_kill_source,
            kill_streak_source=kill_streak_source,
        )


@trace_performance
def classify_kill_feed(
    events: Sequence[RawKillEvent],
    identities: Mapping[int, ParticipantIdentity] | None = None,
    *,
    multi_kill_window_ms: int | None = None,
) -> list[ClassifiedKillEvent]:
    """Classify a full kill list against a (possibly partial) identity map.

    The window defaults to ``MULTI_KILL_WINDOW_MS`` from settings.
    """
    window = multi_kill_window_ms
    if window is None:
        window = get_settings().multi_kill_window_ms
    classifier = KillClassifier(TimelineNormalizer(identities), multi_kill_window_ms=window)
    return classifier.classify(events)
