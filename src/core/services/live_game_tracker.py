"""Last-write-wins bookkeeping for a polled in-progress game.

The engine is stateless and recomputes everything from each full snapshot.
What it cannot know is whether a result is still current: poll responses
can arrive out of order, so the caller stamps each poll with a sequence
number and only the newest result is kept.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Mapping, Sequence

from src.config.settings import get_settings
from src.contracts.events import RawKillEvent
from src.contracts.participants import ParticipantIdentity
from src.core.errors import StalePollError
from src.core.scoring import PlayerScoreInput
from src.core.services.match_report_service import MatchReport, build_match_report

logger = logging.getLogger(__name__)


class LiveGameTracker:
    """Owns the poll sequence for one live game and the latest committed report.

    Not thread-safe; one tracker belongs to one polling loop.
    """

    def __init__(self, game_id: str, *, poll_interval_seconds: int | None = None) -> None:
        self.game_id = game_id
        if poll_interval_seconds is None:
            poll_interval_seconds = get_settings().live_poll_interval_seconds
        self.poll_interval_seconds = poll_interval_seconds
        self._sequence = itertools.count(1)
        self._issued = 0
        self._committed = 0
        self._latest: MatchReport | None = None

    @property
    def latest(self) -> MatchReport | None:
        return self._latest

    @property
    def committed_sequence(self) -> int:
        return self._committed

    def begin_poll(self) -> int:
        """Issue the sequence number for a new poll request."""
        self._issued = next(self._sequence)
        return self._issued

    def is_current(self, sequence: int) -> bool:
        return sequence > self._committed

    def require_current(self, sequence: int) -> None:
        if not self.is_current(sequence):
            raise StalePollError(sequence, self._committed)

    def submit(
        self,
        sequence: int,
        events: Sequence[RawKillEvent],
        identities: Mapping[int, ParticipantIdentity] | None,
        roster: Sequence[PlayerScoreInput],
    ) -> bool:
        """Recompute from a full snapshot and commit it unless a newer poll already won.

        Returns:
            True when the report was committed, False when it was discarded as stale
        """
        if not self.is_current(sequence):
            logger.info(
                "discarding stale poll %d for game %s (committed %d)",
                sequence,
                self.game_id,
                self._committed,
            )
            return False

        report = build_match_report(events, identities, roster)
        self._latest = report
        self._committed = sequence
        return True

    def reset(self) -> None:
        """Forget the committed report, e.g. when the game ends."""
        self._latest = None
        self._committed = self._issued
