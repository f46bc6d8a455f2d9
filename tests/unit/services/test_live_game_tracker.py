import pytest

from src.contracts import MultiKillType
from src.core.errors import StalePollError
from src.core.scoring import PlayerScoreInput
from src.core.services import LiveGameTracker


@pytest.fixture
def tracker() -> LiveGameTracker:
    return LiveGameTracker("NA1_1234", poll_interval_seconds=15)


def _roster(kills_for_alpha: int) -> list[PlayerScoreInput]:
    return [
        PlayerScoreInput(kills=kills_for_alpha, player_key="Alpha"),
        PlayerScoreInput(kills=2, player_key="Bravo"),
    ]


def test_sequence_numbers_increase(tracker: LiveGameTracker) -> None:
    assert [tracker.begin_poll() for _ in range(3)] == [1, 2, 3]


def test_in_order_polls_commit(tracker: LiveGameTracker, identities, kill) -> None:
    first = tracker.begin_poll()
    assert tracker.submit(first, [kill(0, 1, 6)], identities, _roster(1))

    second = tracker.begin_poll()
    assert tracker.submit(second, [kill(0, 1, 6), kill(4000, 1, 7)], identities, _roster(2))

    assert tracker.committed_sequence == second
    assert tracker.latest.kill_feed[1].multi_kill == MultiKillType.DOUBLE


def test_late_response_is_discarded(tracker: LiveGameTracker, identities, kill) -> None:
    older = tracker.begin_poll()
    newer = tracker.begin_poll()

    assert tracker.submit(newer, [kill(0, 1, 6), kill(3000, 2, 7)], identities, _roster(5))
    assert not tracker.submit(older, [kill(0, 1, 6)], identities, _roster(0))

    assert len(tracker.latest.kill_feed) == 2
    assert tracker.latest.mvp.player_key == "Alpha"


def test_require_current_raises_for_stale_poll(tracker: LiveGameTracker, identities) -> None:
    older = tracker.begin_poll()
    newer = tracker.begin_poll()
    tracker.submit(newer, [], identities, [])

    with pytest.raises(StalePollError) as exc_info:
        tracker.require_current(older)
    assert exc_info.value.latest == newer


def test_each_submit_recomputes_from_full_snapshot(tracker: LiveGameTracker, identities, kill) -> None:
    events = [kill(0, 1, 6), kill(60_000, 1, 7), kill(120_000, 1, 8)]
    tracker.submit(tracker.begin_poll(), events, identities, _roster(3))
    first_feed = tracker.latest.kill_feed

    tracker.submit(tracker.begin_poll(), events, identities, _roster(3))

    assert tracker.latest.kill_feed == first_feed
    assert sum(e.first_blood for e in tracker.latest.kill_feed) == 1


def test_reset_invalidates_outstanding_polls(tracker: LiveGameTracker, identities) -> None:
    pending = tracker.begin_poll()
    tracker.reset()

    assert tracker.latest is None
    assert not tracker.submit(pending, [], identities, [])


def test_poll_interval_defaults_from_settings_but_keeps_explicit_values() -> None:
    assert LiveGameTracker("NA1_1").poll_interval_seconds == 15
    assert LiveGameTracker("NA1_2", poll_interval_seconds=0).poll_interval_seconds == 0
