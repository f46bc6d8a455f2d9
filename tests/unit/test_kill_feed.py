"""Tests for kill-feed row keys and team totals."""

from src.contracts import TeamId
from src.core.timeline import build_kill_event_keys, classify_kill_feed, summarize_kill_feed


def test_keys_are_unique_for_identical_rows(identities, kill) -> None:
    feed = classify_kill_feed([kill(1000, 1, 6), kill(1000, 1, 6), kill(2000, 2, 7)], identities)
    keys = build_kill_event_keys(feed)

    assert len(set(keys)) == 3
    assert keys[0].endswith("|1")
    assert keys[1].endswith("|2")
    assert keys[0].startswith("1000|Player1|Player6|Garen|Darius|")


def test_keys_are_stable_across_calls(identities, kill) -> None:
    events = [kill(1000, 1, 6, assisters=[2, 3]), kill(5000, 0, 4)]

    assert build_kill_event_keys(classify_kill_feed(events, identities)) == build_kill_event_keys(
        classify_kill_feed(events, identities)
    )


def test_summary_counts_team_kills_and_executes(identities, kill) -> None:
    events = [kill(500, 0, 2), kill(1000, 1, 6), kill(2000, 7, 3), kill(3000, 8, 4), kill(4000, 99, 5)]
    summary = summarize_kill_feed(classify_kill_feed(events, identities))

    assert summary.team_kills == {TeamId.BLUE: 1, TeamId.RED: 2}
    assert summary.execute_count == 1
    assert summary.unattributed_count == 1
    assert summary.first_blood_index == 1


def test_summary_of_empty_feed() -> None:
    summary = summarize_kill_feed([])

    assert summary.team_kills == {TeamId.BLUE: 0, TeamId.RED: 0}
    assert summary.first_blood_index is None
