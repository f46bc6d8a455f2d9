from src.contracts import KillStreakType, TeamId
from src.core.scoring import PlayerScoreInput
from src.core.services import build_match_report


def test_completed_match_report(identities, kill) -> None:
    events = [
        kill(0, 0, 3),
        kill(60_000, 1, 6),
        kill(65_000, 1, 7),
        kill(130_000, 1, 8, shutdown_bounty=150),
        kill(200_000, 9, 2),
    ]
    roster = [
        PlayerScoreInput(kills=3, deaths=0, assists=1, creep_score=120, player_key="Player1", team_id=TeamId.BLUE),
        PlayerScoreInput(kills=0, deaths=1, assists=2, creep_score=20, player_key="Player2", team_id=TeamId.BLUE),
        PlayerScoreInput(kills=1, deaths=1, assists=0, creep_score=150, player_key="Player9", team_id=TeamId.RED),
        PlayerScoreInput(kills=0, deaths=1, assists=0, creep_score=90, player_key="Player6", team_id=TeamId.RED),
    ]
    report = build_match_report(events, identities, roster)

    assert len(report.kill_feed) == len(events)
    assert len(report.kill_feed_keys) == len(events)
    assert report.summary.first_blood_index == 1
    assert report.summary.team_kills == {TeamId.BLUE: 3, TeamId.RED: 1}
    assert report.kill_feed[3].kill_streak == KillStreakType.SPREE
    assert report.kill_feed[3].shutdown is True

    assert report.mvp.player_key == "Player1"
    assert [e.player_key for e in report.team_placements[TeamId.RED]] == ["Player9", "Player6"]
    assert report.placement_for("Player2").rank == 3
    assert report.placement_for("nobody") is None


def test_empty_snapshot_report() -> None:
    report = build_match_report([], {}, [])

    assert report.kill_feed == []
    assert report.placements == []
    assert report.mvp is None
    assert report.team_placements == {}
    assert report.summary.first_blood_index is None
