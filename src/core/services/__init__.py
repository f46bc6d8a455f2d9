"""Caller-side services built on the pure engine.

``build_match_report`` serves one-shot completed-match requests;
``LiveGameTracker`` adds last-write-wins sequencing for polled live games.
"""

from src.core.services.live_game_tracker import LiveGameTracker
from src.core.services.match_report_service import MatchReport, build_match_report

__all__ = [
    "LiveGameTracker",
    "MatchReport",
    "build_match_report",
]
