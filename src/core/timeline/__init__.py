"""Kill-feed reconstruction: slot resolution and announcer-label classification."""

from src.core.timeline.classifier import (
    KillClassifier,
    choose_kill_streak,
    choose_multi_kill,
    classify_kill_feed,
    kill_streak_from_length,
    multi_kill_from_length,
)
from src.core.timeline.feed import KillFeedSummary, build_kill_event_keys, summarize_kill_feed
from src.core.timeline.normalizer import (
    TimelineNormalizer,
    build_identity_map,
    build_live_identity_map,
    extract_kill_events,
)

__all__ = [
    "TimelineNormalizer",
    "build_identity_map",
    "build_live_identity_map",
    "extract_kill_events",
    "KillClassifier",
    "classify_kill_feed",
    "choose_multi_kill",
    "choose_kill_streak",
    "multi_kill_from_length",
    "kill_streak_from_length",
    "KillFeedSummary",
    "build_kill_event_keys",
    "summarize_kill_feed",
]
