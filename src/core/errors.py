"""Engine exceptions.

Classification and scoring degrade instead of raising; these cover the
caller-side live polling contract only.
"""


class EngineError(Exception):
    """Base exception for kill-feed engine failures."""

    pass


class StalePollError(EngineError):
    """Raised when a poll result is older than one already committed."""

    def __init__(self, sequence: int, latest: int) -> None:
        super().__init__(f"poll {sequence} superseded by poll {latest}")
        self.sequence = sequence
        self.latest = latest
