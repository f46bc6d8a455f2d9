"""
Common data types and base models for the kill-feed engine.
All models use Pydantic V2 with strict type checking.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TeamId(int, Enum):
    """Summoner's Rift team identifiers."""

    BLUE = 100  # ORDER
    RED = 200  # CHAOS

    @classmethod
    def from_side(cls, side: str | int | None) -> "TeamId | None":
        """Map Match-V5 ids (100/200) and live-client sides (ORDER/CHAOS)."""
        if side is None:
            return None
        if isinstance(side, int):
            try:
                return cls(side)
            except ValueError:
                return None
        normalized = side.strip().upper()
        if normalized in ("ORDER", "BLUE", "100"):
            return cls.BLUE
        if normalized in ("CHAOS", "RED", "200"):
            return cls.RED
        return None


class BaseContract(BaseModel):
    """Base model for all data contracts with common configuration."""

    model_config = ConfigDict(
        # Validate data on assignment
        validate_assignment=True,
        # Forbid extra fields to ensure data integrity
        extra="forbid",
    )


class FrozenContract(BaseContract):
    """Immutable contract for engine outputs and per-match identities."""

    model_config = ConfigDict(frozen=True, extra="forbid")
