# dsm_elements/kernel/releases.py
"""End-release conditions for frame elements."""

from enum import Enum
from typing import Union


class Release(Enum):
    """Moment release at the two ends of a frame element."""
    FIXED_FIXED = "fixed_fixed"     # Full moment transfer at both ends
    HINGE_START = "hinge_start"     # Pinned at node i
    HINGE_END = "hinge_end"         # Pinned at node j
    HINGE_HINGE = "hinge_hinge"     # Pinned at both ends (axial only)

    @classmethod
    def from_ends(cls, start_hinged: bool, end_hinged: bool) -> "Release":
        """Pick the release from per-end hinge flags."""
        if start_hinged and end_hinged:
            return cls.HINGE_HINGE
        if start_hinged:
            return cls.HINGE_START
        if end_hinged:
            return cls.HINGE_END
        return cls.FIXED_FIXED

    @classmethod
    def coerce(cls, value: Union["Release", str]) -> "Release":
        """Accept a Release member or its string value ('hinge_start', ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown release '{value}'. Expected one of: {valid}") from None

    @property
    def start_hinged(self) -> bool:
        return self in (Release.HINGE_START, Release.HINGE_HINGE)

    @property
    def end_hinged(self) -> bool:
        return self in (Release.HINGE_END, Release.HINGE_HINGE)
