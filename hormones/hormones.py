"""Hormone readings and the signed unit normalizer."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

NEUTRAL_LEVEL = 50.0
HORMONE_NAMES: Sequence[str] = ("insulin", "cortisol", "testosterone", "estrogen")


def normalize(raw: float) -> float:
    """Map a 0-100 level onto -1..+1 around the neutral point.

    Out-of-range levels are not rejected; they simply land outside -1..+1.
    """
    return (float(raw) - NEUTRAL_LEVEL) / NEUTRAL_LEVEL


def _read_level(mapping: Mapping[str, Any], name: str) -> float:
    value = mapping.get(name)
    # Only an absent key (or None) means neutral; 0 is a real low reading.
    if value is None:
        return NEUTRAL_LEVEL
    if isinstance(value, bool):
        raise ValueError(f"Hormone '{name}' must be numeric, got a boolean.")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Hormone '{name}' must be numeric, got {value!r}.") from exc


@dataclass(slots=True, frozen=True)
class HormoneReading:
    """Snapshot of the four modelled hormone levels on the 0-100 scale."""

    insulin: float = NEUTRAL_LEVEL
    cortisol: float = NEUTRAL_LEVEL
    testosterone: float = NEUTRAL_LEVEL
    estrogen: float = NEUTRAL_LEVEL

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HormoneReading":
        """Build a reading, defaulting absent hormones to neutral."""
        return cls(**{name: _read_level(mapping, name) for name in HORMONE_NAMES})

    @classmethod
    def neutral(cls) -> "HormoneReading":
        return cls()

    @classmethod
    def coerce(cls, value: "HormoneReading | Mapping[str, Any]") -> "HormoneReading":
        if isinstance(value, HormoneReading):
            return value
        return cls.from_mapping(value)

    def as_dict(self) -> dict[str, float]:
        """Expose the levels as a serializable dictionary."""
        return {
            "insulin": self.insulin,
            "cortisol": self.cortisol,
            "testosterone": self.testosterone,
            "estrogen": self.estrogen,
        }

    def normalized(self) -> dict[str, float]:
        """Return every hormone as a signed unit value."""
        return {name: normalize(level) for name, level in self.as_dict().items()}


def random_reading(rng: random.Random | None = None, *, low: int = 30, high: int = 70) -> HormoneReading:
    """Draw an integer level in [low, high) for every hormone."""
    if high <= low:
        raise ValueError(f"Random range is empty: low={low}, high={high}.")
    generator = rng or random.Random()
    return HormoneReading(
        **{name: float(generator.randrange(low, high)) for name in HORMONE_NAMES}
    )


__all__ = ["HORMONE_NAMES", "NEUTRAL_LEVEL", "HormoneReading", "normalize", "random_reading"]
