"""Aggregate body-fat change estimate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from hormones import HORMONE_NAMES, HormoneReading

from .constants import (
    BODY_FAT_BOUNDS,
    DEFAULT_BASELINE_PERCENT,
    IMPACT_COEFFICIENTS,
    IMPACT_DECIMALS,
    IMPACT_SCALE,
    MONTHLY_DELTA_LIMIT,
)
from .rounding import round_half_up


@dataclass(frozen=True)
class ImpactResult:
    """Monthly percentage-point change and the resulting total body fat."""

    delta_percent: float
    new_body_fat: float

    def as_dict(self) -> dict[str, float]:
        return {"deltaPercent": self.delta_percent, "newBodyFat": self.new_body_fat}


def compute_body_fat_impact(
    hormones: HormoneReading | Mapping[str, Any],
    baseline_percent: float = DEFAULT_BASELINE_PERCENT,
) -> ImpactResult:
    """Estimate the monthly body-fat shift for a hormone profile.

    The change is clamped to +/-6 points and the new total to 1-60%, so an
    out-of-range baseline is pulled back rather than rejected.
    """
    normalized = HormoneReading.coerce(hormones).normalized()
    weighted = sum(normalized[name] * IMPACT_COEFFICIENTS[name] for name in HORMONE_NAMES)
    delta = max(-MONTHLY_DELTA_LIMIT, min(MONTHLY_DELTA_LIMIT, weighted * IMPACT_SCALE))
    low, high = BODY_FAT_BOUNDS
    new_body_fat = max(low, min(high, float(baseline_percent) + delta))
    return ImpactResult(
        delta_percent=round_half_up(delta, IMPACT_DECIMALS),
        new_body_fat=round_half_up(new_body_fat, IMPACT_DECIMALS),
    )


__all__ = ["ImpactResult", "compute_body_fat_impact"]
