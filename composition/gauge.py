"""Per-region gauges placing a distribution inside its attainable range."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from hormones import HORMONE_NAMES, HormoneReading

from .constants import OUTPUT_REGIONS
from .distribution import (
    CLAMPED_POLICY,
    DistributionResult,
    Gender,
    SensitivityPolicy,
    compute_distribution,
    neutral_distribution,
)

_FLOOR_READING = HormoneReading(**{name: 0.0 for name in HORMONE_NAMES})
_CEILING_READING = HormoneReading(**{name: 100.0 for name in HORMONE_NAMES})


@dataclass(frozen=True)
class RegionGauge:
    """Where one region's share sits between its extremes."""

    value: float
    baseline: float
    low: float
    high: float
    fill: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def region_ranges(
    gender: Gender | str | None = Gender.MALE,
    *,
    policy: SensitivityPolicy = CLAMPED_POLICY,
) -> dict[str, tuple[float, float]]:
    """Region shares with every hormone at 0 and at 100, ordered low to high."""
    floor = compute_distribution(_FLOOR_READING, gender, policy=policy).distribution
    ceiling = compute_distribution(_CEILING_READING, gender, policy=policy).distribution
    return {
        region: (min(floor[region], ceiling[region]), max(floor[region], ceiling[region]))
        for region in OUTPUT_REGIONS
    }


def fill_fraction(value: float, baseline: float, low: float, high: float) -> float:
    """Two-sided mapping that pins the neutral share at 0.5."""
    if value > baseline:
        upper_range = (high - baseline) or 1.0
        fill = 0.5 + 0.5 * ((value - baseline) / upper_range)
    elif value < baseline:
        lower_range = (baseline - low) or 1.0
        fill = 0.25 + 0.25 * ((value - low) / lower_range)
    else:
        fill = 0.5
    return min(1.0, max(0.0, fill))


def build_gauges(
    hormones: HormoneReading | Mapping[str, Any],
    gender: Gender | str | None = Gender.MALE,
    *,
    policy: SensitivityPolicy = CLAMPED_POLICY,
    result: DistributionResult | None = None,
) -> dict[str, RegionGauge]:
    if result is None:
        result = compute_distribution(hormones, gender, policy=policy)
    baseline = neutral_distribution(gender, policy=policy)
    ranges = region_ranges(gender, policy=policy)
    gauges: dict[str, RegionGauge] = {}
    for region in OUTPUT_REGIONS:
        low, high = ranges[region]
        value = result.distribution[region]
        gauges[region] = RegionGauge(
            value=value,
            baseline=baseline[region],
            low=low,
            high=high,
            fill=fill_fraction(value, baseline[region], low, high),
        )
    return gauges


def compare_archetypes(
    hormones: HormoneReading | Mapping[str, Any],
    *,
    policy: SensitivityPolicy = CLAMPED_POLICY,
) -> dict[str, dict[str, Any]]:
    """Evaluate one hormone profile against both archetypes side by side."""
    reading = HormoneReading.coerce(hormones)
    comparison: dict[str, dict[str, Any]] = {}
    for gender in Gender:
        result = compute_distribution(reading, gender, policy=policy)
        gauges = build_gauges(reading, gender, policy=policy, result=result)
        payload = result.as_dict()
        payload["gauges"] = {region: gauge.as_dict() for region, gauge in gauges.items()}
        comparison[gender.value] = payload
    return comparison


__all__ = ["RegionGauge", "build_gauges", "compare_archetypes", "fill_fraction", "region_ranges"]
