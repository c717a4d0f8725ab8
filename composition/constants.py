"""Centralized constant tables for the body-composition model."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

BASE_REGIONS: Tuple[str, ...] = ("abdomen", "hips", "thighs", "arms", "chest")
OUTPUT_REGIONS: Tuple[str, ...] = ("arms", "shoulders", "chest", "abdomen", "hips", "thighs")

# Relative fat weights at neutral hormone levels, per archetype.
BASE_DISTRIBUTIONS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "male": MappingProxyType({"abdomen": 40.0, "hips": 10.0, "thighs": 15.0, "arms": 15.0, "chest": 20.0}),
        "female": MappingProxyType({"abdomen": 20.0, "hips": 32.0, "thighs": 28.0, "arms": 10.0, "chest": 10.0}),
    }
)

# Signed pull of each hormone on each base region.
REGION_EFFECTS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "abdomen": MappingProxyType({"insulin": 1.3, "cortisol": 1.0, "testosterone": -0.7, "estrogen": -0.2}),
        "hips": MappingProxyType({"insulin": -0.2, "cortisol": -0.25, "testosterone": -0.4, "estrogen": 0.9}),
        "thighs": MappingProxyType({"insulin": -0.2, "cortisol": -0.2, "testosterone": -0.35, "estrogen": 0.8}),
        "arms": MappingProxyType({"insulin": -0.1, "cortisol": 0.1, "testosterone": 0.0, "estrogen": 0.0}),
        "chest": MappingProxyType({"insulin": 0.35, "cortisol": 0.2, "testosterone": -0.25, "estrogen": 0.0}),
    }
)

WEIGHT_FLOOR = 0.1
DISTRIBUTION_DECIMALS = 1

IMPACT_COEFFICIENTS: Mapping[str, float] = MappingProxyType(
    {"insulin": 1.0, "cortisol": 0.6, "testosterone": -0.7, "estrogen": 0.1}
)
IMPACT_SCALE = 1.8
MONTHLY_DELTA_LIMIT = 6.0
BODY_FAT_BOUNDS: Tuple[float, float] = (1.0, 60.0)
DEFAULT_BASELINE_PERCENT = 25.0
IMPACT_DECIMALS = 2

__all__ = [
    "BASE_DISTRIBUTIONS",
    "BASE_REGIONS",
    "BODY_FAT_BOUNDS",
    "DEFAULT_BASELINE_PERCENT",
    "DISTRIBUTION_DECIMALS",
    "IMPACT_COEFFICIENTS",
    "IMPACT_DECIMALS",
    "IMPACT_SCALE",
    "MONTHLY_DELTA_LIMIT",
    "OUTPUT_REGIONS",
    "REGION_EFFECTS",
    "WEIGHT_FLOOR",
]
