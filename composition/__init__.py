"""Body-composition model package exports."""

from .distribution import (
    CLAMPED_POLICY,
    LINEAR_POLICY,
    DistributionResult,
    Gender,
    SensitivityPolicy,
    available_policies,
    compute_distribution,
    neutral_distribution,
    resolve_policy,
)
from .gauge import RegionGauge, build_gauges, compare_archetypes, fill_fraction, region_ranges
from .impact import ImpactResult, compute_body_fat_impact

__all__ = [
    "CLAMPED_POLICY",
    "LINEAR_POLICY",
    "DistributionResult",
    "Gender",
    "ImpactResult",
    "RegionGauge",
    "SensitivityPolicy",
    "available_policies",
    "build_gauges",
    "compare_archetypes",
    "compute_body_fat_impact",
    "compute_distribution",
    "fill_fraction",
    "neutral_distribution",
    "region_ranges",
    "resolve_policy",
]
