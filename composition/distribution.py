"""Regional fat distribution driven by hormone levels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from hormones import HORMONE_NAMES, HormoneReading

from .constants import (
    BASE_DISTRIBUTIONS,
    BASE_REGIONS,
    DISTRIBUTION_DECIMALS,
    OUTPUT_REGIONS,
    REGION_EFFECTS,
    WEIGHT_FLOOR,
)
from .rounding import round_half_up


class Gender(str, Enum):
    """Baseline body-shape archetypes."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def resolve(cls, value: "Gender | str | None") -> "Gender":
        """Return the matching archetype, falling back to male."""
        if isinstance(value, Gender):
            return value
        key = str(value or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.MALE

    @property
    def base_distribution(self) -> Mapping[str, float]:
        return BASE_DISTRIBUTIONS[self.value]


@dataclass(frozen=True)
class SensitivityPolicy:
    """Turns a region's hormone offset into a multiplier around 1.0."""

    name: str
    scale: float
    lower: float | None = None
    upper: float | None = None

    def factor(self, offset: float) -> float:
        value = 1.0 + offset * self.scale
        if self.lower is not None:
            value = max(self.lower, value)
        if self.upper is not None:
            value = min(self.upper, value)
        return value


CLAMPED_POLICY = SensitivityPolicy(name="clamped", scale=0.35, lower=0.65, upper=1.35)
LINEAR_POLICY = SensitivityPolicy(name="linear", scale=0.12)
_POLICIES: dict[str, SensitivityPolicy] = {
    CLAMPED_POLICY.name: CLAMPED_POLICY,
    LINEAR_POLICY.name: LINEAR_POLICY,
}


def available_policies() -> tuple[str, ...]:
    return tuple(_POLICIES)


def resolve_policy(name: str | SensitivityPolicy | None) -> SensitivityPolicy:
    """Translate a policy name into a concrete sensitivity policy."""
    if isinstance(name, SensitivityPolicy):
        return name
    key = (name or "").strip().lower()
    if key in {"", "default"}:
        return CLAMPED_POLICY
    try:
        return _POLICIES[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown sensitivity policy '{name}'. Expected one of: {', '.join(sorted(_POLICIES))}"
        ) from exc


@dataclass(frozen=True)
class _RegionWeights:
    """Post-effect weights of the five base regions."""

    abdomen: float
    hips: float
    thighs: float
    arms: float
    chest: float

    def derive(self) -> dict[str, float]:
        """Synthesize the six output regions from these weights."""
        derived = {
            "arms": self.arms * 0.9 + self.chest * 0.05,
            "shoulders": self.chest * 0.35 + self.arms * 0.15,
            "chest": self.chest * 0.6 + self.arms * 0.05,
            "abdomen": self.abdomen,
            "hips": self.hips,
            "thighs": self.thighs,
        }
        return {region: max(WEIGHT_FLOOR, derived[region]) for region in OUTPUT_REGIONS}


@dataclass(frozen=True)
class DistributionResult:
    """Regional percentages for one archetype plus deltas from its neutral state."""

    distribution: Mapping[str, float]
    delta: Mapping[str, float]
    gender: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "distribution": dict(self.distribution),
            "delta": dict(self.delta),
            "gender": self.gender,
        }


def _apply_effects(
    normalized: Mapping[str, float],
    base: Mapping[str, float],
    policy: SensitivityPolicy,
) -> _RegionWeights:
    weights: dict[str, float] = {}
    for region in BASE_REGIONS:
        effects = REGION_EFFECTS[region]
        offset = sum(normalized[hormone] * effects.get(hormone, 0.0) for hormone in HORMONE_NAMES)
        weights[region] = max(WEIGHT_FLOOR, base[region] * policy.factor(offset))
    return _RegionWeights(**weights)


def _to_percentages(weights: Mapping[str, float]) -> dict[str, float]:
    total = math.fsum(weights.values())
    return {
        region: round_half_up(weights[region] / total * 100.0, DISTRIBUTION_DECIMALS)
        for region in OUTPUT_REGIONS
    }


def _derived_percentages(
    reading: HormoneReading,
    gender: Gender,
    policy: SensitivityPolicy,
) -> dict[str, float]:
    weights = _apply_effects(reading.normalized(), gender.base_distribution, policy)
    return _to_percentages(weights.derive())


def neutral_distribution(
    gender: Gender | str | None = Gender.MALE,
    *,
    policy: SensitivityPolicy = CLAMPED_POLICY,
) -> dict[str, float]:
    """Percentages for an archetype with every hormone at the neutral point."""
    return _derived_percentages(HormoneReading.neutral(), Gender.resolve(gender), policy)


def compute_distribution(
    hormones: HormoneReading | Mapping[str, Any],
    gender: Gender | str | None = Gender.MALE,
    *,
    policy: SensitivityPolicy = CLAMPED_POLICY,
) -> DistributionResult:
    """Estimate how hormone levels redistribute fat across body regions.

    Unrecognized gender identifiers fall back to the male archetype. The
    neutral comparison runs through the same policy so deltas stay centred.
    """
    reading = HormoneReading.coerce(hormones)
    archetype = Gender.resolve(gender)
    distribution = _derived_percentages(reading, archetype, policy)
    neutral = _derived_percentages(HormoneReading.neutral(), archetype, policy)
    delta = {
        region: round_half_up(distribution[region] - neutral[region], DISTRIBUTION_DECIMALS)
        for region in OUTPUT_REGIONS
    }
    return DistributionResult(
        distribution=MappingProxyType(distribution),
        delta=MappingProxyType(delta),
        gender=archetype.value,
    )


__all__ = [
    "CLAMPED_POLICY",
    "DistributionResult",
    "Gender",
    "LINEAR_POLICY",
    "SensitivityPolicy",
    "available_policies",
    "compute_distribution",
    "neutral_distribution",
    "resolve_policy",
]
