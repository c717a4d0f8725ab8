"""FastAPI entrypoint for the hormone body-composition model."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from app.settings import RuntimeSettings, clear_settings_cache
from app.telemetry import log_estimate
from composition import (
    Gender,
    SensitivityPolicy,
    available_policies,
    build_gauges,
    compare_archetypes,
    compute_body_fat_impact,
    compute_distribution,
    neutral_distribution,
    resolve_policy,
)
from composition.constants import BASE_DISTRIBUTIONS, OUTPUT_REGIONS
from hormones import HORMONE_NAMES, NEUTRAL_LEVEL

app = FastAPI(title="Hormone Body Composition Model")
BASE_DIR = Path(__file__).resolve().parent
logger = logging.getLogger("bodyfat.main")
runtime_settings = RuntimeSettings.load()
BASELINE_PERCENT = runtime_settings.baseline_percent
SENSITIVITY_POLICY: SensitivityPolicy = runtime_settings.sensitivity_policy
DEFAULT_GENDER: Gender = runtime_settings.default_gender
TRACE_ENABLED = runtime_settings.trace_enabled
TRACE_LOG = BASE_DIR / runtime_settings.trace_path


def _refresh_settings() -> None:
    """Reload project settings from disk and environment."""
    global runtime_settings
    global BASELINE_PERCENT, SENSITIVITY_POLICY, DEFAULT_GENDER
    global TRACE_ENABLED, TRACE_LOG

    clear_settings_cache()
    runtime_settings = RuntimeSettings.load()
    BASELINE_PERCENT = runtime_settings.baseline_percent
    SENSITIVITY_POLICY = runtime_settings.sensitivity_policy
    DEFAULT_GENDER = runtime_settings.default_gender
    TRACE_ENABLED = runtime_settings.trace_enabled
    TRACE_LOG = BASE_DIR / runtime_settings.trace_path
    logger.info(
        "Settings loaded: policy=%s gender=%s baseline=%.1f trace=%s",
        SENSITIVITY_POLICY.name,
        DEFAULT_GENDER.value,
        BASELINE_PERCENT,
        "enabled" if TRACE_ENABLED else "disabled",
    )


class HormonePayload(BaseModel):
    """Hormone levels on the 0-100 scale; omitted hormones sit at neutral."""

    insulin: float | None = Field(default=None, ge=0.0, le=100.0)
    cortisol: float | None = Field(default=None, ge=0.0, le=100.0)
    testosterone: float | None = Field(default=None, ge=0.0, le=100.0)
    estrogen: float | None = Field(default=None, ge=0.0, le=100.0)

    def levels(self) -> dict[str, float]:
        return self.model_dump(exclude_none=True)


class DistributionRequest(BaseModel):
    """Schema for a regional distribution estimate."""

    hormones: HormonePayload = Field(default_factory=HormonePayload)
    gender: str | None = Field(
        default=None,
        description="Archetype identifier ('male' or 'female'); unknown values fall back to male.",
    )
    policy: str | None = Field(default=None, description="Optional sensitivity policy override.")
    include_gauges: bool = Field(default=False, description="Attach per-region range gauges.")


class ImpactRequest(BaseModel):
    """Schema for an aggregate body-fat change estimate."""

    hormones: HormonePayload = Field(default_factory=HormonePayload)
    baseline_percent: float | None = Field(
        default=None,
        description="Starting body-fat percentage; the result is clamped to 1-60.",
    )


class CompareRequest(BaseModel):
    """Schema for evaluating one profile against both archetypes."""

    hormones: HormonePayload = Field(default_factory=HormonePayload)
    policy: str | None = Field(default=None, description="Optional sensitivity policy override.")


def _policy_for(name: str | None) -> SensitivityPolicy:
    if not name:
        return SENSITIVITY_POLICY
    try:
        return resolve_policy(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _trace(kind: str, request: BaseModel, result: dict[str, Any]) -> None:
    if not TRACE_ENABLED:
        return
    log_estimate(kind, request.model_dump(), result, TRACE_LOG, logger=logger)


@app.on_event("startup")
async def on_startup() -> None:
    logger.info(
        "Body composition model ready (policy=%s, default gender=%s)",
        SENSITIVITY_POLICY.name,
        DEFAULT_GENDER.value,
    )


@app.get("/ping")
async def ping() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "alive", "policy": SENSITIVITY_POLICY.name}


@app.get("/regions")
async def get_regions(policy: str | None = None) -> dict[str, Any]:
    """Describe the modelled regions and each archetype's neutral shares."""
    selected = _policy_for(policy)
    return {
        "hormones": list(HORMONE_NAMES),
        "neutral_level": NEUTRAL_LEVEL,
        "regions": list(OUTPUT_REGIONS),
        "policy": selected.name,
        "policies": list(available_policies()),
        "archetypes": {
            gender.value: {
                "base": dict(BASE_DISTRIBUTIONS[gender.value]),
                "neutral": neutral_distribution(gender, policy=selected),
            }
            for gender in Gender
        },
    }


@app.post("/distribution")
async def post_distribution(payload: DistributionRequest) -> dict[str, Any]:
    """Estimate the regional fat distribution for a hormone profile."""
    policy = _policy_for(payload.policy)
    gender = payload.gender if payload.gender is not None else DEFAULT_GENDER
    result = compute_distribution(payload.hormones.levels(), gender, policy=policy)
    response = result.as_dict()
    if payload.include_gauges:
        gauges = build_gauges(payload.hormones.levels(), gender, policy=policy, result=result)
        response["gauges"] = {region: gauge.as_dict() for region, gauge in gauges.items()}
    _trace("distribution", payload, response)
    return response


@app.post("/impact")
async def post_impact(payload: ImpactRequest) -> dict[str, float]:
    """Estimate the monthly change in total body fat."""
    baseline = payload.baseline_percent if payload.baseline_percent is not None else BASELINE_PERCENT
    response = compute_body_fat_impact(payload.hormones.levels(), baseline).as_dict()
    _trace("impact", payload, response)
    return response


@app.post("/compare")
async def post_compare(payload: CompareRequest) -> dict[str, Any]:
    """Evaluate a hormone profile against both archetypes."""
    policy = _policy_for(payload.policy)
    response: dict[str, Any] = {
        "policy": policy.name,
        "archetypes": compare_archetypes(payload.hormones.levels(), policy=policy),
    }
    _trace("compare", payload, response)
    return response


@app.get("/settings")
async def get_settings() -> dict[str, Any]:
    """Expose the effective runtime settings."""
    return runtime_settings.describe()


@app.post("/admin/reload")
async def admin_reload() -> dict[str, Any]:
    """Reload settings from disk and environment."""
    _refresh_settings()
    return {"status": "reloaded", "settings": runtime_settings.describe()}
