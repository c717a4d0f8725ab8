"""Tests for the HTTP endpoints."""

from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

try:  # pragma: no cover - optional dependency
    import httpx  # type: ignore[unused-ignore]
except ModuleNotFoundError as exc:  # pragma: no cover
    httpx = None  # type: ignore[assignment]
    HTTPX_IMPORT_ERROR = exc
else:  # pragma: no cover
    HTTPX_IMPORT_ERROR = None

import main
from app.settings import clear_settings_cache
from composition import CLAMPED_POLICY, LINEAR_POLICY, Gender, compute_distribution
from composition.constants import OUTPUT_REGIONS


@unittest.skipIf(httpx is None, f"httpx unavailable: {HTTPX_IMPORT_ERROR}")
class ModelEndpointTests(unittest.IsolatedAsyncioTestCase):
    """Validate the estimation endpoints."""

    async def asyncSetUp(self) -> None:
        self._original_settings = main.runtime_settings
        self._original = (
            main.SENSITIVITY_POLICY,
            main.DEFAULT_GENDER,
            main.BASELINE_PERCENT,
            main.TRACE_ENABLED,
            main.TRACE_LOG,
        )
        main.SENSITIVITY_POLICY = CLAMPED_POLICY
        main.DEFAULT_GENDER = Gender.MALE
        main.BASELINE_PERCENT = 25.0
        main.TRACE_ENABLED = False
        self._transport = httpx.ASGITransport(app=main.app)
        self._client = httpx.AsyncClient(transport=self._transport, base_url="http://testserver")

    async def asyncTearDown(self) -> None:
        await self._client.aclose()
        await self._transport.aclose()
        (
            main.SENSITIVITY_POLICY,
            main.DEFAULT_GENDER,
            main.BASELINE_PERCENT,
            main.TRACE_ENABLED,
            main.TRACE_LOG,
        ) = self._original
        main.runtime_settings = self._original_settings
        clear_settings_cache()

    async def test_ping(self) -> None:
        response = await self._client.get("/ping")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive", "policy": "clamped"})

    async def test_regions_lists_archetypes(self) -> None:
        response = await self._client.get("/regions")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["regions"], list(OUTPUT_REGIONS))
        self.assertEqual(set(payload["archetypes"]), {"male", "female"})
        self.assertEqual(payload["archetypes"]["male"]["neutral"]["abdomen"], 39.4)
        self.assertEqual(payload["archetypes"]["female"]["base"]["hips"], 32.0)

    async def test_distribution_matches_model(self) -> None:
        hormones = {"insulin": 85, "testosterone": 20}
        response = await self._client.post("/distribution", json={"hormones": hormones, "gender": "female"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), compute_distribution(hormones, "female").as_dict())

    async def test_distribution_defaults_and_fallback(self) -> None:
        response = await self._client.post("/distribution", json={"gender": "unknown"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["gender"], "male")
        self.assertTrue(all(value == 0.0 for value in payload["delta"].values()))
        self.assertNotIn("gauges", payload)

    async def test_distribution_with_gauges_and_policy(self) -> None:
        response = await self._client.post(
            "/distribution",
            json={"hormones": {"cortisol": 90}, "policy": "linear", "include_gauges": True},
        )
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        expected = compute_distribution({"cortisol": 90}, "male", policy=LINEAR_POLICY)
        self.assertEqual(payload["distribution"], dict(expected.distribution))
        self.assertEqual(set(payload["gauges"]), set(OUTPUT_REGIONS))

    async def test_out_of_range_hormone_is_rejected(self) -> None:
        response = await self._client.post("/distribution", json={"hormones": {"insulin": 150}})
        self.assertEqual(response.status_code, 422)

    async def test_unknown_policy_is_rejected(self) -> None:
        response = await self._client.post("/distribution", json={"policy": "cubic"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("cubic", response.json()["detail"])

    async def test_impact(self) -> None:
        response = await self._client.post(
            "/impact",
            json={"hormones": {"insulin": 0, "cortisol": 0, "testosterone": 100, "estrogen": 0}, "baseline_percent": 2},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"deltaPercent": -4.32, "newBodyFat": 1.0})

    async def test_impact_uses_configured_baseline(self) -> None:
        main.BASELINE_PERCENT = 30.0
        response = await self._client.post("/impact", json={})
        self.assertEqual(response.json(), {"deltaPercent": 0.0, "newBodyFat": 30.0})

    async def test_compare(self) -> None:
        response = await self._client.post("/compare", json={"hormones": {"estrogen": 80}})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["policy"], "clamped")
        self.assertEqual(set(payload["archetypes"]), {"male", "female"})
        self.assertGreater(payload["archetypes"]["female"]["delta"]["hips"], 0.0)

    async def test_trace_log_written_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            main.TRACE_ENABLED = True
            main.TRACE_LOG = Path(tmp) / "estimates.jsonl"
            response = await self._client.post("/impact", json={"hormones": {"insulin": 70}})
            self.assertEqual(response.status_code, 200)
            record = json.loads(main.TRACE_LOG.read_text(encoding="utf-8").strip())
        self.assertEqual(record["kind"], "impact")
        self.assertEqual(record["request"]["hormones"]["insulin"], 70.0)
        self.assertEqual(record["result"], response.json())

    async def test_reload_picks_up_changed_settings_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text(
                json.dumps({"sensitivity_policy": "linear", "default_gender": "female", "baseline_percent": 33}),
                encoding="utf-8",
            )
            with mock.patch.dict(os.environ, {"BODYFAT_SETTINGS_PATH": str(path)}):
                response = await self._client.post("/admin/reload")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["status"], "reloaded")
        self.assertEqual(payload["settings"]["sensitivity_policy"], "linear")
        self.assertEqual((await self._client.get("/ping")).json()["policy"], "linear")
        distribution = (await self._client.post("/distribution", json={})).json()
        self.assertEqual(distribution["gender"], "female")
        impact = (await self._client.post("/impact", json={})).json()
        self.assertEqual(impact["newBodyFat"], 33.0)

    async def test_settings_endpoint(self) -> None:
        response = await self._client.get("/settings")
        self.assertEqual(response.status_code, 200)
        self.assertIn("sensitivity_policy", response.json())


if __name__ == "__main__":
    unittest.main()
