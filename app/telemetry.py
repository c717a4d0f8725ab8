"""Telemetry and logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping


def log_json_line(
    path: Path,
    payload: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
) -> None:
    """Append a JSON payload to the given log path."""
    if not payload:
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError as exc:  # pragma: no cover - diagnostics only
        if logger:
            logger.debug("Failed to append json line to %s: %s", path, exc)


def log_estimate(
    kind: str,
    request: Mapping[str, Any],
    result: Mapping[str, Any],
    path: Path,
    *,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Persist one model evaluation for offline review."""
    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "kind": kind,
        "request": dict(request),
        "result": dict(result),
    }
    log_json_line(path, payload, logger=logger)
    return payload


__all__ = ["log_estimate", "log_json_line"]
