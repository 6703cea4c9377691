from __future__ import annotations

import json
import math
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tempconv.models.conversion import Conversion


def _finite_or_text(value: float) -> float | str:
    """Return *value* unchanged, or ``"nan"``/``"inf"``/``"-inf"`` when it is not finite.

    Strict JSON has no literal for non-finite numbers.
    """
    if math.isfinite(value):
        return value
    return str(value)


def _conversion_payload(conv: Conversion) -> dict[str, Any]:
    data = conv.model_dump(exclude_none=True)
    data["value"] = _finite_or_text(conv.value)
    data["result"] = _finite_or_text(conv.result)
    return data


def _dump(envelope: dict[str, Any]) -> str:
    envelope["timestamp"] = datetime.now(UTC).isoformat()
    return json.dumps(envelope, indent=2, allow_nan=False)


def format_json_response(*, data: Conversion, command: str) -> str:
    """Return a JSON envelope for a successful conversion.

    The envelope has the shape::

        {
          "ok": true,
          "command": "f2c",
          "data": {"value": 212.0, "source": "F", "target": "C", "result": 100.0},
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    return _dump({"ok": True, "command": command, "data": _conversion_payload(data)})


def format_json_error(*, code: str, message: str, command: str) -> str:
    """Return a JSON envelope for an error, ``error`` holding *code* and *message*."""
    return _dump(
        {"ok": False, "command": command, "error": {"code": code, "message": message}}
    )
