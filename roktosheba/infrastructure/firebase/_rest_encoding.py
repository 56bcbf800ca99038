"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

import base64
import re
from datetime import datetime
from enum import Enum
from typing import Any

from roktosheba.shared.utils.datetime import ensure_utc

# Firestore may return nanosecond precision; datetime supports microseconds.
_FRACTION_RE = re.compile(r"\.(\d{6})\d+")


def _encode_value(v: Any) -> dict:
    if isinstance(v, Enum):
        v = v.value
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": ensure_utc(v).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_fields(data: dict[str, Any]) -> dict:
    """Convert a Python dict to a Firestore 'fields' map."""
    return {k: _encode_value(v) for k, v in data.items()}


def encode_document(data: dict[str, Any]) -> dict:
    """Convert a Python dict to Firestore REST Document format ({"fields": ...})."""
    return {"fields": encode_fields(data)}


def _parse_timestamp(raw: str) -> datetime:
    return datetime.fromisoformat(_FRACTION_RE.sub(r".\1", raw).replace("Z", "+00:00"))


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _parse_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "referenceValue" in obj:
        return obj["referenceValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_value(obj: dict | None) -> Any:
    """Convert a single Firestore REST Value to a Python value."""
    if not obj:
        return None
    return _decode_value(obj)


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document (with a 'fields' map) to a Python dict."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}
