"""Encode/decode Python values to/from Firestore REST API 'fields' format.

SERVER_TIMESTAMP is a write sentinel: encode_write() pulls it out of the
field map and turns it into a REQUEST_TIME field transform.
"""

import base64
import re
from datetime import datetime
from typing import Any

from app.shared.utils.datetime import format_rfc3339, parse_rfc3339

_SIMPLE_FIELD = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


class _ServerTimestamp:
    """Placeholder replaced by the commit time on the server."""

    _instance: "_ServerTimestamp | None" = None

    def __new__(cls) -> "_ServerTimestamp":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def field_path(name: str) -> str:
    """Quote a top-level field name for updateMask / fieldTransforms."""
    if _SIMPLE_FIELD.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def _encode_value(v: Any) -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": format_rfc3339(v)}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x) for k, x in v.items()}}}
    if v is SERVER_TIMESTAMP:
        raise TypeError("SERVER_TIMESTAMP is only supported as a top-level field")
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_write(data: dict[str, Any]) -> tuple[dict[str, dict], list[dict]]:
    """Split data into encoded fields and server-timestamp field transforms."""
    fields: dict[str, dict] = {}
    transforms: list[dict] = []
    for key, value in data.items():
        if value is SERVER_TIMESTAMP:
            transforms.append(
                {"fieldPath": field_path(key), "setToServerValue": "REQUEST_TIME"}
            )
        else:
            fields[key] = _encode_value(value)
    return fields, transforms


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return obj["doubleValue"]
    if "timestampValue" in obj:
        return parse_rfc3339(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "referenceValue" in obj:
        return obj["referenceValue"]
    if "geoPointValue" in obj:
        return dict(obj["geoPointValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document (name + fields) to a Python dict of its fields."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}
