from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Mapping, Optional

from .errors import EncodeDecodeError


def strip_none(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def optional_bool(value: Any) -> Optional[bool]:
    return None if value is None else bool(value)


def optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def decode_base64(payload: str) -> bytes:
    if payload.startswith("data:"):
        payload = payload.split(",", 1)[1]
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodeDecodeError(f"invalid base64 image data: {exc}") from exc
