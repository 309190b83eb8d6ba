"""Turn parameter dataclasses into flat string mappings for requests."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from decimal import Decimal
from typing import Any, Optional

__all__ = ["transform_object_to_param"]

_log = logging.getLogger(__name__)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _format_value(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        try:
            return json.dumps(
                dict(value), separators=(",", ":"), sort_keys=True, ensure_ascii=False
            )
        except (TypeError, ValueError) as err:
            _log.error("[transform_object_to_param] json encode err:%r", err)
            return None
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        joined = ",".join(value)
        return joined or None
    return None


def transform_object_to_param(obj: Any) -> dict[str, str]:
    """Map each field tagged with a "param" name to its string form.

    Empty strings, empty string lists and missing mappings are left out.
    """
    params: dict[str, str] = {}
    if obj is None:
        return params
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    for f in fields(obj):
        tag = f.metadata.get("param", "")
        if not tag or tag == "-":
            continue
        text = _format_value(getattr(obj, f.name))
        if text is not None:
            params[tag] = text
    return params