"""
core/input_parsing.py
────────────────────────────────────────────────────────────────────────
Input boundary for the calculator. Raw form values (strings from a text
box, query params, CLI args) become a `WalkingInputs` snapshot here; the
engine itself never sees anything unparsed.

Policy: unparsable / empty / non-finite numbers become 0, negatives are
clamped to 0, unknown enum values fall back to the default.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import fields, replace
from enum import Enum
from typing import Any, Mapping

from core.walking_calc import (
    HeightUnit,
    InputMode,
    Pace,
    Sex,
    WalkingInputs,
    WeightUnit,
    round_half_up,
)

_LOG = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# camelCase names used by the browser widget
_ALIASES = {
    "weightUnit": "weight_unit",
    "heightUnit": "height_unit",
    "inputMode": "input_mode",
    "distanceKm": "distance_km",
    "timeMin": "time_min",
    "useCustomStride": "use_custom_stride",
    "customStrideCm": "custom_stride_cm",
}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "weight_unit": WeightUnit,
    "height_unit": HeightUnit,
    "input_mode": InputMode,
    "pace": Pace,
    "sex": Sex,
}
_FLOAT_FIELDS = ("weight", "height", "distance_km", "time_min", "custom_stride_cm")

_DEFAULTS = WalkingInputs()


# ──────────────────────────────────────────────────────────────────────
#  Scalars
# ──────────────────────────────────────────────────────────────────────
def clamp(n: float, lo: float, hi: float) -> float:
    return min(max(n, lo), hi)


def to_number(raw: Any) -> float:
    """Parse-with-fallback, like a browser's parseFloat.

    The leading number wins ("12kg" → 12, "1_000" → 1), "," counts as the
    decimal point ("4,5" → 4.5); "" / "abc" / None / nan / overflow → 0.0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            n = float(raw)
        except OverflowError:
            return 0.0
    else:
        m = _LEADING_NUMBER.match(str(raw).strip().replace(",", ".", 1))
        if m is None:
            return 0.0
        n = float(m.group(0))
    return n if math.isfinite(n) else 0.0


def to_amount(raw: Any) -> float:
    """Non-negative quantity: weight, height, distance, minutes, stride."""
    return clamp(to_number(raw), 0.0, math.inf)


def to_count(raw: Any) -> int:
    return round_half_up(to_amount(raw))


def to_flag(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in _TRUTHY


def to_choice(raw: Any, enum_cls: type[Enum], default: Enum) -> Enum:
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError:
        _LOG.warning("unknown %s %r, using %s", enum_cls.__name__, raw, default.value)
        return default


# ──────────────────────────────────────────────────────────────────────
#  Snapshots
# ──────────────────────────────────────────────────────────────────────
def parse_inputs(raw: Mapping[str, Any]) -> WalkingInputs:
    """Build a snapshot from raw values; missing keys keep their defaults."""
    data = {_ALIASES.get(k, k): v for k, v in raw.items()}
    values: dict[str, Any] = {}

    for name in _FLOAT_FIELDS:
        if name in data:
            values[name] = to_amount(data[name])
    if "steps" in data:
        values["steps"] = to_count(data["steps"])
    if "use_custom_stride" in data:
        values["use_custom_stride"] = to_flag(data["use_custom_stride"])
    for name, enum_cls in _ENUM_FIELDS.items():
        if name in data:
            values[name] = to_choice(data[name], enum_cls, getattr(_DEFAULTS, name))

    return WalkingInputs(**values)


def update_inputs(snapshot: WalkingInputs, **changes: Any) -> WalkingInputs:
    """New snapshot with `changes` applied; `snapshot` is left untouched."""
    known = {f.name for f in fields(WalkingInputs)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown input field(s): {', '.join(sorted(unknown))}")
    return replace(snapshot, **changes)


def reset_inputs(snapshot: WalkingInputs) -> WalkingInputs:
    """The widget's Reset button: units, height, pace, sex stay as they are."""
    return replace(
        snapshot,
        weight=_DEFAULTS.weight,
        steps=_DEFAULTS.steps,
        distance_km=_DEFAULTS.distance_km,
        time_min=_DEFAULTS.time_min,
        input_mode=_DEFAULTS.input_mode,
        use_custom_stride=False,
    )
