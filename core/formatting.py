# core/formatting.py
"""Results-panel strings. Rounding happens here only; metrics keep full precision."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from core.walking_calc import PACE_TABLE, WalkingMetrics


def to_fixed(x: float, digits: int) -> str:
    """Browser toFixed: ties on the exact binary value round away from zero."""
    if not math.isfinite(x):
        x = 0.0
    # the integer part of a double runs to 309 digits
    q = Decimal(x).quantize(
        Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=Context(prec=400)
    )
    return f"{q:.{digits}f}"


def format_results(m: WalkingMetrics) -> dict[str, str]:
    return {
        "calories": to_fixed(max(0.0, m.calories), 0),
        "distance": f"{to_fixed(m.distance_mi, 2)} mi / {to_fixed(m.distance_km, 2)} km",
        "duration": f"{to_fixed(m.minutes, 0)} min",
        "pace_speed": f"{to_fixed(m.mph, 1)} mph",
        "cadence": f"{to_fixed(m.cadence, 0)} steps/min",
        "stride": f"{to_fixed(m.stride_cm, 0)} cm",
    }


def stride_hint(m: WalkingMetrics) -> str:
    return f"Default auto-stride ≈ {to_fixed(m.stride_auto, 0)} cm"


def pace_options() -> list[tuple[str, str]]:
    return [(p.value, spec.label) for p, spec in PACE_TABLE.items()]
