"""
core/walking_calc.py
────────────────────────────────────────────────────────────────────────
Walking / jogging calories-burned arithmetic:

1. Unit normalisation (lb → kg, in → cm)
2. Stride length (height × sex factor, or a custom stride)
3. Steps ⇆ distance ⇆ time
4. Calories via METs  (kcal/min = METs × 3.5 × kg / 200)
5. Cadence (steps / min)

Everything here is a pure function of the input snapshot plus the two
constant tables below.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

_LOG = logging.getLogger(__name__)

KG_PER_LB = 0.45359237
CM_PER_IN = 2.54
MI_PER_KM = 0.621371
KM_PER_MI = 1.60934


# ──────────────────────────────────────────────────────────────────────
#  Enums
# ──────────────────────────────────────────────────────────────────────
class Sex(str, Enum):
    female = "female"
    male = "male"


class Pace(str, Enum):
    easy = "easy"
    brisk = "brisk"
    power = "power"
    jog = "jog"


class WeightUnit(str, Enum):
    kg = "kg"
    lb = "lb"


class HeightUnit(str, Enum):
    cm = "cm"
    inch = "in"


class InputMode(str, Enum):
    steps = "steps"
    distance = "distance"
    time = "time"


# ──────────────────────────────────────────────────────────────────────
#  Constant tables
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PaceSpec:
    mph: float
    mets: float
    label: str


STRIDE_FACTORS: Mapping[Sex, float] = MappingProxyType({
    Sex.female: 0.413,
    Sex.male: 0.415,
})

PACE_TABLE: Mapping[Pace, PaceSpec] = MappingProxyType({
    Pace.easy:  PaceSpec(2.5, 3.0, "Easy Walk (~2.5 mph / 4 kph)"),
    Pace.brisk: PaceSpec(3.5, 4.3, "Brisk Walk (~3.5 mph / 5.6 kph)"),
    Pace.power: PaceSpec(4.3, 5.0, "Power Walk (~4.3 mph / 6.9 kph)"),
    Pace.jog:   PaceSpec(5.0, 7.0, "Light Jog (~5 mph / 8 kph)"),
})


# ──────────────────────────────────────────────────────────────────────
#  Snapshots
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class WalkingInputs:
    # body
    weight: float = 70
    weight_unit: WeightUnit = WeightUnit.kg
    height: float = 170
    height_unit: HeightUnit = HeightUnit.cm
    sex: Sex = Sex.male
    # what the user knows
    input_mode: InputMode = InputMode.steps
    steps: int = 5000
    distance_km: float = 4
    time_min: float = 40
    pace: Pace = Pace.brisk
    # stride override
    use_custom_stride: bool = False
    custom_stride_cm: float = 0

    @property
    def weight_kg(self) -> float:
        w = _finite(self.weight)
        return w if self.weight_unit == WeightUnit.kg else lb_to_kg(w)

    @property
    def height_cm(self) -> float:
        h = _finite(self.height)
        return h if self.height_unit == HeightUnit.cm else in_to_cm(h)


@dataclass(frozen=True)
class WalkingMetrics:
    steps: int
    stride_auto: float
    stride_cm: float
    distance_km: float
    distance_mi: float
    minutes: float
    hours: float
    calories: float
    cadence: float
    mph: float


# ──────────────────────────────────────────────────────────────────────
#  Conversions
# ──────────────────────────────────────────────────────────────────────
def lb_to_kg(lb: float) -> float:
    return lb * KG_PER_LB


def kg_to_lb(kg: float) -> float:
    return kg / KG_PER_LB


def in_to_cm(inches: float) -> float:
    return inches * CM_PER_IN


def cm_to_in(cm: float) -> float:
    return cm / CM_PER_IN


def km_to_mi(km: float) -> float:
    return km * MI_PER_KM


def mi_to_km(mi: float) -> float:
    return mi * KM_PER_MI


def round_half_up(x: float) -> int:
    """Round like a browser's Math.round (0.5 goes up, not to even)."""
    return math.floor(x + 0.5)


def _finite(x: float) -> float:
    """NaN, ±inf and ints too big for a float count as zero."""
    try:
        x = float(x)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return x if math.isfinite(x) else 0.0


# ──────────────────────────────────────────────────────────────────────
#  Stride & steps
# ──────────────────────────────────────────────────────────────────────
def auto_stride_cm(height_cm: float, sex: Sex) -> float:
    return height_cm * STRIDE_FACTORS[Sex(sex)]


def effective_stride_cm(inputs: WalkingInputs) -> float:
    """Custom stride when switched on and > 0, otherwise height × factor.

    A custom stride of 0 is treated as "not set" and falls back to auto.
    """
    custom = _finite(inputs.custom_stride_cm)
    if inputs.use_custom_stride and custom > 0:
        return custom
    return auto_stride_cm(inputs.height_cm, inputs.sex)


def effective_steps(
    inputs: WalkingInputs,
    pace_table: Mapping[Pace, PaceSpec] = PACE_TABLE,
) -> int:
    """Step count the rest of the computation runs on.

    In steps mode that is the entered count; in distance / time mode it is
    derived from the kilometres covered and the effective stride.
    """
    mode = InputMode(inputs.input_mode)
    if mode == InputMode.steps:
        return max(round_half_up(_finite(inputs.steps)), 0)

    if mode == InputMode.distance:
        km = _finite(inputs.distance_km)
    else:
        mph = pace_table[Pace(inputs.pace)].mph
        km = mi_to_km(mph * (_finite(inputs.time_min) / 60))

    stride_m = effective_stride_cm(inputs) / 100
    if stride_m <= 0:
        return 0
    return max(round_half_up(km * 1000 / stride_m), 0)


# ──────────────────────────────────────────────────────────────────────
#  Engine
# ──────────────────────────────────────────────────────────────────────
class WalkingMetricsEngine:
    """Stateless: one input snapshot in, one metrics snapshot out."""

    def __init__(self, pace_table: Mapping[Pace, PaceSpec] | None = None) -> None:
        self._paces = pace_table if pace_table is not None else PACE_TABLE

    def compute(self, inputs: WalkingInputs) -> WalkingMetrics:
        steps = effective_steps(inputs, self._paces)
        weight_kg = inputs.weight_kg

        stride_auto = auto_stride_cm(inputs.height_cm, inputs.sex)
        stride_cm = effective_stride_cm(inputs)

        distance_km = steps * (stride_cm / 100) / 1000
        distance_mi = km_to_mi(distance_km)

        spec = self._paces[Pace(inputs.pace)]
        mph, mets = spec.mph, spec.mets
        hours = distance_mi / mph if mph > 0 else 0.0
        minutes = hours * 60
        calories = mets * 3.5 * weight_kg * (minutes / 200)
        cadence = steps / minutes if minutes > 0 else 0.0

        metrics = WalkingMetrics(
            steps=steps,
            stride_auto=stride_auto,
            stride_cm=stride_cm,
            distance_km=distance_km,
            distance_mi=distance_mi,
            minutes=minutes,
            hours=hours,
            calories=calories,
            cadence=cadence,
            mph=mph,
        )
        _LOG.debug("walking metrics for %s: %s", inputs, metrics)
        return metrics
