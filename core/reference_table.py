"""
core/reference_table.py
────────────────────────────────────────────────────────────────────────
"Calories burned by steps & pace" grid, computed from the engine rather
than typed in by hand.

    steps   easy  brisk  jog
    2000     ...    ...  ...
    5000     ...    ...  ...
    10000    ...    ...  ...
"""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from config import settings
from core.input_parsing import update_inputs
from core.walking_calc import (
    InputMode,
    Pace,
    WalkingInputs,
    WalkingMetricsEngine,
    WeightUnit,
    round_half_up,
)

_LOG = logging.getLogger(__name__)

DEFAULT_STEPS = (2000, 5000, 10000)
DEFAULT_PACES = (Pace.easy, Pace.brisk, Pace.jog)
_engine = WalkingMetricsEngine()


def reference_inputs() -> WalkingInputs:
    """Default body behind the table: REFERENCE_WEIGHT_KG, default height and sex."""
    return WalkingInputs(weight=settings.reference_weight_kg, weight_unit=WeightUnit.kg)


def calorie_reference_table(
    base_inputs: WalkingInputs | None = None,
    steps: Sequence[int] = DEFAULT_STEPS,
    paces: Sequence[Pace] = DEFAULT_PACES,
    engine: WalkingMetricsEngine | None = None,
) -> pd.DataFrame:
    if not steps:
        raise ValueError("steps must not be empty")
    if not paces:
        raise ValueError("paces must not be empty")

    eng = engine or _engine
    base = base_inputs or reference_inputs()
    base = update_inputs(base, input_mode=InputMode.steps)

    rows = []
    for n in steps:
        row = {"steps": int(n)}
        for p in paces:
            snap = update_inputs(base, steps=int(n), pace=Pace(p))
            row[Pace(p).value] = round_half_up(eng.compute(snap).calories)
        rows.append(row)

    df = pd.DataFrame(rows).set_index("steps")
    _LOG.debug("reference table %d×%d for %.1f kg", len(df), len(df.columns), base.weight_kg)
    return df
