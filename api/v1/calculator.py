# api/v1/calculator.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status

from core.formatting import format_results, stride_hint
from core.input_parsing import reset_inputs
from core.reference_table import (
    DEFAULT_PACES,
    DEFAULT_STEPS,
    calorie_reference_table,
    reference_inputs,
)
from core.walking_calc import (
    PACE_TABLE,
    Pace,
    WalkingInputs,
    WalkingMetricsEngine,
    WeightUnit,
)
from api.v1.schemas import (
    CalculatorRequest,
    CalculatorResponse,
    DisplayOut,
    MetricsOut,
    PaceOut,
    ReferenceRow,
    ReferenceTableOut,
)

router = APIRouter()
_engine = WalkingMetricsEngine()


# ───────────────────────── compute ─────────────────────────
@router.post("", response_model=CalculatorResponse, status_code=status.HTTP_200_OK)
def calculate(body: CalculatorRequest) -> CalculatorResponse:
    metrics = _engine.compute(body.to_inputs())
    return CalculatorResponse(
        metrics=MetricsOut.from_metrics(metrics),
        display=DisplayOut(**format_results(metrics)),
        stride_hint=stride_hint(metrics),
    )


# ───────────────────────── form helpers ────────────────────
@router.get("/defaults", response_model=CalculatorRequest)
def defaults() -> CalculatorRequest:
    return CalculatorRequest.from_inputs(WalkingInputs())


@router.get("/paces", response_model=List[PaceOut])
def paces() -> List[PaceOut]:
    return [
        PaceOut(key=p, label=spec.label, mph=spec.mph, mets=spec.mets)
        for p, spec in PACE_TABLE.items()
    ]


@router.post("/reset", response_model=CalculatorRequest)
def reset(body: CalculatorRequest) -> CalculatorRequest:
    return CalculatorRequest.from_inputs(reset_inputs(body.to_inputs()))


# ───────────────────────── reference table ─────────────────
@router.get("/reference-table", response_model=ReferenceTableOut)
def reference_table(
    weight: Optional[float] = Query(None, ge=0),
    weight_unit: WeightUnit = Query(WeightUnit.kg),
    steps: Optional[List[int]] = Query(None),
    pace: Optional[List[Pace]] = Query(None),
) -> ReferenceTableOut:
    base = (
        reference_inputs() if weight is None
        else WalkingInputs(weight=weight, weight_unit=weight_unit)
    )
    pace_axis = tuple(pace) if pace else DEFAULT_PACES

    df = calorie_reference_table(
        base,
        steps=tuple(steps) if steps else DEFAULT_STEPS,
        paces=pace_axis,
        engine=_engine,
    )
    rows = [
        ReferenceRow(steps=int(n), calories={k: int(v) for k, v in row.items()})
        for n, row in df.iterrows()
    ]
    return ReferenceTableOut(weight_kg=base.weight_kg, paces=list(pace_axis), rows=rows)
