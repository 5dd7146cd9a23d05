# api/v1/schemas/calculator.py
from __future__ import annotations
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.input_parsing import to_amount, to_count, to_flag
from core.walking_calc import (
    HeightUnit,
    InputMode,
    Pace,
    Sex,
    WalkingInputs,
    WalkingMetrics,
    WeightUnit,
)


class CalculatorRequest(BaseModel):
    weight: float = 70
    weight_unit: WeightUnit = WeightUnit.kg
    height: float = 170
    height_unit: HeightUnit = HeightUnit.cm
    input_mode: InputMode = InputMode.steps
    steps: int = 5000
    distance_km: float = 4
    time_min: float = 40
    pace: Pace = Pace.brisk
    sex: Sex = Sex.male
    use_custom_stride: bool = False
    custom_stride_cm: float = 0

    model_config = ConfigDict(extra="ignore")

    # form boxes send "", "4,5", "abc" – never reject those, read them as numbers
    @field_validator(
        "weight", "height", "distance_km", "time_min", "custom_stride_cm",
        mode="before",
    )
    @classmethod
    def _lenient_number(cls, v):
        return to_amount(v)

    @field_validator("steps", mode="before")
    @classmethod
    def _lenient_count(cls, v):
        return to_count(v)

    @field_validator("use_custom_stride", mode="before")
    @classmethod
    def _lenient_flag(cls, v):
        return to_flag(v)

    def to_inputs(self) -> WalkingInputs:
        return WalkingInputs(**self.model_dump())

    @classmethod
    def from_inputs(cls, inputs: WalkingInputs) -> "CalculatorRequest":
        return cls.model_validate(inputs, from_attributes=True)


class MetricsOut(BaseModel):
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

    @classmethod
    def from_metrics(cls, m: WalkingMetrics) -> "MetricsOut":
        return cls.model_validate(m, from_attributes=True)


class DisplayOut(BaseModel):
    calories: str
    distance: str
    duration: str
    pace_speed: str
    cadence: str
    stride: str


class CalculatorResponse(BaseModel):
    metrics: MetricsOut
    display: DisplayOut
    stride_hint: str


class PaceOut(BaseModel):
    key: Pace
    label: str
    mph: float
    mets: float


class ReferenceRow(BaseModel):
    steps: int
    calories: Dict[str, int]


class ReferenceTableOut(BaseModel):
    weight_kg: float
    paces: List[Pace]
    rows: List[ReferenceRow] = Field(default_factory=list)
