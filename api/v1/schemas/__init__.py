"""Re-export individual schema modules for easy imports."""

from .calculator import (
    CalculatorRequest,
    CalculatorResponse,
    DisplayOut,
    MetricsOut,
    PaceOut,
    ReferenceRow,
    ReferenceTableOut,
)

__all__ = [
    "CalculatorRequest",
    "CalculatorResponse",
    "DisplayOut",
    "MetricsOut",
    "PaceOut",
    "ReferenceRow",
    "ReferenceTableOut",
]
