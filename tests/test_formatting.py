# tests/test_formatting.py
import pytest

from core.formatting import format_results, pace_options, stride_hint, to_fixed
from core.walking_calc import WalkingInputs, WalkingMetrics, WalkingMetricsEngine

calc = WalkingMetricsEngine()


def test_results_panel_for_brisk_6000_steps():
    d = format_results(calc.compute(WalkingInputs(steps=6000)))
    assert d == {
        "calories": "238",
        "distance": "2.63 mi / 4.23 km",
        "duration": "45 min",
        "pace_speed": "3.5 mph",
        "cadence": "133 steps/min",
        "stride": "71 cm",
    }


def test_negative_calories_display_as_zero():
    m = WalkingMetrics(
        steps=0, stride_auto=70, stride_cm=70, distance_km=0, distance_mi=0,
        minutes=0, hours=0, calories=-12.4, cadence=0, mph=3.5,
    )
    assert format_results(m)["calories"] == "0"


def test_stride_hint():
    assert stride_hint(calc.compute(WalkingInputs())) == "Default auto-stride ≈ 71 cm"


def test_pace_options_in_table_order():
    keys = [k for k, _ in pace_options()]
    assert keys == ["easy", "brisk", "power", "jog"]
    assert dict(pace_options())["jog"].startswith("Light Jog")


# ── toFixed rounding ─────────────────────────────────────────────────
def test_custom_stride_tie_rounds_up():
    m = calc.compute(WalkingInputs(use_custom_stride=True, custom_stride_cm=70.5))
    assert format_results(m)["stride"] == "71 cm"


@pytest.mark.parametrize(
    "x, digits, expected",
    [
        (70.5, 0, "71"),
        (2.5, 0, "3"),
        (0.125, 2, "0.13"),
        (3.25, 1, "3.3"),
        (1.005, 2, "1.00"),   # binary value sits just below the tie
        (0.0, 2, "0.00"),
        (float("inf"), 0, "0"),
    ],
)
def test_to_fixed(x, digits, expected):
    assert to_fixed(x, digits) == expected


def test_huge_values_format_without_error():
    out = to_fixed(1e300, 2)
    assert out.startswith("1") and out.endswith(".00")
    assert len(out.split(".")[0]) == 301
