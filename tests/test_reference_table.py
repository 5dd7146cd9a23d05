"""
Calories-by-steps-and-pace grid.
"""
import pytest

from core.reference_table import calorie_reference_table
from core.walking_calc import InputMode, Pace, WalkingInputs, WalkingMetricsEngine, round_half_up

calc = WalkingMetricsEngine()


def test_default_grid_shape():
    df = calorie_reference_table()
    assert list(df.index) == [2000, 5000, 10000]
    assert df.index.name == "steps"
    assert list(df.columns) == ["easy", "brisk", "jog"]


def test_cells_match_engine():
    base = WalkingInputs(weight=68)
    df = calorie_reference_table(base)
    for n in (2000, 5000, 10000):
        for p in (Pace.easy, Pace.brisk, Pace.jog):
            kcal = calc.compute(WalkingInputs(weight=68, steps=n, pace=p)).calories
            assert df.loc[n, p.value] == round_half_up(kcal)


def test_more_steps_and_faster_pace_burn_more():
    df = calorie_reference_table()
    assert df["brisk"].is_monotonic_increasing
    for n in df.index:
        assert df.loc[n, "easy"] < df.loc[n, "brisk"] < df.loc[n, "jog"]


def test_grid_ignores_base_input_mode():
    timed = WalkingInputs(weight=68, input_mode=InputMode.time, time_min=5)
    assert calorie_reference_table(timed).equals(calorie_reference_table(WalkingInputs(weight=68)))


@pytest.mark.parametrize("kw", [{"steps": ()}, {"paces": ()}])
def test_empty_axis_rejected(kw):
    with pytest.raises(ValueError):
        calorie_reference_table(**kw)


def test_default_body_weight_comes_from_settings(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "reference_weight_kg", 90.0)
    df = calorie_reference_table()
    kcal = calc.compute(WalkingInputs(weight=90, steps=5000, pace=Pace.brisk)).calories
    assert df.loc[5000, "brisk"] == round_half_up(kcal)
