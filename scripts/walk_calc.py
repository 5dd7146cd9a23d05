"""
scripts/walk_calc.py
────────────────────────────────────────────────────────────────────────
Run the walking calculator from a terminal:

    python -m scripts.walk_calc --steps 8000 --weight 165 --weight-unit lb
    python -m scripts.walk_calc --mode time --time-min 30 --pace power --json
    python -m scripts.walk_calc --table
"""
from __future__ import annotations

import json
import logging
from argparse import ArgumentParser
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
load_dotenv()

from config import settings
from core.formatting import format_results, stride_hint
from core.input_parsing import parse_inputs, update_inputs
from core.reference_table import calorie_reference_table, reference_inputs
from core.walking_calc import InputMode, Pace, WalkingMetricsEngine

engine = WalkingMetricsEngine()


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="Walking / jogging calories-burned calculator")
    ap.add_argument("--weight", help="body weight (default 70)")
    ap.add_argument("--weight-unit", choices=["kg", "lb"])
    ap.add_argument("--height", help="height (default 170)")
    ap.add_argument("--height-unit", choices=["cm", "in"])
    ap.add_argument("--sex", choices=["female", "male"])
    ap.add_argument("--mode", choices=[m.value for m in InputMode], dest="input_mode")
    ap.add_argument("--steps")
    ap.add_argument("--distance-km")
    ap.add_argument("--time-min")
    ap.add_argument("--pace", choices=[p.value for p in Pace])
    ap.add_argument("--stride-cm", dest="custom_stride_cm",
                    help="custom stride length; switches the custom stride on")
    ap.add_argument("--table", action="store_true",
                    help="print the calories-by-steps-and-pace table instead")
    ap.add_argument("--json", action="store_true", help="machine-readable output")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _raw_inputs(args) -> Dict[str, Any]:
    keys = ("weight", "weight_unit", "height", "height_unit", "sex", "input_mode",
            "steps", "distance_km", "time_min", "pace", "custom_stride_cm")
    raw = {k: getattr(args, k) for k in keys if getattr(args, k) is not None}
    if "custom_stride_cm" in raw:
        raw["use_custom_stride"] = True
    return raw


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level="DEBUG" if args.verbose else settings.log_level.upper())

    inputs = parse_inputs(_raw_inputs(args))

    if args.table:
        base = inputs if args.weight is not None else update_inputs(
            reference_inputs(),
            height=inputs.height,
            height_unit=inputs.height_unit,
            sex=inputs.sex,
        )
        df = calorie_reference_table(base, engine=engine)
        if args.json:
            print(df.reset_index().to_json(orient="records"))
        else:
            print(f"Calories burned ({base.weight_kg:.0f} kg, level ground)")
            print(df.to_string())
        return 0

    m = engine.compute(inputs)
    if args.json:
        print(json.dumps({"metrics": asdict(m), "display": format_results(m)}))
        return 0

    d = format_results(m)
    print(f"Calories burned: {d['calories']} kcal")
    print(f"  Distance:   {d['distance']}")
    print(f"  Duration:   {d['duration']}")
    print(f"  Pace speed: {d['pace_speed']}")
    print(f"  Cadence:    {d['cadence']}")
    print(f"  Stride:     {d['stride']}  ({stride_hint(m)})")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
