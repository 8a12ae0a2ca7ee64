"""Command line interface for the River Flooding Digital Twin.

Usage examples (from repository root):

  python -m river_flooding.cli wse --cusecs 35000
  python -m river_flooding.cli impact --cusecs 35000
  python -m river_flooding.cli stats --cusecs 60000
  python -m river_flooding.cli loss --cusecs 60000
  python -m river_flooding.cli river --cusecs 60000 --strategy offset --zones
  python -m river_flooding.cli recommend --rain 12.5 --storage 88
  python -m river_flooding.cli hydrograph --rain 8 --forecast 9 11 6 --cusecs 12000
  python -m river_flooding.cli sitrep --cusecs 45000 --rain 20
  python -m river_flooding.cli weather
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from river_flooding.config import settings
from river_flooding.domain.economics import estimate_loss
from river_flooding.domain.hydrograph import build_hydrograph, find_intersection, find_peak
from river_flooding.domain.hydrology import calculate_wse
from river_flooding.domain.impact import assess_bridges, assess_flood_impact, calculate_flood_stats
from river_flooding.domain.optimizer import recommend_discharge
from river_flooding.domain.registry import get_dam
from river_flooding.ingestion.weather_client import CatchmentWeatherClient
from river_flooding.services.flood_risk import SimulationState, evaluate
from river_flooding.services.situation_report import generate_situation_report
from river_flooding.spatial.geojson_converter import zones_to_geojson
from river_flooding.spatial.river_geometry import get_flood_zones, river_feature


def _cmd_wse(args: argparse.Namespace) -> int:
    print(f"{calculate_wse(args.cusecs):.1f}")
    return 0


def _cmd_impact(args: argparse.Namespace) -> int:
    wse = calculate_wse(args.cusecs)
    print(f"WSE: {wse:.1f} m MSL")
    for impact in assess_flood_impact(wse):
        flag = "FLOODED" if impact.is_flooded else "dry"
        print(f"{impact.site.name:<32} {impact.site.elevation_msl:>6.1f} m  "
              f"{flag:<8} depth={impact.submergence_depth:.2f} m  {impact.risk_level.value}")
    print("Bridges:")
    for status in assess_bridges(wse):
        print(f"  {status.bridge.name:<30} {status.status.value:<7} freeboard={status.freeboard_m:.2f} m")
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    stats = calculate_flood_stats(calculate_wse(args.cusecs))
    print(json.dumps(stats.model_dump(), indent=2))
    return 0


def _cmd_loss(args: argparse.Namespace) -> int:
    loss = estimate_loss(calculate_wse(args.cusecs))
    for category, value in loss.by_category.items():
        print(f"{category:<16} INR {value:>16,.0f}")
    print(f"{'total':<16} INR {loss.total:>16,.0f}")
    return 0


def _cmd_river(args: argparse.Namespace) -> int:
    wse = calculate_wse(args.cusecs)
    out = {"river": river_feature(wse, args.strategy)}
    if args.zones:
        out["zones"] = zones_to_geojson(get_flood_zones(wse, args.strategy))
    print(json.dumps(out))
    return 0


def _cmd_recommend(args: argparse.Namespace) -> int:
    if args.storage is not None:
        storage = args.storage
    else:
        try:
            storage = get_dam(args.dam).storage_pct
        except KeyError:
            print(f"Unknown dam id: {args.dam}")
            return 1
    rec = recommend_discharge(args.rain, storage)
    print(f"Recommended discharge: {rec.cusecs:,.0f} cusecs [{rec.classification.value}]")
    print(rec.reasoning)
    p = rec.preview
    print(f"WSE {p.baseline_wse:.1f} -> {p.recommended_wse:.1f} m MSL; "
          f"newly flooded: {p.newly_flooded}; incremental loss: INR {p.incremental_loss:,.0f}")
    return 0


def _cmd_hydrograph(args: argparse.Namespace) -> int:
    series = build_hydrograph(args.rain, args.forecast or [], args.cusecs)
    for point in series:
        marker = " !" if point["danger"] else ""
        if point["over_capacity"]:
            marker += " over capacity"
        print(f"{point['time']:>5}  rain={point['rain_mm_hr']:6.2f}  "
              f"in={point['inflow']:>7,}  out={point['outflow']:>7,}{marker}")
    peak = find_peak(series)
    crossing = find_intersection(series)
    print(f"Peak inflow {peak['inflow']:,} cusecs at {peak['time']}")
    print(f"Inflow first exceeds outflow at: {crossing['time'] if crossing else 'never'}")
    return 0


def _cmd_sitrep(args: argparse.Namespace) -> int:
    try:
        snapshot = evaluate(SimulationState(
            discharge_cusecs=args.cusecs, rainfall_mm_hr=args.rain, dam_id=args.dam))
    except KeyError:
        print(f"Unknown dam id: {args.dam}")
        return 1
    print(generate_situation_report(snapshot))
    return 0


def _cmd_weather(_: argparse.Namespace) -> int:
    reading = CatchmentWeatherClient().fetch()
    source = f"fallback ({reading.reason})" if reading.is_fallback else "live"
    print(f"Catchment rainfall: {reading.current_rainfall:.1f} mm/hr [{source}]")
    print(f"Predicted inflow: {reading.predicted_inflow:,.0f} cusecs")
    for point in reading.hourly_forecast:
        print(f"  {point.time}: {point.rain_mm_hr:.2f} mm/hr")
    return 0


def _add_cusecs(p: argparse.ArgumentParser) -> None:
    p.add_argument("--cusecs", type=float, default=0.0,
                   help="Dam discharge (cusecs)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="river-flooding",
        description="River Flooding Digital Twin CLI",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_wse = sub.add_parser("wse", help="Water surface elevation for a discharge")
    _add_cusecs(p_wse)
    p_wse.set_defaults(func=_cmd_wse)

    p_impact = sub.add_parser("impact", help="Per-landmark and bridge flood impact")
    _add_cusecs(p_impact)
    p_impact.set_defaults(func=_cmd_impact)

    p_stats = sub.add_parser("stats", help="Aggregate flood statistics (JSON)")
    _add_cusecs(p_stats)
    p_stats.set_defaults(func=_cmd_stats)

    p_loss = sub.add_parser("loss", help="Estimated economic loss by category")
    _add_cusecs(p_loss)
    p_loss.set_defaults(func=_cmd_loss)

    p_river = sub.add_parser("river", help="River extent GeoJSON")
    _add_cusecs(p_river)
    p_river.add_argument("--strategy", choices=["buffer", "offset"], default="buffer")
    p_river.add_argument("--zones", action="store_true",
                         help="Include the five flood-zone bands")
    p_river.set_defaults(func=_cmd_river)

    p_rec = sub.add_parser("recommend", help="Advisory discharge recommendation")
    p_rec.add_argument("--rain", type=float, required=True,
                       help="Catchment rainfall (mm/hr)")
    p_rec.add_argument("--storage", type=float,
                       help="Dam storage percent (defaults to registry value)")
    p_rec.add_argument("--dam", default="gangapur", help="Dam registry id")
    p_rec.set_defaults(func=_cmd_recommend)

    p_hydro = sub.add_parser("hydrograph", help="Predictive inflow/outflow series")
    p_hydro.add_argument("--rain", type=float, required=True,
                         help="Current rainfall (mm/hr)")
    p_hydro.add_argument("--forecast", type=float, nargs="*",
                         help="Hourly forecast rainfall (mm/hr)")
    _add_cusecs(p_hydro)
    p_hydro.set_defaults(func=_cmd_hydrograph)

    p_sitrep = sub.add_parser("sitrep", help="Print the situation report")
    _add_cusecs(p_sitrep)
    p_sitrep.add_argument("--rain", type=float, default=0.0)
    p_sitrep.add_argument("--dam", default="gangapur")
    p_sitrep.set_defaults(func=_cmd_sitrep)

    p_weather = sub.add_parser("weather", help="Fetch catchment rainfall (with fallback)")
    p_weather.set_defaults(func=_cmd_weather)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
