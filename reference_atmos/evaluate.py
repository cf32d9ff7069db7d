"""Command line entry point for reference atmosphere evaluation."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

from reference_atmos.config import BODIES, ConfigError, load_run_config
from reference_atmos.physics.earth_atmosphere import OutOfRangeError, evaluate_earth
from reference_atmos.physics.mars_atmosphere import evaluate_mars
from reference_atmos.sampling.profiles import run_profile, run_solar

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Earth/Mars reference atmosphere evaluation")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Run YAML config")
    source.add_argument("--altitude", type=float, help="Evaluate a single altitude (m for earth, km for mars)")
    parser.add_argument("--body", choices=BODIES, default="earth", help="Body for --altitude")
    parser.add_argument("--extrapolate", action="store_true", help="Extend the top ISA layer above 84852 m")
    parser.add_argument("--output", default="results", help="Output directory")
    parser.add_argument("--plot", action="store_true", help="Also write PNG plots")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _evaluate_single(args: argparse.Namespace) -> None:
    if args.body == "earth":
        state = evaluate_earth(args.altitude, extrapolate=args.extrapolate)
    else:
        state = evaluate_mars(args.altitude)
    for name, value in asdict(state).items():
        print(f"{name:>20s}: {value:.6g}")


def _run_config(args: argparse.Namespace) -> None:
    cfg = load_run_config(args.config)
    if args.extrapolate and not cfg.extrapolate:
        cfg = replace(cfg, extrapolate=True)

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    df = run_profile(cfg)
    csv_path = output_dir / "profile.csv"
    df.to_csv(csv_path, index=False)
    print(f"Saved profile to {csv_path}")

    solar_df = None
    if cfg.solar is not None:
        solar_df = run_solar(cfg.solar)
        solar_path = output_dir / "solar.csv"
        solar_df.to_csv(solar_path, index=False)
        print(f"Saved solar positions to {solar_path}")

    if args.plot:
        from reference_atmos.visualization.plots import plot_profile, plot_solar_path

        label = "Geopotential altitude (m)" if cfg.body == "earth" else "Altitude (km)"
        plot_profile(df, str(output_dir / "profile.png"), altitude_label=label)
        if solar_df is not None:
            plot_solar_path(solar_df, str(output_dir / "solar_path.png"))
        logger.info("Wrote plots to %s", output_dir)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.altitude is not None:
            _evaluate_single(args)
        else:
            _run_config(args)
    except (OutOfRangeError, ConfigError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
