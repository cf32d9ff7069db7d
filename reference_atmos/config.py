"""Configuration loading utilities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from reference_atmos.physics.solar import day_of_year

BODIES = ("earth", "mars")

DEFAULT_ALTITUDES = {
    "earth": {"start": 0.0, "stop": 84852.0, "num": 200},
    "mars": {"start": 2.172, "stop": 57.546, "num": 200},
}


class ConfigError(ValueError):
    """Run configuration is missing keys or holds invalid values."""


@dataclass(frozen=True)
class AltitudeGrid:
    start: float
    stop: float
    num: int


@dataclass(frozen=True)
class SolarSite:
    day_of_year: float
    latitude_deg: float
    longitude_deg: float
    utc_offset_hrs: float
    step_minutes: float = 60.0


@dataclass(frozen=True)
class RunConfig:
    body: str
    altitude: AltitudeGrid
    extrapolate: bool = False
    solar: Optional[SolarSite] = None


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load a YAML file and return a dict."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def _altitude_grid(body: str, raw: Dict[str, Any] | None) -> AltitudeGrid:
    values = dict(DEFAULT_ALTITUDES[body])
    values.update(raw or {})
    try:
        grid = AltitudeGrid(start=float(values["start"]), stop=float(values["stop"]), num=int(values["num"]))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid altitude grid: {exc}") from exc
    if grid.num < 1:
        raise ConfigError("altitude.num must be at least 1")
    return grid


def _day_number(value: Any) -> float:
    # YAML loads ISO dates as datetime.date; quoted ones arrive as strings
    if isinstance(value, str):
        value = date.fromisoformat(value)
    if isinstance(value, date):
        return float(day_of_year(value))
    raise ConfigError(f"solar.date must be an ISO date, got {value!r}")


def _solar_site(raw: Dict[str, Any]) -> SolarSite:
    raw = dict(raw)
    if "date" in raw and "day_of_year" not in raw:
        try:
            raw["day_of_year"] = _day_number(raw.pop("date"))
        except ValueError as exc:
            raise ConfigError(f"invalid solar date: {exc}") from exc
    required = ("day_of_year", "latitude_deg", "longitude_deg", "utc_offset_hrs")
    missing = [key for key in required if key not in raw]
    if missing:
        raise ConfigError(f"solar block missing keys: {', '.join(missing)}")
    try:
        site = SolarSite(
            day_of_year=float(raw["day_of_year"]),
            latitude_deg=float(raw["latitude_deg"]),
            longitude_deg=float(raw["longitude_deg"]),
            utc_offset_hrs=float(raw["utc_offset_hrs"]),
            step_minutes=float(raw.get("step_minutes", 60.0)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid solar block: {exc}") from exc
    if site.step_minutes <= 0.0:
        raise ConfigError("solar.step_minutes must be positive")
    return site


def parse_run_config(raw: Dict[str, Any]) -> RunConfig:
    """Validate a raw config mapping and apply defaults."""
    if not isinstance(raw, dict):
        raise ConfigError("run configuration must be a mapping")
    body = str(raw.get("body", "earth")).lower()
    if body not in BODIES:
        raise ConfigError(f"unknown body {body!r}, expected one of {', '.join(BODIES)}")

    solar_raw = raw.get("solar")
    return RunConfig(
        body=body,
        altitude=_altitude_grid(body, raw.get("altitude")),
        extrapolate=bool(raw.get("extrapolate", False)),
        solar=_solar_site(solar_raw) if solar_raw else None,
    )


def load_run_config(path: str | Path) -> RunConfig:
    return parse_run_config(load_yaml(path))
