"""Altitude and time sweeps of the reference models."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from reference_atmos.config import AltitudeGrid, RunConfig, SolarSite
from reference_atmos.physics import earth_atmosphere, mars_atmosphere
from reference_atmos.physics.solar import solar_position

logger = logging.getLogger(__name__)

EARTH_COLUMNS = ("T", "p", "rho", "nu", "a")
MARS_COLUMNS = ("p", "T", "nu", "a", "rho", "rho_he", "rho_h2")


def altitude_grid(grid: AltitudeGrid) -> np.ndarray:
    return np.linspace(grid.start, grid.stop, grid.num)


def run_profile(cfg: RunConfig) -> pd.DataFrame:
    """Evaluate the configured body over its altitude grid."""
    altitudes = altitude_grid(cfg.altitude)
    logger.info(
        "Sampling %s atmosphere at %d altitudes (%g to %g)",
        cfg.body, altitudes.size, cfg.altitude.start, cfg.altitude.stop,
    )

    if cfg.body == "earth":
        props = earth_atmosphere.sample_profile(altitudes, extrapolate=cfg.extrapolate)
        columns = EARTH_COLUMNS
    elif cfg.body == "mars":
        props = mars_atmosphere.sample_profile(altitudes)
        columns = MARS_COLUMNS
    else:
        raise ValueError(f"unknown body {cfg.body!r}")

    data = {"altitude": altitudes}
    for name in columns:
        data[name] = props[name]
    return pd.DataFrame(data)


def run_solar(site: SolarSite) -> pd.DataFrame:
    """Sun angles across one day at a site, every ``site.step_minutes``."""
    minutes = np.arange(0.0, 24.0 * 60.0, site.step_minutes)
    logger.info("Computing %d solar positions for day %g", minutes.size, site.day_of_year)

    rows = []
    for total in minutes:
        hour, minute = divmod(float(total), 60.0)
        pos = solar_position(
            site.day_of_year, hour, minute, site.latitude_deg, site.longitude_deg, site.utc_offset_hrs
        )
        rows.append(
            {
                "hour": total / 60.0,
                "hour_angle": pos.hour_angle,
                "declination": pos.declination,
                "elevation": pos.elevation,
                "zenith": pos.zenith,
                "azimuth": pos.azimuth,
            }
        )
    logger.debug("Solar sweep produced %d rows", len(rows))
    return pd.DataFrame(rows)
