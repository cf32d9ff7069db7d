"""Solar position in horizontal and equatorial coordinates.

Formula chain from PVEducation ("Solar Time"): local standard time meridian,
equation of time, time correction, local solar time, hour angle, then the
elevation/zenith/azimuth angles. Angles are in degrees throughout.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from datetime import date

import numpy as np


@dataclass(frozen=True)
class SolarPosition:
    hour_angle: float
    declination: float
    elevation: float
    zenith: float
    azimuth: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return astuple(self)


def day_of_year(day: date) -> int:
    return day.timetuple().tm_yday


def equation_of_time(day: float) -> float:
    """Equation of time in minutes (orbit eccentricity and axial tilt)."""
    b = np.deg2rad((360.0 / 365.0) * (day - 81))
    return float(9.87 * np.sin(2 * b) - 7.53 * np.cos(b) - 1.5 * np.sin(b))


def local_solar_time(day: float, hour: float, minute: float, longitude: float, utc_offset: float) -> float:
    """Local solar time in hours."""
    lstm = 15.0 * utc_offset
    time_correction = 4.0 * (longitude - lstm) + equation_of_time(day)
    return hour + minute / 60.0 + time_correction / 60.0


def solar_declination(day: float) -> float:
    return float(23.45 * np.sin((day - 80) * (2 * np.pi / 365.25)))


def solar_azimuth(declination: float, latitude: float, hour_angle: float, elevation: float) -> float:
    """Azimuth from north in degrees, before the afternoon reflection.

    Rounding at solar noon can push the cosine a few ulp past +/-1; those
    values are snapped back. A zero cosine of elevation (sun at the zenith)
    is not special-cased and yields inf/NaN.
    """
    lat = np.deg2rad(latitude)
    dec = np.deg2rad(declination)
    ha = np.deg2rad(hour_angle)

    with np.errstate(invalid="ignore", divide="ignore"):
        cos_azimuth = (np.sin(dec) * np.cos(lat) - np.cos(dec) * np.sin(lat) * np.cos(ha)) / np.cos(
            np.deg2rad(elevation)
        )
        cos_azimuth = np.where(np.abs(np.abs(cos_azimuth) - 1.0) < 1e-12, np.sign(cos_azimuth), cos_azimuth)
        return float(np.rad2deg(np.arccos(cos_azimuth)))


def solar_position(
    day_of_year: float,
    hour: float,
    minute: float,
    latitude: float,
    longitude: float,
    utc_offset: float,
) -> SolarPosition:
    """Sun angles for a day of year, local clock time and site.

    ``utc_offset`` is the difference of local time from GMT in hours.
    """
    lst = local_solar_time(day_of_year, hour, minute, longitude, utc_offset)
    hour_angle = 15.0 * (lst - 12.0)
    declination = solar_declination(day_of_year)

    lat = np.deg2rad(latitude)
    dec = np.deg2rad(declination)
    ha = np.deg2rad(hour_angle)

    with np.errstate(invalid="ignore"):
        elevation = float(np.rad2deg(np.arcsin(np.sin(dec) * np.sin(lat) + np.cos(dec) * np.cos(ha) * np.cos(lat))))
    zenith = 90.0 - elevation

    azimuth = solar_azimuth(declination, latitude, hour_angle, elevation)
    # morning sun is east of the meridian
    if not lst < 12.0:
        azimuth = 360.0 - azimuth

    return SolarPosition(
        hour_angle=float(hour_angle),
        declination=declination,
        elevation=elevation,
        zenith=zenith,
        azimuth=azimuth,
    )
