"""Mars reference atmosphere from a tabulated Mars-GRAM 2005 profile.

The table is the average of 17 TES limb profiles at Phoenix landing
conditions (Justus, Duvall and Keller, "Atmospheric Models for Mars
Aerocapture", Table 1). Temperature, pressure and density are interpolated
independently; helium and hydrogen densities follow from the ideal gas law at
the ambient temperature and pressure.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, field

import numpy as np

from .interpolation import PiecewiseLinear
from .transport import speed_of_sound, sutherland_reference_viscosity

RU_MARS = 8.3143  # J/(mol K)
MM_CO2 = 44.01e-3  # kg/mol
R_MARS = RU_MARS / MM_CO2
GAMMA_MARS = 1.2941

MM_HE = 4.0026022e-3
MM_H2 = 2.015894e-3

# Sutherland constants for CO2
MU0_CO2 = 14.8e-6
T0_CO2 = 293.15
C_CO2 = 240.0


@dataclass(frozen=True)
class MarsProfileTable:
    altitude_km: np.ndarray
    temperature: np.ndarray
    pressure: np.ndarray
    density: np.ndarray
    _temperature: PiecewiseLinear = field(init=False, repr=False, compare=False)
    _pressure: PiecewiseLinear = field(init=False, repr=False, compare=False)
    _density: PiecewiseLinear = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # PiecewiseLinear checks lengths and ordering against the altitude axis
        object.__setattr__(self, "_temperature", PiecewiseLinear(self.altitude_km, self.temperature))
        object.__setattr__(self, "_pressure", PiecewiseLinear(self.altitude_km, self.pressure))
        object.__setattr__(self, "_density", PiecewiseLinear(self.altitude_km, self.density))

    def interpolate(
        self, altitude_km: float | np.ndarray
    ) -> tuple[float | np.ndarray, float | np.ndarray, float | np.ndarray]:
        """Return (pressure, temperature, density) at the given altitude(s)."""
        return (
            self._pressure.evaluate(altitude_km),
            self._temperature.evaluate(altitude_km),
            self._density.evaluate(altitude_km),
        )


DEFAULT_MARS_TABLE = MarsProfileTable(
    altitude_km=np.array([
        2.172, 4.825, 7.408, 9.921, 12.365, 14.744, 17.062, 19.326, 21.54,
        23.709, 25.838, 27.931, 29.992, 32.029, 34.048, 36.057, 38.061, 40.051,
        42.039, 44.019, 45.987, 47.948, 49.888, 51.825, 53.72, 55.646, 57.546,
    ]),
    temperature=np.array([
        209.39, 203.59, 197.79, 192.08, 186.63, 181.46, 176.77, 172.53, 168.64,
        165.22, 162.06, 159.2, 156.83, 155.03, 153.86, 153.15, 152.5, 151.68,
        150.77, 149.83, 148.78, 147.71, 146.72, 145.76, 144.75, 143.68, 142.68,
    ]),
    pressure=np.array([
        4.7513e02, 3.7003e02, 2.8813e02, 2.2443e02, 1.7483e02, 1.3613e02, 1.0603e02,
        8.2553e01, 6.4293e01, 5.0073e01, 3.9003e01, 3.0373e01, 2.3653e01, 1.8423e01,
        1.4353e01, 1.1173e01, 8.7003e00, 6.7803e00, 5.2803e00, 4.1103e00, 3.2003e00,
        2.4903e00, 1.9403e00, 1.5103e00, 1.1803e00, 9.1703e-01, 7.1403e-01,
    ]),
    density=np.array([
        1.1873e-02, 9.5093e-03, 7.6223e-03, 6.1133e-03, 4.9003e-03, 3.9253e-03, 3.1383e-03,
        2.5043e-03, 1.9953e-03, 1.5863e-03, 1.2593e-03, 9.9823e-04, 7.8913e-04, 6.2183e-04,
        4.8813e-04, 3.8223e-04, 2.9913e-04, 2.3443e-04, 1.8373e-04, 1.4393e-04, 1.1293e-04,
        8.8513e-05, 6.9463e-05, 5.4463e-05, 4.2893e-05, 3.3603e-05, 2.6363e-05,
    ]),
)


@dataclass(frozen=True)
class MarsState:
    pressure: float
    temperature: float
    kinematic_viscosity: float
    speed_of_sound: float
    density_ambient: float
    density_he: float
    density_h2: float

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)


def _derived(p: float | np.ndarray, t: float | np.ndarray, rho: float | np.ndarray) -> tuple:
    rho_he = p * MM_HE / (R_MARS * t)
    rho_h2 = p * MM_H2 / (R_MARS * t)
    a = speed_of_sound(GAMMA_MARS, R_MARS, t)
    mu = sutherland_reference_viscosity(t, MU0_CO2, T0_CO2, C_CO2)
    return mu / rho, a, rho_he, rho_h2


def evaluate_mars(altitude_km: float, table: MarsProfileTable = DEFAULT_MARS_TABLE) -> MarsState:
    """Return the Mars atmosphere state at ``altitude_km`` (km).

    Outside the tabulated range the end segments are extended linearly, so
    results far from the table may be unphysical (even negative); no error is
    raised.
    """
    p, t, rho = (np.float64(value) for value in table.interpolate(altitude_km))
    with np.errstate(invalid="ignore", divide="ignore"):
        nu, a, rho_he, rho_h2 = _derived(p, t, rho)
    return MarsState(
        pressure=float(p),
        temperature=float(t),
        kinematic_viscosity=float(nu),
        speed_of_sound=float(a),
        density_ambient=float(rho),
        density_he=float(rho_he),
        density_h2=float(rho_h2),
    )


def sample_profile(altitudes_km: np.ndarray, table: MarsProfileTable = DEFAULT_MARS_TABLE) -> dict[str, np.ndarray]:
    """Evaluate the Mars model over an array of altitudes (km)."""
    altitudes_km = np.asarray(altitudes_km, dtype=float)
    p, t, rho = table.interpolate(altitudes_km)
    with np.errstate(invalid="ignore", divide="ignore"):
        nu, a, rho_he, rho_h2 = _derived(np.asarray(p), np.asarray(t), np.asarray(rho))
    return {"p": p, "T": t, "nu": nu, "a": a, "rho": rho, "rho_he": rho_he, "rho_h2": rho_h2}
