"""International Standard Atmosphere (0-84852 m geopotential altitude)."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from math import exp

import numpy as np

from .transport import ideal_gas_density, speed_of_sound, sutherland_viscosity

G0 = 9.80665
RU_AIR = 8.31432  # J/(mol K)
MM_AIR = 0.0289644  # kg/mol, dry air
R_AIR = RU_AIR / MM_AIR
GAMMA_AIR = 1.4

T0 = 288.15
P0 = 101325.0

SUTHERLAND_B = 1.458e-6
SUTHERLAND_S = 110.4

BOUNDARIES = (0.0, 11000.0, 20000.0, 32000.0, 47000.0, 51000.0, 71000.0, 84852.0)
LAPSE_RATES = (-0.0065, 0.0, 0.001, 0.0028, 0.0, -0.0028, -0.002)

# Published ISA values at each layer base, for comparison with the derived layers
ISA_BASE_TEMPERATURES = (288.15, 216.65, 216.65, 228.65, 270.65, 270.65, 214.65, 186.946)
ISA_BASE_PRESSURES = (101325.0, 22632.0, 5474.9, 868.02, 110.91, 66.939, 3.9564, 0.3734)


class OutOfRangeError(ValueError):
    """Altitude lies above the top of the layered model."""

    def __init__(self, altitude: float, top: float) -> None:
        super().__init__(f"altitude {altitude} m is above the model top of {top} m")
        self.altitude = altitude
        self.top = top


@dataclass(frozen=True)
class AtmosLayer:
    h_base: float
    h_top: float
    t_base: float
    p_base: float
    lapse: float

    @property
    def isothermal(self) -> bool:
        return self.lapse == 0.0


@dataclass(frozen=True)
class PhysicalState:
    temperature: float
    pressure: float
    density: float
    kinematic_viscosity: float
    speed_of_sound: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return astuple(self)


def layer_state(layer: AtmosLayer, h: float) -> tuple[float, float]:
    """Temperature and pressure at altitude h using the formula of the given layer."""
    h_delta = h - layer.h_base
    if layer.isothermal:
        t = layer.t_base
        p = layer.p_base * exp(-G0 * h_delta / (R_AIR * t))
    else:
        t = np.float64(layer.t_base + layer.lapse * h_delta)
        # negative temperatures above the extended top layer give NaN pressure
        p = layer.p_base * (t / layer.t_base) ** (G0 / (-layer.lapse * R_AIR))
    return t, p


def _build_layers() -> tuple[AtmosLayer, ...]:
    # Each base is the previous layer evaluated at its top, so T and p are continuous
    layers: list[AtmosLayer] = []
    t_base = T0
    p_base = P0

    for idx, lapse in enumerate(LAPSE_RATES):
        layer = AtmosLayer(
            h_base=BOUNDARIES[idx],
            h_top=BOUNDARIES[idx + 1],
            t_base=t_base,
            p_base=p_base,
            lapse=lapse,
        )
        layers.append(layer)
        t_base, p_base = layer_state(layer, layer.h_top)
    return tuple(layers)


LAYERS = _build_layers()
TOP_ALTITUDE = LAYERS[-1].h_top


def find_layer(h: float, extrapolate: bool = False) -> AtmosLayer:
    """Return the layer whose formula applies at geopotential altitude h (m).

    The troposphere has no lower bound; every other layer covers
    ``h_base < h <= h_top``. Above the model top an :class:`OutOfRangeError`
    is raised unless ``extrapolate`` is set, in which case the top layer is
    extended upward.
    """
    for layer in LAYERS:
        if h <= layer.h_top:
            return layer
    if extrapolate:
        return LAYERS[-1]
    raise OutOfRangeError(h, TOP_ALTITUDE)


def evaluate_earth(altitude_m: float, extrapolate: bool = False) -> PhysicalState:
    """Return the ISA state at geopotential altitude ``altitude_m`` (m)."""
    layer = find_layer(altitude_m, extrapolate=extrapolate)
    with np.errstate(invalid="ignore", divide="ignore"):
        t, p = layer_state(layer, altitude_m)
        rho = ideal_gas_density(p, R_AIR, t)
        mu = sutherland_viscosity(t, SUTHERLAND_B, SUTHERLAND_S)
        a = speed_of_sound(GAMMA_AIR, R_AIR, t)
        nu = mu / rho
    return PhysicalState(
        temperature=float(t),
        pressure=float(p),
        density=float(rho),
        kinematic_viscosity=float(nu),
        speed_of_sound=float(a),
    )


def sample_profile(altitudes: np.ndarray, extrapolate: bool = False) -> dict[str, np.ndarray]:
    """Vectorized sampling of atmosphere properties for altitudes array."""
    altitudes = np.asarray(altitudes, dtype=float)
    temps = np.zeros_like(altitudes)
    press = np.zeros_like(altitudes)
    dens = np.zeros_like(altitudes)
    visc = np.zeros_like(altitudes)
    sound = np.zeros_like(altitudes)

    for idx, h in np.ndenumerate(altitudes):
        state = evaluate_earth(float(h), extrapolate=extrapolate)
        temps[idx] = state.temperature
        press[idx] = state.pressure
        dens[idx] = state.density
        visc[idx] = state.kinematic_viscosity
        sound[idx] = state.speed_of_sound

    return {"T": temps, "p": press, "rho": dens, "nu": visc, "a": sound}
