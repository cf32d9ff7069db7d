"""Gas property relations shared by the atmosphere models."""

from __future__ import annotations

import numpy as np


def ideal_gas_density(pressure, gas_constant: float, temperature):
    """rho = P / (R T)"""
    return pressure / (gas_constant * temperature)


def sutherland_viscosity(temperature, b: float, s: float):
    """Dynamic viscosity, mu = b T^1.5 / (S + T)."""
    return b * temperature**1.5 / (s + temperature)


def sutherland_reference_viscosity(temperature, mu_ref: float, t_ref: float, c: float):
    """Dynamic viscosity relative to a reference state.

    mu = mu_ref (T_ref + C) / (T + C) (T / T_ref)^1.5
    """
    return mu_ref * (t_ref + c) / (temperature + c) * (temperature / t_ref) ** 1.5


def speed_of_sound(gamma: float, gas_constant: float, temperature):
    """a = sqrt(gamma R T)"""
    return np.sqrt(gamma * gas_constant * temperature)
