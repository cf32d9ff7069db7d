"""Visualization helpers for profile results."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd


def plot_profile(df: pd.DataFrame, output_path: str, altitude_label: str = "Altitude") -> None:
    fig, axes = plt.subplots(1, 3, figsize=(12, 5), sharey=True)

    axes[0].plot(df["T"], df["altitude"], color="tab:red")
    axes[0].set_xlabel("Temperature (K)")
    axes[0].set_ylabel(altitude_label)

    axes[1].plot(df["p"], df["altitude"], color="tab:blue")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Pressure (Pa)")

    axes[2].plot(df["rho"], df["altitude"], color="tab:green")
    axes[2].set_xscale("log")
    axes[2].set_xlabel("Density (kg/m^3)")

    for ax in axes:
        ax.grid(True, linestyle="--", alpha=0.5)
    fig.suptitle("Atmosphere Profile")
    plt.tight_layout()
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


def plot_solar_path(df: pd.DataFrame, output_path: str) -> None:
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(df["hour"], df["elevation"], color="tab:orange", label="Elevation")
    ax.set_xlabel("Local time (h)")
    ax.set_ylabel("Elevation (deg)")

    ax_az = ax.twinx()
    ax_az.plot(df["hour"], df["azimuth"], color="tab:purple", linestyle="--", label="Azimuth")
    ax_az.set_ylabel("Azimuth (deg)")

    ax.axhline(0.0, color="gray", linewidth=0.8)
    ax.set_title("Solar Path")
    ax.grid(True, linestyle="--", alpha=0.5)
    fig.legend(loc="upper right")
    plt.tight_layout()
    fig.savefig(output_path, dpi=200)
    plt.close(fig)
