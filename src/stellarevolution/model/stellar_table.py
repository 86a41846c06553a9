"""
Stellar Property Table
======================
Hand-curated main-sequence data and the interpolator built on top of it.

Every quantity is in solar units except temperature (Kelvin) and lifetime
(billions of years in the table, millions of years in `StellarProperties`).
Between tabulated masses each quantity is interpolated linearly and
independently; outside the table the nearest edge row is used.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from stellarevolution.config import MIN_TABLE_MASS, MAX_TABLE_MASS
from stellarevolution.utils import clamp, gyr_to_myr

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StellarTableRow:
    mass: float  # Msun
    temperature: float  # K
    radius: float  # Rsun
    luminosity: float  # Lsun
    lifetime_gyr: float


@dataclass(frozen=True)
class StellarProperties:
    """Physical properties of a star as shown to the user."""
    temperature: float  # K
    radius: float  # Rsun
    luminosity: float  # Lsun
    lifetime_myr: float


# Empirical data based on stellar observations
STELLAR_TABLE: tuple[StellarTableRow, ...] = (
    StellarTableRow(0.1, 2800.0, 0.16, 0.000008, 10000.0),
    StellarTableRow(0.2, 3200.0, 0.25, 0.00008, 2500.0),
    StellarTableRow(0.3, 3400.0, 0.36, 0.0004, 1100.0),
    StellarTableRow(0.5, 3800.0, 0.54, 0.003, 200.0),
    StellarTableRow(0.7, 4200.0, 0.70, 0.02, 50.0),
    StellarTableRow(0.8, 4600.0, 0.84, 0.04, 20.0),
    StellarTableRow(1.0, 5800.0, 1.00, 1.0, 10.0),  # Sun
    StellarTableRow(1.2, 6200.0, 1.15, 2.2, 5.0),
    StellarTableRow(1.5, 6800.0, 1.35, 5.4, 2.5),
    StellarTableRow(2.0, 8200.0, 1.80, 16.0, 1.0),
    StellarTableRow(3.0, 11000.0, 2.50, 60.0, 0.37),
    StellarTableRow(5.0, 17000.0, 3.80, 600.0, 0.1),
    StellarTableRow(8.0, 25000.0, 5.50, 4000.0, 0.03),
    StellarTableRow(10.0, 30000.0, 6.50, 10000.0, 0.02),
    StellarTableRow(15.0, 35000.0, 8.50, 30000.0, 0.01),
    StellarTableRow(20.0, 40000.0, 10.0, 70000.0, 0.007),
    StellarTableRow(25.0, 44000.0, 12.0, 120000.0, 0.005),
    StellarTableRow(30.0, 46000.0, 14.0, 200000.0, 0.004),
    StellarTableRow(40.0, 50000.0, 18.0, 400000.0, 0.003),
    StellarTableRow(50.0, 52000.0, 22.0, 700000.0, 0.002),
)

# Column views used by the interpolator
MASSES: npt.NDArray[np.float64] = np.array([row.mass for row in STELLAR_TABLE])
TEMPERATURES: npt.NDArray[np.float64] = np.array([row.temperature for row in STELLAR_TABLE])
RADII: npt.NDArray[np.float64] = np.array([row.radius for row in STELLAR_TABLE])
LUMINOSITIES: npt.NDArray[np.float64] = np.array([row.luminosity for row in STELLAR_TABLE])
LIFETIMES_GYR: npt.NDArray[np.float64] = np.array([row.lifetime_gyr for row in STELLAR_TABLE])


def _bracket(mass: float) -> tuple[StellarTableRow, StellarTableRow]:
    """Return the first pair of adjacent rows with lower.mass <= mass <= upper.mass."""
    index = int(np.searchsorted(MASSES, mass, side="left"))
    index = min(max(index, 1), len(STELLAR_TABLE) - 1)
    return STELLAR_TABLE[index - 1], STELLAR_TABLE[index]


def lookup(mass: float) -> StellarProperties:
    """
    Interpolate the stellar table at the given mass.

    Args:
        mass: Initial stellar mass in solar masses. Values outside the table
            range are clamped to the nearest edge row.

    Returns:
        Base (main-sequence) properties of the star.

    Raises:
        ValueError: If the mass is NaN.
    """
    if math.isnan(mass):
        raise ValueError("Stellar mass must be a number, got NaN.")

    m = clamp(float(mass), MIN_TABLE_MASS, MAX_TABLE_MASS)
    lower, upper = _bracket(m)

    # Table nodes are returned verbatim
    for row in (lower, upper):
        if row.mass == m:
            return StellarProperties(
                temperature=row.temperature,
                radius=row.radius,
                luminosity=row.luminosity,
                lifetime_myr=gyr_to_myr(row.lifetime_gyr),
            )

    fraction = (m - lower.mass) / (upper.mass - lower.mass)

    def lerp(a: float, b: float) -> float:
        return a + fraction * (b - a)

    return StellarProperties(
        temperature=lerp(lower.temperature, upper.temperature),
        radius=lerp(lower.radius, upper.radius),
        luminosity=lerp(lower.luminosity, upper.luminosity),
        lifetime_myr=gyr_to_myr(lerp(lower.lifetime_gyr, upper.lifetime_gyr)),
    )


def lifetime_myr(mass: float) -> float:
    """Total lifetime of a star of the given mass in millions of years."""
    return lookup(mass).lifetime_myr


def plot_table() -> None:
    """
    Plot the tabulated quantities against mass together with the interpolant.
    """
    masses = np.linspace(MIN_TABLE_MASS, MAX_TABLE_MASS, 2000)
    interpolated = [lookup(m) for m in masses]

    columns = (
        ("Temperature (K)", TEMPERATURES, [p.temperature for p in interpolated]),
        ("Radius (R☉)", RADII, [p.radius for p in interpolated]),
        ("Luminosity (L☉)", LUMINOSITIES, [p.luminosity for p in interpolated]),
        ("Lifetime (Myr)", LIFETIMES_GYR * 1000.0, [p.lifetime_myr for p in interpolated]),
    )

    plt.rcParams["figure.constrained_layout.use"] = True
    fig, axes = plt.subplots(2, 2, figsize=(10, 7))

    for ax, (label, tabulated, curve) in zip(axes.flat, columns):
        ax.loglog(masses, curve, 'b', lw=1.5, label="interpolated")
        ax.loglog(MASSES, tabulated, 'ro', ms=4, label="table")
        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)
        ax.set_xlabel("Mass (M☉)")
        ax.set_ylabel(label)
        ax.legend()

    fig.suptitle("Stellar Table")
    plt.show()


if __name__ == "__main__":
    plot_table()
