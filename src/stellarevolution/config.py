"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the simulation cadence, mass bounds and asset paths
   in one place instead of scattering magic numbers across model and UI.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (stylesheet) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the application stylesheet.
    SimulationSettings: Timer cadence of the simulation clock.
    DEFAULT_SETTINGS (SimulationSettings): 100 ms ticks, 5 s per phase.
"""
import sys
import os
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/stellarevolution/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


@dataclass(frozen=True)
class SimulationSettings:
    """
    Wall-clock cadence of the simulation.

    Each evolutionary phase nominally spans `phase_duration_ms` of real time,
    delivered in ticks of `tick_interval_ms`.
    """
    tick_interval_ms: int = 100
    phase_duration_ms: int = 5000

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_interval_ms} ms.")
        if self.phase_duration_ms < self.tick_interval_ms:
            raise ValueError(
                f"Phase duration ({self.phase_duration_ms} ms) must span at least "
                f"one tick ({self.tick_interval_ms} ms)."
            )

    @property
    def ticks_per_phase(self) -> int:
        return self.phase_duration_ms // self.tick_interval_ms


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "style.qss")

DEFAULT_SETTINGS = SimulationSettings()

# Range covered by the stellar table; lookups are clamped to it
MIN_TABLE_MASS: float = 0.1
MAX_TABLE_MASS: float = 50.0

# Range offered by the mass slider (solar masses)
MIN_SLIDER_MASS: float = 0.5
MAX_SLIDER_MASS: float = 50.0
MASS_STEP: float = 0.5

DEFAULT_MASS: float = 1.0

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
