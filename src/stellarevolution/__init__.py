"""
Stellar Evolution Simulator
===========================

Interactive visualisation of how a star lives and dies depending on its
initial mass.

Subpackages:
- stellarevolution.model      : stellar table, phases, property adjustment, state
- stellarevolution.controller : the timer-driven simulation clock
- stellarevolution.app        : PySide6 user interface
"""

__version__ = "0.1.0"
