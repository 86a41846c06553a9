"""
The APP layer is the PySide6 user interface.
It renders the observables of the SimulationClock and forwards user input to it.
"""
