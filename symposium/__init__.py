"""Dining philosophers simulation with a monitor and an ordered event log."""

__version__ = "0.1.0"