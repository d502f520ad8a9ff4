"""Dining philosophers simulation with threaded philosophers, a death monitor and small text helpers."""

__version__ = "0.1.0"