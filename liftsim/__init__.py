"""Threaded elevator and dining-philosophers simulations with a small task kernel."""

__version__ = "0.1.0"