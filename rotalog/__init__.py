"""Discrete-event simulation of package routing between warehouses."""

__version__ = "0.1.0"
__all__ = ["__version__"]