"""HARVEST: bounded-depth vocabulary crawler."""

__version__ = "0.1.0"
