"""Fahrenheit/Celsius temperature conversion."""

from __future__ import annotations

from tempconv._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
]
