"""Fahrenheit/Celsius conversion helpers shared across the codebase."""

from __future__ import annotations


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius.

    No rounding is applied; ``nan`` and infinities pass straight through.
    """
    return (f - 32) * (5 / 9)


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return (c * 9 / 5) + 32
