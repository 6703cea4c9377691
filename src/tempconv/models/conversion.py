"""Pydantic models describing a single temperature conversion."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from tempconv._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius


class TempScale(StrEnum):
    """Supported temperature scales."""

    C = "C"
    F = "F"

    @classmethod
    def _missing_(cls, value: object) -> TempScale | None:
        # Accept lower-case scale names ("c", "f").
        if isinstance(value, str):
            upper = value.upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None

    @property
    def symbol(self) -> str:
        return f"°{self.value}"


def convert(value: float, source: TempScale | str, target: TempScale | str) -> float:
    """Convert *value* from the *source* scale to the *target* scale.

    Raises :class:`ValueError` only for an unrecognised scale name.
    """
    src = TempScale(source)
    dst = TempScale(target)
    if src == dst:
        return float(value)
    if src == TempScale.F:
        return fahrenheit_to_celsius(value)
    return celsius_to_fahrenheit(value)


class Conversion(BaseModel):
    """Record of one conversion: the input, both scales, and the result."""

    model_config = ConfigDict(frozen=True)

    value: float
    source: TempScale
    target: TempScale
    result: float

    @classmethod
    def build(
        cls, value: float, source: TempScale | str, target: TempScale | str
    ) -> Conversion:
        return cls(
            value=value,
            source=TempScale(source),
            target=TempScale(target),
            result=convert(value, source, target),
        )
