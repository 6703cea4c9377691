from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.conversion import Conversion, TempScale, convert

__all__ = [
    # config
    "AppSettings",
    # conversion
    "Conversion",
    "TempScale",
    "convert",
]
