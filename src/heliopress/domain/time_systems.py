# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dynamical time for force-model evaluation.

UTC epochs are converted once per evaluation along the IAU chain
UTC → TAI → TT. Ephemerides are then queried with the resulting
``AstroTime`` so every body position refers to the same TT instant.
"""

import json
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

_TT_TAI_OFFSET: float = 32.184
"""TT = TAI + 32.184 s (exact, IAU 1991)."""

_J2000_JD: float = 2451545.0
"""Julian Date of J2000.0 epoch (TT)."""

_SECONDS_PER_DAY: float = 86400.0

_SECONDS_PER_JULIAN_CENTURY: float = 36525.0 * _SECONDS_PER_DAY

# --------------------------------------------------------------------------- #
# Leap second table
# --------------------------------------------------------------------------- #

_LEAP_SECOND_TABLE: Optional[list[tuple[datetime, float]]] = None


def _load_leap_seconds() -> list[tuple[datetime, float]]:
    """Load and cache leap second table from bundled JSON."""
    global _LEAP_SECOND_TABLE
    if _LEAP_SECOND_TABLE is not None:
        return _LEAP_SECOND_TABLE

    data_path = Path(__file__).parent.parent / "data" / "tai_utc.json"
    with open(data_path, encoding="utf-8") as f:
        data = json.load(f)

    table: list[tuple[datetime, float]] = []
    for entry in data["entries"]:
        year, month, day = (int(p) for p in entry["date"].split("-"))
        table.append((datetime(year, month, day, tzinfo=timezone.utc),
                      float(entry["tai_utc"])))

    _LEAP_SECOND_TABLE = table
    return _LEAP_SECOND_TABLE


def utc_to_tai_seconds(dt: datetime) -> float:
    """Return TAI-UTC offset (delta_AT) for a given UTC datetime.

    Raises ValueError for dates before 1972-01-01, where the table
    is undefined.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    table = _load_leap_seconds()

    if dt < table[0][0]:
        raise ValueError(
            f"UTC date {dt.isoformat()} is before 1972-01-01; "
            "leap second table undefined"
        )

    # Binary search for the last entry <= dt
    lo, hi = 0, len(table) - 1
    result = table[0][1]
    while lo <= hi:
        mid = (lo + hi) // 2
        if table[mid][0] <= dt:
            result = table[mid][1]
            lo = mid + 1
        else:
            hi = mid - 1

    return result


def datetime_to_jd(dt: datetime) -> float:
    """Convert a UTC datetime to Julian Date (Meeus Ch. 7)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    y = dt.year
    m = dt.month
    d = (dt.day
         + dt.hour / 24.0
         + dt.minute / 1440.0
         + dt.second / 86400.0
         + dt.microsecond / 86400_000_000.0)

    if m <= 2:
        y -= 1
        m += 12

    A = y // 100
    B = 2 - A + A // 4

    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + d + B - 1524.5)


# --------------------------------------------------------------------------- #
# AstroTime value object
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class AstroTime:
    """Terrestrial Time as seconds since J2000.0 TT (JD 2451545.0 TT)."""

    tt_j2000: float
    """Seconds since J2000.0 TT epoch."""

    @staticmethod
    def from_utc(dt: datetime) -> "AstroTime":
        """Create AstroTime from a UTC datetime.

        Naive datetimes are treated as UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)

        jd_utc = datetime_to_jd(dt)
        # TT = UTC + delta_AT + 32.184
        tt_offset_s = utc_to_tai_seconds(dt) + _TT_TAI_OFFSET
        return AstroTime(tt_j2000=(jd_utc - _J2000_JD) * _SECONDS_PER_DAY + tt_offset_s)

    def to_julian_centuries_tt(self) -> float:
        """Julian centuries of TT from J2000.0 (the 'T' of ephemeris series)."""
        return self.tt_j2000 / _SECONDS_PER_JULIAN_CENTURY

    def __add__(self, seconds: float) -> "AstroTime":
        if not isinstance(seconds, (int, float)):
            return NotImplemented
        return AstroTime(tt_j2000=self.tt_j2000 + seconds)


class UtcToTtConverter:
    """Default time-system collaborator: UTC datetime → TT AstroTime."""

    def to_dynamical_time(self, utc_epoch: datetime) -> AstroTime:
        return AstroTime.from_utc(utc_epoch)
