"""Per-particle Cherenkov counter columns from ``REC::Cherenkov``."""

from __future__ import annotations

import math
from typing import Any

from clas12tools.bank import Event
from clas12tools.constants import Detector

_PARTS = {
    Detector.HTCC: "htcc",
    Detector.LTCC: "ltcc",
    Detector.RICH: "rich",
}

_FLOAT_FIELDS = (
    ("nphe", 4),
    ("time", 5),
    ("path", 6),
    ("theta", 11),
    ("phi", 12),
    ("x", 7),
    ("y", 8),
    ("z", 9),
)

_PINDEX, _DETECTOR, _SECTOR, _NPHE = 1, 2, 3, 4


def cherenkov_columns(event: Event, count: int) -> dict[str, list[Any]]:
    """Return the Cherenkov columns for ``count`` particles.

    Each particle takes the values of the last row of each counter that
    points at it; missing values are NaN and missing sectors -1. The
    photoelectron sum runs on from one particle to the next, as the
    converter has always written it.
    """
    if count < 0:
        raise ValueError(f"particle count must not be negative, got {count}")
    bank = event.bank("REC::Cherenkov")

    columns: dict[str, list[Any]] = {"cc_nphe_tot": [math.nan] * count}
    for part in ("ltcc", "htcc", "rich"):
        columns[f"cc_{part}_sec"] = [-1] * count
        for field, _ in _FLOAT_FIELDS:
            columns[f"cc_{part}_{field}"] = [math.nan] * count

    hits = [
        (row, int(bank.get(_PINDEX, row)), int(bank.get(_DETECTOR, row)))
        for row in range(len(bank))
    ] if count else []

    nphe_total = 0.0
    for particle in range(count):
        for row, pindex, detector in hits:
            if pindex != particle:
                continue
            part = _PARTS.get(detector)
            if part is None:
                continue
            nphe_total += float(bank.get(_NPHE, row))
            columns[f"cc_{part}_sec"][particle] = int(bank.get(_SECTOR, row))
            for field, position in _FLOAT_FIELDS:
                columns[f"cc_{part}_{field}"][particle] = float(bank.get(position, row))
        columns["cc_nphe_tot"][particle] = nphe_total if nphe_total != 0.0 else math.nan
    return columns