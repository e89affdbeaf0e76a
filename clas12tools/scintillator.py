"""Per-particle scintillator columns from ``REC::Scintillator`` and its extras."""

from __future__ import annotations

import math
from typing import Any

from clas12tools.bank import Event
from clas12tools.constants import Detector, ScintillatorLayer

_FTOF_PARTS = {
    ScintillatorLayer.FTOF_1A: "ftof_1a",
    ScintillatorLayer.FTOF_1B: "ftof_1b",
    ScintillatorLayer.FTOF_2: "ftof_2",
}

_FLOAT_FIELDS = (
    ("energy", 6),
    ("time", 7),
    ("path", 8),
    ("x", 10),
    ("y", 11),
    ("z", 12),
    ("hx", 13),
    ("hy", 14),
    ("hz", 15),
)

_PINDEX, _DETECTOR, _SECTOR, _LAYER, _COMPONENT = 1, 2, 3, 4, 5


def _part(detector: int, layer: int) -> str | None:
    if detector == Detector.FTOF:
        return _FTOF_PARTS.get(layer)
    if detector == Detector.CTOF:
        return "ctof"
    if detector == Detector.CND:
        return "cnd"
    return None


def scintillator_columns(event: Event, count: int) -> dict[str, list[Any]]:
    """Return the scintillator columns for ``count`` particles.

    Forward time-of-flight hits go to the panel named by their layer, central
    hits to the ``ctof`` and ``cnd`` columns; each particle takes the last
    matching row. ``REC::ScintExtras`` rows are read in step with the
    scintillator rows. Missing values are NaN and missing integers -1.
    """
    if count < 0:
        raise ValueError(f"particle count must not be negative, got {count}")
    bank = event.bank("REC::Scintillator")
    extras = event.bank("REC::ScintExtras")

    columns: dict[str, list[Any]] = {}
    for part in ("ftof_1a", "ftof_1b", "ftof_2", "ctof", "cnd"):
        if part.startswith("ftof"):
            columns[f"sc_{part}_sec"] = [-1] * count
        if part == "cnd":
            columns["sc_cnd_layer"] = [-1] * count
        columns[f"sc_{part}_component"] = [-1] * count
        for field, _ in _FLOAT_FIELDS:
            columns[f"sc_{part}_{field}"] = [math.nan] * count
    columns["sc_extras_dedx"] = [math.nan] * count
    columns["sc_extras_size"] = [-1] * count
    columns["sc_extras_layermult"] = [math.nan] * count

    hits = [
        (row, int(bank.get(_PINDEX, row)), int(bank.get(_DETECTOR, row)),
         int(bank.get(_LAYER, row)))
        for row in range(len(bank))
    ] if count else []
    has_extras = len(extras) > 0

    for particle in range(count):
        for row, pindex, detector, layer in hits:
            if pindex != particle:
                continue
            part = _part(detector, layer)
            if part is not None:
                if part.startswith("ftof"):
                    columns[f"sc_{part}_sec"][particle] = int(bank.get(_SECTOR, row))
                if part == "cnd":
                    columns["sc_cnd_layer"][particle] = layer
                columns[f"sc_{part}_component"][particle] = int(bank.get(_COMPONENT, row))
                for field, position in _FLOAT_FIELDS:
                    columns[f"sc_{part}_{field}"][particle] = float(bank.get(position, row))
            if has_extras:
                columns["sc_extras_dedx"][particle] = float(extras.get(0, row))
                columns["sc_extras_size"][particle] = int(extras.get(1, row))
                columns["sc_extras_layermult"][particle] = float(int(extras.get(2, row)))
    return columns