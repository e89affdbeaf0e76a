"""Per-particle electromagnetic calorimeter columns from ``REC::Calorimeter``."""

from __future__ import annotations

import math
from typing import Any

from clas12tools.bank import Event
from clas12tools.constants import CalorimeterLayer, Detector

_PARTS = {
    CalorimeterLayer.PCAL: "pcal",
    CalorimeterLayer.EC_INNER: "ecin",
    CalorimeterLayer.EC_OUTER: "ecout",
}

# Output field and bank column position of every floating-point value copied
# from a matching calorimeter row.
_FLOAT_FIELDS = (
    ("time", 6),
    ("path", 7),
    ("x", 9),
    ("y", 10),
    ("z", 11),
    ("hx", 12),
    ("hy", 13),
    ("hz", 14),
    ("lu", 15),
    ("lv", 16),
    ("lw", 17),
    ("du", 18),
    ("dv", 19),
    ("dw", 20),
    ("m2u", 21),
    ("m2v", 22),
    ("m2w", 23),
    ("m3u", 24),
    ("m3v", 25),
    ("m3w", 26),
)

_PINDEX, _DETECTOR, _SECTOR, _LAYER, _ENERGY = 1, 2, 3, 4, 5


def _nonzero_or_nan(value: float) -> float:
    return value if value != 0.0 else math.nan


def calorimeter_columns(event: Event, count: int) -> dict[str, list[Any]]:
    """Return the calorimeter columns for ``count`` particles.

    Each particle takes the values of the last ``ECAL`` row that points at it,
    per calorimeter part; missing values are NaN and missing sectors -1.
    Energy sums run on from one particle to the next, as the converter
    has always written them.
    """
    if count < 0:
        raise ValueError(f"particle count must not be negative, got {count}")
    bank = event.bank("REC::Calorimeter")

    columns: dict[str, list[Any]] = {"ec_tot_energy": [math.nan] * count}
    for part in _PARTS.values():
        columns[f"ec_{part}_energy"] = [math.nan] * count
        columns[f"ec_{part}_sec"] = [-1] * count
        for field, _ in _FLOAT_FIELDS:
            columns[f"ec_{part}_{field}"] = [math.nan] * count

    hits = [
        (row, int(bank.get(_PINDEX, row)), int(bank.get(_DETECTOR, row)),
         int(bank.get(_LAYER, row)))
        for row in range(len(bank))
    ] if count else []

    part_totals = dict.fromkeys(_PARTS.values(), 0.0)
    total = 0.0
    for particle in range(count):
        for row, pindex, detector, layer in hits:
            if pindex != particle or detector != Detector.ECAL:
                continue
            energy = float(bank.get(_ENERGY, row))
            total += energy
            part = _PARTS.get(layer)
            if part is None:
                continue
            part_totals[part] += energy
            columns[f"ec_{part}_sec"][particle] = int(bank.get(_SECTOR, row))
            for field, position in _FLOAT_FIELDS:
                columns[f"ec_{part}_{field}"][particle] = float(bank.get(position, row))
        for part, energy in part_totals.items():
            columns[f"ec_{part}_energy"][particle] = _nonzero_or_nan(energy)
        columns["ec_tot_energy"][particle] = _nonzero_or_nan(total)
    return columns