"""Calorimeter sampling fraction of the leading particle."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from clas12tools.constants import ParticleCode
from clas12tools.histogram import Histogram2D


def sampling_fraction(events: Iterable[Mapping[str, Any]]) -> Histogram2D:
    """Fill calorimeter energy over momentum against momentum.

    Only the first particle of each event counts; photons, unidentified
    particles and particles without momentum are left out.
    """
    histogram = Histogram2D("sf_hist", "Electron Sampling Fraction", 500, 0, 5.5, 500, 0, 0.5)
    for row in events:
        pid = row["pid"]
        if len(pid) == 0:
            continue
        momentum = float(row["p"][0])
        if pid[0] in (ParticleCode.PHOTON, 0) or momentum == 0:
            continue
        histogram.fill(momentum, float(row["ec_tot_energy"][0]) / momentum)
    return histogram