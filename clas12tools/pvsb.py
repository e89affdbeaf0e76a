"""Momentum against beta for charged particles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from clas12tools.histogram import Histogram2D

_MIN_BETA = 0.05


def momentum_vs_beta(events: Iterable[Mapping[str, Any]]) -> Histogram2D:
    """Fill momentum against beta for every charged particle after the first.

    Particles with beta below 0.05 are left out.
    """
    histogram = Histogram2D("MomVsBeta", "Momentum vs Beta", 500, 0, 3.5, 500, 0, 1.2)
    for row in events:
        particles = zip(row["p"], row["beta"], row["charge"])
        next(particles, None)
        for momentum, beta, charge in particles:
            if beta < _MIN_BETA or charge == 0:
                continue
            histogram.fill(float(momentum), float(beta))
    return histogram