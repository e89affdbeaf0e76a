"""W and Q^2 distributions of the scattered electron, overall and per sector."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from clas12tools.constants import MASS_E, ParticleCode
from clas12tools.histogram import Histogram1D, Histogram2D
from clas12tools.kinematics import LorentzVector, q2, w

SECTORS = 6


def _wq2(name: str, title: str) -> Histogram2D:
    return Histogram2D(name, title, 500, 0, 3.5, 500, 0, 6.0)


def _w(name: str, title: str) -> Histogram1D:
    return Histogram1D(name, title, 500, 0, 3.5)


@dataclass
class WQ2Histograms:
    """W and W-versus-Q^2 histograms without a sector and for each of six sectors."""

    wq2: Histogram2D = field(default_factory=lambda: _wq2("wq2", "W vs Q^{2} no Sector"))
    w: Histogram1D = field(default_factory=lambda: _w("w", "W no Sector"))
    wq2_sectors: list[Histogram2D] = field(default_factory=lambda: [
        _wq2(f"wq2_{i}", f"W vs Q^{{2}} Sector: {i + 1}") for i in range(SECTORS)
    ])
    w_sectors: list[Histogram1D] = field(default_factory=lambda: [
        _w(f"w_{i}", f"W Sector: {i + 1}") for i in range(SECTORS)
    ])


def fill_w_q2(events: Iterable[Mapping[str, Any]], beam: float = 2.2) -> WQ2Histograms:
    """Fill W and Q^2 for events whose first particle is an electron.

    Electrons with a calorimeter sector go to that sector's histograms,
    the others to the histograms without a sector.
    """
    histograms = WQ2Histograms()
    e_mu = LorentzVector(0.0, 0.0, beam, beam)
    for row in events:
        pid = row["pid"]
        if len(pid) == 0 or pid[0] != ParticleCode.ELECTRON:
            continue
        e_mu_prime = LorentzVector.from_xyzm(
            float(row["px"][0]), float(row["py"][0]), float(row["pz"][0]), MASS_E
        )
        w_value = w(e_mu, e_mu_prime)
        q2_value = q2(e_mu, e_mu_prime)
        sector = int(row["ec_pcal_sec"][0])
        if sector > 0:
            if sector > SECTORS:
                raise ValueError(f"sector must be between 1 and {SECTORS}, got {sector}")
            histograms.w_sectors[sector - 1].fill(w_value)
            histograms.wq2_sectors[sector - 1].fill(w_value, q2_value)
        else:
            histograms.wq2.fill(w_value, q2_value)
            histograms.w.fill(w_value)
    return histograms