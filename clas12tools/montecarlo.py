"""Momentum resolution of reconstructed particles against generated ones."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from clas12tools.constants import ParticleCode
from clas12tools.histogram import Histogram1D

_HISTOGRAMS = (
    ("delta_px_e", "#Delta P_{x}/P vetrex e^{-}"),
    ("delta_py_e", "#Delta P_{y}/P vetrex e^{-}"),
    ("delta_pz_e", "#Delta P_{z}/P vetrex e^{-}"),
    ("delta_p_e", "#Delta P/P vetrex e^{-}"),
    ("delta_px_p", "#Delta P_{x}/P Particles"),
    ("delta_py_p", "#Delta P_{y}/P Particles"),
    ("delta_pz_p", "#Delta P_{z}/P Particles"),
    ("delta_p_p", "#Delta P/P Particles"),
)


def _relative(measured: float, true: float) -> float:
    """Return (measured - true) / true with floating-point division semantics."""
    difference = measured - true
    if true == 0:
        if difference == 0 or math.isnan(difference):
            return math.nan
        return math.copysign(math.inf, difference) * math.copysign(1.0, true)
    return difference / true


def _fill(histograms: list[Histogram1D], row: Mapping[str, Any], part: int, mc: int) -> None:
    mc_px = float(row["mc_px"][mc])
    mc_py = float(row["mc_py"][mc])
    mc_pz = float(row["mc_pz"][mc])
    mc_p = math.sqrt(mc_px * mc_px + mc_py * mc_py + mc_pz * mc_pz)
    measured = (row["px"][part], row["py"][part], row["pz"][part], row["p"][part])
    for histogram, value, true in zip(histograms, measured, (mc_px, mc_py, mc_pz, mc_p)):
        histogram.fill(_relative(float(value), true))


def momentum_resolution(events: Iterable[Mapping[str, Any]]) -> list[Histogram1D]:
    """Fill relative momentum differences between reconstruction and simulation.

    The first four histograms hold the leading electron compared with the
    first generated particle; the other four hold every later particle
    compared with each later generated particle of the same code.
    """
    histograms = [Histogram1D(name, title, 100, -2, 2) for name, title in _HISTOGRAMS]
    electron, others = histograms[:4], histograms[4:]
    for row in events:
        pid = row["pid"]
        if len(pid) == 0:
            continue
        if pid[0] == ParticleCode.ELECTRON:
            _fill(electron, row, 0, 0)
        for mc, mc_code in enumerate(list(row["mc_pid"])[1:], start=1):
            for part, code in enumerate(list(pid)[1:], start=1):
                if mc_code == code:
                    _fill(others, row, part, mc)
    return histograms