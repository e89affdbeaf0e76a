"""Vertex time differences of charged particles under proton and pion hypotheses."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from clas12tools.constants import MASS_P, MASS_PIP
from clas12tools.histogram import Histogram2D
from clas12tools.kinematics import delta_t, vertex_time

_DETECTORS = (("1a", "ftof_1a"), ("1b", "ftof_1b"), ("2", "ftof_2"), ("ctof", "ctof"))
_HYPOTHESES = (
    ("prot", "#Deltat Proton"),
    ("pion", "#Deltat #pi^{+}"),
    ("pion_m", "#Deltat #pi^{-}"),
)


def _create() -> dict[str, Histogram2D]:
    histograms: dict[str, Histogram2D] = {}
    for key, _ in _DETECTORS:
        for suffix, title in _HYPOTHESES:
            name = f"deltaT_{key}_{suffix}"
            histograms[name] = Histogram2D(name, title, 500, 0, 7.0, 500, -10, 10)
    for suffix, title in _HYPOTHESES:
        name = f"deltaT_ctof_{suffix}_component"
        histograms[name] = Histogram2D(name, f"{title} vs Component", 50, 0, 50, 500, -10, 10)
    histograms["deltaT_component"] = Histogram2D(
        "deltaT_component", "#Deltat vs Component", 50, 0, 50, 500, -10, 10
    )
    return histograms


def _event_vertex(row: Mapping[str, Any]) -> float | None:
    for panel in ("ftof_1b", "ftof_1a"):
        time = float(row[f"sc_{panel}_time"][0])
        if not math.isnan(time):
            return vertex_time(time, float(row[f"sc_{panel}_path"][0]), 1.0)
    return None


def delta_t_histograms(events: Iterable[Mapping[str, Any]]) -> dict[str, Histogram2D]:
    """Fill delta-t against momentum for each time-of-flight system, by name.

    The event vertex time comes from the first particle's FTOF 1b hit, or
    its 1a hit when 1b is missing; events with neither are skipped.
    Positive particles are filled as protons and pi+, negative ones as pi-.
    """
    histograms = _create()
    for row in events:
        if len(row["pid"]) == 0:
            continue
        vertex = _event_vertex(row)
        if vertex is None:
            continue
        for part, momentum in enumerate(row["p"]):
            momentum = float(momentum)
            if momentum == 0:
                continue
            charge = int(row["charge"][part])

            def dt(panel: str, mass: float) -> float:
                return delta_t(vertex, momentum, float(row[f"sc_{panel}_time"][part]),
                               float(row[f"sc_{panel}_path"][part]), mass)

            component = float(row["sc_ctof_component"][part])
            histograms["deltaT_component"].fill(component, dt("ctof", MASS_P))
            histograms["deltaT_component"].fill(component, dt("ctof", MASS_PIP))
            if charge == 1:
                for key, panel in _DETECTORS:
                    histograms[f"deltaT_{key}_prot"].fill(momentum, dt(panel, MASS_P))
                    histograms[f"deltaT_{key}_pion"].fill(momentum, dt(panel, MASS_PIP))
                histograms["deltaT_ctof_prot_component"].fill(component, dt("ctof", MASS_P))
                histograms["deltaT_ctof_pion_component"].fill(component, dt("ctof", MASS_PIP))
            elif charge == -1:
                for key, panel in _DETECTORS:
                    histograms[f"deltaT_{key}_pion_m"].fill(momentum, dt(panel, MASS_PIP))
                histograms["deltaT_ctof_pion_m_component"].fill(
                    component, dt("ctof", MASS_PIP)
                )
    return histograms