import math

import numpy as np

from clas12tools.constants import MASS_P, MASS_PIP
from clas12tools.deltat import delta_t_histograms
from clas12tools.kinematics import delta_t, vertex_time

NAN = math.nan


def _row(p=(2.0, 1.0), charge=(-1, 1), t1b=(20.0, 25.0), path1b=(600.0, 650.0),
         t1a=(NAN, NAN), path1a=(NAN, NAN)):
    n = len(p)
    return {
        "pid": [11, 2212][:n], "p": list(p), "charge": list(charge),
        "sc_ftof_1a_time": list(t1a), "sc_ftof_1a_path": list(path1a),
        "sc_ftof_1b_time": list(t1b), "sc_ftof_1b_path": list(path1b),
        "sc_ftof_2_time": [NAN] * n, "sc_ftof_2_path": [NAN] * n,
        "sc_ctof_time": [NAN] * n, "sc_ctof_path": [NAN] * n,
        "sc_ctof_component": [-1] * n,
    }


def _count(hist, x, y):
    xi = np.searchsorted(hist.xedges, x, side="right") - 1
    yi = np.searchsorted(hist.yedges, y, side="right") - 1
    return hist.counts[xi, yi]


def test_histogram_names():
    names = list(delta_t_histograms([]))
    assert "deltaT_1a_prot" in names
    assert "deltaT_ctof_pion_m_component" in names
    assert "deltaT_component" in names
    assert len(names) == 16


def test_positive_and_negative_particles():
    histograms = delta_t_histograms([_row()])
    vertex = vertex_time(20.0, 600.0, 1.0)
    assert histograms["deltaT_1b_prot"].entries == 1
    assert histograms["deltaT_1b_pion"].entries == 1
    assert histograms["deltaT_1b_pion_m"].entries == 1
    assert histograms["deltaT_1a_pion_m"].entries == 1
    assert histograms["deltaT_component"].entries == 4
    proton = delta_t(vertex, 1.0, 25.0, 650.0, MASS_P)
    assert _count(histograms["deltaT_1b_prot"], 1.0, proton) == 1
    pion = delta_t(vertex, 2.0, 20.0, 600.0, MASS_PIP)
    assert _count(histograms["deltaT_1b_pion_m"], 2.0, pion) == 1


def test_missing_values_fall_outside_range():
    histograms = delta_t_histograms([_row()])
    assert histograms["deltaT_1a_pion_m"].counts.sum() == 0
    assert histograms["deltaT_1a_pion_m"].flow == 1.0


def test_zero_momentum_is_skipped():
    histograms = delta_t_histograms([_row(p=(2.0, 0.0))])
    assert histograms["deltaT_1b_prot"].entries == 0
    assert histograms["deltaT_component"].entries == 2


def test_no_vertex_skips_event():
    histograms = delta_t_histograms([_row(t1b=(NAN, NAN))])
    assert all(h.entries == 0 for h in histograms.values())


def test_falls_back_to_1a_vertex():
    row = _row(t1b=(NAN, NAN), t1a=(20.0, 25.0), path1a=(600.0, 650.0))
    histograms = delta_t_histograms([row])
    vertex = vertex_time(20.0, 600.0, 1.0)
    proton = delta_t(vertex, 1.0, 25.0, 650.0, MASS_P)
    assert _count(histograms["deltaT_1a_prot"], 1.0, proton) == 1