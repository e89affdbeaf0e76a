import numpy as np

from clas12tools.pvsb import momentum_vs_beta


def _row(p, beta, charge):
    return {"pid": [0] * len(p), "p": p, "beta": beta, "charge": charge}


def test_first_particle_is_skipped():
    histogram = momentum_vs_beta([_row([1.0], [0.9], [1])])
    assert histogram.entries == 0


def test_charged_particles_filled():
    histogram = momentum_vs_beta([_row([1.0, 1.5, 2.0], [0.9, 0.8, 0.7], [-1, 1, -1])])
    assert histogram.entries == 2
    xi = np.searchsorted(histogram.xedges, 1.5, side="right") - 1
    yi = np.searchsorted(histogram.yedges, 0.8, side="right") - 1
    assert histogram.counts[xi, yi] == 1


def test_neutral_and_slow_particles_left_out():
    histogram = momentum_vs_beta([_row([1.0, 1.5, 2.0], [0.9, 0.01, 0.7], [1, 1, 0])])
    assert histogram.entries == 0


def test_name():
    histogram = momentum_vs_beta([])
    assert histogram.name == "MomVsBeta"
    assert histogram.title == "Momentum vs Beta"