import numpy as np

from clas12tools.sampling import sampling_fraction


def _row(pid, p, energy):
    return {"pid": [pid], "p": [p], "ec_tot_energy": [energy]}


def test_leading_particle_filled():
    histogram = sampling_fraction([_row(11, 2.0, 0.5)])
    assert histogram.entries == 1
    xi = np.searchsorted(histogram.xedges, 2.0, side="right") - 1
    yi = np.searchsorted(histogram.yedges, 0.25, side="right") - 1
    assert histogram.counts[xi, yi] == 1


def test_photon_and_unknown_left_out():
    histogram = sampling_fraction([_row(22, 2.0, 0.5), _row(0, 2.0, 0.5)])
    assert histogram.entries == 0


def test_zero_momentum_and_empty_left_out():
    empty = {"pid": [], "p": [], "ec_tot_energy": []}
    histogram = sampling_fraction([_row(11, 0.0, 0.5), empty])
    assert histogram.entries == 0


def test_name():
    histogram = sampling_fraction([])
    assert histogram.name == "sf_hist"
    assert histogram.title == "Electron Sampling Fraction"