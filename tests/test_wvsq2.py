import numpy as np
import pytest

from clas12tools.constants import MASS_E
from clas12tools.kinematics import LorentzVector, q2, w
from clas12tools.wvsq2 import fill_w_q2


def _row(pid=11, px=0.3, py=0.0, pz=1.8, sector=2):
    return {"pid": [pid], "px": [px], "py": [py], "pz": [pz], "ec_pcal_sec": [sector]}


def test_sector_histograms_filled():
    histograms = fill_w_q2([_row(sector=2)], 2.2)
    assert [h.entries for h in histograms.w_sectors] == [0, 1, 0, 0, 0, 0]
    assert [h.entries for h in histograms.wq2_sectors] == [0, 1, 0, 0, 0, 0]
    assert histograms.w.entries == 0
    assert histograms.wq2.entries == 0


def test_filled_bin_matches_kinematics():
    histograms = fill_w_q2([_row(sector=3)], 2.2)
    beam = LorentzVector(0.0, 0.0, 2.2, 2.2)
    electron = LorentzVector.from_xyzm(0.3, 0.0, 1.8, MASS_E)
    w_value = w(beam, electron)
    q2_value = q2(beam, electron)
    hist = histograms.w_sectors[2]
    index = np.searchsorted(hist.edges, w_value, side="right") - 1
    assert hist.counts[index] == 1
    hist2 = histograms.wq2_sectors[2]
    xi = np.searchsorted(hist2.xedges, w_value, side="right") - 1
    yi = np.searchsorted(hist2.yedges, q2_value, side="right") - 1
    assert hist2.counts[xi, yi] == 1


def test_no_sector_goes_to_overall():
    histograms = fill_w_q2([_row(sector=-1), _row(sector=0)], 2.2)
    assert histograms.w.entries == 2
    assert histograms.wq2.entries == 2
    assert sum(h.entries for h in histograms.w_sectors) == 0


def test_non_electron_and_empty_skipped():
    empty = {"pid": [], "px": [], "py": [], "pz": [], "ec_pcal_sec": []}
    histograms = fill_w_q2([_row(pid=2212), empty], 2.2)
    assert histograms.w.entries == 0
    assert sum(h.entries for h in histograms.w_sectors) == 0


def test_bad_sector_raises():
    with pytest.raises(ValueError):
        fill_w_q2([_row(sector=7)], 2.2)


def test_names():
    histograms = fill_w_q2([], 2.2)
    assert [h.name for h in histograms.w_sectors] == [f"w_{i}" for i in range(6)]
    assert histograms.wq2_sectors[0].title == "W vs Q^{2} Sector: 1"
    assert histograms.w.title == "W no Sector"