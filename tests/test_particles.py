import math

import pytest

from clas12tools.bank import Bank, Event
from clas12tools.particles import ft_particle_columns, particle_columns

PARTICLE_COLUMNS = (
    "pid", "px", "py", "pz", "vx", "vy", "vz", "vt",
    "charge", "beta", "chi2pid", "status",
)
FT_COLUMNS = ("pid", "vt", "beta", "chi2pid", "status")


def _particles(*rows):
    return Event([Bank("REC::Particle", PARTICLE_COLUMNS, rows)])


ELECTRON = (11, 3.0, 4.0, 12.0, 0.1, 0.2, -2.5, 1.5, -1, 0.99, 0.5, -2110)
PROTON = (2212, 0.5, -0.25, 1.0, 0.0, 0.0, -3.0, 0.0, 1, -9999, 1.5, 2100)


def test_empty_event_gives_empty_columns():
    columns = particle_columns(Event())
    assert columns["pid"] == []
    assert all(values == [] for values in columns.values())


def test_values_are_copied_per_particle():
    columns = particle_columns(_particles(ELECTRON, PROTON))
    assert columns["pid"] == [11, 2212]
    assert columns["px"] == [3.0, 0.5]
    assert columns["vz"] == [-2.5, -3.0]
    assert columns["charge"] == [-1, 1]
    assert columns["status"] == [-2110, 2100]
    assert columns["chi2pid"] == [0.5, 1.5]


def test_momentum_magnitude():
    columns = particle_columns(_particles(ELECTRON))
    assert columns["p"] == [13.0]
    assert columns["p2"][0] == pytest.approx(columns["p"][0] ** 2)


def test_all_columns_have_same_length():
    columns = particle_columns(_particles(ELECTRON, PROTON, ELECTRON))
    assert {len(values) for values in columns.values()} == {3}


def test_missing_beta_is_nan():
    columns = particle_columns(_particles(ELECTRON, PROTON))
    assert columns["beta"][0] == 0.99
    assert math.isnan(columns["beta"][1])


def test_missing_column_raises():
    event = Event([Bank("REC::Particle", ("pid",), [(11,)])])
    with pytest.raises(KeyError):
        particle_columns(event)


def test_ft_placeholders_when_bank_empty():
    columns = ft_particle_columns(Event(), 2)
    assert columns["ft_pid"] == [-9999, -9999]
    for name in ("ft_vt", "ft_beta", "ft_chi2pid", "ft_status"):
        assert len(columns[name]) == 2
        assert all(math.isnan(value) for value in columns[name])


def test_ft_values_from_bank():
    bank = Bank("RECFT::Particle", FT_COLUMNS, [(11, 1.5, -9999, 0.25, 1000), (22, 2.0, 1.0, 0.0, 1100)])
    columns = ft_particle_columns(Event([bank]), 5)
    assert columns["ft_pid"] == [11, 22]
    assert columns["ft_vt"] == [1.5, 2.0]
    assert math.isnan(columns["ft_beta"][0])
    assert columns["ft_beta"][1] == 1.0
    assert columns["ft_status"] == [1000.0, 1100.0]


def test_ft_negative_count_raises():
    with pytest.raises(ValueError):
        ft_particle_columns(Event(), -1)