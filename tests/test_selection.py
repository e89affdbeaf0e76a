import pytest

from clas12tools.bank import Bank, Event
from clas12tools.selection import events_with_particles, filter_events, has_electron_in_dc


def _particles(rows):
    return Bank("REC::Particle", ("pid", "status"), rows)


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([(11, 2100)], True),
        ([(11, -2100)], True),
        ([(11, 3999)], True),
        ([(11, 4000)], False),
        ([(11, 1999)], False),
        ([(2212, 2100)], False),
        ([(2212, 2100), (11, -3000)], True),
        ([], False),
    ],
)
def test_has_electron_in_dc(rows, expected):
    assert has_electron_in_dc(_particles(rows)) is expected


def test_filter_events_keeps_selected():
    good = Event([_particles([(11, 2000)]), Bank("REC::Event", ("category",), [(1,)])])
    bad = Event([_particles([(211, 2000)])])
    empty = Event()
    kept = list(filter_events([good, bad, empty]))
    assert kept == [good]
    assert "REC::Event" in kept[0]


def test_events_with_particles():
    particles = _particles([(11, 2000)])
    full = Event([particles, Bank("REC::Event", ("category",), [(1,)])])
    result = list(events_with_particles([full, Event()]))
    assert len(result) == 1
    assert len(result[0]) == 1
    assert result[0].bank("REC::Particle") is particles
    assert "REC::Event" not in result[0]


def test_missing_column_raises():
    bank = Bank("REC::Particle", ("pid",), [(11,)])
    with pytest.raises(KeyError):
        has_electron_in_dc(bank)