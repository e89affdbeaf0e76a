"""Event selections on the reconstructed particle bank."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from clas12tools.bank import Bank, Event
from clas12tools.constants import ParticleCode

_EVENT_LIMIT = 50_000_000
_DC_STATUS_LOW = 2000
_DC_STATUS_HIGH = 4000


def has_electron_in_dc(bank: Bank) -> bool:
    """Return whether any particle is an electron seen in the forward detector."""
    return any(
        int(bank.get("pid", row)) == ParticleCode.ELECTRON
        and _DC_STATUS_LOW <= abs(int(bank.get("status", row))) < _DC_STATUS_HIGH
        for row in range(len(bank))
    )


def filter_events(events: Iterable[Event]) -> Iterator[Event]:
    """Yield the events that hold an electron in the forward detector.

    At most the first 50,000,000 events are looked at.
    """
    for event in islice(events, _EVENT_LIMIT):
        if has_electron_in_dc(event.bank("REC::Particle")):
            yield event


def events_with_particles(events: Iterable[Event]) -> Iterator[Event]:
    """Yield, for each event with reconstructed particles, an event of that bank alone."""
    for event in events:
        particles = event.bank("REC::Particle")
        if len(particles) > 0:
            yield Event([particles])