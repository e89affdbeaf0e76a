"""Detector identifiers, layer numbers, particle codes and particle masses."""

from __future__ import annotations

from enum import IntEnum


class Region(IntEnum):
    """Bit flags for the detector region a particle was seen in."""

    FORWARD_TAGGER = 1
    FORWARD_DETECTOR = 2
    CENTRAL_DETECTOR = 4


class Detector(IntEnum):
    """Detector identifiers used in the reconstruction banks."""

    BMT = 1
    BST = 2
    CND = 3
    CTOF = 4
    CVT = 5
    DC = 6
    ECAL = 7
    FMT = 8
    FT = 9
    FTCAL = 10
    FTHODO = 11
    FTOF = 12
    FTTRK = 13
    HTCC = 15
    LTCC = 16
    RF = 17
    RICH = 18
    RTPC = 19
    HEL = 20
    BAND = 21


class ScintillatorLayer(IntEnum):
    """Layers of the forward time-of-flight system."""

    FTOF_1A = 1
    FTOF_1B = 2
    FTOF_2 = 3


class CalorimeterLayer(IntEnum):
    """First layer of each electromagnetic calorimeter part."""

    PCAL = 1
    EC_INNER = 4
    EC_OUTER = 7


class ParticleCode(IntEnum):
    """PDG particle codes."""

    PROTON = 2212
    NEUTRON = 2112
    PIP = 211
    PIM = -211
    PI0 = 111
    KP = 321
    KM = -321
    PHOTON = 22
    ELECTRON = 11


# PDG particle masses in GeV/c^2
MASS_P = 0.93827203
MASS_N = 0.93956556
MASS_E = 0.000511
MASS_PIP = 0.13957018
MASS_PIM = 0.13957018
MASS_PI0 = 0.1349766
MASS_KP = 0.493677
MASS_KM = 0.493677
MASS_G = 0.0
MASS_OMEGA = 0.78265

_MASSES = {
    ParticleCode.PROTON: MASS_P,
    ParticleCode.NEUTRON: MASS_N,
    ParticleCode.PIP: MASS_PIP,
    ParticleCode.PIM: MASS_PIM,
    ParticleCode.PI0: MASS_PI0,
    ParticleCode.KP: MASS_KP,
    ParticleCode.KM: MASS_KM,
    ParticleCode.PHOTON: MASS_G,
    ParticleCode.ELECTRON: MASS_E,
}


def mass_of(pid: int) -> float:
    """Return the mass in GeV/c^2 of the particle with PDG code ``pid``."""
    try:
        return _MASSES[ParticleCode(pid)]
    except ValueError:
        raise ValueError(f"no mass known for particle code {pid}") from None