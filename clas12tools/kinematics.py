"""Four-vectors and the kinematic quantities used by the analysis tools."""

from __future__ import annotations

import math
from dataclasses import dataclass

from clas12tools.constants import MASS_P

# Speed of light in cm/ns.
C_SPECIAL_UNITS = 29.9792458


@dataclass(frozen=True)
class LorentzVector:
    """A four-vector (px, py, pz, e) with metric (+, -, -, -)."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    @classmethod
    def from_xyzm(cls, x: float, y: float, z: float, m: float) -> LorentzVector:
        """Build a vector from momentum components and a mass."""
        return cls(x, y, z, math.sqrt(x * x + y * y + z * z + m * m))

    def mag2(self) -> float:
        """Return the invariant square e^2 - p^2."""
        return self.e * self.e - (self.px * self.px + self.py * self.py + self.pz * self.pz)

    def mag(self) -> float:
        """Return the invariant mass; negative for space-like vectors."""
        square = self.mag2()
        return -math.sqrt(-square) if square < 0.0 else math.sqrt(square)

    def __add__(self, other: LorentzVector) -> LorentzVector:
        if not isinstance(other, LorentzVector):
            return NotImplemented
        return LorentzVector(self.px + other.px, self.py + other.py,
                             self.pz + other.pz, self.e + other.e)

    def __sub__(self, other: LorentzVector) -> LorentzVector:
        if not isinstance(other, LorentzVector):
            return NotImplemented
        return LorentzVector(self.px - other.px, self.py - other.py,
                             self.pz - other.pz, self.e - other.e)


def q2(e_mu: LorentzVector, e_mu_prime: LorentzVector) -> float:
    """Return Q^2 = -(e - e')^2 for a beam and a scattered electron."""
    return -(e_mu - e_mu_prime).mag2()


def w(e_mu: LorentzVector, e_mu_prime: LorentzVector) -> float:
    """Return the invariant mass W of the virtual photon and a proton at rest."""
    target = LorentzVector.from_xyzm(0.0, 0.0, 0.0, MASS_P)
    return (target + (e_mu - e_mu_prime)).mag()


def vertex_time(sc_time: float, sc_pathlength: float, beta: float) -> float:
    """Return the time at the vertex of a hit seen at ``sc_time`` after ``sc_pathlength``."""
    return sc_time - sc_pathlength / (beta * C_SPECIAL_UNITS)


def delta_t(vertex: float, momentum: float, sc_time: float, sc_pathlength: float,
            mass: float) -> float:
    """Return the vertex time difference assuming a particle of ``mass``."""
    beta = 1.0 / math.sqrt(1.0 + (mass / momentum) * (mass / momentum))
    return vertex - vertex_time(sc_time, sc_pathlength, beta)