"""Per-particle columns from the reconstructed particle banks."""

from __future__ import annotations

import math
from typing import Any

from clas12tools.bank import Event

_NO_BETA = -9999
_NO_FT_PID = -9999


def _beta(value: Any) -> float:
    beta = float(value)
    return beta if beta != _NO_BETA else math.nan


def particle_columns(event: Event) -> dict[str, list[Any]]:
    """Return the ``REC::Particle`` columns, one entry per particle.

    The momentum magnitude and its square are computed from the components;
    a beta of -9999 marks a missing value and becomes NaN.
    """
    bank = event.bank("REC::Particle")
    columns: dict[str, list[Any]] = {
        name: []
        for name in ("pid", "p", "p2", "px", "py", "pz", "vx", "vy", "vz", "vt",
                     "charge", "beta", "chi2pid", "status")
    }
    for row in range(len(bank)):
        px = float(bank.get("px", row))
        py = float(bank.get("py", row))
        pz = float(bank.get("pz", row))
        p2 = px * px + py * py + pz * pz
        columns["pid"].append(int(bank.get("pid", row)))
        columns["p2"].append(p2)
        columns["p"].append(math.sqrt(p2))
        columns["px"].append(px)
        columns["py"].append(py)
        columns["pz"].append(pz)
        for axis in ("vx", "vy", "vz", "vt"):
            columns[axis].append(float(bank.get(axis, row)))
        columns["charge"].append(int(bank.get("charge", row)))
        columns["beta"].append(_beta(bank.get("beta", row)))
        columns["chi2pid"].append(float(bank.get("chi2pid", row)))
        columns["status"].append(int(bank.get("status", row)))
    return columns


def ft_particle_columns(event: Event, count: int) -> dict[str, list[Any]]:
    """Return the ``RECFT::Particle`` columns.

    When the bank has no rows, ``count`` placeholder entries are returned
    instead: a pid of -9999 and NaN for every other value.
    """
    if count < 0:
        raise ValueError(f"particle count must not be negative, got {count}")
    bank = event.bank("RECFT::Particle")
    if not len(bank):
        return {
            "ft_pid": [_NO_FT_PID] * count,
            "ft_vt": [math.nan] * count,
            "ft_beta": [math.nan] * count,
            "ft_chi2pid": [math.nan] * count,
            "ft_status": [math.nan] * count,
        }
    rows = range(len(bank))
    return {
        "ft_pid": [int(bank.get("pid", row)) for row in rows],
        "ft_vt": [float(bank.get("vt", row)) for row in rows],
        "ft_beta": [_beta(bank.get("beta", row)) for row in rows],
        "ft_chi2pid": [float(bank.get("chi2pid", row)) for row in rows],
        "ft_status": [float(bank.get("status", row)) for row in rows],
    }