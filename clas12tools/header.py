"""Per-event header information: event, run, helicity and simulation banks."""

from __future__ import annotations

import math
from typing import Any

from clas12tools.bank import Bank, Event

_NO_START_TIME = -1000
_NO_FT_CATEGORY = -9999
_VALID_HELICITIES = (1, -1)
_MC_PARTICLE_FIELDS = ("pid", "px", "py", "pz", "vx", "vy", "vz", "vt")


def _filled(event: Event, name: str) -> Bank | None:
    bank = event.bank(name)
    return bank if len(bank) else None


def event_info(event: Event) -> dict[str, Any] | None:
    """Read the first row of ``REC::Event``; ``None`` when the bank is empty.

    A start time of -1000 marks a missing value and becomes NaN.
    """
    bank = _filled(event, "REC::Event")
    if bank is None:
        return None
    start_time = float(bank.get(4, 0))
    return {
        "category": int(bank.get(0, 0)),
        "topology": int(bank.get(1, 0)),
        "beamCharge": float(bank.get(2, 0)),
        "liveTime": float(bank.get(3, 0)),
        "startTime": start_time if start_time != _NO_START_TIME else math.nan,
        "RFTime": float(bank.get(5, 0)),
        "helicity": int(bank.get(6, 0)),
        "helicityRaw": int(bank.get(7, 0)),
        "procTime": float(bank.get(8, 0)),
    }


def ft_event_info(event: Event) -> dict[str, Any]:
    """Read the forward-tagger event header, with defaults when it is absent."""
    bank = _filled(event, "RECFT::Event")
    if bank is None:
        return {"ft_category": _NO_FT_CATEGORY, "ft_startTime": math.nan}
    return {
        "ft_category": int(bank.get("category", 0)),
        "ft_startTime": float(bank.get("startTime", 0)),
    }


def run_config(event: Event) -> dict[str, Any] | None:
    """Read the first row of ``RUN::config``; ``None`` when the bank is empty."""
    bank = _filled(event, "RUN::config")
    if bank is None:
        return None
    return {
        "run": int(bank.get(0, 0)),
        "event": int(bank.get(1, 0)),
        "unixtime": int(bank.get(2, 0)),
        "trigger": int(bank.get(3, 0)),
        "timestamp": int(bank.get(4, 0)),
        "type": int(bank.get(5, 0)),
        "mode": int(bank.get(6, 0)),
        "torus": float(bank.get(7, 0)),
        "solenoid": float(bank.get(8, 0)),
    }


def helicity_flip(event: Event) -> dict[str, Any] | None:
    """Read ``HEL::flip`` when it holds a helicity of +1 or -1, else ``None``."""
    bank = _filled(event, "HEL::flip")
    if bank is None or int(bank.get(3, 0)) not in _VALID_HELICITIES:
        return None
    return {
        "hel_run": int(bank.get(0, 0)),
        "hel_event": int(bank.get(1, 0)),
        "hel_timestamp": float(bank.get(2, 0)),
        "hel_helicity": int(bank.get(3, 0)),
        "hel_helicityRaw": int(bank.get(4, 0)),
        "hel_pair": int(bank.get(5, 0)),
        "hel_pattern": int(bank.get(6, 0)),
        "hel_status": int(bank.get(7, 0)),
    }


def mc_info(event: Event) -> dict[str, Any]:
    """Collect the simulation header, event summary and generated particles.

    Header and summary values appear only when their banks have rows; the
    generated-particle columns are always present, one entry per row.
    """
    info: dict[str, Any] = {}

    header = _filled(event, "MC::Header")
    if header is not None:
        info["mc_run"] = int(header.get(0, 0))
        info["mc_event"] = int(header.get(1, 0))
        info["mc_type"] = int(header.get(2, 0))
        info["mc_helicity"] = float(header.get(3, 0))

    summary = _filled(event, "MC::Event")
    if summary is not None:
        info["mc_npart"] = int(summary.get("npart", 0))
        info["mc_ebeam"] = float(summary.get("ebeam", 0))
        info["mc_weight"] = float(summary.get("weight", 0))

    particles = event.bank("MC::Particle")
    for position, field in enumerate(_MC_PARTICLE_FIELDS):
        convert = int if field == "pid" else float
        values = particles.column(position) if len(particles) else []
        info[f"mc_{field}"] = [convert(value) for value in values]
    return info