"""Conversion options and the names of the output branches they select."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Settings that control which banks are read and which branches are written."""

    is_mc: bool = False
    batch: bool = False
    test: bool = False
    good_rec: bool = False
    elec_first: bool = False
    cov: bool = False
    traj: bool = False
    small: bool = True
    max_size: float = 1500.0


_XYZ = ("x", "y", "z")
_HXYZ = ("hx", "hy", "hz")
_EC_PARTS = ("pcal", "ecin", "ecout")
_EC_SMALL = ("energy", "sec", "time", "path", *_XYZ, *_HXYZ, "lu", "lv", "lw")
_EC_FULL = ("du", "dv", "dw", "m2u", "m2v", "m2w", "m3u", "m3v", "m3w")
_CC_PARTS = ("ltcc", "htcc", "rich")
_CC_FIELDS = ("sec", "nphe", "time", "path", "theta", "phi", *_XYZ)
_FTOF_PARTS = ("1a", "1b", "2")
_SC_FULL = ("energy", "component", *_XYZ, *_HXYZ)
_FT_FIELDS = ("energy", "time", "path", *_XYZ, "dx", "dy", "radius")
_COVARIANCE = ("11", "12", "13", "14", "15", "22", "23", "24", "25",
               "33", "34", "35", "44", "45", "55")


def branch_names(options: ConversionOptions) -> list[str]:
    """Return the output branch names, in order, for the given options."""
    names = ["run", "event", "beamCharge", "liveTime", "startTime", "helicity"]
    if not options.small:
        names += [
            "unixtime", "trigger", "timestamp", "type", "mode", "torus", "solenoid",
            "category", "ft_category", "topology", "ft_startTime", "RFTime",
            "helicityRaw", "procTime",
            "hel_run", "hel_event", "hel_timestamp", "hel_helicity",
            "hel_helicityRaw", "hel_pair", "hel_pattern", "hel_status",
        ]
    names += [
        "pid", "ft_pid", "p", "p2", "px", "py", "pz", "vx", "vy", "vz", "vt",
        "ft_vt", "charge", "beta", "ft_beta", "chi2pid", "ft_chi2pid",
        "status", "ft_status",
    ]
    if options.is_mc:
        names += ["mc_npart", "mc_ebeam", "mc_weight", "mc_helicity"]
        names += [f"mc_{field}" for field in ("pid", "px", "py", "pz", "vx", "vy", "vz", "vt")]

    names.append("dc_sec")
    names += [f"dc_r{region}_{axis}" for region in (1, 2, 3) for axis in _XYZ]
    names += [f"dc_r{region}_path" for region in (1, 2, 3)]
    names += [f"dc_r{region}_edge" for region in (1, 2, 3)]
    names += [f"cvt_{axis}" for axis in _XYZ]

    names.append("ec_tot_energy")
    for part in _EC_PARTS:
        names += [f"ec_{part}_{field}" for field in _EC_SMALL]
        if not options.small:
            names += [f"ec_{part}_{field}" for field in _EC_FULL]

    names.append("cc_nphe_tot")
    if not options.small:
        names += [f"cc_{part}_{field}" for part in _CC_PARTS for field in _CC_FIELDS]

    for part in _FTOF_PARTS:
        names += [f"sc_ftof_{part}_{field}" for field in ("sec", "time", "path")]
        if not options.small:
            names += [f"sc_ftof_{part}_{field}" for field in _SC_FULL]

    names += ["sc_ctof_time", "sc_ctof_path"]
    if not options.small:
        names += [f"sc_ctof_{field}" for field in _SC_FULL]
        names += [
            f"sc_cnd_{field}"
            for field in ("layer", "time", "path", "energy", "component", *_XYZ, *_HXYZ)
        ]
        names += ["sc_extras_dedx", "sc_extras_size", "sc_extras_layermult"]
        names += [f"ft_{part}_{field}" for part in ("cal", "hodo") for field in _FT_FIELDS]

    if options.cov:
        names += [f"CovMat_{entry}" for entry in _COVARIANCE]
    if options.traj:
        names += [
            f"traj_{field}"
            for field in ("detId", "layer", *_XYZ, "cx", "cy", "cz", "path", "edge")
        ]
    return names