# clas12tools

Tools for CLAS12 reconstruction output. The package reads event banks such as
`REC::Particle`, `REC::Calorimeter`, `REC::Cherenkov` and `REC::Scintillator`.
It turns them into flat, per-particle columns. It also provides the physics
helpers, histograms and event selections used in quick-look analyses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Banks and events

`clas12tools.bank` has two classes:

- `Bank` is a named table. It has fixed column names and rows of values.
- `Event` is a set of banks, looked up by name.

```python
from clas12tools.bank import Bank, Event

particles = Bank(
    "REC::Particle",
    ["pid", "px", "py", "pz", "vx", "vy", "vz", "vt",
     "charge", "beta", "chi2pid", "status"],
    [[11, 0.1, 0.2, 2.0, 0.0, 0.0, -3.0, 0.0, -1, 1.0, 0.5, 2100]],
)
event = Event([particles])
event.bank("REC::Particle").get("pid", 0)   # 11
event.bank("REC::Particle").column("px")    # [0.1]
```

How banks are accessed:

- `Bank.get` and `Bank.column` take either a column name or a column position.
- Asking an `Event` for a bank it does not hold returns an empty bank. Such a bank has no columns and no rows.

## Per-particle columns

Each function below reads one kind of bank and returns a dictionary that maps
output names to lists. The lists have one entry per particle.

| Function | Bank(s) read |
| --- | --- |
| `particles.particle_columns(event)` | `REC::Particle`; computes `p` and `p2` from the components |
| `particles.ft_particle_columns(event, count)` | `RECFT::Particle` |
| `calorimeter.calorimeter_columns(event, count)` | `REC::Calorimeter`; PCAL, EC inner and EC outer |
| `cherenkov.cherenkov_columns(event, count)` | `REC::Cherenkov`; HTCC, LTCC and RICH |
| `scintillator.scintillator_columns(event, count)` | `REC::Scintillator` and `REC::ScintExtras` |

Where a detector has no response for a particle, these conventions apply:

- A floating-point value is NaN.
- An integer value, such as a sector or component, is `-1`.
- A beta of -9999 in the bank becomes NaN.
- A negative `count` raises `ValueError`.

When `RECFT::Particle` is empty, `ft_particle_columns` returns `count`
placeholder entries. Each has a pid of -9999 and NaN in every other field.

`clas12tools.header` reads the per-event header banks:

- `event_info(event)` reads `REC::Event`. It returns `None` when the bank is empty. A start time of -1000 becomes NaN.
- `ft_event_info(event)` reads `RECFT::Event`. When the bank is absent, it returns a category of -9999 and a start time of NaN.
- `run_config(event)` reads `RUN::config`.
- `helicity_flip(event)` reads `HEL::flip`. It returns a value only when the helicity is +1 or -1.
- `mc_info(event)` reads `MC::Header`, `MC::Event` and `MC::Particle`.

`clas12tools.branches` holds these:

- `ConversionOptions` is a frozen dataclass. Its fields are:
  - `is_mc`
  - `batch`
  - `test`
  - `good_rec`
  - `elec_first`
  - `cov`
  - `traj`
  - `small`
  - `max_size`
- `branch_names(options)` lists, in order, the output column names that those options select.

## Physics helpers

`clas12tools.kinematics` provides:

- `LorentzVector`, a frozen four-vector. It has `from_xyzm`, `mag2` and `mag`, and it supports `+` and `-`.
- `q2(e_mu, e_mu_prime)` and `w(e_mu, e_mu_prime)`, for electron scattering on a proton at rest.
- `vertex_time` and `delta_t`, for time-of-flight particle identification. They use `C_SPECIAL_UNITS`, the speed of light in cm/ns.

`clas12tools.constants` holds:

- the enums `Region`, `Detector`, `ScintillatorLayer`, `CalorimeterLayer` and `ParticleCode`
- the PDG masses `MASS_P`, `MASS_E`, and the rest
- `mass_of(pid)`, which raises `ValueError` for a code it does not know

## Histograms

`clas12tools.histogram` has two fixed-bin histogram classes:

- `Histogram1D` has underflow and overflow bins.
- `Histogram2D` has flow bins on both axes.

Both have `fill`, `counts` and `entries`.
`Histogram1D.fit_gaussian(low, high)` fits a Gaussian to the non-empty bins
whose centres lie in `[low, high]`. It returns a `GaussianFit` with the fields
`constant`, `mean` and `sigma`.

## Analyses

The analyses take an iterable of rows. A row is a mapping from column names,
as produced above, to per-particle lists. The functions and what they fill:

| Function | What it fills |
| --- | --- |
| `montecarlo.momentum_resolution(events)` | eight histograms of relative momentum differences between reconstructed and generated particles |
| `wvsq2.fill_w_q2(events, beam)` | a `WQ2Histograms`: W and W against Q², without a sector and for each of six sectors |
| `deltat.delta_t_histograms(events)` | a dictionary of Δt histograms for each time-of-flight layer, under proton and pion hypotheses |
| `pvsb.momentum_vs_beta(events)` | momentum against β for charged particles after the first |
| `sampling.sampling_fraction(events)` | calorimeter energy over momentum for the leading particle |

For example:

```python
from clas12tools.calorimeter import calorimeter_columns
from clas12tools.particles import particle_columns
from clas12tools.sampling import sampling_fraction

row = particle_columns(event)
row.update(calorimeter_columns(event, len(row["pid"])))
histogram = sampling_fraction([row])
```

`clas12tools.selection` works on `Event` objects:

- `has_electron_in_dc(bank)` is true when the bank holds an electron whose status marks it as seen in the forward detector.
- `filter_events(events)` yields the events that pass that test. It looks at no more than the first 50,000,000 events.
- `events_with_particles(events)` handles each event that has reconstructed particles. For each such event it yields a new event that holds only that `REC::Particle` bank.

## What the package does not do

These things are missing:

- The package does not read or write event files. Events must be built as `Bank` and `Event` objects by the caller.
- No function builds a complete output row from one event.
- There are no columns for drift-chamber tracks, trajectories, forward-tagger responses or the covariance matrix, even though `branch_names` lists their names.
- There is no command-line program.
- Histograms are kept in memory. The package does not draw them or save them.