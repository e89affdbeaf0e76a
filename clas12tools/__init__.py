"""Per-particle columns from CLAS12 reconstruction banks, kinematics, histograms and selections."""

__version__ = "0.1.0"