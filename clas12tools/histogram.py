"""Fixed-binning histograms in one and two dimensions, with a Gaussian fit."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from scipy.optimize import curve_fit


@dataclass(frozen=True)
class GaussianFit:
    """Result of a Gaussian fit: amplitude, mean and width."""

    constant: float
    mean: float
    sigma: float


def _gaussian(x, constant, mean, sigma):
    return constant * np.exp(-0.5 * ((x - mean) / sigma) ** 2)


class _Axis:
    def __init__(self, bins: int, low: float, high: float):
        if bins <= 0:
            raise ValueError(f"number of bins must be positive, got {bins}")
        if not low < high:
            raise ValueError(f"axis range is empty: [{low}, {high})")
        self.bins = bins
        self.low = float(low)
        self.high = float(high)

    def find(self, value: float) -> int:
        """Return the bin of ``value``: 0 for underflow, bins + 1 for overflow."""
        if value < self.low:
            return 0
        if not value < self.high:
            return self.bins + 1
        position = int(self.bins * (value - self.low) / (self.high - self.low)) + 1
        return min(position, self.bins)

    @property
    def edges(self) -> np.ndarray:
        return np.linspace(self.low, self.high, self.bins + 1)

    @property
    def centers(self) -> np.ndarray:
        edges = self.edges
        return (edges[:-1] + edges[1:]) / 2.0


class Histogram1D:
    """A one-dimensional histogram with underflow and overflow bins."""

    def __init__(self, name: str, title: str, bins: int, low: float, high: float):
        self.name = name
        self.title = title
        self._axis = _Axis(bins, low, high)
        self._contents = np.zeros(bins + 2)
        self.entries = 0

    def fill(self, x: float) -> None:
        """Add one entry at ``x``; values outside the range go to the flow bins."""
        self._contents[self._axis.find(x)] += 1.0
        self.entries += 1

    @property
    def counts(self) -> np.ndarray:
        """Contents of the in-range bins."""
        return self._contents[1:-1].copy()

    @property
    def underflow(self) -> float:
        return float(self._contents[0])

    @property
    def overflow(self) -> float:
        return float(self._contents[-1])

    @property
    def edges(self) -> np.ndarray:
        return self._axis.edges

    @property
    def centers(self) -> np.ndarray:
        return self._axis.centers

    def fit_gaussian(self, low: float, high: float) -> GaussianFit:
        """Fit a Gaussian to the non-empty bins whose centres lie in [low, high].

        Raises ValueError when fewer than three bins take part and
        RuntimeError when the fit does not converge.
        """
        centers = self.centers
        counts = self.counts
        selected = (centers >= low) & (centers <= high) & (counts > 0)
        x = centers[selected]
        y = counts[selected]
        if len(x) < 3:
            raise ValueError(
                f"histogram {self.name!r} has too few filled bins in [{low}, {high}] to fit"
            )
        mean = float(np.average(x, weights=y))
        spread = math.sqrt(float(np.average((x - mean) ** 2, weights=y)))
        if spread == 0.0:
            spread = (self._axis.high - self._axis.low) / self._axis.bins
        parameters, _ = curve_fit(
            _gaussian, x, y, p0=(float(y.max()), mean, spread), sigma=np.sqrt(y),
            maxfev=10000,
        )
        constant, fitted_mean, sigma = (float(value) for value in parameters)
        return GaussianFit(constant, fitted_mean, abs(sigma))


class Histogram2D:
    """A two-dimensional histogram with flow bins on both axes."""

    def __init__(self, name: str, title: str, xbins: int, xlow: float, xhigh: float,
                 ybins: int, ylow: float, yhigh: float):
        self.name = name
        self.title = title
        self._xaxis = _Axis(xbins, xlow, xhigh)
        self._yaxis = _Axis(ybins, ylow, yhigh)
        self._contents = np.zeros((xbins + 2, ybins + 2))
        self.entries = 0

    def fill(self, x: float, y: float) -> None:
        """Add one entry at (``x``, ``y``)."""
        self._contents[self._xaxis.find(x), self._yaxis.find(y)] += 1.0
        self.entries += 1

    @property
    def counts(self) -> np.ndarray:
        """Contents of the in-range bins, indexed [x bin, y bin]."""
        return self._contents[1:-1, 1:-1].copy()

    @property
    def flow(self) -> float:
        """Number of entries outside the range on either axis."""
        return float(self._contents.sum() - self._contents[1:-1, 1:-1].sum())

    @property
    def xedges(self) -> np.ndarray:
        return self._xaxis.edges

    @property
    def yedges(self) -> np.ndarray:
        return self._yaxis.edges