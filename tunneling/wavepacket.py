"""
Quantum state container and Gaussian wave-packet initializer.

    ψ(x, 0) = exp(-(x - x₀)² / (2σ²)) · exp(i k₀ x),   normalized so ∫|ψ|² dx = 1
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from .errors import DegenerateStateError
from .params import grid
from .potential import build_absorber, build_potential

logger = logging.getLogger(__name__)


@dataclass
class QuantumState:
    """Wave function on the grid, split into real and imaginary parts.

    Mutated in place by evolver.step; owned by whoever created it.
    """

    psi_real: np.ndarray
    psi_imag: np.ndarray
    potential: np.ndarray
    time: float = 0.0
    # edge damping ramp (≤ 0); all zeros means no absorption
    absorber: np.ndarray = field(default=None)

    def __post_init__(self):
        if self.absorber is None:
            self.absorber = np.zeros_like(self.psi_real)

    @property
    def nx(self):
        return self.psi_real.shape[0]

    @property
    def psi(self):
        """Complex copy of ψ."""
        return self.psi_real + 1j * self.psi_imag

    def copy(self):
        return QuantumState(
            self.psi_real.copy(), self.psi_imag.copy(), self.potential.copy(),
            time=self.time, absorber=self.absorber.copy(),
        )


def initialize(params):
    """Fresh normalized packet at t = 0 with the current potential."""
    x = grid(params)
    g = np.exp(-(x - params.x0) ** 2 / (2 * params.sigma**2))
    psi_real = g * np.cos(params.k0 * x)
    psi_imag = g * np.sin(params.k0 * x)

    sum_sq = np.sum(psi_real**2 + psi_imag**2)
    norm = np.sqrt(sum_sq * params.dx)
    if norm == 0 or not np.isfinite(norm):
        raise DegenerateStateError(
            f"cannot normalize packet (x0={params.x0}, sigma={params.sigma}): "
            f"Σ|ψ|² = {sum_sq}")
    psi_real /= norm
    psi_imag /= norm

    logger.debug("packet initialized: nx=%d x0=%g sigma=%g k0=%g",
                 params.nx, params.x0, params.sigma, params.k0)
    return QuantumState(
        psi_real=psi_real,
        psi_imag=psi_imag,
        potential=build_potential(params),
        absorber=build_absorber(params),
    )
