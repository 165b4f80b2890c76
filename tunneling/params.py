"""
Simulation parameters — grid, time step, wave packet and barrier.

Natural units: ℏ = 1, m = 1 by default.

The defaults reproduce the reference experiment: a packet with k₀ = 5
(E_cin = 12.5) launched from x₀ = -6 against a barrier of height 40.
"""

import dataclasses
from dataclasses import dataclass

import numpy as np

from .errors import InvalidLengthError


def is_power_of_two(n):
    return n >= 1 and (n & (n - 1)) == 0


@dataclass(frozen=True)
class SimulationParameters:
    # ── Grade espacial ───────────────────────────────────
    nx: int = 512                  # pontos (potência de 2 → FFT)
    dx: float = 0.05
    x_start: float = -10.0         # origem do domínio

    # ── Tempo ────────────────────────────────────────────
    dt: float = 0.002
    hbar: float = 1.0
    m: float = 1.0

    # ── Pacote de onda ───────────────────────────────────
    k0: float = 5.0
    x0: float = -6.0
    sigma: float = 0.7

    # ── Barreira de potencial ────────────────────────────
    barrier_height: float = 40.0
    barrier_width: float = 1.5
    barrier_pos: float = 0.0

    # ── Borda absorvente ─────────────────────────────────
    absorb_width: int = 40         # em pontos da grade
    absorb_eta: float = 0.02

    # passos de integração por quadro renderizado
    speed: int = 2

    def __post_init__(self):
        if not isinstance(self.nx, (int, np.integer)) or isinstance(self.nx, bool):
            raise InvalidLengthError(f"nx must be an integer, got {self.nx!r}")
        if self.nx < 2 or not is_power_of_two(self.nx):
            raise InvalidLengthError(
                f"nx must be a power of two >= 2, got {self.nx}")
        for name in ("dx", "dt", "hbar", "m", "sigma"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.barrier_width < 0:
            raise ValueError(f"barrier_width must be >= 0, got {self.barrier_width}")
        if self.absorb_eta < 0:
            raise ValueError(f"absorb_eta must be >= 0, got {self.absorb_eta}")
        if self.absorb_width < 0:
            raise ValueError(f"absorb_width must be >= 0, got {self.absorb_width}")
        if self.speed < 0:
            raise ValueError(f"speed must be >= 0, got {self.speed}")

    def replace(self, **changes):
        """Validated copy with some fields changed."""
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ValueError(f"unknown parameters: {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    @property
    def absorb_margin(self):
        """Ramp width actually used: absorb_width, at most half the grid."""
        return min(self.absorb_width, self.nx // 2)

    @property
    def x_end(self):
        """Right end of the periodic domain (exclusive)."""
        return self.x_start + self.nx * self.dx

    @property
    def stability_number(self):
        """ℏ·dt / (m·dx²); values well above 1 tend to blow up."""
        return self.hbar * self.dt / (self.m * self.dx**2)

    @property
    def kinetic_energy(self):
        return (self.hbar * self.k0) ** 2 / (2 * self.m)


def grid(params):
    """Positions x_i = x_start + i·dx of the nx grid points."""
    return params.x_start + np.arange(params.nx) * params.dx
