"""
Headless animation driver.

Owns one parameter set and one QuantumState and decides, on every parameter
change, whether the packet must be rebuilt or only the barrier replaced.
Renderers (visualize, app) sit on top of this and never touch the core
directly.
"""

import logging

from .evolver import evolve, step
from .observables import probability_density, total_probability
from .params import SimulationParameters, grid
from .potential import build_potential
from .wavepacket import initialize

logger = logging.getLogger(__name__)

# fields that only move the barrier: potential is rebuilt, ψ is kept
BARRIER_FIELDS = frozenset({"barrier_height", "barrier_width", "barrier_pos"})
# fields read fresh by every step
STEP_FIELDS = frozenset({"dt", "hbar", "m", "speed"})


class Simulation:

    def __init__(self, params=None):
        self.params = params if params is not None else SimulationParameters()
        self._check_stability()
        self.state = initialize(self.params)

    # ── state ────────────────────────────────────────────
    @property
    def time(self):
        return self.state.time

    @property
    def x(self):
        return grid(self.params)

    @property
    def density(self):
        return probability_density(self.state)

    @property
    def norm(self):
        return total_probability(self.state, self.params.dx)

    # ── control ──────────────────────────────────────────
    def reset(self):
        """Rebuild the packet from the current parameters (t = 0)."""
        self.state = initialize(self.params)
        logger.debug("simulation reset")

    def update(self, **changes):
        """Change parameters; rebuild only what the change invalidates."""
        new = self.params.replace(**changes)
        changed = {k for k, v in changes.items() if getattr(self.params, k) != v}
        if not changed:
            return

        if changed <= BARRIER_FIELDS | STEP_FIELDS:
            if changed & BARRIER_FIELDS:
                self.state.potential = build_potential(new)
                logger.debug("barrier updated: %s", sorted(changed & BARRIER_FIELDS))
            self.params = new
            if changed & STEP_FIELDS:
                self._check_stability()
        else:
            # grid or packet changed: array sizes / ψ are no longer valid
            new_state = initialize(new)
            self.params, self.state = new, new_state
            self._check_stability()
            logger.debug("re-initialized after change of %s", sorted(changed))

    def advance(self, n_frames=1):
        """Run `speed` steps per frame."""
        for _ in range(n_frames * self.params.speed):
            step(self.state, self.params)

    def run(self, n_steps, save_every=1):
        """Density snapshots of n_steps more steps (current one first)."""
        return evolve(self.state, self.params, n_steps, save_every)

    def _check_stability(self):
        r = self.params.stability_number
        if r > 1:
            logger.warning(
                "hbar*dt/(m*dx^2) = %.3g > 1: dt=%g may be too large for dx=%g",
                r, self.params.dt, self.params.dx)
