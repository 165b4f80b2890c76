"""
1D quantum tunneling — split-step Fourier solver for a Gaussian wave packet
hitting a rectangular barrier, with absorbing edges.

Core:
    initialize(params)           -> QuantumState
    build_potential(params)      -> V on the grid
    step(state, params)          -> advances state by dt, in place
    probability_density(state), total_probability(state, dx)
"""

from .errors import DegenerateStateError, InvalidLengthError, SimulationError
from .evolver import evolve, step
from .fft import forward_transform, inverse_transform
from .observables import (
    expected_position,
    peak_density,
    probability_density,
    reflection_probability,
    total_probability,
    transmission_probability,
)
from .params import SimulationParameters, grid
from .potential import build_absorber, build_potential
from .simulation import Simulation
from .wavepacket import QuantumState, initialize

__version__ = "0.1.0"
