"""Read-only quantities computed from a QuantumState."""

import numpy as np

from .params import grid


def probability_density(state):
    """|ψ(x_i)|² on the grid."""
    return state.psi_real**2 + state.psi_imag**2


def total_probability(state, dx):
    """∫|ψ|² dx: 1 after initialization, drops as the edges absorb."""
    return float(np.sum(probability_density(state)) * dx)


def transmission_probability(state, params):
    """Probability to the right of the barrier."""
    x = grid(params)
    right = x >= params.barrier_pos + params.barrier_width / 2
    return float(np.sum(probability_density(state)[right]) * params.dx)


def reflection_probability(state, params):
    """Probability to the left of the barrier."""
    x = grid(params)
    left = x <= params.barrier_pos - params.barrier_width / 2
    return float(np.sum(probability_density(state)[left]) * params.dx)


def expected_position(state, params):
    """⟨x⟩ = ∫ x|ψ|² dx / ∫|ψ|² dx."""
    prob = probability_density(state)
    return float(np.sum(grid(params) * prob) / np.sum(prob))


def peak_density(state, floor=0.0):
    """max |ψ|², never below floor (keeps plots from rescaling wildly)."""
    return max(float(np.max(probability_density(state))), floor)
