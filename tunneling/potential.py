"""
Potential on the grid: rectangular barrier + absorbing ramps at both edges.

The FFT makes the domain periodic, so a packet leaving on the right would
re-enter on the left. A quadratic ramp  -η (w - d)²  inside the last w grid
points of each edge (d = distance to the edge, in points) soaks it up. The
ramp is an approximation: it is added to the real potential here and the
evolver turns it into damping as well (see evolver.step).
"""

import numpy as np

from .params import grid


def barrier_mask(params):
    """True strictly inside (barrier_pos ± barrier_width/2)."""
    x = grid(params)
    half = params.barrier_width / 2
    return (x > params.barrier_pos - half) & (x < params.barrier_pos + half)


def build_absorber(params):
    """Absorbing ramp alone: ≤ 0 inside the edge margins, 0 elsewhere."""
    nx, w, eta = params.nx, params.absorb_margin, params.absorb_eta
    i = np.arange(nx)
    ramp = np.zeros(nx)

    left = i < w
    ramp[left] = -eta * (w - i[left]) ** 2

    # distance measured to the periodic end of the domain, index nx
    right = i > nx - w
    ramp[right] = -eta * (i[right] - (nx - w)) ** 2
    return ramp


def build_potential(params):
    """V(x_i) = barrier + absorbing ramp. No clamping."""
    V = np.where(barrier_mask(params), float(params.barrier_height), 0.0)
    return V + build_absorber(params)
