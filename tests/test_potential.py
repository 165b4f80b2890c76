import numpy as np
import pytest

from tunneling.params import SimulationParameters, grid
from tunneling.potential import barrier_mask, build_absorber, build_potential


def test_barrier_only():
    p = SimulationParameters(absorb_width=0)
    V = build_potential(p)
    x = grid(p)
    inside = np.abs(x - p.barrier_pos) < p.barrier_width / 2
    np.testing.assert_array_equal(V[inside], 40.0)
    np.testing.assert_array_equal(V[~inside], 0.0)
    assert inside.sum() > 0


def test_barrier_edges_are_excluded():
    # grid points land exactly on x = ±1
    p = SimulationParameters(nx=16, dx=0.5, x_start=-4.0, barrier_width=2.0,
                             barrier_height=7.0, absorb_width=0)
    x = grid(p)
    V = build_potential(p)
    assert V[x == -1.0][0] == 0.0
    assert V[x == 1.0][0] == 0.0
    np.testing.assert_array_equal(V[(x > -1.0) & (x < 1.0)], 7.0)


def test_zero_width_barrier_is_empty():
    p = SimulationParameters(barrier_width=0.0, absorb_width=0)
    assert not barrier_mask(p).any()
    assert not build_potential(p).any()


def test_absorber_profile():
    p = SimulationParameters(nx=32, absorb_width=4, absorb_eta=0.5)
    A = build_absorber(p)
    np.testing.assert_allclose(A[:5], [-8.0, -4.5, -2.0, -0.5, 0.0])
    # right edge: i > nx - w, measured from index nx
    np.testing.assert_allclose(A[28:], [0.0, -0.5, -2.0, -4.5])
    np.testing.assert_array_equal(A[5:28], 0.0)
    assert (A <= 0).all()


def test_absorber_clamped_to_half_grid():
    # default absorb_width=40 on an 8-point grid: margins of 4 points
    p = SimulationParameters(nx=8, dx=1.0)
    np.testing.assert_allclose(
        build_absorber(p),
        [-0.32, -0.18, -0.08, -0.02, 0.0, -0.02, -0.08, -0.18])


def test_absorber_disabled():
    p = SimulationParameters(absorb_width=0)
    assert not build_absorber(p).any()


def test_potential_is_sum_without_clamping():
    p = SimulationParameters(nx=64, dx=0.5, x_start=-16.0, barrier_pos=-15.0,
                             barrier_width=3.0, barrier_height=1.0,
                             absorb_width=8, absorb_eta=0.1)
    V = build_potential(p)
    expected = np.where(barrier_mask(p), 1.0, 0.0) + build_absorber(p)
    np.testing.assert_allclose(V, expected)
    assert V.min() < 0
    assert V[1] == pytest.approx(1.0 - 0.1 * 49)


def test_default_potential_shape():
    V = build_potential(SimulationParameters())
    assert V.shape == (512,)
    assert V.max() == 40.0
    assert V[0] == pytest.approx(-0.02 * 40**2)
