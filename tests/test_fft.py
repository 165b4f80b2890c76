import numpy as np
import pytest

from tunneling.errors import InvalidLengthError
from tunneling.fft import forward_transform, inverse_transform


def _random_pair(n, seed=0):
    rng = np.random.default_rng(seed)
    return rng.standard_normal(n), rng.standard_normal(n)


@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 512])
def test_matches_numpy(n):
    re, im = _random_pair(n)
    expected = np.fft.fft(re + 1j * im)
    forward_transform(re, im)
    np.testing.assert_allclose(re, expected.real, atol=1e-10)
    np.testing.assert_allclose(im, expected.imag, atol=1e-10)


@pytest.mark.parametrize("n", [2, 16, 256, 1024])
def test_round_trip(n):
    re, im = _random_pair(n, seed=n)
    re0, im0 = re.copy(), im.copy()
    forward_transform(re, im)
    inverse_transform(re, im)
    np.testing.assert_allclose(re, re0, rtol=1e-9, atol=1e-12)
    np.testing.assert_allclose(im, im0, rtol=1e-9, atol=1e-12)


def test_inverse_matches_numpy():
    re, im = _random_pair(32, seed=3)
    expected = np.fft.ifft(re + 1j * im)
    inverse_transform(re, im)
    np.testing.assert_allclose(re + 1j * im, expected, atol=1e-12)


def test_linearity():
    n = 128
    xr, xi = _random_pair(n, seed=1)
    yr, yi = _random_pair(n, seed=2)
    a, b = 2.5, -0.75

    zr, zi = a * xr + b * yr, a * xi + b * yi
    forward_transform(zr, zi)
    forward_transform(xr, xi)
    forward_transform(yr, yi)

    np.testing.assert_allclose(zr, a * xr + b * yr, atol=1e-9)
    np.testing.assert_allclose(zi, a * xi + b * yi, atol=1e-9)


def test_delta_transforms_to_constant():
    re = np.zeros(8)
    im = np.zeros(8)
    re[0] = 1.0
    forward_transform(re, im)
    np.testing.assert_allclose(re, np.ones(8))
    np.testing.assert_allclose(im, np.zeros(8), atol=1e-15)


def test_works_in_place():
    re, im = _random_pair(16)
    re_id, im_id = id(re), id(im)
    forward_transform(re, im)
    assert id(re) == re_id and id(im) == im_id


@pytest.mark.parametrize("n", [3, 6, 100, 0])
def test_rejects_non_power_of_two(n):
    with pytest.raises(InvalidLengthError):
        forward_transform(np.zeros(n), np.zeros(n))
    with pytest.raises(InvalidLengthError):
        inverse_transform(np.zeros(n), np.zeros(n))


def test_rejects_mismatched_lengths():
    with pytest.raises(InvalidLengthError):
        forward_transform(np.zeros(8), np.zeros(16))


def test_rejects_2d_arrays():
    with pytest.raises(InvalidLengthError):
        forward_transform(np.zeros((4, 4)), np.zeros((4, 4)))


def test_rejects_non_float_input():
    with pytest.raises(TypeError):
        forward_transform([1.0, 0.0], [0.0, 0.0])
    with pytest.raises(TypeError):
        forward_transform(np.zeros(4, dtype=int), np.zeros(4, dtype=int))


def test_rejects_read_only_input():
    re, im = _random_pair(8)
    re.setflags(write=False)
    im_before = im.copy()
    with pytest.raises(TypeError):
        forward_transform(re, im)
    with pytest.raises(TypeError):
        inverse_transform(re, im)
    np.testing.assert_array_equal(im, im_before)
