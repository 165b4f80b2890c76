"""
Radix-2 Cooley–Tukey FFT on split real/imaginary arrays.

Both transforms work in place on a pair of float arrays of length n = 2^p:

    forward:  X_k = Σ_j x_j · exp(-2πi jk/n)
    inverse:  x_j = (1/n) Σ_k X_k · exp(+2πi jk/n)

Iterative scheme: bit-reversal permutation, then log2(n) butterfly passes.
Each pass is vectorized over all blocks of the current size.
"""

import logging
from functools import lru_cache

import numpy as np

from .errors import InvalidLengthError
from .params import is_power_of_two

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _bit_reversal(n):
    bits = n.bit_length() - 1
    idx = np.arange(n)
    rev = np.zeros(n, dtype=np.intp)
    for b in range(bits):
        rev |= ((idx >> b) & 1) << (bits - 1 - b)
    rev.setflags(write=False)
    return rev


@lru_cache(maxsize=None)
def _twiddles(n):
    """cos/sin of -2πk/n for k < n/2."""
    angle = -2 * np.pi * np.arange(n // 2) / n
    c, s = np.cos(angle), np.sin(angle)
    c.setflags(write=False)
    s.setflags(write=False)
    logger.debug("FFT tables built for n=%d", n)
    return c, s


def _check(real, imag):
    for arr in (real, imag):
        if not isinstance(arr, np.ndarray) or not np.issubdtype(arr.dtype, np.floating):
            raise TypeError("FFT operates in place on float numpy arrays")
        if not arr.flags.writeable:
            raise TypeError("FFT needs writable arrays, got a read-only one")
        if arr.ndim != 1:
            raise InvalidLengthError(f"expected 1D arrays, got shape {arr.shape}")
    if real.shape != imag.shape:
        raise InvalidLengthError(
            f"real/imag lengths differ: {real.shape[0]} vs {imag.shape[0]}")
    n = real.shape[0]
    if not is_power_of_two(n):
        raise InvalidLengthError(f"FFT length must be a power of two, got {n}")
    return n


def forward_transform(real, imag):
    """Forward DFT of (real + i·imag), overwriting both arrays."""
    n = _check(real, imag)
    if n == 1:
        return

    rev = _bit_reversal(n)
    re = real[rev]
    im = imag[rev]
    cos_n, sin_n = _twiddles(n)

    size = 2
    while size <= n:
        half = size // 2
        stride = n // size
        c = cos_n[::stride][:half]
        s = sin_n[::stride][:half]

        re_b = re.reshape(-1, size)
        im_b = im.reshape(-1, size)
        er, ei = re_b[:, :half].copy(), im_b[:, :half].copy()
        o_r, o_i = re_b[:, half:], im_b[:, half:]

        tr = c * o_r - s * o_i
        ti = s * o_r + c * o_i

        re_b[:, :half] = er + tr
        im_b[:, :half] = ei + ti
        re_b[:, half:] = er - tr
        im_b[:, half:] = ei - ti
        size *= 2

    real[:] = re
    imag[:] = im


def inverse_transform(real, imag):
    """Inverse DFT via conjugation: conj → forward → conj, scaled by 1/n."""
    n = _check(real, imag)
    np.negative(imag, out=imag)
    forward_transform(real, imag)
    real /= n
    imag /= -n
