# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""numba accelerated version of :py:func:`convolve.convolve_axis`"""
import numpy as np
import numba


def convolve_axis_numba(volume, kernel, axis):
    """numba accelerated 1D convolution along `axis`

    Parameters
    ----------
    volume : numpy.ndarray
        Float data to convolve
    kernel : numpy.ndarray
        1D float kernel of odd length
    axis : int
        Axis to convolve along

    Returns
    -------
    numpy.ndarray
        Convolved data of the same shape as `volume`
    """
    moved = np.moveaxis(volume, axis, -1)
    lines = np.ascontiguousarray(moved).reshape(-1, moved.shape[-1])
    out = np.empty_like(lines)
    _convolve_lines(lines, np.ascontiguousarray(kernel), out)
    return np.moveaxis(out.reshape(moved.shape), -1, axis)


@numba.njit(parallel=True, nogil=True, cache=True)
def _convolve_lines(lines, kernel, out):
    """Convolve each row of `lines` with `kernel`, zero padding the edges

    Rows are processed in parallel. Summation order within a row is fixed,
    so results do not depend on the number of threads.

    Parameters
    ----------
    lines : numpy.ndarray
        2D array, each row is convolved
    kernel : numpy.ndarray
        1D kernel of odd length
    out : numpy.ndarray
        Output array of the same shape as `lines`
    """
    n_lines, length = lines.shape
    k_len = kernel.shape[0]
    r = k_len // 2
    for i in numba.prange(n_lines):
        for j in range(length):
            acc = 0.
            for m in range(k_len):
                src = j + r - m
                if src >= 0 and src < length:
                    acc += kernel[m] * lines[i, src]
            out[i, j] = acc
