# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Separable convolution of volumes with one-dimensional kernels

A convolution with a kernel that is the outer product of 1D kernels is
computed as a sequence of 1D convolutions, one per axis. Data outside of the
volume is treated as zero and the result has the same shape as the input
("same" mode).
"""
import numpy as np
import scipy.ndimage

from . import config


@config.use_defaults
def convolve_axis(volume, kernel, axis, engine=None):
    """Convolve along a single axis

    Parameters
    ----------
    volume : numpy.ndarray
        Data to convolve
    kernel : array-like
        1D kernel of odd length
    axis : int
        Axis to convolve along
    engine : {"python", "numba"} or None, optional
        "python" uses :py:func:`scipy.ndimage.convolve1d`, "numba" a
        parallelized numba implementation. If `None`, use the value from
        :py:attr:`config.rc`.

    Returns
    -------
    numpy.ndarray
        Convolved data of the same shape as `volume`, float dtype
    """
    volume = np.asarray(volume, dtype=float)
    kernel = np.asarray(kernel, dtype=float)
    if kernel.ndim != 1 or not kernel.size % 2:
        raise ValueError("`kernel` has to be 1D and of odd length")

    if engine == "numba":
        from .convolve_numba import convolve_axis_numba
        return convolve_axis_numba(volume, kernel, axis)
    if engine == "python":
        return scipy.ndimage.convolve1d(volume, kernel, axis=axis,
                                        mode="constant", cval=0.)
    raise ValueError("Unknown engine: " + str(engine))


@config.use_defaults
def separable_convolve(volume, kernels, engine=None):
    """Convolve along every axis using 1D kernels

    The axes are processed in order, i.e., first axis 0, then axis 1, and so
    on. The result is equivalent to convolving with the outer product of the
    kernels.

    Parameters
    ----------
    volume : numpy.ndarray
        Data to convolve
    kernels : array-like or list of array-like
        Either a single 1D kernel, which is applied along each axis, or a list
        with one kernel per axis of `volume`.
    engine : {"python", "numba"} or None, optional
        See :py:func:`convolve_axis`.

    Returns
    -------
    numpy.ndarray
        Convolved data of the same shape as `volume`, float dtype
    """
    volume = np.asarray(volume, dtype=float)
    if isinstance(kernels, np.ndarray) or np.isscalar(kernels[0]):
        kernels = [kernels] * volume.ndim
    if len(kernels) != volume.ndim:
        raise ValueError("Need one kernel per axis")

    ret = volume
    for axis, k in enumerate(kernels):
        ret = convolve_axis(ret, k, axis, engine)
    return ret
