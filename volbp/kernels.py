# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""One-dimensional smoothing kernels for separable filtering"""
import math
import numbers

import numpy as np

from .exceptions import InvalidParameter


def normalize(kernel):
    """Scale a kernel so that its elements sum to 1

    Parameters
    ----------
    kernel : array-like
        Kernel to normalize

    Returns
    -------
    numpy.ndarray
        ``kernel / sum(kernel)`` as float array
    """
    kernel = np.asarray(kernel, dtype=float)
    return kernel / np.sum(kernel)


def noise_length(lnoise, name="lnoise"):
    """Check that `lnoise` is a finite, non-negative real number

    Returns
    -------
    float
        `lnoise` converted to float

    Raises
    ------
    InvalidParameter
        if the check fails
    """
    if (not isinstance(lnoise, numbers.Real) or
            not math.isfinite(lnoise) or lnoise < 0):
        raise InvalidParameter(
            name, f"`{name}` has to be a finite, non-negative number")
    return float(lnoise)


def object_length(lobject, name="lobject"):
    """Check that `lobject` is a non-negative integer

    `False` is accepted as 0, integral floats (such as ``5.0``) are accepted
    as well.

    Returns
    -------
    int
        `lobject` converted to int

    Raises
    ------
    InvalidParameter
        if the check fails
    """
    if isinstance(lobject, numbers.Integral):
        ret = int(lobject)
    elif (isinstance(lobject, numbers.Real) and math.isfinite(lobject) and
            float(lobject).is_integer()):
        ret = int(lobject)
    else:
        raise InvalidParameter(
            name, f"`{name}` has to be a non-negative integer")
    if ret < 0:
        raise InvalidParameter(
            name, f"`{name}` has to be a non-negative integer")
    return ret


def gaussian_radius(lnoise):
    """Half-width of the Gaussian kernel, i.e. ``ceil(5*lnoise)``"""
    return math.ceil(5 * noise_length(lnoise))


def gaussian_kernel(lnoise):
    r"""Gaussian kernel for suppression of pixel noise

    The kernel is sampled at integer offsets :math:`k` in :math:`[-r, r]`,
    where :math:`r = \lceil 5 \lambda \rceil` and :math:`\lambda` is
    `lnoise`:

    .. math:: g(k) \propto \exp\left(-\frac{k^2}{4\lambda^2}\right)

    Parameters
    ----------
    lnoise : float
        Characteristic length scale of noise in pixels. If 0, return the
        identity kernel ``[1.]``.

    Returns
    -------
    numpy.ndarray
        Normalized kernel of length :math:`2r+1`
    """
    lnoise = noise_length(lnoise)
    if lnoise == 0:
        return np.ones(1)
    r = gaussian_radius(lnoise)
    return normalize(np.exp(-(np.arange(-r, r + 1) / (2 * lnoise))**2))


def boxcar_kernel(length, name="lobject"):
    """Boxcar (uniform) kernel for background estimation

    Parameters
    ----------
    length : int
        Half-width of the kernel. The kernel has ``2*length + 1`` taps.
    name : str, optional
        Name of the parameter `length` was passed as. Used in error
        messages. Defaults to "lobject".

    Returns
    -------
    numpy.ndarray
        Normalized kernel
    """
    length = object_length(length, name)
    return normalize(np.ones(2 * length + 1))
