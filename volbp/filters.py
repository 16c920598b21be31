# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Bandpass filtering of volumetric image data according to Crocker & Grier"""
import logging
import math
import numbers

import numpy as np

from . import config
from .convolve import separable_convolve
from .exceptions import DimensionTooSmall, InvalidParameter
from .kernels import (boxcar_kernel, gaussian_kernel, gaussian_radius,
                      noise_length, object_length)


_logger = logging.getLogger(__name__)


def _axial_length(lobject, lobjectz):
    """Boxcar half-width along the third axis

    This is `lobjectz` if given, else `lobject`. If `lobject` is 0, there is
    no background subtraction, thus return 0.
    """
    lobjectz = object_length(lobjectz, "lobjectz") if lobjectz else 0
    lobject = object_length(lobject)
    if not lobject:
        return 0
    return lobjectz or lobject


def edge_width(lnoise, lobject=0):
    """Width of the border that carries no valid signal after filtering

    Parameters
    ----------
    lnoise : float
        Noise length scale
    lobject : int, optional
        In-plane object length scale. Defaults to 0.

    Returns
    -------
    int
        ``max(lobject, ceil(5*lnoise))``
    """
    return int(round(max(object_length(lobject), gaussian_radius(lnoise))))


def zero_edges(volume, lzero, axes=(0, 1)):
    """Set the first and last `lzero` entries along some axes to 0

    Parameters
    ----------
    volume : numpy.ndarray
        Data. This is modified in place.
    lzero : int
        Width of the border to set to 0
    axes : iterable of int, optional
        Axes along which to zero the borders. Defaults to ``(0, 1)``.

    Returns
    -------
    numpy.ndarray
        `volume`
    """
    if lzero <= 0:
        return volume
    for a in axes:
        idx = [slice(None)] * volume.ndim
        idx[a] = slice(None, lzero)
        volume[tuple(idx)] = 0
        idx[a] = slice(max(volume.shape[a] - lzero, 0), None)
        volume[tuple(idx)] = 0
    return volume


def check_volume(volume, lnoise, lobject=0, lobjectz=None):
    """Validate input data and convert it to float

    Parameters
    ----------
    volume : array-like
        Input data
    lnoise, lobject, lobjectz
        Filter parameters, see :py:func:`bandpass`.

    Returns
    -------
    numpy.ndarray
        `volume` as a float array

    Raises
    ------
    InvalidParameter
        if `volume` is not 3D real-valued data
    DimensionTooSmall
        if the volume is shorter than a kernel along some axis
    """
    volume = np.asarray(volume)
    if volume.ndim != 3:
        raise InvalidParameter(
            "volume", f"`volume` has to be 3D, got {volume.ndim} dimensions")
    if not (np.issubdtype(volume.dtype, np.integer) or
            np.issubdtype(volume.dtype, np.floating) or
            volume.dtype == bool):
        raise InvalidParameter(
            "volume", f"`volume` has to be real-valued, got {volume.dtype}")

    r = gaussian_radius(lnoise)
    lateral = 2 * max(r, object_length(lobject)) + 1
    axial = 2 * max(r, _axial_length(lobject, lobjectz)) + 1
    for axis, (size, required) in enumerate(
            zip(volume.shape, (lateral, lateral, axial))):
        if size < required:
            raise DimensionTooSmall(axis, size, required)

    return volume.astype(float)


@config.use_defaults
def lowpass(volume, lnoise, engine=None):
    """Gaussian smoothing along all three axes

    Parameters
    ----------
    volume : array-like
        3D data
    lnoise : float
        Characteristic length scale of noise in pixels. If 0, return the
        data unchanged (as float).
    engine : {"python", "numba"} or None, optional
        Convolution engine. If `None`, use the value from
        :py:attr:`config.rc`.

    Returns
    -------
    numpy.ndarray
        Smoothed data
    """
    return separable_convolve(volume, gaussian_kernel(lnoise), engine)


@config.use_defaults
def background(volume, lobject, lobjectz=None, engine=None):
    """Estimate background using boxcar averaging

    Parameters
    ----------
    volume : array-like
        3D data
    lobject : int
        Half-width of the boxcar along the first two (in-plane) axes
    lobjectz : int or None, optional
        Half-width of the boxcar along the third axis. If 0 or `None`, use
        `lobject`. Defaults to `None`.
    engine : {"python", "numba"} or None, optional
        Convolution engine. If `None`, use the value from
        :py:attr:`config.rc`.

    Returns
    -------
    numpy.ndarray
        Background estimate
    """
    box = boxcar_kernel(lobject)
    box_z = boxcar_kernel(_axial_length(lobject, lobjectz), "lobjectz")
    return separable_convolve(volume, [box, box, box_z], engine)


@config.use_defaults
def bandpass(volume, lnoise, lobject=0, lobjectz=None, threshold=None,
             mask_z=None, engine=None):
    r"""3D bandpass filter according to Crocker & Grier

    Suppress pixel noise and long-wavelength variations while retaining
    features of a characteristic size. This is a two part process. First,
    a lowpassed volume is produced by convolving the original with a
    Gaussian of width `lnoise`. Next, a second lowpassed volume is produced
    by convolving the original with a boxcar. Subtracting the latter from
    the former performs the highpass. Both convolutions are separable and
    computed as consecutive 1D convolutions along each axis.

    Since the boxcar may have a different size along the third axis
    (`lobjectz`), anisotropic data such as confocal stacks with coarser
    axial sampling can be handled.

    After the convolutions, a border of width
    :math:`l_0 = \max(l_\text{object}, \lceil 5 l_\text{noise} \rceil)`
    along the first two axes is set to 0 since it does not contain valid
    data. Then every voxel whose value is less than `threshold` is set to 0.

    The 2D algorithm has been described in [Croc1996]_.

    .. [Croc1996] Crocker, J. C. & Grier, D. G.: "Methods of digital video
        microscopy for colloidal studies", Journal of colloid and interface
        science, Elsevier, 1996, 179, 298-310

    Parameters
    ----------
    volume : array-like
        3D data, axes are (x, y, z). Converted to float.
    lnoise : float
        Characteristic length scale of noise in pixels. Additive noise
        averaged over this length should vanish. If 0, no Gaussian smoothing
        is done, only background subtraction.
    lobject : int, optional
        Integer length in pixels somewhat larger than a typical object. If 0
        (or `False`), no background subtraction is done, only Gaussian
        smoothing. Defaults to 0.
    lobjectz : int or None, optional
        Like `lobject`, but along the third axis. If 0 or `None`, use
        `lobject`. Defaults to `None`.
    threshold : float or None, optional
        Set all voxels whose value is less than this to 0. By default (0),
        negative values are removed. Use ``-numpy.inf`` to disable. If
        `None`, use the value from :py:attr:`config.rc`.
    mask_z : bool or None, optional
        Whether to also zero the border along the third axis. If `None`, use
        the value from :py:attr:`config.rc` (which is `False` by default).
    engine : {"python", "numba"} or None, optional
        Convolution engine. If `None`, use the value from
        :py:attr:`config.rc`.

    Returns
    -------
    numpy.ndarray
        Filtered volume of the same shape as the input

    Raises
    ------
    InvalidParameter
        if the input data or a parameter is invalid
    DimensionTooSmall
        if the volume is shorter than a kernel along some axis
    """
    lnoise = noise_length(lnoise)
    lobject = object_length(lobject)
    if (isinstance(threshold, (bool, np.bool_)) or
            not isinstance(threshold, numbers.Real) or math.isnan(threshold)):
        raise InvalidParameter("threshold",
                               "`threshold` has to be a real number")
    volume = check_volume(volume, lnoise, lobject, lobjectz)

    lzero = edge_width(lnoise, lobject)
    if mask_z and volume.shape[2] < 2 * lzero + 1:
        raise DimensionTooSmall(2, volume.shape[2], 2 * lzero + 1)
    _logger.debug("bandpass: shape %s, lnoise %g, lobject %d, lobjectz %d, "
                  "lzero %d, engine %s", volume.shape, lnoise, lobject,
                  _axial_length(lobject, lobjectz), lzero, engine)

    filtered = lowpass(volume, lnoise, engine)
    if lobject:
        filtered -= background(volume, lobject, lobjectz, engine)

    zero_edges(filtered, lzero, (0, 1, 2) if mask_z else (0, 1))
    filtered[filtered < threshold] = 0
    return filtered
