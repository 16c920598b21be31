# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Bandpass filtering of volumetric image data
===========================================

The :py:mod:`volbp` package implements the real-space bandpass filter
suggested in [Croc1996]_, generalized to three dimensions. It suppresses
pixel noise and long-wavelength variations (background) while retaining
features of a characteristic size, e.g. particles in confocal microscopy
stacks.

- :py:func:`bandpass` (also available as :py:func:`filter`) is the filter
  itself.
- :py:func:`lowpass` and :py:func:`background` compute the two lowpass
  estimates (Gaussian and boxcar) whose difference is the bandpass.
- :py:mod:`kernels` and :py:mod:`convolve` contain the building blocks:
  1D kernels and separable convolution.
- :py:mod:`config` allows for changing default parameters such as the
  `threshold` or the convolution `engine`.


Examples
--------

Filter a stack with noise length 1 pixel and objects about 5 pixels in
size, but 3 pixels along the optical axis:

>>> filtered = bandpass(stack, 1, 5, 3)

Keep negative values:

>>> filtered = bandpass(stack, 1, 5, 3, threshold=-numpy.inf)


Filters
-------
.. autofunction:: bandpass
.. autofunction:: lowpass
.. autofunction:: background

Utilities
---------
.. autofunction:: edge_width
.. autofunction:: zero_edges
.. autofunction:: check_volume
.. autofunction:: separable_convolve
.. autofunction:: convolve_axis
.. autofunction:: gaussian_kernel
.. autofunction:: boxcar_kernel
.. autofunction:: normalize

Exceptions
----------
.. autoclass:: InvalidParameter
.. autoclass:: DimensionTooSmall
"""
from . import config  # noqa f401
from . import kernels  # noqa f401
from . import convolve  # noqa f401
from . import filters  # noqa f401

from .filters import (bandpass, lowpass, background, edge_width,  # noqa f401
                       zero_edges, check_volume)
from .convolve import convolve_axis, separable_convolve  # noqa f401
from .exceptions import InvalidParameter, DimensionTooSmall  # noqa f401
from .kernels import normalize, gaussian_kernel, boxcar_kernel  # noqa f401

filter = bandpass
