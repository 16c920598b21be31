# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Mechanism for getting and setting default function parameters
=============================================================

Some arguments of the filter functions (e.g. the `threshold` of
:py:func:`volbp.bandpass` or the calculation `engine`) have defaults which
may be changed globally by the user. The :py:func:`use_defaults` decorator
replaces any such argument that was passed as `None` by the corresponding
entry of :py:attr:`rc`.

The defaults can also be stored to and restored from YAML files using
:py:func:`save_rc` and :py:func:`load_rc`.


Examples
--------

Do not clip negative values of filtered volumes by default:

>>> config.rc["threshold"] = -numpy.inf
>>> bandpass(vol, 1, 5)  # no thresholding
>>> bandpass(vol, 1, 5, threshold=0)  # explicitly clip negative values

Store the current defaults:

>>> config.save_rc("volbp_defaults.yaml")


Programming reference
---------------------

.. autofunction:: use_defaults
.. autofunction:: load_rc
.. autofunction:: save_rc
.. autodata:: rc
"""
import inspect
import functools
from pathlib import Path

import yaml


rc = dict(threshold=0.,
          mask_z=False,
          engine="python")
"""Global config dictionary"""


def use_defaults(func):
    """Decorator to apply default values to functions

    If any function argument whose name is a key in :py:attr:`rc` is `None`,
    set its value to what is specified in :py:attr:`rc`. Arguments whose
    name is not in :py:attr:`rc` are left alone.

    Parameters
    ----------
    func : function
        Function to be decorated

    Returns
    -------
    function
        Modified function

    Examples
    --------
    >>> @use_defaults
    ... def f(engine=None):
    ...     return engine
    >>> f()
    'python'
    >>> f("numba")
    'numba'
    >>> config.rc["engine"] = "numba"
    >>> f()
    'numba'
    """
    sig = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        ba = sig.bind(*args, **kwargs)
        ba.apply_defaults()
        for name, value in ba.arguments.items():
            if value is None and name in rc:
                ba.arguments[name] = rc[name]
        return func(*ba.args, **ba.kwargs)

    wrapper.__signature__ = sig
    return wrapper


def load_rc(file):
    """Update :py:attr:`rc` from a YAML file

    Parameters
    ----------
    file : str or pathlib.Path or file-like
        File name or open text stream to read from. The document has to be
        a mapping.

    Raises
    ------
    KeyError
        if the file contains a key that is not present in :py:attr:`rc`
    """
    if isinstance(file, (str, Path)):
        with open(file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        data = yaml.safe_load(file)

    if data is None:
        return
    if not isinstance(data, dict):
        raise TypeError("YAML document has to be a mapping")
    unknown = set(data) - set(rc)
    if unknown:
        raise KeyError("Unknown config keys: " + ", ".join(sorted(unknown)))
    rc.update(data)


def save_rc(file):
    """Write :py:attr:`rc` to a YAML file

    Parameters
    ----------
    file : str or pathlib.Path or file-like
        File name or open text stream to write to.
    """
    # yaml.safe_dump cannot represent numpy scalars
    data = {k: v.item() if hasattr(v, "item") else v for k, v in rc.items()}
    if isinstance(file, (str, Path)):
        with open(file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
    else:
        yaml.safe_dump(data, file)
