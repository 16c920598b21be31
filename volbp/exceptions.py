# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Collection of exception classes"""


class InvalidParameter(ValueError):
    """A filter parameter or the input volume is not acceptable

    Attributes
    ----------
    parameter : str
        Name of the offending argument
    """
    def __init__(self, parameter, text=None):
        """Parameters
        ----------
        parameter : str
            Set the :py:attr:`parameter` attribute.
        text : str or None, optional
            What to display when converting the exception to a str. If
            `None`, a generic message naming `parameter` is used.
        """
        if text is None:
            text = f"Invalid value for `{parameter}`"
        super().__init__(text)
        self.parameter = parameter


class DimensionTooSmall(InvalidParameter):
    """The volume is shorter than a filter kernel along some axis

    Attributes
    ----------
    axis : int
        Axis along which the volume is too small
    size : int
        Length of the volume along :py:attr:`axis`
    required : int
        Minimum length required along :py:attr:`axis`
    """
    def __init__(self, axis, size, required):
        """Parameters
        ----------
        axis, size, required : int
            Set the :py:attr:`axis`, :py:attr:`size`, and
            :py:attr:`required` attributes.
        """
        super().__init__(
            "volume",
            f"Volume has length {size} along axis {axis}, but at least "
            f"{required} is required for the given filter parameters")
        self.axis = axis
        self.size = size
        self.required = required
