# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import setup, find_packages


setup(
    name="volbp",
    version="1.0.0",
    description="Crocker-Grier bandpass filter for volumetric image data",
    python_requires=">=3.9",
    install_requires=["numpy>=1.10",
                      "scipy>0.18",
                      "numba",
                      "pyyaml", ],
    extras_require={"test": ["pytest"]},
    packages=find_packages(include=["volbp*"]),
)
