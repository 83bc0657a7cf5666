# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Sahil Jhawar
#
# SPDX-License-Identifier: Apache-2.0


"""Setup script of the Prompt Penetration Electric Field Model (PPEFM) package."""

from setuptools import find_packages, setup

setup(
    name="ppefm",
    version="3.1.0",
    description="Prompt Penetration Electric Field Model: solar wind to equatorial ionospheric electric field",
    packages=find_packages(include=["ppefm", "ppefm.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "astropy",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
