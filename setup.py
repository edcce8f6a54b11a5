#!/usr/bin/env python

import re
from pathlib import Path

from setuptools import setup


# Read the version without importing the package, which needs the
# dependencies to be installed already
def get_version():

    version_file = Path(__file__).parent / "logfact" / "_version.py"

    match = re.search(r'__version__ = "([^"]+)"', version_file.read_text())

    return match.group(1)


setup(
    name="logfact",
    version=get_version(),
    description="Fast and accurate log(k!) for discrete probability distributions",
    packages=[
        "logfact",
        "logfact.config",
        "logfact.exceptions",
        "logfact.io",
        "logfact.utils",
        "logfact.utils.statistics",
        "logfact.test",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "numba",
        "mpmath",
        "omegaconf",
        "rich",
        "colorama",
    ],
    extras_require={"tests": ["pytest", "pyyaml", "scipy"]},
    license="BSD-3",
    keywords=[
        "factorial",
        "log-factorial",
        "Stirling",
        "hypergeometric",
        "Poisson",
        "likelihood",
        "numba",
    ],
)  # End of setup()
