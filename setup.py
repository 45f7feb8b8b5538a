################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

import setuptools


PACKAGE_NAME: str = "sharpchem"

setuptools.setup(
    name=PACKAGE_NAME,
    version="0.1.0",
    author="Elijah Creed Fedele",
    description=(
        "Exact fixed-precision decimal square matrices for SharpChem "
        "thermodynamic routines"
    ),
    license="Apache-2.0",
    zip_safe=True,
    keywords=[
        "linear algebra",
        "decimal",
        "thermodynamics",
    ],
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    packages=setuptools.find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    tests_require=[
        "pytest",
    ],
)
