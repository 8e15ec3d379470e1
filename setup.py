#!/usr/bin/env python3
from setuptools import setup

import pfhardening

config = {
    "description": "pfhardening",
    "author": pfhardening.__author__,
    "author_email": pfhardening.__email__,
    "version": pfhardening.__version__,
    "install_requires": [],
    "extras_require": {
        "test": ["coverage", "pytest", "pytest-cov"],
    },
    "python_requires": ">=3.8",
    "packages": ["pfhardening", "pfhardening.engines"],
    "name": "pfhardening",
    "entry_points": {
        "console_scripts": [
            "pf-hardening = pfhardening:main",
        ]
    },
}

setup(**config)
