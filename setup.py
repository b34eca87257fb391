#!/usr/bin/env python

"""Distutils setup file"""

from setuptools import setup, find_packages

# Metadata
PACKAGE_NAME = "PyMultimethods"
PACKAGE_VERSION = "0.1.0"

setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,

    description="Value-based multiple dispatch (multimethods) for Python",
    license="MIT",

    package_dir = {'':'src'},
    packages    = find_packages('src'),
    python_requires = ">=3.8",

    install_requires = ['zope.interface'],
    extras_require = {'test': ['pytest']},
)
