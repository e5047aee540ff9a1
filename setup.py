#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="PyCursor",
    version="0.1.0",
    description="Composable cursor adapters: bidirectional filtering and sorted k-way merging",
    author="PyCursor Team",
    packages=find_packages(exclude=["pycursor.test", "pycursor.test.*"]),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.19.0",
        "coloredlogs",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
