#!/usr/bin/env python3
"""
Setup script for fastaseek
"""

from setuptools import setup, find_packages

setup(
    name="fastaseek",
    version="0.1.0",
    description="Random-access coordinate reads from single-record FASTA files",
    author="RD Schaeffer",
    author_email="dustin.schaeffer@gmail.com",
    packages=find_packages(include=["fastaseek", "fastaseek.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "biopython>=1.79",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
