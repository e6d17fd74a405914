#!/usr/bin/env python3
"""
Setup script for Genotype QC Reports.
This script configures the package for installation with pip.
"""

from setuptools import setup, find_packages
import os

# Get the current directory
current_dir = os.path.dirname(os.path.abspath(__file__))

# Read requirements from requirements.txt
with open(os.path.join(current_dir, 'requirements.txt')) as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name="genotype_qc",
    version="0.1.0",
    description="Call rate and tag length reports for SNP and presence/absence genotype datasets",
    # Find packages automatically, excluding tests
    packages=find_packages(include=['genotype_qc', 'genotype_qc.*']),
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires=">=3.9",
    entry_points={
        'console_scripts': [
            'genotype-qc-report=genotype_qc.cli:main',
        ],
    },
)
