"""
Setup script for linmath.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies (pytest)

The kernel is pure Python; numpy is used for IEEE division on zero divisors
and for exporting matrices as flat buffers.
"""

from setuptools import setup, find_packages


setup(
    name='linmath',
    version='0.1.0',
    description='Immutable vectors and 4x4 matrices for 3D transform pipelines',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },
)
