#!/usr/bin/env python

from setuptools import setup, find_packages


kwargs = {
    'name': 'vectfit',
    'version': '0.1.0',
    'description': 'Fast Relaxed Vector Fitting of frequency-domain responses',
    'packages': find_packages(exclude=['tests', 'tests.*']),
    'python_requires': '>=3.10',
    'install_requires': ['numpy', 'scipy'],
    'extras_require': {
        'test': ['pytest'],
    },
}

setup(**kwargs)
