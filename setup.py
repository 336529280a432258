#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name='randpass',
    version='1.0.0',
    description='Random password generator with character class composition',
    packages=find_packages(include=['randpass', 'randpass.*']),
    python_requires='>=3.7',
    install_requires=['PyNaCl'],
    extras_require={'test': ['pytest']},
)
