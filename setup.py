#!/usr/bin/env python3
import os
import re

from setuptools import setup, find_packages


def main():
    os.chdir(os.path.dirname(os.path.realpath(__file__)))

    with open('stampclock/__init__.py', 'r') as file:
        version = re.search(r"^__version__\s*=\s*'(.*)'", file.read(), re.M).group(1)

    with open('README', 'rb') as f:
        long_descr = f.read().decode('utf-8')

    setup(
        name='stampclock',
        version=version,
        packages=find_packages(exclude=['tests']),
        install_requires=[
            'toml',
            'arrow',
            'appdirs',
        ],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'stampclock = stampclock.clock:main',
            ],
        },
        long_description=long_descr,
        license='MIT',
        description='Toggle between work and break with a single command and get the hours worked per day',
    )


if __name__ == "__main__":
    main()
