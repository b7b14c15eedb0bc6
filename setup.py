#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

requirements = [
    'numpy',
    'scipy',
    'matplotlib',
    'seaborn',
]

# setup_requirements = ['pytest-runner', ]

test_requirements = [
    'pytest',
    # 'flake8',
    # 'coverage',
]

setup(
    author="Nicolas Franco-Gomez",
    author_email='nicolasfrancogomez@gmail.com',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10'
    ],
    description="Realtime FIR/IIR filters, windows and fixed-length signals.",
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='filtertoolbox',
    name='filtertoolbox',
    packages=find_packages(include=['filtertoolbox', 'filtertoolbox.*']),
    # setup_requires=setup_requirements,
    test_suite='tests',
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
    python_requires='>=3.10'
)
