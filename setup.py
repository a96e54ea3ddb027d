#!/usr/bin/python
"""A setuptools-based script for distributing and installing phoneques."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

from setuptools import setup

with open('README.markdown') as readmeFile:
    long_description = readmeFile.read()

requires = [ line.rstrip('\n') for line in open('requirements.txt') ]

setup(
    name = 'phoneques',
    version = '0.1.dev1',
    description = 'Phone question sets for decision tree clustering in speech synthesis.',
    license = 'various open source licenses (see License file)',
    packages = ['phoneques', 'phoneques.util'],
    install_requires = requires,
    scripts = ['bin/convert_questions.py'],
    long_description = long_description,
)
