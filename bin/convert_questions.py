#!/usr/bin/python -u

"""Converts a phone question file for use with a phone inventory."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import sys

from phoneques.convert_questions import main

if __name__ == '__main__':
    retCode = main(sys.argv)
    sys.exit(retCode)
