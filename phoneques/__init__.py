"""Phone question sets for decision tree clustering in speech synthesis."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.
