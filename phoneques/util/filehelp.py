"""Filesystem helper functions."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import os
import logging
import shutil
import tempfile

class LineReader(object):
    """Iterable over the lines of a text file, without line terminators.

    The file is opened on construction, so an IOError for a missing or
    unreadable file is raised immediately rather than on first iteration.
    Use as a context manager to make sure the file is closed.
    """
    def __init__(self, location, encoding = 'utf-8'):
        self.location = location
        self._file = open(location, 'r', encoding = encoding)
    def __repr__(self):
        return 'LineReader(%r)' % self.location
    def __iter__(self):
        for line in self._file:
            yield line.rstrip('\r\n')
    def close(self):
        self._file.close()
    def __enter__(self):
        return self
    def __exit__(self, excType, excValue, tb):
        self.close()

def readLines(location, encoding = 'utf-8'):
    return LineReader(location, encoding = encoding)

def writeLines(location, lines, encoding = 'utf-8'):
    with open(location, 'w', encoding = encoding) as f:
        for line in lines:
            f.write(line)
            f.write('\n')

class TempDir(object):
    def __init__(self):
        self.location = tempfile.mkdtemp(prefix = 'phoneques.')
    def remove(self):
        shutil.rmtree(self.location)
    def __del__(self):
        if os.path.isdir(self.location):
            logging.warning('temporary directory %s not deleted. You'
                            ' probably want to do this manually after looking'
                            ' at its contents.' % self.location)
