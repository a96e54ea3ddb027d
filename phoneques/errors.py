"""Diagnostics and exceptions for phone question sets.

Two kinds of problem arise when handling question sets. Problems with the
input itself (a question file that cannot be opened, a question or item
pattern without enough capture groups, a malformed item in a question line)
are fatal and raised as exceptions. Problems with the content (a phone that
is not in the phone inventory) are accumulated as typed diagnostics in an
ErrorSet and returned to the caller.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import enum

class PhoneQuestionErrorType(enum.Enum):
    UnrecognizedPhone = 'UnrecognizedPhone'

errorMessages = {
    PhoneQuestionErrorType.UnrecognizedPhone:
        'Unrecognized phone [{0}] in question [{1}]',
}

class PhoneQuestionError(object):
    """A single diagnostic about a phone in a question."""
    def __init__(self, errorType, phone, questionName):
        self.errorType = errorType
        self.phone = phone
        self.questionName = questionName
    def __repr__(self):
        return ('PhoneQuestionError(%s, %r, %r)' %
                (self.errorType, self.phone, self.questionName))
    def __eq__(self, other):
        return (isinstance(other, PhoneQuestionError) and
                self.errorType == other.errorType and
                self.phone == other.phone and
                self.questionName == other.questionName)
    def __ne__(self, other):
        return not (self == other)
    def __hash__(self):
        return hash((self.errorType, self.phone, self.questionName))
    def message(self):
        return errorMessages[self.errorType].format(self.phone,
                                                    self.questionName)

class ErrorSet(object):
    """Ordered collection of diagnostics."""
    def __init__(self, errors = None):
        self.errors = [] if errors is None else list(errors)
    def __repr__(self):
        return 'ErrorSet(%r)' % self.errors
    def __len__(self):
        return len(self.errors)
    def __iter__(self):
        return iter(self.errors)
    def __bool__(self):
        return len(self.errors) > 0
    def add(self, errorType, phone, questionName):
        self.errors.append(PhoneQuestionError(errorType, phone, questionName))
    def merge(self, errorSet):
        self.errors.extend(errorSet)
    def messages(self):
        return [ error.message() for error in self.errors ]

class QuestionFileError(RuntimeError):
    """A question file or question file format is malformed."""
    pass

class SourceUnavailableError(IOError):
    """A question file could not be opened."""
    def __init__(self, location, cause):
        IOError.__init__(self, 'could not open question file %s (%s)' %
                         (location, cause))
        self.location = location
        self.cause = cause
