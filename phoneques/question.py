"""Representation for phone questions.

A phone question is a named set of phones, for example "Nasal" containing
m, n and ng. In decision tree clustering such a question asks whether the
phone in some position of a full-context label is a member of the set.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

from phoneques.errors import ErrorSet, PhoneQuestionErrorType

defaultQuestionFormat = 'QS {0} {{{1}}}'
defaultItemFormat = '{0}'
defaultDelimiter = ','

class PhoneQuestion(object):
    """A named, ordered list of phones.

    The phone list is a plain list and is not protected against duplicates.
    Callers which want set semantics should check contains before appending.
    """
    def __init__(self, name, phones = None):
        self.name = name
        self.phones = [] if phones is None else list(phones)
    def __repr__(self):
        return 'PhoneQuestion(%r, %r)' % (self.name, self.phones)
    def __str__(self):
        return self.toString(defaultQuestionFormat, defaultItemFormat,
                             defaultDelimiter)
    def __eq__(self, other):
        return (isinstance(other, PhoneQuestion) and
                self.name == other.name and
                self.phones == other.phones)
    def __ne__(self, other):
        return not (self == other)
    __hash__ = None
    def __len__(self):
        return len(self.phones)

    def contains(self, phone):
        return phone in self.phones

    def phoneListString(self):
        """Returns the canonical key identifying the content of this question.

        The key is the sorted phone list joined with single spaces, so two
        questions have the same key iff they contain the same phones
        (counting multiplicity) in any order. The stored phone order is left
        unchanged.
        """
        return ' '.join(sorted(self.phones))

    def toString(self, questionFormat, itemFormat, delimiter):
        """Renders this question using str.format templates.

        itemFormat is applied to each phone (as argument 0), the results
        are joined by delimiter, and questionFormat is applied to the name
        (argument 0) and the joined items (argument 1).
        Returns the empty string for a question with no phones.
        """
        if not self.phones:
            return ''
        items = delimiter.join([ itemFormat.format(phone)
                                 for phone in self.phones ])
        return questionFormat.format(self.name, items)

    def validate(self, phoneSet):
        """Checks every phone is in phoneSet.

        phoneSet need only provide getPhone, returning None for an unknown
        phone. Returns an ErrorSet with one UnrecognizedPhone error for each
        phone not found.
        """
        errors = ErrorSet()
        for phone in self.phones:
            if phoneSet.getPhone(phone) is None:
                errors.add(PhoneQuestionErrorType.UnrecognizedPhone, phone,
                           self.name)
        return errors
