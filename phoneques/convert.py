"""Conversion, deduplication and coverage completion of phone questions.

Question sets written for one phone inventory are often reused with another,
for example when phones are split into context-dependent variants. The
functions here remap the phones of each question through a mapping
callable, discard questions which have become duplicates, and add singleton
questions so that every phone of the target inventory can be asked about
individually.

A mapping callable takes a phone and returns a list of replacement phones.
An empty list (or a list whose first element is empty) means the phone has
no counterpart; such phones are dropped from the converted question.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import logging
import collections

import numpy as np

from phoneques.question import PhoneQuestion
from phoneques.util import filehelp

missingQuestionNameSuffix = '_AutoGen_'

class PhoneMap(object):
    """Picklable dict-backed phone mapping.

    Maps each phone to a list of replacement phones, returning an empty list
    for phones not in the mapping.
    """
    def __init__(self, mapping):
        self.mapping = dict([ (phone, list(mappedPhones))
                              for phone, mappedPhones in mapping.items() ])
    def __repr__(self):
        return 'PhoneMap(%r)' % self.mapping
    def __call__(self, phone):
        return list(self.mapping.get(phone, []))

def loadPhoneMap(filePath):
    """Loads a PhoneMap from a text file.

    Each non-blank line not starting with '#' has the form
    "phone mappedPhone1 mappedPhone2 ...". A phone listed on its own maps to
    nothing. Later lines for the same phone replace earlier ones.
    """
    mapping = collections.OrderedDict()
    with filehelp.readLines(filePath) as lines:
        for rawLine in lines:
            line = rawLine.strip()
            if not line or line.startswith('#'):
                continue
            fields = line.split()
            mapping[fields[0]] = fields[1:]
    return PhoneMap(mapping)

def convertQuestion(question, mapPhone, warnings = None):
    """Returns a new question with each phone replaced by its mapped phones.

    Phone order is preserved and mapped phones are not deduplicated, so two
    phones mapping to the same phone give a repeated entry.
    Phones with no mapping are dropped; a message for each is logged and,
    if warnings is a list, appended to it.
    """
    converted = PhoneQuestion(question.name)
    for phone in question.phones:
        mappedPhones = mapPhone(phone)
        if not mappedPhones or not mappedPhones[0]:
            message = ("Can't find phone [%s]'s mapped phone in question"
                       " [%s]" % (phone, question.name))
            logging.warning(message)
            if warnings is not None:
                warnings.append(message)
            continue
        converted.phones.extend(mappedPhones)
    return converted

def removeDuplicate(questions):
    """Removes empty and duplicate questions.

    Keeps the first non-empty question with each name, then among those the
    first question with each set of phones (as given by phoneListString).
    Order of the surviving questions is preserved.
    """
    uniqueNameQuestions = collections.OrderedDict()
    for question in questions:
        if question.phones and question.name not in uniqueNameQuestions:
            uniqueNameQuestions[question.name] = question

    uniquePhoneListQuestions = collections.OrderedDict()
    for question in uniqueNameQuestions.values():
        key = question.phoneListString()
        if key not in uniquePhoneListQuestions:
            uniquePhoneListQuestions[key] = question

    return list(uniquePhoneListQuestions.values())

def convertQuestions(questions, mapPhone, warnings = None):
    """Converts each question then removes duplicates from the result."""
    converted = [ convertQuestion(question, mapPhone, warnings = warnings)
                  for question in questions ]
    return removeDuplicate(converted)

def getMissingPhoneSet(questions, phones):
    """Returns singleton questions for phones lacking one.

    A phone counts as covered only if some question consists of exactly that
    one phone. Each uncovered phone gets a new question named
    "<phone>_AutoGen_". The result follows the order in which phones first
    appear in phones.
    """
    phoneCovered = collections.OrderedDict()
    for phone in phones:
        phoneCovered[phone] = False

    for question in questions:
        if len(question.phones) != 1:
            continue
        phone = question.phones[0]
        if phone in phoneCovered:
            phoneCovered[phone] = True

    return [ PhoneQuestion(phone + missingQuestionNameSuffix, [phone])
             for phone, covered in phoneCovered.items() if not covered ]

def getCoverageMatrix(questions, phones):
    """Returns question-by-phone membership matrix.

    Entry (i, j) is True iff question i contains phones[j].
    """
    phoneIndex = dict([ (phone, index) for index, phone in enumerate(phones) ])
    coverage = np.zeros((len(questions), len(phones)), dtype = bool)
    for questionIndex, question in enumerate(questions):
        for phone in question.phones:
            index = phoneIndex.get(phone)
            if index is not None:
                coverage[questionIndex, index] = True
    return coverage

def getUncoveredPhones(questions, phones):
    """Returns the phones not contained in any question, in given order."""
    phones = list(collections.OrderedDict.fromkeys(phones))
    coverage = getCoverageMatrix(questions, phones)
    covered = np.any(coverage, axis = 0)
    return [ phone for phone, isCovered in zip(phones, covered)
             if not isCovered ]
