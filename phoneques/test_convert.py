"""Unit tests for conversion, deduplication and coverage of questions."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import os
import pickle
import unittest
import random

import numpy as np

from phoneques import convert
from phoneques.question import PhoneQuestion
from phoneques.util.filehelp import TempDir, writeLines

phoneChoices = ['a', 'b', 'ch', 'i', 'm', 'n', 'ng', 'sil']

def gen_question(name):
    phones = []
    for i in range(random.randint(0, 4)):
        phone = random.choice(phoneChoices)
        if phone not in phones:
            phones.append(phone)
    return PhoneQuestion(name, phones)

def gen_questions(numQuestions):
    return [ gen_question(random.choice(['Q1', 'Q2', 'Q3', 'Q4', 'Q5']))
             for i in range(numQuestions) ]

def snapshot(questions):
    return [ (question.name, list(question.phones)) for question in questions ]

class TestConvert(unittest.TestCase):
    def test_convertQuestion(self):
        question = PhoneQuestion('Nasal', ['m', 'n'])
        phoneMap = convert.PhoneMap({'m': ['m1', 'm2'], 'n': []})
        warnings = []
        converted = convert.convertQuestion(question, phoneMap,
                                            warnings = warnings)
        assert converted == PhoneQuestion('Nasal', ['m1', 'm2'])
        assert converted is not question
        assert question.phones == ['m', 'n']
        assert warnings == [
            "Can't find phone [n]'s mapped phone in question [Nasal]"
        ]

    def test_convertQuestion_no_warnings_list(self):
        question = PhoneQuestion('Nasal', ['m', 'n'])
        converted = convert.convertQuestion(question,
                                            lambda phone: [phone.upper()])
        assert converted == PhoneQuestion('Nasal', ['M', 'N'])

    def test_convertQuestion_blank_mapping(self):
        question = PhoneQuestion('Q', ['a', 'b', 'c'])
        mapping = {'a': [''], 'b': ['x', 'y'], 'c': ['x']}
        converted = convert.convertQuestion(question, lambda phone: mapping[phone])
        # duplicates from different source phones are kept
        assert converted.phones == ['x', 'y', 'x']

    def test_convertQuestions_same_name(self):
        questions = [PhoneQuestion('X', ['a', 'b']), PhoneQuestion('X', ['b', 'a'])]
        converted = convert.convertQuestions(questions, lambda phone: [phone])
        assert len(converted) == 1
        assert converted[0].name == 'X'

    def test_removeDuplicate(self):
        questions = [
            PhoneQuestion('Empty'),
            PhoneQuestion('A', ['a', 'b']),
            PhoneQuestion('Empty', ['c']),
            PhoneQuestion('A', ['c']),
            PhoneQuestion('B', ['b', 'a']),
            PhoneQuestion('C', ['c']),
            PhoneQuestion('D', ['d']),
        ]
        deduped = convert.removeDuplicate(questions)
        assert snapshot(deduped) == [
            ('A', ['a', 'b']),
            ('Empty', ['c']),
            ('D', ['d']),
        ]
        assert deduped[0] is questions[1]
        # inputs are not mutated
        assert questions[4].phones == ['b', 'a']

    def test_removeDuplicate_idempotent(self, its = 100):
        for it in range(its):
            questions = gen_questions(random.randint(0, 10))
            once = convert.removeDuplicate(questions)
            twice = convert.removeDuplicate(once)
            assert snapshot(once) == snapshot(twice)
            names = [ question.name for question in once ]
            keys = [ question.phoneListString() for question in once ]
            assert len(set(names)) == len(names)
            assert len(set(keys)) == len(keys)
            assert all([ question.phones for question in once ])

    def test_getMissingPhoneSet(self):
        questions = [PhoneQuestion('Q1', ['a'])]
        missing = convert.getMissingPhoneSet(questions, ['a', 'b'])
        assert missing == [PhoneQuestion('b_AutoGen_', ['b'])]

    def test_getMissingPhoneSet_singletons_only(self):
        questions = [
            PhoneQuestion('AB', ['a', 'b']),
            PhoneQuestion('C', ['c']),
            PhoneQuestion('X', ['x']),
        ]
        missing = convert.getMissingPhoneSet(questions, ['b', 'c', 'a', 'b'])
        assert missing == [
            PhoneQuestion('b_AutoGen_', ['b']),
            PhoneQuestion('a_AutoGen_', ['a']),
        ]

    def test_getMissingPhoneSet_completes_coverage(self, its = 100):
        for it in range(its):
            questions = gen_questions(random.randint(0, 8))
            phones = [ random.choice(phoneChoices)
                       for i in range(random.randint(0, 10)) ]
            combined = questions + convert.getMissingPhoneSet(questions, phones)
            singletons = set([ question.phones[0] for question in combined
                               if len(question.phones) == 1 ])
            for phone in phones:
                assert phone in singletons
            assert convert.getMissingPhoneSet(combined, phones) == []

    def test_getCoverageMatrix(self):
        questions = [
            PhoneQuestion('AB', ['a', 'b']),
            PhoneQuestion('Z', ['z']),
        ]
        coverage = convert.getCoverageMatrix(questions, ['a', 'b', 'c'])
        assert coverage.dtype == np.bool_
        assert np.array_equal(coverage, [[True, True, False],
                                         [False, False, False]])
        assert convert.getCoverageMatrix([], ['a']).shape == (0, 1)

    def test_getUncoveredPhones(self):
        questions = [PhoneQuestion('AB', ['a', 'b'])]
        assert (convert.getUncoveredPhones(questions, ['c', 'a', 'd', 'c']) ==
                ['c', 'd'])
        assert convert.getUncoveredPhones([], ['a']) == ['a']
        assert convert.getUncoveredPhones(questions, []) == []

    def test_PhoneMap(self):
        phoneMap = convert.PhoneMap({'a': ('a1', 'a2')})
        assert phoneMap('a') == ['a1', 'a2']
        assert phoneMap('b') == []
        phoneMap('a').append('a3')
        assert phoneMap('a') == ['a1', 'a2']
        phoneMapAgain = pickle.loads(pickle.dumps(phoneMap))
        assert phoneMapAgain.mapping == phoneMap.mapping

    def test_loadPhoneMap(self):
        tempDir = TempDir()
        location = os.path.join(tempDir.location, 'phones.map')
        writeLines(location, [
            '# source target...',
            'm m1 m2',
            '',
            'n',
            '  ng   ng  ',
        ])
        phoneMap = convert.loadPhoneMap(location)
        assert phoneMap('m') == ['m1', 'm2']
        assert phoneMap('n') == []
        assert phoneMap('ng') == ['ng']
        assert phoneMap('#') == []
        tempDir.remove()

def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestConvert)

if __name__ == '__main__':
    unittest.main()
