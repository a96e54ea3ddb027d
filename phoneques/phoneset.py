"""Phone inventories.

A phone inventory lists the phones of a voice together with named subsets
of them (vowels, nasals, and so on). Question validation only needs
getPhone, which returns a Phone descriptor or None for an unknown phone.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import collections

from phoneques.question import PhoneQuestion

Phone = collections.namedtuple('Phone', ['name', 'subsets'])

class PhoneInventory(object):
    def __init__(self, phoneList, namedPhoneSubsets = None):
        if namedPhoneSubsets is None:
            namedPhoneSubsets = []
        self.phoneList = list(phoneList)
        self.namedPhoneSubsets = [ (subsetName, frozenset(subset))
                                   for subsetName, subset in namedPhoneSubsets ]

        subsetNames = collections.OrderedDict([ (phone, [])
                                                for phone in self.phoneList ])
        for subsetName, subset in self.namedPhoneSubsets:
            for phone in subset:
                if phone in subsetNames:
                    subsetNames[phone].append(subsetName)
        self._phones = dict([ (phone, Phone(phone, tuple(names)))
                              for phone, names in subsetNames.items() ])

    def __repr__(self):
        return 'PhoneInventory(%r, %r)' % (self.phoneList,
                                           self.namedPhoneSubsets)

    def __contains__(self, phone):
        return phone in self._phones

    def getPhone(self, phone):
        return self._phones.get(phone)

def getSubsetQuestions(namedSubsets):
    """Returns one question per named subset, phones in sorted order."""
    return [ PhoneQuestion(subsetName, sorted(subset))
             for subsetName, subset in namedSubsets ]
