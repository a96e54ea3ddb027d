"""Converts a phone question file for use with a phone inventory.

Loads a question file, optionally remaps its phones using a phone mapping
file, optionally adds singleton questions for phones lacking one, checks
the result against a phone inventory and writes it in HTS format.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import sys
import logging
import argparse

from phoneques import convert
from phoneques import questionfile
from phoneques.phoneset import PhoneInventory
from phoneques.phoneset_cmu import phonesetNames
from phoneques.util import filehelp

def loadPhoneList(filePath):
    with filehelp.readLines(filePath) as lines:
        return [ line.strip() for line in lines if line.strip() ]

def main(rawArgs):
    parser = argparse.ArgumentParser(
        description = 'Converts a phone question file.'
    )
    parser.add_argument(
        'questionFile', metavar = 'QUESTION_FILE',
        help = 'question file to read'
    )
    parser.add_argument(
        'outFile', metavar = 'OUT_FILE',
        help = 'question file to write'
    )
    parser.add_argument(
        '--map', dest = 'mapFile', metavar = 'MAP_FILE',
        help = 'phone mapping file (lines of "phone mappedPhone ...")'
    )
    parser.add_argument(
        '--phoneset', dest = 'phoneset', choices = sorted(phonesetNames),
        help = 'phone inventory to validate against'
    )
    parser.add_argument(
        '--phones', dest = 'phonesFile', metavar = 'PHONE_FILE',
        help = 'file listing the phone inventory, one phone per line'
              ' (overrides --phoneset)'
    )
    parser.add_argument(
        '--add-missing', dest = 'addMissing', action = 'store_true',
        help = 'add a singleton question for each phone lacking one'
    )
    parser.add_argument(
        '--verbosity', dest = 'verbosity', type = int, default = 1,
        metavar = 'VERB', help = 'verbosity level (default: 1)'
    )
    args = parser.parse_args(rawArgs[1:])
    if args.addMissing and args.phoneset is None and args.phonesFile is None:
        parser.error('--add-missing requires --phoneset or --phones')

    logging.basicConfig(
        level = logging.INFO if args.verbosity >= 2 else logging.WARNING,
        format = '%(levelname)s: %(message)s'
    )

    questions = questionfile.load(args.questionFile)
    logging.info('loaded %s questions from %s' %
                 (len(questions), args.questionFile))

    if args.mapFile is not None:
        phoneMap = convert.loadPhoneMap(args.mapFile)
        questions = convert.convertQuestions(questions, phoneMap)
        logging.info('%s questions after conversion' % len(questions))

    if args.phonesFile is not None:
        phoneSet = PhoneInventory(loadPhoneList(args.phonesFile))
    elif args.phoneset is not None:
        phoneSet = phonesetNames[args.phoneset]()
    else:
        phoneSet = None

    numErrors = 0
    if phoneSet is not None:
        if args.addMissing:
            missing = convert.getMissingPhoneSet(questions, phoneSet.phoneList)
            logging.info('adding %s singleton questions' % len(missing))
            questions = questions + missing
        for phone in convert.getUncoveredPhones(questions, phoneSet.phoneList):
            logging.warning('phone %s not covered by any question' % phone)
        for question in questions:
            errors = question.validate(phoneSet)
            for message in errors.messages():
                logging.warning(message)
            numErrors += len(errors)

    questionfile.save(args.outFile, questions)
    logging.info('wrote %s questions to %s' % (len(questions), args.outFile))

    return 0 if numErrors == 0 else 1

if __name__ == '__main__':
    retCode = main(sys.argv)
    sys.exit(retCode)
