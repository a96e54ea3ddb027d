"""Loading and saving of phone question files.

A question file contains one question per line, for example

    QS 'L_Nasal' {"m-*","n-*","ng-*"}

The format is described by a QuestionFileFormat: a question pattern whose
first two groups capture the question name and the list of items, an item
pattern whose first group captures the phone inside one item, and the
characters that separate items. Lines which do not match the question
pattern (comments, other directives) are ignored. An item which does not
match the item pattern means the file is malformed and aborts the load.
"""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon

# This file is part of phoneques.
# See `License` for details of license and warranty.

import re
import collections

from phoneques.errors import QuestionFileError, SourceUnavailableError
from phoneques.question import PhoneQuestion
from phoneques.util import filehelp

QuestionFileFormat = collections.namedtuple(
    'QuestionFileFormat',
    ['questionPattern', 'itemPattern', 'delimiters']
)

defaultFormat = QuestionFileFormat(
    questionPattern = r"^\s*QS\s+'L_(.*)'\s+\{(.*)\}\s*$",
    itemPattern = r'"(.*)-\*"',
    delimiters = ', ',
)

htsQuestionFormat = "QS 'L_{0}' {{{1}}}"
htsItemFormat = '"{0}-*"'
htsDelimiter = ','

class _CompiledFormat(object):
    def __init__(self, fileFormat):
        self.fileFormat = fileFormat
        self.questionRe = re.compile(fileFormat.questionPattern)
        self.itemRe = re.compile(fileFormat.itemPattern)
        if self.questionRe.groups < 2:
            raise QuestionFileError('invalid question regex %r (name and'
                                    ' items groups required)' %
                                    fileFormat.questionPattern)
        if self.itemRe.groups < 1:
            raise QuestionFileError('invalid question item regex %r (phone'
                                    ' group required)' %
                                    fileFormat.itemPattern)
        if not fileFormat.delimiters:
            raise QuestionFileError('no question item delimiters given')
        self.delimiterRe = re.compile(
            '[' + ''.join([ re.escape(c) for c in fileFormat.delimiters ]) +
            ']'
        )

def _buildPhoneQuestion(name, itemsString, compiled):
    question = PhoneQuestion(name)
    for rawItem in compiled.delimiterRe.split(itemsString):
        if not rawItem:
            continue
        item = rawItem.strip()
        match = compiled.itemRe.search(item)
        if not match:
            raise QuestionFileError(
                'invalid question item [%s] in question [%s] (item regex'
                ' %r)' % (item, name, compiled.fileFormat.itemPattern)
            )
        phone = match.group(1) or ''
        if not question.contains(phone):
            question.phones.append(phone)
    return question

def _loadOneQuestion(questionString, compiled):
    match = compiled.questionRe.search(questionString.strip())
    if not match:
        return None
    name, itemsString = match.group(1), match.group(2)
    if not name or not itemsString:
        return None
    return _buildPhoneQuestion(name, itemsString, compiled)

def loadOneQuestion(questionString, fileFormat = defaultFormat):
    """Parses one question line.

    Returns None if the line is not a question line or has an empty name or
    item list.
    """
    if not questionString:
        return None
    return _loadOneQuestion(questionString, _CompiledFormat(fileFormat))

def loadQuestions(lines, fileFormat = defaultFormat):
    """Parses questions from an iterable of lines."""
    compiled = _CompiledFormat(fileFormat)
    questions = []
    for lineIndex, rawLine in enumerate(lines):
        line = rawLine.strip()
        if not line:
            continue
        try:
            question = _loadOneQuestion(line, compiled)
        except QuestionFileError as e:
            raise QuestionFileError('line %s: %s (line was %r)' %
                                    (lineIndex + 1, e, line))
        if question is not None:
            questions.append(question)
    return questions

def load(filePath, fileFormat = defaultFormat):
    """Loads the questions in a question file.

    Raises SourceUnavailableError if the file cannot be opened or read and
    QuestionFileError if the format is invalid or the file contains a
    malformed question item or text which is not valid in the encoding.
    The file is closed in all cases.
    """
    try:
        lines = filehelp.readLines(filePath)
    except IOError as e:
        raise SourceUnavailableError(filePath, e)
    with lines:
        try:
            return loadQuestions(lines, fileFormat)
        except QuestionFileError as e:
            raise QuestionFileError('%s: %s' % (filePath, e))
        except UnicodeDecodeError as e:
            raise QuestionFileError('%s: could not decode question file (%s)'
                                    % (filePath, e))
        except IOError as e:
            raise SourceUnavailableError(filePath, e)

def save(filePath, questions, questionFormat = htsQuestionFormat,
         itemFormat = htsItemFormat, delimiter = htsDelimiter):
    """Writes questions to a question file, one per line.

    Questions with no phones are omitted. With the default arguments the
    output can be read back by load with defaultFormat.
    """
    lines = [ question.toString(questionFormat, itemFormat, delimiter)
              for question in questions ]
    filehelp.writeLines(filePath, [ line for line in lines if line ])
