# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Character data from UnicodeData.txt.

Each line of UnicodeData.txt describes a single code point in 15
semicolon-delimited fields.  Empty fields are meaningful:  they mark a value
as absent, and never shift the fields that follow.  Lines are parsed
independently, so the `<..., First>` and `<..., Last>` lines that delimit
ranges such as the CJK ideographs give two separate characters.

Absent values are represented by the same sentinels throughout:  -1 for the
combining class and the digit values, numerator -1 with denominator 1 for the
numeric value, '' for strings, () for the decomposition mapping, and None for
the simple case mappings.
'''


# pylint: disable=C0103, C0301


import fractions
import logging
import threading
from . import err
from .coding import parse_hex, parse_decimal, codepoint_string, as_codepoint, MAX_CODE_POINT
from .constants import CONTROL_NAME, LEFT_TO_RIGHT, DECOMPOSITION_TAG_BEGIN
from .reclaim import ReclaimableMap, ReclaimableReference


_logger = logging.getLogger(__name__)


# UnicodeData.txt fields, from UAX #44, Table 9, Fields in UnicodeData.txt
FIELD_CODE_POINT = 0
FIELD_NAME = 1
FIELD_GENERAL_CATEGORY = 2
FIELD_CANONICAL_COMBINING_CLASS = 3
FIELD_BIDI_CLASS = 4
FIELD_DECOMPOSITION = 5
FIELD_DECIMAL_DIGIT_VALUE = 6
FIELD_DIGIT_VALUE = 7
FIELD_NUMERIC_VALUE = 8
FIELD_MIRRORED = 9
FIELD_UNICODE_1_NAME = 10
FIELD_ISO_COMMENT = 11
FIELD_UPPERCASE_MAPPING = 12
FIELD_LOWERCASE_MAPPING = 13
FIELD_TITLECASE_MAPPING = 14

FIELD_COUNT = 15
# The titlecase mapping may be left off the end of a line
MIN_FIELD_COUNT = 14

FIELD_DELIMITER = ';'
MAPPING_DELIMITER = ' '
FRACTION_DIVIDER = '/'
MIRRORED_YES = 'Y'
MIRRORED_NO = 'N'




class UnicodeCharacter(object):
    '''
    Properties of a single code point, as given in UnicodeData.txt.

    Instances are read-only.  Characters sort by code point, while equality
    compares every field.
    '''
    __slots__ = ['code_point', 'name', 'general_category',
                 'canonical_combining_class', 'bidirectional_category',
                 'decomposition_tag', 'decomposition_mapping',
                 'decimal_digit_value', 'digit_value',
                 'numeric_value_numerator', 'numeric_value_denominator',
                 'mirrored', 'unicode_1_name', 'iso_comment',
                 'uppercase_mapping', 'lowercase_mapping', 'titlecase_mapping']

    def __init__(self, code_point, name, general_category='',
                 canonical_combining_class=-1,
                 bidirectional_category=LEFT_TO_RIGHT,
                 decomposition_tag='', decomposition_mapping=(),
                 decimal_digit_value=-1, digit_value=-1,
                 numeric_value_numerator=-1, numeric_value_denominator=1,
                 mirrored=False, unicode_1_name='', iso_comment='',
                 uppercase_mapping=None, lowercase_mapping=None,
                 titlecase_mapping=None):
        if isinstance(code_point, bool) or not isinstance(code_point, int):
            raise TypeError('"code_point" must be an integer')
        if code_point < 0 or code_point > MAX_CODE_POINT:
            raise ValueError('"code_point" must be in the range [0, 0x10FFFF]')
        if not isinstance(name, str):
            raise TypeError('"name" must be a string')
        if numeric_value_denominator == 0:
            raise ValueError('"numeric_value_denominator" must not be zero')
        values = locals()
        for attr in self.__slots__:
            object.__setattr__(self, attr, values[attr])
        object.__setattr__(self, 'decomposition_mapping', tuple(decomposition_mapping))
        object.__setattr__(self, 'mirrored', bool(mirrored))

    def __setattr__(self, attr, value):
        raise AttributeError('UnicodeCharacter instances are read-only')

    def __repr__(self):
        return '{0}.{1}({2}, {3!r})'.format(self.__module__, type(self).__name__, codepoint_string(self.code_point), self.name)

    def __str__(self):
        return codepoint_string(self.code_point)

    def __hash__(self):
        return hash(self.code_point)

    def __eq__(self, other):
        if isinstance(other, type(self)) and all(getattr(self, attr) == getattr(other, attr) for attr in self.__slots__):
            return True
        return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __lt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.code_point < other.code_point

    def __le__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.code_point <= other.code_point

    def __gt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.code_point > other.code_point

    def __ge__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.code_point >= other.code_point


    @property
    def is_control(self):
        return self.name.lower() == CONTROL_NAME

    @property
    def unique_name(self):
        '''
        The name, except for control characters, which all share the name
        "<control>" and are given their Unicode 1.0 name instead.  This may
        be '' for control characters without a Unicode 1.0 name.
        '''
        if self.is_control:
            return self.unicode_1_name
        return self.name

    @property
    def has_compatibility_decomposition(self):
        return bool(self.decomposition_tag)

    @property
    def has_numeric_value(self):
        return not (self.numeric_value_numerator == -1 and self.numeric_value_denominator == 1)

    @property
    def is_numeric_value_fraction(self):
        return self.numeric_value_denominator != 1

    @property
    def numeric_value(self):
        '''
        Numeric value as a float, or NaN if there is none.

        For fractions this is the bare numerator, not the quotient:  U+00BC
        VULGAR FRACTION ONE QUARTER gives 1.0.  Existing consumers depend on
        this; use `numeric_fraction` for the actual value.
        '''
        if not self.has_numeric_value:
            return float('nan')
        if self.is_numeric_value_fraction:
            return float(self.numeric_value_numerator)
        return float(self.numeric_value_numerator // self.numeric_value_denominator)

    @property
    def numeric_fraction(self):
        '''
        Numeric value as a `fractions.Fraction`, or None if there is none.
        '''
        if not self.has_numeric_value:
            return None
        return fractions.Fraction(self.numeric_value_numerator, self.numeric_value_denominator)




def _optional_int(value):
    if value:
        return parse_decimal(value)
    return -1


def _optional_hex(value):
    if value:
        return parse_hex(value)
    return None


def _code_point(value):
    cp = parse_hex(value)
    if cp > MAX_CODE_POINT:
        raise ValueError('Code point {0} is above U+10FFFF'.format(value))
    return cp


def _parse_code_point(value):
    return {'code_point': _code_point(value)}


def _parse_name(value):
    return {'name': value}


def _parse_general_category(value):
    return {'general_category': value}


def _parse_canonical_combining_class(value):
    return {'canonical_combining_class': _optional_int(value)}


def _parse_bidi_class(value):
    return {'bidirectional_category': value}


def _parse_decomposition(value):
    tag = ''
    mapping = []
    for token in value.split(MAPPING_DELIMITER):
        if not token:
            continue
        if token.startswith(DECOMPOSITION_TAG_BEGIN):
            if tag:
                raise err.FormatError('Multiple decomposition tags: "{0}"'.format(value))
            tag = token
        else:
            mapping.append(parse_hex(token))
    return {'decomposition_tag': tag, 'decomposition_mapping': tuple(mapping)}


def _parse_decimal_digit_value(value):
    return {'decimal_digit_value': _optional_int(value)}


def _parse_digit_value(value):
    return {'digit_value': _optional_int(value)}


def _parse_numeric_value(value):
    if not value:
        return {}
    if FRACTION_DIVIDER in value:
        numerator, denominator = value.split(FRACTION_DIVIDER, 1)
        denominator = parse_decimal(denominator)
        if denominator <= 0:
            raise ValueError('Denominator must be positive in numeric value "{0}"'.format(value))
        return {'numeric_value_numerator': parse_decimal(numerator),
                'numeric_value_denominator': denominator}
    return {'numeric_value_numerator': parse_decimal(value),
            'numeric_value_denominator': 1}


def _parse_mirrored(value):
    return {'mirrored': value == MIRRORED_YES}


def _parse_unicode_1_name(value):
    return {'unicode_1_name': value}


def _parse_iso_comment(value):
    return {'iso_comment': value}


def _parse_uppercase_mapping(value):
    return {'uppercase_mapping': _optional_hex(value)}


def _parse_lowercase_mapping(value):
    return {'lowercase_mapping': _optional_hex(value)}


def _parse_titlecase_mapping(value):
    return {'titlecase_mapping': _optional_hex(value)}


# Indexed by field number
_field_parsers = (_parse_code_point,
                  _parse_name,
                  _parse_general_category,
                  _parse_canonical_combining_class,
                  _parse_bidi_class,
                  _parse_decomposition,
                  _parse_decimal_digit_value,
                  _parse_digit_value,
                  _parse_numeric_value,
                  _parse_mirrored,
                  _parse_unicode_1_name,
                  _parse_iso_comment,
                  _parse_uppercase_mapping,
                  _parse_lowercase_mapping,
                  _parse_titlecase_mapping)


def parse_unicodedata_line(line):
    '''
    Parse a single line of UnicodeData.txt into a UnicodeCharacter.

    Any problem is reported as a FormatError carrying the index of the field
    involved.
    '''
    fields = line.rstrip('\r\n').split(FIELD_DELIMITER)
    if len(fields) < MIN_FIELD_COUNT:
        raise err.FormatError('Missing fields; only {0} present'.format(len(fields)), field_index=len(fields))
    if len(fields) > FIELD_COUNT:
        raise err.FormatError('Unrecognized field; only {0} fields are defined'.format(FIELD_COUNT), field_index=FIELD_COUNT)
    kwargs = {}
    for field_index, value in enumerate(fields):
        try:
            kwargs.update(_field_parsers[field_index](value))
        except err.FormatError as e:
            raise err.FormatError(e.message, field_index=field_index)
        except ValueError as e:
            raise err.FormatError(str(e), field_index=field_index)
    return UnicodeCharacter(**kwargs)


def _hex(cp):
    return '{0:04X}'.format(cp)


def to_unicodedata_line(character):
    '''
    Convert a UnicodeCharacter into a line in the format of UnicodeData.txt,
    without a line ending.  Absent values are written as empty fields.
    '''
    fields = [''] * FIELD_COUNT
    fields[FIELD_CODE_POINT] = _hex(character.code_point)
    fields[FIELD_NAME] = character.name
    fields[FIELD_GENERAL_CATEGORY] = character.general_category
    if character.canonical_combining_class != -1:
        fields[FIELD_CANONICAL_COMBINING_CLASS] = str(character.canonical_combining_class)
    fields[FIELD_BIDI_CLASS] = character.bidirectional_category
    decomposition = [_hex(cp) for cp in character.decomposition_mapping]
    if character.decomposition_tag:
        decomposition.insert(0, character.decomposition_tag)
    fields[FIELD_DECOMPOSITION] = MAPPING_DELIMITER.join(decomposition)
    if character.decimal_digit_value != -1:
        fields[FIELD_DECIMAL_DIGIT_VALUE] = str(character.decimal_digit_value)
    if character.digit_value != -1:
        fields[FIELD_DIGIT_VALUE] = str(character.digit_value)
    if character.has_numeric_value:
        if character.is_numeric_value_fraction:
            fields[FIELD_NUMERIC_VALUE] = '{0}{1}{2}'.format(character.numeric_value_numerator, FRACTION_DIVIDER, character.numeric_value_denominator)
        else:
            fields[FIELD_NUMERIC_VALUE] = str(character.numeric_value_numerator)
    fields[FIELD_MIRRORED] = MIRRORED_YES if character.mirrored else MIRRORED_NO
    fields[FIELD_UNICODE_1_NAME] = character.unicode_1_name
    fields[FIELD_ISO_COMMENT] = character.iso_comment
    for field_index, cp in ((FIELD_UPPERCASE_MAPPING, character.uppercase_mapping),
                            (FIELD_LOWERCASE_MAPPING, character.lowercase_mapping),
                            (FIELD_TITLECASE_MAPPING, character.titlecase_mapping)):
        if cp is not None:
            fields[field_index] = _hex(cp)
    return FIELD_DELIMITER.join(fields)


def parse_unicodedata(lines, first=0, last=MAX_CODE_POINT):
    '''
    Parse the lines of UnicodeData.txt, returning a list of the characters
    with code points in the range [`first`, `last`].

    The file is in code point order, so reading stops at the first line past
    `last`.  Lines before `first` are only checked for a valid code point.
    Blank lines and comment lines are skipped.  The first malformed line
    aborts the parse with a FormatError carrying its 1-based line number.
    '''
    characters = []
    for line_number, line in enumerate(lines, 1):
        stripped_line = line.strip()
        if not stripped_line or stripped_line[:1] == '#':
            continue
        try:
            cp = _code_point(line.split(FIELD_DELIMITER, 1)[0])
        except ValueError as e:
            raise err.FormatError(str(e), line_number=line_number, field_index=FIELD_CODE_POINT)
        if cp < first:
            continue
        if cp > last:
            break
        try:
            characters.append(parse_unicodedata_line(line))
        except err.FormatError as e:
            raise err.FormatError(e.message, line_number=line_number, field_index=e.field_index)
    return characters




class CharacterCache(object):
    '''
    Cached lookup of characters by code point.

    On a miss, every character in the block containing the requested code
    point is loaded in a single pass over the data file, and the code points
    of that block without an entry are remembered as unassigned.  Later
    lookups anywhere in the block are then answered without reading the
    file.

    `loader(first, last)` must return the characters in the range
    [`first`, `last`].  Both the character cache and the unassigned code
    points may be reclaimed at any time and are rebuilt on demand.
    '''
    def __init__(self, block_index, loader, maxsize=None):
        if not hasattr(loader, '__call__'):
            raise TypeError('Invalid argument "loader"; must be callable')
        self._block_index = block_index
        self._loader = loader
        self._characters = ReclaimableMap(maxsize)
        # Maps each loaded UnicodeBlock to a frozenset of its unassigned
        # code points.  The dict is replaced, never modified, once published.
        self._unassigned = ReclaimableReference()
        self._unassigned_lock = threading.Lock()

    def is_known_unassigned(self, cp):
        unassigned = self._unassigned.get()
        if unassigned is None:
            return False
        for block, gaps in unassigned.items():
            if block.first <= cp <= block.last:
                return cp in gaps
        return False

    def character_at(self, cp):
        '''
        Return the UnicodeCharacter for code point `cp`, or None if the data
        file has no entry for it.
        '''
        cp = as_codepoint(cp)
        character = self._characters.get(cp)
        if character is not None:
            return character
        if self.is_known_unassigned(cp):
            return None
        block = self._block_index.find_block_containing(cp)
        if block is None:
            return None
        _logger.debug('Loading character data for block %s', block)
        for character in self._load(block.first, block.last, block):
            if character.code_point == cp:
                return character
        return None

    def all_characters(self):
        '''
        Return a list of every character in the data file, in code point
        order.
        '''
        _logger.debug('Loading all character data')
        return self._load(0, MAX_CODE_POINT)

    def _load(self, first, last, block=None):
        characters = sorted(self._loader(first, last), key=lambda c: c.code_point)
        self._characters.update((c.code_point, c) for c in characters)
        if block is not None:
            assigned = set(c.code_point for c in characters)
            gaps = frozenset(cp for cp in range(first, last+1) if cp not in assigned)
            if gaps:
                with self._unassigned_lock:
                    unassigned = dict(self._unassigned.get() or {})
                    unassigned[block] = gaps
                    self._unassigned.publish(unassigned)
        return characters

    def reclaim(self):
        self._characters.reclaim()
        self._unassigned.reclaim()
