# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Property values used in UnicodeData.txt.

General_Category values are from UAX #44, Table 12, General_Category Values.
Bidi_Class values are from Table 13, Bidi_Class Values.  Decomposition tags
are from Table 14, Compatibility Formatting Tags, and combining classes are
from Table 15, Canonical_Combining_Class Values.
http://unicode.org/reports/tr44/
'''


# pylint: disable=C0103


# Name shared by all control characters; their Unicode 1.0 names tell them
# apart.
CONTROL_NAME = '<control>'


# General categories
LETTER_UPPERCASE = 'Lu'
LETTER_LOWERCASE = 'Ll'
LETTER_TITLECASE = 'Lt'
LETTER_MODIFIER = 'Lm'
LETTER_OTHER = 'Lo'
MARK_NONSPACING = 'Mn'
MARK_SPACING_COMBINING = 'Mc'
MARK_ENCLOSING = 'Me'
NUMBER_DECIMAL_DIGIT = 'Nd'
NUMBER_LETTER = 'Nl'
NUMBER_OTHER = 'No'
PUNCTUATION_CONNECTOR = 'Pc'
PUNCTUATION_DASH = 'Pd'
PUNCTUATION_OPEN = 'Ps'
PUNCTUATION_CLOSE = 'Pe'
PUNCTUATION_INITIAL_QUOTE = 'Pi'
PUNCTUATION_FINAL_QUOTE = 'Pf'
PUNCTUATION_OTHER = 'Po'
SYMBOL_MATH = 'Sm'
SYMBOL_CURRENCY = 'Sc'
SYMBOL_MODIFIER = 'Sk'
SYMBOL_OTHER = 'So'
SEPARATOR_SPACE = 'Zs'
SEPARATOR_LINE = 'Zl'
SEPARATOR_PARAGRAPH = 'Zp'
OTHER_CONTROL = 'Cc'
OTHER_FORMAT = 'Cf'
OTHER_SURROGATE = 'Cs'
OTHER_PRIVATE_USE = 'Co'
OTHER_NOT_ASSIGNED = 'Cn'

GENERAL_CATEGORIES = (LETTER_UPPERCASE, LETTER_LOWERCASE, LETTER_TITLECASE,
                      LETTER_MODIFIER, LETTER_OTHER,
                      MARK_NONSPACING, MARK_SPACING_COMBINING, MARK_ENCLOSING,
                      NUMBER_DECIMAL_DIGIT, NUMBER_LETTER, NUMBER_OTHER,
                      PUNCTUATION_CONNECTOR, PUNCTUATION_DASH,
                      PUNCTUATION_OPEN, PUNCTUATION_CLOSE,
                      PUNCTUATION_INITIAL_QUOTE, PUNCTUATION_FINAL_QUOTE,
                      PUNCTUATION_OTHER,
                      SYMBOL_MATH, SYMBOL_CURRENCY, SYMBOL_MODIFIER,
                      SYMBOL_OTHER,
                      SEPARATOR_SPACE, SEPARATOR_LINE, SEPARATOR_PARAGRAPH,
                      OTHER_CONTROL, OTHER_FORMAT, OTHER_SURROGATE,
                      OTHER_PRIVATE_USE, OTHER_NOT_ASSIGNED)


# Bidirectional classes
LEFT_TO_RIGHT = 'L'
RIGHT_TO_LEFT = 'R'
RIGHT_TO_LEFT_ARABIC = 'AL'
EUROPEAN_NUMBER = 'EN'
EUROPEAN_NUMBER_SEPARATOR = 'ES'
EUROPEAN_NUMBER_TERMINATOR = 'ET'
ARABIC_NUMBER = 'AN'
COMMON_NUMBER_SEPARATOR = 'CS'
NON_SPACING_MARK = 'NSM'
BOUNDARY_NEUTRAL = 'BN'
PARAGRAPH_SEPARATOR = 'B'
SEGMENT_SEPARATOR = 'S'
WHITESPACE = 'WS'
OTHER_NEUTRAL = 'ON'
LEFT_TO_RIGHT_EMBEDDING = 'LRE'
LEFT_TO_RIGHT_OVERRIDE = 'LRO'
RIGHT_TO_LEFT_EMBEDDING = 'RLE'
RIGHT_TO_LEFT_OVERRIDE = 'RLO'
POP_DIRECTIONAL_FORMAT = 'PDF'
LEFT_TO_RIGHT_ISOLATE = 'LRI'
RIGHT_TO_LEFT_ISOLATE = 'RLI'
FIRST_STRONG_ISOLATE = 'FSI'
POP_DIRECTIONAL_ISOLATE = 'PDI'

BIDI_CLASSES = (LEFT_TO_RIGHT, RIGHT_TO_LEFT, RIGHT_TO_LEFT_ARABIC,
                EUROPEAN_NUMBER, EUROPEAN_NUMBER_SEPARATOR,
                EUROPEAN_NUMBER_TERMINATOR, ARABIC_NUMBER,
                COMMON_NUMBER_SEPARATOR, NON_SPACING_MARK, BOUNDARY_NEUTRAL,
                PARAGRAPH_SEPARATOR, SEGMENT_SEPARATOR, WHITESPACE,
                OTHER_NEUTRAL,
                LEFT_TO_RIGHT_EMBEDDING, LEFT_TO_RIGHT_OVERRIDE,
                RIGHT_TO_LEFT_EMBEDDING, RIGHT_TO_LEFT_OVERRIDE,
                POP_DIRECTIONAL_FORMAT,
                LEFT_TO_RIGHT_ISOLATE, RIGHT_TO_LEFT_ISOLATE,
                FIRST_STRONG_ISOLATE, POP_DIRECTIONAL_ISOLATE)


# Compatibility formatting tags
FONT = '<font>'
NO_BREAK = '<noBreak>'
INITIAL = '<initial>'
MEDIAL = '<medial>'
FINAL = '<final>'
ISOLATED = '<isolated>'
CIRCLE = '<circle>'
SUPER = '<super>'
SUB = '<sub>'
VERTICAL = '<vertical>'
WIDE = '<wide>'
NARROW = '<narrow>'
SMALL = '<small>'
SQUARE = '<square>'
FRACTION = '<fraction>'
COMPAT = '<compat>'

DECOMPOSITION_TAGS = (FONT, NO_BREAK, INITIAL, MEDIAL, FINAL, ISOLATED,
                      CIRCLE, SUPER, SUB, VERTICAL, WIDE, NARROW, SMALL,
                      SQUARE, FRACTION, COMPAT)

DECOMPOSITION_TAG_BEGIN = FONT[0]


# Canonical combining classes.  Classes 10 through 199 are the fixed
# position classes of individual scripts.
NOT_REORDERED = 0
OVERLAY = 1
HAN_READING = 6
NUKTA = 7
KANA_VOICING = 8
VIRAMA = 9
FIXED_POSITION_FIRST = 10
FIXED_POSITION_LAST = 199
ATTACHED_BELOW_LEFT = 200
ATTACHED_BELOW = 202
ATTACHED_BELOW_RIGHT = 204
ATTACHED_LEFT = 208
ATTACHED_RIGHT = 210
ATTACHED_ABOVE_LEFT = 212
ATTACHED_ABOVE = 214
ATTACHED_ABOVE_RIGHT = 216
BELOW_LEFT = 218
BELOW = 220
BELOW_RIGHT = 222
LEFT = 224
RIGHT = 226
ABOVE_LEFT = 228
ABOVE = 230
ABOVE_RIGHT = 232
DOUBLE_BELOW = 233
DOUBLE_ABOVE = 234
IOTA_SUBSCRIPT = 240
