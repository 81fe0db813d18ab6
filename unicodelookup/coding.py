# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Conversions between code points and their textual forms.

Code points are always represented as integers.  Hex tokens in the data
files are plain hex digits without prefix or sign.
'''


# pylint: disable=C0103, C0301


import re


MAX_CODE_POINT = 0x10FFFF


_hex_re = re.compile(r'[0-9A-Fa-f]+\Z')


def parse_hex(token):
    '''
    Convert a hex token such as "00C0" or "1F600" into an integer.

    Raise ValueError for anything that is not a non-empty run of hex digits.
    Python's `int(x, 16)` alone would also accept signs, whitespace,
    underscores and a "0x" prefix.
    '''
    if not _hex_re.match(token):
        raise ValueError('Invalid hex value "{0}"'.format(token))
    return int(token, 16)


_decimal_re = re.compile(r'-?[0-9]+\Z')


def parse_decimal(token):
    '''
    Convert a decimal token such as "230" or "-1" into an integer.

    Only ASCII digits with an optional leading minus sign are accepted;
    `int()` would also take whitespace, underscores, a plus sign, and digits
    from other scripts.
    '''
    if not _decimal_re.match(token):
        raise ValueError('Invalid decimal value "{0}"'.format(token))
    return int(token)


def codepoint_string(cp):
    '''
    Represent a code point in the form "U+XXXX", using four hex digits for
    values that fit in 16 bits and six otherwise.
    '''
    if cp <= 0xFFFF:
        return 'U+{0:04X}'.format(cp)
    return 'U+{0:06X}'.format(cp)


def as_codepoint(value):
    '''
    Accept a code point as an integer or as a string of length one, and
    return it as an integer.
    '''
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError('Code points must be integers or single-character strings')
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError('Code point strings must contain exactly one character')
        value = ord(value)
    if value < 0 or value > MAX_CODE_POINT:
        raise ValueError('Valid code points are in the range [0, 0x10FFFF]')
    return value
