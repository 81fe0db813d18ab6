# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Exceptions for unicodelookup.
'''


class UnicodeLookupError(Exception):
    '''
    Base unicodelookup error.
    '''
    pass


class DataError(UnicodeLookupError):
    '''
    Error in internal or loaded data.
    '''
    pass


class FormatError(DataError):
    '''
    Malformed line in a Unicode data file.

    `line_number` is the 1-based line in the file being parsed and
    `field_index` is the 0-based semicolon-delimited field; either is None
    when not known.
    '''
    def __init__(self, message, line_number=None, field_index=None):
        self.message = message
        self.line_number = line_number
        self.field_index = field_index
        location = []
        if line_number is not None:
            location.append('line {0}'.format(line_number))
        if field_index is not None:
            location.append('field {0}'.format(field_index))
        if location:
            message = '{0}: {1}'.format(', '.join(location), message)
        super(FormatError, self).__init__(message)


class ResourceUnavailable(UnicodeLookupError):
    '''
    A Unicode data file could not be found or opened.  Data files are fixed
    package resources, so this indicates a packaging or configuration error.
    '''
    pass
