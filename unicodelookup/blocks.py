# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Named Unicode blocks from Blocks.txt and lookup of the block containing a
code point.

Blocks.txt lines have the form `<first>..<last>; <name>`.  The older
`<first>;<last>;<name>` form used by early versions of the file is also
accepted.
'''


# pylint: disable=C0103, C0301


import logging
import re
from . import err
from .coding import parse_hex, codepoint_string, as_codepoint, MAX_CODE_POINT
from .reclaim import ReclaimableReference


_logger = logging.getLogger(__name__)




class UnicodeBlock(object):
    '''
    A named block of code points from `.first` up to and including `.last`.

    Blocks compare and hash by their range only, so two blocks with the same
    range but different names are equal.  Ordering is by `.first`, then by
    `.last`.  Instances are read-only.
    '''
    __slots__ = ['name', 'first', 'last']

    def __init__(self, name, first, last):
        if not isinstance(name, str):
            raise TypeError('"name" must be a string')
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in (first, last)):
            raise TypeError('"first" and "last" must be integers')
        if not first <= last:
            raise ValueError('Must have "first" <= "last"')
        if first < 0 or last > MAX_CODE_POINT:
            raise ValueError('"first" and "last" must be in the range [0, 0x10FFFF]')
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'first', first)
        object.__setattr__(self, 'last', last)

    def __setattr__(self, attr, value):
        raise AttributeError('UnicodeBlock instances are read-only')

    def __repr__(self):
        return '{0}.{1}({2!r}, 0x{3:04X}, 0x{4:04X})'.format(self.__module__, type(self).__name__, self.name, self.first, self.last)

    def __str__(self):
        return '{0} [{1}-{2}]'.format(self.name, codepoint_string(self.first), codepoint_string(self.last))

    def __iter__(self):
        for cp in range(self.first, self.last+1):
            yield cp

    def __len__(self):
        return self.last - self.first + 1

    def __contains__(self, value):
        if not isinstance(value, int):
            return False
        return self.first <= value <= self.last

    def __hash__(self):
        return hash((self.first, self.last))

    def __eq__(self, other):
        if isinstance(other, type(self)) and self.first == other.first and self.last == other.last:
            return True
        return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __lt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (self.first, self.last) < (other.first, other.last)

    def __le__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (self.first, self.last) <= (other.first, other.last)

    def __gt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (self.first, self.last) > (other.first, other.last)

    def __ge__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (self.first, self.last) >= (other.first, other.last)




_blocks_line_re = re.compile(r'''
                             (?P<first> [^.;\s]+) \s*
                             (?: \.\. | ; ) \s*
                             (?P<last> [^.;\s]+) \s* ; \s*
                             (?P<name> [^;]*?) \s*$
                             ''', re.VERBOSE)


def parse_blocks_line(line):
    '''
    Parse a single line of Blocks.txt.

    Return a UnicodeBlock, or None for blank lines and comment lines.
    '''
    line = line.strip()
    if not line or line[:1] == '#':
        return None
    m = _blocks_line_re.match(line)
    if m is None:
        raise err.FormatError('Expected "<first>..<last>; <name>", got "{0}"'.format(line))
    gd = m.groupdict()
    if not gd['name']:
        raise err.FormatError('Missing block name in "{0}"'.format(line))
    try:
        first = parse_hex(gd['first'])
        last = parse_hex(gd['last'])
        return UnicodeBlock(gd['name'], first, last)
    except ValueError as e:
        raise err.FormatError('Invalid block range in "{0}": {1}'.format(line, e))


def parse_blocks(lines):
    '''
    Parse the lines of a Blocks.txt file into a sorted tuple of UnicodeBlock.

    Blocks with identical ranges are collapsed, keeping the first one.  The
    first malformed line aborts the parse with a FormatError that carries its
    1-based line number.
    '''
    blocks = {}
    for line_number, line in enumerate(lines, 1):
        try:
            block = parse_blocks_line(line)
        except err.FormatError as e:
            raise err.FormatError(e.message, line_number=line_number)
        if block is not None and block not in blocks:
            blocks[block] = block
    return tuple(sorted(blocks))


def _loose_block_name(name):
    # Loose matching from UAX #44: ignore case, whitespace, hyphens, and
    # underscores.  An initial "is" prefix is not stripped for blocks.
    return re.sub(r'[\s_\-]+', '', name).lower()




class BlockIndex(object):
    '''
    Lazily loaded, sorted set of Unicode blocks.

    `loader` is a callable returning the parsed blocks; it is called on first
    use and again whenever the cached set has been reclaimed.  Errors from
    the loader, including ResourceUnavailable, propagate unchanged.
    '''
    def __init__(self, loader):
        if not hasattr(loader, '__call__'):
            raise TypeError('Invalid argument "loader"; must be callable')
        self._loader = loader
        self._blocks = ReclaimableReference()

    def _load(self):
        blocks = tuple(self._loader())
        _logger.debug('Loaded %d Unicode blocks', len(blocks))
        return blocks

    @property
    def blocks(self):
        '''
        Tuple of all blocks, ordered by range.
        '''
        return self._blocks.get_or_create(self._load)

    def find_block_containing(self, cp):
        '''
        Return the block containing the code point `cp`, or None if it lies
        outside every block.
        '''
        cp = as_codepoint(cp)
        for block in self.blocks:
            if block.first > cp:
                break
            if cp <= block.last:
                return block
        return None

    def find_block_named(self, name):
        '''
        Return the block with the given name, using the loose matching rules
        for block names, or None if there is no such block.
        '''
        if not isinstance(name, str):
            raise TypeError('Block names must be strings')
        loose_name = _loose_block_name(name)
        for block in self.blocks:
            if _loose_block_name(block.name) == loose_name:
                return block
        return None

    def reclaim(self):
        self._blocks.reclaim()
