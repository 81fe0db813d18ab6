# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Access to the Unicode Character Database (UCD) files Blocks.txt and
UnicodeData.txt.

Code points are always represented as integers.  All state, including the
caches, belongs to a `UCDFiles` instance; nothing is loaded until it is
first needed, and anything cached may be reclaimed and then reloaded from
the data files.
'''


# pylint: disable=C0103, C0301


import codecs
import contextlib
import io
import logging
import os
import pkgutil
import zipfile
from . import err
from .blocks import BlockIndex, parse_blocks
from .characters import CharacterCache, parse_unicodedata


_logger = logging.getLogger(__name__)


UNICODE_VERSION = '14.0.0'

# The data files are ISO-8859-1 text.  Anything outside ASCII only ever
# occurs in comments.
DEFAULT_ENCODING = 'iso-8859-1'

DEFAULT_CACHE_SIZE = 8192




class Files(object):
    '''
    Generic data files base class.

    By default, the data files for Unicode 14.0.0 in the package data
    directory are used.  If `unicode_version` is specified, the corresponding
    version will be used if it exists in the package data directory.  Files
    outside the package directory may also be used by providing `data_path`.
    Each file may be stored as `<name>.txt` or zipped as `<name>.zip`.
    '''
    def __init__(self, unicode_version=None, data_path=None, encoding=DEFAULT_ENCODING):
        if any(x is not None and not isinstance(x, str) for x in (unicode_version, data_path)):
            raise TypeError('Options "unicode_version" and "data_path" must be None or strings')
        if not isinstance(encoding, str):
            raise TypeError('Option "encoding" must be a string')
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError('Option "encoding" has unknown value "{0}"'.format(encoding))
        if unicode_version is None and data_path is None:
            self.unicode_version = UNICODE_VERSION
        else:
            self.unicode_version = unicode_version
        self.data_path = data_path
        self.encoding = encoding


    def _read_package_data(self, fname):
        version = self.unicode_version or UNICODE_VERSION
        for ext in ('txt', 'zip'):
            resource = 'data/{0}/{1}.{2}'.format(version, fname, ext)
            try:
                raw_data = pkgutil.get_data('unicodelookup', resource)
            except (IOError, OSError):
                raw_data = None
            if raw_data is not None:
                _logger.debug('Reading package data file "%s"', resource)
                if ext == 'txt':
                    return raw_data
                try:
                    with zipfile.ZipFile(io.BytesIO(raw_data)) as z:
                        with z.open('{0}.txt'.format(fname)) as f:
                            return f.read()
                except (KeyError, NotImplementedError, zipfile.BadZipFile) as e:
                    raise err.ResourceUnavailable('Could not read unicodelookup package data file "{0}":  {1}'.format(resource, e))
        raise err.ResourceUnavailable('Could not find unicodelookup package data file "data/{0}/{1}" in .txt or .zip form'.format(version, fname))


    def _open_data_path_file(self, fname):
        '''
        Open `fname` in `data_path` as text.  Return the file and the zip
        archive containing it, or None for the archive when the file is not
        zipped.
        '''
        fpath_fname = os.path.join(self.data_path, fname)
        if os.path.isfile('{0}.txt'.format(fpath_fname)):
            _logger.debug('Reading data file "%s.txt"', fpath_fname)
            return io.open('{0}.txt'.format(fpath_fname), 'r', encoding=self.encoding), None
        if os.path.isfile('{0}.zip'.format(fpath_fname)):
            _logger.debug('Reading data file "%s.zip"', fpath_fname)
            z = zipfile.ZipFile('{0}.zip'.format(fpath_fname))
            try:
                if '{0}.txt'.format(fname) not in z.namelist():
                    raise err.ResourceUnavailable('Could not find data file "{0}.txt" in zip archive "{1}.zip"'.format(fname, fpath_fname))
                return io.TextIOWrapper(z.open('{0}.txt'.format(fname)), encoding=self.encoding), z
            except Exception:
                z.close()
                raise
        raise err.ResourceUnavailable('Could not find data file "{0}" in .txt or .zip forms in directory "{1}"'.format(fname, self.data_path))


    @contextlib.contextmanager
    def _open_data(self, fname):
        '''
        Open a data file, either from the package data directory or from a
        specified data path, and yield an iterator over its lines.

        Files in `data_path` are read as a stream; the file, and any zip
        archive holding it, is closed when the `with` block exits, whether or
        not an error occurred.
        '''
        if self.data_path is not None:
            try:
                f, z = self._open_data_path_file(fname)
            except (IOError, OSError, NotImplementedError, zipfile.BadZipFile) as e:
                raise err.ResourceUnavailable('Could not open data file "{0}" in directory "{1}":  {2}'.format(fname, self.data_path, e))
            try:
                yield iter(f)
            finally:
                f.close()
                if z is not None:
                    z.close()
        else:
            data = self._read_package_data(fname).decode(self.encoding)
            yield iter(data.splitlines())




class UCDFiles(Files):
    '''
    Interface for Blocks.txt and UnicodeData.txt in the Unicode Character
    Database (UCD).

    By default, the data files for Unicode 14.0.0 in the package data
    directory are used.  If `unicode_version` is specified, the corresponding
    version will be used if it exists in the package data directory.  Files
    outside the package directory may also be used by providing `data_path`.

    `cache_size` is the maximum number of characters kept in the character
    cache, or None for no limit.  To minimize memory use, data files are only
    loaded on use, and UnicodeData.txt is only read one block at a time.
    '''
    def __init__(self, cache_size=DEFAULT_CACHE_SIZE, **kwargs):
        super(UCDFiles, self).__init__(**kwargs)
        if cache_size is not None and (isinstance(cache_size, bool) or not isinstance(cache_size, int)):
            raise TypeError('Option "cache_size" must be None or an integer')
        self.cache_size = cache_size
        self._block_index = BlockIndex(self._load_blocks)
        self._character_cache = CharacterCache(self._block_index, self._load_unicodedata, maxsize=cache_size)


    def _load_blocks(self):
        with self._open_data('Blocks') as lines:
            try:
                return parse_blocks(lines)
            except err.FormatError as e:
                raise err.FormatError('Failed to parse Blocks.txt:  {0}'.format(e.message), line_number=e.line_number)


    def _load_unicodedata(self, first, last):
        with self._open_data('UnicodeData') as lines:
            try:
                return parse_unicodedata(lines, first, last)
            except err.FormatError as e:
                raise err.FormatError('Failed to parse UnicodeData.txt:  {0}'.format(e.message), line_number=e.line_number, field_index=e.field_index)


    @property
    def blocks(self):
        '''
        Data from Blocks.txt, as a tuple of UnicodeBlock in code point order.
        '''
        return self._block_index.blocks


    def block_of(self, cp):
        '''
        The UnicodeBlock containing code point `cp`, or None.
        '''
        return self._block_index.find_block_containing(cp)


    def block_named(self, name):
        '''
        The UnicodeBlock with the given name, or None.  Names are compared
        ignoring case, whitespace, hyphens, and underscores.
        '''
        return self._block_index.find_block_named(name)


    def character_at(self, cp):
        '''
        The UnicodeCharacter from UnicodeData.txt for code point `cp`, or
        None if the code point has no entry.
        '''
        return self._character_cache.character_at(cp)


    def all_characters(self):
        '''
        All entries of UnicodeData.txt as a list of UnicodeCharacter.
        '''
        return self._character_cache.all_characters()


    def reclaim(self):
        '''
        Drop all cached data.  It will be reloaded from the data files as
        needed.
        '''
        _logger.info('Reclaiming cached Unicode data')
        self._block_index.reclaim()
        self._character_cache.reclaim()
