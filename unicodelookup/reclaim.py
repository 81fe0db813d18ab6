# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Caches whose contents may be dropped at any time.

Anything held here can be rebuilt from the data files, so callers must treat
a missing value as "not loaded yet" and never as "does not exist".  Values
are reclaimed either by calling `reclaim()` (for example from a memory
pressure hook) or, for `ReclaimableMap`, by LRU eviction once `maxsize`
entries are held.
'''


# pylint: disable=C0103, C0301


import collections
import threading


class ReclaimableReference(object):
    '''
    A reference to a single value that may be reclaimed.

    `get_or_create(factory)` returns the current value, building and
    publishing a new one when there is none.  The factory runs without the
    lock held, so a slow file read never blocks readers; if two threads race,
    both build a complete value and the first one published wins.
    '''
    __slots__ = ['_value', '_lock']

    def __init__(self):
        self._value = None
        self._lock = threading.Lock()

    def __repr__(self):
        return '{0}.{1}(loaded={2})'.format(self.__module__, type(self).__name__, self._value is not None)

    def get(self):
        return self._value

    def get_or_create(self, factory):
        value = self._value
        if value is not None:
            return value
        value = factory()
        if value is None:
            raise TypeError('Reclaimable value factories must not return None')
        with self._lock:
            if self._value is None:
                self._value = value
            return self._value

    def publish(self, value):
        '''
        Replace the current value with a complete new one.
        '''
        if value is None:
            raise TypeError('Use reclaim() to drop the value')
        with self._lock:
            self._value = value

    def reclaim(self):
        with self._lock:
            self._value = None




class ReclaimableMap(object):
    '''
    A thread-safe mapping with least-recently-used eviction.

    `maxsize=None` disables eviction, so entries then only disappear through
    `reclaim()`.  Each `put()` is atomic; concurrent writers of the same key
    are expected to write equal values, so the last write wins.
    '''
    def __init__(self, maxsize=None):
        if maxsize is not None and (isinstance(maxsize, bool) or not isinstance(maxsize, int)):
            raise TypeError('"maxsize" must be None or an integer')
        if maxsize is not None and maxsize < 1:
            raise ValueError('"maxsize" must be at least 1')
        self.maxsize = maxsize
        self._data = collections.OrderedDict()
        self._lock = threading.Lock()

    def __repr__(self):
        return '{0}.{1}(maxsize={2}, len={3})'.format(self.__module__, type(self).__name__, self.maxsize, len(self))

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    def get(self, key, default=None):
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                return default
            self._data.move_to_end(key)
            return value

    def put(self, key, value):
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            if self.maxsize is not None:
                while len(self._data) > self.maxsize:
                    self._data.popitem(last=False)

    def update(self, items):
        '''
        Store several (key, value) pairs, evicting only after all are added.
        '''
        with self._lock:
            for key, value in items:
                self._data[key] = value
                self._data.move_to_end(key)
            if self.maxsize is not None:
                while len(self._data) > self.maxsize:
                    self._data.popitem(last=False)

    def reclaim(self):
        with self._lock:
            self._data.clear()
