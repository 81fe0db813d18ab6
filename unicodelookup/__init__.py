# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .version import __version__


from .coding import codepoint_string, MAX_CODE_POINT

from .blocks import UnicodeBlock, BlockIndex, parse_blocks, parse_blocks_line

from .characters import (UnicodeCharacter, CharacterCache, parse_unicodedata,
                         parse_unicodedata_line, to_unicodedata_line)

from .datafiles import UNICODE_VERSION, UCDFiles
