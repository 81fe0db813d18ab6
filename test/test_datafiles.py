# -*- coding: utf-8 -*-
#
# Copyright (c) 2016, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint:  disable=C0103, C0301


import sys
import os
if all(os.path.isdir(x) for x in ('unicodelookup', 'test')):
    sys.path.insert(0, '.')


import unicodelookup as mdl
import unicodelookup.err as err
import unicodelookup.constants as const
import pytest
import io
import logging
import shutil
import struct
import unicodedata
import zipfile


TEST_DATA_PATH = os.path.join(os.path.split(os.path.realpath(__file__))[0], 'data')




def test_options():
    ucdf = mdl.UCDFiles()
    assert ucdf.unicode_version == mdl.UNICODE_VERSION
    assert ucdf.data_path is None
    assert ucdf.encoding == 'iso-8859-1'
    assert ucdf.cache_size == 8192
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH, cache_size=None)
    assert ucdf.unicode_version is None
    assert ucdf.cache_size is None
    with pytest.raises(TypeError):
        mdl.UCDFiles(unicode_version=14)
    with pytest.raises(TypeError):
        mdl.UCDFiles(data_path=b'data')
    with pytest.raises(TypeError):
        mdl.UCDFiles(encoding=None)
    with pytest.raises(TypeError):
        mdl.UCDFiles(cache_size='100')
    with pytest.raises(ValueError):
        mdl.UCDFiles(cache_size=0)
    with pytest.raises(ValueError):
        mdl.UCDFiles(encoding='no-such-encoding')


def test_package_blocks():
    ucdf = mdl.UCDFiles()
    assert len(ucdf.blocks) == 320
    assert ucdf.block_of(0x41).name == 'Basic Latin'
    assert ucdf.block_of('一').name == 'CJK Unified Ideographs'
    assert ucdf.block_of(0x2FE0) is None
    assert ucdf.block_named('Emoticons') == mdl.UnicodeBlock('Emoticons', 0x1F600, 0x1F64F)
    assert ucdf.block_named('greek and coptic').first == 0x0370

    with pytest.raises(err.ResourceUnavailable):
        mdl.UCDFiles(unicode_version='1.0.0').blocks


def test_package_characters():
    ucdf = mdl.UCDFiles()
    c = ucdf.character_at(0x41)
    assert c.name == 'LATIN CAPITAL LETTER A'
    assert c.general_category == const.LETTER_UPPERCASE
    assert c.lowercase_mapping == 0x61
    assert ucdf.character_at(0x1F600).name == 'GRINNING FACE'
    assert ucdf.character_at(0x4E00).name == '<CJK Ideograph, First>'
    assert ucdf.character_at(0x4E01) is None
    assert ucdf.character_at(0x0378) is None
    assert ucdf.character_at(0x10FFFD).name == '<Plane 16 Private Use, Last>'


def test_package_character_properties():
    ucdf = mdl.UCDFiles()
    characters = ucdf.all_characters()
    assert characters[0].code_point == 0x0
    assert characters[-1].code_point == 0x10FFFD
    for c in characters:
        assert c.general_category in const.GENERAL_CATEGORIES
        assert c.bidirectional_category in const.BIDI_CLASSES
        assert not c.decomposition_tag or c.decomposition_tag in const.DECOMPOSITION_TAGS
        assert 0 <= c.canonical_combining_class <= 254




def test_character_at():
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH)
    c = ucdf.character_at(0x41)
    assert c.name == 'LATIN CAPITAL LETTER A'
    assert c.lowercase_mapping == 0x61
    assert ucdf.character_at('A') is c

    c = ucdf.character_at(0x0)
    assert c.is_control and c.unique_name == 'NULL'
    assert ucdf.character_at(0x7F).unique_name == 'DELETE'

    c = ucdf.character_at(0x00BC)
    assert c.numeric_value_numerator == 1 and c.numeric_value_denominator == 4
    assert ucdf.character_at(0x0300).canonical_combining_class == const.ABOVE
    assert ucdf.character_at(0x0F33).numeric_value_denominator == 2
    assert ucdf.character_at(0x1D400).decomposition_tag == const.FONT
    assert ucdf.character_at(0x1F600).name == 'GRINNING FACE'

    # Range end points have their own lines; code points between them do not
    assert ucdf.character_at(0xF0000).name == '<Plane 15 Private Use, First>'
    assert ucdf.character_at(0xFFFFD).name == '<Plane 15 Private Use, Last>'
    assert ucdf.character_at(0xF0001) is None

    # Unassigned in the excerpt
    assert ucdf.character_at(0x00A1) is None
    assert ucdf.character_at(0x0378) is None
    # Outside every block
    assert ucdf.character_at(0x2FE0) is None

    with pytest.raises(ValueError):
        ucdf.character_at(0x110000)
    with pytest.raises(TypeError):
        ucdf.character_at(1.0)


def test_character_at_reads_by_block(caplog):
    caplog.set_level(logging.DEBUG, logger='unicodelookup')
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH)
    for cp in range(0x80):
        assert ucdf.character_at(cp).code_point == cp
    for cp in (0xA0, 0xA1, 0xFF):
        ucdf.character_at(cp)
    loads = [r.getMessage() for r in caplog.records if r.getMessage().startswith('Loading character data')]
    assert loads == ['Loading character data for block Basic Latin [U+0000-U+007F]',
                     'Loading character data for block Latin-1 Supplement [U+0080-U+00FF]']

    caplog.clear()
    ucdf.reclaim()
    assert any(r.levelno == logging.INFO and 'Reclaiming' in r.getMessage() for r in caplog.records)
    assert ucdf.character_at(0x41).name == 'LATIN CAPITAL LETTER A'
    assert ucdf.block_of(0x41).name == 'Basic Latin'
    loads = [r.getMessage() for r in caplog.records if r.getMessage().startswith('Loading character data')]
    assert loads == ['Loading character data for block Basic Latin [U+0000-U+007F]']


def test_all_characters():
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH)
    characters = ucdf.all_characters()
    assert len(characters) == 144
    assert characters[0].code_point == 0x0
    assert characters[-1].code_point == 0xFFFFD
    assert characters == sorted(characters)
    assert ucdf.character_at(0x1F600) is characters[-3]


def test_small_cache():
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH, cache_size=2)
    for cp in range(0x80):
        assert ucdf.character_at(cp).code_point == cp


def test_zipped_data_path(tmp_path):
    for fname in ('Blocks', 'UnicodeData'):
        with zipfile.ZipFile(str(tmp_path / '{0}.zip'.format(fname)), 'w') as z:
            z.write(os.path.join(TEST_DATA_PATH, '{0}.txt'.format(fname)), '{0}.txt'.format(fname))
    ucdf = mdl.UCDFiles(data_path=str(tmp_path))
    assert len(ucdf.blocks) == 320
    assert ucdf.character_at(0x00E0).uppercase_mapping == 0x00C0
    assert len(ucdf.all_characters()) == 144


def test_missing_data(tmp_path):
    ucdf = mdl.UCDFiles(data_path=str(tmp_path / 'missing'))
    with pytest.raises(err.ResourceUnavailable):
        ucdf.blocks
    with pytest.raises(err.ResourceUnavailable):
        ucdf.character_at(0x41)

    # Blocks without UnicodeData
    shutil.copy(os.path.join(TEST_DATA_PATH, 'Blocks.txt'), str(tmp_path))
    ucdf = mdl.UCDFiles(data_path=str(tmp_path))
    assert ucdf.block_of(0x41).name == 'Basic Latin'
    with pytest.raises(err.ResourceUnavailable):
        ucdf.character_at(0x41)

    # Zip archives without the expected member, or that are not archives
    with zipfile.ZipFile(str(tmp_path / 'UnicodeData.zip'), 'w') as z:
        z.writestr('Other.txt', '0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n')
    with pytest.raises(err.ResourceUnavailable):
        ucdf.character_at(0x41)
    (tmp_path / 'UnicodeData.zip').write_bytes(b'not a zip file')
    with pytest.raises(err.ResourceUnavailable):
        ucdf.character_at(0x41)


def test_malformed_data(tmp_path):
    shutil.copy(os.path.join(TEST_DATA_PATH, 'Blocks.txt'), str(tmp_path))
    with io.open(str(tmp_path / 'UnicodeData.txt'), 'w', encoding='iso-8859-1') as f:
        f.write('0000;<control>;Cc;0;BN;;;;;N;NULL;;;;\n')
        f.write('0001;<control>;Cc;x;BN;;;;;N;START OF HEADING;;;;\n')
        f.write('0080;<control>;Cc;0;BN;;;;;N;;;;;\n')
    ucdf = mdl.UCDFiles(data_path=str(tmp_path))
    with pytest.raises(err.FormatError) as excinfo:
        ucdf.character_at(0x0)
    assert excinfo.value.line_number == 2
    assert excinfo.value.field_index == 3
    assert 'UnicodeData.txt' in str(excinfo.value)
    # Nothing from the failed block was cached, and later blocks still load
    with pytest.raises(err.FormatError):
        ucdf.character_at(0x0)
    assert ucdf.character_at(0x80).is_control

    with io.open(str(tmp_path / 'Blocks.txt'), 'w', encoding='iso-8859-1') as f:
        f.write('# Blocks.txt\n0000..007F; Basic Latin\n0080..00FX; Latin-1 Supplement\n')
    ucdf = mdl.UCDFiles(data_path=str(tmp_path))
    with pytest.raises(err.FormatError) as excinfo:
        ucdf.blocks
    assert excinfo.value.line_number == 3
    assert 'Blocks.txt' in str(excinfo.value)


def test_against_unicodedata():
    '''
    Check the test data against the standard library's `unicodedata`.  The
    properties compared are stable across Unicode versions for the characters
    in the test data.
    '''
    ucdf = mdl.UCDFiles(data_path=TEST_DATA_PATH)
    for c in ucdf.all_characters():
        u = chr(c.code_point)
        assert c.general_category == unicodedata.category(u)
        assert c.bidirectional_category == unicodedata.bidirectional(u)
        assert c.canonical_combining_class == unicodedata.combining(u)
        assert c.mirrored == bool(unicodedata.mirrored(u))
        decomposition = ' '.join(([c.decomposition_tag] if c.decomposition_tag else []) +
                                 ['{0:04X}'.format(cp) for cp in c.decomposition_mapping])
        assert decomposition == unicodedata.decomposition(u)
        if not c.name.startswith('<'):
            assert c.name == unicodedata.name(u)
        assert c.decimal_digit_value == unicodedata.decimal(u, -1)
        assert c.digit_value == unicodedata.digit(u, -1)
        if c.has_numeric_value:
            assert c.numeric_fraction == unicodedata.numeric(u)
        else:
            assert unicodedata.numeric(u, None) is None


def test_unsupported_compression(tmp_path, monkeypatch):
    shutil.copy(os.path.join(TEST_DATA_PATH, 'Blocks.txt'), str(tmp_path))
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_STORED) as z:
        z.writestr('UnicodeData.txt', '0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n')
    raw_zip = bytearray(buffer.getvalue())
    # Compression method in the local file header and in the central directory
    central = raw_zip.find(b'PK\x01\x02')
    raw_zip[8:10] = struct.pack('<H', 99)
    raw_zip[central+10:central+12] = struct.pack('<H', 99)
    (tmp_path / 'UnicodeData.zip').write_bytes(bytes(raw_zip))

    closed = []
    original_close = zipfile.ZipFile.close
    def close(self):
        closed.append(self)
        original_close(self)
    monkeypatch.setattr(zipfile.ZipFile, 'close', close)

    ucdf = mdl.UCDFiles(data_path=str(tmp_path))
    with pytest.raises(err.ResourceUnavailable):
        ucdf.character_at(0x41)
    assert closed
    assert all(z.fp is None for z in closed)
    # Restore ZipFile.close while `closed` is still alive; letting the fixture
    # teardown drop the patched closure segfaults CPython 3.11 via ZipFile.__del__
    monkeypatch.undo()
