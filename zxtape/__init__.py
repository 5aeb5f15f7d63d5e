# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.


from ._chunk import Body
from ._chunk import build_array_chunk
from ._chunk import build_code_chunk
from ._chunk import build_program_chunk
from ._chunk import decode_header
from ._chunk import Header
from ._chunk import HeaderBody
from ._chunk import TapeType
from ._error import BlockTooLong
from ._error import BodyLengthMismatch
from ._error import ChecksumMismatch
from ._error import ChunkNotFound
from ._error import Error
from ._error import InvalidVariableHead
from ._error import LengthMismatch
from ._error import MalformedHeaderLength
from ._error import MalformedRecord
from ._error import NonASCIIName
from ._error import TruncatedStream
from ._error import UnknownBlockFlag
from ._error import UnknownTapeType
from ._error import UnsupportedTZXBlock
from ._error import UnsupportedTZXVersion
from ._except import TapeException
from ._export import save_tap_file
from ._export import TapeExportable
from ._export import to_tap
from ._export import to_tap_chunk
from ._file import parse_file
from ._file import read_chunk
from ._file import read_data
from ._file import save_tap
from ._main import main
from ._tap import find_chunk
from ._tap import parse
from ._tap import parse_tap
from ._tap import TAPFile
from ._wire import checksum
from ._wire import verify_checksum

__version__ = '0.1.0'

__all__ = ['Body', 'Header', 'HeaderBody', 'TAPFile', 'TapeType',
           'build_array_chunk', 'build_code_chunk', 'build_program_chunk',
           'checksum', 'decode_header', 'find_chunk', 'main', 'parse',
           'parse_file', 'parse_tap', 'read_chunk', 'read_data', 'save_tap',
           'save_tap_file', 'to_tap', 'to_tap_chunk', 'verify_checksum']
