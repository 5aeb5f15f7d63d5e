# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

#   Only the TZX blocks that wrap standard-speed data are unwrapped
#   here; the TAP block that follows each of them is decoded by the
#   stream parser.

import typing
from ._binary import BinaryParser
from ._error import UnsupportedTZXBlock, UnsupportedTZXVersion


TZX_SIGNATURE = b'ZXTape!\x1a'
TZX_MAJOR_REVISION = 1

# Signature, revision and at least one block.
_MIN_TZX_SIZE = 13


def _skip_standard_speed_data_block(parser: BinaryParser) -> None:
    parser.parse(['<H:pause_after_block_in_ms'])


def _skip_custom_info_block(parser: BinaryParser) -> None:
    block = parser.parse(['10s:id', '<L:info_size'])
    parser.skip(block['info_size'])


def _skip_glue_block(parser: BinaryParser) -> None:
    parser.skip(9)


STANDARD_SPEED_DATA_BLOCK_ID = 0x10

_BLOCK_PARSERS: dict[int, typing.Callable[[BinaryParser], None]] = {
    STANDARD_SPEED_DATA_BLOCK_ID: _skip_standard_speed_data_block,
    0x35: _skip_custom_info_block,
    0x5a: _skip_glue_block,
}


def is_tzx_image(parser: BinaryParser) -> bool:
    return (parser.startswith(TZX_SIGNATURE) and
            parser.get_remaining_size() > _MIN_TZX_SIZE)


def unpack_tzx_header(parser: BinaryParser) -> bool:
    if not is_tzx_image(parser):
        return False

    header = parser.parse(['8s:signature',
                           'B:major_revision',
                           'B:minor_revision'])
    major = header['major_revision']
    if major != TZX_MAJOR_REVISION:
        raise UnsupportedTZXVersion('Unknown TZX major revision %d: %r.' % (
                                    major, parser.filename))
    return True


def unpack_tzx_block(parser: BinaryParser) -> None:
    # Skip blocks up to and including the prefix of the next standard
    # speed data block. Shorter tails are left for the TAP block
    # decoder to report.
    while parser.get_remaining_size() > 3:
        block_id = parser.parse_field('B')
        if block_id not in _BLOCK_PARSERS:
            raise UnsupportedTZXBlock(
                'Only the standard speed data blocks are currently handled '
                'in TZX files, got 0x%02x: %r.' % (block_id, parser.filename),
                block_id=block_id)

        _BLOCK_PARSERS[block_id](parser)
        if block_id == STANDARD_SPEED_DATA_BLOCK_ID:
            break
