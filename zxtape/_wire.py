# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

#   A TAP block on the wire:
#
#     u16 size | u8 flag | payload[size - 2] | u8 checksum
#
#   The flag is 0x00 for headers and 0xff for data blocks. The checksum
#   is the XOR of the flag and payload bytes.

import numpy
from ._binary import Bytes, BinaryParser, BinaryWriter
from ._error import (BlockTooLong, ChecksumMismatch, LengthMismatch,
                     MalformedRecord)


FLAG_HEADER = 0x00
FLAG_DATA = 0xff

HEADER_SIZE = 17
HEADER_FIELDS = ['B:type', '10s:name', '<H:length', '<H:p1', '<H:p2']

_MAX_BLOCK_SIZE = 0xffff


def checksum(data: Bytes) -> int:
    if not len(data):
        return 0
    octets = numpy.frombuffer(data, dtype=numpy.uint8)
    return int(numpy.bitwise_xor.reduce(octets))


def verify_checksum(record: Bytes) -> bool:
    return checksum(record) == 0


def add_checksum(data: Bytes) -> bytes:
    return bytes(data) + bytes([checksum(data)])


def encode_block(flag: int, payload: Bytes) -> bytes:
    record = add_checksum(bytes([flag]) + bytes(payload))
    if len(record) > _MAX_BLOCK_SIZE:
        raise BlockTooLong('TAP block of %d bytes does not fit in a 16-bit '
                           'block size.' % len(record))

    writer = BinaryWriter()
    writer.write(['<H:size'], size=len(record))
    writer.write_block(record)
    return writer.get_image()


def encode_body(data: Bytes, length: None | int = None) -> bytes:
    if length is not None and len(data) != length:
        raise LengthMismatch(
            "Body of %d bytes doesn't match the header length %d." % (
                len(data), length))
    return encode_block(FLAG_DATA, data)


def decode_block(parser: BinaryParser) -> tuple[int, int, bytes]:
    begin = parser.pos
    size = parser.parse_field('<H')
    record = parser.read_bytes(size)

    if not verify_checksum(record):
        raise ChecksumMismatch('Invalid TAP block checksum at offset %d: '
                               '%r.' % (begin, parser.filename))

    # There should be at least room for the flag and the checksum.
    if len(record) != size or size < 2:
        raise MalformedRecord('TAP block too short at offset %d: %r.' % (
                              begin, parser.filename))

    flag, payload = record[0], record[1:-1]
    return parser.pos - begin, flag, payload
