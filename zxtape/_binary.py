# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.


import typing
import struct
from ._error import TruncatedStream


Bytes = bytes | bytearray | memoryview


class BinaryParser(object):
    image: Bytes

    def __init__(self, image: Bytes, filename: str = '-'):
        self.image = image
        self.filename = filename
        self.pos = 0

    def get_remaining_size(self) -> int:
        return len(self.image) - self.pos

    def is_eof(self) -> bool:
        return self.get_remaining_size() == 0

    def startswith(self, prefix: bytes) -> bool:
        return bytes(self.image[self.pos:self.pos + len(prefix)]) == prefix

    def read_bytes(self, size: int) -> bytes:
        if size > self.get_remaining_size():
            raise TruncatedStream(
                'Tape image is too short; %d bytes expected, %d left: %r.' % (
                    size, self.get_remaining_size(), self.filename))

        begin = self.pos
        self.pos += size
        return bytes(self.image[begin:self.pos])

    def skip(self, size: int) -> None:
        self.read_bytes(size)

    def parse_field(self, format: str) -> typing.Any:
        size = struct.calcsize(format)
        value = struct.unpack(format, self.read_bytes(size))
        if len(value) == 1:
            value = value[0]
        return value

    def parse(self, format: list[str]) -> dict[str, typing.Any]:
        res = dict()
        for field in format:
            field_format, field_id = field.split(':', maxsplit=1)
            res[field_id] = self.parse_field(field_format)
        return res


class BinaryWriter(object):
    _chunks: list[Bytes]

    def __init__(self) -> None:
        self._chunks = []

    def write_block(self, block: Bytes) -> None:
        self._chunks.append(block)

    def write(self, format: list[str], **values: typing.Any) -> None:
        for field in format:
            field_format, field_id = field.split(':', maxsplit=1)
            self.write_block(struct.pack(field_format, values[field_id]))

    def get_image(self) -> bytes:
        return b''.join(self._chunks)
