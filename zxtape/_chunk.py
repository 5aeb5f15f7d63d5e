# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

from __future__ import annotations

import enum
from ._binary import Bytes, BinaryParser, BinaryWriter
from ._data import DataRecord
from ._error import (BlockTooLong, InvalidVariableHead, MalformedHeaderLength,
                     NonASCIIName, UnknownTapeType)
from ._utils import get_high8, get_low8, get_low16
from ._wire import (FLAG_HEADER, HEADER_FIELDS, HEADER_SIZE, encode_block,
                    encode_body)


class TapeType(enum.IntEnum):
    PROGRAM = 0
    NUMBER_ARRAY = 1
    CHAR_ARRAY = 2
    CODE = 3


# Names are ASCII strings or, for names that are not pure ASCII, raw
# bytes.
Name = str | bytes

NAME_SIZE = 10

# Line numbers of 32768 and above mean no auto-run line.
NO_AUTORUN_LINE = 32768

SCREEN_ADDR = 16384
SCREEN_SIZE = 6912

_NUMBER_ARRAY_HEAD = 0b10000000
_CHAR_ARRAY_HEAD = 0b11000000
_ARRAY_HEAD_MASK = 0b11100000

_MAX_LENGTH = 0xffff


def _get_name_image(name: Name) -> bytes:
    if isinstance(name, bytes):
        image = name
    else:
        try:
            image = name.encode('ascii')
        except UnicodeEncodeError:
            raise NonASCIIName('TAP name should contain only ASCII (7-bit) '
                               'characters: %r.' % name)
    return image[:NAME_SIZE].ljust(NAME_SIZE, b' ')


def _quote_name(name: Name) -> str:
    if isinstance(name, bytes):
        name = name.decode('latin-1')
    return '"%s"' % name


class Header(DataRecord):
    """The header chunk of a tape file.

    The meaning of the two parameter words depends on the type:

    * Program: ``p1`` is the auto-run line, ``p2`` is the length of the
      program without its variables.
    * Number and character arrays: the high byte of ``p1`` is the head
      octet of the original variable.
    * Code: ``p1`` is the load address.

    Accessors of the other types' interpretations return None.
    """

    type: TapeType
    name: Name
    length: int
    p1: int
    p2: int

    def __init__(self, type: int, name: Name, length: int,
                 p1: int, p2: int) -> None:
        try:
            type = TapeType(type)
        except ValueError:
            raise UnknownTapeType('Unknown TAP header type %r.' % type)

        if length > _MAX_LENGTH:
            raise BlockTooLong('TAP data of %d bytes does not fit in a 16-bit '
                               'header length.' % length)

        # Pure ASCII raw names are the same names as strings.
        if isinstance(name, bytes) and name.isascii():
            name = name.decode('ascii')

        super().__init__(type=type, name=name, length=length,
                         p1=get_low16(p1), p2=get_low16(p2))

    def is_program(self) -> bool:
        return self.type == TapeType.PROGRAM

    def is_code(self) -> bool:
        return self.type == TapeType.CODE

    def is_array(self) -> bool:
        return self.type in (TapeType.NUMBER_ARRAY, TapeType.CHAR_ARRAY)

    def is_screen(self) -> bool:
        return (self.is_code() and self.length == SCREEN_SIZE and
                self.p1 == SCREEN_ADDR)

    @property
    def address(self) -> None | int:
        return self.p1 if self.is_code() else None

    addr = address
    org = address

    @property
    def line(self) -> None | int:
        return self.p1 if self.is_program() else None

    @property
    def prog_length(self) -> None | int:
        return self.p2 if self.is_program() else None

    @property
    def vars_length(self) -> None | int:
        return self.length - self.p2 if self.is_program() else None

    @property
    def array_head(self) -> None | int:
        return get_high8(self.p1) if self.is_array() else None

    @property
    def array_name(self) -> None | str:
        if not self.is_array():
            return None
        head = self.array_head
        assert head is not None
        return chr((head & 0b01111111) | 0b01100000)

    def describe(self) -> str:
        name = _quote_name(self.name)
        if self.type == TapeType.PROGRAM:
            return 'Program: %s LINE %d (%d/%d)' % (
                name, self.p1, self.p2, self.length)
        elif self.type == TapeType.CODE:
            return 'Bytes: %s CODE %d,%d' % (name, self.p1, self.length)
        elif self.type == TapeType.CHAR_ARRAY:
            return 'Character array: %s DATA %s$()' % (name, self.array_name)
        elif self.type == TapeType.NUMBER_ARRAY:
            return 'Number array: %s DATA %s()' % (name, self.array_name)
        else:
            assert 0, self.type

    __str__ = describe

    def to_tap(self) -> bytes:
        writer = BinaryWriter()
        writer.write(HEADER_FIELDS, type=int(self.type),
                     name=_get_name_image(self.name), length=self.length,
                     p1=self.p1, p2=self.p2)
        return encode_block(FLAG_HEADER, writer.get_image())

    @classmethod
    def parse(cls, payload: Bytes, filename: str = '-') -> Header:
        if len(payload) != HEADER_SIZE:
            raise MalformedHeaderLength(
                'Invalid TAP header length %d: %r.' % (len(payload), filename))

        fields = BinaryParser(payload, filename).parse(HEADER_FIELDS)
        fields['name'] = fields['name'].rstrip(b' \x00')
        return Header(**fields)


decode_header = Header.parse


class Body(DataRecord):
    data: bytes

    def __init__(self, data: Bytes) -> None:
        super().__init__(data=bytes(data))

    def to_tap(self, length: None | int = None) -> bytes:
        return encode_body(self.data, length)


class HeaderBody(DataRecord):
    """A tape chunk: an optional header followed by a data body."""

    header: None | Header
    body: Body

    def __init__(self, header: None | Header, body: Body) -> None:
        super().__init__(header=header, body=body)

    def describe(self) -> str:
        if self.header is None:
            return 'Bytes: ?????????? (%d)' % len(self.body.data)
        return self.header.describe()

    __str__ = describe

    def is_program(self) -> bool:
        return self.header is not None and self.header.is_program()

    def is_code(self) -> bool:
        return self.header is not None and self.header.is_code()

    def is_array(self) -> bool:
        return self.header is not None and self.header.is_array()

    def is_screen(self) -> bool:
        return self.header is not None and self.header.is_screen()

    def to_tap(self) -> bytes:
        if self.header is None:
            return self.body.to_tap()
        return self.header.to_tap() + self.body.to_tap(self.header.length)

    to_wire_bytes = to_tap

    @classmethod
    def new_code(cls, name: Name, code: Bytes, org: int) -> HeaderBody:
        return HeaderBody(
            Header(TapeType.CODE, name, len(code), org, 0x8000),
            Body(code))

    @classmethod
    def new_program(cls, name: Name, code: Bytes,
                    line: None | int = None,
                    prog_length: None | int = None) -> HeaderBody:
        if line is None:
            line = NO_AUTORUN_LINE
        if prog_length is None:
            prog_length = len(code)
        return HeaderBody(
            Header(TapeType.PROGRAM, name, len(code), line, prog_length),
            Body(code))

    @classmethod
    def new_var_array(cls, name: Name, code: Bytes,
                      head: int) -> HeaderBody:
        kind = head & _ARRAY_HEAD_MASK
        if kind == _NUMBER_ARRAY_HEAD:
            type = TapeType.NUMBER_ARRAY
        elif kind == _CHAR_ARRAY_HEAD:
            type = TapeType.CHAR_ARRAY
        else:
            raise InvalidVariableHead(
                "Can't guess TAP type from variable head 0x%02x." % head)

        return HeaderBody(
            Header(type, name, len(code), get_low8(head) << 8, 0x8000),
            Body(code))


build_code_chunk = HeaderBody.new_code
build_program_chunk = HeaderBody.new_program
build_array_chunk = HeaderBody.new_var_array
