# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

from __future__ import annotations

import itertools
import typing
from ._binary import Bytes, BinaryParser
from ._chunk import Body, Header, HeaderBody
from ._data import DataRecord
from ._error import BodyLengthMismatch, UnknownBlockFlag
from ._tzx import unpack_tzx_block, unpack_tzx_header
from ._wire import FLAG_DATA, FLAG_HEADER, decode_block


def parse_tap(image: Bytes, filename: str = '-') -> (
        typing.Iterator[HeaderBody]):
    """Produce the chunks of a TAP or TZX image one by one.

    Chunks are decoded lazily, so a consumer that stops early never
    looks at the rest of the image. Decoding errors are raised at the
    point where the faulty block is reached.
    """
    parser = BinaryParser(image, filename)
    is_tzx = unpack_tzx_header(parser)

    header: None | Header = None
    while not parser.is_eof():
        if is_tzx:
            unpack_tzx_block(parser)
            if parser.is_eof():
                break

        _, flag, payload = decode_block(parser)
        if flag == FLAG_HEADER:
            header = Header.parse(payload, filename)
        elif flag == FLAG_DATA:
            if header is not None and len(payload) != header.length:
                raise BodyLengthMismatch(
                    "TAP bytes length %d doesn't match length %d in "
                    "header: %r." % (len(payload), header.length, filename))

            chunk = HeaderBody(header, Body(payload))
            header = None
            yield chunk
        else:
            raise UnknownBlockFlag('Invalid TAP block flag 0x%02x: %r.' % (
                                   flag, filename))


parse = parse_tap


def find_chunk(chunks: typing.Iterable[HeaderBody],
               name: None | str | bytes = None,
               index: None | int = None) -> None | HeaderBody:
    if name is not None:
        for chunk in chunks:
            if chunk.header is not None and chunk.header.name == name:
                return chunk
        return None

    if index is None:
        index = 1
    if index < 1:
        return None
    return next(itertools.islice(chunks, index - 1, None), None)


class TAPFile(DataRecord, format_name='TAP'):
    chunks: tuple[HeaderBody, ...]

    def __init__(self, *, chunks: typing.Iterable[HeaderBody]) -> None:
        super().__init__(chunks=tuple(chunks))

    def encode(self) -> bytes:
        return b''.join(chunk.to_tap() for chunk in self.chunks)

    @classmethod
    def parse(cls, filename: str, image: Bytes) -> TAPFile:
        return TAPFile(chunks=parse_tap(image, filename))
