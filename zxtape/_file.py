# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2020 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

import os
import sys
import typing
from ._chunk import HeaderBody
from ._error import ChunkNotFound
from ._tap import find_chunk, parse_tap


TAP_EXTENSION = '.tap'


def read_file_image(filename: str) -> bytes:
    with open(filename, 'rb') as f:
        return f.read()


def parse_file(filename: str) -> typing.Iterator[HeaderBody]:
    return parse_tap(read_file_image(filename), filename)


def read_chunk(filename: str, name: None | str | bytes = None,
               index: None | int = None) -> None | HeaderBody:
    return find_chunk(parse_file(filename), name=name, index=index)


def read_data(filename: str, name: None | str | bytes = None,
              index: None | int = None) -> bytes:
    chunk = read_chunk(filename, name=name, index=index)
    if chunk is None:
        what = 'named %r' % name if name is not None else '#%d' % (
            index if index is not None else 1)
        raise ChunkNotFound('Chunk %s not found in TAP file %r.' % (
                            what, filename))

    if chunk.header is not None:
        print('Importing: %r: (%s)' % (filename, chunk.header.name),
              file=sys.stderr)
    else:
        print('Importing: %r: headerless chunk' % filename, file=sys.stderr)
    return chunk.body.data


def get_tap_filename(filename: str) -> str:
    _, ext = os.path.splitext(filename)
    if ext.lower() != TAP_EXTENSION:
        filename += TAP_EXTENSION
    return filename


def save_tap(chunk: HeaderBody, filename: str, append: bool = False) -> str:
    filename = get_tap_filename(filename)
    with open(filename, 'ab' if append else 'wb') as f:
        f.write(chunk.to_tap())
    return filename
