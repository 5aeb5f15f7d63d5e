#!/usr/bin/env python3

import zxtape
import pytest
from zxtape import HeaderBody


def make_tzx(*blocks: bytes, major: int = 1) -> bytes:
    return b'ZXTape!\x1a' + bytes([major, 20]) + b''.join(blocks)


def make_data_block(block: bytes) -> bytes:
    # 1000 ms pause.
    return b'\x10\xe8\x03' + block


def test_basic() -> None:
    # Parse a TZX file.
    image = (b'ZXTape!\x1a\x01\r\x10\xe8\x03\x13\x00\x00\x03123.tzx   '
             b'\x03\x00\x00\x00\x00\x80\xc8\x10\xe8\x03\x05\x00\xff'
             b'\x01\x02\x03\xff')
    chunk, = zxtape.parse_tap(image, '123.tzx')
    assert chunk == HeaderBody.new_code('123.tzx', b'\x01\x02\x03', 0)
    assert str(chunk) == 'Bytes: "123.tzx" CODE 0,3'


def test_transparent() -> None:
    chunk = HeaderBody.new_code('X', bytes(range(100)), 0x8000)
    tap_image = chunk.to_tap()
    tzx_image = make_tzx(make_data_block(chunk.header.to_tap()),
                         make_data_block(chunk.body.to_tap()))

    assert list(zxtape.parse_tap(tap_image)) == [chunk]
    assert list(zxtape.parse_tap(tzx_image)) == [chunk]


def test_skipped_blocks() -> None:
    chunk = HeaderBody.new_program('prog', b'\x00\x0a\x02\x00\xea\x0d')
    custom_info = b'\x35' + b'POKEs     ' + (4).to_bytes(4, 'little') + b'info'
    glue = b'\x5a' + b'XTape!\x1a\x01\x14'
    image = make_tzx(custom_info,
                     make_data_block(chunk.header.to_tap()),
                     glue,
                     make_data_block(chunk.body.to_tap()))
    assert list(zxtape.parse_tap(image)) == [chunk]


def test_unsupported() -> None:
    chunk = HeaderBody.new_code('X', b'\x01\x02', 0x8000)

    image = make_tzx(make_data_block(chunk.to_tap()), major=2)
    with pytest.raises(zxtape.UnsupportedTZXVersion):
        list(zxtape.parse_tap(image))

    # Turbo speed data blocks are not supported.
    image = make_tzx(make_data_block(chunk.header.to_tap()),
                     b'\x11' + bytes(18) + chunk.body.to_tap())
    chunks = zxtape.parse_tap(image, 'turbo.tzx')
    with pytest.raises(zxtape.UnsupportedTZXBlock) as e:
        next(chunks)
    assert e.value.block_id == 0x11
    assert '0x11' in e.value.reason


def test_truncated() -> None:
    chunk = HeaderBody.new_code('X', b'\x01\x02', 0x8000)
    custom_info = b'\x35' + b'POKEs     ' + (40).to_bytes(4, 'little') + b'i'
    image = make_tzx(make_data_block(chunk.header.to_tap()),
                     make_data_block(chunk.body.to_tap()),
                     custom_info)
    chunks = zxtape.parse_tap(image)
    assert next(chunks) == chunk
    with pytest.raises(zxtape.TruncatedStream):
        next(chunks)


def test_trailing_metadata() -> None:
    chunk = HeaderBody.new_code('X', b'\x01\x02', 0x8000)
    glue = b'\x5a' + b'XTape!\x1a\x01\x14'
    image = make_tzx(make_data_block(chunk.header.to_tap()),
                     make_data_block(chunk.body.to_tap()),
                     glue)
    assert list(zxtape.parse_tap(image)) == [chunk]
