#!/usr/bin/env python3

import zxtape
import pytest
from zxtape import Header, HeaderBody, TapeType
from zxtape._wire import encode_block


def test_basic() -> None:
    # Build, serialize and parse a code chunk.
    chunk = HeaderBody.new_code('calculator', bytes(range(61)), 32768)
    chunks = list(zxtape.parse(chunk.to_tap()))
    assert chunks == [chunk]
    assert str(chunks[0].header) == 'Bytes: "calculator" CODE 32768,61'


def test_round_trip() -> None:
    chunks = [
        HeaderBody.new_program('calculator', bytes(226), line=10),
        HeaderBody.new_code('calculator', bytes(range(61)), 32768),
        HeaderBody.new_var_array('nums', b'\x01\x02\x03', 0b10000001),
        HeaderBody.new_var_array('chars', b'abc', 0b11000011),
        HeaderBody.new_code('screen', bytes(6912), 16384),
        HeaderBody(None, zxtape.Body(b'custom loader data')),
    ]
    image = b''.join(chunk.to_tap() for chunk in chunks)
    assert list(zxtape.parse_tap(image)) == chunks

    tap = zxtape.TAPFile.parse('x.tap', image)
    assert tap.chunks == tuple(chunks)
    assert tap.encode() == image
    assert 'TAPFile' in tap.dumps()
    assert tap.chunks[4].is_screen()


def test_empty() -> None:
    assert list(zxtape.parse_tap(b'')) == []

    # A header without a body is dropped.
    header = Header(TapeType.CODE, 'x', 3, 0, 0)
    assert list(zxtape.parse_tap(header.to_tap())) == []


def test_raw_names() -> None:
    chunk = HeaderBody.new_code(b'\x80game', b'\x01', 0x8000)
    parsed, = zxtape.parse_tap(chunk.to_tap())
    assert parsed.header.name == b'\x80game'
    assert parsed.to_tap() == chunk.to_tap()

    # ASCII raw names read back as strings.
    chunk = HeaderBody.new_code(b'game', b'\x01', 0x8000)
    assert chunk.header.name == 'game'
    parsed, = zxtape.parse_tap(chunk.to_tap())
    assert parsed == chunk

    # Trailing spaces are padding on the wire.
    chunk = HeaderBody.new_code('ab ', b'\x01', 0x8000)
    parsed, = zxtape.parse_tap(chunk.to_tap())
    assert parsed.header.name == 'ab'


def test_body_length_mismatch() -> None:
    header = Header(TapeType.CODE, 'x', 10, 0x8000, 0x8000)
    image = header.to_tap() + zxtape.Body(bytes(9)).to_tap()
    with pytest.raises(zxtape.BodyLengthMismatch):
        list(zxtape.parse_tap(image))


def test_truncated() -> None:
    with pytest.raises(zxtape.TruncatedStream):
        list(zxtape.parse_tap(b'\x14\x00' + bytes(5)))

    # Cut in the middle of a block.
    image = HeaderBody.new_code('x', b'\x01\x02', 0).to_tap()
    with pytest.raises(zxtape.TruncatedStream):
        list(zxtape.parse_tap(image[:-1]))


def test_bad_blocks() -> None:
    with pytest.raises(zxtape.UnknownBlockFlag):
        list(zxtape.parse_tap(encode_block(0x42, b'abc')))

    with pytest.raises(zxtape.MalformedHeaderLength):
        list(zxtape.parse_tap(encode_block(0x00, bytes(16))))

    with pytest.raises(zxtape.UnknownTapeType):
        list(zxtape.parse_tap(encode_block(0x00, b'\x07' + bytes(16))))

    image = bytearray(HeaderBody.new_code('x', b'\x01\x02', 0).to_tap())
    image[-1] ^= 0xff
    with pytest.raises(zxtape.ChecksumMismatch) as e:
        list(zxtape.parse_tap(image, 'x.tap'))
    assert 'x.tap' in e.value.reason


def test_lazy() -> None:
    first = HeaderBody.new_code('first', b'\x01', 0x8000)
    second = HeaderBody.new_program('second', b'\x02\x03')
    broken = b'\x05\x00\xff\x01'
    image = first.to_tap() + second.to_tap() + broken

    # Chunks already produced remain valid.
    chunks = zxtape.parse_tap(image)
    assert next(chunks) == first
    assert next(chunks) == second
    with pytest.raises(zxtape.TruncatedStream):
        next(chunks)

    # Searches stop at the chunk found.
    assert zxtape.find_chunk(zxtape.parse_tap(image), index=2) == second
    assert zxtape.find_chunk(zxtape.parse_tap(image)) == first
    assert zxtape.find_chunk(zxtape.parse_tap(image), name='second') == second
    assert zxtape.find_chunk(zxtape.parse_tap(image), index=0) is None

    with pytest.raises(zxtape.TruncatedStream):
        zxtape.find_chunk(zxtape.parse_tap(image), index=3)


def test_find_chunk() -> None:
    chunks = [HeaderBody(None, zxtape.Body(b'\x00')),
              HeaderBody.new_code('code', b'\x01', 0x8000)]
    assert zxtape.find_chunk(chunks, name='code') == chunks[1]
    assert zxtape.find_chunk(chunks, name='nope') is None
    assert zxtape.find_chunk(chunks, index=1) == chunks[0]
    assert zxtape.find_chunk(chunks, index=3) is None


def test_longest_body() -> None:
    # The record of flag, data and checksum fills the 16-bit block size.
    chunk = HeaderBody.new_code('big', bytes(65533), 0x8000)
    image = chunk.to_tap()
    assert image[19 + 2:19 + 4] == b'\xff\xff'
    assert list(zxtape.parse_tap(image)) == [chunk]

    # One more byte fits in the header, but not in the data block.
    chunk = HeaderBody.new_code('big', bytes(65534), 0x8000)
    assert chunk.header.length == 65534
    with pytest.raises(zxtape.BlockTooLong):
        chunk.to_tap()

    # Longer data doesn't fit in the header.
    with pytest.raises(zxtape.BlockTooLong):
        HeaderBody.new_code('big', bytes(70000), 0x8000)
    with pytest.raises(zxtape.BlockTooLong):
        HeaderBody.new_program('big', bytes(0x10000))
