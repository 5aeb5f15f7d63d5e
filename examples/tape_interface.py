#!/usr/bin/env python3
# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2025 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

# A simple program that produces a tape with a Basic loader and a piece
# of machine code, reads it back and extracts the code.

import sys
import zxtape

# 10 CLEAR 32767: LOAD "" CODE: RANDOMIZE USR 32768
LOADER = (b'\x00\x0a\x20\x00'
          b'\xfd\x33\x32\x37\x36\x37\x0e\x00\x00\xff\x7f\x00'
          b':\xef""\xaf:\xf9\xc0\x33\x32\x37\x36\x38\x0e\x00\x00\x00\x80\x00'
          b'\x0d')

# ld bc, 0x1234; ret
CODE = b'\x01\x34\x12\xc9'


class Routine(object):
    def __init__(self, code: bytes, org: int) -> None:
        self.code = code
        self.org = org


def main() -> None:
    filename = sys.argv[1] if len(sys.argv) > 1 else 'routine.tap'

    loader = zxtape.HeaderBody.new_program('routine', LOADER, line=10)
    filename = zxtape.save_tap(loader, filename)
    zxtape.save_tap_file(Routine(CODE, 0x8000), filename, append=True)

    for chunk in zxtape.parse_file(filename):
        print(chunk)

    code = zxtape.read_data(filename, index=2)
    assert code == CODE


if __name__ == '__main__':
    main()
