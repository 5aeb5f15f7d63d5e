# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.


def get_low8(n: int) -> int:
    return n & 0xff


def get_high8(n: int) -> int:
    return (n >> 8) & 0xff


def get_low16(n: int) -> int:
    return n & 0xffff
