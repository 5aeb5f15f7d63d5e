# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2021 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.


class TapeException(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
