# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

#   Saving arbitrary objects as tape files. An object qualifies either
#   by providing the 'code' and 'org' attributes, in which case it is
#   saved as a code chunk, or by implementing its own
#   to_tap_chunk(name, **opts) method.

import os
import typing
from ._chunk import HeaderBody
from ._file import TAP_EXTENSION, save_tap


@typing.runtime_checkable
class TapeExportable(typing.Protocol):
    code: bytes
    org: int


@typing.runtime_checkable
class TapeChunkSource(typing.Protocol):
    def to_tap_chunk(self, name: str, **opts: typing.Any) -> HeaderBody:
        ...


def to_tap_chunk(obj: typing.Any, name: str, **opts: typing.Any) -> (
        HeaderBody):
    if isinstance(obj, TapeChunkSource):
        return obj.to_tap_chunk(name, **opts)

    org = opts.pop('org', None)
    if opts:
        raise TypeError('Unexpected options: %s.' % ', '.join(opts))
    if not isinstance(obj, TapeExportable):
        raise TypeError('%s provides neither code and org attributes nor '
                        'a to_tap_chunk() method.' % type(obj).__qualname__)
    return HeaderBody.new_code(name, obj.code,
                               obj.org if org is None else org)


def to_tap(obj: typing.Any, name: str, **opts: typing.Any) -> bytes:
    return to_tap_chunk(obj, name, **opts).to_tap()


def save_tap_file(obj: typing.Any, filename: str, append: bool = False,
                  name: None | str = None, **opts: typing.Any) -> str:
    if name is None:
        base = os.path.basename(filename)
        if base.endswith(TAP_EXTENSION):
            base = base[:-len(TAP_EXTENSION)]
        name = base
    return save_tap(to_tap_chunk(obj, name, **opts), filename, append=append)
