# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2019 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.

from __future__ import annotations

import json
import typing
import zxtape


class DataRecord(object):
    FORMAT_NAME: None | str

    def __init_subclass__(cls, *, format_name: None | str = None):
        assert format_name is None or format_name.isupper()
        cls.FORMAT_NAME = format_name

    def __init__(self, **fields: typing.Any):
        object.__setattr__(self, '_DataRecord__fields', tuple(fields))
        for id, value in fields.items():
            object.__setattr__(self, id, value)

    def __setattr__(self, id: str, value: typing.Any) -> None:
        raise AttributeError('%s records are immutable.' %
                             type(self).__qualname__)

    def __delattr__(self, id: str) -> None:
        raise AttributeError('%s records are immutable.' %
                             type(self).__qualname__)

    def __iter__(self) -> typing.Iterator[tuple[str, typing.Any]]:
        for id in self.__fields:
            value = getattr(self, id)
            if value is not None:
                yield id, value

    def _get_key(self) -> tuple[typing.Any, ...]:
        return tuple((id, getattr(self, id)) for id in self.__fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        assert isinstance(other, DataRecord)
        return self._get_key() == other._get_key()

    def __hash__(self) -> int:
        return hash((type(self), self._get_key()))

    def __repr__(self) -> str:
        fields = ', '.join('%s=%r' % (id, getattr(self, id))
                           for id in self.__fields)
        return '%s(%s)' % (type(self).__qualname__, fields)

    def to_json(self) -> typing.Any:
        def convert(v: typing.Any) -> typing.Any:
            if isinstance(v, (int, str)):
                return v
            if isinstance(v, (bytes, bytearray)):
                s = bytes(v).decode('latin-1')
                a = [s[i:i+0x10] for i in range(0, len(v), 0x10)]
                return s if len(a) <= 1 else a
            if isinstance(v, (tuple, list)):
                return [convert(e) for e in v]
            if isinstance(v, dict):
                return {id: convert(v) for id, v in v.items()}
            if isinstance(v, DataRecord):
                return v.to_json()
            raise TypeError(f'cannot serialize a {type(v)}')

        return {id: convert(v) for id, v in self if v is not None}

    def dumps(self) -> str:
        metadata = dict(
            creator_tool=f'https://pypi.org/project/zxtape/'
                         f'{zxtape.__version__}')
        d = dict(type=type(self).__qualname__,
                 metadata=metadata)
        d.update(self.to_json())
        return json.dumps(d, indent=2)
