# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2020 Ivan Kosarev.
#   ivan@kosarev.info
#
#   Published under the MIT license.

from ._except import TapeException


class Error(TapeException):
    """Basic exception for the whole tape module."""
    DEFAULT_ID: None | str = None

    def __init__(self, reason: str, id: None | str = None) -> None:
        super().__init__(reason)
        self.id = id if id is not None else self.DEFAULT_ID


# Parsing errors.
class TruncatedStream(Error):
    DEFAULT_ID = 'truncated_stream'


class ChecksumMismatch(Error):
    DEFAULT_ID = 'checksum_mismatch'


class MalformedRecord(Error):
    DEFAULT_ID = 'malformed_record'


class MalformedHeaderLength(Error):
    DEFAULT_ID = 'malformed_header_length'


class BodyLengthMismatch(Error):
    DEFAULT_ID = 'body_length_mismatch'


class UnknownBlockFlag(Error):
    DEFAULT_ID = 'unknown_block_flag'


class UnknownTapeType(Error):
    DEFAULT_ID = 'unknown_tape_type'


class UnsupportedTZXVersion(Error):
    DEFAULT_ID = 'unsupported_tzx_version'


class UnsupportedTZXBlock(Error):
    DEFAULT_ID = 'unsupported_tzx_block'

    def __init__(self, reason: str, block_id: int) -> None:
        super().__init__(reason)
        self.block_id = block_id


# Building errors.
class InvalidVariableHead(Error):
    DEFAULT_ID = 'invalid_variable_head'


class LengthMismatch(Error):
    DEFAULT_ID = 'length_mismatch'


class NonASCIIName(Error):
    DEFAULT_ID = 'non_ascii_name'


class BlockTooLong(Error):
    DEFAULT_ID = 'block_too_long'


# Lookup errors.
class ChunkNotFound(Error):
    DEFAULT_ID = 'chunk_not_found'


USER_ERRORS = Error, IOError


def verbalize_error(e: BaseException) -> str:
    if isinstance(e, Error):
        args = [e.reason]
    elif isinstance(e, IOError) and len(e.args) == 2:
        code, reason = e.args
        args = ['%s (code %s).' % (reason, code)]
        if isinstance(e, FileNotFoundError):
            args.insert(0, e.filename)
    else:
        args = [type(e).__name__] + ['%s' % x for x in e.args]
    return ': '.join(args)
