#!/usr/bin/env python3
# -*- coding: utf-8 -*-

#   ZX Spectrum Emulator.
#   https://github.com/kosarev/zx
#
#   Copyright (C) 2017-2025 Ivan Kosarev.
#   mail@ivankosarev.com
#
#   Published under the MIT license.


import os
import sys

from ._error import Error
from ._error import USER_ERRORS
from ._error import verbalize_error
from ._file import TAP_EXTENSION
from ._file import parse_file
from ._file import read_data
from ._file import read_file_image
from ._tap import TAPFile


def pop_argument(args: list[str], error: str) -> str:
    if not args:
        raise Error(error)
    return args.pop(0)


def pop_option_value(args: list[str], option: str) -> None | str:
    if args[0:1] != [option]:
        return None
    args.pop(0)
    return pop_argument(args, 'The value of %s is not specified.' % option)


def handle_extra_arguments(args: list[str]) -> None:
    if args:
        raise Error('Extra argument %r.' % args[0])


def list_chunks(args: list[str]) -> None:
    filename = pop_argument(args, 'The file to list is not specified.')
    handle_extra_arguments(args)

    for chunk in parse_file(filename):
        print(chunk)


def dump(args: list[str]) -> None:
    filename = pop_argument(args, 'The file to dump is not specified.')
    handle_extra_arguments(args)

    print(TAPFile.parse(filename, read_file_image(filename)).dumps())


def extract(args: list[str]) -> None:
    src_filename = pop_argument(args, 'The file to extract from is not '
                                      'specified.')
    dest_filename = pop_argument(args, 'The file to extract to is not '
                                       'specified.')

    name = None
    index = None
    while args:
        value = pop_option_value(args, '--name')
        if value is not None:
            name = value
            continue

        value = pop_option_value(args, '--index')
        if value is not None:
            try:
                index = int(value)
            except ValueError:
                raise Error('Bad chunk index %r.' % value)
            continue

        handle_extra_arguments(args)

    data = read_data(src_filename, name=name, index=index)
    with open(dest_filename, 'wb') as f:
        f.write(data)


def convert_file(src_filename: str, dest_filename: str) -> None:
    _, dest_ext = os.path.splitext(dest_filename)
    if dest_ext.lower() != TAP_EXTENSION:
        raise Error("Don't know how to convert to %r files." % dest_ext)

    tap = TAPFile.parse(src_filename, read_file_image(src_filename))
    with open(dest_filename, 'wb') as f:
        f.write(tap.encode())


def convert(args: list[str]) -> None:
    src_filename = pop_argument(args, 'The file to convert from is not '
                                      'specified.')
    dest_filename = pop_argument(args, 'The file to convert to is not '
                                       'specified.')
    handle_extra_arguments(args)

    convert_file(src_filename, dest_filename)


def looks_like_filename(s: str) -> bool:
    return '.' in s


def usage() -> None:
    print('Usage:')
    print('  zxtape [list] <file>')
    print('  zxtape dump <file>')
    print('  zxtape extract <file> <to-file> [--index <n>] [--name <name>]')
    print('  zxtape [convert] <from-file> <to-file.tap>')
    print('  zxtape help')
    sys.exit()


def handle_command_line(args: list[str]) -> None:
    # Guess the command by the arguments.
    if len(args) == 1 and looks_like_filename(args[0]):
        list_chunks(args)
        return

    if (len(args) == 2 and looks_like_filename(args[0]) and
            looks_like_filename(args[1])):
        convert(args)
        return

    # Handle an explicitly specified command.
    if not args:
        usage()
        return

    command = args[0]
    if command in ['help', '-help', '--help',
                   '-h', '-?',
                   '/h', '/help']:
        usage()
        return

    COMMANDS = {
        'convert': convert,
        'dump': dump,
        'extract': extract,
        'list': list_chunks,
    }

    if command not in COMMANDS:
        raise Error('Unknown command %r.' % command)

    COMMANDS[command](args[1:])


def main(args: None | list[str] = None) -> None:
    if args is None:
        args = sys.argv[1:]

    try:
        handle_command_line(args)
    except USER_ERRORS as e:
        sys.exit('zxtape: %s' % verbalize_error(e))


if __name__ == "__main__":
    main()
