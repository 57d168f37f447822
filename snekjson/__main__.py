from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import decoder, encoder, logs
from .errors import CodecError
from .options import DEFAULT_DEPTH, Option

log = logs.get('snekjson.cli')


def read_input(path: str) -> bytes:
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def cmd_validate(args: argparse.Namespace) -> int:
    status = 0
    for path in args.files:
        try:
            data = read_input(path)
        except OSError as exc:
            status = 1
            print(f'{path}: invalid: {exc}')
            continue
        result = decoder.try_decode(data, depth=args.depth)
        if result.ok:
            print(f'{path}: ok')
        else:
            status = 1
            print(f'{path}: invalid: {result.error}')
    return status


def cmd_format(args: argparse.Namespace) -> int:
    options = Option.PRETTY_PRINT
    if args.sort_keys:
        options |= Option.SORT_KEYS
    if args.escape_unicode:
        options |= Option.ESCAPE_UNICODE
    if args.escape_slashes:
        options |= Option.ESCAPE_SLASHES

    try:
        value = decoder.decode(read_input(args.file), True, args.depth)
        print(encoder.encode(value, options, args.depth))
    except (CodecError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser('snekjson', description='validate and format JSON')
    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        help='increase log verbosity (repeatable)',
    )
    parser.add_argument(
        '-d',
        '--depth',
        type=int,
        default=DEFAULT_DEPTH,
        help='maximum nesting depth (default: %(default)s)',
    )
    commands = parser.add_subparsers(dest='command', required=True)

    validate = commands.add_parser('validate', help='check that files contain valid JSON')
    validate.add_argument(
        'files', nargs='+', metavar='FILE', help="a file to check ('-' for STDIN)"
    )
    validate.set_defaults(func=cmd_validate)

    fmt = commands.add_parser('format', help='pretty-print a JSON document')
    fmt.add_argument('file', nargs='?', default='-', metavar='FILE', help='defaults to STDIN')
    fmt.add_argument('--sort-keys', action='store_true', help='sort object keys')
    fmt.add_argument(
        '--escape-unicode', action='store_true', help='escape non-ASCII characters'
    )
    fmt.add_argument('--escape-slashes', action='store_true', help='escape forward slashes')
    fmt.set_defaults(func=cmd_format)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    logs.init(args.verbose)
    log.debug('command: %s', args.command)
    return args.func(args)


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
