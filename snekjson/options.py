"""Option flags shared by the decoder and encoder."""

from __future__ import annotations

from enum import IntFlag

DEFAULT_DEPTH = 512


class Option(IntFlag):
    """Bitmask of decoder and encoder features."""

    NONE = 0

    # decoding
    BIGINT_AS_STRING = 1 << 0
    INVALID_UTF8_IGNORE = 1 << 1
    INVALID_UTF8_SUBSTITUTE = 1 << 2
    OBJECT_AS_ARRAY = 1 << 3

    # encoding
    PRETTY_PRINT = 1 << 4
    ESCAPE_SLASHES = 1 << 5
    ESCAPE_UNICODE = 1 << 6
    HEX_TAG = 1 << 7
    HEX_AMP = 1 << 8
    HEX_APOS = 1 << 9
    FORCE_OBJECT = 1 << 10
    NUMERIC_CHECK = 1 << 11
    PARTIAL_OUTPUT_ON_ERROR = 1 << 12
    SORT_KEYS = 1 << 13

    # always stripped; errors are always raised
    THROW_ON_ERROR = 1 << 22


def clean_up(options: int) -> Option:
    """Return *options* as an `Option` with `THROW_ON_ERROR` removed."""
    return Option(int(options) & ~int(Option.THROW_ON_ERROR))


def check_depth(depth: int) -> int:
    if depth < 1:
        raise ValueError(f'depth must be greater than zero: {depth}')
    return depth
