"""JSON decoding with exception-based and result-based error reporting."""

from __future__ import annotations

import re
from types import SimpleNamespace
from typing import Any, TypeAlias, Union

import msgspec
from msgspec import json

from .errors import DecodeError, ErrorCode
from .options import DEFAULT_DEPTH, Option, check_depth, clean_up

JsonValue: TypeAlias = Union[
    None, bool, int, float, str, 'list[JsonValue]', 'dict[str, JsonValue]', SimpleNamespace
]
"""A decoded JSON document."""

Text: TypeAlias = Union[str, bytes, bytearray, memoryview]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

INTEGER_RE = re.compile(r'-?\d+')


class DecodeResult(msgspec.Struct, frozen=True):
    """Outcome of a decode: either a value or the error that prevented it."""

    value: Any = None
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the decoded value or raise the decoding error."""
        if self.error is not None:
            raise self.error
        return self.value


class _TooDeep(Exception):
    pass


def _failure(message: str, code: ErrorCode, cause: BaseException | None = None) -> DecodeResult:
    error = DecodeError(message, code)
    error.__cause__ = cause
    return DecodeResult(error=error)


def try_decode(
    text: Text,
    assoc: bool = False,
    depth: int = DEFAULT_DEPTH,
    options: int = 0,
) -> DecodeResult:
    """Decode *text* and return a `DecodeResult` instead of raising."""
    check_depth(depth)
    opts = clean_up(options)

    if isinstance(text, (bytes, bytearray, memoryview)):
        if opts & Option.INVALID_UTF8_SUBSTITUTE:
            errors = 'replace'
        elif opts & Option.INVALID_UTF8_IGNORE:
            errors = 'ignore'
        else:
            errors = 'strict'
        try:
            text = bytes(text).decode('utf-8', errors)
        except UnicodeDecodeError as exc:
            msg = 'Malformed UTF-8 characters, possibly incorrectly encoded'
            return _failure(msg, ErrorCode.UTF8, exc)
    elif not isinstance(text, str):
        raise TypeError(f'expected str or bytes, got {type(text).__name__}')

    if opts & Option.BIGINT_AS_STRING:
        parser = json.Decoder(float_hook=_bigint_hook)
    else:
        parser = json.Decoder()
    try:
        data = parser.decode(text)
    except msgspec.DecodeError as exc:
        msg = str(exc)
        code = ErrorCode.UTF16 if 'surrogate' in msg else ErrorCode.SYNTAX
        return _failure(msg, code, exc)
    except UnicodeEncodeError as exc:
        # lone surrogates in a str cannot be encoded as UTF-8
        return _failure(f'Malformed UTF-8 characters: {exc.reason}', ErrorCode.UTF8, exc)
    except RecursionError as exc:
        return _failure('Maximum stack depth exceeded', ErrorCode.DEPTH, exc)

    as_mapping = assoc or bool(opts & Option.OBJECT_AS_ARRAY)
    bigint_as_string = bool(opts & Option.BIGINT_AS_STRING)
    try:
        value = _build(data, as_mapping, bigint_as_string, depth, 0)
    except (_TooDeep, RecursionError) as exc:
        return _failure('Maximum stack depth exceeded', ErrorCode.DEPTH, exc)
    return DecodeResult(value=value)


def decode(
    text: Text,
    assoc: bool = False,
    depth: int = DEFAULT_DEPTH,
    options: int = 0,
) -> JsonValue:
    """Decode a JSON document.

    Objects decode to `SimpleNamespace` instances unless *assoc* is true or
    `Option.OBJECT_AS_ARRAY` is set, in which case they decode to dicts.
    Containers nested deeper than *depth* are rejected.

    Raises `DecodeError` when *text* is not valid JSON.
    """
    return try_decode(text, assoc, depth, options).unwrap()


def as_array(text: Text, depth: int = DEFAULT_DEPTH, options: int = 0) -> JsonValue:
    """Decode *text* with objects as dicts."""
    return decode(text, True, depth, options)


def is_valid(text: Text) -> bool:
    """Return whether *text* decodes with the default options."""
    return try_decode(text).ok


def _bigint_hook(text: str) -> float | str:
    # integers past the 64 bit range may be routed through the float parser
    if INTEGER_RE.fullmatch(text):
        return text
    return float(text)


def _build(value: Any, as_mapping: bool, bigint_as_string: bool, depth: int, level: int) -> Any:
    # plain loops keep one stack frame per nesting level
    if isinstance(value, list):
        if level >= depth:
            raise _TooDeep()
        items = []
        for item in value:
            items.append(_build(item, as_mapping, bigint_as_string, depth, level + 1))
        return items

    if isinstance(value, dict):
        if level >= depth:
            raise _TooDeep()
        record: Any = {} if as_mapping else SimpleNamespace()
        fields = record if as_mapping else record.__dict__
        for key, item in value.items():
            fields[key] = _build(item, as_mapping, bigint_as_string, depth, level + 1)
        return record

    if bigint_as_string and type(value) is int and not INT64_MIN <= value <= INT64_MAX:
        return str(value)
    return value
