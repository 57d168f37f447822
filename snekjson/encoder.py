"""JSON encoding with cycle, depth and non-finite number checks."""

from __future__ import annotations

import datetime
import decimal
import io
import math
import re
import socket
import uuid
from collections.abc import Mapping
from enum import Enum
from types import FunctionType, MethodType, ModuleType, SimpleNamespace
from typing import Any

import msgspec
from msgspec import json

from .errors import EncodeError, ErrorCode
from .fields import public_attrs
from .options import DEFAULT_DEPTH, Option, check_depth, clean_up
from .utils.format import elide, hex_escape

PRETTY_INDENT = 4

# msgspec writes integers within [-2**63, 2**64) natively
INT_MIN = -(2**63)
INT_MAX = 2**64 - 1

NUMERIC_RE = re.compile(r'-?(?:0|[1-9]\d*)(\.\d+)?([eE][+-]?\d+)?')
NON_ASCII_RE = re.compile(r'[^\x00-\x7f]')

NATIVE_TYPES = (
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
)
OPAQUE_TYPES = (
    type,
    ModuleType,
    FunctionType,
    MethodType,
    io.IOBase,
    socket.socket,
    bytes,
    bytearray,
    memoryview,
)

HEX_ESCAPES = (
    (Option.HEX_TAG, '<>'),
    (Option.HEX_AMP, '&'),
    (Option.HEX_APOS, "'"),
)


class Normalizer:
    """Converts a value graph into builtins msgspec can serialize.

    Tracks the containers on the current path so that back-references are
    reported as errors instead of recursing forever.
    """

    def __init__(self, options: Option, depth: int) -> None:
        self.options = options
        self.depth = depth
        self.partial = bool(options & Option.PARTIAL_OUTPUT_ON_ERROR)
        self._path: set[int] = set()

    def __call__(self, value: Any) -> Any:
        return self.normalize(value, 0)

    def fail(self, message: str, code: ErrorCode, substitute: Any = None) -> Any:
        if self.partial:
            return substitute
        raise EncodeError(message, code)

    def normalize(self, value: Any, level: int) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, Enum):
            return self.normalize(value.value, level)
        if isinstance(value, str):
            if self.options & Option.NUMERIC_CHECK and NUMERIC_RE.fullmatch(value):
                return self.normalize(_to_number(value), level)
            return value
        if isinstance(value, int):
            return value if INT_MIN <= value <= INT_MAX else decimal.Decimal(value)
        if isinstance(value, float):
            if math.isfinite(value):
                return value
            return self.fail('Inf and NaN cannot be JSON encoded', ErrorCode.INF_OR_NAN, 0)
        if isinstance(value, decimal.Decimal):
            if value.is_finite():
                return value
            return self.fail('Inf and NaN cannot be JSON encoded', ErrorCode.INF_OR_NAN, 0)
        if isinstance(value, NATIVE_TYPES):
            return value

        if isinstance(value, Mapping):
            return self.container(value, level, self.mapping)
        if isinstance(value, (list, tuple, set, frozenset)):
            return self.container(value, level, self.sequence)
        if isinstance(value, OPAQUE_TYPES) or not _has_attrs(value):
            return self.fail(_unsupported(value), ErrorCode.UNSUPPORTED_TYPE)
        return self.container(value, level, self.instance)

    def container(self, value: Any, level: int, convert: Any) -> Any:
        if level >= self.depth:
            raise EncodeError('Maximum stack depth exceeded', ErrorCode.DEPTH)
        key = id(value)
        if key in self._path:
            return self.fail('Recursion detected', ErrorCode.RECURSION)
        self._path.add(key)
        try:
            return convert(value, level + 1)
        finally:
            self._path.discard(key)

    def mapping(self, value: Mapping[Any, Any], level: int) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in value.items():
            if isinstance(key, Enum):
                key = key.value
            if isinstance(key, int) and not isinstance(key, bool):
                key = str(key)
            if not isinstance(key, str):
                if self.partial:
                    continue
                msg = f'unsupported key: {elide(repr(key))}'
                raise EncodeError(msg, ErrorCode.UNSUPPORTED_TYPE)
            result[key] = self.normalize(item, level)
        return result

    def sequence(self, value: Any, level: int) -> Any:
        items = []
        for item in value:
            items.append(self.normalize(item, level))
        if self.options & Option.FORCE_OBJECT:
            return {str(i): item for i, item in enumerate(items)}
        return items

    def instance(self, value: Any, level: int) -> dict[str, Any]:
        attrs = vars(value) if isinstance(value, SimpleNamespace) else public_attrs(value)
        return {name: self.normalize(item, level) for name, item in attrs.items()}


def encode(value: Any, options: int = 0, depth: int = DEFAULT_DEPTH) -> str:
    """Serialize *value* to a JSON string.

    Raises `EncodeError` for cyclic graphs, non-finite floats, unsupported
    values and nesting deeper than *depth*. `Option.PARTIAL_OUTPUT_ON_ERROR`
    substitutes the offending values instead; depth errors still raise.
    """
    check_depth(depth)
    opts = clean_up(options)

    try:
        data = Normalizer(opts, depth)(value)
    except RecursionError as exc:
        raise EncodeError('Maximum stack depth exceeded', ErrorCode.DEPTH) from exc

    encoder = json.Encoder(
        decimal_format='number',
        order='sorted' if opts & Option.SORT_KEYS else None,
    )
    try:
        buf = encoder.encode(data)
    except UnicodeError as exc:
        raise EncodeError(f'Malformed UTF-8 characters: {exc}', ErrorCode.UTF8) from exc
    except (msgspec.EncodeError, TypeError, ValueError, OverflowError) as exc:
        raise EncodeError(str(exc), ErrorCode.UNSUPPORTED_TYPE) from exc

    if opts & Option.PRETTY_PRINT:
        buf = json.format(buf, indent=PRETTY_INDENT)

    return _escape(buf.decode('utf-8'), opts)


def _escape(text: str, opts: Option) -> str:
    # these characters only ever appear inside string literals
    if opts & Option.ESCAPE_SLASHES:
        text = text.replace('/', '\\/')
    for flag, chars in HEX_ESCAPES:
        if opts & flag:
            for char in chars:
                text = text.replace(char, hex_escape(char))
    if opts & Option.ESCAPE_UNICODE:
        text = NON_ASCII_RE.sub(lambda m: hex_escape(m.group()), text)
    return text


def _to_number(text: str) -> int | float:
    match = NUMERIC_RE.fullmatch(text)
    if match and not (match.group(1) or match.group(2)):
        return int(text)
    return float(text)


def _has_attrs(value: Any) -> bool:
    return hasattr(value, '__dict__') or hasattr(type(value), '__slots__')


def _unsupported(value: Any) -> str:
    return f'Type is not supported: {type(value).__name__}'
