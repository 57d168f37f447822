from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric codes attached to codec errors."""

    NONE = 0
    DEPTH = 1
    STATE_MISMATCH = 2
    CTRL_CHAR = 3
    SYNTAX = 4
    UTF8 = 5
    RECURSION = 6
    INF_OR_NAN = 7
    UNSUPPORTED_TYPE = 8
    INVALID_PROPERTY_NAME = 9
    UTF16 = 10
    TYPE_MISMATCH = 11


class SnekJSONError(Exception):
    """Base class for all snekjson exceptions."""


class CodecError(SnekJSONError):
    """Base class for errors raised while decoding or encoding."""

    PREFIX = 'Unable to process JSON'

    def __init__(self, message: str = '', code: int = ErrorCode.NONE) -> None:
        super().__init__(f'{self.PREFIX}: {message}')
        self.message = message
        self.code = ErrorCode(code)


class DecodeError(CodecError):
    """Raised when text is not valid JSON, is nested too deeply or is badly encoded."""

    PREFIX = 'Unable to decode JSON'


class EncodeError(CodecError):
    """Raised when a value graph cannot be serialized."""

    PREFIX = 'Unable to encode JSON'


class HydrationError(SnekJSONError):
    """Base class for errors raised while building instances from JSON."""


class TypeReflectionError(HydrationError):
    """Raised when a hydration target cannot be resolved to a class."""

    def __init__(self, name: Any, reason: str = 'not found') -> None:
        super().__init__(f'invalid hydration type: {name!r} ({reason})')
        self.name = name


class FieldNotFoundError(HydrationError):
    """Raised when a decoded key has no matching field on the target class."""

    def __init__(self, cls: type, field: str) -> None:
        super().__init__(f'{cls.__qualname__} has no field {field!r}')
        self.cls = cls
        self.field = field


class RegistryError(SnekJSONError):
    """Raised when attempting to register a duplicate object."""
