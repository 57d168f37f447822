"""Exception-raising JSON helpers with typed object hydration."""

from __future__ import annotations

from .codec import JsonCodec
from .decoder import DecodeResult, JsonValue, as_array, decode, is_valid, try_decode
from .encoder import encode
from .errors import (
    CodecError,
    DecodeError,
    EncodeError,
    ErrorCode,
    FieldNotFoundError,
    HydrationError,
    RegistryError,
    SnekJSONError,
    TypeReflectionError,
)
from .hydrate import as_collection_of_instances, as_instance_of
from .options import DEFAULT_DEPTH, Option
from .registry import register, unregister

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_DEPTH',
    'CodecError',
    'DecodeError',
    'DecodeResult',
    'EncodeError',
    'ErrorCode',
    'FieldNotFoundError',
    'HydrationError',
    'JsonCodec',
    'JsonValue',
    'Option',
    'RegistryError',
    'SnekJSONError',
    'TypeReflectionError',
    'as_array',
    'as_collection_of_instances',
    'as_instance_of',
    'decode',
    'encode',
    'is_valid',
    'register',
    'try_decode',
    'unregister',
]
