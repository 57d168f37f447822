"""Building instances of arbitrary classes from decoded JSON objects.

Instances are allocated with `cls.__new__` so that no `__init__` (or
`__post_init__`) logic runs, and fields are written with
`object.__setattr__` (`msgspec.structs.force_setattr` for structs), which
also works on frozen classes.
Only declared fields may be assigned (see `fields.declared_fields`), and
values are assigned exactly as decoded, without any coercion.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, Union

import msgspec

from . import logs
from .decoder import Text, as_array
from .errors import DecodeError, ErrorCode, FieldNotFoundError, TypeReflectionError
from .fields import declared_fields
from .options import DEFAULT_DEPTH
from .registry import REGISTRY

log = logs.get(__name__)

T = TypeVar('T')

TypeName = Union[str, type]


def resolve_type(type_name: TypeName) -> type:
    """Return the class for *type_name*.

    *type_name* may be a class, a registered name or an import path.
    """
    if isinstance(type_name, type):
        return type_name
    if not isinstance(type_name, str) or not type_name:
        raise TypeReflectionError(type_name, 'expected a class or a name')
    try:
        cls = REGISTRY[type_name]
    except Exception as exc:
        # includes whatever a target module raises while it is imported
        raise TypeReflectionError(type_name, str(exc) or type(exc).__name__) from exc
    log.debug('resolved %r to %s.%s', type_name, cls.__module__, cls.__qualname__)
    return cls


def new_instance_of(cls: type[T], properties: Mapping[str, Any]) -> T:
    """Allocate an instance of *cls* and assign *properties* to its fields."""
    fields = declared_fields(cls)
    for key in properties:
        if key not in fields:
            raise FieldNotFoundError(cls, key)

    try:
        instance = cls.__new__(cls)
    except TypeError as exc:
        raise TypeReflectionError(cls, f'cannot allocate: {exc}') from exc
    if isinstance(instance, msgspec.Struct):
        setattr_ = msgspec.structs.force_setattr
    else:
        setattr_ = object.__setattr__
    for key, value in properties.items():
        try:
            setattr_(instance, key, value)
        except AttributeError as exc:
            raise FieldNotFoundError(cls, key) from exc
    return instance


def as_instance_of(
    type_name: TypeName,
    text: Text,
    depth: int = DEFAULT_DEPTH,
    options: int = 0,
) -> Any:
    """Decode a JSON object and hydrate it into a new instance of *type_name*."""
    cls = resolve_type(type_name)
    properties = as_array(text, depth, options)
    if not isinstance(properties, dict):
        raise _mismatch('object', properties)
    return new_instance_of(cls, properties)


def as_collection_of_instances(
    type_name: TypeName,
    text: Text,
    depth: int = DEFAULT_DEPTH,
    options: int = 0,
) -> list[Any]:
    """Decode a JSON array of objects into a list of *type_name* instances.

    Either every element is hydrated or the first failure is raised.
    """
    cls = resolve_type(type_name)
    items = as_array(text, depth, options)
    if not isinstance(items, list):
        raise _mismatch('array', items)

    collection = []
    for item in items:
        if not isinstance(item, dict):
            raise _mismatch('array of objects', item)
        collection.append(new_instance_of(cls, item))
    return collection


def _mismatch(expected: str, value: Any) -> DecodeError:
    kind = {dict: 'object', list: 'array', str: 'string', type(None): 'null'}.get(
        type(value), type(value).__name__
    )
    return DecodeError(f'expected {expected}, got {kind}', ErrorCode.TYPE_MISMATCH)
