"""Discovery of the declared fields of a class."""

from __future__ import annotations

import dataclasses
import inspect
import typing
from typing import Any

import msgspec


def is_dunder(name: str) -> bool:
    return name.startswith('__') and name.endswith('__')


def slot_names(cls: type) -> list[str]:
    """Return the `__slots__` entries declared across the MRO of *cls*."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not is_dunder(name) and name not in names:
                names.append(name)
    return names


def annotated_names(cls: type) -> list[str]:
    """Return annotated attribute names across the MRO, skipping `ClassVar`s."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        for name, hint in inspect.get_annotations(klass).items():
            if is_dunder(name) or name in names or _is_classvar(hint):
                continue
            names.append(name)
    return names


def class_attr_names(cls: type) -> list[str]:
    """Return public data attributes assigned in the class bodies of *cls*.

    Methods, properties and other descriptors are skipped, as are names
    annotated as `ClassVar`.
    """
    classvars: set[str] = set()
    for klass in cls.__mro__:
        for name, hint in inspect.get_annotations(klass).items():
            if _is_classvar(hint):
                classvars.add(name)

    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name.startswith('_') or name in names or name in classvars:
                continue
            if callable(value) or hasattr(type(value), '__get__'):
                continue
            names.append(name)
    return names


def declared_fields(cls: type) -> tuple[str, ...]:
    """Return the names a JSON object may assign on an instance of *cls*.

    msgspec structs, dataclasses and attrs classes report their own fields;
    any other class is described by its slots, its annotations and the
    public data attributes of its class body (`x = 0`).
    """
    if isinstance(cls, type) and issubclass(cls, msgspec.Struct):
        return tuple(cls.__struct_fields__)
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    attrs_fields = getattr(cls, '__attrs_attrs__', None)
    if attrs_fields is not None:
        return tuple(a.name for a in attrs_fields)

    names = slot_names(cls)
    for name in annotated_names(cls) + class_attr_names(cls):
        if name not in names:
            names.append(name)
    return tuple(names)


def public_attrs(obj: Any) -> dict[str, Any]:
    """Return the public attributes set on *obj*, in definition order."""
    cls = type(obj)
    if isinstance(obj, msgspec.Struct):
        return {
            f.encode_name: getattr(obj, f.name) for f in msgspec.structs.fields(cls)
        }
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}

    attrs: dict[str, Any] = {}
    for name in slot_names(cls):
        if not name.startswith('_') and hasattr(obj, name):
            attrs[name] = getattr(obj, name)
    for name, value in getattr(obj, '__dict__', {}).items():
        if not name.startswith('_'):
            attrs[name] = value
    return attrs


def _is_classvar(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(('ClassVar', 'typing.ClassVar'))
    return hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar
