"""Registry of named hydration target types."""

from __future__ import annotations

from threading import Lock
from typing import Any, Callable, Generic, TypeVar, overload

from . import errors, logs
from .utils.path import import_object

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of classes by name.

    Names that were never registered are treated as import paths.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._registry: dict[str, type[T]] = {}

    def __getitem__(self, name: str) -> type[T]:
        try:
            return self._registry[name]
        except KeyError:
            pass
        obj = import_object(name)
        if not isinstance(obj, type):
            raise TypeError(f'not a class: {name}')
        log.debug('imported: %s', name)
        return obj

    def __setitem__(self, name: str, cls: type[T]) -> None:
        with self._lock:
            current = self._registry.get(name)
            if current is not None and current is not cls:
                raise errors.RegistryError(f'name already registered: {name}')
            self._registry[name] = cls
        log.debug('registered: %s -> %s.%s', name, cls.__module__, cls.__qualname__)

    def __delitem__(self, name: str) -> None:
        with self._lock:
            del self._registry[name]

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def names(self) -> tuple[str, ...]:
        """Return all registered names in insertion order."""
        return tuple(self._registry.keys())


REGISTRY: Registry[Any] = Registry()


@overload
def register(cls: type[T], *, name: str | None = None) -> type[T]: ...
@overload
def register(cls: None = None, *, name: str | None = None) -> Callable[[type[T]], type[T]]: ...


def register(cls: Any = None, *, name: str | None = None) -> Any:
    """Register *cls* as a hydration target under *name*.

    Usable directly or as a class decorator, with or without arguments.
    The name defaults to the class name.
    """

    def decorator(cls: type[T]) -> type[T]:
        REGISTRY[name or cls.__name__] = cls
        return cls

    if cls is None:
        return decorator
    return decorator(cls)


def unregister(name: str) -> None:
    del REGISTRY[name]
