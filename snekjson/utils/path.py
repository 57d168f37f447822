from __future__ import annotations

import importlib
from typing import Any

from .. import logs

log = logs.get(__name__)


def import_module(modname: str, pkgname: str | None = None) -> Exception | None:
    """Import a module, optionally relative to *pkgname*."""
    name = '.'.join(filter(None, [pkgname, modname]))
    try:
        log.debug('loading: %s', name)
        if pkgname:
            importlib.import_module(f'.{modname}', pkgname)
        else:
            importlib.import_module(modname)
    except Exception as exc:
        return exc
    return None


def import_object(path: str) -> Any:
    """Import and return the object at *path*.

    Accepts `package.module:attr.attr` or `package.module.attr`. In the
    dotted form the longest importable module prefix is used.
    """
    if ':' in path:
        modname, _, attrs = path.partition(':')
        module = importlib.import_module(modname)
        return _getattrs(module, attrs.split('.'))

    parts = path.split('.')
    for i in range(len(parts) - 1, 0, -1):
        modname = '.'.join(parts[:i])
        exc = import_module(modname)
        if exc is None:
            return _getattrs(importlib.import_module(modname), parts[i:])
        if not isinstance(exc, ModuleNotFoundError):
            raise exc
    raise ImportError(f'no module found for: {path}')


def _getattrs(obj: Any, names: list[str]) -> Any:
    for name in names:
        obj = getattr(obj, name)
    return obj
