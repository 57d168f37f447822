from dataclasses import dataclass, field
from typing import ClassVar

import msgspec


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


@dataclass
class Tagged:
    name: str
    tags: list = field(default_factory=list)

    def __post_init__(self):
        raise AssertionError('__post_init__ must not run')


class PlainPoint:
    x: int
    y: int
    ORIGIN: ClassVar[tuple] = (0, 0)

    def __init__(self, x, y):
        raise AssertionError('__init__ must not run')


class SlottedPoint:
    __slots__ = ('x', 'y')


class Account:
    owner: str
    _balance: int

    def __setattr__(self, name, value):
        raise AttributeError('read only')


class Vector(msgspec.Struct):
    x: float
    y: float


class Empty:
    pass


NOT_A_CLASS = 42


class Defaults:
    x = 0
    y = 0
    label = 'origin'
    LIMIT: ClassVar[int] = 3
    _cache = None

    def norm(self):
        return abs(self.x) + abs(self.y)

    @property
    def pair(self):
        return self.x, self.y
