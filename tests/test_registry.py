import pytest

import snekjson
from snekjson import RegistryError

from .models import FrozenPoint, Point


def test_register_decorator(clean_registry):
    @snekjson.register
    class Pixel:
        x: int
        y: int

    assert 'Pixel' in clean_registry
    pixel = snekjson.as_instance_of('Pixel', '{"x":1,"y":2}')
    assert isinstance(pixel, Pixel)
    assert (pixel.x, pixel.y) == (1, 2)


def test_register_with_name(clean_registry):
    snekjson.register(Point, name='point')

    assert clean_registry.names() == ('point',)
    assert snekjson.as_collection_of_instances('point', '[{"x":1,"y":2}]') == [Point(1, 2)]


def test_register_decorator_with_name(clean_registry):
    @snekjson.register(name='custom')
    class Custom:
        value: str

    assert clean_registry['custom'] is Custom


def test_register_twice(clean_registry):
    snekjson.register(Point)
    snekjson.register(Point)

    with pytest.raises(RegistryError):
        snekjson.register(FrozenPoint, name='Point')


def test_unregister(clean_registry):
    snekjson.register(Point)
    snekjson.unregister('Point')

    assert 'Point' not in clean_registry
    with pytest.raises(snekjson.TypeReflectionError):
        snekjson.as_instance_of('Point', '{}')


def test_lookup_falls_back_to_import(clean_registry):
    assert clean_registry['tests.models.Point'] is Point
    assert clean_registry.names() == ()
