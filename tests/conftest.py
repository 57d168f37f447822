import pytest

from snekjson import registry


@pytest.fixture
def clean_registry(monkeypatch):
    reg = registry.Registry()
    monkeypatch.setattr(registry, 'REGISTRY', reg)
    monkeypatch.setattr('snekjson.hydrate.REGISTRY', reg)
    return reg
