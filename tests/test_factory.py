"""Tests for the live_map() factory function."""

import pytest

from livemap import Attributes, LiveMapView, Memory, Namespaced, json_value, live_map


class Settings:
    pass


class TestLiveMapFactory:
    def test_default_is_memory(self):
        m = live_map()
        assert isinstance(m, LiveMapView)
        assert isinstance(m.live_object, Memory)
        assert m.is_empty()

    def test_source_is_copied(self):
        m = live_map({"x": 10, "y": 20})
        assert m.entry_set().size() == 2
        assert m.get("x") == 10
        assert m.get("y") == 20

    def test_source_is_coerced(self):
        m = live_map({"x": "10"}, value_type=int)
        assert m.live_object.get_property("x") == 10

    def test_json_source(self):
        m = live_map({"cfg": {"debug": True}}, value_type=json_value())
        assert m.live_object.get_property("cfg") == '{"debug": true}'
        assert m["cfg"] == {"debug": True}

    def test_attributes_backend(self):
        target = Settings()
        m = live_map({"level": 3}, backend="attributes", target=target)
        assert isinstance(m.live_object, Attributes)
        assert target.level == 3

    def test_attributes_requires_target(self):
        with pytest.raises(ValueError, match="target is required"):
            live_map(backend="attributes")

    def test_invalid_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            live_map(backend="redis")

    def test_namespace(self):
        m = live_map({"k": 1}, namespace="app")
        assert isinstance(m.live_object, Namespaced)
        assert m.live_object.namespace == "app"
        assert m["k"] == 1
