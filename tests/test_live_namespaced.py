"""Tests for the Namespaced live object."""

import pytest

from livemap import LiveMapView
from livemap.live import Memory, Namespaced


class TestNamespacedBasic:
    def test_get_set(self):
        parent = Memory({"app/greeting": "hello"})
        ns = Namespaced(parent, "app")
        assert ns.get_property("greeting") == "hello"

    def test_writes_land_prefixed(self):
        parent = Memory()
        ns = Namespaced(parent, "app")
        ns.set_property("k", 1)
        assert parent.get_property("app/k") == 1

    def test_property_names_direct_children_only(self):
        parent = Memory({"app/a": 1, "app/sub/b": 2, "other/c": 3, "app/d": 4})
        ns = Namespaced(parent, "app")
        assert ns.property_names() == ["a", "d"]

    def test_has_and_delete(self):
        parent = Memory({"app/a": 1})
        ns = Namespaced(parent, "app")
        assert ns.has_property("a")
        ns.delete_property("a")
        assert not ns.has_property("a")
        assert parent.property_names() == []

    def test_nested(self):
        parent = Memory()
        inner = Namespaced(Namespaced(parent, "app"), "user")
        assert inner.namespace == "app/user"
        inner.set_property("name", "ann")
        assert parent.get_property("app/user/name") == "ann"

    def test_rejects_slash_in_namespace(self):
        with pytest.raises(ValueError, match="cannot contain"):
            Namespaced(Memory(), "a/b")

    def test_rejects_non_live_object(self):
        with pytest.raises(TypeError, match="requires a LiveObject"):
            Namespaced({}, "app")

    def test_rejects_slash_in_name(self):
        ns = Namespaced(Memory(), "app")
        with pytest.raises(ValueError):
            ns.set_property("x/y", 1)
        assert not ns.has_property("x/y")


class TestNamespacedView:
    def test_views_share_parent(self):
        parent = Memory()
        a = LiveMapView(Namespaced(parent, "a"))
        b = LiveMapView(Namespaced(parent, "b"))
        a["k"] = 1
        b["k"] = 2
        assert a["k"] == 1
        assert b["k"] == 2
        assert len(parent.property_names()) == 2

    def test_clear_only_touches_namespace(self):
        parent = Memory({"a/x": 1, "b/y": 2})
        LiveMapView(Namespaced(parent, "a")).clear()
        assert parent.property_names() == ["b/y"]
