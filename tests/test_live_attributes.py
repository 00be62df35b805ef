"""Tests for the Attributes live object."""

import pytest

from livemap import UNDEFINED, LiveMapView
from livemap.live import Attributes


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._hidden = "secret"


class TestAttributes:
    def test_property_names_skip_private(self):
        assert Attributes(Point(1, 2)).property_names() == ["x", "y"]

    def test_get_property(self):
        attrs = Attributes(Point(1, 2))
        assert attrs.get_property("x") == 1
        assert attrs.get_property("z") is UNDEFINED
        assert attrs.get_property("_hidden") is UNDEFINED

    def test_set_is_visible_on_target(self):
        p = Point(1, 2)
        Attributes(p).set_property("z", 3)
        assert p.z == 3

    def test_target_changes_are_visible(self):
        p = Point(1, 2)
        attrs = Attributes(p)
        p.x = 10
        del p.y
        assert attrs.property_names() == ["x"]
        assert attrs.get_property("x") == 10

    def test_delete(self):
        p = Point(1, 2)
        attrs = Attributes(p)
        attrs.delete_property("x")
        attrs.delete_property("missing")
        assert not hasattr(p, "x")

    def test_private_set_rejected(self):
        with pytest.raises(ValueError, match="private"):
            Attributes(Point(1, 2)).set_property("_hidden", 1)

    def test_requires_dict(self):
        with pytest.raises(TypeError, match="__dict__"):
            Attributes(42)

    def test_view_over_object(self):
        p = Point(1, 2)
        m = LiveMapView(Attributes(p), int)
        m["x"] = "7"
        assert p.x == 7
        assert dict(m.items()) == {"x": 7, "y": 2}
