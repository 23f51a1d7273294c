import dataclasses

import pytest

from gaemi.vector import Vector2
from gaemi.vertex2d import UV, ColorRGBA8, Position, Rectangle, Vertex2D


def test_color_rgba8_defaults_to_zero():
    assert ColorRGBA8() == ColorRGBA8(0, 0, 0, 0)


def test_color_rgba8_rejects_out_of_range():
    with pytest.raises(ValueError):
        ColorRGBA8(0, 0, 0, 300)


def test_vertex_defaults():
    vertex = Vertex2D()
    assert vertex.position == Position(0.0, 0.0)
    assert vertex.color == ColorRGBA8()
    assert vertex.uv == UV(0.0, 0.0)


def test_vertex_replace_keeps_other_fields():
    vertex = Vertex2D(Position(1.0, 2.0), ColorRGBA8(1, 2, 3, 4), UV(0.5, 0.25))
    moved = dataclasses.replace(vertex, position=Position(5.0, 6.0))
    assert moved.position == Position(5.0, 6.0)
    assert moved.color == vertex.color
    assert moved.uv == vertex.uv


def test_vertex_is_immutable():
    vertex = Vertex2D()
    with pytest.raises(dataclasses.FrozenInstanceError):
        vertex.uv = UV(1.0, 1.0)


def test_rectangle_default_is_empty():
    rect = Rectangle()
    assert (rect.left, rect.right, rect.top, rect.bottom, rect.width, rect.height) == (0, 0, 0, 0, 0, 0)


def test_rectangle_from_size_edges():
    rect = Rectangle.from_size(10.0, 20.0, 30.0, 40.0)
    assert rect.right == rect.left + rect.width
    assert rect.bottom == rect.top + rect.height
    assert rect.width == 30.0
    assert rect.height == 40.0


def test_rectangle_center_lies_between_edges():
    rect = Rectangle.from_size(-4.0, 2.0, 8.0, 6.0)
    center = rect.center()
    assert center.x == (rect.left + rect.right) / 2
    assert center.y == (rect.top + rect.bottom) / 2


def test_rectangle_center_of_empty_is_origin():
    assert Rectangle().center() == Vector2(0.0, 0.0)