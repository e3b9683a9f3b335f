import pytest

from floorforge.floorplan.tests.fixtures import canonical_room
from floorforge.geometry.models import Vec2
from floorforge.geometry.rooms import (
    calculate_centroid,
    calculate_polygon_area,
    detect_rooms,
    format_area,
)
from floorforge.ir.models import Point, Wall


def test_centroid_of_rectangle():
    points = [Point(x=0, y=0), Point(x=4000, y=0), Point(x=4000, y=2000), Point(x=0, y=2000)]
    center = calculate_centroid(points)
    assert (center.x, center.y) == (2000, 1000)


def test_centroid_of_empty_polygon():
    assert calculate_centroid([]).model_dump() == {"x": 0, "y": 0}


def test_area_of_rectangle_either_winding():
    points = [Vec2(x=0, y=0), Vec2(x=5000, y=0), Vec2(x=5000, y=4000), Vec2(x=0, y=4000)]
    assert calculate_polygon_area(points) == 20_000_000
    assert calculate_polygon_area(list(reversed(points))) == 20_000_000


def test_area_of_triangle():
    points = [Point(x=0, y=0), Point(x=1000, y=0), Point(x=0, y=1000)]
    assert calculate_polygon_area(points) == 500_000


def test_degenerate_polygons_have_no_area():
    assert calculate_polygon_area([]) == 0
    assert calculate_polygon_area([Point(x=0, y=0), Point(x=10, y=10)]) == 0


def test_detect_rooms_canonical_room():
    rooms = detect_rooms(canonical_room().levels[0].walls)

    assert len(rooms) == 1
    room = rooms[0]
    assert room.id == "room-1"
    assert room.label == "Room"
    assert room.area == pytest.approx(20.0)
    assert (room.center.x, room.center.y) == (2500, 2000)
    assert room.wallIds == ["w1", "w2", "w3", "w4"]


def test_detect_rooms_uses_bounding_box_of_all_endpoints():
    walls = [
        Wall(id="w1", a=Point(x=-1000, y=0), b=Point(x=1000, y=0), thicknessMm=200),
        Wall(id="w2", a=Point(x=0, y=-500), b=Point(x=0, y=2500), thicknessMm=200),
    ]
    room = detect_rooms(walls)[0]
    assert room.area == pytest.approx(6.0)
    assert (room.center.x, room.center.y) == (0, 1000)


def test_detect_rooms_without_walls():
    assert detect_rooms([]) == []


def test_format_area():
    assert format_area(20) == "20.00 m²"
    assert format_area(12.3) == "12.30 m²"
    assert format_area(7.5) == "7.50 m²"
