"""
Тесты для модели Polygon

Проверяет:
1. Создание и валидацию моделей Pydantic (Point, Polygon)
2. Замыкание контура и рёбра
3. Площадь (формула площадей Гаусса) и якорь подписи
4. Построение правильного многоугольника
5. Immutability (frozen=True)
"""

import importlib.util
import logging
import math

import pytest
from pydantic import ValidationError

from src.core.geometry import Point, Polygon, Segment, regular_polygon


def pts(*coords: tuple[float, float]) -> list[Point]:
    return [Point(x=x, y=y) for x, y in coords]


@pytest.fixture
def unit_square() -> Polygon:
    """Единичный квадрат"""
    return Polygon(vertices=pts((0, 0), (1, 0), (1, 1), (0, 1)))


@pytest.fixture
def triangle() -> Polygon:
    """Прямоугольный треугольник с катетами 4 и 3"""
    return Polygon(vertices=pts((0, 0), (4, 0), (0, 3)))


# =============================================================================
# POINT
# =============================================================================


class TestPoint:
    """Тесты для модели Point"""

    def test_creation(self) -> None:
        p = Point(x=1.5, y=-2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_frozen(self) -> None:
        p = Point(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            p.x = 3.0  # type: ignore[misc]

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            Point(x=bad, y=0.0)

    def test_is_close_to(self) -> None:
        assert Point(x=1.0, y=1.0).is_close_to(Point(x=1.0 + 1e-9, y=1.0))
        assert not Point(x=1.0, y=1.0).is_close_to(Point(x=1.1, y=1.0))

    def test_rotated_about_quarter_turn(self) -> None:
        rotated = Point(x=2.0, y=1.0).rotated_about(Point(x=1.0, y=1.0), math.pi / 2)
        assert rotated.x == pytest.approx(1.0)
        assert rotated.y == pytest.approx(2.0)


# =============================================================================
# POLYGON
# =============================================================================


class TestPolygonConstruction:
    """Тесты создания Polygon"""

    def test_ring_is_closed(self, unit_square: Polygon) -> None:
        assert len(unit_square.vertices) == 5
        assert unit_square.vertices[-1] == unit_square.vertices[0]
        assert len(unit_square.corners) == 4

    def test_already_closed_ring_not_duplicated(self) -> None:
        polygon = Polygon(vertices=pts((0, 0), (1, 0), (1, 1), (0, 0)))
        assert len(polygon.vertices) == 4
        assert len(polygon.corners) == 3

    def test_empty_vertices_rejected(self) -> None:
        """Пустой контур не замыкается"""
        with pytest.raises(ValidationError):
            Polygon(vertices=[])

    def test_two_vertex_ring_is_degenerate(self) -> None:
        """Две вершины: контур замыкается, площадь нулевая"""
        polygon = Polygon(vertices=pts((0, 0), (1, 0)))
        assert len(polygon.vertices) == 3
        assert len(polygon.borders()) == 2
        assert polygon.area() == 0.0

    def test_closed_two_vertex_ring_accepted(self) -> None:
        polygon = Polygon(vertices=pts((0, 0), (1, 0), (0, 0)))
        assert len(polygon.corners) == 2
        assert polygon.area() == 0.0

    def test_single_vertex_is_already_closed(self) -> None:
        polygon = Polygon(vertices=pts((2, 3)))
        assert len(polygon.vertices) == 1
        assert polygon.borders() == []
        assert polygon.area() == 0.0
        assert polygon.text_anchor() == Point(x=2.0, y=3.0)

    @pytest.mark.parametrize("bad", [["a", "b", "c"], [1, 2, 3], [None, None, None]])
    def test_non_point_parents_rejected(self, bad) -> None:
        with pytest.raises(ValidationError):
            Polygon(vertices=bad)

    def test_frozen(self, unit_square: Polygon) -> None:
        with pytest.raises(ValidationError):
            unit_square.vertices = ()  # type: ignore[misc]

    def test_json_roundtrip(self, triangle: Polygon) -> None:
        restored = Polygon.model_validate_json(triangle.model_dump_json())
        assert restored == triangle


class TestPolygonBorders:
    """Тесты рёбер"""

    def test_one_border_per_side(self, unit_square: Polygon) -> None:
        borders = unit_square.borders()
        assert len(borders) == 4
        assert all(isinstance(b, Segment) for b in borders)

    def test_borders_chain(self, triangle: Polygon) -> None:
        borders = triangle.borders()
        for current, following in zip(borders, borders[1:]):
            assert current.end == following.start
        assert borders[-1].end == borders[0].start

    def test_perimeter(self, triangle: Polygon) -> None:
        perimeter = sum(b.length() for b in triangle.borders())
        assert perimeter == pytest.approx(12.0)


class TestPolygonArea:
    """Тесты площади"""

    def test_unit_square(self, unit_square: Polygon) -> None:
        assert unit_square.area() == 1.0

    def test_triangle(self, triangle: Polygon) -> None:
        assert triangle.area() == pytest.approx(6.0)

    def test_orientation_independent(self) -> None:
        clockwise = Polygon(vertices=pts((0, 0), (0, 1), (1, 1), (1, 0)))
        assert clockwise.area() == 1.0

    def test_concave(self) -> None:
        # L-образная фигура: 2x2 без угла 1x1
        shape = Polygon(vertices=pts((0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)))
        assert shape.area() == pytest.approx(3.0)

    def test_degenerate_collinear(self) -> None:
        line = Polygon(vertices=pts((0, 0), (1, 1), (2, 2)))
        assert line.area() == 0.0


class TestPolygonAnchor:
    """Тесты якоря подписи"""

    def test_bounding_box_center(self, triangle: Polygon) -> None:
        anchor = triangle.text_anchor()
        assert anchor == Point(x=2.0, y=1.5)

    def test_label_anchor_matches_text_anchor(self, triangle: Polygon) -> None:
        assert triangle.label_anchor() == triangle.text_anchor()

    def test_negative_coordinates(self) -> None:
        polygon = Polygon(vertices=pts((-3, -1), (1, -1), (1, 5)))
        assert polygon.text_anchor() == Point(x=-1.0, y=2.0)

    def test_has_point_always_false(self, unit_square: Polygon) -> None:
        assert unit_square.has_point(0.5, 0.5) is False


class TestGeometryPayload:
    """Тесты численной сводки"""

    def test_payload(self, triangle: Polygon) -> None:
        payload = triangle.to_geometry_payload()
        assert payload == {
            "vertices": [[0.0, 0.0], [4.0, 0.0], [0.0, 3.0]],
            "area": 6.0,
            "anchor": [2.0, 1.5],
        }

    def test_core_has_no_file_format_layer(self) -> None:
        """Сводка строится в памяти: слоя файловых форматов в ядре нет"""
        assert importlib.util.find_spec("src.core.contracts") is None


# =============================================================================
# REGULAR POLYGON
# =============================================================================


class TestRegularPolygon:
    """Тесты regular_polygon"""

    def test_square_from_unit_base(self) -> None:
        square = regular_polygon(Point(x=0, y=0), Point(x=1, y=0), 4)
        corners = square.corners
        assert len(corners) == 4
        expected = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        for corner, (x, y) in zip(corners, expected):
            assert corner.x == pytest.approx(x, abs=1e-12)
            assert corner.y == pytest.approx(y, abs=1e-12)
        assert square.area() == pytest.approx(1.0)

    def test_equilateral_triangle(self) -> None:
        triangle = regular_polygon(Point(x=0, y=0), Point(x=2, y=0), 3)
        apex = triangle.corners[2]
        assert apex.x == pytest.approx(1.0)
        assert apex.y == pytest.approx(math.sqrt(3))
        assert triangle.area() == pytest.approx(math.sqrt(3))

    @pytest.mark.parametrize("n", [5, 6, 8, 12])
    def test_all_sides_equal(self, n: int) -> None:
        polygon = regular_polygon(Point(x=0, y=0), Point(x=1, y=0), n)
        lengths = [b.length() for b in polygon.borders()]
        assert len(lengths) == n
        for length in lengths:
            assert length == pytest.approx(1.0)

    @pytest.mark.parametrize("n", [6, 10])
    def test_area_formula(self, n: int) -> None:
        polygon = regular_polygon(Point(x=0, y=0), Point(x=1, y=0), n)
        expected = n / (4 * math.tan(math.pi / n))
        assert polygon.area() == pytest.approx(expected)

    @pytest.mark.parametrize("n", [2, 0, -4, 3.5, "5", True])
    def test_invalid_vertex_count(self, n) -> None:
        with pytest.raises(ValueError, match="integer number of vertices"):
            regular_polygon(Point(x=0, y=0), Point(x=1, y=0), n)

    def test_construction_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.geometry.polygon"):
            regular_polygon(Point(x=0, y=0), Point(x=1, y=0), 5)
        assert "regular polygon with 5 vertices" in caplog.text
