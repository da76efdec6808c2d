"""
Polygon — Численная модель многоугольника

Immutable Pydantic модели Point / Segment / Polygon и численные результаты,
которые потребляет слой отрисовки: площадь, якорь подписи, рёбра,
построение правильного многоугольника.

Отрисовка, доска, события и видимость сюда не входят.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Контур замкнут: последняя вершина совпадает с первой
2. Площадь неотрицательна (модуль формулы площадей Гаусса)
"""

import logging
import math
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.linalg import EPS

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Пустой контур не замкнуть; вырожденные многоугольники допустимы (площадь 0)
MIN_POLYGON_VERTICES: Final[int] = 1
MIN_REGULAR_POLYGON_VERTICES: Final[int] = 3


# =============================================================================
# POINT & SEGMENT
# =============================================================================


class Point(BaseModel):
    """Точка в пользовательских координатах"""

    x: float = Field(..., allow_inf_nan=False, description="Координата X")
    y: float = Field(..., allow_inf_nan=False, description="Координата Y")

    model_config = {"frozen": True}

    def is_close_to(self, other: "Point", eps: float = EPS) -> bool:
        """Совпадение точек с точностью eps по каждой координате"""
        return abs(self.x - other.x) < eps and abs(self.y - other.y) < eps

    def rotated_about(self, center: "Point", angle: float) -> "Point":
        """
        Поворот точки вокруг center на angle радиан (против часовой стрелки).
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = self.x - center.x
        dy = self.y - center.y
        return Point(
            x=center.x + cos_a * dx - sin_a * dy,
            y=center.y + sin_a * dx + cos_a * dy,
        )


class Segment(BaseModel):
    """Ребро многоугольника"""

    start: Point
    end: Point

    model_config = {"frozen": True}

    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


# =============================================================================
# POLYGON
# =============================================================================


class Polygon(BaseModel):
    """
    Многоугольник, заданный вершинами.

    Последовательность vertices хранится замкнутой: если последняя вершина
    не совпадает с первой, первая добавляется в конец.
    """

    vertices: tuple[Point, ...] = Field(
        ..., min_length=MIN_POLYGON_VERTICES, description="Вершины (контур замыкается автоматически)"
    )

    model_config = {"frozen": True}

    @field_validator("vertices")
    @classmethod
    def close_ring(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """Замыкание контура: первая вершина дописывается в конец при несовпадении"""
        if not v[-1].is_close_to(v[0]):
            v = v + (v[0],)
        return v

    @property
    def corners(self) -> tuple[Point, ...]:
        """Вершины без замыкающей (повтор первой отброшен)"""
        return self.vertices[:-1]

    def borders(self) -> list[Segment]:
        """Рёбра: по одному на каждую пару соседних вершин замкнутого контура"""
        return [
            Segment(start=self.vertices[i], end=self.vertices[i + 1])
            for i in range(len(self.vertices) - 1)
        ]

    def area(self) -> float:
        """
        Площадь по формуле площадей Гаусса (shoelace / surveyor's formula).

        area = |Σ (x_i * y_{i+1} - x_{i+1} * y_i)| / 2

        Examples:
            >>> Polygon(vertices=[Point(x=0, y=0), Point(x=1, y=0), Point(x=1, y=1), Point(x=0, y=1)]).area()
            1.0
        """
        area = 0.0
        for i in range(len(self.vertices) - 1):
            current = self.vertices[i]
            following = self.vertices[i + 1]
            area += current.x * following.y - following.x * current.y
        area /= 2.0
        return abs(area)

    def text_anchor(self) -> Point:
        """Центр ограничивающего прямоугольника вершин"""
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return Point(x=(min(xs) + max(xs)) * 0.5, y=(min(ys) + max(ys)) * 0.5)

    def label_anchor(self) -> Point:
        """Якорь подписи (совпадает с text_anchor)"""
        return self.text_anchor()

    def has_point(self, x: float, y: float) -> bool:
        """Внутренность многоугольника никогда не подсвечивается"""
        return False

    def to_geometry_payload(self) -> dict[str, Any]:
        """
        Численная сводка для слоя отрисовки.

        Вершины без замыкающей, площадь и якорь подписи.
        """
        anchor = self.text_anchor()
        return {
            "vertices": [[p.x, p.y] for p in self.corners],
            "area": self.area(),
            "anchor": [anchor.x, anchor.y],
        }


# =============================================================================
# REGULAR POLYGON
# =============================================================================


def regular_polygon(p1: Point, p2: Point, n: int) -> Polygon:
    """
    Правильный n-угольник по базовому ребру p1 → p2.

    Каждая следующая вершина — поворот позапрошлой вокруг предыдущей
    на угол pi * (2 - (n - 2) / n).

    Args:
        p1: Первая вершина базового ребра
        p2: Вторая вершина базового ребра
        n: Количество вершин (целое, >= 3)

    Returns:
        Polygon с n вершинами

    Raises:
        ValueError: Если n не целое или n < 3

    Examples:
        >>> square = regular_polygon(Point(x=0, y=0), Point(x=1, y=0), 4)
        >>> round(square.area(), 9)
        1.0
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < MIN_REGULAR_POLYGON_VERTICES:
        raise ValueError(
            f"Regular polygon needs an integer number of vertices >= "
            f"{MIN_REGULAR_POLYGON_VERTICES}, got {n!r}"
        )

    angle = math.pi * (2.0 - (n - 2) / n)
    points = [p1, p2]
    for i in range(2, n):
        points.append(points[i - 2].rotated_about(points[i - 1], angle))

    logger.debug("Built regular polygon with %d vertices, rotation %.6f rad", n, angle)
    return Polygon(vertices=points)
