"""MergeObj — слияние прямоугольников в повёрнутом на 45° пространстве.

Координаты хранятся уже повёрнутыми: u = i + j, v = i - j относительно
исходного (манхэттенского) пространства. В повёрнутом пространстве
манхэттенский шар радиуса r становится квадратом с полушириной r, поэтому
операции Interval / Point над прямоугольниками реализуют честную L1-геометрию:

- min_dist_with — МАКСИМУМ зазоров по повёрнутым осям (L∞ в (u, v) = L1 в (i, j))
- enlarge_with — сумма Минковского с манхэттенским шаром
- intersect_with — пересечение по осям (может быть пустым)
- merge_with — минимальная область, равноудалённая от двух объектов

Пустой результат — нормальное значение: проверять через is_invalid().
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from physdes.core.domain.interval import enlarge
from physdes.core.domain.point import Point
from physdes.core.domain.vector2 import Vector2
from physdes.core.math.generic import min_dist
from physdes.core.math.numerical_safeguards import SafeguardConfig

logger = logging.getLogger(__name__)

T1 = TypeVar("T1")
T2 = TypeVar("T2")


def _require_merge_obj(other: Any, op: str) -> None:
    if not isinstance(other, MergeObj):
        raise TypeError(f"MergeObj.{op} expects a MergeObj, got {type(other).__name__}")


@dataclass(frozen=True)
class MergeObj(Generic[T1, T2]):
    """Объект слияния в повёрнутых координатах.

    Examples:
        >>> r1 = MergeObj.construct(4, 5)
        >>> r2 = MergeObj.construct(7, 9)
        >>> r1.min_dist_with(r2)
        7
    """

    impl: Point[T1, T2]

    @classmethod
    def new(cls, xcoord: T1, ycoord: T2) -> "MergeObj[T1, T2]":
        """Создание из уже повёрнутых координат (u, v)."""
        return cls(Point(xcoord, ycoord))

    @classmethod
    def construct(cls, xcoord: int, ycoord: int) -> "MergeObj[int, int]":
        """Создание из исходных координат (i, j) с поворотом в (i + j, i - j)."""
        return cls(Point(xcoord + ycoord, xcoord - ycoord))

    @property
    def xcoord(self) -> T1:
        return self.impl.xcoord

    @property
    def ycoord(self) -> T2:
        return self.impl.ycoord

    def __str__(self) -> str:
        return f"/{self.impl.xcoord}, {self.impl.ycoord}/"

    def is_invalid(self) -> bool:
        return self.impl.is_invalid()

    # -------------------------------------------------------------------------
    # Трансляция вектором исходного пространства
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "MergeObj":
        if not isinstance(other, Vector2):
            return NotImplemented
        return MergeObj.new(
            self.impl.xcoord + (other.x + other.y),
            self.impl.ycoord + (other.x - other.y),
        )

    def __sub__(self, other: Any) -> "MergeObj":
        if not isinstance(other, Vector2):
            return NotImplemented
        return MergeObj.new(
            self.impl.xcoord - (other.x + other.y),
            self.impl.ycoord - (other.x - other.y),
        )

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def overlaps(self, other: "MergeObj") -> bool:
        _require_merge_obj(other, "overlaps")
        return self.impl.overlaps(other.impl)

    def min_dist_with(self, other: "MergeObj", config: SafeguardConfig | None = None) -> int:
        """Манхэттенское расстояние: максимум зазоров по повёрнутым осям."""
        _require_merge_obj(other, "min_dist_with")
        return max(
            min_dist(self.impl.xcoord, other.impl.xcoord, config),
            min_dist(self.impl.ycoord, other.impl.ycoord, config),
        )

    def enlarge_with(self, alpha: Any) -> "MergeObj":
        """Расширение на манхэттенский радиус alpha."""
        return MergeObj.new(
            enlarge(self.impl.xcoord, alpha),
            enlarge(self.impl.ycoord, alpha),
        )

    def intersect_with(self, other: "MergeObj") -> "MergeObj":
        """Пересечение по повёрнутым осям; может быть невалидным."""
        _require_merge_obj(other, "intersect_with")
        return MergeObj(self.impl.intersect_with(other.impl))

    def merge_with(self, other: "MergeObj", config: SafeguardConfig | None = None) -> "MergeObj":
        """Слияние двух объектов.

        Алгоритм:
        1. alpha = min_dist_with(other, config), с проверкой ширины
        2. half = alpha // 2 (остаток уходит второму операнду)
        3. self расширяется на half, other — на alpha - half
        4. результат — пересечение расширенных объектов

        При alpha == 0 (объекты уже пересекаются) — обычное пересечение.

        Examples:
            >>> from physdes.core.domain.interval import Interval
            >>> s1 = MergeObj.new(800, -400)
            >>> s2 = MergeObj.new(1400, -400)
            >>> s1.merge_with(s2) == MergeObj.new(Interval(1100, 1100), Interval(-700, -100))
            True
        """
        alpha = self.min_dist_with(other, config)
        half = alpha // 2
        logger.debug("merge %s with %s: alpha=%d, split=(%d, %d)", self, other, alpha, half, alpha - half)
        trr1 = self.enlarge_with(half)
        trr2 = other.enlarge_with(alpha - half)
        return trr1.intersect_with(trr2)
