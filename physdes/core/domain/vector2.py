"""
Vector2 — вектор смещения (x, y)

Алгебраически — разность двух Point. Используется для трансляции:
Point + Vector2 -> Point. Типы компонент независимы.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T1 = TypeVar("T1")
T2 = TypeVar("T2")


@dataclass(frozen=True)
class Vector2(Generic[T1, T2]):
    """
    Вектор смещения.

    Examples:
        >>> Vector2(3, 4) + Vector2(1, 2)
        Vector2(x=4, y=6)
        >>> str(Vector2(3, 4))
        '(3, 4)'
    """

    x: T1
    y: T2

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, alpha: Any) -> "Vector2":
        return self.scale(alpha)

    def __rmul__(self, alpha: Any) -> "Vector2":
        return Vector2(alpha * self.x, alpha * self.y)

    def __truediv__(self, alpha: Any) -> "Vector2":
        return Vector2(self.x / alpha, self.y / alpha)

    def __floordiv__(self, alpha: Any) -> "Vector2":
        return Vector2(self.x // alpha, self.y // alpha)

    def __mod__(self, alpha: Any) -> "Vector2":
        return Vector2(self.x % alpha, self.y % alpha)

    @classmethod
    def zero(cls) -> "Vector2[int, int]":
        """Нулевой вектор (0, 0)"""
        return cls(0, 0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    # -------------------------------------------------------------------------
    # Метрики
    # -------------------------------------------------------------------------

    def dot(self, other: "Vector2") -> Any:
        """Скалярное произведение"""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> Any:
        """Псевдоскалярное (2D cross) произведение: x1*y2 - y1*x2"""
        return self.x * other.y - self.y * other.x

    def norm_sqr(self) -> Any:
        """Квадрат евклидовой нормы"""
        return self.dot(self)

    def scale(self, alpha: Any) -> "Vector2":
        """Умножение обеих компонент на alpha"""
        return Vector2(self.x * alpha, self.y * alpha)

    def unscale(self, alpha: Any) -> "Vector2":
        """
        Деление обеих компонент на alpha.

        Для целых компонент используется floor division (//), результат
        остаётся целочисленным.
        """
        if isinstance(self.x, int) and isinstance(self.y, int) and isinstance(alpha, int):
            return Vector2(self.x // alpha, self.y // alpha)
        return Vector2(self.x / alpha, self.y / alpha)

    def l1_norm(self) -> Any:
        """Манхэттенская норма |x| + |y|"""
        return abs(self.x) + abs(self.y)

    def norm_inf(self) -> Any:
        """Чебышёвская норма max(|x|, |y|)"""
        return max(abs(self.x), abs(self.y))
