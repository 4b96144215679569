"""
Interval — замкнутый интервал [lb, ub] над упорядоченным скаляром

Immutable value-тип. Два логических состояния:
- валидный (lb <= ub) — непустое замкнутое множество
- невалидный (lb > ub) — пустое множество (sentinel, не ошибка)

Конструктор не нормализует границы: lb > ub допустим намеренно.
Все алгебраические операции тотальны на невалидных интервалах.

ПОРЯДОК:
Операторы <, <=, >, >= задают позиционный слабый порядок: любые два
пересекающихся интервала "равны" по порядку (compare() == 0), тогда как
== сравнивает границы точно. Сортировка непересекающихся интервалов
корректна; для пересекающихся порядок не транзитивен.

Элементом интервала может быть скаляр или другой Interval (вложенная
композиция). Операнд-Interval той же глубины вложенности трактуется как
интервал-пир, иначе — как элемент.
"""

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from physdes.core.math.generic import displacement, min_dist
from physdes.core.math.numerical_safeguards import SafeguardConfig

T = TypeVar("T")


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class SupportsHull(Protocol):
    """Объект умеет строить минимальную оболочку с другим объектом"""

    def hull_with(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsIntersect(Protocol):
    """Объект умеет строить пересечение с другим объектом"""

    def intersect_with(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsEnlarge(Protocol):
    """Объект умеет расширяться на alpha во всех измерениях"""

    def enlarge_with(self, alpha: Any) -> Any: ...


# =============================================================================
# HELPERS
# =============================================================================


def _lesser(a: Any, b: Any) -> Any:
    """min(a, b) с приоритетом a при равенстве по порядку"""
    return b if b < a else a


def _greater(a: Any, b: Any) -> Any:
    """max(a, b) с приоритетом b при равенстве по порядку"""
    return a if a > b else b


def _depth(obj: Any) -> int:
    """Глубина вложенности Interval (0 для скаляра)"""
    depth = 0
    while isinstance(obj, Interval):
        obj = obj.lb
        depth += 1
    return depth


# =============================================================================
# INTERVAL
# =============================================================================


@dataclass(frozen=True)
class Interval(Generic[T]):
    """
    Замкнутый интервал [lb, ub].

    Примеры:
        >>> a = Interval(3, 5)
        >>> str(a)
        '[3, 5]'
        >>> a.is_invalid()
        False
        >>> Interval(5, 3).is_invalid()
        True
    """

    lb: T
    ub: T

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    def is_invalid(self) -> bool:
        """True если lb > ub (пустое множество)"""
        return self.lb > self.ub

    def length(self) -> T:
        """
        Длина интервала ub - lb.

        На невалидном интервале результат отрицательный и не имеет смысла —
        проверка валидности остаётся за вызывающим кодом.
        """
        return self.ub - self.lb

    def __str__(self) -> str:
        return f"[{self.lb}, {self.ub}]"

    def _is_peer(self, other: Any) -> bool:
        return isinstance(other, Interval) and _depth(other) == _depth(self)

    def _bounds(self, other: Any) -> tuple[Any, Any]:
        if self._is_peer(other):
            return other.lb, other.ub
        return other, other

    # -------------------------------------------------------------------------
    # Позиционный порядок
    # -------------------------------------------------------------------------

    def compare(self, other: Any) -> int:
        """
        Позиционное сравнение с интервалом или скаляром.

        Returns:
            -1 если self целиком левее other (self.ub < other.lb)
            +1 если self целиком правее other (other.ub < self.lb)
             0 если пересекаются (включая касание границ)
        """
        other_lb, other_ub = self._bounds(other)
        if self.ub < other_lb:
            return -1
        if other_ub < self.lb:
            return 1
        return 0

    def __lt__(self, other: Any) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Interval":
        if self._is_peer(other):
            return Interval(self.lb + other.lb, self.ub + other.ub)
        return Interval(self.lb + other, self.ub + other)

    def __radd__(self, other: Any) -> "Interval":
        return Interval(other + self.lb, other + self.ub)

    def __sub__(self, other: Any) -> "Interval":
        if self._is_peer(other):
            return Interval(self.lb - other.lb, self.ub - other.ub)
        return Interval(self.lb - other, self.ub - other)

    def __rsub__(self, other: Any) -> "Interval":
        # Вычитание по границам, как и для пары интервалов
        return Interval(other - self.lb, other - self.ub)

    def __mul__(self, alpha: Any) -> "Interval":
        return Interval(self.lb * alpha, self.ub * alpha)

    def __rmul__(self, alpha: Any) -> "Interval":
        return Interval(alpha * self.lb, alpha * self.ub)

    def __neg__(self) -> "Interval":
        return Interval(-self.ub, -self.lb)

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def overlaps(self, other: Any) -> bool:
        """
        Пересечение замкнутых множеств (касание границ считается пересечением).

        Examples:
            >>> Interval(3, 5).overlaps(Interval(5, 7))
            True
            >>> Interval(3, 5).overlaps(6)
            False
        """
        if self._is_peer(other):
            return self.ub >= other.lb and other.ub >= self.lb
        return self.ub >= other and other >= self.lb

    def contains(self, other: Any) -> bool:
        """
        Проверка, что other (интервал или элемент) лежит внутри self.

        Examples:
            >>> Interval(4, 8).contains(Interval(5, 6))
            True
            >>> Interval(3, 4).contains(5)
            False
        """
        if self._is_peer(other):
            return self.lb <= other.lb and other.ub <= self.ub
        return self.lb <= other and other <= self.ub

    def min_dist_with(self, other: Any, config: SafeguardConfig | None = None) -> int:
        """
        Беззнаковый зазор между self и other.

        0 если пересекаются, иначе расстояние между ближайшими границами,
        проверенное по ширине config.

        Examples:
            >>> Interval(3, 5).min_dist_with(Interval(7, 8))
            2
            >>> Interval(3, 5).min_dist_with(6)
            1
        """
        if self._is_peer(other):
            if self.ub < other.lb:
                return min_dist(other.lb, self.ub, config)
            if other.ub < self.lb:
                return min_dist(self.lb, other.ub, config)
            return 0
        if self.ub < other:
            return min_dist(other, self.ub, config)
        if other < self.lb:
            return min_dist(self.lb, other, config)
        return 0

    def displace(self, other: Any) -> "Interval":
        """
        Смещение self относительно other, каждая граница независимо.

        Examples:
            >>> Interval(3, 5).displace(Interval(7, 8))
            Interval(lb=-4, ub=-3)
        """
        other_lb, other_ub = self._bounds(other)
        return Interval(displacement(self.lb, other_lb), displacement(self.ub, other_ub))

    def hull_with(self, other: Any) -> "Interval":
        """Минимальный интервал, покрывающий self и other"""
        other_lb, other_ub = self._bounds(other)
        return Interval(_lesser(self.lb, other_lb), _greater(self.ub, other_ub))

    def intersect_with(self, other: Any) -> "Interval":
        """
        Пересечение self и other.

        Для непересекающихся операндов возвращается невалидный интервал
        (lb > ub) — проверять через is_invalid().
        """
        other_lb, other_ub = self._bounds(other)
        return Interval(_greater(self.lb, other_lb), _lesser(self.ub, other_ub))

    def enlarge_with(self, alpha: Any) -> "Interval":
        """Расширение на alpha в обе стороны: [lb - alpha, ub + alpha]"""
        return Interval(self.lb - alpha, self.ub + alpha)


# =============================================================================
# СКАЛЯРНЫЕ ОПЕРАЦИИ С РЕЗУЛЬТАТОМ-ИНТЕРВАЛОМ
# =============================================================================


def hull(lhs: Any, rhs: Any) -> Any:
    """
    Минимальная оболочка двух объектов.

    Examples:
        >>> hull(3, 5)
        Interval(lb=3, ub=5)
        >>> hull(5, 3)
        Interval(lb=3, ub=5)
    """
    if isinstance(lhs, SupportsHull):
        return lhs.hull_with(rhs)
    if isinstance(rhs, SupportsHull):
        return rhs.hull_with(lhs)
    if lhs < rhs:
        return Interval(lhs, rhs)
    return Interval(rhs, lhs)


def intersection(lhs: Any, rhs: Any) -> Any:
    """
    Пересечение двух объектов.

    Для двух различных скаляров результат — невалидный интервал.

    Examples:
        >>> intersection(4, 4)
        Interval(lb=4, ub=4)
        >>> intersection(4, 6).is_invalid()
        True
    """
    if isinstance(lhs, SupportsIntersect):
        return lhs.intersect_with(rhs)
    if isinstance(rhs, SupportsIntersect):
        return rhs.intersect_with(lhs)
    return Interval(_greater(lhs, rhs), _lesser(lhs, rhs))


def enlarge(obj: Any, alpha: Any) -> Any:
    """
    Расширение объекта на alpha (сумма Минковского с шаром радиуса alpha).

    Examples:
        >>> enlarge(4, 6)
        Interval(lb=-2, ub=10)
    """
    if isinstance(obj, SupportsEnlarge):
        return obj.enlarge_with(alpha)
    return Interval(obj - alpha, obj + alpha)
