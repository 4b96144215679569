"""
Generic — алгебра геометрических примитивов на уровне скаляров

Модуль определяет capability-протоколы (overlap, contain, min_dist,
displace) и функции-диспетчеры, которые:
- для двух скаляров выполняют скалярную операцию
- для составного левого операнда делегируют его методу
- для скаляра слева и составного объекта справа применяют
  симметричное правило (overlap, min_dist) или политику (contain)

Благодаря этому Interval, Point и их вложенные композиции используют одни и
те же функции для своих элементов, не зная конкретного типа элемента.

Hull / intersection / enlarge для скаляров возвращают Interval и поэтому
определены в physdes.core.domain.interval.
"""

from typing import Any, Protocol, runtime_checkable

from physdes.core.math.numerical_safeguards import SafeguardConfig, abs_diff


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class SupportsOverlap(Protocol):
    """Объект умеет проверять пересечение с другим объектом"""

    def overlaps(self, other: Any) -> bool: ...


@runtime_checkable
class SupportsContain(Protocol):
    """Объект умеет проверять, содержит ли он другой объект"""

    def contains(self, other: Any) -> bool: ...


@runtime_checkable
class SupportsMinDist(Protocol):
    """Объект умеет вычислять минимальное беззнаковое расстояние"""

    def min_dist_with(self, other: Any, config: SafeguardConfig | None = None) -> int: ...


@runtime_checkable
class SupportsDisplace(Protocol):
    """Объект умеет вычислять направленное смещение относительно другого"""

    def displace(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsValidity(Protocol):
    """Объект может находиться в невалидном (пустом) состоянии"""

    def is_invalid(self) -> bool: ...


# =============================================================================
# ДИСПЕТЧЕРЫ
# =============================================================================


def overlap(lhs: Any, rhs: Any) -> bool:
    """
    Проверка пересечения двух объектов (симметричная).

    Args:
        lhs: Скаляр или составной объект
        rhs: Скаляр или составной объект

    Returns:
        Для скаляров — равенство; иначе результат overlaps() составного
        операнда

    Examples:
        >>> overlap(42, 42)
        True
        >>> overlap(42, 24)
        False
    """
    if isinstance(lhs, SupportsOverlap):
        return lhs.overlaps(rhs)
    if isinstance(rhs, SupportsOverlap):
        return rhs.overlaps(lhs)
    return lhs == rhs


def contain(lhs: Any, rhs: Any) -> bool:
    """
    Проверка, содержит ли lhs объект rhs (асимметричная).

    Скаляр никогда не содержит составной объект: вырожденная точка не может
    содержать потенциально невырожденный диапазон.

    Examples:
        >>> contain(42, 42)
        True
        >>> contain(42, 24)
        False
    """
    if isinstance(lhs, SupportsContain):
        return lhs.contains(rhs)
    if isinstance(rhs, SupportsContain):
        return False
    return lhs == rhs


def min_dist(lhs: Any, rhs: Any, config: SafeguardConfig | None = None) -> int:
    """
    Минимальное беззнаковое расстояние между двумя объектами.

    Для скаляров — |lhs - rhs| с проверкой переполнения. Для составных
    операндов config передаётся в min_dist_with() и далее по осям.

    Examples:
        >>> min_dist(10, 5)
        5
        >>> min_dist(5, 10)
        5
    """
    if isinstance(lhs, SupportsMinDist):
        return lhs.min_dist_with(rhs, config)
    if isinstance(rhs, SupportsMinDist):
        return rhs.min_dist_with(lhs, config)
    return abs_diff(lhs, rhs, config)


def displacement(lhs: Any, rhs: Any) -> Any:
    """
    Направленное смещение lhs относительно rhs (lhs - rhs).

    Для скаляра слева и Interval справа вычитание выполняется по границам
    (Interval.__rsub__).

    Examples:
        >>> displacement(10, 5)
        5
        >>> displacement(5, 10)
        -5
    """
    if isinstance(lhs, SupportsDisplace):
        return lhs.displace(rhs)
    return lhs - rhs


def is_invalid(obj: Any) -> bool:
    """
    Проверка, представляет ли объект пустое множество.

    Скаляр всегда валиден.
    """
    if isinstance(obj, SupportsValidity):
        return obj.is_invalid()
    return False
