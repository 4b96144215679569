"""
Numerical Safeguards — Checked Unsigned Distances

Модуль обеспечивает численную безопасность всех расстояний в библиотеке:
- Lossless конверсия в беззнаковое расстояние фиксированной ширины
- Расширенное (widened) вычитание без переполнения до проверки
- Проверяемое суммирование расстояний (L1-агрегация по осям)
- Конфигурация ширины беззнакового типа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Расстояние всегда целое и неотрицательное
2. Разность границ вычисляется в Python int (без переполнения) и только
   затем проверяется на ширину результата
3. Переполнение — ошибка программиста: DistanceOverflowError, не fallback
4. Все операции детерминированы и воспроизводимы
"""

import logging
import operator
from typing import Final, Iterable

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ БЕЗЗНАКОВЫХ РАССТОЯНИЙ
# =============================================================================

# Ширина беззнакового расстояния по умолчанию (бит)
DISTANCE_BITS_DEFAULT: Final[int] = 32

# Допустимые ширины беззнакового расстояния
DISTANCE_BITS_ALLOWED: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Максимальное расстояние для ширины по умолчанию
UNSIGNED_DIST_MAX: Final[int] = (1 << DISTANCE_BITS_DEFAULT) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DistanceOverflowError(ArithmeticError):
    """
    Расстояние не помещается в беззнаковый тип заданной ширины.

    Возникает только на патологических входах (границы разнесены дальше,
    чем 2**bits - 1). Не является восстанавливаемым состоянием: вызывающий
    код передал координаты вне рабочего диапазона.
    """

    pass


# =============================================================================
# CONFIG
# =============================================================================


class SafeguardConfig(BaseModel):
    """
    Конфигурация проверок беззнаковых расстояний.

    Immutable модель (frozen=True).
    """

    distance_bits: int = Field(
        DISTANCE_BITS_DEFAULT, description="Ширина беззнакового расстояния (бит)"
    )

    model_config = {"frozen": True}

    @field_validator("distance_bits")
    @classmethod
    def validate_distance_bits(cls, v: int) -> int:
        """Проверка, что ширина соответствует стандартному беззнаковому типу"""
        if v not in DISTANCE_BITS_ALLOWED:
            raise ValueError(
                f"distance_bits must be one of {DISTANCE_BITS_ALLOWED}, got {v}"
            )
        return v

    @property
    def max_distance(self) -> int:
        """Максимальное представимое расстояние: 2**bits - 1"""
        return (1 << self.distance_bits) - 1


# Глобальная конфигурация по умолчанию (u32)
DEFAULT_SAFEGUARD_CONFIG: Final[SafeguardConfig] = SafeguardConfig()


# =============================================================================
# КОНВЕРСИЯ В БЕЗЗНАКОВОЕ РАССТОЯНИЕ
# =============================================================================


def is_integral(value: object) -> bool:
    """
    Проверка, допускает ли значение lossless конверсию в int.

    Args:
        value: Проверяемое значение

    Returns:
        True для int и integer-like типов (поддерживают __index__),
        False для float, Fraction, Decimal и прочих
    """
    try:
        operator.index(value)
    except TypeError:
        return False
    return True


def to_unsigned_distance(value: object, config: SafeguardConfig | None = None) -> int:
    """
    Lossless конверсия значения в беззнаковое расстояние.

    Args:
        value: Расстояние (integer-like)
        config: Конфигурация ширины (default: DEFAULT_SAFEGUARD_CONFIG)

    Returns:
        Расстояние как int в диапазоне [0, config.max_distance]

    Raises:
        TypeError: Если значение не integer-like (конверсия с потерями)
        ValueError: Если значение отрицательное
        DistanceOverflowError: Если значение больше config.max_distance

    Examples:
        >>> to_unsigned_distance(7)
        7
        >>> to_unsigned_distance(2**32)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DistanceOverflowError: ...
    """
    cfg = config or DEFAULT_SAFEGUARD_CONFIG

    try:
        dist = operator.index(value)
    except TypeError:
        raise TypeError(
            f"distance must be integral for lossless conversion, got {value!r}"
        ) from None

    if dist < 0:
        raise ValueError(f"distance must be non-negative, got {dist}")

    if dist > cfg.max_distance:
        logger.error(
            "distance %d exceeds u%d range (max %d)",
            dist,
            cfg.distance_bits,
            cfg.max_distance,
        )
        raise DistanceOverflowError(
            f"distance {dist} does not fit u{cfg.distance_bits} "
            f"(max {cfg.max_distance})"
        )

    return dist


def abs_diff(a: object, b: object, config: SafeguardConfig | None = None) -> int:
    """
    Беззнаковая разность |a - b| с расширением и проверкой.

    Операнды приводятся к Python int до вычитания, поэтому промежуточное
    значение не переполняется; переполнение проверяется уже на результате.

    Args:
        a: Первая координата (integer-like)
        b: Вторая координата (integer-like)
        config: Конфигурация ширины (default: DEFAULT_SAFEGUARD_CONFIG)

    Returns:
        |a - b| как беззнаковое расстояние

    Examples:
        >>> abs_diff(10, 5)
        5
        >>> abs_diff(5, 10)
        5
    """
    if not (is_integral(a) and is_integral(b)):
        raise TypeError(
            f"abs_diff requires integral operands, got {a!r} and {b!r}"
        )
    return to_unsigned_distance(abs(operator.index(a) - operator.index(b)), config)


def checked_distance_sum(
    values: Iterable[int], config: SafeguardConfig | None = None
) -> int:
    """
    Проверяемая сумма беззнаковых расстояний.

    Используется для L1-агрегации по осям: каждое слагаемое и итоговая
    сумма должны помещаться в беззнаковый тип.

    Args:
        values: Расстояния по осям
        config: Конфигурация ширины (default: DEFAULT_SAFEGUARD_CONFIG)

    Returns:
        Сумма расстояний

    Examples:
        >>> checked_distance_sum([2, 3])
        5
    """
    total = 0
    for v in values:
        total += to_unsigned_distance(v, config)
    return to_unsigned_distance(total, config)
