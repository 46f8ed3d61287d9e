"""
Numeric-Domain Conversion Helpers

Общие примитивы для редукций:
- Расширение значения до рабочего float (widen)
- Нулевой (identity) элемент типа для сложения
- Общий числовой тип для смешанных аргументов (numeric tower)
- Целочисленное деление с усечением к нулю
- Определение типа элементов последовательности

ПРАВИЛО ОБЩЕГО ТИПА (common_numeric_type):
    один тип            → этот тип
    все Integral        → int
    все Rational        → Fraction
    все Real            → float
    все Complex         → complex
    иначе               → None (нет общего домена)
"""

import logging
import numbers
from collections.abc import Sequence
from fractions import Fraction
from typing import Any, Final, Iterable, Optional

from src.core.numeric.capabilities import Capability, is_numeric_type
from src.core.numeric.errors import TypeIneligible

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Рабочая точность для floating-ветки (double)
WORKING_FLOAT: Final[type] = float

# Контейнеры, итерация по которым даёт символы или коды символов
TEXT_CONTAINER_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def widen(value: Any) -> float:
    """Расширение значения до рабочего float."""
    return WORKING_FLOAT(value)


def widened_sum(values: Iterable[Any]) -> float:
    """Сумма значений, каждое из которых расширено до рабочего float."""
    total = 0.0
    for value in values:
        total += widen(value)
    return total


def squared_deviation_sum(values: Iterable[Any], center: float) -> float:
    """Сумма квадратов отклонений от center, накопленная во float."""
    acc = 0.0
    for value in values:
        d = widen(value) - center
        acc += d * d
    return acc


def zero_of(tp: type, operation: str = "sum") -> Any:
    """
    Нулевой элемент сложения для типа.

    Args:
        tp: Тип аккумулятора
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        tp(0)

    Raises:
        TypeIneligible: Если тип не умеет построить свой ноль

    Examples:
        >>> zero_of(int)
        0
        >>> zero_of(float)
        0.0
    """
    try:
        return tp(0)
    except (TypeError, ValueError) as exc:
        raise TypeIneligible(
            Capability.ADDABLE, tp, operation, "type has no zero value"
        ) from exc


def common_numeric_type(types: Iterable[type]) -> Optional[type]:
    """
    Общий числовой тип для набора типов.

    Args:
        types: Типы элементов или аргументов

    Returns:
        Общий тип или None, если общего числового домена нет

    Examples:
        >>> common_numeric_type([int, int])
        <class 'int'>
        >>> common_numeric_type([int, float])
        <class 'float'>
        >>> common_numeric_type([int, Fraction])
        <class 'fractions.Fraction'>
    """
    distinct = set(types)

    if not distinct:
        return None

    if len(distinct) == 1:
        return next(iter(distinct))

    if not all(is_numeric_type(tp) for tp in distinct):
        return None

    if all(issubclass(tp, numbers.Integral) for tp in distinct):
        return int
    if all(issubclass(tp, numbers.Rational) for tp in distinct):
        return Fraction
    if all(issubclass(tp, numbers.Real) for tp in distinct):
        return float
    if all(issubclass(tp, numbers.Complex) for tp in distinct):
        return complex

    return None


def truncating_divide(total: Any, count: int) -> Any:
    """
    Целочисленное деление с усечением к нулю, в арифметике типа total.

    Floor division Python округляет к -inf; здесь частное усекается
    к нулю: truncating_divide(-3, 2) == -1.

    Деление выполняется в int произвольной точности; к типу total
    приводится только частное (|частное| <= |total|, поэтому оно
    помещается в fixed-width тип, например numpy int8).

    Examples:
        >>> truncating_divide(10, 4)
        2
        >>> truncating_divide(-10, 4)
        -2
    """
    whole = int(total)
    quotient = abs(whole) // count
    if whole < 0:
        quotient = -quotient
    return type(total)(quotient)


def promote_items(items: Sequence, element_type: type) -> Sequence:
    """
    Приведение элементов к типу element_type.

    Если все элементы уже этого типа, items возвращаются без изменений.

    Examples:
        >>> promote_items([1, 2.5], float)
        (1.0, 2.5)
    """
    if all(type(item) is element_type for item in items):
        return items
    return tuple(element_type(item) for item in items)


# =============================================================================
# ТИП ЭЛЕМЕНТОВ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def resolve_element_type(
    seq: Iterable[Any],
    operation: str,
    capability: Capability,
) -> tuple[Sequence, Optional[type]]:
    """
    Материализация последовательности и определение типа её элементов.

    Порядок:
    1. Текстовый контейнер → TypeIneligible
    2. Есть атрибут dtype (numpy array) → dtype.type
    3. Один тип у всех элементов → этот тип
    4. Смешанные числовые типы → common_numeric_type
    5. Пустая последовательность без dtype → None

    Args:
        seq: Входная последовательность (Sequence, array или iterable)
        operation: Имя операции (для сообщения об ошибке)
        capability: Capability, указываемая при отказе

    Returns:
        (items, element_type): items поддерживает len() и индексацию

    Raises:
        TypeIneligible: Текст или смесь типов без общего домена
    """
    if isinstance(seq, TEXT_CONTAINER_TYPES):
        logger.debug("Rejected text container %s for %s", type(seq).__name__, operation)
        raise TypeIneligible(
            capability, type(seq), operation, "text is not a numeric sequence"
        )

    dtype = getattr(seq, "dtype", None)
    items = seq if isinstance(seq, Sequence) else tuple(seq)

    if dtype is not None:
        return items, dtype.type

    element_type = common_numeric_type(type(item) for item in items)
    if element_type is None and len(items) > 0:
        offending = next(
            (type(item) for item in items if not is_numeric_type(type(item))),
            None,
        )
        logger.debug("Rejected mixed element types for %s", operation)
        raise TypeIneligible(
            capability, offending, operation, "elements share no common numeric type"
        )

    return items, element_type
