"""
Collection Reductions — sum, mean, variance, max, transform_reduce

Редукции над упорядоченной конечной последовательностью элементов
одного типа T. Тип T определяется один раз за вызов
(resolve_element_type), capability проверяется до вычислений.

СЕМАНТИКА ПО ДОМЕНАМ:
    mean, INTEGRAL:  sum(seq) / count в арифметике T (усечение к нулю)
                     mean([1, 2, 3, 4]) == 2
    mean, FLOATING:  Σ float(x) / count, независимо от ширины T
    variance:        всегда float; для INTEGRAL среднее НЕ усекается
                     (population variance, деление на count)

ПУСТОЙ ВХОД:
    sum, transform_reduce  → нулевой элемент (не ошибка)
    mean, variance, max    → EmptyInput

Имена sum и max намеренно совпадают со встроенными функциями;
внутри модуля встроенные sum/max не используются.
"""

import logging
from typing import Any, Callable, Iterable

from src.core.numeric.capabilities import (
    Capability,
    NumericDomain,
    numeric_domain,
    require_capabilities,
    require_capability,
)
from src.core.numeric.conversion import (
    promote_items,
    resolve_element_type,
    squared_deviation_sum,
    truncating_divide,
    widen,
    widened_sum,
    zero_of,
)
from src.core.numeric.errors import EmptyInput

logger = logging.getLogger(__name__)


def _typed_sum(items: Iterable[Any], element_type: type, operation: str) -> Any:
    # Смешанные элементы сначала приводятся к общему типу T
    result = zero_of(element_type, operation)
    for item in promote_items(items, element_type):
        result += item
    return result


# =============================================================================
# SUM
# =============================================================================


def sum(seq: Iterable[Any]) -> Any:
    """
    Аддитивная свёртка элементов, начиная с нуля типа T.

    Args:
        seq: Последовательность элементов типа T (Addable)

    Returns:
        Сумма в типе T; для пустой последовательности — ноль T
        (0, если тип элементов определить нельзя)

    Raises:
        TypeIneligible: T не Addable (текст, bool, не число)

    Examples:
        >>> sum([1, 2, 3, 4])
        10
        >>> sum([1.5, 2.0, 0.5])
        4.0
        >>> sum([])
        0
    """
    items, element_type = resolve_element_type(seq, "sum", Capability.ADDABLE)

    if element_type is None:
        return 0

    require_capability(element_type, Capability.ADDABLE, "sum")
    return _typed_sum(items, element_type, "sum")


# =============================================================================
# MEAN
# =============================================================================


def mean(seq: Iterable[Any]) -> Any:
    """
    Арифметическое среднее.

    INTEGRAL: sum / count в арифметике T с усечением к нулю.
    FLOATING: сумма элементов, расширенных до float, делённая на count.

    Args:
        seq: Последовательность элементов типа T (Divisible)

    Returns:
        T для целочисленных элементов, float для остальных

    Raises:
        TypeIneligible: T не Divisible
        EmptyInput: Последовательность пуста

    Examples:
        >>> mean([1, 2, 3, 4])
        2
        >>> mean([1.0, 2.0, 3.0, 4.0])
        2.5
    """
    items, element_type = resolve_element_type(seq, "mean", Capability.DIVISIBLE)

    if element_type is not None:
        require_capability(element_type, Capability.DIVISIBLE, "mean")

    count = len(items)
    if count == 0:
        raise EmptyInput("mean")

    domain = numeric_domain(element_type)
    logger.debug("mean over %d elements, domain=%s", count, domain.value)

    if domain is NumericDomain.INTEGRAL:
        return truncating_divide(_typed_sum(items, element_type, "mean"), count)

    return widened_sum(items) / count


# =============================================================================
# VARIANCE
# =============================================================================


def variance(seq: Iterable[Any]) -> float:
    """
    Population variance: Σ (x - μ)² / count.

    Среднее μ всегда вещественное. Для INTEGRAL оно считается из
    целочисленной суммы без усечения, поэтому variance([1, 2, 3, 4])
    равна 1.25, хотя mean([1, 2, 3, 4]) == 2.

    Raises:
        TypeIneligible: T не Addable или не Divisible
        EmptyInput: Последовательность пуста
    """
    items, element_type = resolve_element_type(seq, "variance", Capability.ADDABLE)

    if element_type is not None:
        require_capabilities(
            element_type, (Capability.ADDABLE, Capability.DIVISIBLE), "variance"
        )

    count = len(items)
    if count == 0:
        raise EmptyInput("variance")

    domain = numeric_domain(element_type)
    logger.debug("variance over %d elements, domain=%s", count, domain.value)

    if domain is NumericDomain.INTEGRAL:
        mu = widen(_typed_sum(items, element_type, "variance")) / count
    else:
        mu = widened_sum(items) / count

    return squared_deviation_sum(items, mu) / count


# =============================================================================
# MAX
# =============================================================================


def max(seq: Iterable[Any]) -> Any:
    """
    Наибольший элемент по оператору >.

    Кандидат — первый элемент; замена только при строгом >, поэтому из
    равных максимумов возвращается первый встреченный. Возвращается сам
    элемент входа, без преобразования типа.

    Raises:
        TypeIneligible: T не Comparable (текст, bool, complex)
        EmptyInput: Последовательность пуста

    Examples:
        >>> max([3, 9, 2, 7])
        9
        >>> max([1.2, 4.8, 3.1])
        4.8
    """
    items, element_type = resolve_element_type(seq, "max", Capability.COMPARABLE)

    if element_type is not None:
        require_capability(element_type, Capability.COMPARABLE, "max")

    if len(items) == 0:
        raise EmptyInput("max")

    result = items[0]
    for item in items:
        if item > result:
            result = item

    return result


# =============================================================================
# TRANSFORM-REDUCE
# =============================================================================


def transform_reduce(seq: Iterable[Any], func: Callable[[Any], Any]) -> Any:
    """
    Обобщённый map + sum: Σ func(x).

    Тип результата R — тип первого значения func; аккумулятор стартует
    с нуля R. Каждое значение func должно быть Addable.

    Args:
        seq: Последовательность числовых элементов
        func: Отображение T → R

    Returns:
        Сумма отображённых значений; 0 для пустой последовательности

    Raises:
        TypeIneligible: Элементы не числа, либо func вернула не число

    Examples:
        >>> transform_reduce([1, 2, 3], lambda x: x * x)
        14
        >>> transform_reduce([1, 2, 3], lambda x: x + 10)
        36
    """
    items, element_type = resolve_element_type(
        seq, "transform_reduce", Capability.ADDABLE
    )

    if element_type is None:
        return 0

    require_capability(element_type, Capability.ADDABLE, "transform_reduce")

    result = None
    for item in items:
        value = func(item)
        require_capability(
            type(value), Capability.ADDABLE, "transform_reduce", "mapped result"
        )
        if result is None:
            result = zero_of(type(value), "transform_reduce")
        result += value

    # R неизвестен без хотя бы одного значения func
    return 0 if result is None else result
