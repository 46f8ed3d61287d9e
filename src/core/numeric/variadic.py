"""
Variadic Reductions — редукции над фиксированным списком аргументов

Те же алгоритмы, что и в reductions, но вход — аргументы вызова:
    op(first, *rest)

Арность N ≥ 1 гарантируется сигнатурой: вызов без аргументов —
TypeError интерпретатора на границе вызова.

Каждый аргумент должен быть Comparable (вещественное число, не текст,
не bool). Проверка проходит по всем аргументам до вычислений.

ОТЛИЧИЯ ОТ КОЛЛЕКЦИОННЫХ ФОРМ:
- mean_variadic всегда во float (нет целочисленной ветки с усечением):
  mean_variadic(1, 2, 3, 4) == 2.5, тогда как mean([1, 2, 3, 4]) == 2
- sum_variadic и max_variadic возвращают общий числовой тип аргументов
"""

import logging
from typing import Any

from src.core.numeric.capabilities import Capability, require_capability
from src.core.numeric.conversion import (
    common_numeric_type,
    squared_deviation_sum,
    widened_sum,
)

logger = logging.getLogger(__name__)


def _checked(operation: str, args: tuple) -> tuple:
    for arg in args:
        require_capability(type(arg), Capability.COMPARABLE, operation)
    return args


def _promoted(operation: str, args: tuple) -> tuple:
    """
    Приведение аргументов к общему числовому типу.

    Если все аргументы одного типа, они возвращаются без изменений.
    """
    _checked(operation, args)

    common = common_numeric_type(type(arg) for arg in args)
    if all(type(arg) is common for arg in args):
        return args

    logger.debug("%s: promoting %d arguments to %s", operation, len(args), common.__name__)
    return tuple(common(arg) for arg in args)


# =============================================================================
# SUM / MEAN / VARIANCE
# =============================================================================


def sum_variadic(first: Any, *rest: Any) -> Any:
    """
    Сумма аргументов в их общем числовом типе.

    Examples:
        >>> sum_variadic(1, 2, 33, 4)
        40
        >>> sum_variadic(0.5, 1, 2.5)
        4.0
    """
    args = _promoted("sum_variadic", (first,) + rest)

    total = args[0]
    for arg in args[1:]:
        total = total + arg

    return total


def mean_variadic(first: Any, *rest: Any) -> float:
    """
    Среднее аргументов, всегда во float.

    Examples:
        >>> mean_variadic(1, 2, 3, 4)
        2.5
    """
    args = _checked("mean_variadic", (first,) + rest)
    return widened_sum(args) / len(args)


def variance_variadic(first: Any, *rest: Any) -> float:
    """
    Population variance аргументов, расширенных до float.

    Examples:
        >>> variance_variadic(1, 2, 3, 4)
        1.25
    """
    args = _checked("variance_variadic", (first,) + rest)
    n = len(args)

    mu = widened_sum(args) / n
    return squared_deviation_sum(args, mu) / n


# =============================================================================
# MAX
# =============================================================================


def max_variadic(first: Any, *rest: Any) -> Any:
    """
    Максимум аргументов в их общем числовом типе.

    Скользящий максимум слева направо от первого аргумента; при равенстве
    остаётся ранее встреченное значение.

    Examples:
        >>> max_variadic(1, 2, 33, 4)
        33
        >>> max_variadic(1, 2.7, 3, 4)
        4.0
    """
    args = _promoted("max_variadic", (first,) + rest)

    max_val = args[0]
    for arg in args[1:]:
        if arg > max_val:
            max_val = arg

    return max_val
