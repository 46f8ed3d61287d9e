"""
Capability Predicates — допустимость типов для операций редукции

Модуль определяет, какие типы элементов допустимы для каких операций:
- ADDABLE: сложение определено и замкнуто на типе (sum, variance,
  результат transform_reduce)
- DIVISIBLE: деление на беззнаковый count даёт значение, приводимое
  обратно к типу или к рабочему float (mean, variance)
- COMPARABLE: тип вещественный числовой (numbers.Real), НЕ текст и
  НЕ bool (max и все variadic-формы)

Числовой домен (numeric tower):
- INTEGRAL: numbers.Integral (int, numpy integer scalars)
- FLOATING: остальные numbers.Real (float, Fraction, numpy floating)
  и decimal.Decimal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Текстовые типы (str, bytes, bytearray, numpy str_/bytes_) никогда
   не считаются числами, даже если побайтно это коды символов
2. bool — значение истинности, а не число
3. Проверка выполняется один раз на тип, до любых вычислений
4. Нарушение → TypeIneligible с именем нарушенной capability
"""

import logging
import numbers
from decimal import Decimal
from enum import Enum
from typing import Final, Iterable, Optional

from pydantic import BaseModel, Field

from src.core.numeric.errors import TypeIneligible

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Текстовые типы: элементы являются символами или сырыми кодами символов
TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


# =============================================================================
# ENUMS
# =============================================================================


class Capability(str, Enum):
    """Именованное требование к типу элемента."""

    ADDABLE = "addable"
    DIVISIBLE = "divisible"
    COMPARABLE = "comparable"


class NumericDomain(str, Enum):
    """Числовой домен типа: определяет ветку mean/variance."""

    INTEGRAL = "INTEGRAL"
    FLOATING = "FLOATING"


# =============================================================================
# PREDICATES
# =============================================================================


def is_text_type(tp: type) -> bool:
    """True для str/bytes/bytearray и их подклассов (включая numpy str_/bytes_)."""
    return isinstance(tp, type) and issubclass(tp, TEXT_TYPES)


def is_numeric_type(tp: type) -> bool:
    """
    Проверка, является ли тип числовым.

    Числовой = зарегистрирован в numbers.Number, не bool, не текст.
    numpy scalar types регистрируются в numbers сами; numpy.bool_ —
    нет, поэтому отвергается без специальной обработки.
    """
    if not isinstance(tp, type):
        return False
    if issubclass(tp, bool) or is_text_type(tp):
        return False
    return issubclass(tp, numbers.Number)


def numeric_domain(tp: type) -> Optional[NumericDomain]:
    """
    Классификация типа по числовому домену.

    Returns:
        NumericDomain.INTEGRAL, NumericDomain.FLOATING или None
        (не число, либо число без вещественного порядка, например complex)

    Examples:
        >>> numeric_domain(int)
        <NumericDomain.INTEGRAL: 'INTEGRAL'>
        >>> numeric_domain(float)
        <NumericDomain.FLOATING: 'FLOATING'>
        >>> numeric_domain(complex) is None
        True
    """
    if not is_numeric_type(tp):
        return None
    if issubclass(tp, numbers.Integral):
        return NumericDomain.INTEGRAL
    if issubclass(tp, (numbers.Real, Decimal)):
        return NumericDomain.FLOATING
    return None


def is_addable(tp: type) -> bool:
    """Сложение определено на типе и даёт значение того же типа."""
    return is_numeric_type(tp)


def is_divisible(tp: type) -> bool:
    """Деление на count определено и результат приводим к типу или к float."""
    return numeric_domain(tp) is not None


def is_comparable(tp: type) -> bool:
    """Тип вещественный числовой: не текст, не bool, не complex/Decimal."""
    return is_numeric_type(tp) and issubclass(tp, numbers.Real)


_PREDICATES: Final = {
    Capability.ADDABLE: is_addable,
    Capability.DIVISIBLE: is_divisible,
    Capability.COMPARABLE: is_comparable,
}


def has_capability(tp: type, capability: Capability) -> bool:
    return _PREDICATES[capability](tp)


# =============================================================================
# GUARDS
# =============================================================================


def require_capability(
    tp: Optional[type],
    capability: Capability,
    operation: str,
    detail: str = "",
) -> None:
    """
    Проверка capability с выбросом TypeIneligible при нарушении.

    Args:
        tp: Проверяемый тип (None — тип не удалось определить)
        capability: Требуемая capability
        operation: Имя операции (для сообщения об ошибке)
        detail: Дополнительное пояснение (optional)

    Raises:
        TypeIneligible: Если тип не обладает capability
    """
    if tp is not None and has_capability(tp, capability):
        return

    type_name = tp.__name__ if tp is not None else "<unknown>"
    logger.debug(
        "Rejected type %s for %s: not %s", type_name, operation, capability.value
    )
    raise TypeIneligible(capability, tp, operation, detail)


def require_capabilities(
    tp: Optional[type],
    capabilities: Iterable[Capability],
    operation: str,
) -> None:
    """Проверка нескольких capabilities по порядку; первая нарушенная → ошибка."""
    for capability in capabilities:
        require_capability(tp, capability, operation)


# =============================================================================
# INTROSPECTION
# =============================================================================


class CapabilityReport(BaseModel):
    """
    Отчёт о capabilities типа.

    Immutable модель (frozen=True). Позволяет проверить допустимость
    типа без выброса TypeIneligible.
    """

    type_name: str = Field(..., description="Имя проверенного типа")
    domain: Optional[NumericDomain] = Field(
        None, description="Числовой домен (None для нечисловых типов)"
    )
    addable: bool = Field(..., description="Допустим для sum")
    divisible: bool = Field(..., description="Допустим для mean")
    comparable: bool = Field(..., description="Допустим для max и variadic-форм")

    model_config = {"frozen": True}


def describe_capabilities(tp: type) -> CapabilityReport:
    """
    Сводка capabilities для типа.

    Examples:
        >>> describe_capabilities(int).comparable
        True
        >>> describe_capabilities(str).addable
        False
    """
    return CapabilityReport(
        type_name=getattr(tp, "__name__", repr(tp)),
        domain=numeric_domain(tp),
        addable=is_addable(tp),
        divisible=is_divisible(tp),
        comparable=is_comparable(tp),
    )
