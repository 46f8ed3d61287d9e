"""
Numeric Reduction Errors

Два типа ошибок библиотеки редукций:
- TypeIneligible — тип элемента/аргумента не обладает capability,
  которую требует операция (нет сложения, нет деления на count,
  не число, текст или bool)
- EmptyInput — mean/variance/max вызваны на пустой последовательности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка выбрасывается до начала вычислений (нет частичного результата)
2. Пустой вход никогда не превращается в 0, NaN или IndexError
"""

from typing import Optional


class NumericReductionError(Exception):
    """Базовый класс ошибок библиотеки редукций."""
    pass


class TypeIneligible(NumericReductionError, TypeError):
    """
    Тип не удовлетворяет capability, которую требует операция.

    Наследуется от TypeError, чтобы вызывающий код, ловящий TypeError,
    продолжал работать.

    Attributes:
        capability: Нарушенная capability (Capability enum)
        element_type: Отвергнутый тип (None, если тип не определён)
        operation: Имя операции (например, 'mean')
    """

    def __init__(self, capability, element_type: Optional[type], operation: str, detail: str = ""):
        self.capability = capability
        self.element_type = element_type
        self.operation = operation

        type_name = element_type.__name__ if element_type is not None else "<unknown>"
        message = (
            f"{operation}: element type '{type_name}' is not "
            f"{getattr(capability, 'value', capability)}"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EmptyInput(NumericReductionError, ValueError):
    """
    Операция не определена на пустой последовательности.

    mean/variance: деление на нулевой count.
    max: максимум пустого множества не существует.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: input sequence must not be empty")
