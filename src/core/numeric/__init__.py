"""
Core numeric reductions

Типобезопасные редукции (sum, mean, variance, max, transform_reduce)
над последовательностями и их variadic-формы, с явной проверкой
capabilities типа элементов до начала вычислений.
"""

# Errors
from src.core.numeric.errors import (
    EmptyInput,
    NumericReductionError,
    TypeIneligible,
)

# Capability predicates
from src.core.numeric.capabilities import (
    TEXT_TYPES,
    Capability,
    CapabilityReport,
    NumericDomain,
    describe_capabilities,
    has_capability,
    is_addable,
    is_comparable,
    is_divisible,
    is_numeric_type,
    is_text_type,
    numeric_domain,
    require_capabilities,
    require_capability,
)

# Conversion helpers
from src.core.numeric.conversion import (
    TEXT_CONTAINER_TYPES,
    WORKING_FLOAT,
    common_numeric_type,
    promote_items,
    resolve_element_type,
    squared_deviation_sum,
    truncating_divide,
    widen,
    widened_sum,
    zero_of,
)

# Collection reductions
from src.core.numeric.reductions import (
    max,
    mean,
    sum,
    transform_reduce,
    variance,
)

# Variadic reductions
from src.core.numeric.variadic import (
    max_variadic,
    mean_variadic,
    sum_variadic,
    variance_variadic,
)

__all__ = [
    # Errors
    "NumericReductionError",
    "TypeIneligible",
    "EmptyInput",
    # Capabilities — Constants
    "TEXT_TYPES",
    # Capabilities — Types
    "Capability",
    "CapabilityReport",
    "NumericDomain",
    # Capabilities — Functions
    "describe_capabilities",
    "has_capability",
    "is_addable",
    "is_comparable",
    "is_divisible",
    "is_numeric_type",
    "is_text_type",
    "numeric_domain",
    "require_capabilities",
    "require_capability",
    # Conversion — Constants
    "TEXT_CONTAINER_TYPES",
    "WORKING_FLOAT",
    # Conversion — Functions
    "common_numeric_type",
    "promote_items",
    "resolve_element_type",
    "squared_deviation_sum",
    "truncating_divide",
    "widen",
    "widened_sum",
    "zero_of",
    # Collection reductions
    "sum",
    "mean",
    "variance",
    "max",
    "transform_reduce",
    # Variadic reductions
    "sum_variadic",
    "mean_variadic",
    "variance_variadic",
    "max_variadic",
]
