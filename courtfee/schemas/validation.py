"""Input validation schemas."""

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel


class ValidationCode(str, Enum):
    """Stable machine-readable codes; callers branch on these, never on messages."""

    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    ABOVE_MAXIMUM = "ABOVE_MAXIMUM"
    NON_POSITIVE_VALUE = "NON_POSITIVE_VALUE"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    BELOW_MINIMUM_WAGE = "BELOW_MINIMUM_WAGE"
    HIGH_SALARY_WARNING = "HIGH_SALARY_WARNING"
    HIGH_CLAIM_WARNING = "HIGH_CLAIM_WARNING"


class ValidationResult(BaseModel):
    """Outcome of validating one input. Warnings never make a result invalid."""

    model_config = {"frozen": True}

    is_valid: bool
    code: ValidationCode | None = None
    error_message: str | None = None
    warning_message: str | None = None


class ValidationRule(BaseModel):
    """Field-specific rule for ``validate``."""

    model_config = {"frozen": True}

    field: str
    required: bool = True
    value_type: Literal["number", "string", "date"] = "number"
    min_value: float | None = None
    max_value: float | None = None
    # +inf reports ABOVE_MAXIMUM instead of INVALID_TYPE
    infinity_above_maximum: bool = False
    custom_validator: Callable[[Any], ValidationResult] | None = None
