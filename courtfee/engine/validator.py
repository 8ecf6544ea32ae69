"""Input validator - checks raw user input before it reaches the engine.

Every function here returns a ValidationResult and never raises; callers
branch on ``result.code``.
"""

import re
from datetime import date
from typing import Any

from courtfee.config import settings
from courtfee.schemas.validation import ValidationCode, ValidationResult, ValidationRule
from courtfee.utils.formatting import format_amount
from courtfee.utils.numbers import is_finite, is_number, is_positive_infinity

MIN_CLAIM_AMOUNT = 1
MAX_CLAIM_AMOUNT = 1_000_000_000

MINIMUM_WAGE = 19_242  # federal minimum wage, 2026
MAXIMUM_SALARY = 10_000_000
HIGH_SALARY_THRESHOLD = 1_000_000

MIN_CREDIT_AMOUNT = 10_000
MAX_CREDIT_AMOUNT = 100_000_000
MIN_LOAN_TERM = 1  # months
MAX_LOAN_TERM = 360
MIN_INTEREST_RATE = 0.1  # percent per year
MAX_INTEREST_RATE = 50

_UNSAFE_CHARS = re.compile(r"[<>\"'&]")

VALID = ValidationResult(is_valid=True)


def _invalid(code: ValidationCode, message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, code=code, error_message=message)


def validate(value: Any, rule: ValidationRule) -> ValidationResult:
    """Check value against rule: required, type, min, max, then custom validator."""
    if value is None:
        if rule.required:
            return _invalid(ValidationCode.REQUIRED_FIELD, f'Field "{rule.field}" is required')
        return VALID

    if rule.value_type == "number":
        if not is_number(value):
            return _invalid(ValidationCode.INVALID_TYPE, f'Field "{rule.field}" must be a number')
        if not is_finite(value):
            above = is_positive_infinity(value)
            if not (rule.infinity_above_maximum and rule.max_value is not None and above):
                return _invalid(
                    ValidationCode.INVALID_TYPE, f'Field "{rule.field}" must be a finite number'
                )
        if rule.min_value is not None and value < rule.min_value:
            return _invalid(
                ValidationCode.BELOW_MINIMUM,
                f"Value cannot be less than {format_amount(rule.min_value)}",
            )
        if rule.max_value is not None and value > rule.max_value:
            return _invalid(
                ValidationCode.ABOVE_MAXIMUM,
                f"Value cannot be greater than {format_amount(rule.max_value)}",
            )
    elif rule.value_type == "string" and not isinstance(value, str):
        return _invalid(ValidationCode.INVALID_TYPE, f'Field "{rule.field}" must be a string')
    elif rule.value_type == "date" and not isinstance(value, date):
        return _invalid(ValidationCode.INVALID_TYPE, f'Field "{rule.field}" must be a date')

    if rule.custom_validator is not None:
        return rule.custom_validator(value)
    return VALID


def _check_claim_amount(value: Any) -> ValidationResult:
    if value <= 0:
        return _invalid(ValidationCode.NON_POSITIVE_VALUE, "Claim amount must be positive")
    if value < MIN_CLAIM_AMOUNT:
        return _invalid(
            ValidationCode.BELOW_MINIMUM,
            f"Claim amount cannot be less than {format_amount(MIN_CLAIM_AMOUNT)}",
        )
    if value > settings.high_claim_warning_threshold:
        return ValidationResult(
            is_valid=True,
            code=ValidationCode.HIGH_CLAIM_WARNING,
            warning_message="The claim amount is unusually large. Check the input.",
        )
    return VALID


def validate_claim_amount(value: Any) -> ValidationResult:
    """Claim amount must satisfy 1 <= amount <= 1,000,000,000."""
    return validate(
        value,
        ValidationRule(
            field="claim_amount",
            max_value=MAX_CLAIM_AMOUNT,
            infinity_above_maximum=True,
            custom_validator=_check_claim_amount,
        ),
    )


def validate_salary(value: Any) -> ValidationResult:
    """Monthly salary: not below the minimum wage, not above MAXIMUM_SALARY."""
    if not is_number(value) or not is_finite(value):
        return _invalid(ValidationCode.INVALID_TYPE, "Salary must be a number")
    if value < 0:
        return _invalid(ValidationCode.NEGATIVE_VALUE, "Salary cannot be negative")
    if value < MINIMUM_WAGE:
        return _invalid(
            ValidationCode.BELOW_MINIMUM_WAGE,
            f"Salary cannot be below the minimum wage ({format_amount(MINIMUM_WAGE)})",
        )
    if value > MAXIMUM_SALARY:
        return _invalid(
            ValidationCode.ABOVE_MAXIMUM,
            f"Salary exceeds the maximum allowed value ({format_amount(MAXIMUM_SALARY)})",
        )
    if value > HIGH_SALARY_THRESHOLD:
        return ValidationResult(
            is_valid=True,
            code=ValidationCode.HIGH_SALARY_WARNING,
            warning_message="The salary is very high. Check the input.",
        )
    return VALID


def validate_credit_terms(amount: Any, term: Any, rate: Any) -> ValidationResult:
    """Loan amount, term in months and yearly rate in percent; first failure wins."""
    checks = (
        ("Loan amount", amount, ValidationRule(
            field="amount", min_value=MIN_CREDIT_AMOUNT, max_value=MAX_CREDIT_AMOUNT
        )),
        ("Loan term", term, ValidationRule(
            field="term", min_value=MIN_LOAN_TERM, max_value=MAX_LOAN_TERM
        )),
        ("Interest rate", rate, ValidationRule(
            field="rate", min_value=MIN_INTEREST_RATE, max_value=MAX_INTEREST_RATE
        )),
    )
    for label, value, rule in checks:
        result = validate(value, rule)
        if not result.is_valid:
            return result.model_copy(update={"error_message": f"{label}: {result.error_message}"})
    return VALID


def sanitize_input(value: Any) -> Any:
    """
    Strip markup-sensitive characters from strings and trim them; replace
    non-finite numbers with 0. Anything else is returned unchanged.
    """
    if isinstance(value, str):
        return _UNSAFE_CHARS.sub("", value).strip()
    if is_number(value) and not is_finite(value):
        return 0
    return value
