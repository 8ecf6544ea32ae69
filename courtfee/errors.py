"""Domain errors.

User-input problems are reported through ``ValidationResult`` codes and never
raise. The exceptions here signal contract violations: the caller skipped
validation, or the rule table itself is broken.
"""

from typing import Any


class CourtFeeError(Exception):
    """Base class for court fee errors."""


class CalculationError(CourtFeeError):
    """Fee calculation could not be carried out."""

    def __init__(
        self,
        message: str,
        error_type: str = "invalid_input",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}
        self.recoverable = error_type != "configuration_error"


class InvalidClaimAmountError(CalculationError, ValueError):
    """Claim amount passed to the engine is zero, negative or not finite."""

    def __init__(self, amount: Any):
        super().__init__(
            "Claim amount must be positive",
            error_type="invalid_input",
            context={"amount": amount},
        )


class NegativeBaseFeeError(CalculationError, ValueError):
    """Base fee passed to discount calculation is negative."""

    def __init__(self, base_fee: float):
        super().__init__(
            "Base fee cannot be negative",
            error_type="invalid_input",
            context={"base_fee": base_fee},
        )


class BracketNotFoundError(CalculationError):
    """No bracket of the schedule covers the amount (ill-formed rule table)."""

    def __init__(self, amount: float, jurisdiction: str):
        super().__init__(
            f"No fee bracket covers claim amount {amount} in {jurisdiction} schedule",
            error_type="configuration_error",
            context={"amount": amount, "jurisdiction": jurisdiction},
        )


class RuleTableError(CourtFeeError):
    """Rule table could not be loaded or failed the integrity check."""


class ExemptionNotApplicableError(CourtFeeError):
    """Requested exemption is unknown or not valid for the jurisdiction."""

    def __init__(self, exemption_id: str, jurisdiction: str):
        super().__init__(
            f"Exemption '{exemption_id}' is not applicable to {jurisdiction} courts"
        )
        self.exemption_id = exemption_id
        self.jurisdiction = jurisdiction
