"""Fee schedule, exemption and calculation schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from courtfee.schemas.validation import ValidationResult


class JurisdictionType(str, Enum):
    """Court category; each one has its own fee schedule."""

    GENERAL = "general"
    ARBITRATION = "arbitration"


class DiscountType(str, Enum):
    """How an exemption reduces the base fee."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"
    EXEMPT = "exempt"


class FeeBracket(BaseModel):
    """One tier of a progressive fee schedule.

    Covers claim amounts in ``(lower_bound, upper_bound]``; the last bracket of
    a schedule has no upper bound.
    """

    model_config = {"frozen": True}

    lower_bound: float
    upper_bound: float | None = None
    marginal_rate: float = 0.0
    base_offset: float = 0.0
    minimum_fee: float | None = None
    maximum_fee: float | None = None
    formula: str
    legal_citation: str

    def contains(self, amount: float) -> bool:
        if amount <= self.lower_bound:
            return False
        return self.upper_bound is None or amount <= self.upper_bound


class FeeSchedule(BaseModel):
    """Ordered brackets for one jurisdiction."""

    model_config = {"frozen": True}

    jurisdiction: JurisdictionType
    applicable_article: str
    brackets: tuple[FeeBracket, ...]


class ExemptionCategory(BaseModel):
    """Legally defined category that reduces or waives the fee.

    ``discount_type`` is kept as a plain string so that records with an
    unknown type can still be loaded and then rejected by validation.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    description: str = ""
    applicable_courts: tuple[JurisdictionType, ...]
    discount_type: str
    discount_value: float = 0.0
    legal_citation: str


class FeeBreakdownItem(BaseModel):
    """One line of the audit trail; discounts carry a negative amount."""

    model_config = {"frozen": True}

    description: str
    amount: float
    formula: str = ""
    legal_basis: str


class FeeCalculation(BaseModel):
    """Fee with its derivation. Exemptions produce a new instance."""

    model_config = {"frozen": True}

    amount: float
    formula: str
    breakdown: tuple[FeeBreakdownItem, ...] = ()
    applicable_article: str


class CalculationResult(BaseModel):
    """Summary of a completed calculation."""

    base_fee: float
    exemption_discount: float = 0.0
    final_fee: float
    effective_rate: float
    calculation: FeeCalculation


class FeeQuote(BaseModel):
    """Quote outcome: either a result or the validation failure that blocked it."""

    validation: ValidationResult
    result: CalculationResult | None = None


class FeeQuoteRequest(BaseModel):
    """POST /v1/fees request."""

    # left untyped so booleans and strings reach validate_claim_amount as-is
    claim_amount: Any = None
    jurisdiction: JurisdictionType = JurisdictionType.GENERAL
    exemption_id: str | None = None


class ExemptionList(BaseModel):
    """GET /v1/exemptions response."""

    jurisdiction: JurisdictionType
    exemptions: list[ExemptionCategory] = Field(default_factory=list)
