"""Quote service - validate, calculate, apply an exemption, summarize."""

import logging
from typing import Any

from courtfee.engine.calculator import calculate_fee
from courtfee.engine.exemptions import (
    apply_exemption,
    calculate_discount,
    find_exemption_by_id,
    validate_exemption,
)
from courtfee.engine.validator import validate_claim_amount
from courtfee.errors import ExemptionNotApplicableError
from courtfee.schemas.fee import CalculationResult, FeeCalculation, FeeQuote, JurisdictionType
from courtfee.schemas.rule_table import RuleTable
from courtfee.utils.canonical import content_hash

logger = logging.getLogger(__name__)


def quote(
    claim_amount: Any,
    jurisdiction: JurisdictionType | str,
    exemption_id: str | None = None,
    table: RuleTable | None = None,
) -> FeeQuote:
    """
    Full calculation for user input.
    Invalid input yields a quote with result=None and the failing validation;
    an unknown or inapplicable exemption raises ExemptionNotApplicableError.
    """
    jurisdiction = JurisdictionType(jurisdiction)
    validation = validate_claim_amount(claim_amount)
    if not validation.is_valid:
        logger.info("Claim amount rejected: %s", validation.code.value)
        return FeeQuote(validation=validation)

    exemption = None
    if exemption_id is not None:
        exemption = find_exemption_by_id(exemption_id, table)
        if not validate_exemption(exemption, jurisdiction):
            raise ExemptionNotApplicableError(exemption_id, jurisdiction.value)

    calculation = calculate_fee(claim_amount, jurisdiction, table)
    base_fee = calculation.amount
    discount = 0.0
    if exemption is not None:
        discount = calculate_discount(base_fee, exemption)
        calculation = apply_exemption(calculation, exemption)

    result = CalculationResult(
        base_fee=base_fee,
        exemption_discount=discount,
        final_fee=calculation.amount,
        effective_rate=round(calculation.amount / float(claim_amount) * 100, 4),
        calculation=calculation,
    )
    return FeeQuote(validation=validation, result=result)


def calculation_hash(calculation: FeeCalculation) -> str:
    """SHA256 of the canonical calculation; equal inputs give equal hashes."""
    return content_hash(calculation)
