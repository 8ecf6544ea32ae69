"""Fee calculation engine - progressive bracket arithmetic with explainability."""

import logging
from collections.abc import Sequence

from courtfee.errors import BracketNotFoundError, InvalidClaimAmountError
from courtfee.schemas.fee import (
    FeeBracket,
    FeeBreakdownItem,
    FeeCalculation,
    JurisdictionType,
)
from courtfee.schemas.rule_table import RuleTable
from courtfee.storage.rule_table import get_rule_table
from courtfee.utils.numbers import is_finite, to_float

logger = logging.getLogger(__name__)


def find_bracket(
    amount: float,
    brackets: Sequence[FeeBracket],
    jurisdiction: str = "",
) -> FeeBracket:
    """Brackets are walked in order; the first one covering the amount wins."""
    for bracket in brackets:
        if bracket.contains(amount):
            return bracket
    raise BracketNotFoundError(amount, jurisdiction)


def bracket_fee(amount: float, bracket: FeeBracket) -> float:
    """base_offset + marginal part above lower_bound, clamped to [minimum_fee, maximum_fee]."""
    fee = bracket.base_offset
    if bracket.marginal_rate:
        fee += (amount - bracket.lower_bound) * bracket.marginal_rate
    if bracket.minimum_fee is not None:
        fee = max(fee, bracket.minimum_fee)
    if bracket.maximum_fee is not None:
        fee = min(fee, bracket.maximum_fee)
    return fee


def calculate_fee(
    amount: float,
    jurisdiction: JurisdictionType | str,
    table: RuleTable | None = None,
) -> FeeCalculation:
    """
    Compute the base court fee for a claim.
    Raises InvalidClaimAmountError for amount <= 0; user input is expected to
    have passed validate_claim_amount already.
    """
    if isinstance(amount, bool) or not is_finite(amount) or amount <= 0:
        raise InvalidClaimAmountError(amount)

    # ints beyond float range saturate to inf; the open-ended last bracket takes them
    amount = to_float(amount)
    jurisdiction = JurisdictionType(jurisdiction)
    schedule = (table or get_rule_table()).schedule_for(jurisdiction)
    bracket = find_bracket(amount, schedule.brackets, jurisdiction.value)
    fee = bracket_fee(amount, bracket)

    logger.debug(
        "%s fee for %s: bracket (%s, %s] -> %s",
        jurisdiction.value,
        amount,
        bracket.lower_bound,
        bracket.upper_bound,
        fee,
    )

    return FeeCalculation(
        amount=fee,
        formula=bracket.formula,
        breakdown=(
            FeeBreakdownItem(
                description="Court fee",
                amount=fee,
                formula=bracket.formula,
                legal_basis=bracket.legal_citation,
            ),
        ),
        applicable_article=schedule.applicable_article,
    )


def calculate_general_fee(amount: float, table: RuleTable | None = None) -> FeeCalculation:
    """Fee for a general jurisdiction court."""
    return calculate_fee(amount, JurisdictionType.GENERAL, table)


def calculate_arbitration_fee(amount: float, table: RuleTable | None = None) -> FeeCalculation:
    """Fee for an arbitration (commercial) court."""
    return calculate_fee(amount, JurisdictionType.ARBITRATION, table)
