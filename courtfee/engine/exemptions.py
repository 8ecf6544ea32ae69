"""Exemption manager - discounts, applicability and ranking of exemptions."""

from collections.abc import Sequence

from courtfee.errors import NegativeBaseFeeError
from courtfee.schemas.fee import (
    DiscountType,
    ExemptionCategory,
    FeeBreakdownItem,
    FeeCalculation,
    JurisdictionType,
)
from courtfee.schemas.rule_table import RuleTable
from courtfee.storage.rule_table import get_rule_table
from courtfee.utils.formatting import format_amount


def _clamped_percent(exemption: ExemptionCategory) -> float:
    return min(max(exemption.discount_value, 0.0), 100.0)


def calculate_discount(base_fee: float, exemption: ExemptionCategory | None) -> float:
    """
    Discount granted by the exemption, always within [0, base_fee].
    Percentage values are clamped to 0..100; a fixed discount never exceeds
    the fee. Unknown discount types grant nothing.
    """
    if base_fee < 0:
        raise NegativeBaseFeeError(base_fee)
    if exemption is None:
        return 0.0

    if exemption.discount_type == DiscountType.EXEMPT:
        return base_fee
    if exemption.discount_type == DiscountType.FIXED:
        return max(0.0, min(exemption.discount_value, base_fee))
    if exemption.discount_type == DiscountType.PERCENTAGE:
        return base_fee * (_clamped_percent(exemption) / 100)
    return 0.0


def validate_exemption(
    exemption: ExemptionCategory | None,
    jurisdiction: JurisdictionType | str | None,
) -> bool:
    """True if the exemption applies to the jurisdiction and its value is in range."""
    if exemption is None or not jurisdiction:
        return False
    if jurisdiction not in exemption.applicable_courts:
        return False

    if exemption.discount_type == DiscountType.PERCENTAGE:
        return 0 <= exemption.discount_value <= 100
    if exemption.discount_type == DiscountType.FIXED:
        return exemption.discount_value >= 0
    return exemption.discount_type == DiscountType.EXEMPT


def _discount_formula(exemption: ExemptionCategory) -> str:
    if exemption.discount_type == DiscountType.EXEMPT:
        return "Full waiver"
    if exemption.discount_type == DiscountType.FIXED:
        return f"Fixed discount of {format_amount(exemption.discount_value)}"
    return f"{format_amount(_clamped_percent(exemption))}% discount"


def apply_exemption(calculation: FeeCalculation, exemption: ExemptionCategory) -> FeeCalculation:
    """Return a new calculation with the exemption appended to the breakdown."""
    discount = calculate_discount(calculation.amount, exemption)
    new_amount = calculation.amount - discount

    item = FeeBreakdownItem(
        description=f"Exemption: {exemption.name}",
        amount=-discount,
        formula=_discount_formula(exemption),
        legal_basis=exemption.legal_citation,
    )
    return FeeCalculation(
        amount=new_amount,
        formula=(
            f"{calculation.formula}; {format_amount(calculation.amount)} - "
            f"{format_amount(discount)} exemption = {format_amount(new_amount)}"
        ),
        breakdown=(*calculation.breakdown, item),
        applicable_article=calculation.applicable_article,
    )


def get_all_exemptions(table: RuleTable | None = None) -> list[ExemptionCategory]:
    return list((table or get_rule_table()).exemptions)


def get_available_exemptions(
    jurisdiction: JurisdictionType | str,
    table: RuleTable | None = None,
) -> list[ExemptionCategory]:
    """Catalog entries applicable to the jurisdiction, in catalog order."""
    jurisdiction = JurisdictionType(jurisdiction)
    return [e for e in get_all_exemptions(table) if jurisdiction in e.applicable_courts]


def find_exemption_by_id(
    exemption_id: str,
    table: RuleTable | None = None,
) -> ExemptionCategory | None:
    for exemption in get_all_exemptions(table):
        if exemption.id == exemption_id:
            return exemption
    return None


def get_best_exemption(
    base_fee: float,
    candidates: Sequence[ExemptionCategory],
) -> ExemptionCategory | None:
    """Exemption with the largest discount; the first one wins ties."""
    if not candidates:
        return None
    return max(candidates, key=lambda e: calculate_discount(base_fee, e))


def validate_exemption_compatibility(exemptions: Sequence[ExemptionCategory]) -> bool:
    """Only one exemption may be applied per calculation."""
    return len(exemptions) <= 1


def describe_exemption(base_fee: float, exemption: ExemptionCategory) -> str:
    """Human-readable summary of the exemption and the resulting savings."""
    discount = calculate_discount(base_fee, exemption)
    final_fee = base_fee - discount

    description = f"{exemption.name}: {exemption.description}"
    if exemption.discount_type == DiscountType.EXEMPT:
        description += f" (full waiver, saves {format_amount(discount)})"
    elif exemption.discount_type == DiscountType.FIXED:
        description += (
            f" (discount {format_amount(discount)}, payable {format_amount(final_fee)})"
        )
    elif exemption.discount_type == DiscountType.PERCENTAGE:
        description += (
            f" ({format_amount(_clamped_percent(exemption))}% discount, "
            f"saves {format_amount(discount)})"
        )
    return f"{description}. Legal basis: {exemption.legal_citation}"
