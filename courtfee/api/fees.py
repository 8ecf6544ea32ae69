"""Fee calculation endpoints."""

from fastapi import APIRouter, HTTPException, status

from courtfee.engine.exemptions import get_available_exemptions
from courtfee.engine.quote import quote
from courtfee.errors import ExemptionNotApplicableError
from courtfee.schemas.fee import ExemptionList, FeeQuote, FeeQuoteRequest, JurisdictionType
from courtfee.schemas.rule_table import RuleTableStatus
from courtfee.storage.rule_table import (
    check_data_freshness,
    get_rule_table,
    validate_table_integrity,
    version_info,
)

router = APIRouter()


@router.post("/fees", response_model=FeeQuote)
async def calculate_court_fee(body: FeeQuoteRequest):
    """
    Calculate the court fee for a claim.
    Invalid claim amounts come back with result=null and a validation code.
    """
    try:
        return quote(body.claim_amount, body.jurisdiction, body.exemption_id)
    except ExemptionNotApplicableError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )


@router.get("/exemptions", response_model=ExemptionList)
async def list_exemptions(jurisdiction: JurisdictionType = JurisdictionType.GENERAL):
    """Exemptions available for the jurisdiction."""
    return ExemptionList(
        jurisdiction=jurisdiction,
        exemptions=get_available_exemptions(jurisdiction),
    )


@router.get("/rule-table", response_model=RuleTableStatus)
async def rule_table_status():
    """Version, checksum and freshness of the loaded rule table."""
    table = get_rule_table()
    return RuleTableStatus(
        version_info=version_info(table),
        freshness=check_data_freshness(table),
        integrity_problems=validate_table_integrity(table),
    )
