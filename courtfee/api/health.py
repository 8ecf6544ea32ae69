"""Health and metrics endpoints."""

from fastapi import APIRouter

from courtfee.storage.rule_table import get_rule_table, table_checksum

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/metrics")
async def metrics():
    """Basic metrics endpoint for observability."""
    table = get_rule_table()
    return {
        "service": "courtfee",
        "version": "0.1.0",
        "rule_table_version": table.version,
        "rule_table_checksum": table_checksum(table),
    }
