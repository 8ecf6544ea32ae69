"""Rule table schemas."""

from datetime import date

from pydantic import BaseModel, Field

from courtfee.schemas.fee import ExemptionCategory, FeeSchedule, JurisdictionType


class RuleTable(BaseModel):
    """Reference data for both jurisdictions, loaded once per process."""

    model_config = {"frozen": True}

    version: str
    last_updated: date
    source: str
    general: FeeSchedule
    arbitration: FeeSchedule
    exemptions: tuple[ExemptionCategory, ...] = ()

    def schedule_for(self, jurisdiction: JurisdictionType | str) -> FeeSchedule:
        if JurisdictionType(jurisdiction) is JurisdictionType.GENERAL:
            return self.general
        return self.arbitration


class DataVersionInfo(BaseModel):
    """Version metadata of the loaded rule table."""

    version: str
    release_date: date
    source: str
    checksum: str


class DataFreshnessStatus(BaseModel):
    """How long ago the rule table was last updated."""

    is_up_to_date: bool
    last_update_date: date
    days_since_update: int
    warning_message: str | None = None


class RuleTableStatus(BaseModel):
    """GET /v1/rule-table response."""

    version_info: DataVersionInfo
    freshness: DataFreshnessStatus
    integrity_problems: list[str] = Field(default_factory=list)
