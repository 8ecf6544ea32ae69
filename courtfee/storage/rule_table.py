"""Rule table provider - built-in or JSON-loaded, integrity checks, freshness."""

import logging
from collections import Counter
from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from courtfee.config import settings
from courtfee.data.exemptions import EXEMPTION_CATEGORIES
from courtfee.data.schedule import ARBITRATION_SCHEDULE, GENERAL_SCHEDULE
from courtfee.errors import RuleTableError
from courtfee.schemas.fee import DiscountType, FeeSchedule
from courtfee.schemas.rule_table import DataFreshnessStatus, DataVersionInfo, RuleTable
from courtfee.utils.canonical import content_hash

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "2024.1.0"
DEFAULT_LAST_UPDATED = date(2024, 1, 1)
DEFAULT_SOURCE = "НК РФ статьи 333.19, 333.21, 333.36, 333.37"


def default_rule_table() -> RuleTable:
    """Rule table shipped with the package."""
    return RuleTable(
        version=DEFAULT_VERSION,
        last_updated=DEFAULT_LAST_UPDATED,
        source=DEFAULT_SOURCE,
        general=GENERAL_SCHEDULE,
        arbitration=ARBITRATION_SCHEDULE,
        exemptions=EXEMPTION_CATEGORIES,
    )


def _schedule_problems(schedule: FeeSchedule) -> list[str]:
    name = schedule.jurisdiction.value
    brackets = schedule.brackets
    if not brackets:
        return [f"{name}: schedule has no brackets"]

    problems = []
    if brackets[0].lower_bound != 0:
        problems.append(f"{name}: first bracket must start at 0")
    for i, bracket in enumerate(brackets):
        last = i == len(brackets) - 1
        if bracket.upper_bound is None:
            if not last:
                problems.append(f"{name}: open-ended bracket #{i} is not the last one")
        elif bracket.upper_bound <= bracket.lower_bound:
            problems.append(f"{name}: bracket #{i} has upper bound <= lower bound")
        elif last:
            problems.append(f"{name}: final bracket must be open-ended")
        if i > 0:
            prev = brackets[i - 1]
            if prev.upper_bound is not None and bracket.lower_bound != prev.upper_bound:
                problems.append(
                    f"{name}: bracket #{i} starts at {bracket.lower_bound}, "
                    f"expected {prev.upper_bound} (gap or overlap)"
                )
    return problems


def validate_table_integrity(table: RuleTable) -> list[str]:
    """Return a list of problems; empty when the table is well-formed."""
    problems = _schedule_problems(table.general) + _schedule_problems(table.arbitration)

    counts = Counter(e.id for e in table.exemptions)
    for exemption_id, count in counts.items():
        if count > 1:
            problems.append(f"exemption '{exemption_id}' is defined {count} times")

    known_types = {t.value for t in DiscountType}
    for exemption in table.exemptions:
        if exemption.discount_type not in known_types:
            problems.append(
                f"exemption '{exemption.id}' has unknown discount type '{exemption.discount_type}'"
            )
        elif exemption.discount_type == DiscountType.PERCENTAGE and not (
            0 <= exemption.discount_value <= 100
        ):
            problems.append(f"exemption '{exemption.id}' percentage must be within 0..100")
        elif exemption.discount_type == DiscountType.FIXED and exemption.discount_value < 0:
            problems.append(f"exemption '{exemption.id}' fixed discount cannot be negative")
    return problems


def table_checksum(table: RuleTable) -> str:
    """SHA256 of the canonical JSON of the whole table."""
    return content_hash(table)


def load_rule_table(path: str | Path) -> RuleTable:
    """Load and validate a JSON rule table."""
    path = Path(path)
    try:
        table = RuleTable.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuleTableError(f"Cannot read rule table {path}: {exc}") from exc
    except ValidationError as exc:
        raise RuleTableError(f"Invalid rule table {path}: {exc}") from exc

    problems = validate_table_integrity(table)
    if problems:
        for problem in problems:
            logger.warning("Rule table %s: %s", path, problem)
        raise RuleTableError(f"Rule table {path} failed integrity check: {'; '.join(problems)}")

    logger.info(
        "Loaded rule table %s version %s (checksum %s)",
        path,
        table.version,
        table_checksum(table),
    )
    return table


@lru_cache(maxsize=1)
def get_rule_table() -> RuleTable:
    """Process-wide rule table, loaded once and never mutated."""
    if settings.rule_table_path:
        return load_rule_table(settings.rule_table_path)
    table = default_rule_table()
    logger.info("Using built-in rule table version %s", table.version)
    return table


def version_info(table: RuleTable) -> DataVersionInfo:
    return DataVersionInfo(
        version=table.version,
        release_date=table.last_updated,
        source=table.source,
        checksum=table_checksum(table),
    )


def check_data_freshness(table: RuleTable, today: date | None = None) -> DataFreshnessStatus:
    """
    Report how stale the fee data is.
    Up to date within settings.data_freshness_days; warnings grow with age.
    """
    today = today or date.today()
    days = max(0, (today - table.last_updated).days)
    is_up_to_date = days <= settings.data_freshness_days

    warning = None
    if not is_up_to_date:
        if days <= 60:
            warning = f"Fee data was updated {days} days ago. Check that the rates are current."
        elif days <= 180:
            warning = f"Fee data is outdated ({days} days). Verify the current rates in the Tax Code."
        else:
            warning = f"Fee data is severely outdated ({days} days). Calculations may be inaccurate."

    return DataFreshnessStatus(
        is_up_to_date=is_up_to_date,
        last_update_date=table.last_updated,
        days_since_update=days,
        warning_message=warning,
    )
