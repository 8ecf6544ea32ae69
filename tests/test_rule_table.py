"""Unit tests for the rule table provider."""

from datetime import date

import pytest

from courtfee.engine.calculator import calculate_general_fee
from courtfee.errors import RuleTableError
from courtfee.schemas.fee import ExemptionCategory, FeeBracket
from courtfee.storage.rule_table import (
    check_data_freshness,
    default_rule_table,
    get_rule_table,
    load_rule_table,
    table_checksum,
    validate_table_integrity,
    version_info,
)


def _with_general_brackets(table, brackets):
    general = table.general.model_copy(update={"brackets": tuple(brackets)})
    return table.model_copy(update={"general": general})


def test_default_table_is_well_formed():
    """Built-in table passes the integrity check."""
    assert validate_table_integrity(default_rule_table()) == []


def test_get_rule_table_is_cached():
    """Rule table is loaded once per process."""
    assert get_rule_table() is get_rule_table()


def test_integrity_detects_gap():
    """A gap between brackets is reported."""
    table = default_rule_table()
    brackets = list(table.general.brackets)
    brackets[1] = brackets[1].model_copy(update={"lower_bound": 25_000})
    problems = validate_table_integrity(_with_general_brackets(table, brackets))
    assert any("gap or overlap" in p for p in problems)


def test_integrity_detects_closed_final_bracket():
    """The last bracket must be open-ended."""
    table = default_rule_table()
    brackets = list(table.general.brackets)
    brackets[-1] = brackets[-1].model_copy(update={"upper_bound": 5_000_000})
    problems = validate_table_integrity(_with_general_brackets(table, brackets))
    assert "general: final bracket must be open-ended" in problems


def test_integrity_detects_misplaced_open_bracket_and_bad_start():
    """Open bracket must be last and the first must start at zero."""
    table = default_rule_table()
    brackets = [
        FeeBracket(lower_bound=10, formula="f", legal_citation="c"),
        FeeBracket(lower_bound=10, upper_bound=5, formula="g", legal_citation="c"),
    ]
    problems = validate_table_integrity(_with_general_brackets(table, brackets))
    assert "general: first bracket must start at 0" in problems
    assert "general: open-ended bracket #0 is not the last one" in problems
    assert "general: bracket #1 has upper bound <= lower bound" in problems


def test_integrity_detects_empty_schedule():
    """Empty schedule is reported."""
    problems = validate_table_integrity(_with_general_brackets(default_rule_table(), []))
    assert problems == ["general: schedule has no brackets"]


def test_integrity_checks_exemptions():
    """Duplicate ids and out-of-range discounts are reported."""
    table = default_rule_table()
    extra = (
        ExemptionCategory(
            id="veterans", name="dup", applicable_courts=("general",),
            discount_type="exempt", legal_citation="c",
        ),
        ExemptionCategory(
            id="pct", name="pct", applicable_courts=("general",),
            discount_type="percentage", discount_value=120, legal_citation="c",
        ),
        ExemptionCategory(
            id="neg", name="neg", applicable_courts=("arbitration",),
            discount_type="fixed", discount_value=-1, legal_citation="c",
        ),
        ExemptionCategory(
            id="odd", name="odd", applicable_courts=("general",),
            discount_type="bonus", legal_citation="c",
        ),
    )
    broken = table.model_copy(update={"exemptions": table.exemptions + extra})
    problems = validate_table_integrity(broken)
    assert "exemption 'veterans' is defined 2 times" in problems
    assert "exemption 'pct' percentage must be within 0..100" in problems
    assert "exemption 'neg' fixed discount cannot be negative" in problems
    assert "exemption 'odd' has unknown discount type 'bonus'" in problems


def test_load_rule_table_round_trip(tmp_path):
    """A table written as JSON loads back identical and drives the engine."""
    table = default_rule_table()
    path = tmp_path / "rules.json"
    path.write_text(table.model_dump_json(), encoding="utf-8")

    loaded = load_rule_table(path)
    assert loaded == table
    assert table_checksum(loaded) == table_checksum(table)
    assert calculate_general_fee(20_001, table=loaded).amount == pytest.approx(800.03)


def test_load_rule_table_custom_rates(tmp_path):
    """Engine follows whatever schedule the table supplies."""
    table = default_rule_table()
    brackets = list(table.general.brackets)
    brackets[0] = brackets[0].model_copy(update={"minimum_fee": 300})
    path = tmp_path / "rules.json"
    path.write_text(_with_general_brackets(table, brackets).model_dump_json(), encoding="utf-8")

    assert calculate_general_fee(1, table=load_rule_table(path)).amount == 300


def test_load_rule_table_missing_file(tmp_path):
    """Unreadable file raises RuleTableError."""
    with pytest.raises(RuleTableError, match="Cannot read"):
        load_rule_table(tmp_path / "missing.json")


def test_load_rule_table_invalid_json(tmp_path):
    """Malformed document raises RuleTableError."""
    path = tmp_path / "rules.json"
    path.write_text('{"version": "1"}', encoding="utf-8")
    with pytest.raises(RuleTableError, match="Invalid rule table"):
        load_rule_table(path)


def test_load_rule_table_rejects_broken_schedule(tmp_path):
    """Tables failing the integrity check are not loaded."""
    table = default_rule_table()
    brackets = list(table.general.brackets)[:-1]
    path = tmp_path / "rules.json"
    path.write_text(_with_general_brackets(table, brackets).model_dump_json(), encoding="utf-8")
    with pytest.raises(RuleTableError, match="integrity"):
        load_rule_table(path)


def test_checksum_changes_with_content():
    """Checksum is stable and sensitive to edits."""
    table = default_rule_table()
    assert table_checksum(table) == table_checksum(default_rule_table())
    assert len(table_checksum(table)) == 64
    edited = table.model_copy(update={"version": "2025.1.0"})
    assert table_checksum(edited) != table_checksum(table)


def test_version_info():
    """Version info reports the table metadata and checksum."""
    table = default_rule_table()
    info = version_info(table)
    assert info.version == "2024.1.0"
    assert info.release_date == date(2024, 1, 1)
    assert info.checksum == table_checksum(table)


@pytest.mark.parametrize(
    "today, up_to_date, warning",
    [
        (date(2023, 12, 1), True, None),
        (date(2024, 1, 31), True, None),
        (date(2024, 2, 15), False, "updated 45 days ago"),
        (date(2024, 5, 1), False, "outdated (121 days)"),
        (date(2026, 10, 17), False, "severely outdated"),
    ],
)
def test_data_freshness(today, up_to_date, warning):
    """Freshness warnings grow with the age of the data."""
    status = check_data_freshness(default_rule_table(), today=today)
    assert status.is_up_to_date is up_to_date
    assert status.last_update_date == date(2024, 1, 1)
    if warning is None:
        assert status.warning_message is None
    else:
        assert warning in status.warning_message


def test_freshness_future_date_counts_as_zero():
    """A release date in the future gives zero days."""
    status = check_data_freshness(default_rule_table(), today=date(2020, 1, 1))
    assert status.days_since_update == 0
