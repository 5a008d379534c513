"""
Custom Rule Tests
Date-sequence checks and the reusable rule classes
"""
from datetime import date, datetime

import pytest

from tms.validation.custom_rules import (
    CUSTOMER_DATE_PAIRS,
    DateSequenceRule,
    FunctionRule,
    MinLengthRule,
    PatternRule,
    PositiveNumberRule,
    as_custom_rule,
    check_date_sequences,
    parse_date,
)
from tms.validation.results import FieldValidationResult


class TestParseDate:
    """Test form date parsing"""

    def test_iso_date(self):
        assert parse_date("2024-03-15") == date(2024, 3, 15)

    def test_iso_datetime_with_zulu(self):
        assert parse_date("2024-03-15T10:30:00Z") == date(2024, 3, 15)

    def test_ddmmyyyy(self):
        assert parse_date("15032024") == date(2024, 3, 15)

    def test_date_objects(self):
        assert parse_date(date(2024, 1, 2)) == date(2024, 1, 2)
        assert parse_date(datetime(2024, 1, 2, 23, 59)) == date(2024, 1, 2)

    @pytest.mark.parametrize("value", ["31022024", "not a date", "", None, 20240101])
    def test_unparseable(self, value):
        assert parse_date(value) is None


class TestDateSequence:
    """Test expiry-before-start detection"""

    def test_expiry_before_start_fails_once(self):
        record = {"AgreementDate": "2024-12-31", "AgreementExpiryDate": "2024-01-01"}
        errors = check_date_sequences(record, CUSTOMER_DATE_PAIRS)
        assert errors == ["Agreement Expiry Date cannot be before Agreement Date"]

    def test_expiry_after_start_passes(self):
        record = {"AgreementDate": "2024-01-01", "AgreementExpiryDate": "2024-12-31"}
        assert check_date_sequences(record, CUSTOMER_DATE_PAIRS) == []

    def test_equal_dates_pass(self):
        record = {"AgreementDate": "2024-06-30", "AgreementExpiryDate": "2024-06-30"}
        assert check_date_sequences(record, CUSTOMER_DATE_PAIRS) == []

    def test_pairs_checked_independently(self):
        record = {
            "AgreementDate": "2024-12-31", "AgreementExpiryDate": "2024-01-01",
            "BGDate": "2024-01-01", "BGExpiryDate": "2025-01-01",
            "PODate": "2024-05-05", "POExpiryDate": "2024-05-04",
        }
        assert check_date_sequences(record, CUSTOMER_DATE_PAIRS) == [
            "Agreement Expiry Date cannot be before Agreement Date",
            "PO Expiry Date cannot be before PO Date",
        ]

    def test_missing_side_passes(self):
        rule = DateSequenceRule("BGDate", "BGExpiryDate", "bad")
        assert rule.evaluate(None, {"BGDate": "2024-01-01"}).is_valid
        assert rule.evaluate("2024-01-01", {"BGDate": ""}).is_valid

    def test_mixed_formats(self):
        rule = DateSequenceRule("Issue", "Expiry", "bad")
        record = {"Issue": "01012024", "Expiry": date(2023, 12, 31)}
        assert not rule.evaluate(record["Expiry"], record).is_valid

    def test_unparseable_passes_with_warning(self, caplog):
        rule = DateSequenceRule("Issue", "Expiry", "bad")
        record = {"Issue": "yesterday", "Expiry": "2024-01-01"}
        assert rule.evaluate(record["Expiry"], record).is_valid
        assert "unparseable" in caplog.text


class TestSimpleRules:
    """Test the single-field custom rules"""

    def test_min_length(self):
        rule = MinLengthRule(2, "too short")
        assert rule.evaluate("AB", {}).is_valid
        assert rule.evaluate(" A ", {}) == FieldValidationResult.fail("too short")
        assert not rule.evaluate("", {}).is_valid

    def test_pattern(self):
        rule = PatternRule(r"\d{6}", "six digits")
        assert rule.evaluate("400001", {}).is_valid
        assert rule.evaluate("", {}).is_valid
        assert not rule.evaluate("40001", {}).is_valid
        assert not rule.evaluate("4000012", {}).is_valid

    @pytest.mark.parametrize("value,ok", [
        ("10", True), (0.5, True), ("", True), ("0", False), ("-1", False), ("abc", False), ("nan", False),
    ])
    def test_positive_number(self, value, ok):
        assert PositiveNumberRule("positive").evaluate(value, {}).is_valid is ok

    @pytest.mark.parametrize("value", [
        "inf", "Infinity", "-inf", "1_000", "1e400", float("inf"), float("nan"), True, "0x10",
    ])
    def test_positive_number_rejects_non_decimal_spellings(self, value):
        assert not PositiveNumberRule("positive").evaluate(value, {}).is_valid

    @pytest.mark.parametrize("value", ["1e3", "+5", ".5", "12.", " 42 ", 10 ** 400])
    def test_positive_number_accepts_decimal_literals(self, value):
        assert PositiveNumberRule("positive").evaluate(value, {}).is_valid

    def test_min_length_untrimmed_allowing_blank(self):
        rule = MinLengthRule(2, "too short", allow_blank=True, strip=False)
        assert rule.evaluate("", {}).is_valid
        assert rule.evaluate(None, {}).is_valid
        assert rule.evaluate("A ", {}).is_valid
        assert rule.evaluate("A", {}) == FieldValidationResult.fail("too short")


class TestFunctionRule:
    """Test adapting plain callables"""

    def test_tuple_result(self):
        rule = FunctionRule(lambda value, record: (value == record["other"], "mismatch"))
        assert rule.evaluate("a", {"other": "a"}).is_valid
        assert rule.evaluate("a", {"other": "b"}).error == "mismatch"

    def test_mapping_result_camel_case(self):
        rule = FunctionRule(lambda value, record: {"isValid": False, "error": "nope"})
        assert rule.evaluate(None, {}) == FieldValidationResult.fail("nope")

    def test_mapping_without_flag(self):
        rule = FunctionRule(lambda value, record: {"error": "nope"})
        with pytest.raises(TypeError):
            rule.evaluate(None, {})

    def test_as_custom_rule(self):
        existing = MinLengthRule(1, "x")
        assert as_custom_rule(existing) is existing
        assert isinstance(as_custom_rule(lambda v, r: (True, None)), FunctionRule)
        with pytest.raises(TypeError):
            as_custom_rule("not callable")
