"""
TMS Custom Validation Rules
Cross-field and business-specific checks run after format validation
"""
import logging
import math
import re
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from .field_validator import is_blank
from .results import FieldValidationResult

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]
RuleCallable = Callable[[Any, Record], Any]

_DDMMYYYY = re.compile(r"[0-9]{8}")


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a form date value.

    Accepts date/datetime objects, ISO strings (YYYY-MM-DD, optionally with a
    time part) and 8-digit DDMMYYYY strings. Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if _DDMMYYYY.fullmatch(text):
        try:
            return datetime.strptime(text, "%d%m%Y").date()
        except ValueError:
            return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


class CustomRule(ABC):
    """A validation capability evaluated against the full form record"""

    @abstractmethod
    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        raise NotImplementedError


class DateSequenceRule(CustomRule):
    """Expiry must not precede the start date; equal dates are allowed"""

    def __init__(self, start_field: str, expiry_field: str, message: str):
        self.start_field = start_field
        self.expiry_field = expiry_field
        self.message = message

    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        start_value = record.get(self.start_field)
        expiry_value = value if value is not None else record.get(self.expiry_field)
        if is_blank(start_value) or is_blank(expiry_value):
            return FieldValidationResult.ok()

        start = parse_date(start_value)
        expiry = parse_date(expiry_value)
        if start is None or expiry is None:
            logger.warning(
                f"Skipping date sequence {self.start_field} -> {self.expiry_field}: "
                f"unparseable value(s) {start_value!r}, {expiry_value!r}"
            )
            return FieldValidationResult.ok()

        if expiry < start:
            return FieldValidationResult.fail(self.message)
        return FieldValidationResult.ok()

    def __repr__(self) -> str:
        return f"DateSequenceRule({self.start_field!r}, {self.expiry_field!r})"


class MinLengthRule(CustomRule):
    """
    Value must have at least ``min_length`` characters.

    By default a blank value fails and surrounding whitespace is ignored.
    With ``allow_blank`` an empty value passes; with ``strip=False`` the raw
    length is measured.
    """

    def __init__(self, min_length: int, message: str, allow_blank: bool = False, strip: bool = True):
        self.min_length = min_length
        self.message = message
        self.allow_blank = allow_blank
        self.strip = strip

    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        if is_blank(value):
            if self.allow_blank:
                return FieldValidationResult.ok()
            return FieldValidationResult.fail(self.message)
        text = str(value).strip() if self.strip else str(value)
        if len(text) < self.min_length:
            return FieldValidationResult.fail(self.message)
        return FieldValidationResult.ok()


class PatternRule(CustomRule):
    """Non-empty values must fully match the pattern"""

    def __init__(self, pattern: str, message: str):
        self.pattern = re.compile(pattern)
        self.message = message

    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        if is_blank(value):
            return FieldValidationResult.ok()
        if self.pattern.fullmatch(str(value).strip()) is None:
            return FieldValidationResult.fail(self.message)
        return FieldValidationResult.ok()


# Plain decimal literal: no underscores, no inf/nan spellings
_DECIMAL_LITERAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class PositiveNumberRule(CustomRule):
    def __init__(self, message: str):
        self.message = message

    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        if is_blank(value):
            return FieldValidationResult.ok()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            number = value
        else:
            text = str(value).strip()
            if _DECIMAL_LITERAL.fullmatch(text) is None:
                return FieldValidationResult.fail(self.message)
            number = float(text)
        if number <= 0 or (isinstance(number, float) and not math.isfinite(number)):
            return FieldValidationResult.fail(self.message)
        return FieldValidationResult.ok()


class FunctionRule(CustomRule):
    """
    Adapt a plain ``fn(value, record)`` callable.

    The callable may return a FieldValidationResult, an ``(is_valid, error)``
    tuple, or a mapping with ``is_valid``/``isValid`` and ``error`` keys.
    """

    def __init__(self, fn: RuleCallable):
        self.fn = fn

    def evaluate(self, value: Any, record: Record) -> FieldValidationResult:
        outcome = self.fn(value, record)
        if isinstance(outcome, FieldValidationResult):
            return outcome
        if isinstance(outcome, tuple):
            is_valid, error = outcome
            return FieldValidationResult(bool(is_valid), None if is_valid else error)
        if isinstance(outcome, Mapping):
            is_valid = outcome.get("is_valid", outcome.get("isValid"))
            if is_valid is None:
                raise TypeError("Custom rule mapping must contain 'is_valid'")
            return FieldValidationResult(bool(is_valid), None if is_valid else outcome.get("error"))
        raise TypeError(f"Unsupported custom rule result: {type(outcome).__name__}")


def as_custom_rule(rule: Union[CustomRule, RuleCallable]) -> CustomRule:
    if isinstance(rule, CustomRule):
        return rule
    if callable(rule):
        return FunctionRule(rule)
    raise TypeError(f"Not a custom rule: {rule!r}")


def check_date_sequences(record: Record, pairs: Iterable[Tuple[str, str, str]]) -> List[str]:
    """
    Check every (start_field, expiry_field, message) pair against the record.

    Returns the messages of the violated pairs, in the order given.
    """
    errors = []
    for start_field, expiry_field, message in pairs:
        rule = DateSequenceRule(start_field, expiry_field, message)
        result = rule.evaluate(record.get(expiry_field), record)
        if not result.is_valid:
            errors.append(result.error)
    return errors


PIN_CODE_RULE = PatternRule(r"[0-9]{6}", "PIN code must be exactly 6 digits")

CUSTOMER_DATE_PAIRS = (
    ("AgreementDate", "AgreementExpiryDate", "Agreement Expiry Date cannot be before Agreement Date"),
    ("BGDate", "BGExpiryDate", "BG Expiry Date cannot be before BG Date"),
    ("PODate", "POExpiryDate", "PO Expiry Date cannot be before PO Date"),
)

DRIVER_DATE_PAIRS = (
    ("DriverLicenceIssueDate", "DriverLicenceExpiryDate", "Licence expiry date cannot be before issue date"),
)

VEHICLE_DATE_PAIRS = (
    ("VehicleInsuranceDate", "VehicleInsuranceExpiry", "Insurance expiry date cannot be before issue date"),
    ("VehicleFitnessCertificateIssue", "VehicleFitnessCertificateExpiry",
     "Fitness certificate expiry date cannot be before issue date"),
    ("VehiclePollutionDate", "VehiclePollutionExpiry", "Pollution expiry date cannot be before issue date"),
    ("StateTaxIssue", "StateTaxExpiry", "State tax expiry date cannot be before issue date"),
    ("NoEntryPassStartDate", "NoEntryPassExpiry", "No entry pass expiry date cannot be before start date"),
)

PROJECT_DATE_PAIRS = (
    ("StartDate", "EndDate", "Project End Date cannot be before Project Start Date"),
)


def date_sequence_rules(pairs: Iterable[Tuple[str, str, str]]):
    """Build a field -> DateSequenceRule map keyed by the expiry field"""
    return {expiry: DateSequenceRule(start, expiry, message) for start, expiry, message in pairs}
