"""
TMS Validation Rule Catalog
Static rule definitions for identification, bank and vehicle fields
"""
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Pattern


class RuleType(str, Enum):
    """Informational classification of a rule's content"""
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    ALPHABETIC = "alphabetic"
    EMAIL = "email"
    DATE = "date"


@dataclass(frozen=True)
class ErrorMessages:
    required: str
    invalid: str
    format: str


@dataclass(frozen=True)
class ValidationRule:
    """
    A named validation rule.

    A rule declares either an exact ``length`` or a ``min_length``/``max_length``
    range (or neither). ``pattern`` must match the whole normalised value.
    """
    key: str
    name: str
    pattern: Pattern
    type: RuleType
    format: str
    description: str
    error_messages: ErrorMessages
    length: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    uppercase: bool = False

    def __post_init__(self):
        if self.length is not None and (self.min_length is not None or self.max_length is not None):
            raise ValueError(f"Rule {self.key} declares both an exact length and a length range")

    def normalize(self, value: Any) -> str:
        """Trim the value and uppercase it for case-insensitive identifiers"""
        clean = str(value).strip()
        return clean.upper() if self.uppercase else clean

    def matches(self, clean_value: str) -> bool:
        return self.pattern.fullmatch(clean_value) is not None


def _rule(key: str, **kwargs) -> ValidationRule:
    messages = kwargs.pop("error_messages")
    return ValidationRule(
        key=key,
        pattern=re.compile(kwargs.pop("pattern")),
        error_messages=ErrorMessages(**messages),
        **kwargs
    )


_RULES: Dict[str, ValidationRule] = {
    "AADHAAR": _rule(
        "AADHAAR",
        name="Aadhaar Number",
        pattern=r"[0-9]{12}",
        length=12,
        type=RuleType.NUMERIC,
        format="XXXXXXXXXXXX",
        description="Must be exactly 12 digits",
        error_messages={
            "required": "Aadhaar number is required",
            "invalid": "Aadhaar must be exactly 12 digits",
            "format": "Aadhaar can only contain numbers",
        },
    ),
    "PAN": _rule(
        "PAN",
        name="PAN Number",
        pattern=r"[A-Z]{5}[0-9]{4}[A-Z]{1}",
        length=10,
        type=RuleType.ALPHANUMERIC,
        format="ABCDE1234F",
        description="5 letters + 4 digits + 1 letter",
        uppercase=True,
        error_messages={
            "required": "PAN number is required",
            "invalid": "PAN must be in format: ABCDE1234F (5 letters + 4 digits + 1 letter)",
            "format": "PAN format is incorrect",
        },
    ),
    # Structural check only; the trailing checksum character is not verified
    "GST": _rule(
        "GST",
        name="GST Number",
        pattern=r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}",
        length=15,
        type=RuleType.ALPHANUMERIC,
        format="22AAAAA0000A1Z5",
        description="15 characters GST format",
        uppercase=True,
        error_messages={
            "required": "GST number is required",
            "invalid": "GST must be in valid 15-character format",
            "format": "GST format is incorrect",
        },
    ),
    "MOBILE": _rule(
        "MOBILE",
        name="Mobile Number",
        pattern=r"[6-9][0-9]{9}",
        length=10,
        type=RuleType.NUMERIC,
        format="9XXXXXXXXX",
        description="10 digits starting with 6-9",
        error_messages={
            "required": "Mobile number is required",
            "invalid": "Mobile number must be 10 digits starting with 6-9",
            "format": "Invalid mobile number format",
        },
    ),
    "EMAIL": _rule(
        "EMAIL",
        name="Email Address",
        pattern=r"[^\s@]+@[^\s@]+\.[^\s@]+",
        type=RuleType.EMAIL,
        format="user@domain.com",
        description="Valid email format",
        error_messages={
            "required": "Email address is required",
            "invalid": "Please enter a valid email address",
            "format": "Email format is incorrect",
        },
    ),
    "ACCOUNT_NUMBER": _rule(
        "ACCOUNT_NUMBER",
        name="Account Number",
        pattern=r"[0-9]{9,18}",
        min_length=9,
        max_length=18,
        type=RuleType.NUMERIC,
        format="XXXXXXXXXXXXXXXXXX",
        description="9-18 digits",
        error_messages={
            "required": "Account number is required",
            "invalid": "Account number must be 9-18 digits",
            "format": "Account number can only contain numbers",
        },
    ),
    "IFSC_CODE": _rule(
        "IFSC_CODE",
        name="IFSC Code",
        pattern=r"[A-Z]{4}0[A-Z0-9]{6}",
        length=11,
        type=RuleType.ALPHANUMERIC,
        format="SBIN0001234",
        description="4 letters + 0 + 6 alphanumeric",
        uppercase=True,
        error_messages={
            "required": "IFSC code is required",
            "invalid": "IFSC must be in format: SBIN0001234 (4 letters + 0 + 6 alphanumeric)",
            "format": "IFSC format is incorrect",
        },
    ),
    "BANK_NAME": _rule(
        "BANK_NAME",
        name="Bank Name",
        pattern=r"[A-Za-z\s&.-]+",
        min_length=2,
        max_length=100,
        type=RuleType.ALPHABETIC,
        format="State Bank of India",
        description="Letters, spaces, &, ., - allowed",
        error_messages={
            "required": "Bank name is required",
            "invalid": "Bank name can only contain letters, spaces, &, ., -",
            "format": "Invalid bank name format",
        },
    ),
    "BRANCH_NAME": _rule(
        "BRANCH_NAME",
        name="Branch Name",
        pattern=r"[A-Za-z0-9\s&.,-]+",
        min_length=2,
        max_length=100,
        type=RuleType.ALPHANUMERIC,
        format="Main Branch, Delhi",
        description="Letters, numbers, spaces, &, ., , - allowed",
        error_messages={
            "required": "Branch name is required",
            "invalid": "Branch name can only contain letters, numbers, spaces, &, ., , -",
            "format": "Invalid branch name format",
        },
    ),
    "ACCOUNT_HOLDER_NAME": _rule(
        "ACCOUNT_HOLDER_NAME",
        name="Account Holder Name",
        pattern=r"[A-Za-z\s.]+",
        min_length=2,
        max_length=100,
        type=RuleType.ALPHABETIC,
        format="John Doe",
        description="Letters, spaces, . allowed",
        error_messages={
            "required": "Account holder name is required",
            "invalid": "Account holder name can only contain letters, spaces, .",
            "format": "Invalid account holder name format",
        },
    ),
    "DATE_DDMMYYYY": _rule(
        "DATE_DDMMYYYY",
        name="Date",
        pattern=r"[0-9]{8}",
        length=8,
        type=RuleType.DATE,
        format="DDMMYYYY",
        description="Date in DDMMYYYY format",
        error_messages={
            "required": "Date is required",
            "invalid": "Date must be exactly 8 digits in DDMMYYYY format",
            "format": "Date format is incorrect",
        },
    ),
    "VEHICLE_CODE": _rule(
        "VEHICLE_CODE",
        name="Vehicle Code",
        pattern=r"[A-Z0-9]{8,20}",
        min_length=8,
        max_length=20,
        type=RuleType.ALPHANUMERIC,
        format="CUSPROLOCDC001",
        description="Auto-generated unique code",
        error_messages={
            "required": "Vehicle code is required",
            "invalid": "Vehicle code must be 8-20 alphanumeric characters",
            "format": "Vehicle code format is incorrect",
        },
    ),
    "VEHICLE_NUMBER": _rule(
        "VEHICLE_NUMBER",
        name="Vehicle Number",
        pattern=r"[A-Z]{2}[0-9]{1,2}[A-Z]{1,2}[0-9]{4}",
        type=RuleType.ALPHANUMERIC,
        format="MH12AB1234",
        description="Indian vehicle registration format",
        error_messages={
            "required": "Vehicle number is required",
            "invalid": "Vehicle number must be in format AB12CD3456",
            "format": "Vehicle number format is incorrect",
        },
    ),
    "ENGINE_NUMBER": _rule(
        "ENGINE_NUMBER",
        name="Engine Number",
        pattern=r"[A-Z0-9]{6,20}",
        min_length=6,
        max_length=20,
        type=RuleType.ALPHANUMERIC,
        format="ABC123DEF456",
        description="Engine identification number",
        error_messages={
            "required": "Engine number is required",
            "invalid": "Engine number must be 6-20 alphanumeric characters",
            "format": "Engine number format is incorrect",
        },
    ),
    "CHASSIS_NUMBER": _rule(
        "CHASSIS_NUMBER",
        name="Chassis Number",
        pattern=r"[A-Z0-9]{17}",
        length=17,
        type=RuleType.ALPHANUMERIC,
        format="1HGBH41JXMN109186",
        description="Vehicle Identification Number (VIN)",
        error_messages={
            "required": "Chassis number is required",
            "invalid": "Chassis number must be exactly 17 alphanumeric characters",
            "format": "Chassis number format is incorrect",
        },
    ),
}

# Read-only view; the catalog is never mutated after import
VALIDATION_RULES: Mapping[str, ValidationRule] = MappingProxyType(_RULES)


def get_rule(rule_key: str) -> Optional[ValidationRule]:
    """Look up a rule by its exact catalog key"""
    return VALIDATION_RULES.get(rule_key)


def get_rule_info(rule_key: str) -> Optional[Dict[str, Any]]:
    """Rule information for UI display, or None for unknown keys"""
    rule = get_rule(rule_key)
    if rule is None:
        return None
    return {
        "key": rule.key,
        "name": rule.name,
        "format": rule.format,
        "description": rule.description,
        "max_length": rule.length if rule.length is not None else rule.max_length,
        "type": rule.type.value,
    }


_DIGITS_ONLY = {"AADHAAR", "MOBILE", "ACCOUNT_NUMBER"}
_TITLE_WORDS = {"BANK_NAME", "BRANCH_NAME", "ACCOUNT_HOLDER_NAME"}


def format_value(value: Any, rule_key: str) -> Any:
    """Format a value for display according to its rule"""
    if value is None or value == "":
        return value
    rule = get_rule(rule_key)
    if rule is None:
        return value

    clean = str(value).strip()
    if rule.uppercase:
        return clean.upper()
    if rule_key in _DIGITS_ONLY:
        return re.sub(r"[^0-9]", "", clean)
    if rule_key in _TITLE_WORDS:
        return re.sub(r"\b\w", lambda m: m.group(0).upper(), clean)
    return clean
