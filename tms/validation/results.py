"""
TMS Validation Results
Result containers produced by the field and form validators
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

# Fields absent from a module's priority order sort after every listed field
UNLISTED_PRIORITY = 999


class ErrorType(str, Enum):
    """Validation error categories"""
    REQUIRED = "required"
    FORMAT = "format"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FieldValidationResult:
    """Outcome of validating one value against one rule"""
    is_valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "FieldValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> "FieldValidationResult":
        return cls(is_valid=False, error=error)


@dataclass(frozen=True)
class RealTimeValidationResult(FieldValidationResult):
    """Field result with an as-you-type format hint"""
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class FieldError:
    """One entry in a form's ordered error list"""
    field: str
    display_name: str
    error: str
    type: ErrorType
    priority: int


@dataclass(frozen=True)
class ErrorCounts:
    total_errors: int = 0
    required_field_errors: int = 0
    format_errors: int = 0
    custom_errors: int = 0


@dataclass
class FormValidationResult:
    """Aggregate result of validating a complete form"""
    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)
    error_list: List[FieldError] = field(default_factory=list)
    first_invalid_field: Optional[str] = None
    summary: ErrorCounts = field(default_factory=ErrorCounts)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for entry in data["error_list"]:
            entry["type"] = entry["type"].value
        return data


@dataclass(frozen=True)
class ErrorSection:
    title: str
    errors: List[str]


@dataclass(frozen=True)
class ErrorSummary:
    """Grouped, presentation-ready view of a form's errors"""
    title: str
    subtitle: str
    sections: List[ErrorSection]
    first_field: Optional[str]
    total_count: int


@dataclass
class BulkValidationResult:
    """Per-row outcome of validating an uploaded batch"""
    is_valid: bool
    errors: List[Dict[str, Any]] = field(default_factory=list)
    valid_data: List[Dict[str, Any]] = field(default_factory=list)
