"""
TMS Validation Engine
"""
from .bulk import sanitize_data, validate_bulk_data
from .custom_rules import (
    CustomRule,
    DateSequenceRule,
    FunctionRule,
    MinLengthRule,
    PatternRule,
    PositiveNumberRule,
    check_date_sequences,
)
from .field_validator import validate_field, validate_real_time
from .form_validator import FormValidator, validate_complete_form
from .modules import FormModule, get_module_config, resolve_module
from .results import (
    BulkValidationResult,
    ErrorType,
    FieldValidationResult,
    FormValidationResult,
    RealTimeValidationResult,
)
from .rules import VALIDATION_RULES, format_value, get_rule, get_rule_info
from .summary import generate_error_summary

__all__ = [
    "BulkValidationResult",
    "CustomRule",
    "DateSequenceRule",
    "ErrorType",
    "FieldValidationResult",
    "FormModule",
    "FormValidationResult",
    "FormValidator",
    "FunctionRule",
    "MinLengthRule",
    "PatternRule",
    "PositiveNumberRule",
    "RealTimeValidationResult",
    "VALIDATION_RULES",
    "check_date_sequences",
    "format_value",
    "generate_error_summary",
    "get_module_config",
    "get_rule",
    "get_rule_info",
    "resolve_module",
    "sanitize_data",
    "validate_bulk_data",
    "validate_complete_form",
    "validate_field",
    "validate_real_time",
]
