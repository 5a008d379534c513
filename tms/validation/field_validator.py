"""
TMS Single-Field Validator
Validates one value against a catalog rule, on submit or while typing
"""
from typing import Any

from .results import FieldValidationResult, RealTimeValidationResult
from .rules import ValidationRule, get_rule


def is_blank(value: Any) -> bool:
    """
    True when a form value counts as empty.

    None, False, whitespace-only strings and empty collections are blank.
    Uploaded files and any other object are treated as present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def _unknown_rule(rule_key: str) -> str:
    return f"Unknown validation rule: {rule_key}"


def _check_length(rule: ValidationRule, clean_value: str):
    """Return an error message for a length violation, or None"""
    size = len(clean_value)
    if rule.length is not None and size != rule.length:
        return rule.error_messages.invalid
    if rule.min_length is not None and size < rule.min_length:
        return f"{rule.name} must be at least {rule.min_length} characters"
    if rule.max_length is not None and size > rule.max_length:
        return f"{rule.name} cannot exceed {rule.max_length} characters"
    return None


def validate_field(value: Any, rule_key: str, required: bool = False) -> FieldValidationResult:
    """
    Validate a single value against a catalog rule.

    Length constraints are checked before the pattern so that a value of the
    wrong size gets the rule's own message rather than a generic mismatch.

    Args:
        value: Raw form value
        rule_key: Catalog key (AADHAAR, PAN, ...)
        required: Whether an empty value is an error

    Returns:
        FieldValidationResult
    """
    rule = get_rule(rule_key)
    if rule is None:
        return FieldValidationResult.fail(_unknown_rule(rule_key))

    if is_blank(value):
        if required:
            return FieldValidationResult.fail(rule.error_messages.required)
        return FieldValidationResult.ok()

    clean_value = rule.normalize(value)

    length_error = _check_length(rule, clean_value)
    if length_error:
        return FieldValidationResult.fail(length_error)

    if not rule.matches(clean_value):
        return FieldValidationResult.fail(rule.error_messages.invalid)

    return FieldValidationResult.ok()


def validate_real_time(value: Any, rule_key: str, required: bool = False) -> RealTimeValidationResult:
    """
    As-you-type variant of validate_field.

    Every non-final state carries a "Format: <example>" suggestion, and
    length-bounded rules report progress against the target length.
    """
    rule = get_rule(rule_key)
    if rule is None:
        return RealTimeValidationResult(is_valid=False, error=_unknown_rule(rule_key))

    suggestion = f"Format: {rule.format}"

    if is_blank(value):
        if required:
            return RealTimeValidationResult(False, rule.error_messages.required, suggestion)
        return RealTimeValidationResult(True, None, suggestion)

    clean_value = rule.normalize(value)
    size = len(clean_value)

    if rule.length is not None:
        if size < rule.length:
            return RealTimeValidationResult(
                False,
                f"{rule.name} must be {rule.length} characters ({size}/{rule.length})",
                suggestion,
            )
        if size > rule.length:
            return RealTimeValidationResult(
                False, f"{rule.name} cannot exceed {rule.length} characters", suggestion
            )
    else:
        if rule.min_length is not None and size < rule.min_length:
            return RealTimeValidationResult(
                False,
                f"{rule.name} must be at least {rule.min_length} characters ({size}/{rule.min_length})",
                suggestion,
            )
        if rule.max_length is not None and size > rule.max_length:
            return RealTimeValidationResult(
                False, f"{rule.name} cannot exceed {rule.max_length} characters", suggestion
            )

    if not rule.matches(clean_value):
        return RealTimeValidationResult(False, rule.error_messages.invalid, suggestion)

    return RealTimeValidationResult(True, None, None)
