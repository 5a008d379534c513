"""
TMS Bulk Validation
Sanitising and row-by-row validation of uploaded record batches
"""
import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .field_validator import is_blank
from .form_validator import CustomValidations, validate_complete_form
from .modules import FormModule, get_module_config
from .results import BulkValidationResult
from .rules import get_rule

logger = logging.getLogger(__name__)

_DIGITS_ONLY = {"AADHAAR", "MOBILE"}


def _sanitize_value(value: Any, rule_key: str) -> Any:
    clean = str(value).strip()
    rule = get_rule(rule_key)
    if rule is not None and rule.uppercase:
        return clean.upper()
    if rule_key in _DIGITS_ONLY:
        return re.sub(r"[^0-9]", "", clean)
    if rule_key == "EMAIL":
        return clean.lower()
    return clean


def sanitize_data(record: Mapping[str, Any], module: Union[FormModule, str]) -> Dict[str, Any]:
    """
    Normalise a record for storage.

    Only mapped, non-empty fields are touched; everything else is copied
    through unchanged. The input record is not modified.
    """
    sanitized = dict(record)
    for field_name, rule_key in get_module_config(module).field_mapping.items():
        value = sanitized.get(field_name)
        if is_blank(value):
            continue
        sanitized[field_name] = _sanitize_value(value, rule_key)
    return sanitized


def validate_bulk_data(
    rows: Iterable[Mapping[str, Any]],
    module: Union[FormModule, str],
    custom_validations: Optional[CustomValidations] = None,
) -> BulkValidationResult:
    """
    Validate a batch of records for one module.

    Args:
        rows: Records in upload order
        module: Module tag shared by every row
        custom_validations: Extra per-field rules applied to every row

    Returns:
        BulkValidationResult; ``errors`` carries 1-based row numbers and
        ``valid_data`` the sanitised rows that passed
    """
    result = BulkValidationResult(is_valid=True)

    for row_number, row in enumerate(rows, start=1):
        outcome = validate_complete_form(row, module, custom_validations)
        if outcome.is_valid:
            result.valid_data.append(sanitize_data(row, module))
        else:
            result.errors.append({"row": row_number, "errors": outcome.errors})

    result.is_valid = not result.errors
    logger.info(
        f"Bulk validation for {module}: {len(result.valid_data)} valid, {len(result.errors)} invalid row(s)"
    )
    return result
