"""
TMS Aggregate Form Validator
Runs required, format and custom checks over a complete form record
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from tms.core.exceptions import CustomRuleError

from .custom_rules import CustomRule, RuleCallable, as_custom_rule
from .field_validator import is_blank, validate_field
from .modules import FormModule, ModuleConfig, display_name, get_module_config
from .results import (
    UNLISTED_PRIORITY,
    ErrorCounts,
    ErrorType,
    FieldError,
    FormValidationResult,
)

logger = logging.getLogger(__name__)

CustomValidations = Mapping[str, Union[CustomRule, RuleCallable]]


class FormValidator:
    """
    Validate a form record for one module.

    Checks run in three passes: required fields, then format rules for mapped
    fields, then custom rules. A field reports at most one error, from the
    earliest pass that failed it. The collected errors are ordered by the
    module's visual field order so the first entry is the top-most field.
    """

    def __init__(self, module: Union[FormModule, str], config: Optional[ModuleConfig] = None):
        self.module = module
        self.config = config if config is not None else get_module_config(module)

    def validate(
        self,
        form_data: Mapping[str, Any],
        custom_validations: Optional[CustomValidations] = None,
        apply_module_rules: bool = True,
    ) -> FormValidationResult:
        errors: Dict[str, str] = {}
        error_list: List[FieldError] = []

        def record(field_name: str, message: str, error_type: ErrorType) -> None:
            errors[field_name] = message
            error_list.append(FieldError(
                field=field_name,
                display_name=display_name(field_name),
                error=message,
                type=error_type,
                priority=self._priority(field_name),
            ))

        # 1. Required fields
        for field_name in self.config.required_fields:
            if is_blank(form_data.get(field_name)):
                record(field_name, f"{display_name(field_name)} is required", ErrorType.REQUIRED)

        # 2. Format rules
        for field_name, rule_key in self.config.field_mapping.items():
            if field_name in errors:
                continue
            value = form_data.get(field_name)
            if is_blank(value):
                continue
            result = validate_field(value, rule_key, field_name in self.config.required_fields)
            if not result.is_valid:
                record(field_name, result.error, ErrorType.FORMAT)

        # 3. Custom rules
        for field_name, rule in self._custom_rules(custom_validations, apply_module_rules).items():
            if field_name in errors:
                continue
            try:
                result = rule.evaluate(form_data.get(field_name), form_data)
            except Exception as e:
                logger.error(f"Custom validation for {self.module}.{field_name} failed", exc_info=True)
                raise CustomRuleError(field_name, e) from e
            if not result.is_valid:
                record(field_name, result.error or f"{display_name(field_name)} is invalid", ErrorType.CUSTOM)

        # Stable sort keeps discovery order among equal priorities
        error_list.sort(key=lambda entry: entry.priority)

        summary = ErrorCounts(
            total_errors=len(error_list),
            required_field_errors=sum(1 for e in error_list if e.type == ErrorType.REQUIRED),
            format_errors=sum(1 for e in error_list if e.type == ErrorType.FORMAT),
            custom_errors=sum(1 for e in error_list if e.type == ErrorType.CUSTOM),
        )

        logger.debug(f"Validated {self.module} form: {summary.total_errors} error(s)")

        return FormValidationResult(
            is_valid=not error_list,
            errors=errors,
            error_list=error_list,
            first_invalid_field=error_list[0].field if error_list else None,
            summary=summary,
        )

    def _priority(self, field_name: str) -> int:
        index = self.config.priority_of(field_name)
        return UNLISTED_PRIORITY if index is None else index

    def _custom_rules(
        self,
        custom_validations: Optional[CustomValidations],
        apply_module_rules: bool,
    ) -> Dict[str, CustomRule]:
        rules: Dict[str, CustomRule] = {}
        if apply_module_rules:
            rules.update(self.config.custom_rules)
        for field_name, rule in (custom_validations or {}).items():
            # A caller rule for an already registered field replaces it in place
            rules[field_name] = as_custom_rule(rule)
        return rules


def validate_complete_form(
    form_data: Mapping[str, Any],
    module: Union[FormModule, str],
    custom_validations: Optional[CustomValidations] = None,
    apply_module_rules: bool = True,
) -> FormValidationResult:
    """
    Validate a complete form for a module.

    Args:
        form_data: Flat record of field name -> value
        module: Module tag (vendor, customer, driver, employee, vehicle, project)
        custom_validations: Extra per-field rules or ``fn(value, form_data)`` callables
        apply_module_rules: Also run the module's registered custom rules

    Returns:
        FormValidationResult with errors sorted by visual field order

    Raises:
        CustomRuleError: a custom rule raised while evaluating
    """
    return FormValidator(module).validate(form_data, custom_validations, apply_module_rules)
