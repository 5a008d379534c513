"""
TMS Validation API Routes
Rule lookup, single-field, form and bulk validation endpoints
"""
from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException, status

from tms.core.config import settings
from tms.schemas.validation import (
    BulkValidationRequest,
    BulkValidationResponse,
    FieldValidationRequest,
    FieldValidationResponse,
    FormValidationResponse,
    RuleInfo,
)
from tms.validation import (
    VALIDATION_RULES,
    FormModule,
    format_value,
    generate_error_summary,
    get_rule_info,
    validate_bulk_data,
    validate_complete_form,
    validate_field,
    validate_real_time,
)

router = APIRouter()


@router.get("/rules", response_model=List[RuleInfo])
async def list_rules():
    """All catalog rules with their display hints"""
    return [get_rule_info(key) for key in VALIDATION_RULES]


@router.get("/rules/{rule_key}", response_model=RuleInfo)
async def get_rule(rule_key: str):
    """Display hints for one rule"""
    info = get_rule_info(rule_key)
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown validation rule: {rule_key}"
        )
    return info


@router.post("/field", response_model=FieldValidationResponse)
async def validate_single_field(request: FieldValidationRequest):
    """
    Validate one value against a rule

    With ``real_time`` set, partial input gets progress messages and a
    format suggestion instead of a flat rejection.
    """
    if request.real_time:
        result = validate_real_time(request.value, request.rule, request.required)
        suggestion = result.suggestion
    else:
        result = validate_field(request.value, request.rule, request.required)
        suggestion = None

    return FieldValidationResponse(
        is_valid=result.is_valid,
        error=result.error,
        suggestion=suggestion,
        formatted_value=format_value(request.value, request.rule) if result.is_valid else None,
    )


@router.post("/forms/{module}", response_model=FormValidationResponse)
async def validate_form(module: FormModule, form_data: Dict[str, Any] = Body(...)):
    """
    Validate a complete form for a module

    Always answers 200; ``is_valid`` and ``error_list`` carry the outcome.
    """
    result = validate_complete_form(form_data, module)
    return FormValidationResponse(
        module=module.value,
        is_valid=result.is_valid,
        errors=result.errors,
        error_list=[asdict(entry) for entry in result.error_list],
        first_invalid_field=result.first_invalid_field,
        summary=asdict(result.summary),
        error_summary=None if result.is_valid else asdict(generate_error_summary(result.error_list)),
        highlight_seconds=settings.FIELD_HIGHLIGHT_SECONDS,
    )


@router.post("/forms/{module}/bulk", response_model=BulkValidationResponse)
async def validate_bulk(module: FormModule, request: BulkValidationRequest):
    """Validate a batch of records, reporting errors by 1-based row number"""
    if len(request.rows) > settings.BULK_VALIDATION_MAX_ROWS:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Bulk validation accepts at most {settings.BULK_VALIDATION_MAX_ROWS} rows"
        )

    result = validate_bulk_data(request.rows, module)
    return BulkValidationResponse(
        module=module.value,
        is_valid=result.is_valid,
        total_rows=len(request.rows),
        errors=result.errors,
        valid_data=result.valid_data,
    )
