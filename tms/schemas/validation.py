"""
TMS Validation Schemas
Pydantic models for the validation API
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from tms.validation.results import ErrorType


class RuleInfo(BaseModel):
    key: str
    name: str
    format: str
    description: str
    max_length: Optional[int] = None
    type: str


class FieldValidationRequest(BaseModel):
    """Single value to check against a catalog rule"""
    value: Any = Field(None, description="Raw form value")
    rule: str = Field(..., description="Catalog rule key, e.g. PAN")
    required: bool = False
    real_time: bool = Field(False, description="Return as-you-type progress and format hints")


class FieldValidationResponse(BaseModel):
    is_valid: bool
    error: Optional[str] = None
    suggestion: Optional[str] = None
    formatted_value: Any = Field(None, description="Display-formatted value when valid")


class FieldErrorSchema(BaseModel):
    field: str
    display_name: str
    error: str
    type: ErrorType
    priority: int


class ErrorCountsSchema(BaseModel):
    total_errors: int = 0
    required_field_errors: int = 0
    format_errors: int = 0
    custom_errors: int = 0


class ErrorSectionSchema(BaseModel):
    title: str
    errors: List[str]


class ErrorSummarySchema(BaseModel):
    title: str
    subtitle: str
    sections: List[ErrorSectionSchema]
    first_field: Optional[str] = None
    total_count: int


class FormValidationResponse(BaseModel):
    """
    Aggregate validation outcome for a form

    ``highlight_seconds`` tells the form layer how long to highlight the
    first invalid field after focusing it.
    """
    module: str
    is_valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)
    error_list: List[FieldErrorSchema] = Field(default_factory=list)
    first_invalid_field: Optional[str] = None
    summary: ErrorCountsSchema
    error_summary: Optional[ErrorSummarySchema] = None
    highlight_seconds: int


class BulkValidationRequest(BaseModel):
    rows: List[Dict[str, Any]] = Field(..., description="Records in upload order")


class BulkRowError(BaseModel):
    row: int = Field(..., ge=1, description="1-based row number")
    errors: Dict[str, str]


class BulkValidationResponse(BaseModel):
    module: str
    is_valid: bool
    total_rows: int
    errors: List[BulkRowError] = Field(default_factory=list)
    valid_data: List[Dict[str, Any]] = Field(default_factory=list)
