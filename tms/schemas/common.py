"""
TMS Common Schemas
Shared Pydantic models for error responses
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ErrorResponse(BaseModel):
    """
    Standard error response model
    """
    error: str = Field(..., description="Error type or category")
    detail: Optional[str] = Field(None, description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error class")


class ValidationFailedResponse(BaseModel):
    """
    Body returned with HTTP 400 when a submitted form fails validation
    """
    success: bool = False
    message: str = "Validation failed"
    errors: Dict[str, str] = Field(default_factory=dict, description="Field -> error message")
    error_list: List[Dict[str, Any]] = Field(default_factory=list, description="Errors in form order")
    first_invalid_field: Optional[str] = None
    summary: Dict[str, int] = Field(default_factory=dict, description="Error counts by type")
    details: str = "Please check the highlighted fields and correct the errors"

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "message": "Validation failed",
                "errors": {"Name": "Company Name is required"},
                "error_list": [{
                    "field": "Name",
                    "display_name": "Company Name",
                    "error": "Company Name is required",
                    "type": "required",
                    "priority": 0,
                }],
                "first_invalid_field": "Name",
                "summary": {"total_errors": 1, "required_field_errors": 1, "format_errors": 0, "custom_errors": 0},
                "details": "Please check the highlighted fields and correct the errors",
            }
        }
    }
