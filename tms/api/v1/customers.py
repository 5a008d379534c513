"""
TMS Customer API Routes
Customer creation with generated codes
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from tms.api.deps import get_customer_code_service
from tms.core.config import settings
from tms.core.exceptions import ValidationError
from tms.schemas.common import ErrorResponse, ValidationFailedResponse
from tms.schemas.customer import CustomerResponse, NextCodeResponse
from tms.services.customer_code import CustomerCodeService, generate_abbreviation
from tms.validation import FormModule, sanitize_data, validate_complete_form

router = APIRouter()


@router.get("/next-code", response_model=NextCodeResponse)
async def next_code(
    name: str = Query("", description="Customer name to abbreviate"),
    service: CustomerCodeService = Depends(get_customer_code_service)
):
    """Preview the code the next customer with this name would receive"""
    return NextCodeResponse(
        name=name,
        prefix=generate_abbreviation(name, settings.CUSTOMER_CODE_PREFIX_LENGTH),
        code=service.generate_code(name),
    )


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationFailedResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
async def create_customer(
    customer: Dict[str, Any] = Body(...),
    service: CustomerCodeService = Depends(get_customer_code_service)
):
    """
    Create a customer

    The record is validated as a customer form first; a missing
    CustomerCode is generated from the company name.
    """
    result = validate_complete_form(customer, FormModule.CUSTOMER)
    if not result.is_valid:
        raise ValidationError("Validation failed", result=result)

    return service.create_customer(sanitize_data(customer, FormModule.CUSTOMER))


@router.get("/{customer_code}", response_model=CustomerResponse)
async def get_customer(
    customer_code: str,
    service: CustomerCodeService = Depends(get_customer_code_service)
):
    """Get customer by code"""
    customer = service.get_by_code(customer_code)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer {customer_code} not found"
        )
    return customer
