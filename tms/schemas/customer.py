"""
TMS Customer Schemas
Pydantic models for customer master endpoints
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime


class CustomerResponse(BaseModel):
    """
    Customer master record as returned by the API
    """
    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    customer_code: str = Field(..., description="Generated customer code, e.g. ABC001")
    name: str
    master_customer_name: str
    mobile_no: Optional[str] = None
    email: Optional[str] = None
    gst_no: Optional[str] = None
    pan: Optional[str] = None
    agreement_date: Optional[date] = None
    agreement_expiry_date: Optional[date] = None
    bg_date: Optional[date] = None
    bg_expiry_date: Optional[date] = None
    po_date: Optional[date] = None
    po_expiry_date: Optional[date] = None
    created_at: Optional[datetime] = None


class NextCodeResponse(BaseModel):
    """
    Candidate code for a name; the number is not reserved
    """
    name: str
    prefix: str
    code: str
