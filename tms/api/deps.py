"""
API Dependencies
Common dependencies for API endpoints
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from tms.core.database import get_db
from tms.services.customer_code import CustomerCodeService


def get_customer_code_service(db: Session = Depends(get_db)) -> CustomerCodeService:
    """
    Customer code service bound to the request's database session.
    """
    return CustomerCodeService(db)
