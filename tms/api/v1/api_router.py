"""
Main API Router - Consolidates all module routes
"""
from fastapi import APIRouter

from tms.api.v1 import customers, validation

api_router = APIRouter()

# Validation engine
api_router.include_router(validation.router, prefix="/validation", tags=["validation"])

# Customer master
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
