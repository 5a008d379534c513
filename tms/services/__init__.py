"""
TMS Business Services
"""
from .customer_code import CustomerCodeService, generate_abbreviation, next_customer_code
from .vehicle_code import generate_vehicle_code, vehicle_code_for

__all__ = [
    "CustomerCodeService",
    "generate_abbreviation",
    "next_customer_code",
    "generate_vehicle_code",
    "vehicle_code_for",
]
