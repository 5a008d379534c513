"""
TMS Database Models
"""
from .customer import Customer

__all__ = ["Customer"]
