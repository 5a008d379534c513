"""
TMS Validation
Form validation engine for the Transportation Management System
"""

__version__ = "1.0.0"
