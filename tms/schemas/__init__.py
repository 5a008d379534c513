"""
TMS API Schemas
"""
