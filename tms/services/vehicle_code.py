"""
TMS Vehicle Code Service
Composes vehicle codes from the owning customer, project, location, DC/hub
and vendor (e.g. "CUSPROLOCDC" + vendor + 4-digit suffix)
"""
import re
import time
from typing import Any, Mapping, Optional

from .customer_code import generate_abbreviation

_NON_CODE_CHARS = re.compile(r"[^A-Z0-9]")

# (part, max length, fallback)
VEHICLE_CODE_PARTS = (
    ("customer", 3, "CUS"),
    ("project", 3, "PRJ"),
    ("location", 3, "LOC"),
    ("dc_hub", 2, "DC"),
    ("vendor", 3, "VEN"),
)


def _code_part(name: Any, max_length: int, fallback: str) -> str:
    text = None if name is None else str(name)
    part = _NON_CODE_CHARS.sub("", generate_abbreviation(text, max_length, fallback).upper())
    return part or fallback


def timestamp_suffix() -> str:
    """Last four digits of the current time in milliseconds"""
    return f"{int(time.time() * 1000) % 10000:04d}"


def generate_vehicle_code(
    customer_name: Optional[str] = None,
    project_name: Optional[str] = None,
    location_name: Optional[str] = None,
    dc_hub: Optional[str] = None,
    vendor_name: Optional[str] = None,
    suffix: Optional[str] = None,
) -> str:
    """
    Build a vehicle code.

    Each name is abbreviated like a customer code prefix and reduced to
    ``A-Z0-9``; a missing or unusable name takes its part's fallback. With
    the default suffix the result always satisfies the VEHICLE_CODE rule.

    Args:
        suffix: Uniqueness suffix; defaults to :func:`timestamp_suffix`
    """
    names = (customer_name, project_name, location_name, dc_hub, vendor_name)
    parts = [
        _code_part(name, max_length, fallback)
        for name, (_, max_length, fallback) in zip(names, VEHICLE_CODE_PARTS)
    ]
    if suffix is None:
        suffix = timestamp_suffix()
    return "".join(parts) + _NON_CODE_CHARS.sub("", str(suffix).upper())


def vehicle_code_for(record: Mapping[str, Any], suffix: Optional[str] = None) -> str:
    """
    Vehicle code from a form record.

    The customer part prefers ``CustomerName`` over ``MasterCustomerName``.
    """
    return generate_vehicle_code(
        customer_name=record.get("CustomerName") or record.get("MasterCustomerName"),
        project_name=record.get("ProjectName"),
        location_name=record.get("LocationName"),
        dc_hub=record.get("DCHub"),
        vendor_name=record.get("vendor_name") or record.get("VendorName"),
        suffix=suffix,
    )
