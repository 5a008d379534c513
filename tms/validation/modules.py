"""
TMS Form Modules
Per-entity required fields, field-to-rule mappings, priority orders and
registered custom rules
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from tms.core.exceptions import UnknownRuleError

from .custom_rules import (
    CUSTOMER_DATE_PAIRS,
    DRIVER_DATE_PAIRS,
    PIN_CODE_RULE,
    PROJECT_DATE_PAIRS,
    VEHICLE_DATE_PAIRS,
    CustomRule,
    MinLengthRule,
    PositiveNumberRule,
    date_sequence_rules,
)
from .rules import VALIDATION_RULES

logger = logging.getLogger(__name__)


class FormModule(str, Enum):
    """Business entities with a validated form"""
    VENDOR = "vendor"
    CUSTOMER = "customer"
    DRIVER = "driver"
    EMPLOYEE = "employee"
    VEHICLE = "vehicle"
    PROJECT = "project"


@dataclass(frozen=True)
class ModuleConfig:
    """
    Static validation tables for one module.

    Field names keep each form's own convention: PascalCase for customer,
    driver and project records, snake_case for vendor and vehicle records.
    """
    required_fields: Tuple[str, ...] = ()
    field_mapping: Mapping[str, str] = field(default_factory=dict)
    priority_order: Tuple[str, ...] = ()
    custom_rules: Mapping[str, CustomRule] = field(default_factory=dict)

    def __post_init__(self):
        for field_name, rule_key in self.field_mapping.items():
            if rule_key not in VALIDATION_RULES:
                raise UnknownRuleError(rule_key, field_name)
        # Freeze the tables
        object.__setattr__(self, "field_mapping", MappingProxyType(dict(self.field_mapping)))
        object.__setattr__(self, "custom_rules", MappingProxyType(dict(self.custom_rules)))

    def priority_of(self, field_name: str) -> Optional[int]:
        try:
            return self.priority_order.index(field_name)
        except ValueError:
            return None


EMPTY_MODULE = ModuleConfig()

BANK_FIELD_MAPPING = {
    "account_holder_name": "ACCOUNT_HOLDER_NAME",
    "account_number": "ACCOUNT_NUMBER",
    "ifsc_code": "IFSC_CODE",
    "bank_name": "BANK_NAME",
    "branch_name": "BRANCH_NAME",
}

BANK_FIELD_ORDER = ("account_holder_name", "account_number", "ifsc_code", "bank_name", "branch_name")


MODULE_CONFIGS: Mapping[FormModule, ModuleConfig] = MappingProxyType({
    FormModule.VENDOR: ModuleConfig(
        required_fields=("vendor_name", "vendor_mobile_no"),
        field_mapping={
            "vendor_aadhar": "AADHAAR",
            "vendor_pan": "PAN",
            "vendor_company_gst": "GST",
            "vendor_mobile_no": "MOBILE",
            "vendor_alternate_no": "MOBILE",
            "vendor_email": "EMAIL",
            **BANK_FIELD_MAPPING,
        },
        priority_order=(
            "vendor_name", "vendor_mobile_no", "vendor_address",
            "house_flat_no", "street_locality", "city", "state", "pin_code",
            "vendor_alternate_no", "vendor_aadhar", "vendor_pan",
            "vendor_company_name", "vendor_company_udhyam", "vendor_company_pan", "vendor_company_gst",
        ) + BANK_FIELD_ORDER,
        custom_rules={
            "vendor_name": MinLengthRule(
                2, "Vendor name must be at least 2 characters", allow_blank=True, strip=False
            ),
            "pin_code": PIN_CODE_RULE,
        },
    ),
    FormModule.CUSTOMER: ModuleConfig(
        required_fields=("Name", "MasterCustomerName"),
        field_mapping={
            "CustomerAadhar": "AADHAAR",
            "CustomerPAN": "PAN",
            "GSTNo": "GST",
            "CustomerMobileNo": "MOBILE",
            "AlternateMobileNo": "MOBILE",
            "CustomerEmail": "EMAIL",
            **BANK_FIELD_MAPPING,
        },
        priority_order=(
            "Name", "MasterCustomerName", "CustomerMobileNo",
            "house_flat_no", "street_locality", "city", "state", "pin_code",
            "CustomerCity", "CustomerState", "CustomerPinCode",
            "AlternateMobileNo", "CustomerEmail", "GSTNo",
        ) + BANK_FIELD_ORDER,
        custom_rules={
            "Name": MinLengthRule(2, "Company name must be at least 2 characters"),
            "MasterCustomerName": MinLengthRule(2, "Master customer name must be at least 2 characters"),
            "pin_code": PIN_CODE_RULE,
            **date_sequence_rules(CUSTOMER_DATE_PAIRS),
        },
    ),
    FormModule.DRIVER: ModuleConfig(
        required_fields=("DriverName", "DriverMobileNo", "DriverAddress"),
        field_mapping={
            "DriverAadhar": "AADHAAR",
            "DriverPAN": "PAN",
            "DriverMobileNo": "MOBILE",
            "DriverAlternateNo": "MOBILE",
            "DriverEmail": "EMAIL",
            **BANK_FIELD_MAPPING,
        },
        priority_order=(
            "DriverName", "DriverMobileNo", "DriverAddress",
            "DriverCity", "DriverState", "DriverPinCode",
            "DriverAlternateNo", "DriverEmail",
        ) + BANK_FIELD_ORDER,
        custom_rules=date_sequence_rules(DRIVER_DATE_PAIRS),
    ),
    FormModule.EMPLOYEE: ModuleConfig(
        field_mapping={
            "EmployeeAadhar": "AADHAAR",
            "EmployeePAN": "PAN",
            "EmployeeMobile": "MOBILE",
            "EmployeeEmail": "EMAIL",
            **BANK_FIELD_MAPPING,
        },
    ),
    FormModule.VEHICLE: ModuleConfig(
        required_fields=(
            "customer_id", "vendor_id", "vehicle_number", "engine_number", "chassis_number", "insurance_date",
        ),
        field_mapping={
            "vehicle_code": "VEHICLE_CODE",
            "vehicle_number": "VEHICLE_NUMBER",
            "engine_number": "ENGINE_NUMBER",
            "chassis_number": "CHASSIS_NUMBER",
            "insurance_date": "DATE_DDMMYYYY",
            "registration_date": "DATE_DDMMYYYY",
            "fitness_date": "DATE_DDMMYYYY",
            "permit_date": "DATE_DDMMYYYY",
        },
        priority_order=(
            "customer_id", "vendor_id", "project_id", "location_id", "dc_hub",
            "vehicle_code", "vehicle_number", "engine_number", "chassis_number",
            "vehicle_type", "vehicle_model", "vehicle_make", "vehicle_year",
            "insurance_date", "registration_date", "fitness_date", "permit_date",
            "vehicle_photos",
        ),
        custom_rules=date_sequence_rules(VEHICLE_DATE_PAIRS),
    ),
    FormModule.PROJECT: ModuleConfig(
        required_fields=("ProjectName", "CustomerID", "ProjectValue", "StartDate", "EndDate", "Status"),
        priority_order=("ProjectName", "CustomerID", "LocationID", "ProjectValue", "StartDate", "EndDate", "Status"),
        custom_rules={
            "ProjectValue": PositiveNumberRule("Project value must be a positive number"),
            **date_sequence_rules(PROJECT_DATE_PAIRS),
        },
    ),
})


FIELD_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    # Vendor
    "vendor_name": "Vendor Name",
    "vendor_mobile_no": "Vendor Mobile Number",
    "vendor_address": "Vendor Address",
    "vendor_aadhar": "Vendor Aadhaar",
    "vendor_pan": "Vendor PAN",
    "vendor_company_gst": "Company GST",
    "vendor_alternate_no": "Alternate Mobile Number",
    "vendor_email": "Vendor Email",
    # Bank block
    "account_holder_name": "Account Holder Name",
    "account_number": "Account Number",
    "ifsc_code": "IFSC Code",
    "bank_name": "Bank Name",
    "branch_name": "Branch Name",
    # Address block
    "house_flat_no": "House/Flat Number",
    "street_locality": "Street/Locality",
    "city": "City",
    "state": "State",
    "pin_code": "PIN Code",
    # Customer
    "Name": "Company Name",
    "MasterCustomerName": "Master Customer Name",
    "CustomerMobileNo": "Customer Mobile Number",
    "CustomerEmail": "Customer Email",
    "GSTNo": "GST Number",
    "AlternateMobileNo": "Alternate Mobile Number",
    "AgreementExpiryDate": "Agreement Expiry Date",
    "BGExpiryDate": "BG Expiry Date",
    "POExpiryDate": "PO Expiry Date",
    # Driver
    "DriverName": "Driver Name",
    "DriverMobileNo": "Driver Mobile Number",
    "DriverAddress": "Driver Address",
    "DriverAlternateNo": "Driver Alternate Number",
    "DriverLicenceExpiryDate": "Licence Expiry Date",
    # Vehicle
    "customer_id": "Customer",
    "vendor_id": "Vendor",
    "project_id": "Project",
    "location_id": "Location",
    "dc_hub": "DC/Hub",
    "vehicle_code": "Vehicle Code",
    "vehicle_number": "Vehicle Number",
    "engine_number": "Engine Number",
    "chassis_number": "Chassis Number",
    "vehicle_type": "Vehicle Type",
    "vehicle_model": "Vehicle Model",
    "vehicle_make": "Vehicle Make",
    "vehicle_year": "Vehicle Year",
    "insurance_date": "Insurance Date",
    "registration_date": "Registration Date",
    "fitness_date": "Fitness Date",
    "permit_date": "Permit Date",
    "vehicle_photos": "Vehicle Photos",
    # Project
    "ProjectName": "Project Name",
    "CustomerID": "Customer",
    "ProjectValue": "Project Value",
    "StartDate": "Project Start Date",
    "EndDate": "Project End Date",
    "Status": "Project Status",
})


def display_name(field_name: str) -> str:
    return FIELD_DISPLAY_NAMES.get(field_name, field_name)


def resolve_module(module: Union[FormModule, str]) -> Optional[FormModule]:
    """Map a module tag to its enum member, or None if it is not known"""
    if isinstance(module, FormModule):
        return module
    try:
        return FormModule(str(module).strip().lower())
    except ValueError:
        return None


def get_module_config(module: Union[FormModule, str]) -> ModuleConfig:
    """
    Return the tables for a module.

    Unknown modules get an empty configuration so that only caller-supplied
    custom validations run.
    """
    resolved = resolve_module(module)
    if resolved is None:
        logger.warning(f"Unknown form module '{module}'; using empty validation tables")
        return EMPTY_MODULE
    return MODULE_CONFIGS[resolved]

