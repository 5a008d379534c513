"""
TMS Customer Code Service
Abbreviation-plus-sequence customer codes (e.g. "ABC Corporation Ltd" -> ABC001)
"""
import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tms.core.config import settings
from tms.core.exceptions import CustomerCodeCollisionError
from tms.models.customer import Customer
from tms.validation.custom_rules import parse_date
from tms.validation.field_validator import is_blank

logger = logging.getLogger(__name__)

_CORPORATE_SUFFIXES = re.compile(
    r"\b(Ltd|Limited|Pvt|Private|Company|Corp|Corporation|Inc|Incorporated|LLC|LLP)\b", re.IGNORECASE
)
_STOPWORDS = re.compile(r"\b(The|And|Of|For|In|On|At|By|With)\b", re.IGNORECASE)


def generate_abbreviation(name: Optional[str], max_length: int = 3, fallback: Optional[str] = None) -> str:
    """
    Derive a code prefix from a customer name.

    Corporate suffixes and common stopwords are dropped first. A single
    remaining word contributes its leading characters; several words
    contribute their initials (at most ``max_length`` of them). Names with
    nothing left use ``fallback`` (CUSTOMER_CODE_FALLBACK_PREFIX by default).
    """
    if fallback is None:
        fallback = settings.CUSTOMER_CODE_FALLBACK_PREFIX
    if not name or not name.strip():
        return fallback

    clean_name = _STOPWORDS.sub("", _CORPORATE_SUFFIXES.sub("", name)).strip()
    words = clean_name.split()

    if not words:
        return fallback
    if len(words) == 1:
        return words[0][:max_length].upper()
    return "".join(word[0] for word in words[:max_length]).upper()


def next_customer_code(prefix: str, existing_codes: Iterable[str], width: int = 3) -> str:
    """
    Next code in the prefix's sequence.

    Only codes of the form ``<prefix><digits>`` count towards the sequence.
    The number is not reserved: callers must handle a collision on insert.
    """
    highest = 0
    for code in existing_codes:
        if not code or not code.startswith(prefix):
            continue
        suffix = code[len(prefix):]
        if suffix.isdigit() and suffix.isascii():
            highest = max(highest, int(suffix))
    return f"{prefix}{str(highest + 1).zfill(width)}"


# Form field -> Customer attribute
_CUSTOMER_FIELDS = {
    "Name": "name",
    "MasterCustomerName": "master_customer_name",
    "CustomerMobileNo": "mobile_no",
    "CustomerEmail": "email",
    "GSTNo": "gst_no",
    "CustomerPAN": "pan",
}

_CUSTOMER_DATES = {
    "AgreementDate": "agreement_date",
    "AgreementExpiryDate": "agreement_expiry_date",
    "BGDate": "bg_date",
    "BGExpiryDate": "bg_expiry_date",
    "PODate": "po_date",
    "POExpiryDate": "po_expiry_date",
}


class CustomerCodeService:
    """
    Customer code generation and customer creation
    """

    def __init__(self, db: Session):
        self.db = db

    def existing_codes(self, prefix: str) -> List[str]:
        rows = self.db.query(Customer.customer_code).filter(
            Customer.customer_code.like(f"{prefix}%")
        ).all()
        return [row[0] for row in rows]

    def generate_code(self, name: Optional[str], exclude: Iterable[str] = ()) -> str:
        """
        Candidate code for a customer name.

        Args:
            name: Customer display name
            exclude: Codes already known to be taken (e.g. from a failed insert)
        """
        prefix = generate_abbreviation(name, settings.CUSTOMER_CODE_PREFIX_LENGTH)
        codes = self.existing_codes(prefix) + list(exclude)
        return next_customer_code(prefix, codes, settings.CUSTOMER_CODE_NUMBER_WIDTH)

    def get_by_code(self, code: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.customer_code == code).first()

    def create_customer(self, record: Mapping[str, Any]) -> Customer:
        """
        Insert a customer, generating its code when none is supplied.

        A generated code that collides on insert is regenerated, up to
        CUSTOMER_CODE_MAX_ATTEMPTS times. A caller-supplied code is tried once.

        Raises:
            CustomerCodeCollisionError: the code could not be inserted
        """
        explicit_code = record.get("CustomerCode")
        if not is_blank(explicit_code):
            return self._insert(record, str(explicit_code).strip(), attempt=1)

        name = record.get("Name") or record.get("MasterCustomerName")
        max_attempts = settings.CUSTOMER_CODE_MAX_ATTEMPTS
        taken: Set[str] = set()
        code = None

        for attempt in range(1, max_attempts + 1):
            code = self.generate_code(name, exclude=taken)
            try:
                return self._insert(record, code, attempt)
            except CustomerCodeCollisionError:
                logger.warning(f"Customer code {code} taken on attempt {attempt}/{max_attempts}; retrying")
                taken.add(code)

        logger.error(f"Could not allocate a customer code for '{name}' after {max_attempts} attempts")
        raise CustomerCodeCollisionError(code, attempts=max_attempts)

    def _insert(self, record: Mapping[str, Any], code: str, attempt: int) -> Customer:
        customer = Customer(customer_code=code, **self._column_values(record))
        self.db.add(customer)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.get_by_code(code) is None:
                # Some other constraint failed
                raise
            raise CustomerCodeCollisionError(code, attempts=attempt) from e
        self.db.refresh(customer)
        logger.info(f"Created customer {code}")
        return customer

    @staticmethod
    def _column_values(record: Mapping[str, Any]) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for field_name, attribute in _CUSTOMER_FIELDS.items():
            value = record.get(field_name)
            if not is_blank(value):
                values[attribute] = str(value).strip()
        for field_name, attribute in _CUSTOMER_DATES.items():
            values[attribute] = parse_date(record.get(field_name))
        return values
