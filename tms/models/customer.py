"""
TMS Customer Master Model
SQLAlchemy model for customer records and their generated codes
"""
from sqlalchemy import Column, String, Integer, Date, DateTime
from sqlalchemy.sql import func
from tms.core.database import Base


class Customer(Base):
    """
    Customer Master Record

    ``customer_code`` is the abbreviation-plus-sequence code (e.g. ABC001);
    the unique constraint on it is what turns a concurrent generation race
    into an IntegrityError.
    """
    __tablename__ = "customer_master"

    customer_id = Column("CustomerID", Integer, primary_key=True, autoincrement=True)
    customer_code = Column("CustomerCode", String(20), nullable=False, unique=True, doc="Generated customer code")

    # Identity
    name = Column("Name", String(255), nullable=False, index=True, doc="Company name")
    master_customer_name = Column("MasterCustomerName", String(255), nullable=False, doc="Group/master customer")

    # Contact and tax
    mobile_no = Column("CustomerMobileNo", String(10), default='', doc="Primary mobile number")
    email = Column("CustomerEmail", String(255), default='', doc="Email address")
    gst_no = Column("GSTNo", String(15), default='', doc="GSTIN")
    pan = Column("CustomerPAN", String(10), default='', doc="PAN")

    # Agreement / bank guarantee / purchase order validity
    agreement_date = Column("AgreementDate", Date, doc="Agreement start")
    agreement_expiry_date = Column("AgreementExpiryDate", Date, doc="Agreement expiry")
    bg_date = Column("BGDate", Date, doc="Bank guarantee date")
    bg_expiry_date = Column("BGExpiryDate", Date, doc="Bank guarantee expiry")
    po_date = Column("PODate", Date, doc="Purchase order date")
    po_expiry_date = Column("POExpiryDate", Date, doc="Purchase order expiry")

    created_at = Column("CreatedAt", DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Customer(code='{self.customer_code}', name='{self.name}')>"
