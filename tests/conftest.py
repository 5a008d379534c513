"""
Test Configuration and Fixtures
Shared testing infrastructure for TMS
"""
import os

# Keep the application engine off the on-disk default database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from tms.main import app
from tms.core.database import get_db, Base
from tms.models.customer import Customer

TEST_DATABASE_URL = "sqlite://"

# Create test engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test"""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database dependency override"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_customer_form() -> Dict[str, Any]:
    """A customer form that passes every check"""
    return {
        "Name": "ABC Corporation Ltd",
        "MasterCustomerName": "ABC Group",
        "CustomerMobileNo": "9876543210",
        "CustomerEmail": "Accounts@ABC.example.com",
        "GSTNo": "27abcde1234f1z5",
        "CustomerPAN": "abcde1234f",
        "AgreementDate": "2024-01-01",
        "AgreementExpiryDate": "2024-12-31",
    }


@pytest.fixture
def valid_vendor_form() -> Dict[str, Any]:
    return {
        "vendor_name": "Sharma Transport",
        "vendor_mobile_no": "9876543210",
        "vendor_alternate_no": "8123456789",
        "vendor_aadhar": "123456789012",
        "vendor_pan": "ABCDE1234F",
        "vendor_email": "sharma@example.com",
        "pin_code": "400001",
        "account_holder_name": "Ravi Sharma",
        "account_number": "123456789012",
        "ifsc_code": "SBIN0001234",
    }


class DatabaseTestHelper:
    """Helper class for database testing operations"""

    @staticmethod
    def create_customer(db: Session, code: str, name: str = "Existing Customer") -> Customer:
        customer = Customer(customer_code=code, name=name, master_customer_name=name)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer
