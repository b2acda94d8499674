"""
Shared fixtures: a temporary storage directory plus empty / seeded stores.
"""
import os

os.environ.setdefault("LOG_TO_FILE", "false")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402

from schemas import Document  # noqa: E402
from services.auth_service import AuthService  # noqa: E402
from services.data_store import DataStore  # noqa: E402
from services.storage import LocalStorage  # noqa: E402

JOINED = datetime(2024, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "rentease")


@pytest.fixture
def empty_store(storage):
    return DataStore(storage, seed_demo_data=False)


@pytest.fixture
def seeded_store(storage):
    return DataStore(storage)


@pytest.fixture
def auth(storage):
    return AuthService(storage)


@pytest.fixture
def tenant_payload():
    """Factory for TenantCreate-shaped dicts."""
    def _make(room_number=101, **overrides):
        payload = {
            "first_name": "Asha",
            "last_name": "Iyer",
            "email": "asha@example.com",
            "phone": "9000000001",
            "room_number": room_number,
            "documents": [
                Document(id="doc_a", type="address_proof", name="Lease.pdf", uploaded_at=JOINED),
                Document(id="doc_b", type="id_proof", name="Aadhaar.pdf", uploaded_at=JOINED),
            ],
            "join_date": JOINED,
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def payment_payload():
    """Factory for PaymentCreate-shaped dicts."""
    def _make(tenant_id="tenant_x", total_amount=5000, status="pending", **overrides):
        payload = {
            "tenant_id": tenant_id,
            "tenant_name": "Asha Iyer",
            "room_number": 101,
            "month": "January",
            "year": 2024,
            "total_amount": total_amount,
            "rent": total_amount,
            "status": status,
        }
        payload.update(overrides)
        return payload
    return _make
