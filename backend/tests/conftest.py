import pytest
from fastapi.testclient import TestClient

from main import app
import schemas


@pytest.fixture(scope="function")
def client():
    """Create a FastAPI TestClient for the app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def pizza_input():
    """Two people sharing one pizza, with tax and service."""
    return schemas.SplitInput(
        people=[schemas.Person(name="Alice"), schemas.Person(name="Bob")],
        items=[schemas.Item(name="Pizza", price=20, assigned=["Alice", "Bob"])],
        tax_amount=2,
        service_amount=1,
        other_charges=0,
        discount=0,
        currency="USD"
    )


@pytest.fixture
def split_payload():
    """JSON request body using the camelCase wire names."""
    return {
        "people": [{"name": "Alice"}, {"name": "Bob"}],
        "items": [{"name": "Pizza", "price": 20, "assigned": ["Alice", "Bob"]}],
        "taxAmount": 2,
        "serviceAmount": 1,
        "otherCharges": 0,
        "discount": {"type": "amount", "value": 0},
        "currency": "USD",
        "vendorName": "Luigi's",
        "billDate": "2025-06-01"
    }
