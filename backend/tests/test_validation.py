import pytest
from fastapi import HTTPException

import schemas
from utils.validation import validate_item_assignments, validate_people, validate_split_request


def test_valid_request_passes():
    request = schemas.SplitRequest(
        people=[schemas.Person(name="Alice"), schemas.Person(name="Bob")],
        items=[
            schemas.Item(name="Pizza", price=20, assigned=["Alice", "Bob"]),
            schemas.Item(name="Mystery", price=15, assigned=[]),
        ]
    )
    validate_split_request(request)


def test_unknown_assignee_rejected():
    with pytest.raises(HTTPException) as exc:
        validate_item_assignments(
            [schemas.Item(name="Pizza", price=20, assigned=["Alice", "Zed"])],
            [schemas.Person(name="Alice")]
        )

    assert exc.value.status_code == 400
    assert "Zed" in exc.value.detail
    assert "Pizza" in exc.value.detail


def test_duplicate_person_rejected():
    with pytest.raises(HTTPException) as exc:
        validate_people([schemas.Person(name="Alice"), schemas.Person(name="Alice")])

    assert exc.value.status_code == 400
    assert exc.value.detail == "Duplicate person name 'Alice'"


def test_blank_person_rejected():
    with pytest.raises(HTTPException) as exc:
        validate_people([schemas.Person(name="  ")])

    assert exc.value.status_code == 400
