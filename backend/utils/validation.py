"""Validation utilities for split requests: people and item assignments."""

import logging

from fastapi import HTTPException

import schemas


logger = logging.getLogger(__name__)


def _reject(detail: str):
    logger.info(f"Rejected split request: {detail}")
    raise HTTPException(status_code=400, detail=detail)


def validate_people(people: list[schemas.Person]) -> None:
    """Person names identify people, so they must be present and unique."""
    seen = set()
    for person in people:
        if not person.name.strip():
            _reject("Person name cannot be blank")
        if person.name in seen:
            _reject(f"Duplicate person name '{person.name}'")
        seen.add(person.name)


def validate_item_assignments(items: list[schemas.Item], people: list[schemas.Person]) -> None:
    """Every assigned name must refer to a person in the split."""
    names = {person.name for person in people}
    for item in items:
        for name in item.assigned:
            if name not in names:
                _reject(f"Item '{item.name}' is assigned to unknown person '{name}'")


def validate_split_request(request: schemas.SplitRequest) -> None:
    """Validate people and assignments before calculating a split."""
    validate_people(request.people)
    validate_item_assignments(request.items, request.people)
