"""Splits router: calculate bill splits from requests or stored records."""

import logging
import os

from fastapi import APIRouter

import schemas
from utils.currency import CURRENCY_SYMBOLS
from utils.discounts import build_split_input
from utils.splits import (
    OrphanPolicy,
    calculate_person_breakdowns,
    calculate_split,
    calculate_unallocated,
    detect_split_warnings,
)
from utils.validation import validate_split_request


logger = logging.getLogger(__name__)

# How to treat items nobody is assigned to: "exclude" or "spread"
ORPHANED_ITEM_POLICY = OrphanPolicy(os.getenv("ORPHANED_ITEM_POLICY", "exclude"))


router = APIRouter(tags=["splits"])


def build_split_result(
    request: schemas.SplitRequest,
    orphan_policy: OrphanPolicy = ORPHANED_ITEM_POLICY
) -> schemas.SplitResult:
    """Validate a request and compute its summary, breakdown and warnings."""
    validate_split_request(request)
    split_input = build_split_input(request)

    summary = calculate_split(split_input, orphan_policy)
    warnings = detect_split_warnings(split_input, orphan_policy)
    for warning in warnings:
        logger.warning(f"{warning.code}: {warning.message}")

    logger.debug(
        f"Calculated split for {len(split_input.people)} people, "
        f"{len(split_input.items)} items, total {summary.total}"
    )

    return schemas.SplitResult(
        summary=summary,
        breakdown=calculate_person_breakdowns(split_input, orphan_policy),
        warnings=warnings,
        unallocated=calculate_unallocated(split_input, orphan_policy),
        orphan_policy=orphan_policy.value
    )


@router.post("/splits/calculate", response_model=schemas.SplitResult)
def calculate(request: schemas.SplitRequest):
    return build_split_result(request, ORPHANED_ITEM_POLICY)


@router.post("/splits/recalculate", response_model=schemas.SplitResult)
def recalculate(record: schemas.SavedSplitRecord):
    """Recompute a split from a stored record, e.g. when a shared link is opened."""
    return build_split_result(record.to_split_request(), ORPHANED_ITEM_POLICY)


@router.post("/splits/breakdown", response_model=list[schemas.PersonBreakdown])
def breakdown(request: schemas.SplitRequest):
    validate_split_request(request)
    split_input = build_split_input(request)
    return calculate_person_breakdowns(split_input, ORPHANED_ITEM_POLICY)


@router.get("/currencies", response_model=list[schemas.Currency])
def list_currencies():
    return [
        schemas.Currency(code=code, symbol=symbol)
        for code, symbol in CURRENCY_SYMBOLS.items()
    ]
