"""Split calculation utilities for itemized bills."""

import enum
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

import schemas
from utils.currency import format_amount


class OrphanPolicy(str, enum.Enum):
    """What happens to the price of an item nobody is assigned to."""
    EXCLUDE = "exclude"  # Counted in the total, allocated to nobody
    SPREAD = "spread"  # Split equally across all people


def round_currency(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for the integer part plus two decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        rounded = exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # float(Decimal("-0.00")) is -0.0
    return float(rounded) or 0.0


def is_zero_amount(value: float) -> bool:
    """True when the amount rounds to zero in currency units."""
    return round_currency(value) == 0


def calculate_subtotal(items: list[schemas.Item]) -> float:
    """Sum of all item prices. Negative prices (refund lines) net out."""
    return sum(item.price for item in items)


def find_orphaned_items(items: list[schemas.Item]) -> list[schemas.Item]:
    return [item for item in items if not item.assigned]


def _raw_item_totals(
    items: list[schemas.Item],
    people: list[schemas.Person],
    orphan_policy: OrphanPolicy
) -> dict[str, float]:
    # Keyed by name, so duplicate names collapse into one entry
    raw_totals = {person.name: 0.0 for person in people}

    for item in items:
        if item.assigned:
            share_per_person = item.price / len(item.assigned)
            for name in item.assigned:
                # Names with no matching person are dropped
                if name in raw_totals:
                    raw_totals[name] += share_per_person
        elif orphan_policy == OrphanPolicy.SPREAD and raw_totals:
            share_per_person = item.price / len(raw_totals)
            for name in raw_totals:
                raw_totals[name] += share_per_person

    return raw_totals


def _allocate(
    items: list[schemas.Item],
    people: list[schemas.Person],
    total: float,
    orphan_policy: OrphanPolicy
) -> dict[str, float]:
    person_totals = _raw_item_totals(items, people, orphan_policy)

    # Net effect of tax, service and other charges minus discount
    subtotal = calculate_subtotal(items)
    remaining = total - subtotal

    # With a zero subtotal there is no basis for proportions
    if not is_zero_amount(subtotal):
        for name, raw_total in person_totals.items():
            if raw_total != 0:
                person_totals[name] = raw_total + remaining * (raw_total / subtotal)

    return person_totals


def calculate_per_person_amounts(
    items: list[schemas.Item],
    people: list[schemas.Person],
    total: float,
    orphan_policy: OrphanPolicy = OrphanPolicy.EXCLUDE
) -> dict[str, float]:
    """
    Allocate `total` across people in proportion to their share of the items.

    Algorithm:
    1. Split each item's price equally among its assignees
    2. Sum each person's shares into their raw item total
    3. remaining = total - subtotal
    4. Give each person remaining * (raw item total / subtotal)
    5. Round every amount to 2 decimal places

    Every person appears in the result, with 0 if they have no items.
    """
    person_totals = _allocate(items, people, total, orphan_policy)
    return {name: round_currency(amount) for name, amount in person_totals.items()}


def calculate_split(
    split_input: schemas.SplitInput,
    orphan_policy: OrphanPolicy = OrphanPolicy.EXCLUDE
) -> schemas.SplitSummary:
    """Calculate the complete split summary. Inputs are not validated here."""
    subtotal = calculate_subtotal(split_input.items)
    after_discount = subtotal - split_input.discount
    total = (
        after_discount
        + split_input.tax_amount
        + split_input.service_amount
        + split_input.other_charges
    )

    per_person = calculate_per_person_amounts(
        split_input.items,
        split_input.people,
        total,
        orphan_policy
    )

    return schemas.SplitSummary(
        subtotal=subtotal,
        discount=split_input.discount,
        tax=split_input.tax_amount,
        service=split_input.service_amount,
        other_charges=split_input.other_charges,
        total=total,
        per_person=per_person
    )


def calculate_unallocated(
    split_input: schemas.SplitInput,
    orphan_policy: OrphanPolicy = OrphanPolicy.EXCLUDE
) -> float:
    """Portion of the total that no person's share covers, before rounding drift."""
    summary = calculate_split(split_input, orphan_policy)
    allocated = _allocate(split_input.items, split_input.people, summary.total, orphan_policy)
    return round_currency(summary.total - sum(allocated.values()))


def calculate_person_breakdowns(
    split_input: schemas.SplitInput,
    orphan_policy: OrphanPolicy = OrphanPolicy.EXCLUDE
) -> list[schemas.PersonBreakdown]:
    """Per-person detail: item share plus each charge's proportional share."""
    summary = calculate_split(split_input, orphan_policy)
    raw_totals = _raw_item_totals(split_input.items, split_input.people, orphan_policy)
    subtotal = summary.subtotal
    spread_orphans = orphan_policy == OrphanPolicy.SPREAD

    breakdowns = []
    for name, item_total in raw_totals.items():
        proportion = item_total / subtotal if not is_zero_amount(subtotal) else 0
        item_names = [
            item.name for item in split_input.items
            if name in item.assigned or (spread_orphans and not item.assigned)
        ]
        # Final total comes from the summary so both views always agree
        total = summary.per_person[name]
        tax_share = round_currency(summary.tax * proportion)
        service_share = round_currency(summary.service * proportion)
        other_share = round_currency(summary.other_charges * proportion)
        discount_share = round_currency(summary.discount * proportion)
        # Rounding remainder goes to the item share so the parts add up to the total
        item_share = round_currency(total - tax_share - service_share - other_share + discount_share)
        breakdowns.append(schemas.PersonBreakdown(
            name=name,
            items=item_names,
            item_total=item_share,
            tax_share=tax_share,
            service_share=service_share,
            other_share=other_share,
            discount_share=discount_share,
            total=total,
            formatted_total=format_amount(total, split_input.currency)
        ))

    return breakdowns


def detect_split_warnings(
    split_input: schemas.SplitInput,
    orphan_policy: OrphanPolicy = OrphanPolicy.EXCLUDE
) -> list[schemas.SplitWarning]:
    """Report conditions that degrade the split. These never reject a request."""
    warnings = []
    has_people = len(split_input.people) > 0

    for item in find_orphaned_items(split_input.items):
        if orphan_policy == OrphanPolicy.SPREAD and has_people:
            message = f"Item '{item.name}' has no assignees; its price is split equally among everyone"
        else:
            message = f"Item '{item.name}' has no assignees; its price is not allocated to anyone"
        warnings.append(schemas.SplitWarning(
            code="ORPHANED_ITEM",
            message=message,
            item=item.name,
            amount=item.price
        ))

    subtotal = calculate_subtotal(split_input.items)
    charges = (
        split_input.tax_amount,
        split_input.service_amount,
        split_input.other_charges,
        split_input.discount,
    )
    if is_zero_amount(subtotal) and any(charge != 0 for charge in charges):
        net_charges = (
            split_input.tax_amount
            + split_input.service_amount
            + split_input.other_charges
            - split_input.discount
        )
        warnings.append(schemas.SplitWarning(
            code="DEGENERATE_SPLIT",
            message="Item subtotal is zero; charges and discount cannot be distributed proportionally",
            amount=round_currency(net_charges)
        ))

    return warnings
