import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from utils.currency import CURRENCY_SYMBOLS


def _require_finite(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("Amount must be a finite number")
    return v


def _require_supported_currency(v: str) -> str:
    if v not in CURRENCY_SYMBOLS:
        raise ValueError(f"Currency must be one of {list(CURRENCY_SYMBOLS)}")
    return v


class CamelModel(BaseModel):
    """Base for all schemas: snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Person(CamelModel):
    name: str


class Item(CamelModel):
    name: str
    price: float  # Total price in major units, net of item-specific discounts
    assigned: list[str] = []  # Person names sharing this item

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        return _require_finite(v)


# Discount variants, resolved to a flat amount before calculation
class PercentDiscount(CamelModel):
    type: Literal["percent"] = "percent"
    value: float

    @field_validator('value')
    @classmethod
    def validate_value(cls, v):
        _require_finite(v)
        if v < 0 or v > 100:
            raise ValueError("Percent discount must be between 0 and 100")
        return v


class AmountDiscount(CamelModel):
    type: Literal["amount"] = "amount"
    value: float = 0

    @field_validator('value')
    @classmethod
    def validate_value(cls, v):
        return _require_finite(v)


Discount = Annotated[Union[PercentDiscount, AmountDiscount], Field(discriminator="type")]


class SplitInput(CamelModel):
    """Calculator input. `discount` is already a flat monetary amount."""
    people: list[Person] = []
    items: list[Item] = []
    tax_amount: float = 0
    service_amount: float = 0
    other_charges: float = 0
    discount: float = 0
    currency: str = "USD"
    vendor_name: Optional[str] = None
    bill_date: Optional[str] = None

    @field_validator('tax_amount', 'service_amount', 'other_charges', 'discount')
    @classmethod
    def validate_amounts(cls, v):
        return _require_finite(v)


class SplitRequest(CamelModel):
    people: list[Person] = []
    items: list[Item] = []
    tax_amount: float = 0
    service_amount: float = 0
    other_charges: float = 0
    discount: Discount = AmountDiscount()
    currency: str = "USD"
    vendor_name: Optional[str] = None
    bill_date: Optional[str] = None

    @field_validator('tax_amount', 'service_amount', 'other_charges')
    @classmethod
    def validate_amounts(cls, v):
        return _require_finite(v)

    @field_validator('currency')
    @classmethod
    def validate_currency(cls, v):
        return _require_supported_currency(v)


class SavedSplitRecord(BaseModel):
    """Row shape of a stored anonymous split (snake_case columns)."""

    class Config:
        frozen = True

    people: list[Person]
    items: list[Item]
    tax_amount: float = 0
    service_amount: float = 0
    other_charges: Optional[float] = 0  # Older rows predate this column
    discount: float = 0
    discount_type: Literal["percent", "amount"] = "amount"
    currency: str = "USD"
    vendor_name: Optional[str] = None
    bill_date: Optional[str] = None

    @field_validator('tax_amount', 'service_amount', 'discount')
    @classmethod
    def validate_amounts(cls, v):
        return _require_finite(v)

    @field_validator('other_charges')
    @classmethod
    def validate_other_charges(cls, v):
        return v if v is None else _require_finite(v)

    @field_validator('currency')
    @classmethod
    def validate_currency(cls, v):
        return _require_supported_currency(v)

    @model_validator(mode='after')
    def validate_percent_discount(self):
        if self.discount_type == "percent" and not 0 <= self.discount <= 100:
            raise ValueError("Percent discount must be between 0 and 100")
        return self

    def to_split_request(self) -> SplitRequest:
        if self.discount_type == "percent":
            discount = PercentDiscount(value=self.discount)
        else:
            discount = AmountDiscount(value=self.discount)
        return SplitRequest(
            people=self.people,
            items=self.items,
            tax_amount=self.tax_amount,
            service_amount=self.service_amount,
            other_charges=self.other_charges or 0,
            discount=discount,
            currency=self.currency,
            vendor_name=self.vendor_name,
            bill_date=self.bill_date,
        )


class SplitSummary(CamelModel):
    subtotal: float
    discount: float
    tax: float
    service: float
    other_charges: float
    total: float
    per_person: dict[str, float]


class PersonBreakdown(CamelModel):
    name: str
    items: list[str]
    item_total: float
    tax_share: float
    service_share: float
    other_share: float
    discount_share: float
    total: float
    formatted_total: str


class SplitWarning(CamelModel):
    code: Literal["ORPHANED_ITEM", "DEGENERATE_SPLIT"]
    message: str
    item: Optional[str] = None
    amount: float


class SplitResult(CamelModel):
    summary: SplitSummary
    breakdown: list[PersonBreakdown]
    warnings: list[SplitWarning] = []
    unallocated: float = 0  # Part of the total assigned to nobody
    orphan_policy: Literal["exclude", "spread"]


class Currency(CamelModel):
    code: str
    symbol: str
