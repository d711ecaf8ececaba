"""
Request models for the payment gateway's transaction-create call.

Every field bound below is the gateway's own limit. The payload builders
truncate strings to these bounds before construction, so a model failing
validation here means the source data was missing something required or was
not representable at all.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

AttributeKey = Annotated[str, StringConstraints(min_length=1, max_length=40)]

class LineItemType(str, Enum):
    PRODUCT = "PRODUCT"
    DISCOUNT = "DISCOUNT"
    SHIPPING = "SHIPPING"
    FEE = "FEE"

class Tax(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal
    title: str = Field(min_length=2, max_length=40)

class LineItemAttribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(max_length=512)
    value: str = Field(max_length=512)

class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    unique_id: str = Field(min_length=1, max_length=200)
    sku: str | None = Field(default=None, max_length=200)
    name: str = Field(min_length=1, max_length=150)
    quantity: float = Field(ge=0)
    amount_including_tax: Decimal = Field(decimal_places=2)
    type: LineItemType
    taxes: list[Tax] = []
    attributes: dict[AttributeKey, LineItemAttribute] | None = None

class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str | None = Field(default=None, max_length=100)
    country: str | None = None
    email_address: str | None = Field(default=None, max_length=254)
    family_name: str | None = Field(default=None, max_length=100)
    given_name: str | None = Field(default=None, max_length=100)
    organization_name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=100)
    postcode: str | None = Field(default=None, max_length=40)
    postal_state: str | None = None
    salutation: str | None = Field(default=None, max_length=20)
    street: str | None = Field(default=None, max_length=300)

class TransactionPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: str = Field(min_length=3, max_length=3)
    customer_email_address: str | None = Field(default=None, max_length=254)
    customer_id: str | None = None
    language: str | None = None
    merchant_reference: str = Field(max_length=100)
    meta_data: dict[str, str]
    shipping_method: str | None = Field(default=None, max_length=200)
    billing_address: Address
    shipping_address: Address
    line_items: list[LineItem] = Field(min_length=1)
    allowed_payment_method_configurations: list[int] = Field(min_length=1)
    success_url: str = Field(min_length=9, max_length=2000)
    failed_url: str = Field(min_length=9, max_length=2000)
    space_view_id: int | None = None
    auto_confirmation_enabled: bool = False
    charge_retry_enabled: bool = False
