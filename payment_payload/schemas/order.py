from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field

# quantize to cents must stay within the default 28-digit decimal context
Amount = Annotated[Decimal, Field(ge=Decimal("-1e15"), le=Decimal("1e15"))]

class CalculatedTax(BaseModel):
    model_config = ConfigDict(frozen=True)

    tax_rate: Decimal
    tax: Decimal = Decimal("0")
    price: Decimal | None = None

class LineItemOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    group: str | None = None
    option: str | None = None

class LineItemPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_number: str | None = Field(default=None, alias="productNumber")
    options: list[LineItemOption] = []

class OrderLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    product_id: str | None = None
    payload: LineItemPayload | None = None
    label: str | None = None
    quantity: float | None = None
    total_price: Amount | None = None
    calculated_taxes: list[CalculatedTax] = []

class ShippingCosts(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: float | None = None
    calculated_taxes: list[CalculatedTax] = []

class OrderSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    order_number: str
    line_items: list[OrderLine] = []
    shipping_total: Amount | None = None
    shipping_costs: ShippingCosts = ShippingCosts()
    amount_total: Amount
    currency: str
