"""Shared fixtures: a two-line order with shipping, its customer and sales context."""

from decimal import Decimal

import pytest

from payment_payload.agents.locale import ContextLocaleCodeProvider
from payment_payload.agents.payment_configuration import PaymentConfigurationAgent
from payment_payload.agents.router import RouterAgent
from payment_payload.agents.translator import TranslatorAgent
from payment_payload.payload.transaction import TransactionPayloadBuilder
from payment_payload.schemas.context import PaymentMethodConfigurationRef, PaymentSettings, SalesContext
from payment_payload.schemas.customer import AddressSnapshot, CustomerSnapshot
from payment_payload.schemas.order import OrderLine, OrderSnapshot
from payment_payload.schemas.transaction import LineItem, LineItemType


def order_data():
    return {
        "id": "order-1",
        "order_number": "10001",
        "currency": "EUR",
        "line_items": [
            {
                "id": "line-1",
                "product_id": "prod-1",
                "payload": {
                    "productNumber": "SW10001",
                    "options": [{"group": "Size", "option": "M"}],
                },
                "label": "T-Shirt",
                "quantity": 2,
                "total_price": "39.98",
                "calculated_taxes": [{"tax_rate": "19", "tax": "6.38"}],
            },
            {
                "id": "line-2",
                "product_id": "prod-2",
                "label": "Mug",
                "quantity": 1,
                "total_price": "12.50",
                "calculated_taxes": [{"tax_rate": "7", "tax": "0.82"}],
            },
        ],
        "shipping_total": "4.99",
        "shipping_costs": {
            "quantity": 1,
            "calculated_taxes": [{"tax_rate": "19", "tax": "0.80"}],
        },
        "amount_total": "57.47",
    }


@pytest.fixture
def make_order():
    """Factory for order snapshots; keyword arguments replace top-level fields."""
    def _make(**overrides):
        data = order_data()
        data.update(overrides)
        return OrderSnapshot(**data)
    return _make


@pytest.fixture
def order(make_order):
    return make_order()


@pytest.fixture
def make_line():
    def _make(**overrides):
        data = {
            "id": "line-1",
            "product_id": "prod-1",
            "label": "T-Shirt",
            "quantity": 1,
            "total_price": "10.00",
        }
        data.update(overrides)
        return OrderLine(**data)
    return _make


@pytest.fixture
def billing_address():
    return AddressSnapshot(
        first_name="Jane",
        last_name="Doe",
        salutation={"display_name": "Ms."},
        street="Main Street 1",
        zipcode="10115",
        city="Berlin",
        country={"iso": "DE"},
        country_state={"short_code": "DE-BE"},
        email="jane@example.com",
        phone_number="+49 30 123456",
    )


@pytest.fixture
def customer(billing_address):
    return CustomerSnapshot(
        customer_number="C-1000",
        first_name="Jane",
        last_name="Doe",
        company="ACME",
        salutation={"display_name": "Ms."},
        billing_address=billing_address,
        shipping_address=billing_address.model_copy(update={"street": "Harbour Road 2"}),
    )


@pytest.fixture
def context():
    return SalesContext(
        sales_channel_id="sc-1",
        order_transaction_id="ot-1",
        payment_method_id="pm-1",
        return_url="https://shop.example/checkout/finalize?transactionId=ot-1",
        shipping_method_name="Standard",
        locale="de-DE",
    )


@pytest.fixture
def payment_settings():
    return PaymentSettings(space_view_id=12, line_item_consistency_enabled=False)


@pytest.fixture
def strict_settings():
    return PaymentSettings(line_item_consistency_enabled=True)


@pytest.fixture
def translator():
    return TranslatorAgent()


@pytest.fixture
def builder(translator):
    return TransactionPayloadBuilder(
        translator=translator,
        locale_code_provider=ContextLocaleCodeProvider("en-GB"),
        configuration_resolver=PaymentConfigurationAgent({
            "pm-1": PaymentMethodConfigurationRef(id="pm-1", payment_method_configuration_id=4711),
        }),
        url_generator=RouterAgent("https://shop.example"),
    )


@pytest.fixture
def make_line_item():
    """Already built gateway line item with the given amount."""
    def _make(amount, unique_id="item", line_item_type=LineItemType.PRODUCT):
        return LineItem(
            unique_id=unique_id,
            name=unique_id,
            quantity=1,
            amount_including_tax=Decimal(amount),
            type=line_item_type,
        )
    return _make
