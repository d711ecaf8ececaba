"""
Transaction payload for the payment gateway.

Builds the transaction-create request for one order: line items (products,
discounts, shipping, adjustment), billing and shipping address, customer and
order references, the payment method configuration the customer picked and
the return URLs. The caller submits the result through the gateway SDK.
"""

import logging

from payment_payload.agents.locale import ContextLocaleCodeProvider
from payment_payload.agents.payment_configuration import PaymentConfigurationAgent
from payment_payload.agents.router import RouterAgent
from payment_payload.agents.translator import TranslatorAgent
from payment_payload.config import settings as app_config
from payment_payload.payload.address import resolve_address
from payment_payload.payload.adjustment import build_adjustment_line_item
from payment_payload.payload.collaborators import (
    FailureUrlGenerator,
    LocaleCodeProvider,
    PaymentMethodConfigurationResolver,
    Translator,
)
from payment_payload.payload.exceptions import PayloadValidationError
from payment_payload.payload.line_items import build_line_items
from payment_payload.payload.shipping import build_shipping_line_item
from payment_payload.payload.validation import create_validated, fix_length
from payment_payload.schemas.context import PaymentMethodConfigurationRef, PaymentSettings, SalesContext
from payment_payload.schemas.customer import CustomerSnapshot
from payment_payload.schemas.order import OrderSnapshot
from payment_payload.schemas.transaction import LineItem, TransactionPayload

log = logging.getLogger(__name__)

METADATA_ORDER_ID = "orderId"
METADATA_ORDER_TRANSACTION_ID = "orderTransactionId"
METADATA_SALES_CHANNEL_ID = "salesChannelId"

SUCCESS_STATUS_QUERY = "&status=paid"
FAILURE_STATUS_QUERY = "&status=fail"


class TransactionPayloadBuilder:
    def __init__(
        self,
        translator: Translator,
        locale_code_provider: LocaleCodeProvider,
        configuration_resolver: PaymentMethodConfigurationResolver,
        url_generator: FailureUrlGenerator
    ):
        self.translator = translator
        self.locale_code_provider = locale_code_provider
        self.configuration_resolver = configuration_resolver
        self.url_generator = url_generator

    @classmethod
    def from_settings(cls, app_settings=None) -> "TransactionPayloadBuilder":
        """Builder wired with the default agents configured from settings."""
        app_settings = app_settings or app_config
        return cls(
            translator=TranslatorAgent(app_settings.DEFAULT_LOCALE),
            locale_code_provider=ContextLocaleCodeProvider(app_settings.DEFAULT_LOCALE),
            configuration_resolver=PaymentConfigurationAgent.from_settings(app_settings),
            url_generator=RouterAgent(app_settings.SHOP_URL)
        )

    def get_line_items(self, order: OrderSnapshot, context: SalesContext, settings: PaymentSettings) -> list[LineItem]:
        line_items = build_line_items(order, self.translator)

        shipping_line_item = build_shipping_line_item(order, context, self.translator)
        if shipping_line_item is not None:
            line_items.append(shipping_line_item)

        adjustment_line_item = build_adjustment_line_item(line_items, order, settings, self.translator)
        if adjustment_line_item is not None:
            line_items.append(adjustment_line_item)

        return line_items

    def get_payment_configuration(self, payment_method_id: str) -> PaymentMethodConfigurationRef:
        configuration = self.configuration_resolver.resolve(payment_method_id)
        if configuration is None:
            fields = ["allowed_payment_method_configurations"]
            log.critical(f"No payment method configuration for payment method {payment_method_id}")
            raise PayloadValidationError("Transaction", fields)
        return configuration

    def build(
        self,
        order: OrderSnapshot,
        customer: CustomerSnapshot,
        context: SalesContext,
        settings: PaymentSettings
    ) -> TransactionPayload:
        """
        Assemble and validate the transaction payload for an order.

        Raises:
            PayloadValidationError: a part of the payload failed the gateway schema.
            ReconciliationError: line items do not foot to the order total and
                line item consistency is enabled.
        """
        line_items = self.get_line_items(order, context, settings)
        billing_address = resolve_address(customer.billing_address, customer)
        shipping_address = resolve_address(customer.shipping_address, customer)

        configuration = self.get_payment_configuration(context.payment_method_id)
        success_url = context.return_url + SUCCESS_STATUS_QUERY
        failed_url = self.url_generator.generate_failure_url(order.id) + FAILURE_STATUS_QUERY

        payload = create_validated(
            TransactionPayload,
            "Transaction",
            currency=order.currency,
            customer_email_address=billing_address.email_address,
            customer_id=customer.customer_number or None,
            language=self.locale_code_provider.get_locale_code(context),
            merchant_reference=fix_length(order.order_number, 100),
            meta_data={
                METADATA_ORDER_ID: order.id,
                METADATA_ORDER_TRANSACTION_ID: context.order_transaction_id,
                METADATA_SALES_CHANNEL_ID: context.sales_channel_id,
            },
            shipping_method=fix_length(context.shipping_method_name, 200) if context.shipping_method_name else None,
            billing_address=billing_address,
            shipping_address=shipping_address,
            line_items=line_items,
            allowed_payment_method_configurations=[configuration.payment_method_configuration_id],
            success_url=success_url,
            failed_url=failed_url,
            space_view_id=settings.space_view_id,
            auto_confirmation_enabled=False,
            charge_retry_enabled=False
        )

        log.info(f"[Order: {order.order_number}] Transaction payload built with {len(line_items)} line items")
        return payload


def build_transaction_payload(
    order: OrderSnapshot,
    customer: CustomerSnapshot,
    context: SalesContext,
    settings: PaymentSettings,
    builder: TransactionPayloadBuilder | None = None
) -> TransactionPayload:
    builder = builder or TransactionPayloadBuilder.from_settings()
    return builder.build(order, customer, context, settings)
