"""Interfaces the payload builder needs from the host shop."""

from typing import Protocol

from payment_payload.schemas.context import PaymentMethodConfigurationRef, SalesContext

TAXES_LABEL = "taxes-label"
SHIPPING_NAME_DEFAULT = "shipping-name-default"
SHIPPING_LINE_ITEM_SUFFIX = "shipping-lineitem-suffix"
ADJUSTMENT_LINE_ITEM_NAME = "adjustment-lineitem-name"


class Translator(Protocol):
    def translate(self, key: str) -> str: ...


class LocaleCodeProvider(Protocol):
    def get_locale_code(self, context: SalesContext) -> str | None: ...


class PaymentMethodConfigurationResolver(Protocol):
    def resolve(self, payment_method_id: str) -> PaymentMethodConfigurationRef | None:
        """Look up the gateway configuration for a shop payment method; None when unknown."""
        ...


class FailureUrlGenerator(Protocol):
    def generate_failure_url(self, order_id: str) -> str:
        """Absolute URL the customer returns to after a failed payment."""
        ...
