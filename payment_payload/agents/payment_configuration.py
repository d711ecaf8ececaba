import logging

from payment_payload.schemas.context import PaymentMethodConfigurationRef

log = logging.getLogger(__name__)

class PaymentConfigurationAgent:
    """Payment method configurations known to the shop, keyed by payment method id."""

    def __init__(self, configurations: dict[str, PaymentMethodConfigurationRef]):
        self.configurations = dict(configurations)

    @classmethod
    def from_settings(cls, app_settings) -> "PaymentConfigurationAgent":
        configurations = {
            payment_method_id: PaymentMethodConfigurationRef(
                id=payment_method_id,
                payment_method_configuration_id=configuration_id
            )
            for payment_method_id, configuration_id in app_settings.payment_method_configurations().items()
        }
        return cls(configurations)

    def resolve(self, payment_method_id: str) -> PaymentMethodConfigurationRef | None:
        configuration = self.configurations.get(payment_method_id)
        if configuration is None:
            log.warning(f"Unknown payment method {payment_method_id}")
        return configuration
