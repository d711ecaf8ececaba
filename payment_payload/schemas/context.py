from pydantic import BaseModel, ConfigDict

class SalesContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    sales_channel_id: str
    order_transaction_id: str
    payment_method_id: str
    return_url: str
    shipping_method_name: str | None = None
    locale: str | None = None

class PaymentSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    space_view_id: int | None = None
    line_item_consistency_enabled: bool = False

class PaymentMethodConfigurationRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    payment_method_configuration_id: int
    space_id: int | None = None
