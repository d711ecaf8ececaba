import json
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from payment_payload.schemas.context import PaymentSettings

load_dotenv()

class Settings(BaseSettings):
    SHOP_URL: str = os.getenv("SHOP_URL", "http://localhost:8000")
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en-GB")
    SPACE_VIEW_ID: int | None = None
    LINE_ITEM_CONSISTENCY_ENABLED: bool = False
    # payment method id -> gateway payment method configuration id, as JSON
    PAYMENT_METHOD_CONFIGURATIONS: str = os.getenv("PAYMENT_METHOD_CONFIGURATIONS", "{}")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"

    def payment_settings(self) -> PaymentSettings:
        return PaymentSettings(
            space_view_id=self.SPACE_VIEW_ID,
            line_item_consistency_enabled=self.LINE_ITEM_CONSISTENCY_ENABLED
        )

    def payment_method_configurations(self) -> dict[str, int]:
        return {key: int(value) for key, value in json.loads(self.PAYMENT_METHOD_CONFIGURATIONS).items()}

settings = Settings()
