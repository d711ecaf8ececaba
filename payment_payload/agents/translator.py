from payment_payload.payload.collaborators import (
    ADJUSTMENT_LINE_ITEM_NAME,
    SHIPPING_LINE_ITEM_SUFFIX,
    SHIPPING_NAME_DEFAULT,
    TAXES_LABEL,
)

CATALOGS = {
    "en-GB": {
        TAXES_LABEL: "Taxes",
        SHIPPING_NAME_DEFAULT: "Shipping",
        SHIPPING_LINE_ITEM_SUFFIX: "Line Item",
        ADJUSTMENT_LINE_ITEM_NAME: "Adjustment",
    },
}

FALLBACK_LOCALE = "en-GB"

class TranslatorAgent:
    def __init__(self, locale: str = FALLBACK_LOCALE):
        self.locale = locale
        self.messages = CATALOGS.get(locale, CATALOGS[FALLBACK_LOCALE])

    def translate(self, key: str) -> str:
        # Unknown keys come back unchanged
        return self.messages.get(key, key)
