from payment_payload.schemas.context import SalesContext

class ContextLocaleCodeProvider:
    def __init__(self, default_locale: str | None = None):
        self.default_locale = default_locale

    def get_locale_code(self, context: SalesContext) -> str | None:
        return context.locale or self.default_locale
