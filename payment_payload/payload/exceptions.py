import json
from decimal import Decimal

class PayloadError(Exception):
    """Base class for errors raised while building a gateway payload."""

class PayloadValidationError(PayloadError):
    """An assembled request object failed the gateway schema."""

    def __init__(self, kind: str, invalid_properties: list[str]):
        self.kind = kind
        self.invalid_properties = list(invalid_properties)
        super().__init__(f"{kind} payload invalid: {json.dumps(self.invalid_properties)}")

class ReconciliationError(PayloadError):
    """Line items do not foot to the order total and strict consistency is on."""

    def __init__(self, line_item_total: Decimal, order_total: Decimal):
        self.line_item_total = line_item_total
        self.order_total = order_total
        super().__init__(f"LineItems total {line_item_total} does not add up to order total {order_total}")
