import logging

from payment_payload.payload.collaborators import SHIPPING_LINE_ITEM_SUFFIX, SHIPPING_NAME_DEFAULT, Translator
from payment_payload.payload.taxes import build_taxes
from payment_payload.payload.validation import create_validated, fix_length, round_amount
from payment_payload.schemas.context import SalesContext
from payment_payload.schemas.order import OrderSnapshot
from payment_payload.schemas.transaction import LineItem, LineItemType

log = logging.getLogger(__name__)

def build_shipping_line_item(order: OrderSnapshot, context: SalesContext, translator: Translator) -> LineItem | None:
    """
    Shipping line item for orders with a positive shipping total.

    Unlike product lines, a shipping line that cannot be built does not abort
    the payload: the error is logged and the order goes out without it. The
    adjustment line then absorbs the missing amount.
    """
    try:
        amount = round_amount(order.shipping_total)
        if amount <= 0:
            return None

        shipping_name = context.shipping_method_name or translator.translate(SHIPPING_NAME_DEFAULT)
        shipping_costs = order.shipping_costs
        reference = fix_length(f"{shipping_name}-Shipping-Line-Item", 200)

        return create_validated(
            LineItem,
            "Shipping LineItem",
            unique_id=reference,
            sku=reference,
            name=fix_length(f"{shipping_name} {translator.translate(SHIPPING_LINE_ITEM_SUFFIX)}", 150),
            quantity=shipping_costs.quantity if shipping_costs.quantity is not None else 1,
            amount_including_tax=amount,
            type=LineItemType.SHIPPING,
            taxes=build_taxes(shipping_costs.calculated_taxes, shipping_name)
        )
    except Exception as e:
        log.critical(f"[Order: {order.order_number}] Shipping line item skipped: {e}")
        return None
