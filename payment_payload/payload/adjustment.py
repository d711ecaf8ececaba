import logging

from payment_payload.payload.collaborators import ADJUSTMENT_LINE_ITEM_NAME, Translator
from payment_payload.payload.exceptions import ReconciliationError
from payment_payload.payload.validation import create_validated, round_amount
from payment_payload.schemas.context import PaymentSettings
from payment_payload.schemas.order import OrderSnapshot
from payment_payload.schemas.transaction import LineItem, LineItemType

log = logging.getLogger(__name__)

ADJUSTMENT_LINE_ITEM_ID = "Adjustment-Line-Item"

def line_item_total(line_items: list[LineItem]):
    return sum((line_item.amount_including_tax for line_item in line_items), round_amount(0))

def build_adjustment_line_item(
    line_items: list[LineItem],
    order: OrderSnapshot,
    settings: PaymentSettings,
    translator: Translator
) -> LineItem | None:
    """
    Make the submitted line items foot to the order total.

    The gateway rejects transactions whose line items do not add up to the
    amount it charges. When they drift (rounding, a dropped shipping line,
    plugin surcharges) a FEE or DISCOUNT line for the difference is returned.
    With line item consistency enabled the drift is an error instead.

    Raises:
        ReconciliationError: the totals differ and consistency is enforced.
        PayloadValidationError: the adjustment line failed validation.
    """
    total = line_item_total(line_items)
    order_total = round_amount(order.amount_total)
    adjustment = round_amount(order_total - total)

    if adjustment == 0:
        return None

    if settings.line_item_consistency_enabled:
        error = ReconciliationError(total, order_total)
        log.critical(f"[Order: {order.order_number}] {error}")
        raise error

    log.debug(f"[Order: {order.order_number}] Adding adjustment line item of {adjustment}")
    return create_validated(
        LineItem,
        "Adjustment LineItem",
        unique_id=ADJUSTMENT_LINE_ITEM_ID,
        sku=ADJUSTMENT_LINE_ITEM_ID,
        name=translator.translate(ADJUSTMENT_LINE_ITEM_NAME),
        quantity=1,
        amount_including_tax=adjustment,
        type=LineItemType.FEE if adjustment > 0 else LineItemType.DISCOUNT
    )
