import hashlib
import logging
from decimal import Decimal

from payment_payload.payload.collaborators import TAXES_LABEL, Translator
from payment_payload.payload.taxes import build_taxes
from payment_payload.payload.validation import create_validated, fix_length, round_amount
from payment_payload.schemas.order import OrderLine, OrderSnapshot
from payment_payload.schemas.transaction import LineItem, LineItemAttribute, LineItemType

log = logging.getLogger(__name__)

def attribute_key(label: str | None) -> str:
    """Stable key for an option group: "option_" plus the md5 of its label."""
    digest = hashlib.md5((label or "").encode("utf-8")).hexdigest()
    return fix_length(f"option_{digest}", 40)

def resolve_sku(shop_line_item: OrderLine) -> str:
    sku = shop_line_item.product_id if shop_line_item.product_id else shop_line_item.id
    payload = shop_line_item.payload
    if payload is not None and payload.product_number:
        sku = payload.product_number
    return fix_length(sku, 200)

def build_product_attributes(shop_line_item: OrderLine) -> dict[str, LineItemAttribute] | None:
    """
    Option attributes (e.g. size, colour) of a configured product.

    An attribute the gateway would reject aborts the build; it is never
    silently dropped.
    """
    payload = shop_line_item.payload
    if payload is None or not payload.options:
        return None

    attributes = {}
    for option in payload.options:
        attribute = create_validated(
            LineItemAttribute,
            "LineItemAttribute",
            label=fix_length(option.group, 512),
            value=fix_length(option.option, 512)
        )
        attributes[attribute_key(option.group)] = attribute

    return attributes or None

def build_line_item(shop_line_item: OrderLine, taxes_title: str) -> LineItem:
    total_price = shop_line_item.total_price
    amount = round_amount(total_price) if total_price else Decimal("0.00")

    # Type follows the unrounded source total
    if (total_price or 0) >= 0:
        line_item_type = LineItemType.PRODUCT
    else:
        line_item_type = LineItemType.DISCOUNT

    return create_validated(
        LineItem,
        "LineItem",
        unique_id=shop_line_item.id,
        sku=resolve_sku(shop_line_item),
        name=fix_length(shop_line_item.label, 150),
        quantity=shop_line_item.quantity if shop_line_item.quantity is not None else 1,
        amount_including_tax=amount,
        type=line_item_type,
        taxes=build_taxes(shop_line_item.calculated_taxes, taxes_title),
        attributes=build_product_attributes(shop_line_item)
    )

def build_line_items(order: OrderSnapshot, translator: Translator) -> list[LineItem]:
    """Product and discount line items, one per order line, in order."""
    taxes_title = translator.translate(TAXES_LABEL)
    line_items = [build_line_item(shop_line_item, taxes_title) for shop_line_item in order.line_items]
    log.debug(f"[Order: {order.order_number}] Built {len(line_items)} product line items")
    return line_items
