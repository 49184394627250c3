"""Column mapping for an OrderItem embedded in its owning order record.

An order item is not stored as a row of its own: its fields are
flattened into the record of the order that holds it.  The price is
embedded the same way, as its own amount and currency columns.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from orderitems.domain.model.order_item import OrderItem
from orderitems.domain.model.value_objects import DEFAULT_CURRENCY, Price

ORDERED_AMOUNT = "ORDERED_AMOUNT"
SHIPPING_DATE = "SHIPPING_DATE"
ITEM_ID = "ITEM_ID"
AMOUNT = "AMOUNT"
CURRENCY = "CURRENCY"


def to_columns(item: OrderItem) -> dict:
    price = item.item_price
    return {
        ORDERED_AMOUNT: item.ordered_amount,
        SHIPPING_DATE: item.shipping_date.isoformat() if item.shipping_date else None,
        ITEM_ID: item.item_id,
        AMOUNT: str(price.amount) if price else None,
        CURRENCY: price.currency if price else None,
    }


def from_columns(raw: dict) -> OrderItem:
    """Rebuild an order item from stored columns without re-validating it."""
    shipping_date = raw.get(SHIPPING_DATE)
    return OrderItem.from_storage(
        item_id=raw.get(ITEM_ID),
        item_price=_price_from_columns(raw),
        ordered_amount=raw.get(ORDERED_AMOUNT, 0),
        shipping_date=date.fromisoformat(shipping_date) if shipping_date else None,
    )


def _price_from_columns(raw: dict) -> Price | None:
    amount = raw.get(AMOUNT)
    if amount is None:
        return None
    return Price(Decimal(amount), raw.get(CURRENCY) or DEFAULT_CURRENCY)
