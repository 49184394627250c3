"""OrderItem: a line of an order, fixed at the moment it was ordered.

An OrderItem is a fabricated value object: the original catalog item's
id and price, enriched with order-specific facts (how many were ordered
and when they will ship). The owning order holds a list of these; the
catalog item itself is only referenced by id, never owned.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date, timedelta

from orderitems.domain.exceptions import (
    InvalidOrderLineInputError,
    MalformedIdentifierError,
    ValidationError,
)
from orderitems.domain.model.clock import Clock
from orderitems.domain.model.value_objects import Price

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
NEXT_DAY_SHIPPING = timedelta(days=1)
BACKORDER_SHIPPING = timedelta(days=7)


def calculate_shipping_date(available_item_stock: int, ordered_amount: int, today: date) -> date:
    """Ship tomorrow when stock covers the order, otherwise in a week.

    An exact match between stock and ordered amount counts as covered.
    """
    if available_item_stock - ordered_amount >= 0:
        return today + NEXT_DAY_SHIPPING
    return today + BACKORDER_SHIPPING


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of an item's identity and price, plus order facts.

    Use ``OrderItem.builder()`` for new order items; the shipping date is
    computed when the builder is built.  ``from_storage`` and ``blank``
    exist so the persistence layer can reconstitute rows without
    re-validating or consulting a clock.
    """

    item_id: str | None = None  # canonical UUID text
    item_price: Price | None = None  # copied, never shared with the catalog
    ordered_amount: int = 0
    shipping_date: date | None = None

    # --- Construction ---------------------------------------------------------

    @staticmethod
    def builder() -> OrderItemBuilder:
        return OrderItemBuilder()

    @staticmethod
    def create(builder: OrderItemBuilder, clock: Clock) -> OrderItem:
        """Validate the builder's values and compute the shipping date.

        The clock is read exactly once.
        """
        problems = builder.problems()
        if problems:
            logger.warning("Rejected order item input: %s", "; ".join(problems))
            raise InvalidOrderLineInputError("; ".join(problems))

        shipping_date = calculate_shipping_date(
            builder.available_item_stock, builder.ordered_amount, clock.today()
        )
        logger.debug(
            "Item %s ships on %s (ordered %d, in stock %d)",
            builder.item_id,
            shipping_date,
            builder.ordered_amount,
            builder.available_item_stock,
        )
        return OrderItem(
            item_id=str(builder.item_id),
            item_price=builder.item_price,
            ordered_amount=builder.ordered_amount,
            shipping_date=shipping_date,
        )

    @staticmethod
    def from_storage(
        item_id: str | None,
        item_price: Price | None,
        ordered_amount: int,
        shipping_date: date | None,
    ) -> OrderItem:
        """Reconstitute a persisted order item as-is (trusted input)."""
        return OrderItem(
            item_id=item_id,
            item_price=item_price,
            ordered_amount=ordered_amount,
            shipping_date=shipping_date,
        )

    @staticmethod
    def blank() -> OrderItem:
        """The empty default a storage layer instantiates before filling it.

        Never hand this to business logic: it has no identity, no price
        and no shipping date.
        """
        return OrderItem()

    # --- Computed properties --------------------------------------------------

    @property
    def identifier(self) -> uuid.UUID:
        try:
            return uuid.UUID(self.item_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise MalformedIdentifierError(
                f"Stored item id {self.item_id!r} is not a valid UUID"
            ) from exc

    @property
    def total_price(self) -> Price:
        if self.item_price is None:
            raise ValidationError("Cannot compute the total price of a blank order item")
        return self.item_price * self.ordered_amount

    @property
    def is_blank(self) -> bool:
        return (
            self.item_id is None
            and self.item_price is None
            and self.ordered_amount == 0
            and self.shipping_date is None
        )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return (
            f"OrderItem(item_id={self.item_id}, item_price={self.item_price}, "
            f"ordered_amount={self.ordered_amount}, shipping_date={self.shipping_date})"
        )


class OrderItemBuilder:
    """Collects the values of a new OrderItem.

    The ``with_*`` methods only record values and return the builder for
    chaining; all checks happen in ``build``.  A builder is meant to be
    used from one thread.
    """

    def __init__(self) -> None:
        self.item_id: uuid.UUID | None = None
        self.item_price: Price | None = None
        self.ordered_amount: int = 0
        self.available_item_stock: int = 0

    def with_item_id(self, item_id: uuid.UUID) -> OrderItemBuilder:
        self.item_id = item_id
        return self

    def with_item_price(self, item_price: Price) -> OrderItemBuilder:
        self.item_price = item_price
        return self

    def with_ordered_amount(self, ordered_amount: int) -> OrderItemBuilder:
        self.ordered_amount = ordered_amount
        return self

    def with_shipping_date_based_on_available_item_stock(
        self, available_item_stock: int
    ) -> OrderItemBuilder:
        self.available_item_stock = available_item_stock
        return self

    def build(self, clock: Clock) -> OrderItem:
        return OrderItem.create(self, clock)

    def problems(self) -> list[str]:
        """Every reason the collected values cannot form an order item."""
        found: list[str] = []
        if not isinstance(self.item_id, uuid.UUID):
            found.append("Item id must be a UUID")
        if not isinstance(self.item_price, Price):
            found.append("Item price is required")
        if not _is_int(self.ordered_amount) or self.ordered_amount < 0:
            found.append(f"Ordered amount must be a non-negative integer, got {self.ordered_amount!r}")
        if not _is_int(self.available_item_stock) or self.available_item_stock < 0:
            found.append(
                f"Available item stock must be a non-negative integer, "
                f"got {self.available_item_stock!r}"
            )
        return found


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
