"""Price: the money value an order item carries.

A Price is frozen and compared by value, so the amount copied into an
order item can never drift from what the catalog charged at order time.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from orderitems.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "EUR"


@dataclass(frozen=True)
class Price:
    """Price of an item in a given currency.

    Amounts are Decimal so multiplying by an ordered quantity is exact.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Price amount cannot be negative, got {self.amount}")
        if not self.currency:
            raise ValidationError("Price currency is required")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Price) -> Price:
        self._assert_same_currency(other)
        return Price(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Price:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Price by int, got {type(factor).__name__}")
        return Price(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Price) -> None:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Price(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price amount: {amount!r}") from exc
