"""Domain-level exceptions.

Everything raised by the order item model derives from DomainException,
so the code assembling orders can catch the whole family in one place.
"""


class DomainException(Exception):
    """Root of every error the order item model raises."""


class ValidationError(DomainException):
    """A price or order item value breaks one of its rules."""


class InvalidOrderLineInputError(ValidationError):
    """The values collected by an order item builder cannot form an order item."""


class MalformedIdentifierError(DomainException):
    """A stored item identifier is not a valid UUID.

    Only corrupted storage can produce this; built order items always
    carry a well-formed identifier.
    """
