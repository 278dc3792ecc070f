"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A line item quantity is below one."""


class InvalidPriceError(ValidationError):
    """A line item unit price is negative or not a number."""


class InvalidDiscountValueError(ValidationError):
    """A discount value is negative, or a percentage is above 100."""


class InvalidShippingFeeError(ValidationError):
    """A shipping fee is negative or not a number."""


class RejectedDeltaError(ValidationError):
    """A stock delta was rejected for the requested operation mode."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Stock quantity {reason}")
        self.reason = reason
