from .exceptions import (
    BookingConfirmationException,
    DomainException,
    FieldValidationException,
    SessionStoreException,
    SlotOrderException,
)

__all__ = [
    "DomainException",
    "FieldValidationException",
    "SlotOrderException",
    "BookingConfirmationException",
    "SessionStoreException",
]
