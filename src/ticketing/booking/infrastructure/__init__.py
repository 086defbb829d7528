from .booking_confirmation import (
    DynamoDBBookingConfirmation,
    LoggingBookingConfirmation,
    create_booking_confirmation,
)
from .dynamodb_draft_repository import DynamoDBDraftRepository
from .in_memory_draft_repository import InMemoryDraftRepository

__all__ = [
    "DynamoDBDraftRepository",
    "InMemoryDraftRepository",
    "DynamoDBBookingConfirmation",
    "LoggingBookingConfirmation",
    "create_booking_confirmation",
]
