from .booking_confirmation import BookingConfirmation
from .draft_repository import DraftRepository

__all__ = ["BookingConfirmation", "DraftRepository"]
