from .booking_draft import BookingDraft
from .trip import Trip

__all__ = ["BookingDraft", "Trip"]
