from .departure_or_arrival import DepartureOrArrival, TimeKind
from .email import Email
from .future_timestamp import FutureTimestamp
from .location import Location
from .name import Name
from .payment_info import PaymentInfo
from .phone_number import PhoneNumber
from .trip_id import TripId

__all__ = [
    "Location",
    "Name",
    "Email",
    "PhoneNumber",
    "FutureTimestamp",
    "DepartureOrArrival",
    "TimeKind",
    "TripId",
    "PaymentInfo",
]
