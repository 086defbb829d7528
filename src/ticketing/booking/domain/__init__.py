from .entity import BookingDraft as BookingDraft
from .entity import Trip as Trip
from .enum import Slot as Slot
from .enum import TravelClass as TravelClass
from .repository import BookingConfirmation as BookingConfirmation
from .repository import DraftRepository as DraftRepository
from .service import list_matching as list_matching
from .value_object import DepartureOrArrival as DepartureOrArrival
from .value_object import Email as Email
from .value_object import FutureTimestamp as FutureTimestamp
from .value_object import Location as Location
from .value_object import Name as Name
from .value_object import PaymentInfo as PaymentInfo
from .value_object import PhoneNumber as PhoneNumber
from .value_object import TimeKind as TimeKind
from .value_object import TripId as TripId
