from .slot import Slot
from .travel_class import TravelClass

__all__ = ["Slot", "TravelClass"]
