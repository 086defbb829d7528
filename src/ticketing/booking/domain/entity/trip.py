from datetime import datetime

from ticketing.booking.domain.value_object import Location, TripId
from ticketing.shared.domain import Entity


class Trip(Entity[TripId]):
    """列車便（カタログの検索結果。ドラフトには ID のみ保存される）"""

    def __init__(
        self,
        id: TripId,
        origin: Location,
        destination: Location,
        departure: datetime,
        arrival: datetime,
    ) -> None:
        super().__init__(id)
        self._origin = origin
        self._destination = destination
        self._departure = departure
        self._arrival = arrival

    @property
    def origin(self) -> Location:
        return self._origin

    @property
    def destination(self) -> Location:
        return self._destination

    @property
    def departure(self) -> datetime:
        return self._departure

    @property
    def arrival(self) -> datetime:
        return self._arrival

    def __repr__(self) -> str:
        return (
            f"Trip(id={self.id}, origin={self._origin}, "
            f"destination={self._destination}, "
            f"departure={self._departure.isoformat()}, "
            f"arrival={self._arrival.isoformat()})"
        )
