"""列車便カタログ

実際の時刻表検索の代わりに、指定時刻を起点とした便を機械的に生成する。
保証するのはスケジュールの形（1時間間隔・所要2時間・最大10件）のみで、
便IDは呼び出しごとに新しく発行される。
"""

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from itertools import count

from ticketing.booking.domain.entity import Trip
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    Location,
    TripId,
)

JOURNEY_DURATION = timedelta(hours=2)
DEPARTURE_INTERVAL = timedelta(hours=1)
MAX_RESULTS = 10


def departure_anchor(time: DepartureOrArrival) -> datetime:
    """最初の候補便の出発時刻"""
    if time.is_departure:
        return time.timestamp.value
    return time.timestamp.value - JOURNEY_DURATION


def list_matching(
    origin: Location,
    destination: Location,
    time: DepartureOrArrival,
    now: datetime | None = None,
) -> Iterator[Trip]:
    """条件に合う便を出発時刻の昇順で最大 MAX_RESULTS 件返す

    出発時刻が now 以前の候補は除外する。
    到着時刻が datetime の上限を超える候補からは生成しないため、件数は減ることがある。
    """
    if now is None:
        now = datetime.now(timezone.utc)
    anchor = departure_anchor(time)

    # 起点が過去でも、now を過ぎた最初の候補から数え始める
    yielded = 0
    for i in count():
        if yielded >= MAX_RESULTS:
            return
        try:
            departure = anchor + DEPARTURE_INTERVAL * i
            arrival = departure + JOURNEY_DURATION
        except OverflowError:
            # datetime の上限を超える便は存在しない
            return
        if not departure > now:
            continue
        yield Trip(
            id=TripId.generate(),
            origin=origin,
            destination=destination,
            departure=departure,
            arrival=arrival,
        )
        yielded += 1
