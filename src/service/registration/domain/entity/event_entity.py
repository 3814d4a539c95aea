from datetime import date, time
from typing import Optional

import attrs


@attrs.frozen
class EventRecord:
    event_id: str
    title: str
    event_date: date
    start_time: time
    end_time: time
    venue: str
    address: str
    available_seats: int
    organizer_id: str
    image_url: Optional[str] = None
    refund_policy: str = ''
    dress_code: str = ''
    age_restriction: str = ''
