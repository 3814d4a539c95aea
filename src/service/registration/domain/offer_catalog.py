"""
Ticket tiers offered for every event.

General admission covers every available seat; the VIP and student tiers are
carved out as fixed shares of the same seats.
"""

import math
from typing import List

from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


def build_offers(
    event: EventRecord,
    *,
    currency: str,
    vip_price: int,
    vip_share: float,
    student_share: float,
) -> List[TicketOffer]:
    seats = event.available_seats
    return [
        TicketOffer(
            id='general',
            name='General Admission',
            unit_price=0,
            currency=currency,
            remaining_count=seats,
            description='Standard access to the event',
            benefits=('Event access', 'Welcome kit', 'Networking opportunities'),
        ),
        TicketOffer(
            id='vip',
            name='VIP Access',
            unit_price=vip_price,
            currency=currency,
            remaining_count=math.floor(seats * vip_share),
            description='Premium experience with additional benefits',
            benefits=(
                'Priority seating',
                'VIP lounge access',
                'Premium catering',
                'Meet & greet with speakers',
            ),
        ),
        TicketOffer(
            id='student',
            name='Student Discount',
            unit_price=0,
            currency=currency,
            remaining_count=math.floor(seats * student_share),
            description='Special pricing for students',
            benefits=('Event access', 'Student networking session', 'Career guidance'),
        ),
    ]
