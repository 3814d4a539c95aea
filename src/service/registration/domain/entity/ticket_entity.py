from datetime import datetime
from typing import Optional

import attrs

from src.service.registration.domain.entity.issued_ticket import IssuedTicket
from src.service.registration.domain.enum.ticket_status import (
    CheckInStatus,
    PaymentStatus,
    TicketStatus,
)


@attrs.define
class TicketRecord:
    """A ticket as listed on the registrant's ticket pages"""

    ticket_id: str
    event_id: str
    user_id: str
    ticket_type: str
    price: int
    currency: str
    status: TicketStatus
    payment_status: PaymentStatus
    purchase_date: datetime
    payment_method: Optional[str] = None
    check_in_status: CheckInStatus = CheckInStatus.NOT_CHECKED_IN
    check_in_time: Optional[datetime] = None
    seat_number: Optional[str] = None
    special_requirements: Optional[str] = None
    notes: Optional[str] = None
    refundable: bool = False
    transferable: bool = False

    @classmethod
    def from_issued(cls, ticket: IssuedTicket, *, ticket_type: str) -> 'TicketRecord':
        return cls(
            ticket_id=ticket.ticket_id,
            event_id=ticket.event_id,
            user_id=ticket.registrant_id,
            ticket_type=ticket_type,
            price=ticket.amount,
            currency=ticket.currency,
            status=TicketStatus.CONFIRMED,
            payment_status=ticket.payment_status,
            payment_method=ticket.payment_method,
            purchase_date=ticket.issued_at,
        )

    def matches(self, *, status: str, search: str, event_title: str) -> bool:
        if status != 'all' and self.status.value != status:
            return False
        needle = search.lower()
        return needle in event_title.lower() or needle in self.ticket_id.lower()
