from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.service.registration.app.dto.registration_views import TicketWithEvent
from src.service.registration.domain.value_object.ticket_offer import format_price
from src.service.registration.driving_adapter.http_controller.schema.registration_schema import (
    EventSummaryResponse,
)


class TicketResponse(BaseModel):
    ticket_id: str
    event_id: str
    event_title: str
    ticket_type: str
    price: int
    currency: str
    display_price: str
    status: str
    payment_status: str
    purchase_date: datetime
    check_in_status: str

    @classmethod
    def from_view(cls, view: TicketWithEvent) -> 'TicketResponse':
        ticket = view.ticket
        return cls(
            ticket_id=ticket.ticket_id,
            event_id=ticket.event_id,
            event_title=view.event.title,
            ticket_type=ticket.ticket_type,
            price=ticket.price,
            currency=ticket.currency,
            display_price=format_price(ticket.price, ticket.currency),
            status=ticket.status.value,
            payment_status=ticket.payment_status.value,
            purchase_date=ticket.purchase_date,
            check_in_status=ticket.check_in_status.value,
        )


class TicketDetailResponse(BaseModel):
    ticket_id: str
    ticket_type: str
    price: int
    currency: str
    display_price: str
    status: str
    payment_status: str
    payment_method: Optional[str] = None
    purchase_date: datetime
    check_in_status: str
    check_in_time: Optional[datetime] = None
    seat_number: Optional[str] = None
    special_requirements: Optional[str] = None
    notes: Optional[str] = None
    refundable: bool
    transferable: bool
    event: EventSummaryResponse

    @classmethod
    def from_view(cls, view: TicketWithEvent) -> 'TicketDetailResponse':
        ticket = view.ticket
        return cls(
            ticket_id=ticket.ticket_id,
            ticket_type=ticket.ticket_type,
            price=ticket.price,
            currency=ticket.currency,
            display_price=format_price(ticket.price, ticket.currency),
            status=ticket.status.value,
            payment_status=ticket.payment_status.value,
            payment_method=ticket.payment_method,
            purchase_date=ticket.purchase_date,
            check_in_status=ticket.check_in_status.value,
            check_in_time=ticket.check_in_time,
            seat_number=ticket.seat_number,
            special_requirements=ticket.special_requirements,
            notes=ticket.notes,
            refundable=ticket.refundable,
            transferable=ticket.transferable,
            event=EventSummaryResponse.from_domain(view.event),
        )
