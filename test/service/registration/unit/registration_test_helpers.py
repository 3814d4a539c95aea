"""Shared builders and fakes for registration unit tests"""

from datetime import date, time
from typing import List, Optional

import anyio

from src.platform.exception.exceptions import GatewayError
from src.service.registration.app.interface.i_payment_gateway import IPaymentGateway
from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.entity.issued_ticket import IssuedTicket
from src.service.registration.domain.entity.payment_attempt import PaymentAttempt
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


def make_event(*, available_seats: int = 2000) -> EventRecord:
    return EventRecord(
        event_id='cultural-festival-2025',
        title='Rwanda Cultural Festival',
        event_date=date(2025, 3, 20),
        start_time=time(18, 0),
        end_time=time(23, 0),
        venue='Amahoro Stadium',
        address='KG 17 Ave, Kigali',
        available_seats=available_seats,
        organizer_id='university-of-rwanda',
    )


def make_vip_offer(*, remaining_count: int = 400) -> TicketOffer:
    return TicketOffer(
        id='vip',
        name='VIP Access',
        unit_price=25000,
        currency='RWF',
        remaining_count=remaining_count,
    )


def make_free_offer(*, remaining_count: int = 2000) -> TicketOffer:
    return TicketOffer(
        id='general',
        name='General Admission',
        unit_price=0,
        currency='RWF',
        remaining_count=remaining_count,
    )


class FakePaymentGateway(IPaymentGateway):
    """
    Records every charge.

    `failures` declines that many charges before approving; when `release` is
    given, each charge waits for it first.
    """

    def __init__(self, *, failures: int = 0, release: Optional[anyio.Event] = None) -> None:
        self.calls: List[PaymentAttempt] = []
        self.failures = failures
        self.release = release
        self.started = anyio.Event()

    async def process(self, *, attempt: PaymentAttempt) -> None:
        self.calls.append(attempt)
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if self.failures:
            self.failures -= 1
            raise GatewayError('Payment declined')


class TicketSink:
    def __init__(self) -> None:
        self.tickets: List[IssuedTicket] = []
        self.cancellations = 0

    def on_success(self, ticket: IssuedTicket) -> None:
        self.tickets.append(ticket)

    async def on_cancel(self) -> None:
        self.cancellations += 1
