from datetime import datetime, timezone
from typing import Callable

import attrs
import uuid_utils

from src.service.registration.domain.entity.payment_attempt import PaymentAttempt
from src.service.registration.domain.enum.payment_method import FREE_REGISTRATION_LABEL
from src.service.registration.domain.enum.ticket_status import PaymentStatus


TicketIdFactory = Callable[[], str]


def generate_ticket_id() -> str:
    return f'TKT-{uuid_utils.uuid4().hex.upper()}'


@attrs.frozen
class IssuedTicket:
    """Terminal output of a successful payment attempt"""

    ticket_id: str
    payment_method: str
    payment_status: PaymentStatus
    amount: int
    currency: str
    event_id: str
    offer_id: str
    registrant_id: str
    issued_at: datetime

    @classmethod
    def issue(
        cls,
        *,
        attempt: PaymentAttempt,
        event_id: str,
        offer_id: str,
        registrant_id: str,
        ticket_id_factory: TicketIdFactory = generate_ticket_id,
    ) -> 'IssuedTicket':
        if attempt.is_free or attempt.method is None:
            payment_method = FREE_REGISTRATION_LABEL
        else:
            payment_method = attempt.method.display_name
        return cls(
            ticket_id=ticket_id_factory(),
            payment_method=payment_method,
            payment_status=PaymentStatus.COMPLETED,
            amount=attempt.amount,
            currency=attempt.currency,
            event_id=event_id,
            offer_id=offer_id,
            registrant_id=registrant_id,
            issued_at=datetime.now(timezone.utc),
        )
