from datetime import date, datetime, time
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.registration.app.command.registration_workflow import RegistrationWorkflow
from src.service.registration.app.dto.registration_views import EventOffers
from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.entity.issued_ticket import IssuedTicket
from src.service.registration.domain.enum.payment_method import PaymentMethod
from src.service.registration.domain.enum.workflow_stage import WorkflowStage
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


class EventSummaryResponse(BaseModel):
    event_id: str
    title: str
    event_date: date
    start_time: time
    end_time: time
    venue: str
    address: str
    available_seats: int

    @classmethod
    def from_domain(cls, event: EventRecord) -> 'EventSummaryResponse':
        return cls(
            event_id=event.event_id,
            title=event.title,
            event_date=event.event_date,
            start_time=event.start_time,
            end_time=event.end_time,
            venue=event.venue,
            address=event.address,
            available_seats=event.available_seats,
        )


class TicketOfferResponse(BaseModel):
    id: str
    name: str
    unit_price: int
    currency: str
    display_price: str
    remaining_count: int
    description: str
    benefits: List[str]
    is_free: bool

    @classmethod
    def from_domain(cls, offer: TicketOffer) -> 'TicketOfferResponse':
        return cls(
            id=offer.id,
            name=offer.name,
            unit_price=offer.unit_price,
            currency=offer.currency,
            display_price=offer.display_price,
            remaining_count=offer.remaining_count,
            description=offer.description,
            benefits=list(offer.benefits),
            is_free=offer.is_free,
        )


class EventOffersResponse(BaseModel):
    event: EventSummaryResponse
    offers: List[TicketOfferResponse]

    @classmethod
    def from_domain(cls, view: EventOffers) -> 'EventOffersResponse':
        return cls(
            event=EventSummaryResponse.from_domain(view.event),
            offers=[TicketOfferResponse.from_domain(offer) for offer in view.offers],
        )


class RegistrationCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'event_id': 'cultural-festival-2025', 'offer_id': 'vip'}}
    )

    event_id: str
    offer_id: str


class PaymentMethodRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'method': 'mobile_money'}})

    method: PaymentMethod


class PaymentFieldsRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'fields': {'phone_number': '+250788123456'}}}
    )

    fields: Dict[str, str]


class SubmitPaymentRequest(BaseModel):
    fields: Dict[str, str] = {}


class PaymentMethodOption(BaseModel):
    id: PaymentMethod
    name: str
    description: str
    detail_fields: List[str]

    @classmethod
    def from_domain(cls, method: PaymentMethod) -> 'PaymentMethodOption':
        return cls(
            id=method,
            name=method.display_name,
            description=method.description,
            detail_fields=list(method.detail_fields),
        )


class IssuedTicketResponse(BaseModel):
    ticket_id: str
    payment_method: str
    payment_status: str
    amount: int
    currency: str
    event_id: str
    offer_id: str
    issued_at: datetime

    @classmethod
    def from_domain(cls, ticket: IssuedTicket) -> 'IssuedTicketResponse':
        return cls(
            ticket_id=ticket.ticket_id,
            payment_method=ticket.payment_method,
            payment_status=ticket.payment_status.value,
            amount=ticket.amount,
            currency=ticket.currency,
            event_id=ticket.event_id,
            offer_id=ticket.offer_id,
            issued_at=ticket.issued_at,
        )


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'attempt_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'event_id': 'cultural-festival-2025',
                'offer_id': 'vip',
                'ticket_type': 'VIP Access',
                'amount': 25000,
                'currency': 'RWF',
                'display_price': 'RWF 25,000',
                'stage': 'entering_details',
                'stage_history': ['selecting_method', 'entering_details'],
                'payment_method': 'mobile_money',
                'entered_fields': ['phone_number'],
                'last_error': None,
                'payment_methods': [],
                'issued_ticket': None,
            }
        }
    )

    attempt_id: str
    event_id: str
    offer_id: str
    ticket_type: str
    amount: int
    currency: str
    display_price: str
    stage: WorkflowStage
    stage_history: List[WorkflowStage]
    payment_method: Optional[PaymentMethod] = None
    # Values stay server-side; only the names of filled fields are echoed
    entered_fields: List[str] = []
    last_error: Optional[str] = None
    payment_methods: List[PaymentMethodOption] = []
    issued_ticket: Optional[IssuedTicketResponse] = None

    @classmethod
    def from_workflow(cls, workflow: RegistrationWorkflow) -> 'RegistrationResponse':
        attempt = workflow.attempt
        ticket = workflow.issued_ticket if workflow.is_delivered else None
        return cls(
            attempt_id=workflow.attempt_id,
            event_id=workflow.event.event_id,
            offer_id=workflow.offer.id,
            ticket_type=workflow.offer.name,
            amount=attempt.amount,
            currency=attempt.currency,
            display_price=workflow.offer.display_price,
            stage=attempt.stage,
            stage_history=list(workflow.stage_history),
            payment_method=attempt.method,
            entered_fields=sorted(attempt.form_fields),
            last_error=attempt.last_error or workflow.delivery_error,
            payment_methods=(
                [PaymentMethodOption.from_domain(method) for method in PaymentMethod]
                if attempt.stage == WorkflowStage.SELECTING_METHOD
                else []
            ),
            issued_ticket=IssuedTicketResponse.from_domain(ticket) if ticket else None,
        )
