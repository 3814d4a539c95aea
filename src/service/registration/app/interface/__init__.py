"""Application layer interfaces (Ports)"""

from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_organizer_query_repo import IOrganizerQueryRepo
from src.service.registration.app.interface.i_payment_gateway import IPaymentGateway
from src.service.registration.app.interface.i_registrant_query_repo import IRegistrantQueryRepo
from src.service.registration.app.interface.i_registration_session_registry import (
    IRegistrationSessionRegistry,
)
from src.service.registration.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.registration.app.interface.i_ticket_offer_repo import ITicketOfferRepo
from src.service.registration.app.interface.i_ticket_query_repo import ITicketQueryRepo

__all__ = [
    'IEventQueryRepo',
    'IOrganizerQueryRepo',
    'IPaymentGateway',
    'IRegistrantQueryRepo',
    'IRegistrationSessionRegistry',
    'ITicketCommandRepo',
    'ITicketOfferRepo',
    'ITicketQueryRepo',
]
