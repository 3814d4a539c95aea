"""Registration Domain Value Objects"""

from src.service.registration.domain.value_object.registrant import Registrant
from src.service.registration.domain.value_object.ticket_offer import TicketOffer, format_price

__all__ = ['Registrant', 'TicketOffer', 'format_price']
