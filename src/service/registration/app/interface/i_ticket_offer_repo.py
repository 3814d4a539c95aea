from abc import ABC, abstractmethod
from typing import List

from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


class ITicketOfferRepo(ABC):
    """Offer tiers per event, with their remaining counts"""

    @abstractmethod
    async def list_by_event(self, *, event: EventRecord) -> List[TicketOffer]:
        """Offers for the event, building them on first access"""
        pass

    @abstractmethod
    async def record_sale(self, *, event_id: str, offer_id: str) -> TicketOffer:
        """Decrement the offer's remaining count by one and return the new offer"""
        pass
