from typing import Dict, List

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_ticket_offer_repo import ITicketOfferRepo
from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.offer_catalog import build_offers
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


class InMemoryTicketOfferRepoImpl(ITicketOfferRepo):
    """
    Offers are built from the event's seats on first access and kept per event.

    Sales replace the stored offer with a decremented copy; offers handed out
    earlier keep the count they were loaded with.
    """

    def __init__(
        self,
        *,
        currency: str,
        vip_price: int,
        vip_share: float,
        student_share: float,
    ) -> None:
        self._currency = currency
        self._vip_price = vip_price
        self._vip_share = vip_share
        self._student_share = student_share
        self._offers: Dict[str, Dict[str, TicketOffer]] = {}

    async def list_by_event(self, *, event: EventRecord) -> List[TicketOffer]:
        if event.event_id not in self._offers:
            offers = build_offers(
                event,
                currency=self._currency,
                vip_price=self._vip_price,
                vip_share=self._vip_share,
                student_share=self._student_share,
            )
            self._offers[event.event_id] = {offer.id: offer for offer in offers}
        return list(self._offers[event.event_id].values())

    async def record_sale(self, *, event_id: str, offer_id: str) -> TicketOffer:
        offer = self._offers.get(event_id, {}).get(offer_id)
        if offer is None:
            raise NotFoundError('Ticket type not found')
        if offer.is_sold_out:
            raise DomainError(f'Ticket type {offer.name} is sold out')

        sold = offer.with_one_sold()
        self._offers[event_id][offer_id] = sold
        Logger.base.info(
            f'📉 [OFFERS] {offer_id}@{event_id} remaining '
            f'{offer.remaining_count} -> {sold.remaining_count}'
        )
        return sold
