from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.dto.registration_views import EventOffers
from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_ticket_offer_repo import ITicketOfferRepo


class ListTicketOffersUseCase:
    def __init__(
        self, *, event_query_repo: IEventQueryRepo, ticket_offer_repo: ITicketOfferRepo
    ) -> None:
        self.event_query_repo = event_query_repo
        self.ticket_offer_repo = ticket_offer_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        ticket_offer_repo: ITicketOfferRepo = Depends(Provide[Container.ticket_offer_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo, ticket_offer_repo=ticket_offer_repo)

    @Logger.io
    async def execute(self, *, event_id: str) -> EventOffers:
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError('Event not found')

        offers = await self.ticket_offer_repo.list_by_event(event=event)
        return EventOffers(event=event, offers=tuple(offers))
