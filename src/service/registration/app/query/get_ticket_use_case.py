from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.dto.registration_views import TicketWithEvent
from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_ticket_query_repo import ITicketQueryRepo


class GetTicketUseCase:
    def __init__(
        self, *, ticket_query_repo: ITicketQueryRepo, event_query_repo: IEventQueryRepo
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, event_query_repo=event_query_repo)

    @Logger.io
    async def execute(self, *, ticket_id: str, user_id: str) -> TicketWithEvent:
        """
        Raises:
            NotFoundError: Unknown ticket, another user's ticket, or unknown event
        """
        ticket = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
        if not ticket or ticket.user_id != user_id:
            raise NotFoundError("Ticket not found or you don't have access to it")

        event = await self.event_query_repo.get_by_id(event_id=ticket.event_id)
        if not event:
            raise NotFoundError('Event not found')

        return TicketWithEvent(ticket=ticket, event=event)
