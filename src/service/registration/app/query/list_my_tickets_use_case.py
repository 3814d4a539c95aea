from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.dto.registration_views import TicketWithEvent
from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.registration.domain.enum.ticket_status import TicketStatus


STATUS_FILTERS = frozenset({'all', *(status.value for status in TicketStatus)})


class ListMyTicketsUseCase:
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
    async def execute(
        self, *, user_id: str, status: str = 'all', search: str = ''
    ) -> List[TicketWithEvent]:
        """
        Tickets of one user, newest purchase first.

        `search` matches the event title or the ticket id, case-insensitively.
        Tickets whose event is unknown are left out.
        """
        if status not in STATUS_FILTERS:
            raise DomainError(f'Invalid status filter: {status}')

        results: List[TicketWithEvent] = []
        for ticket in await self.ticket_query_repo.list_by_user(user_id=user_id):
            event = await self.event_query_repo.get_by_id(event_id=ticket.event_id)
            if event is None:
                continue
            if ticket.matches(status=status, search=search, event_title=event.title):
                results.append(TicketWithEvent(ticket=ticket, event=event))

        Logger.base.info(
            f'🎫 [MY_TICKETS] {len(results)} tickets for {user_id} '
            f'(status={status}, search={search!r})'
        )
        return results
