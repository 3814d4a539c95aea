from typing import Dict, Iterable, List, Optional

import attrs

from src.service.registration.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.registration.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.registration.domain.entity.ticket_entity import TicketRecord
from src.service.registration.driven_adapter.repo.mock_data import TICKETS


class InMemoryTicketRepoImpl(ITicketCommandRepo, ITicketQueryRepo):
    """Process-local ticket table seeded from the mock tickets"""

    def __init__(self, seed: Iterable[TicketRecord] = TICKETS) -> None:
        # Copies keep the module-level seed untouched
        self._tickets: Dict[str, TicketRecord] = {
            ticket.ticket_id: attrs.evolve(ticket) for ticket in seed
        }

    async def add(self, *, ticket: TicketRecord) -> TicketRecord:
        self._tickets[ticket.ticket_id] = ticket
        return ticket

    async def get_by_id(self, *, ticket_id: str) -> Optional[TicketRecord]:
        return self._tickets.get(ticket_id)

    async def list_by_user(self, *, user_id: str) -> List[TicketRecord]:
        tickets = [ticket for ticket in self._tickets.values() if ticket.user_id == user_id]
        return sorted(tickets, key=lambda ticket: ticket.purchase_date, reverse=True)
