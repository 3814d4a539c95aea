from abc import ABC, abstractmethod

from src.service.registration.domain.entity.ticket_entity import TicketRecord


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def add(self, *, ticket: TicketRecord) -> TicketRecord:
        pass
