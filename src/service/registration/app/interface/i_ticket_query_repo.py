from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.registration.domain.entity.ticket_entity import TicketRecord


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, ticket_id: str) -> Optional[TicketRecord]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: str) -> List[TicketRecord]:
        pass
