from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.registration.domain.entity.event_entity import EventRecord


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventRecord]:
        pass

    @abstractmethod
    async def list_by_organizer(self, *, organizer_id: str) -> List[EventRecord]:
        pass
