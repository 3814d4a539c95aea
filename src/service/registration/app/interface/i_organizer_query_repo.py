from abc import ABC, abstractmethod
from typing import Optional

from src.service.registration.domain.entity.organizer_entity import Organizer


class IOrganizerQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, organizer_id: str) -> Optional[Organizer]:
        pass
