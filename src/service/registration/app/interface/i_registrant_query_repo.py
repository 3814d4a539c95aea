from abc import ABC, abstractmethod
from typing import Optional

from src.service.registration.domain.value_object.registrant import Registrant


class IRegistrantQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, user_id: str) -> Optional[Registrant]:
        pass
