from typing import Dict, Iterable, Optional

from src.service.registration.app.interface.i_organizer_query_repo import IOrganizerQueryRepo
from src.service.registration.domain.entity.organizer_entity import Organizer
from src.service.registration.driven_adapter.repo.mock_data import ORGANIZERS


class InMemoryOrganizerQueryRepoImpl(IOrganizerQueryRepo):
    def __init__(self, organizers: Iterable[Organizer] = ORGANIZERS) -> None:
        self._organizers: Dict[str, Organizer] = {o.organizer_id: o for o in organizers}

    async def get_by_id(self, *, organizer_id: str) -> Optional[Organizer]:
        return self._organizers.get(organizer_id)
