from typing import Dict, Iterable, Optional

from src.service.registration.app.interface.i_registrant_query_repo import IRegistrantQueryRepo
from src.service.registration.domain.value_object.registrant import Registrant
from src.service.registration.driven_adapter.repo.mock_data import REGISTRANTS


class InMemoryRegistrantQueryRepoImpl(IRegistrantQueryRepo):
    def __init__(self, registrants: Iterable[Registrant] = REGISTRANTS) -> None:
        self._registrants: Dict[str, Registrant] = {r.user_id: r for r in registrants}

    async def get_by_id(self, *, user_id: str) -> Optional[Registrant]:
        return self._registrants.get(user_id)
