from typing import Dict, Iterable, List, Optional

from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.driven_adapter.repo.mock_data import EVENTS


class InMemoryEventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, events: Iterable[EventRecord] = EVENTS) -> None:
        self._events: Dict[str, EventRecord] = {event.event_id: event for event in events}

    async def get_by_id(self, *, event_id: str) -> Optional[EventRecord]:
        return self._events.get(event_id)

    async def list_by_organizer(self, *, organizer_id: str) -> List[EventRecord]:
        return [event for event in self._events.values() if event.organizer_id == organizer_id]
