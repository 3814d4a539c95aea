from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.dto.registration_views import OrganizerProfile
from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_organizer_query_repo import IOrganizerQueryRepo


MAX_PROFILE_EVENTS = 6


class GetOrganizerProfileUseCase:
    def __init__(
        self, *, organizer_query_repo: IOrganizerQueryRepo, event_query_repo: IEventQueryRepo
    ) -> None:
        self.organizer_query_repo = organizer_query_repo
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        organizer_query_repo: IOrganizerQueryRepo = Depends(
            Provide[Container.organizer_query_repo]
        ),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(organizer_query_repo=organizer_query_repo, event_query_repo=event_query_repo)

    @Logger.io
    async def execute(self, *, organizer_id: str) -> OrganizerProfile:
        organizer = await self.organizer_query_repo.get_by_id(organizer_id=organizer_id)
        if not organizer:
            raise NotFoundError('Organizer not found')

        events = await self.event_query_repo.list_by_organizer(organizer_id=organizer_id)
        return OrganizerProfile(organizer=organizer, events=tuple(events[:MAX_PROFILE_EVENTS]))
