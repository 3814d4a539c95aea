from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.query.get_organizer_profile_use_case import (
    GetOrganizerProfileUseCase,
)
from src.service.registration.driving_adapter.http_controller.schema.organizer_schema import (
    OrganizerProfileResponse,
)


router = APIRouter()


@router.get('/{organizer_id}')
@Logger.io
async def get_organizer_profile(
    organizer_id: str,
    use_case: GetOrganizerProfileUseCase = Depends(GetOrganizerProfileUseCase.depends),
) -> OrganizerProfileResponse:
    view = await use_case.execute(organizer_id=organizer_id)
    return OrganizerProfileResponse.from_view(view)
