from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.registration.app.query.list_my_tickets_use_case import ListMyTicketsUseCase
from src.service.registration.domain.value_object.registrant import Registrant
from src.service.registration.driving_adapter.http_controller.auth.current_registrant import (
    get_current_registrant,
)
from src.service.registration.driving_adapter.http_controller.schema.ticket_schema import (
    TicketDetailResponse,
    TicketResponse,
)


router = APIRouter()


@router.get('/my_tickets', response_model=List[TicketResponse])
@Logger.io
async def list_my_tickets(
    status: str = 'all',
    search: str = '',
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ListMyTicketsUseCase = Depends(ListMyTicketsUseCase.depends),
) -> List[TicketResponse]:
    views = await use_case.execute(user_id=registrant.user_id, status=status, search=search)
    return [TicketResponse.from_view(view) for view in views]


@router.get('/{ticket_id}')
@Logger.io
async def get_ticket(
    ticket_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketDetailResponse:
    view = await use_case.execute(ticket_id=ticket_id, user_id=registrant.user_id)
    return TicketDetailResponse.from_view(view)
