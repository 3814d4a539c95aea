from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.query.list_ticket_offers_use_case import (
    ListTicketOffersUseCase,
)
from src.service.registration.driving_adapter.http_controller.schema.registration_schema import (
    EventOffersResponse,
)


router = APIRouter()


@router.get('/{event_id}/offers')
@Logger.io
async def list_ticket_offers(
    event_id: str,
    use_case: ListTicketOffersUseCase = Depends(ListTicketOffersUseCase.depends),
) -> EventOffersResponse:
    """Ticket types on sale for one event, with prices and remaining seats."""
    view = await use_case.execute(event_id=event_id)
    return EventOffersResponse.from_domain(view)
