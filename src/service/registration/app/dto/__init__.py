from src.service.registration.app.dto.registration_views import (
    EventOffers,
    OrganizerProfile,
    TicketWithEvent,
)

__all__ = ['EventOffers', 'OrganizerProfile', 'TicketWithEvent']
