from typing import Tuple

import attrs

from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.entity.organizer_entity import Organizer
from src.service.registration.domain.entity.ticket_entity import TicketRecord
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


@attrs.frozen
class EventOffers:
    event: EventRecord
    offers: Tuple[TicketOffer, ...]


@attrs.frozen
class TicketWithEvent:
    ticket: TicketRecord
    event: EventRecord


@attrs.frozen
class OrganizerProfile:
    organizer: Organizer
    events: Tuple[EventRecord, ...]
