"""
Wire Modules Configuration

Modules whose `Provide[...]` markers need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.registration.app.command import (
    manage_registration_use_case,
    start_registration_use_case,
)
from src.service.registration.app.query import (
    get_organizer_profile_use_case,
    get_ticket_use_case,
    list_my_tickets_use_case,
    list_ticket_offers_use_case,
)
from src.service.registration.driving_adapter.http_controller.auth import current_registrant


WIRE_MODULES: list[ModuleType] = [
    start_registration_use_case,
    manage_registration_use_case,
    list_ticket_offers_use_case,
    list_my_tickets_use_case,
    get_ticket_use_case,
    get_organizer_profile_use_case,
    current_registrant,
]
