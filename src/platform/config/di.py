"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.registration.driven_adapter.payment.simulated_payment_gateway_impl import (
    SimulatedPaymentGatewayImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_event_query_repo_impl import (
    InMemoryEventQueryRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_organizer_query_repo_impl import (
    InMemoryOrganizerQueryRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_registrant_query_repo_impl import (
    InMemoryRegistrantQueryRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_ticket_offer_repo_impl import (
    InMemoryTicketOfferRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_ticket_repo_impl import (
    InMemoryTicketRepoImpl,
)
from src.service.registration.driven_adapter.state.registration_session_registry_impl import (
    RegistrationSessionRegistryImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Background task group (set by main.py lifespan)
    # Registration processing runs here so it outlives the request that started it
    background_task_group = providers.Object(None)

    # In-memory repositories over the mock tables
    event_query_repo = providers.Singleton(InMemoryEventQueryRepoImpl)
    organizer_query_repo = providers.Singleton(InMemoryOrganizerQueryRepoImpl)
    registrant_query_repo = providers.Singleton(InMemoryRegistrantQueryRepoImpl)
    ticket_repo = providers.Singleton(InMemoryTicketRepoImpl)
    ticket_offer_repo = providers.Singleton(
        InMemoryTicketOfferRepoImpl,
        currency=config_service.provided.DEFAULT_CURRENCY,
        vip_price=config_service.provided.VIP_PRICE,
        vip_share=config_service.provided.VIP_SEAT_SHARE,
        student_share=config_service.provided.STUDENT_SEAT_SHARE,
    )

    # Simulated payment processor
    payment_gateway = providers.Singleton(
        SimulatedPaymentGatewayImpl,
        processing_delay=config_service.provided.PAYMENT_PROCESSING_DELAY_SECONDS,
    )

    # Live registration flows keyed by attempt id
    registration_session_registry = providers.Singleton(RegistrationSessionRegistryImpl)


container = Container()
