from functools import partial
from typing import Optional, Self

import anyio
from anyio.abc import TaskGroup
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceUnavailableError,
)
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.command.registration_workflow import RegistrationWorkflow
from src.service.registration.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.registration.app.interface.i_payment_gateway import IPaymentGateway
from src.service.registration.app.interface.i_registration_session_registry import (
    IRegistrationSessionRegistry,
)
from src.service.registration.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.registration.app.interface.i_ticket_offer_repo import ITicketOfferRepo
from src.service.registration.domain.entity.issued_ticket import IssuedTicket
from src.service.registration.domain.entity.registration_selection import RegistrationSelection
from src.service.registration.domain.entity.ticket_entity import TicketRecord
from src.service.registration.domain.value_object.registrant import Registrant


class StartRegistrationUseCase:
    """
    Open a registration flow for one offer of one event.

    The use case owns what happens after success: the offer's remaining count
    drops by one and the issued ticket is recorded for the registrant. When the
    seat is already gone the ticket is refused and nothing is recorded. A
    cancelled or torn-down flow changes nothing.

    Settled flows are dropped from the session registry once `result_retention`
    seconds have passed, so clients can still read the outcome meanwhile.
    """

    def __init__(
        self,
        *,
        event_query_repo: IEventQueryRepo,
        ticket_offer_repo: ITicketOfferRepo,
        ticket_command_repo: ITicketCommandRepo,
        session_registry: IRegistrationSessionRegistry,
        payment_gateway: IPaymentGateway,
        task_group: Optional[TaskGroup],
        free_registration_delay: float = 0.0,
        confirmation_delay: float = 0.0,
        result_retention: float = 0.0,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.ticket_offer_repo = ticket_offer_repo
        self.ticket_command_repo = ticket_command_repo
        self.session_registry = session_registry
        self.payment_gateway = payment_gateway
        self.task_group = task_group
        self.free_registration_delay = free_registration_delay
        self.confirmation_delay = confirmation_delay
        self.result_retention = result_retention

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        ticket_offer_repo: ITicketOfferRepo = Depends(Provide[Container.ticket_offer_repo]),
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_repo]),
        session_registry: IRegistrationSessionRegistry = Depends(
            Provide[Container.registration_session_registry]
        ),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        task_group: Optional[TaskGroup] = Depends(Provide[Container.background_task_group]),
    ) -> Self:
        return cls(
            event_query_repo=event_query_repo,
            ticket_offer_repo=ticket_offer_repo,
            ticket_command_repo=ticket_command_repo,
            session_registry=session_registry,
            payment_gateway=payment_gateway,
            task_group=task_group,
            free_registration_delay=settings.FREE_REGISTRATION_DELAY_SECONDS,
            confirmation_delay=settings.CONFIRMATION_DELAY_SECONDS,
            result_retention=settings.REGISTRATION_RETENTION_SECONDS,
        )

    @Logger.io
    async def start(
        self, *, event_id: str, offer_id: str, registrant: Registrant
    ) -> RegistrationWorkflow:
        """
        Raises:
            NotFoundError: Unknown event or ticket type
            DomainError: The ticket type is sold out
            ConflictError: The registrant already has a registration in progress
            ServiceUnavailableError: No background task group to run registrations in
        """
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError('Event not found')

        offers = await self.ticket_offer_repo.list_by_event(event=event)
        selected = next((offer for offer in offers if offer.id == offer_id), None)
        if selected is None:
            raise NotFoundError('Ticket type not found')
        offer = RegistrationSelection().select(selected).resolve(offers)

        if pending := self.session_registry.pending_for(registrant.user_id):
            raise ConflictError(f'Registration {pending.attempt_id} is still in progress')

        if self.task_group is None:
            raise ServiceUnavailableError('Registration processing is not available')

        attempt_id = str(uuid_utils.uuid7())
        workflow = RegistrationWorkflow(
            event=event,
            offer=offer,
            registrant=registrant,
            payment_gateway=self.payment_gateway,
            task_group=self.task_group,
            on_success=partial(
                self._record_ticket, ticket_type=offer.name, attempt_id=attempt_id
            ),
            free_registration_delay=self.free_registration_delay,
            confirmation_delay=self.confirmation_delay,
            attempt_id=attempt_id,
        )
        self.session_registry.add(workflow)

        Logger.base.info(
            f'📝 [REGISTRATION] {registrant.user_id} opened {workflow.attempt_id} '
            f'for {offer.id}@{event.event_id} ({offer.display_price})'
        )
        return workflow

    async def _record_ticket(
        self, ticket: IssuedTicket, *, ticket_type: str, attempt_id: str
    ) -> None:
        try:
            # Raises DomainError when the last seat was sold to another attempt
            await self.ticket_offer_repo.record_sale(
                event_id=ticket.event_id, offer_id=ticket.offer_id
            )
            await self.ticket_command_repo.add(
                ticket=TicketRecord.from_issued(ticket, ticket_type=ticket_type)
            )
        finally:
            self._expire_later(attempt_id)

    def _expire_later(self, attempt_id: str) -> None:
        if self.task_group is None:
            return

        async def expire() -> None:
            await anyio.sleep(self.result_retention)
            await self.session_registry.discard(attempt_id)

        self.task_group.start_soon(expire, name=f'registration-expiry-{attempt_id}')
