from typing import Dict, Optional, Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.command.registration_workflow import RegistrationWorkflow
from src.service.registration.app.interface.i_registration_session_registry import (
    IRegistrationSessionRegistry,
)
from src.service.registration.domain.entity.issued_ticket import IssuedTicket
from src.service.registration.domain.enum.payment_method import PaymentMethod
from src.service.registration.domain.value_object.registrant import Registrant


class ManageRegistrationUseCase:
    """Drive a registrant's live registration flow across requests"""

    def __init__(
        self,
        *,
        session_registry: IRegistrationSessionRegistry,
        result_timeout: float = 30.0,
    ) -> None:
        self.session_registry = session_registry
        self.result_timeout = result_timeout

    @classmethod
    @inject
    def depends(
        cls,
        session_registry: IRegistrationSessionRegistry = Depends(
            Provide[Container.registration_session_registry]
        ),
    ) -> Self:
        return cls(
            session_registry=session_registry,
            result_timeout=settings.REGISTRATION_RESULT_TIMEOUT_SECONDS,
        )

    def get(self, *, attempt_id: str, registrant: Registrant) -> RegistrationWorkflow:
        workflow = self.session_registry.get(attempt_id)
        # Another registrant's attempt is reported exactly like a missing one
        if workflow.registrant.user_id != registrant.user_id:
            raise NotFoundError('Registration attempt not found')
        return workflow

    @Logger.io
    async def select_method(
        self, *, attempt_id: str, registrant: Registrant, method: PaymentMethod
    ) -> RegistrationWorkflow:
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        workflow.select_method(method)
        return workflow

    @Logger.io
    async def update_fields(
        self, *, attempt_id: str, registrant: Registrant, fields: Dict[str, str]
    ) -> RegistrationWorkflow:
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        for name, value in fields.items():
            workflow.update_field(name, value)
        return workflow

    @Logger.io
    async def change_method(
        self, *, attempt_id: str, registrant: Registrant
    ) -> RegistrationWorkflow:
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        workflow.change_method()
        return workflow

    @Logger.io
    async def submit(
        self,
        *,
        attempt_id: str,
        registrant: Registrant,
        fields: Optional[Dict[str, str]] = None,
    ) -> RegistrationWorkflow:
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        for name, value in (fields or {}).items():
            workflow.update_field(name, value)
        workflow.submit()
        return workflow

    @Logger.io
    async def cancel(self, *, attempt_id: str, registrant: Registrant) -> RegistrationWorkflow:
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        await workflow.cancel()
        await self.session_registry.discard(attempt_id)
        return workflow

    @Logger.io
    async def wait_for_result(
        self, *, attempt_id: str, registrant: Registrant
    ) -> tuple[RegistrationWorkflow, Optional[IssuedTicket]]:
        """Long-poll until the current processing run ends or the timeout passes"""
        workflow = self.get(attempt_id=attempt_id, registrant=registrant)
        ticket = None
        with anyio.move_on_after(self.result_timeout):
            ticket = await workflow.wait_until_settled()
        return workflow, ticket

    @Logger.io
    async def teardown(self, *, attempt_id: str, registrant: Registrant) -> None:
        self.get(attempt_id=attempt_id, registrant=registrant)
        await self.session_registry.discard(attempt_id)
