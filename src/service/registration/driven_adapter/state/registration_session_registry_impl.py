"""
In-memory Registration Session Registry

Keeps every live RegistrationWorkflow addressable by its attempt id so the
HTTP layer can drive it across requests.

- One pending attempt per registrant: the registration use case checks
  pending_for() before creating a new workflow
- discard() tears the workflow down before forgetting it
- close_all() runs at application shutdown
"""

from typing import Dict, Optional

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.command.registration_workflow import RegistrationWorkflow
from src.service.registration.app.interface.i_registration_session_registry import (
    IRegistrationSessionRegistry,
)


class RegistrationSessionRegistryImpl(IRegistrationSessionRegistry):
    def __init__(self) -> None:
        self._workflows: Dict[str, RegistrationWorkflow] = {}

    def add(self, workflow: RegistrationWorkflow) -> None:
        self._workflows[workflow.attempt_id] = workflow
        Logger.base.debug(
            f'📒 [REGISTRY] Tracking {workflow.attempt_id} (live: {len(self._workflows)})'
        )

    def get(self, attempt_id: str) -> RegistrationWorkflow:
        workflow = self._workflows.get(attempt_id)
        if workflow is None:
            raise NotFoundError('Registration attempt not found')
        return workflow

    def pending_for(self, registrant_id: str) -> Optional[RegistrationWorkflow]:
        for workflow in self._workflows.values():
            if workflow.registrant.user_id == registrant_id and workflow.is_pending:
                return workflow
        return None

    async def discard(self, attempt_id: str) -> None:
        workflow = self._workflows.pop(attempt_id, None)
        if workflow is None:
            return
        await workflow.close()
        Logger.base.debug(
            f'📒 [REGISTRY] Discarded {attempt_id} (live: {len(self._workflows)})'
        )

    async def close_all(self) -> None:
        for attempt_id in list(self._workflows):
            await self.discard(attempt_id)
