from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional


if TYPE_CHECKING:
    from src.service.registration.app.command.registration_workflow import RegistrationWorkflow


class IRegistrationSessionRegistry(ABC):
    """Live registration workflows, one per attempt"""

    @abstractmethod
    def add(self, workflow: 'RegistrationWorkflow') -> None:
        pass

    @abstractmethod
    def get(self, attempt_id: str) -> 'RegistrationWorkflow':
        """
        Raises:
            NotFoundError: No live workflow with this attempt id
        """
        pass

    @abstractmethod
    def pending_for(self, registrant_id: str) -> Optional['RegistrationWorkflow']:
        """The registrant's workflow that has not reached a terminal stage, if any"""
        pass

    @abstractmethod
    async def discard(self, attempt_id: str) -> None:
        """Tear the workflow down and forget it. Unknown ids are ignored"""
        pass

    @abstractmethod
    async def close_all(self) -> None:
        pass
