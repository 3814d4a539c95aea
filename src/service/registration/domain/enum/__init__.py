"""Registration Domain Enums"""

from src.service.registration.domain.enum.payment_method import (
    FREE_REGISTRATION_LABEL,
    PaymentMethod,
)
from src.service.registration.domain.enum.ticket_status import (
    CheckInStatus,
    PaymentStatus,
    TicketStatus,
)
from src.service.registration.domain.enum.workflow_stage import WorkflowStage

__all__ = [
    'FREE_REGISTRATION_LABEL',
    'CheckInStatus',
    'PaymentMethod',
    'PaymentStatus',
    'TicketStatus',
    'WorkflowStage',
]
