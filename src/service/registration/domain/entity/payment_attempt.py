from typing import Dict, Optional

import attrs

from src.platform.exception.exceptions import WorkflowStageError
from src.platform.logging.loguru_io import Logger
from src.service.registration.domain.enum.payment_method import PaymentMethod
from src.service.registration.domain.enum.workflow_stage import WorkflowStage


@attrs.define
class PaymentAttempt:
    id: str
    amount: int
    currency: str
    stage: WorkflowStage = WorkflowStage.SELECTING_METHOD
    method: Optional[PaymentMethod] = None
    form_fields: Dict[str, str] = attrs.field(factory=dict)
    last_error: Optional[str] = None

    @property
    def is_free(self) -> bool:
        return self.amount == 0

    def _require_stage(self, *allowed: WorkflowStage, action: str) -> None:
        if self.stage not in allowed:
            raise WorkflowStageError(f'Cannot {action} while attempt is {self.stage.value}')

    @Logger.io
    def choose_method(self, method: PaymentMethod) -> 'PaymentAttempt':
        """
        Record the chosen method.

        Free attempts skip detail collection and go straight to processing.
        """
        self._require_stage(WorkflowStage.SELECTING_METHOD, action='choose a payment method')
        next_stage = WorkflowStage.PROCESSING if self.is_free else WorkflowStage.ENTERING_DETAILS
        return attrs.evolve(self, method=PaymentMethod(method), stage=next_stage, last_error=None)

    def with_field(self, name: str, value: str) -> 'PaymentAttempt':
        self._require_stage(WorkflowStage.ENTERING_DETAILS, action='edit payment details')
        return attrs.evolve(self, form_fields={**self.form_fields, name: str(value)})

    @Logger.io
    def back_to_method_selection(self) -> 'PaymentAttempt':
        self._require_stage(WorkflowStage.ENTERING_DETAILS, action='change payment method')
        return attrs.evolve(
            self,
            stage=WorkflowStage.SELECTING_METHOD,
            method=None,
            form_fields={},
            last_error=None,
        )

    @Logger.io
    def mark_as_processing(self) -> 'PaymentAttempt':
        # Details are deliberately not validated: any submission proceeds
        self._require_stage(WorkflowStage.ENTERING_DETAILS, action='submit payment')
        return attrs.evolve(self, stage=WorkflowStage.PROCESSING, last_error=None)

    @Logger.io
    def mark_as_succeeded(self) -> 'PaymentAttempt':
        self._require_stage(WorkflowStage.PROCESSING, action='complete payment')
        return attrs.evolve(self, stage=WorkflowStage.SUCCESS)

    @Logger.io
    def mark_as_failed(self, reason: str) -> 'PaymentAttempt':
        """Return a failed run to the details step, keeping the entered fields"""
        self._require_stage(WorkflowStage.PROCESSING, action='fail payment')
        return attrs.evolve(self, stage=WorkflowStage.ENTERING_DETAILS, last_error=reason)

    @Logger.io
    def cancel(self) -> 'PaymentAttempt':
        if not self.stage.is_cancellable:
            raise WorkflowStageError(f'Cannot cancel while attempt is {self.stage.value}')
        return attrs.evolve(self, stage=WorkflowStage.CANCELLED, form_fields={})
