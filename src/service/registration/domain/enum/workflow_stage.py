from enum import StrEnum


class WorkflowStage(StrEnum):
    SELECTING_METHOD = 'selecting_method'
    ENTERING_DETAILS = 'entering_details'
    PROCESSING = 'processing'
    SUCCESS = 'success'
    CANCELLED = 'cancelled'

    @property
    def is_terminal(self) -> bool:
        return self in (WorkflowStage.SUCCESS, WorkflowStage.CANCELLED)

    @property
    def is_cancellable(self) -> bool:
        return self in (WorkflowStage.SELECTING_METHOD, WorkflowStage.ENTERING_DETAILS)
