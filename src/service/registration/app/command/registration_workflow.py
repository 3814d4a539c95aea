"""
Registration Workflow Controller

Drives one registrant from payment method selection to exactly one issued
ticket for the selected offer.

Stages:
    selecting_method -> entering_details -> processing -> success
    selecting_method | entering_details -> cancelled
    entering_details -> selecting_method            (change method)
    processing -> entering_details                  (gateway declined)

Free offers skip detail collection: choosing any method passes through a
zero-duration processing step that is not part of the visible stage history,
so the history reads [selecting_method, success].

Timing:
    - paid: processing waits on the payment gateway, then success
    - free: success immediately, then the free registration delay
    - either way the ticket is minted on entering success and on_success
      fires after a further confirmation delay, exactly once
    - if on_success raises a service error the ticket is dropped and the
      attempt settles without delivery

Every delayed run executes in a cancel scope owned by the workflow, inside the
task group handed over by the host. close() cancels that scope, so once the
host is torn down no callback fires.
"""

from inspect import isawaitable
from typing import Awaitable, Callable, List, Optional, Tuple

import anyio
from anyio.abc import TaskGroup
import uuid_utils

from src.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    GatewayError,
    WorkflowStageError,
)
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_payment_gateway import IPaymentGateway
from src.service.registration.domain.entity.event_entity import EventRecord
from src.service.registration.domain.entity.issued_ticket import (
    IssuedTicket,
    TicketIdFactory,
    generate_ticket_id,
)
from src.service.registration.domain.entity.payment_attempt import PaymentAttempt
from src.service.registration.domain.enum.payment_method import PaymentMethod
from src.service.registration.domain.enum.workflow_stage import WorkflowStage
from src.service.registration.domain.value_object.registrant import Registrant
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


OnSuccess = Callable[[IssuedTicket], Optional[Awaitable[None]]]
OnCancel = Callable[[], Optional[Awaitable[None]]]


class RegistrationWorkflow:
    def __init__(
        self,
        *,
        event: EventRecord,
        offer: TicketOffer,
        registrant: Registrant,
        payment_gateway: IPaymentGateway,
        task_group: TaskGroup,
        on_success: OnSuccess,
        on_cancel: Optional[OnCancel] = None,
        free_registration_delay: float = 0.0,
        confirmation_delay: float = 0.0,
        attempt_id: Optional[str] = None,
        ticket_id_factory: TicketIdFactory = generate_ticket_id,
    ) -> None:
        if offer.is_sold_out:
            raise DomainError(f'Ticket type {offer.name} is sold out')

        self.event = event
        self.offer = offer
        self.registrant = registrant
        self._payment_gateway = payment_gateway
        self._task_group = task_group
        self._on_success = on_success
        self._on_cancel = on_cancel
        self._free_registration_delay = free_registration_delay
        self._confirmation_delay = confirmation_delay
        self._ticket_id_factory = ticket_id_factory

        self._attempt = PaymentAttempt(
            id=attempt_id or str(uuid_utils.uuid7()),
            amount=offer.unit_price,
            currency=offer.currency,
        )
        self._stage_history: List[WorkflowStage] = [self._attempt.stage]
        self._issued_ticket: Optional[IssuedTicket] = None
        self._delivered = False
        self._delivery_error: Optional[str] = None
        self._closed = False
        self._run_scope: Optional[anyio.CancelScope] = None
        self._run_done: Optional[anyio.Event] = None

    # ------------------------------------------------------------------ state

    @property
    def attempt_id(self) -> str:
        return self._attempt.id

    @property
    def attempt(self) -> PaymentAttempt:
        return self._attempt

    @property
    def stage(self) -> WorkflowStage:
        return self._attempt.stage

    @property
    def stage_history(self) -> Tuple[WorkflowStage, ...]:
        return tuple(self._stage_history)

    @property
    def issued_ticket(self) -> Optional[IssuedTicket]:
        return self._issued_ticket

    @property
    def is_delivered(self) -> bool:
        return self._delivered

    @property
    def delivery_error(self) -> Optional[str]:
        """Why a minted ticket was refused by the success callback, if it was"""
        return self._delivery_error

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_pending_run(self) -> bool:
        return self._run_done is not None and not self._run_done.is_set()

    @property
    def is_pending(self) -> bool:
        """True until the attempt is cancelled, delivered or torn down"""
        if self._closed:
            return False
        return not self.stage.is_terminal or self.has_pending_run

    # --------------------------------------------------------------- commands

    @Logger.io
    def select_method(self, method: PaymentMethod) -> WorkflowStage:
        self._ensure_open()
        attempt = self._attempt.choose_method(method)

        if attempt.stage != WorkflowStage.PROCESSING:
            self._enter(attempt)
            return self.stage

        # Free registration: zero-duration processing, straight to success
        self._enter(attempt, visible=False)
        self._succeed()
        Logger.base.info(
            f'🎟️ [REGISTRATION] Free registration {self.attempt_id} '
            f'for {self.offer.id}@{self.event.event_id}'
        )
        self._start_run(self._confirm_free_registration)
        return self.stage

    def update_field(self, name: str, value: str) -> None:
        self._ensure_open()
        self._enter(self._attempt.with_field(name, value), visible=False)

    @Logger.io
    def change_method(self) -> WorkflowStage:
        self._ensure_open()
        self._enter(self._attempt.back_to_method_selection())
        return self.stage

    @Logger.io
    def submit(self) -> WorkflowStage:
        """Start processing. Entered details are not validated."""
        self._ensure_open()
        self._enter(self._attempt.mark_as_processing())
        Logger.base.info(
            f'💳 [REGISTRATION] Processing {self.attempt_id} '
            f'via {self._attempt.method} for {self.offer.display_price}'
        )
        self._start_run(self._process_payment)
        return self.stage

    @Logger.io
    async def cancel(self) -> None:
        """User closed the flow before processing: no ticket is produced."""
        self._ensure_open()
        self._enter(self._attempt.cancel())
        Logger.base.info(f'🚪 [REGISTRATION] Cancelled {self.attempt_id}')
        if self._on_cancel is not None:
            result = self._on_cancel()
            if isawaitable(result):
                await result

    async def close(self) -> None:
        """Host teardown: drop any pending completion. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        if self._run_scope is not None:
            self._run_scope.cancel()
        Logger.base.info(f'🧹 [REGISTRATION] Closed {self.attempt_id} at {self.stage.value}')

    async def wait_until_settled(self) -> Optional[IssuedTicket]:
        """
        Wait for the current processing run, if any, to end.

        Returns:
            The delivered ticket, or None when nothing was delivered
        """
        if self._run_done is not None:
            await self._run_done.wait()
        return self._issued_ticket if self._delivered else None

    # -------------------------------------------------------------- internals

    def _ensure_open(self) -> None:
        if self._closed:
            raise WorkflowStageError('Registration flow has been closed')

    def _enter(self, attempt: PaymentAttempt, *, visible: bool = True) -> None:
        changed = attempt.stage != self._attempt.stage
        self._attempt = attempt
        if visible and changed:
            self._stage_history.append(attempt.stage)

    def _succeed(self) -> None:
        self._enter(self._attempt.mark_as_succeeded())
        self._issued_ticket = IssuedTicket.issue(
            attempt=self._attempt,
            event_id=self.event.event_id,
            offer_id=self.offer.id,
            registrant_id=self.registrant.user_id,
            ticket_id_factory=self._ticket_id_factory,
        )

    def _start_run(self, run: Callable[[], Awaitable[None]]) -> None:
        scope = anyio.CancelScope()
        done = anyio.Event()
        self._run_scope, self._run_done = scope, done

        async def guarded_run() -> None:
            try:
                with scope:
                    await run()
            except Exception:
                Logger.base.exception(f'💥 [REGISTRATION] Run for {self.attempt_id} crashed')
            finally:
                done.set()

        self._task_group.start_soon(guarded_run, name=f'registration-{self.attempt_id}')

    async def _process_payment(self) -> None:
        try:
            await self._payment_gateway.process(attempt=self._attempt)
        except GatewayError as e:
            self._enter(self._attempt.mark_as_failed(e.message))
            Logger.base.warning(
                f'⚠️ [REGISTRATION] Payment for {self.attempt_id} failed: {e.message}'
            )
            return

        self._succeed()
        await anyio.sleep(self._confirmation_delay)
        await self._deliver()

    async def _confirm_free_registration(self) -> None:
        await anyio.sleep(self._free_registration_delay)
        await anyio.sleep(self._confirmation_delay)
        await self._deliver()

    async def _deliver(self) -> None:
        if self._delivered or self._closed or self._issued_ticket is None:
            return
        ticket = self._issued_ticket
        # A started delivery runs to completion even if the host closes meanwhile
        with anyio.CancelScope(shield=True):
            try:
                result = self._on_success(ticket)
                if isawaitable(result):
                    await result
            except CustomBaseError as e:
                # The host refused the ticket (e.g. the last seat went to another attempt)
                self._issued_ticket = None
                self._delivery_error = e.message
                Logger.base.warning(
                    f'⚠️ [REGISTRATION] Ticket {ticket.ticket_id} for {self.attempt_id} '
                    f'was refused: {e.message}'
                )
                return

        self._delivered = True
        Logger.base.info(f'✅ [REGISTRATION] Issued {ticket.ticket_id} for {self.attempt_id}')
