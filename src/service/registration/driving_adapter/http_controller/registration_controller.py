"""
Registration flow endpoints.

A registration attempt lives in memory between requests. Processing runs in
the application's background task group, so submit returns immediately with
stage `processing` and clients poll the attempt or long-poll `/result`.
"""

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.command.manage_registration_use_case import (
    ManageRegistrationUseCase,
)
from src.service.registration.app.command.start_registration_use_case import (
    StartRegistrationUseCase,
)
from src.service.registration.domain.value_object.registrant import Registrant
from src.service.registration.driving_adapter.http_controller.auth.current_registrant import (
    get_current_registrant,
)
from src.service.registration.driving_adapter.http_controller.schema.registration_schema import (
    PaymentFieldsRequest,
    PaymentMethodRequest,
    RegistrationCreateRequest,
    RegistrationResponse,
    SubmitPaymentRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def start_registration(
    request: RegistrationCreateRequest,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: StartRegistrationUseCase = Depends(StartRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.start(
        event_id=request.event_id, offer_id=request.offer_id, registrant=registrant
    )
    return RegistrationResponse.from_workflow(workflow)


@router.get('/{attempt_id}')
async def get_registration(
    attempt_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = use_case.get(attempt_id=attempt_id, registrant=registrant)
    return RegistrationResponse.from_workflow(workflow)


@router.post('/{attempt_id}/method')
@Logger.io
async def select_payment_method(
    attempt_id: str,
    request: PaymentMethodRequest,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.select_method(
        attempt_id=attempt_id, registrant=registrant, method=request.method
    )
    return RegistrationResponse.from_workflow(workflow)


@router.patch('/{attempt_id}/fields')
@Logger.io
async def update_payment_fields(
    attempt_id: str,
    request: PaymentFieldsRequest,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.update_fields(
        attempt_id=attempt_id, registrant=registrant, fields=request.fields
    )
    return RegistrationResponse.from_workflow(workflow)


@router.post('/{attempt_id}/change_method')
@Logger.io
async def change_payment_method(
    attempt_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.change_method(attempt_id=attempt_id, registrant=registrant)
    return RegistrationResponse.from_workflow(workflow)


@router.post('/{attempt_id}/submit', status_code=status.HTTP_202_ACCEPTED)
@Logger.io
async def submit_payment(
    attempt_id: str,
    request: SubmitPaymentRequest,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.submit(
        attempt_id=attempt_id, registrant=registrant, fields=request.fields
    )
    return RegistrationResponse.from_workflow(workflow)


@router.post('/{attempt_id}/cancel')
@Logger.io
async def cancel_registration(
    attempt_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    workflow = await use_case.cancel(attempt_id=attempt_id, registrant=registrant)
    return RegistrationResponse.from_workflow(workflow)


@router.get('/{attempt_id}/result')
@Logger.io
async def wait_for_registration_result(
    attempt_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> RegistrationResponse:
    """Block until the running payment or confirmation step ends, bounded by a timeout."""
    workflow, _ = await use_case.wait_for_result(attempt_id=attempt_id, registrant=registrant)
    return RegistrationResponse.from_workflow(workflow)


@router.delete('/{attempt_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def close_registration(
    attempt_id: str,
    registrant: Registrant = Depends(get_current_registrant),
    use_case: ManageRegistrationUseCase = Depends(ManageRegistrationUseCase.depends),
) -> None:
    await use_case.teardown(attempt_id=attempt_id, registrant=registrant)
