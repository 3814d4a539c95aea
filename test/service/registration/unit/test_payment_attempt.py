import pytest

from src.platform.exception.exceptions import WorkflowStageError
from src.service.registration.domain.entity.payment_attempt import PaymentAttempt
from src.service.registration.domain.enum import PaymentMethod, WorkflowStage


@pytest.fixture
def paid_attempt() -> PaymentAttempt:
    return PaymentAttempt(id='attempt-1', amount=25000, currency='RWF')


@pytest.mark.unit
class TestPaymentAttempt:
    def test_transitions_return_new_instances(self, paid_attempt: PaymentAttempt) -> None:
        chosen = paid_attempt.choose_method(PaymentMethod.MOBILE_MONEY)

        assert chosen is not paid_attempt
        assert paid_attempt.stage == WorkflowStage.SELECTING_METHOD
        assert chosen.stage == WorkflowStage.ENTERING_DETAILS
        assert chosen.method == PaymentMethod.MOBILE_MONEY

    def test_free_attempt_skips_details(self) -> None:
        attempt = PaymentAttempt(id='attempt-2', amount=0, currency='RWF')

        assert attempt.choose_method('bank_transfer').stage == WorkflowStage.PROCESSING

    def test_fields_overwrite_by_name(self, paid_attempt: PaymentAttempt) -> None:
        attempt = (
            paid_attempt.choose_method(PaymentMethod.CREDIT_CARD)
            .with_field('card_number', '4000')
            .with_field('card_number', '4111')
        )

        assert attempt.form_fields == {'card_number': '4111'}

    def test_failure_keeps_fields_and_records_reason(self, paid_attempt: PaymentAttempt) -> None:
        attempt = (
            paid_attempt.choose_method(PaymentMethod.BANK_TRANSFER)
            .with_field('bank_account', '000123')
            .mark_as_processing()
            .mark_as_failed('Gateway timeout')
        )

        assert attempt.stage == WorkflowStage.ENTERING_DETAILS
        assert attempt.last_error == 'Gateway timeout'
        assert attempt.form_fields == {'bank_account': '000123'}
        assert attempt.mark_as_processing().last_error is None

    @pytest.mark.parametrize(
        'stage',
        [WorkflowStage.PROCESSING, WorkflowStage.SUCCESS, WorkflowStage.CANCELLED],
    )
    def test_cancel_only_before_processing(self, stage: WorkflowStage) -> None:
        with pytest.raises(WorkflowStageError):
            PaymentAttempt(id='attempt-3', amount=100, currency='RWF', stage=stage).cancel()

    def test_cannot_succeed_without_processing(self, paid_attempt: PaymentAttempt) -> None:
        with pytest.raises(WorkflowStageError, match='selecting_method'):
            paid_attempt.mark_as_succeeded()
