from abc import ABC, abstractmethod

from src.service.registration.domain.entity.payment_attempt import PaymentAttempt


class IPaymentGateway(ABC):
    @abstractmethod
    async def process(self, *, attempt: PaymentAttempt) -> None:
        """
        Charge the attempt's amount using its method and form fields.

        Returns once the charge has gone through.

        Raises:
            GatewayError: The payment was declined or the gateway timed out
        """
        pass
