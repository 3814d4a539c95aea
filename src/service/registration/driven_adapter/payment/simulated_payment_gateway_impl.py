"""
Simulated Payment Gateway

Stands in for a real processor: waits a fixed latency and approves every
charge. Form fields are neither validated nor stored.
"""

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_payment_gateway import IPaymentGateway
from src.service.registration.domain.entity.payment_attempt import PaymentAttempt


class SimulatedPaymentGatewayImpl(IPaymentGateway):
    def __init__(self, *, processing_delay: float) -> None:
        self.processing_delay = processing_delay

    @Logger.io
    async def process(self, *, attempt: PaymentAttempt) -> None:
        Logger.base.debug(
            f'🏦 [GATEWAY] Charging {attempt.currency} {attempt.amount} '
            f'via {attempt.method} (simulated {self.processing_delay}s)'
        )
        await anyio.sleep(self.processing_delay)
