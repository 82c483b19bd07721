"""Payment gateways: the protocol, adapters and a recording test double."""

from payroll_kernel.gateways.base import PaymentGateway, attempt_payment
from payroll_kernel.gateways.callback import CallbackPaymentGateway
from payroll_kernel.gateways.recording import RecordingPaymentGateway
from payroll_kernel.gateways.timeout import TimeoutPaymentGateway

__all__ = [
    "CallbackPaymentGateway",
    "PaymentGateway",
    "RecordingPaymentGateway",
    "TimeoutPaymentGateway",
    "attempt_payment",
]
