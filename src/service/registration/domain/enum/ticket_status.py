from enum import StrEnum


class TicketStatus(StrEnum):
    CONFIRMED = 'confirmed'
    PENDING = 'pending'
    CANCELLED = 'cancelled'


class PaymentStatus(StrEnum):
    COMPLETED = 'completed'
    PENDING = 'pending'
    FAILED = 'failed'
    REFUNDED = 'refunded'


class CheckInStatus(StrEnum):
    CHECKED_IN = 'checked_in'
    NOT_CHECKED_IN = 'not_checked_in'
