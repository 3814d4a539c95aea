"""
Payment methods offered by the registration flow.

Each method carries its display name, the one-line description shown on the
method picker, and the detail fields collected in the details step.
"""

from enum import StrEnum


FREE_REGISTRATION_LABEL = 'Free Registration'


class PaymentMethod(StrEnum):
    MOBILE_MONEY = 'mobile_money'
    CREDIT_CARD = 'credit_card'
    BANK_TRANSFER = 'bank_transfer'

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def detail_fields(self) -> tuple[str, ...]:
        return _DETAIL_FIELDS[self]


_DISPLAY_NAMES = {
    PaymentMethod.MOBILE_MONEY: 'Mobile Money',
    PaymentMethod.CREDIT_CARD: 'Credit/Debit Card',
    PaymentMethod.BANK_TRANSFER: 'Bank Transfer',
}

_DESCRIPTIONS = {
    PaymentMethod.MOBILE_MONEY: 'Pay with MTN Mobile Money or Airtel Money',
    PaymentMethod.CREDIT_CARD: 'Pay with Visa, Mastercard, or local cards',
    PaymentMethod.BANK_TRANSFER: 'Direct bank transfer',
}

_DETAIL_FIELDS = {
    PaymentMethod.MOBILE_MONEY: ('phone_number',),
    PaymentMethod.CREDIT_CARD: ('cardholder_name', 'card_number', 'expiry_date', 'cvv'),
    PaymentMethod.BANK_TRANSFER: ('bank_account',),
}
