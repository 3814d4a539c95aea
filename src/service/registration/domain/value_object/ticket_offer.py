from typing import Tuple

import attrs


def format_price(price: int, currency: str) -> str:
    if price == 0:
        return 'Free'
    return f'{currency} {price:,}'


@attrs.frozen
class TicketOffer:
    """A purchasable ticket tier for one event"""

    id: str
    name: str
    unit_price: int = attrs.field(validator=attrs.validators.ge(0))
    currency: str
    remaining_count: int = attrs.field(validator=attrs.validators.ge(0))
    description: str = ''
    benefits: Tuple[str, ...] = attrs.field(default=(), converter=tuple)

    @property
    def is_free(self) -> bool:
        return self.unit_price == 0

    @property
    def is_sold_out(self) -> bool:
        return self.remaining_count == 0

    @property
    def display_price(self) -> str:
        return format_price(self.unit_price, self.currency)

    def with_one_sold(self) -> 'TicketOffer':
        return attrs.evolve(self, remaining_count=max(self.remaining_count - 1, 0))
