from typing import Iterable, Optional

import attrs

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.registration.domain.value_object.ticket_offer import TicketOffer


@attrs.define
class RegistrationSelection:
    """The offer a registrant picked on the registration page"""

    selected_offer_id: Optional[str] = None

    def select(self, offer: TicketOffer) -> 'RegistrationSelection':
        if offer.is_sold_out:
            raise DomainError(f'Ticket type {offer.name} is sold out')
        return attrs.evolve(self, selected_offer_id=offer.id)

    def resolve(self, offers: Iterable[TicketOffer]) -> TicketOffer:
        """
        Find the selected offer among the currently loaded offers.

        Raises:
            DomainError: Nothing selected, or the offer sold out since selection
            NotFoundError: The selected offer is no longer listed
        """
        if self.selected_offer_id is None:
            raise DomainError('No ticket type selected')
        for offer in offers:
            if offer.id == self.selected_offer_id:
                if offer.is_sold_out:
                    raise DomainError(f'Ticket type {offer.name} is sold out')
                return offer
        raise NotFoundError('Ticket type not found')
