import attrs
import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.registration.domain.entity.registration_selection import RegistrationSelection
from src.service.registration.domain.offer_catalog import build_offers
from src.service.registration.domain.value_object.ticket_offer import TicketOffer, format_price
from test.service.registration.unit.registration_test_helpers import (
    make_event,
    make_vip_offer,
)


@pytest.mark.unit
class TestFormatPrice:
    def test_zero_is_free(self) -> None:
        assert format_price(0, 'RWF') == 'Free'

    def test_thousands_are_grouped(self) -> None:
        assert format_price(25000, 'RWF') == 'RWF 25,000'


@pytest.mark.unit
class TestBuildOffers:
    def test_shares_are_floored(self) -> None:
        offers = build_offers(
            make_event(available_seats=7),
            currency='RWF',
            vip_price=25000,
            vip_share=0.2,
            student_share=0.3,
        )

        assert [(o.id, o.unit_price, o.remaining_count) for o in offers] == [
            ('general', 0, 7),
            ('vip', 25000, 1),
            ('student', 0, 2),
        ]
        assert offers[1].display_price == 'RWF 25,000'
        assert offers[2].is_free

    def test_event_without_seats_is_sold_out(self) -> None:
        offers = build_offers(
            make_event(available_seats=0),
            currency='RWF',
            vip_price=25000,
            vip_share=0.2,
            student_share=0.3,
        )

        assert all(offer.is_sold_out for offer in offers)


@pytest.mark.unit
class TestTicketOffer:
    def test_negative_price_is_invalid(self) -> None:
        with pytest.raises(ValueError):
            TicketOffer(id='x', name='X', unit_price=-1, currency='RWF', remaining_count=1)

    def test_with_one_sold_never_goes_negative(self) -> None:
        offer = make_vip_offer(remaining_count=1).with_one_sold()

        assert offer.remaining_count == 0
        assert offer.with_one_sold().remaining_count == 0


@pytest.mark.unit
class TestRegistrationSelection:
    def test_sold_out_offer_cannot_be_selected(self) -> None:
        with pytest.raises(DomainError):
            RegistrationSelection().select(make_vip_offer(remaining_count=0))

    def test_resolve_rechecks_current_offers(self) -> None:
        selection = RegistrationSelection().select(make_vip_offer())

        assert selection.resolve([make_vip_offer()]).id == 'vip'
        with pytest.raises(DomainError):
            selection.resolve([make_vip_offer(remaining_count=0)])
        with pytest.raises(NotFoundError):
            selection.resolve([attrs.evolve(make_vip_offer(), id='student')])

    def test_nothing_selected(self) -> None:
        with pytest.raises(DomainError):
            RegistrationSelection().resolve([make_vip_offer()])
