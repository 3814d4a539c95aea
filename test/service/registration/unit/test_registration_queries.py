"""Unit tests for the read-side use cases over the in-memory mock tables"""

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.registration.app.query.get_organizer_profile_use_case import (
    GetOrganizerProfileUseCase,
)
from src.service.registration.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.registration.app.query.list_my_tickets_use_case import ListMyTicketsUseCase
from src.service.registration.app.query.list_ticket_offers_use_case import (
    ListTicketOffersUseCase,
)
from src.service.registration.driven_adapter.repo.in_memory_event_query_repo_impl import (
    InMemoryEventQueryRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_organizer_query_repo_impl import (
    InMemoryOrganizerQueryRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_ticket_offer_repo_impl import (
    InMemoryTicketOfferRepoImpl,
)
from src.service.registration.driven_adapter.repo.in_memory_ticket_repo_impl import (
    InMemoryTicketRepoImpl,
)


@pytest.fixture
def list_my_tickets() -> ListMyTicketsUseCase:
    return ListMyTicketsUseCase(
        ticket_query_repo=InMemoryTicketRepoImpl(),
        event_query_repo=InMemoryEventQueryRepoImpl(),
    )


@pytest.mark.unit
class TestListMyTickets:
    @pytest.mark.asyncio
    async def test_newest_purchase_first(self, list_my_tickets: ListMyTicketsUseCase) -> None:
        views = await list_my_tickets.execute(user_id='user_student_001')

        assert [view.ticket.ticket_id for view in views] == [
            'TKT-CAREER-FAIR-2025-JKL012',
            'TKT-TECH-CONF-2025-ABC123',
            'TKT-CULTURAL-FEST-2025-DEF456',
            'TKT-RESEARCH-SYMP-2025-GHI789',
        ]

    @pytest.mark.asyncio
    async def test_status_filter(self, list_my_tickets: ListMyTicketsUseCase) -> None:
        views = await list_my_tickets.execute(user_id='user_student_001', status='pending')

        assert [view.event.title for view in views] == ['Kigali Career Fair']

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('search', 'expected'),
        [
            ('tech', ['TKT-TECH-CONF-2025-ABC123']),
            ('def456', ['TKT-CULTURAL-FEST-2025-DEF456']),
            ('nothing-matches', []),
        ],
    )
    async def test_search_on_title_or_ticket_id(
        self, list_my_tickets: ListMyTicketsUseCase, search: str, expected: list[str]
    ) -> None:
        views = await list_my_tickets.execute(user_id='user_student_001', search=search)

        assert [view.ticket.ticket_id for view in views] == expected

    @pytest.mark.asyncio
    async def test_unknown_status_is_rejected(self, list_my_tickets: ListMyTicketsUseCase) -> None:
        with pytest.raises(DomainError):
            await list_my_tickets.execute(user_id='user_student_001', status='refunded')

    @pytest.mark.asyncio
    async def test_user_without_tickets(self, list_my_tickets: ListMyTicketsUseCase) -> None:
        assert await list_my_tickets.execute(user_id='user_student_002') == []


@pytest.mark.unit
class TestGetTicket:
    @pytest.mark.asyncio
    async def test_owner_sees_ticket_with_event(self) -> None:
        use_case = GetTicketUseCase(
            ticket_query_repo=InMemoryTicketRepoImpl(),
            event_query_repo=InMemoryEventQueryRepoImpl(),
        )

        view = await use_case.execute(
            ticket_id='TKT-TECH-CONF-2025-ABC123', user_id='user_student_001'
        )

        assert view.event.event_id == 'tech-conference-2025'

    @pytest.mark.asyncio
    async def test_other_user_gets_not_found(self) -> None:
        use_case = GetTicketUseCase(
            ticket_query_repo=InMemoryTicketRepoImpl(),
            event_query_repo=InMemoryEventQueryRepoImpl(),
        )

        with pytest.raises(NotFoundError, match="don't have access"):
            await use_case.execute(
                ticket_id='TKT-TECH-CONF-2025-ABC123', user_id='user_student_002'
            )


@pytest.mark.unit
class TestOffersAndOrganizers:
    @pytest.mark.asyncio
    async def test_offers_follow_event_seats(self) -> None:
        use_case = ListTicketOffersUseCase(
            event_query_repo=InMemoryEventQueryRepoImpl(),
            ticket_offer_repo=InMemoryTicketOfferRepoImpl(
                currency='RWF', vip_price=25000, vip_share=0.2, student_share=0.3
            ),
        )

        view = await use_case.execute(event_id='tech-conference-2025')

        assert {o.id: o.remaining_count for o in view.offers} == {
            'general': 500,
            'vip': 100,
            'student': 150,
        }

    @pytest.mark.asyncio
    async def test_unknown_event_offers(self) -> None:
        use_case = ListTicketOffersUseCase(
            event_query_repo=InMemoryEventQueryRepoImpl(),
            ticket_offer_repo=InMemoryTicketOfferRepoImpl(
                currency='RWF', vip_price=25000, vip_share=0.2, student_share=0.3
            ),
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(event_id='missing')

    @pytest.mark.asyncio
    async def test_organizer_profile_lists_its_events(self) -> None:
        use_case = GetOrganizerProfileUseCase(
            organizer_query_repo=InMemoryOrganizerQueryRepoImpl(),
            event_query_repo=InMemoryEventQueryRepoImpl(),
        )

        profile = await use_case.execute(organizer_id='binary-hub')

        assert {event.event_id for event in profile.events} == {
            'tech-conference-2025',
            'career-fair-2025',
        }

    @pytest.mark.asyncio
    async def test_unknown_organizer(self) -> None:
        use_case = GetOrganizerProfileUseCase(
            organizer_query_repo=InMemoryOrganizerQueryRepoImpl(),
            event_query_repo=InMemoryEventQueryRepoImpl(),
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(organizer_id='nobody')
