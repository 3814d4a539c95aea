from fastapi.testclient import TestClient
import pytest


@pytest.mark.integration
class TestTicketApi:
    def test_my_tickets_filters(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        pending = client.get(
            '/api/ticket/my_tickets', params={'status': 'pending'}, headers=auth_headers
        ).json()
        searched = client.get(
            '/api/ticket/my_tickets', params={'search': 'Cultural'}, headers=auth_headers
        ).json()

        assert [t['ticket_id'] for t in pending] == ['TKT-CAREER-FAIR-2025-JKL012']
        assert [t['event_title'] for t in searched] == ['Rwanda Cultural Festival']

    def test_invalid_status_filter(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get(
            '/api/ticket/my_tickets', params={'status': 'lost'}, headers=auth_headers
        )

        assert response.status_code == 400

    def test_ticket_detail_is_owner_only(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        url = '/api/ticket/TKT-TECH-CONF-2025-ABC123'

        owner = client.get(url, headers=auth_headers)
        other = client.get(url, headers=other_auth_headers)

        assert owner.status_code == 200
        assert owner.json()['event']['title'] == 'Kigali Tech Conference 2025'
        assert other.status_code == 404
        assert other.json() == {'detail': "Ticket not found or you don't have access to it"}


@pytest.mark.integration
class TestOrganizerApi:
    def test_profile(self, client: TestClient) -> None:
        response = client.get('/api/organizer/university-of-rwanda')

        assert response.status_code == 200
        data = response.json()
        assert data['event_count'] == 2
        assert {e['event_id'] for e in data['events']} == {
            'cultural-festival-2025',
            'research-symposium-2025',
        }

    def test_unknown_organizer(self, client: TestClient) -> None:
        assert client.get('/api/organizer/nobody').status_code == 404
