"""
Integration tests for the registration HTTP flow

Delays are zeroed in test/conftest.py, so `/result` returns as soon as the
background run in the application's task group finishes.
"""

from fastapi.testclient import TestClient
import pytest


def _start(client: TestClient, headers: dict[str, str], **body: str) -> dict:
    response = client.post('/api/registration', json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.integration
class TestRegistrationApi:
    def test_health(self, client: TestClient) -> None:
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_event_offers(self, client: TestClient) -> None:
        response = client.get('/api/event/cultural-festival-2025/offers')

        assert response.status_code == 200
        data = response.json()
        assert data['event']['title'] == 'Rwanda Cultural Festival'
        offers = {offer['id']: offer for offer in data['offers']}
        assert offers['vip']['display_price'] == 'RWF 25,000'
        assert offers['vip']['remaining_count'] == 400
        assert offers['general']['display_price'] == 'Free'
        assert offers['student']['remaining_count'] == 600

    def test_unknown_event_offers(self, client: TestClient) -> None:
        response = client.get('/api/event/missing/offers')

        assert response.status_code == 404
        assert response.json() == {'detail': 'Event not found'}

    def test_vip_mobile_money_flow(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        attempt = _start(client, auth_headers, event_id='cultural-festival-2025', offer_id='vip')
        assert attempt['stage'] == 'selecting_method'
        assert {m['id'] for m in attempt['payment_methods']} == {
            'mobile_money',
            'credit_card',
            'bank_transfer',
        }
        base = f'/api/registration/{attempt["attempt_id"]}'

        response = client.post(
            f'{base}/method', json={'method': 'mobile_money'}, headers=auth_headers
        )
        assert response.json()['stage'] == 'entering_details'

        response = client.patch(
            f'{base}/fields',
            json={'fields': {'phone_number': '+250788123456'}},
            headers=auth_headers,
        )
        assert response.json()['entered_fields'] == ['phone_number']
        assert '+250788123456' not in response.text

        response = client.post(f'{base}/submit', json={}, headers=auth_headers)
        assert response.status_code == 202
        assert response.json()['stage'] in ('processing', 'success')

        result = client.get(f'{base}/result', headers=auth_headers).json()
        assert result['stage'] == 'success'
        assert result['stage_history'] == [
            'selecting_method',
            'entering_details',
            'processing',
            'success',
        ]
        ticket = result['issued_ticket']
        assert ticket['ticket_id'].startswith('TKT-')
        assert ticket['payment_method'] == 'Mobile Money'
        assert ticket['amount'] == 25000

        my_tickets = client.get('/api/ticket/my_tickets', headers=auth_headers).json()
        assert my_tickets[0]['ticket_id'] == ticket['ticket_id']
        assert my_tickets[0]['ticket_type'] == 'VIP Access'
        assert my_tickets[0]['status'] == 'confirmed'

        offers = client.get('/api/event/cultural-festival-2025/offers').json()['offers']
        assert {o['id']: o['remaining_count'] for o in offers}['vip'] == 399

    def test_free_registration_flow(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        attempt = _start(client, auth_headers, event_id='tech-conference-2025', offer_id='general')
        base = f'/api/registration/{attempt["attempt_id"]}'

        response = client.post(
            f'{base}/method', json={'method': 'credit_card'}, headers=auth_headers
        )
        assert response.json()['stage'] == 'success'

        result = client.get(f'{base}/result', headers=auth_headers).json()
        assert result['stage_history'] == ['selecting_method', 'success']
        assert result['issued_ticket']['payment_method'] == 'Free Registration'
        assert result['issued_ticket']['amount'] == 0

        detail = client.get(
            f'/api/ticket/{result["issued_ticket"]["ticket_id"]}', headers=auth_headers
        ).json()
        assert detail['display_price'] == 'Free'
        assert detail['event']['event_id'] == 'tech-conference-2025'

    def test_change_method_then_cancel(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        attempt = _start(client, auth_headers, event_id='research-symposium-2025', offer_id='vip')
        base = f'/api/registration/{attempt["attempt_id"]}'

        client.post(f'{base}/method', json={'method': 'credit_card'}, headers=auth_headers)
        client.patch(f'{base}/fields', json={'fields': {'cvv': '123'}}, headers=auth_headers)
        response = client.post(f'{base}/change_method', headers=auth_headers)
        assert response.json()['stage'] == 'selecting_method'
        assert response.json()['payment_method'] is None
        assert response.json()['entered_fields'] == []

        response = client.post(f'{base}/cancel', headers=auth_headers)
        assert response.status_code == 200
        assert response.json()['stage'] == 'cancelled'
        assert client.get(base, headers=auth_headers).status_code == 404

        tickets = client.get('/api/ticket/my_tickets', headers=auth_headers).json()
        assert len(tickets) == 4

    def test_second_attempt_conflicts(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')

        response = client.post(
            '/api/registration',
            json={'event_id': 'tech-conference-2025', 'offer_id': 'general'},
            headers=auth_headers,
        )

        assert response.status_code == 409

    def test_wrong_stage_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        attempt = _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')

        response = client.post(
            f'/api/registration/{attempt["attempt_id"]}/submit', json={}, headers=auth_headers
        )

        assert response.status_code == 409

    def test_sold_out_offer(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            '/api/registration',
            json={'event_id': 'career-fair-2025', 'offer_id': 'vip'},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert 'sold out' in response.json()['detail']

    def test_teardown_removes_attempt(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        attempt = _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')
        base = f'/api/registration/{attempt["attempt_id"]}'

        assert client.delete(base, headers=auth_headers).status_code == 204
        assert client.get(base, headers=auth_headers).status_code == 404
        _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')

    def test_attempt_is_private(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        attempt = _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')

        response = client.get(
            f'/api/registration/{attempt["attempt_id"]}', headers=other_auth_headers
        )

        assert response.status_code == 404

    @pytest.mark.parametrize('headers', [{}, {'X-User-Id': 'nobody'}])
    def test_authentication_required(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post(
            '/api/registration',
            json={'event_id': 'tech-conference-2025', 'offer_id': 'vip'},
            headers=headers,
        )

        assert response.status_code == 401

    def test_invalid_method_is_bad_request(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        attempt = _start(client, auth_headers, event_id='tech-conference-2025', offer_id='vip')

        response = client.post(
            f'/api/registration/{attempt["attempt_id"]}/method',
            json={'method': 'cash'},
            headers=auth_headers,
        )

        assert response.status_code == 400
