import httpx
import pytest


@pytest.mark.integration
class TestGatewayApi:
    @pytest.mark.asyncio
    async def test_root__describes_services(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/')

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'running'
        assert body['message'].endswith('API Gateway')
        assert body['version']
        assert set(body['endpoints']) == {
            'User Service',
            'Movie Service',
            'Movie Admin',
            'Cinema Admin',
            'Showtime Service',
            'Booking Service',
        }

    @pytest.mark.asyncio
    async def test_health(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    @pytest.mark.asyncio
    async def test_metrics__exposes_booking_counters(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/metrics')

        assert response.status_code == 200
        assert 'booking_requests' in response.text
