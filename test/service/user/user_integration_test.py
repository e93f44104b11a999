from typing import Any

import httpx
import pytest


USER_PAYLOAD: dict[str, Any] = {
    'name': 'Bruce Wayne',
    'email': 'bruce@example.com',
    'phone': '0912345678',
    'userType': 'CINEMA_ADMIN',
    'cinemaId': 'cinema-1',
}


@pytest.mark.integration
class TestUserApi:
    @pytest.mark.asyncio
    async def test_create_and_get(self, client: httpx.AsyncClient) -> None:
        created = await client.post('/api/users', json=USER_PAYLOAD)

        assert created.status_code == 201
        user = created.json()
        assert user['id']
        assert {k: v for k, v in user.items() if k != 'id'} == USER_PAYLOAD

        fetched = await client.get(f'/api/users/{user["id"]}')
        assert fetched.status_code == 200
        assert fetched.json() == user

    @pytest.mark.asyncio
    async def test_create_customer__cinema_id_dropped(self, client: httpx.AsyncClient) -> None:
        response = await client.post('/api/users', json={**USER_PAYLOAD, 'userType': 'CUSTOMER'})

        assert response.status_code == 201
        assert response.json()['cinemaId'] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'override',
        [
            {'email': 'not-an-email'},
            {'name': ''},
            {'userType': 'SUPERHERO'},
            {'cinemaId': 'c' * 37},
        ],
    )
    async def test_create_invalid__400(
        self, client: httpx.AsyncClient, override: dict[str, Any]
    ) -> None:
        response = await client.post('/api/users', json={**USER_PAYLOAD, **override})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list(self, client: httpx.AsyncClient) -> None:
        await client.post('/api/users', json=USER_PAYLOAD)
        await client.post('/api/users', json={**USER_PAYLOAD, 'email': 'alfred@example.com'})

        users = (await client.get('/api/users')).json()

        assert {u['email'] for u in users} == {'bruce@example.com', 'alfred@example.com'}

    @pytest.mark.asyncio
    async def test_update(self, client: httpx.AsyncClient) -> None:
        user = (await client.post('/api/users', json=USER_PAYLOAD)).json()

        response = await client.put(
            f'/api/users/{user["id"]}', json={**USER_PAYLOAD, 'phone': '0987654321'}
        )

        assert response.status_code == 200
        assert response.json() == {**user, 'phone': '0987654321'}

    @pytest.mark.asyncio
    async def test_unknown_user__404(self, client: httpx.AsyncClient) -> None:
        assert (await client.get('/api/users/missing')).status_code == 404
        assert (await client.put('/api/users/missing', json=USER_PAYLOAD)).status_code == 404
        assert (await client.delete('/api/users/missing')).status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, client: httpx.AsyncClient) -> None:
        user = (await client.post('/api/users', json=USER_PAYLOAD)).json()

        response = await client.delete(f'/api/users/{user["id"]}')

        assert response.status_code == 204
        assert (await client.get(f'/api/users/{user["id"]}')).status_code == 404
