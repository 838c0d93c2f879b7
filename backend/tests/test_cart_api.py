"""
Tests de los endpoints del carrito.

Recorren la pila completa: ruta FastAPI -> servicio -> CRUD -> SQLite en memoria,
incluida la traducción de ApiError a {"code", "message"}.
"""
import pytest

from app.crud import user_crud

from .constants import MISSING_PRODUCT, NO_ADDRESS_EMAIL, PRODUCT_50, PRODUCT_100, USER_EMAIL

CART_URL = f"/api/v1/cart/{USER_EMAIL}"


class TestCartEndpoints:

    @pytest.mark.asyncio
    async def test_root_health_check(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_get_cart_without_cart_returns_404(self, client):
        response = await client.get(CART_URL)

        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "User does not have a cart"}

    @pytest.mark.asyncio
    async def test_unknown_user_returns_404(self, client):
        response = await client.get("/api/v1/cart/nobody@gmail.com")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_add_product_returns_cart(self, client):
        response = await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == USER_EMAIL
        assert data["payment_option"] == "PAYMENT_OPTION_DEFAULT"
        assert len(data["cart_items"]) == 1
        item = data["cart_items"][0]
        assert item["product"]["product_id"] == PRODUCT_100
        assert item["product"]["cost"] == 100.0
        assert item["quantity"] == 2
        assert data["total_cost"] == 200.0

    @pytest.mark.asyncio
    async def test_add_duplicate_product_returns_400(self, client):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 1})

        response = await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 3})

        assert response.status_code == 400
        assert response.json()["code"] == 400
        cart = (await client.get(CART_URL)).json()
        assert [item["quantity"] for item in cart["cart_items"]] == [1]

    @pytest.mark.asyncio
    async def test_add_missing_product_returns_400(self, client):
        response = await client.post(CART_URL, json={"product_id": MISSING_PRODUCT, "quantity": 1})

        assert response.status_code == 400
        assert response.json()["message"] == "Product doesn't exist in database"

    @pytest.mark.asyncio
    async def test_add_with_non_positive_quantity_fails_validation(self, client):
        response = await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_put_updates_quantity(self, client):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 1})

        response = await client.put(CART_URL, json={"product_id": PRODUCT_100, "quantity": 4})

        assert response.status_code == 200
        data = response.json()
        assert data["cart_items"][0]["quantity"] == 4
        assert data["total_cost"] == 400.0

    @pytest.mark.asyncio
    async def test_put_without_cart_returns_400(self, client):
        response = await client.put(CART_URL, json={"product_id": PRODUCT_100, "quantity": 4})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_put_zero_quantity_deletes_item(self, client):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 1})

        response = await client.put(CART_URL, json={"product_id": PRODUCT_100, "quantity": 0})

        assert response.status_code == 204
        cart = (await client.get(CART_URL)).json()
        assert cart["cart_items"] == []
        assert cart["total_cost"] == 0.0

    @pytest.mark.asyncio
    async def test_put_zero_quantity_for_item_not_in_cart_returns_400(self, client):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 1})

        response = await client.put(CART_URL, json={"product_id": PRODUCT_50, "quantity": 0})

        assert response.status_code == 400
        assert response.json()["message"] == "Product not in cart"


class TestCheckoutEndpoint:

    @pytest.mark.asyncio
    async def test_checkout_debits_wallet_and_empties_cart(self, client, session_factory):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 2})
        await client.post(CART_URL, json={"product_id": PRODUCT_50, "quantity": 1})

        response = await client.put(f"{CART_URL}/checkout")

        assert response.status_code == 204
        cart = (await client.get(CART_URL)).json()
        assert cart["cart_items"] == []
        async with session_factory() as session:
            stored_user = await user_crud.get_user_by_email(session, USER_EMAIL)
        assert stored_user.wallet_money == 250

    @pytest.mark.asyncio
    async def test_checkout_without_cart_returns_404(self, client):
        response = await client.put(f"{CART_URL}/checkout")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_checkout_without_address_returns_400(self, client, session_factory):
        url = f"/api/v1/cart/{NO_ADDRESS_EMAIL}"
        await client.post(url, json={"product_id": PRODUCT_50, "quantity": 1})

        response = await client.put(f"{url}/checkout")

        assert response.status_code == 400
        async with session_factory() as session:
            stored_user = await user_crud.get_user_by_email(session, NO_ADDRESS_EMAIL)
        assert stored_user.wallet_money == 500

    @pytest.mark.asyncio
    async def test_checkout_with_insufficient_balance_returns_400(self, client):
        await client.post(CART_URL, json={"product_id": PRODUCT_100, "quantity": 6})

        response = await client.put(f"{CART_URL}/checkout")

        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "Insufficient balance"}
        cart = (await client.get(CART_URL)).json()
        assert len(cart["cart_items"]) == 1


class TestReservedDomainEmails:

    @pytest.mark.asyncio
    async def test_cart_routes_accept_stored_email_with_reserved_domain(self, client, session_factory):
        email = "buyer@shop.local"
        async with session_factory() as session:
            await user_crud.create_user(session, "buyer", email, wallet_money=100)

        response = await client.post(f"/api/v1/cart/{email}", json={"product_id": PRODUCT_50, "quantity": 1})

        assert response.status_code == 200
        assert response.json()["email"] == email
        assert (await client.get(f"/api/v1/cart/{email}")).status_code == 200
