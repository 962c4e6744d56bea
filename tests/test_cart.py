# tests/test_cart.py
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.db.session import create_db_and_tables, create_db_engine
from storefront.models.user import User
from storefront.routers.products import get_product_service
from storefront.services.cart import CartService
from tests.conftest import register


def add_product(client, token, price):
    resp = client.post(
        "/add-product",
        headers={"Authorization": token},
        data={"name": "Item", "description": "An item", "price": str(price)},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def test_add_to_cart_twice_appends_two_lines(client, customer_token):
    headers = {"Authorization": customer_token}

    first = client.post("/add-to-cart", headers=headers, json={"productId": 1, "quantity": 1})
    second = client.post("/add-to-cart", headers=headers, json={"productId": 1, "quantity": 2})

    assert first.status_code == 200
    assert len(first.json()["products"]) == 1
    assert second.status_code == 200
    assert second.json()["products"] == [
        {"productId": 1, "quantity": 1},
        {"productId": 1, "quantity": 2},
    ]


def test_get_cart_returns_lines(client, customer_token):
    headers = {"Authorization": customer_token}
    client.post("/add-to-cart", headers=headers, json={"productId": 4, "quantity": 2})

    resp = client.get("/get-cart", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["products"] == [{"productId": 4, "quantity": 2}]


def test_get_cart_without_cart_is_404(client, customer_token):
    resp = client.get("/get-cart", headers={"Authorization": customer_token})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Cart not found"


def test_calculate_total_without_cart_is_404(client, customer_token):
    resp = client.get("/calculate-total", headers={"Authorization": customer_token})
    assert resp.status_code == 404


def test_carts_are_per_user(client, customer_token):
    other = register(client, "bob")
    client.post("/add-to-cart", headers={"Authorization": customer_token}, json={"productId": 1, "quantity": 1})

    assert client.get("/get-cart", headers={"Authorization": other}).status_code == 404


def test_end_to_end_total(client):
    admin = register(client, "admin", role="admin")
    product_id = add_product(client, admin, "10.00")
    customer = register(client, "alice")

    client.post("/add-to-cart", headers={"Authorization": customer}, json={"productId": product_id, "quantity": 3})
    resp = client.get("/calculate-total", headers={"Authorization": customer})

    assert resp.status_code == 200
    assert resp.json() == {"total": 30.0}


def test_total_sums_every_line(client, admin_token, customer_token):
    tea = add_product(client, admin_token, 2.5)
    coffee = add_product(client, admin_token, 4)
    headers = {"Authorization": customer_token}
    for product_id, quantity in ((tea, 2), (coffee, 1), (tea, 1)):
        client.post("/add-to-cart", headers=headers, json={"productId": product_id, "quantity": quantity})

    resp = client.get("/calculate-total", headers=headers)
    assert resp.json() == {"total": 11.5}


def test_total_with_missing_product_is_404(client, customer_token):
    headers = {"Authorization": customer_token}
    client.post("/add-to-cart", headers=headers, json={"productId": 999, "quantity": 1})

    resp = client.get("/calculate-total", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Product 999 not found"


def test_concurrent_add_to_cart_can_lose_an_update(tmp_path):
    """
    add_to_cart is a read-modify-write without locking. When two requests
    read the cart before either writes, the later write wins and the
    earlier line is lost.
    """
    engine = create_db_engine(f"sqlite:///{tmp_path / 'race.db'}")
    create_db_and_tables(engine)
    with Session(engine) as setup:
        setup.add(User(username="racer", password_hash="x"))
        setup.commit()
        CartService(setup).add_to_cart(1, product_id=10, quantity=1)

    with Session(engine) as session_a, Session(engine) as session_b:
        # Request B reads the cart first and holds the stale line list
        # (kept referenced: the session identity map holds objects weakly)
        stale = CartService(session_b).find_cart(1)
        assert [line["productId"] for line in stale.products] == [10]

        CartService(session_a).add_to_cart(1, product_id=20, quantity=1)
        written = CartService(session_b).add_to_cart(1, product_id=30, quantity=1)

        assert written is stale

    with Session(engine) as check:
        cart = CartService(check).get_cart(1)
        assert [line["productId"] for line in cart.products] == [10, 30]
    engine.dispose()


def test_unexpected_errors_become_500(app):
    def broken_service():
        raise RuntimeError("database unavailable")

    app.dependency_overrides[get_product_service] = broken_service
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/products")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}


def test_total_is_rounded_to_cents(client, admin_token, customer_token):
    product_id = add_product(client, admin_token, "0.1")
    headers = {"Authorization": customer_token}
    client.post("/add-to-cart", headers=headers, json={"productId": product_id, "quantity": 3})

    resp = client.get("/calculate-total", headers=headers)
    assert resp.json() == {"total": 0.3}
