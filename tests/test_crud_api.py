"""Accounts, clients, products and the financial ledger over HTTP."""

from decimal import Decimal

from erp_api.core.auth import UserRole

from tests.conftest import auth_headers


def money(value):
    return Decimal(str(value))


# ==================== AUTH ====================

def test_register_login_and_profile(client):
    response = client.post("/api/auth/register", json={
        "name": "Olivia Operator",
        "email": "Olivia@Example.com",
        "password": "secret123"
    })
    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "olivia@example.com"
    assert user["role"] == "operator"
    assert "passwordHash" not in user

    login = client.post("/api/auth/login", json={"email": "olivia@example.com", "password": "secret123"})
    assert login.status_code == 200
    body = login.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["id"] == user["id"]

    headers = {"Authorization": f"Bearer {body['token']}"}
    me = client.get("/api/auth/me", headers=headers)
    assert me.json()["email"] == "olivia@example.com"

    renamed = client.put("/api/auth/me", json={"name": "Olivia O."}, headers=headers)
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Olivia O."
    assert renamed.json()["role"] == "operator"


def test_register_ignores_requested_role(client):
    response = client.post("/api/auth/register", json={
        "name": "Sneaky", "email": "sneaky@example.com", "password": "secret123", "role": "admin"
    })
    assert response.status_code == 201
    assert response.json()["role"] == "operator"


def test_register_duplicate_email_conflicts(client, seed):
    seed.user(email="taken@example.com")
    response = client.post("/api/auth/register", json={
        "name": "Again", "email": "taken@example.com", "password": "secret123"
    })
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_login_with_wrong_password(client, seed):
    seed.user(email="someone@example.com", password="right-one")
    response = client.post("/api/auth/login", json={"email": "someone@example.com", "password": "wrong-one"})
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHENTICATED"


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert response.status_code == 401


# ==================== USERS (ADMIN) ====================

def test_admin_manages_users(client, admin_headers):
    created = client.post("/api/users", json={
        "name": "New Admin", "email": "boss@example.com", "password": "secret123", "role": "admin"
    }, headers=admin_headers)
    assert created.status_code == 201
    user_id = created.json()["id"]
    assert created.json()["role"] == "admin"

    demoted = client.put(f"/api/users/{user_id}", json={"role": "operator"}, headers=admin_headers)
    assert demoted.json()["role"] == "operator"
    assert demoted.json()["email"] == "boss@example.com"

    assert client.delete(f"/api/users/{user_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/users/{user_id}", headers=admin_headers).status_code == 404


def test_password_change_applies_to_login(client, seed, admin_headers):
    user_id = seed.user(email="change@example.com", password="old-password")

    client.put(f"/api/users/{user_id}", json={"password": "new-password"}, headers=admin_headers)

    old = client.post("/api/auth/login", json={"email": "change@example.com", "password": "old-password"})
    new = client.post("/api/auth/login", json={"email": "change@example.com", "password": "new-password"})
    assert old.status_code == 401
    assert new.status_code == 200


# ==================== CLIENTS ====================

def test_client_lifecycle(client, operator_headers):
    created = client.post("/api/clients", json={
        "name": "Bistro", "email": "bistro@example.com", "phone": "555-0101", "address": "2 Side St"
    }, headers=operator_headers)
    assert created.status_code == 201
    client_id = created.json()["id"]

    updated = client.put(f"/api/clients/{client_id}", json={"phone": "555-0199"}, headers=operator_headers)
    assert updated.json()["phone"] == "555-0199"
    assert updated.json()["name"] == "Bistro"

    listed = client.get("/api/clients", headers=operator_headers).json()
    assert [c["id"] for c in listed] == [client_id]

    assert client.delete(f"/api/clients/{client_id}", headers=operator_headers).status_code == 200
    assert client.get(f"/api/clients/{client_id}", headers=operator_headers).status_code == 404


def test_client_duplicate_email_conflicts(client, seed, operator_headers):
    seed.client("Acme", email="acme@example.com")
    response = client.post("/api/clients", json={
        "name": "Acme 2", "email": "ACME@example.com", "phone": "1", "address": "x"
    }, headers=operator_headers)
    assert response.status_code == 409


def test_invalid_client_email_rejected(client, operator_headers):
    response = client.post("/api/clients", json={
        "name": "Bad", "email": "not-an-email", "phone": "1", "address": "x"
    }, headers=operator_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_client_with_sales_cannot_be_deleted(client, seed, operator_headers):
    client_id = seed.client()
    product_id = seed.product(stock=5)
    client.post("/api/sales", json={
        "clientId": client_id, "items": [{"productId": product_id, "quantity": 1, "price": "1.00"}]
    }, headers=operator_headers)

    response = client.delete(f"/api/clients/{client_id}", headers=operator_headers)
    assert response.status_code == 409


# ==================== PRODUCTS ====================

def test_product_lifecycle(client, operator_headers):
    created = client.post("/api/products", json={
        "name": "Lamp", "description": "Desk lamp", "price": "24.90", "stock": 12
    }, headers=operator_headers)
    assert created.status_code == 201
    product = created.json()
    assert money(product["price"]) == Decimal("24.90")

    updated = client.put(f"/api/products/{product['id']}", json={"price": "19.90"}, headers=operator_headers)
    assert money(updated.json()["price"]) == Decimal("19.90")
    assert updated.json()["stock"] == 12
    assert updated.json()["description"] == "Desk lamp"

    assert client.delete(f"/api/products/{product['id']}", headers=operator_headers).status_code == 200
    assert client.get(f"/api/products/{product['id']}", headers=operator_headers).status_code == 404


def test_product_rejects_negative_values(client, operator_headers):
    response = client.post("/api/products", json={"name": "Bad", "price": "-1.00", "stock": 1},
                           headers=operator_headers)
    assert response.status_code == 400

    response = client.post("/api/products", json={"name": "Bad", "price": "1.00", "stock": -1},
                           headers=operator_headers)
    assert response.status_code == 400


def test_update_missing_product_is_404(client, operator_headers):
    response = client.put("/api/products/4040", json={"stock": 3}, headers=operator_headers)
    assert response.status_code == 404


def test_sold_product_cannot_be_deleted(client, seed, operator_headers):
    client_id = seed.client()
    product_id = seed.product(stock=5)
    client.post("/api/sales", json={
        "clientId": client_id, "items": [{"productId": product_id, "quantity": 1, "price": "1.00"}]
    }, headers=operator_headers)

    response = client.delete(f"/api/products/{product_id}", headers=operator_headers)
    assert response.status_code == 409
    assert seed.stock(product_id) == 4


# ==================== FINANCIAL ====================

def test_ledger_summary_includes_sales_and_manual_entries(client, seed, admin_headers):
    client_id = seed.client()
    product_id = seed.product(price="50.00", stock=5)
    operator = auth_headers(UserRole.OPERATOR)

    client.post("/api/sales", json={
        "clientId": client_id, "items": [{"productId": product_id, "quantity": 2, "price": "50.00"}]
    }, headers=operator)
    debit = client.post("/api/financial", json={
        "kind": "debit", "amount": "30.25", "description": "Rent"
    }, headers=admin_headers)
    assert debit.status_code == 201
    assert debit.json()["saleId"] is None

    summary = client.get("/api/financial/summary", headers=admin_headers).json()
    assert money(summary["credits"]) == Decimal("100.00")
    assert money(summary["debits"]) == Decimal("30.25")
    assert money(summary["balance"]) == Decimal("69.75")
    assert summary["entries"] == 2

    credits = client.get("/api/financial?kind=credit", headers=admin_headers).json()
    assert len(credits) == 1
    assert credits[0]["saleId"] is not None

    entry = client.get(f"/api/financial/{debit.json()['id']}", headers=admin_headers).json()
    assert entry["description"] == "Rent"


def test_empty_ledger_summary(client, admin_headers):
    summary = client.get("/api/financial/summary", headers=admin_headers).json()
    assert money(summary["balance"]) == Decimal("0")
    assert summary["entries"] == 0


def test_manual_entry_needs_positive_amount(client, admin_headers):
    response = client.post("/api/financial", json={
        "kind": "credit", "amount": "0", "description": "Nothing"
    }, headers=admin_headers)
    assert response.status_code == 400


def test_ledger_entries_are_immutable(client, admin_headers):
    created = client.post("/api/financial", json={
        "kind": "credit", "amount": "5.00", "description": "Tip jar"
    }, headers=admin_headers).json()

    assert client.delete(f"/api/financial/{created['id']}", headers=admin_headers).status_code == 405
    assert client.put(f"/api/financial/{created['id']}", json={"amount": "1.00"},
                      headers=admin_headers).status_code == 405


# ==================== SERVICE ====================

def test_health_and_root(client):
    assert client.get("/api/health").json()["status"] == "healthy"
    assert client.get("/").json()["api"] == "/api"


def test_request_id_is_echoed_or_generated(client):
    assert client.get("/api/health", headers={"X-Request-ID": "abc123"}).headers["x-request-id"] == "abc123"
    assert client.get("/api/health").headers["x-request-id"]
