"""
고객 API 테스트
"""
from conftest import NOW

CUSTOMERS_URL = "/api/v1/customers"


def test_create_customer_sets_created_date(client):
    response = client.post(CUSTOMERS_URL, json={"name": "Alice", "email": "alice@example.com", "zipCode": "12345"})
    assert response.status_code == 201
    customer = response.json()
    assert customer["id"] > 0
    assert customer["zipCode"] == "12345"
    assert customer["createdDate"] == NOW.isoformat()
    assert response.headers["location"].endswith(f"{CUSTOMERS_URL}/{customer['id']}")


def test_create_customer_without_body(client):
    assert client.post(CUSTOMERS_URL).status_code == 400


def test_get_customers(client):
    client.post(CUSTOMERS_URL, json={"name": "Alice"})
    client.post(CUSTOMERS_URL, json={"name": "Bob"})
    response = client.get(CUSTOMERS_URL)
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Alice", "Bob"]


def test_update_customer_preserves_created_date(client):
    created = client.post(CUSTOMERS_URL, json={"name": "Alice", "createdDate": "2025-01-01T09:00:00"}).json()
    response = client.put(f"{CUSTOMERS_URL}/{created['id']}", json={"name": "Alice Kim", "city": "Seoul"})
    assert response.status_code == 200
    customer = response.json()
    assert customer["name"] == "Alice Kim"
    assert customer["city"] == "Seoul"
    assert customer["createdDate"] == "2025-01-01T09:00:00"


def test_update_customer_not_found(client):
    response = client.put(f"{CUSTOMERS_URL}/99999", json={"name": "Nobody"})
    assert response.status_code == 404
    assert "not found" in response.json()["message"]


def test_update_customer_invalid_id(client):
    response = client.put(f"{CUSTOMERS_URL}/0", json={"name": "Nobody"})
    assert response.status_code == 400


def test_get_customer_not_found(client):
    assert client.get(f"{CUSTOMERS_URL}/99999").status_code == 404


def test_out_of_range_customer_id_is_not_found(client):
    assert client.get(f"{CUSTOMERS_URL}/99999999999999999999").status_code == 404
    response = client.put(f"{CUSTOMERS_URL}/99999999999999999999", json={"name": "Bob"})
    assert response.status_code == 404
