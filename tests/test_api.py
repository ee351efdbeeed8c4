"""HTTP-level tests for the routes."""

from app.core.errors import IntegrityViolation
from app.models import Product, User


class TestRoot:
    def test_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the E-Commerce API"}

    def test_db_check(self, client):
        assert client.get("/db-check").json() == {"status": "ok", "result": 1}


class TestCreateUser:
    def test_created(self, client, store, ada_payload):
        response = client.post("/users/", json=ada_payload)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["user"]["id"] > 0
        assert body["user"]["email"] == "ada@example.com"
        assert body["user"]["username"] == "ada"
        assert body["user"]["password"] != "secret123"
        assert body["user"]["first_name"] is None
        assert body["user"]["created_at"]
        assert body["user"]["deleted_at"] is None
        assert client.app.state.hasher.verify("secret123", body["user"]["password"])

    def test_duplicate_email(self, client, store, ada_payload, count_rows):
        assert client.post("/users/", json=ada_payload).status_code == 201
        response = client.post("/users/", json=ada_payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Email already in use"}
        assert count_rows(User, email="ada@example.com") == 1

    def test_duplicate_username(self, client, store, ada_payload, count_rows):
        client.post("/users/", json=ada_payload)
        response = client.post("/users/", json={**ada_payload, "email": "lovelace@example.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "Username already in use"}
        assert count_rows(User) == 1

    def test_optional_names(self, client, ada_payload):
        response = client.post("/users/", json={**ada_payload, "first_name": "Ada", "last_name": "Lovelace"})
        assert response.json()["user"]["first_name"] == "Ada"
        assert response.json()["user"]["last_name"] == "Lovelace"

    def test_missing_password(self, client, store, count_rows):
        response = client.post("/users/", json={"username": "ada", "email": "ada@example.com"})
        assert response.status_code == 400
        assert "password" in response.json()["error"]
        assert count_rows(User) == 0

    def test_malformed_json(self, client, store, count_rows):
        response = client.post(
            "/users/", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()
        assert count_rows(User) == 0

    def test_password_too_long(self, client, store, ada_payload, count_rows):
        response = client.post("/users/", json={**ada_payload, "password": "p" * 73})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to hash password"}
        assert count_rows(User) == 0


class TestCreateProduct:
    def test_created(self, client):
        response = client.post("/products/", json={"name": "Widget", "price": 9.99, "stock": 100})
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Product created successfully"
        assert body["product"]["name"] == "Widget"
        assert body["product"]["price"] == 9.99
        assert body["product"]["stock"] == 100
        assert body["product"]["description"] is None
        assert body["product"]["id"] > 0

    def test_duplicate_name(self, client, store, count_rows):
        payload = {"name": "Widget", "price": 9.99, "stock": 100}
        client.post("/products/", json=payload)
        response = client.post("/products/", json={**payload, "price": 1.5})
        assert response.status_code == 400
        assert response.json() == {"error": "Product name already in use"}
        assert count_rows(Product, name="Widget") == 1

    def test_negative_price(self, client, store, count_rows):
        response = client.post("/products/", json={"name": "Widget", "price": -1, "stock": 1})
        assert response.status_code == 400
        assert "price" in response.json()["error"]
        assert count_rows(Product) == 0

    def test_negative_stock(self, client, store):
        response = client.post("/products/", json={"name": "Widget", "price": 1, "stock": -5})
        assert response.status_code == 400
        assert "stock" in response.json()["error"]

    def test_insert_failure(self, client, store, monkeypatch):
        def reject(entity):
            raise IntegrityViolation("Failed to create product")

        monkeypatch.setattr(store, "insert", reject)
        response = client.post("/products/", json={"name": "Widget", "price": 9.99, "stock": 100})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create product"}

    def test_stock_beyond_column_range(self, client, count_rows):
        response = client.post("/products/", json={"name": "Widget", "price": 1, "stock": 10**20})
        assert response.status_code == 400
        assert "stock" in response.json()["error"]
        assert count_rows(Product) == 0

    def test_largest_stock_is_stored(self, client):
        response = client.post("/products/", json={"name": "Widget", "price": 1, "stock": 2_147_483_647})
        assert response.status_code == 201
        assert response.json()["product"]["stock"] == 2_147_483_647

    def test_infinite_price(self, client, count_rows):
        response = client.post(
            "/products/",
            content=b'{"name": "Widget", "price": Infinity, "stock": 1}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "price" in response.json()["error"]
        assert count_rows(Product) == 0

    def test_blank_name(self, client, count_rows):
        response = client.post("/products/", json={"name": "   ", "price": 1, "stock": 1})
        assert response.status_code == 400
        assert count_rows(Product) == 0


class TestBlankIdentity:
    def test_blank_username(self, client, count_rows):
        response = client.post("/users/", json={"username": "   ", "email": "ada@example.com", "password": "pw"})
        assert response.status_code == 400
        assert "username" in response.json()["error"]
        assert count_rows(User) == 0

    def test_blank_email(self, client, count_rows):
        response = client.post("/users/", json={"username": "ada", "email": " \t ", "password": "pw"})
        assert response.status_code == 400
        assert "email" in response.json()["error"]
        assert count_rows(User) == 0

    def test_padding_is_stripped(self, client):
        response = client.post("/users/", json={"username": " ada ", "email": " ada@example.com ", "password": "pw"})
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "ada"
        assert response.json()["user"]["email"] == "ada@example.com"
