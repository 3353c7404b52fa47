import pytest

from storefront.app.config import TestConfig
from storefront.app.extensions import db
from storefront.app.factory import create_app

USER = {
    "name": "Ada",
    "email": "ada@example.com",
    "phone": "555-0100",
    "password": "Test123!",
    "confirmPassword": "Test123!",
}


@pytest.fixture()
def app():
    # In-memory SQLite shares one connection, so data survives between app contexts
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def registered_user(client):
    response = client.post("/signup", json=USER)
    assert response.status_code == 201
    return response.json["user"]


@pytest.fixture()
def auth_client(client, registered_user):
    response = client.post("/login", json={"email": USER["email"], "password": USER["password"]})
    assert response.status_code == 302
    return client
