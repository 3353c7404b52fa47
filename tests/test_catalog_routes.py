from storefront.app.models import Product

PRODUCT = {
    "name": "Classic Gift Box",
    "description": "A sturdy box.",
    "quantity": "12",
    "imageUrl": "/img/box.jpg",
}


def create(client, **overrides):
    return client.post("/api/products", json={**PRODUCT, **overrides})


def test_list_products_is_public(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json["items"] == []


def test_mutations_require_session(client):
    assert create(client).status_code == 401
    assert client.put("/api/products/1", json=PRODUCT).status_code == 401
    r = client.delete("/api/products/1")
    assert r.status_code == 401
    assert r.json["error"]["code"] == "unauthorized"


def test_create_product(auth_client):
    r = create(auth_client, category="boxes", price=29.99)

    assert r.status_code == 201
    assert r.json["name"] == "Classic Gift Box"
    assert r.json["quantity"] == 12
    assert r.json["imageUrl"] == "/img/box.jpg"
    assert r.json["price"] == 29.99

    listed = auth_client.get("/api/products").json["items"]
    assert [p["id"] for p in listed] == [r.json["id"]]


def test_create_product_missing_fields(auth_client):
    r = auth_client.post("/api/products", json={"name": "Box"})
    assert r.status_code == 400
    assert set(r.json["error"]["details"]["missing"]) == {"description", "quantity", "imageUrl"}


def test_create_product_bad_quantity(auth_client):
    assert create(auth_client, quantity="many").status_code == 400
    assert create(auth_client, quantity=-1).status_code == 400


def test_create_product_requires_json(auth_client):
    r = auth_client.post("/api/products", data=PRODUCT)
    assert r.status_code == 400


def test_get_product(auth_client):
    product_id = create(auth_client).json["id"]

    r = auth_client.get(f"/api/products/{product_id}")
    assert r.status_code == 200
    assert r.json["description"] == "A sturdy box."


def test_update_product_returns_stored_record(auth_client):
    product_id = create(auth_client).json["id"]

    r = auth_client.put(f"/api/products/{product_id}", json={**PRODUCT, "quantity": 3, "name": "Big Box"})

    assert r.status_code == 200
    assert r.json["name"] == "Big Box"
    assert r.json["quantity"] == 3
    assert auth_client.get(f"/api/products/{product_id}").json["name"] == "Big Box"


def test_update_missing_product(auth_client):
    r = auth_client.put("/api/products/999", json=PRODUCT)
    assert r.status_code == 404


def test_delete_product(app, auth_client):
    product_id = create(auth_client).json["id"]

    r = auth_client.delete(f"/api/products/{product_id}")
    assert r.status_code == 200
    assert auth_client.get(f"/api/products/{product_id}").status_code == 404


def test_delete_missing_product_leaves_store_unchanged(app, auth_client):
    create(auth_client)

    r = auth_client.delete("/api/products/999")

    assert r.status_code == 404
    assert r.json["error"]["code"] == "not_found"
    with app.app_context():
        assert Product.query.count() == 1


def test_invalid_product_id(auth_client):
    assert auth_client.get("/api/products/not-an-id").status_code == 404
    assert auth_client.delete("/api/products/not-an-id").status_code == 404


def test_fetched_product_can_be_put_back(auth_client):
    product_id = create(auth_client, category="boxes", price=5).json["id"]

    fetched = auth_client.get(f"/api/products/{product_id}").json
    fetched["quantity"] = 4
    r = auth_client.put(f"/api/products/{product_id}", json=fetched)

    assert r.status_code == 200
    assert r.json["quantity"] == 4
    assert r.json["imageUrl"] == PRODUCT["imageUrl"]
    assert r.json["category"] == "boxes"


def test_fractional_quantity_is_rejected(app, auth_client):
    r = create(auth_client, quantity=2.9)
    assert r.status_code == 400
    assert r.json["error"]["message"] == "Quantity must be an integer"
    assert create(auth_client, quantity="2.9").status_code == 400
    assert create(auth_client, quantity=True).status_code == 400
    with app.app_context():
        assert Product.query.count() == 0


def test_whole_float_quantity_is_accepted(auth_client):
    r = create(auth_client, quantity=3.0)
    assert r.status_code == 201
    assert r.json["quantity"] == 3


def test_non_finite_price_is_rejected(app, auth_client):
    for price in ("nan", "inf", "-inf"):
        r = create(auth_client, price=price)
        assert r.status_code == 400
        assert r.json["error"]["message"] == "Price must be a finite number"
    with app.app_context():
        assert Product.query.count() == 0


def test_non_text_product_fields_are_rejected(auth_client):
    r = create(auth_client, name=["Box"])
    assert r.status_code == 400
    assert r.json["error"]["details"] == {"invalid": ["name"]}
