def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_api_index(client):
    r = client.get("/api")
    assert r.status_code == 200
    assert "endpoints" in r.json


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_unknown_route_uses_json_error_shape(client):
    r = client.get("/api/nope", headers={"X-Request-ID": "rid-1"})
    assert r.status_code == 404
    assert r.json["error"]["code"] == "http_error"
    assert r.json["error"]["request_id"] == "rid-1"


def test_public_pages(client):
    for path in ("/home", "/signup", "/login"):
        r = client.get(path)
        assert r.status_code == 200
        assert b"<html" in r.data
        r.close()


def test_root_redirects_home(client):
    r = client.get("/")
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/home")
