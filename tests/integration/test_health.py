from fastapi.testclient import TestClient

from paypal_backend.config import Settings


def test_health_reports_environment(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "env": "sandbox", "configured": True}


def test_health_without_credentials(make_app):
    with TestClient(make_app(Settings(env="live"))) as c:
        assert c.get("/health").json() == {"ok": True, "env": "live", "configured": False}


def test_health_rate_limit_disabled_in_tests(client, monkeypatch):
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)
    info = client.get("/health/rate-limit").json()
    assert info["enabled"] is False
    assert info["backend"] is None


def test_favicon_is_empty(client):
    resp = client.get("/favicon.ico")
    assert resp.status_code == 204
    assert resp.content == b""


def test_order_endpoints_are_rate_limited(make_app, monkeypatch):
    monkeypatch.setenv("LOCAL_RATE_LIMIT_FALLBACK", "1")
    settings = Settings(env="sandbox", client_id="client-id", secret="client-secret", order_rate_limit=2)
    with TestClient(make_app(settings)) as c:
        codes = [c.post("/paypalCaptureOrder", json={"orderID": "O1"}).status_code for _ in range(3)]
        blocked = c.post("/paypalCaptureOrder", json={"orderID": "O1"}, headers={"Origin": "https://marioianniello.github.io"})
        other_path = c.post("/paypalCreateOrder", json={"teamName": "Red", "packageId": "1"})

    assert codes == [200, 200, 429]
    assert blocked.status_code == 429
    assert blocked.json() == {"error": "Too Many Requests"}
    assert blocked.headers["Access-Control-Allow-Origin"] == "https://marioianniello.github.io"
    assert other_path.status_code == 200


def test_asgi_module_only_exposes_app():
    import paypal_backend.asgi as asgi
    from paypal_backend.app import app

    assert asgi.app is app
    assert not hasattr(asgi, "uvicorn")
