def test_health_endpoints(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

    live = client.get("/api/health/live")
    assert live.status_code == 200
    payload = live.json()
    assert payload["status"] == "ok"
    assert payload["default_buffer_minutes"] == 30
    assert "timestamp" in payload
    assert "X-Process-Time-Ms" in live.headers
