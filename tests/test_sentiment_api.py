import httpx

from conftest import fail_with, respond


def test_analyze_returns_201_with_score(client, use_downstream):
    use_downstream(respond(200, {"sentiment": 0.85}))
    r = client.post("/sentiment/analyze", json={"text": "This is amazing!"})
    assert r.status_code == 201
    body = r.json()
    assert body == {"sentiment": 0.85}
    assert -1 <= body["sentiment"] <= 1


def test_analyze_is_public(client, use_downstream):
    use_downstream(respond(200, {"sentiment": -0.75}))
    r = client.post("/sentiment/analyze", json={"text": "awful"}, headers={"Authorization": "Bearer junk"})
    assert r.status_code == 201
    assert r.json()["sentiment"] == -0.75


def test_empty_text_is_400(client, use_downstream):
    use_downstream(respond(200, {"sentiment": 0.0}))
    for text in ["", "   "]:
        r = client.post("/sentiment/analyze", json={"text": text})
        assert r.status_code == 400
        err = r.json()["error"]
        assert err["code"] == "invalid_input"
        assert "Text cannot be empty" in err["message"]


def test_missing_text_is_400(client, use_downstream):
    use_downstream(respond(200, {"sentiment": 0.0}))
    r = client.post("/sentiment/analyze", json={})
    assert r.status_code == 400


def test_upstream_error_status_is_propagated(client, use_downstream):
    use_downstream(respond(400, {"detail": "Invalid text format"}))
    r = client.post("/sentiment/analyze", json={"text": "???"})
    assert r.status_code == 400
    assert r.json()["error"] == {
        "code": "upstream_error",
        "message": "Python API error: Invalid text format",
        "details": None,
    }


def test_downstream_down_is_503(client, use_downstream):
    use_downstream(fail_with(httpx.ConnectError("[Errno 111] Connection refused")))
    r = client.post("/sentiment/analyze", json={"text": "hello"})
    assert r.status_code == 503
    assert r.json()["error"]["message"] == "Python sentiment service is unavailable"


def test_health_passes_body_through(client, use_downstream):
    body = {"status": "healthy", "timestamp": "2024-01-01T12:00:00Z", "service": "sentiment-analysis"}
    use_downstream(respond(200, body))
    r = client.get("/sentiment/health")
    assert r.status_code == 200
    assert r.json() == body


def test_health_failure_is_503(client, use_downstream):
    use_downstream(fail_with(httpx.ReadTimeout("timed out")))
    r = client.get("/sentiment/health")
    assert r.status_code == 503
    assert r.json()["error"]["code"] == "service_unhealthy"
    assert r.json()["error"]["message"] == "Python sentiment service is unhealthy"
