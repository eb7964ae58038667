import asyncio
from datetime import date

import pytest
from fastapi.testclient import TestClient

import main
from saathi_agent.graph import responses


@pytest.fixture(scope="module")
def client():
    with TestClient(main.app) as client:
        yield client


def test_query_earnings(client):
    res = client.post("/api/query", json={"driverId": "driver123", "query": "Aaj kitna kamaya?"})
    assert res.status_code == 200

    body = res.json()
    assert body["type"] == "text"
    assert body["audioUrl"] is None
    assert "₹2500.00" in body["response"]
    assert set(body["suggestions"]) == {"penalties", "comparison"}


def test_query_language_defaults(client):
    res = client.post("/api/query", json={"driverId": "driver123", "query": "namaste", "language": "en"})
    assert res.status_code == 200
    assert res.json()["response"].startswith("Namaste!")


def test_query_unknown_driver(client):
    res = client.post("/api/query", json={"driverId": "nobody", "query": "emergency"})
    assert res.status_code == 200
    assert res.json()["response"] == responses.DRIVER_NOT_FOUND


def test_query_missing_driver_id_is_not_found(client):
    res = client.post("/api/query", json={"query": "namaste"})
    assert res.status_code == 200
    assert res.json()["response"] == responses.DRIVER_NOT_FOUND


def test_query_null_driver_id_is_not_found(client):
    res = client.post("/api/query", json={"driverId": None, "query": "namaste"})
    assert res.status_code == 200
    assert res.json()["response"] == responses.DRIVER_NOT_FOUND


def test_query_null_query_is_unknown(client):
    res = client.post("/api/query", json={"driverId": "driver123", "query": None, "language": None})
    assert res.status_code == 200
    assert res.json()["response"] == responses.UNKNOWN_QUERY


def test_query_empty_body_is_not_found(client):
    res = client.post("/api/query", json={})
    assert res.status_code == 200
    assert res.json()["response"] == responses.DRIVER_NOT_FOUND


def test_query_internal_failure_is_500(client, monkeypatch):
    def explode(request):
        raise RuntimeError("boom")

    monkeypatch.setattr(main.engine, "process_query", explode)
    res = client.post("/api/query", json={"driverId": "driver123", "query": "namaste"})
    assert res.status_code == 500
    assert res.json()["response"] == responses.PROCESSING_ERROR


def test_get_driver(client):
    res = client.get("/api/driver/driver123")
    assert res.status_code == 200

    body = res.json()
    assert body["name"] == "Rajesh Kumar"
    assert body["emergencyContact"]["phone"] == "9123456789"
    assert body["vehicle"]["number"] == "MH01AB1234"
    assert date.today().isoformat() in body["earnings"]


def test_get_unknown_driver_is_404(client):
    assert client.get("/api/driver/nobody").status_code == 404


def test_list_drivers(client):
    ids = client.get("/api/drivers").json()
    assert "driver123" in ids
    assert "driver456" in ids


def test_put_driver_and_earnings(client):
    res = client.put("/api/driver", json={"id": "api-driver-1", "name": "Vikram", "phone": "9000000000"})
    assert res.status_code == 200

    today = date.today().isoformat()
    res = client.put(
        f"/api/driver/api-driver-1/earnings/{today}",
        json={"totalEarnings": 1800, "expenses": 300, "completedTrips": 5},
    )
    assert res.status_code == 200
    assert res.json()["netEarnings"] == 1500

    reply = client.post("/api/query", json={"driverId": "api-driver-1", "query": "earning"}).json()
    assert "5 trip" in reply["response"]
    assert "₹1500.00" in reply["response"]


def test_put_earnings_unknown_driver_is_404(client):
    res = client.put("/api/driver/nobody/earnings/2026-10-19", json={"totalEarnings": 1})
    assert res.status_code == 404


def test_emergency_endpoint(client):
    res = client.post("/api/emergency/driver123")
    assert res.status_code == 200
    assert res.json()["response"] == responses.EMERGENCY_SENT


def test_emergency_endpoint_failure(client, monkeypatch):
    def explode(request):
        raise RuntimeError("boom")

    monkeypatch.setattr(main.engine, "process_query", explode)
    res = client.post("/api/emergency/driver123")
    assert res.status_code == 500
    assert res.json()["response"] == responses.EMERGENCY_FAILED


def test_commands(client):
    commands = client.get("/api/commands").json()
    assert len(commands) == 6
    assert "Sahayata chahiye" in commands


def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "Porter Saathi API is running"
    assert body["alerts"]["status"] == "healthy"


def test_home(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["bot"] == "Porter Saathi"


def test_voice_socket_echoes_plain_text(client):
    with client.websocket_connect("/ws/voice-command") as ws:
        ws.send_text("kuch bolo")
        assert ws.receive_text() == "Received: kuch bolo"


def test_voice_socket_answers_queries(client):
    with client.websocket_connect("/ws/voice-command") as ws:
        ws.send_text('{"driverId": "driver123", "query": "challan"}')
        reply = ws.receive_json()

    assert reply["response"] == responses.CHALLAN_INTRO
    assert reply["suggestions"]["step_1"] == "Step 1: Visit the traffic police website"


def test_emergency_socket_acknowledges(client):
    message = '{"driverId": "driver123", "location": "Andheri", "emergencyType": "accident"}'
    with client.websocket_connect("/ws/emergency-alert") as ws:
        ws.send_text(message)
        assert ws.receive_text() == f"Emergency alert acknowledged: {message}"


def test_emergency_socket_acknowledges_unparsed_alerts(client):
    with client.websocket_connect("/ws/emergency-alert") as ws:
        ws.send_text("SOS")
        assert ws.receive_text() == "Emergency alert acknowledged: SOS"


def test_emergency_endpoint_notifies_contact(client, monkeypatch):
    calls = []
    monkeypatch.setattr(main.alert_sink, "notify", lambda *args: calls.append(args))

    res = client.post("/api/emergency/driver123")

    assert res.json()["response"] == responses.EMERGENCY_SENT
    assert calls == [("Rajesh Kumar", "Sunita Devi", "9123456789")]


def test_emergency_socket_survives_broken_sink(client, monkeypatch):
    def explode(*args):
        raise RuntimeError("pager down")

    monkeypatch.setattr(main.alert_sink, "notify", explode)
    message = '{"driverId": "driver123", "emergencyType": "accident"}'

    with client.websocket_connect("/ws/emergency-alert") as ws:
        ws.send_text(message)
        assert ws.receive_text() == f"Emergency alert acknowledged: {message}"
        ws.send_text("SOS")
        assert ws.receive_text() == "Emergency alert acknowledged: SOS"


def test_lifespan_runs_sink_setup_off_the_event_loop(monkeypatch):
    seen = []

    def record(step):
        def call():
            try:
                asyncio.get_running_loop()
                seen.append((step, "event loop"))
            except RuntimeError:
                seen.append((step, "worker thread"))
        return call

    monkeypatch.setattr(main.alert_sink, "initialize", record("initialize"))
    monkeypatch.setattr(main.alert_sink, "close", record("close"))

    with TestClient(main.app) as client:
        assert client.get("/api/health").status_code == 200

    assert seen == [("initialize", "worker thread"), ("close", "worker thread")]
