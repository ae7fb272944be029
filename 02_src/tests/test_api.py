"""Tests for the HTTP adapter."""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from conftest import FIXED_NOW_MS
from ux_host.api import create_fastapi_app
from ux_host.config import CHANNEL_EVENTS

INVOKE_URL = f"/api/channels/{CHANNEL_EVENTS}/invoke"


@pytest.fixture
def client(application):
    """Create a TestClient around a started application."""
    with TestClient(create_fastapi_app(application)) as c:
        yield c


class TestInvokeRoute:
    """Tests for POST /api/channels/{channel}/invoke."""

    def test_on_kyc_event(self, client, application):
        """Test a valid event is acknowledged and stored."""
        response = client.post(
            INVOKE_URL,
            json={
                "method": "onKycEvent",
                "arguments": {"type": "flowStarted", "message": "begin"},
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "result": None,
            "error_message": None,
        }
        event = application.store.snapshot()[0]
        assert event.type == "flowStarted"
        assert event.timestamp_millis == FIXED_NOW_MS

    def test_null_arguments_dropped(self, client, application):
        """Test that a null payload succeeds without storing."""
        response = client.post(INVOKE_URL, json={"method": "onKycEvent", "arguments": None})

        assert response.status_code == 200
        assert response.json()["status"] == "success"
        assert application.store.snapshot() == ()

    def test_missing_arguments_dropped(self, client, application):
        """Test that omitted arguments behave like null."""
        response = client.post(INVOKE_URL, json={"method": "onKycEvent"})

        assert response.json()["status"] == "success"
        assert application.store.snapshot() == ()

    def test_unknown_method(self, client, application):
        """Test that other methods are answered not_implemented."""
        response = client.post(
            INVOKE_URL, json={"method": "somethingElse", "arguments": {"type": "x"}}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "not_implemented"
        assert application.store.snapshot() == ()

    def test_unknown_channel(self, client):
        """Test that unknown channels are 404."""
        response = client.post(
            "/api/channels/other/channel/invoke", json={"method": "onKycEvent"}
        )
        assert response.status_code == 404

    def test_missing_method_rejected(self, client):
        """Test request validation."""
        response = client.post(INVOKE_URL, json={"arguments": {}})
        assert response.status_code == 422


class TestLogsRoutes:
    """Tests for /api/logs and /api/events."""

    def test_logs_empty(self, client):
        """Test rendering an empty log."""
        response = client.get("/api/logs")
        assert response.status_code == 200
        assert response.json() == []

    def test_logs_rendered_newest_first(self, client):
        """Test rendered rows after two events."""
        client.post(
            INVOKE_URL,
            json={"method": "onKycEvent", "arguments": {"type": "flowStarted", "message": "begin"}},
        )
        client.post(
            INVOKE_URL,
            json={
                "method": "onKycEvent",
                "arguments": {
                    "type": "error",
                    "step": "upload",
                    "message": "failed",
                    "meta": {"code": 500},
                },
            },
        )

        rows = client.get("/api/logs").json()

        assert [r["header"] for r in rows] == ["error · upload", "flowStarted · -"]
        assert rows[0]["badge"] == "ERROR"
        assert rows[0]["color"] == "#FF3B30"
        assert rows[0]["time"] == "22:13:20"
        assert rows[0]["meta_line"] == 'Meta: {"code": 500}'
        assert rows[1]["meta_line"] is None

    def test_logs_idempotent(self, client):
        """Test two reads without new events are identical."""
        client.post(
            INVOKE_URL, json={"method": "onKycEvent", "arguments": {"type": "flowStarted"}}
        )
        assert client.get("/api/logs").json() == client.get("/api/logs").json()

    def test_events_snapshot(self, client):
        """Test the raw snapshot read."""
        client.post(
            INVOKE_URL,
            json={
                "method": "onKycEvent",
                "arguments": {"type": "stepStarted", "step": "", "timestamp": 42},
            },
        )

        assert client.get("/api/events").json() == [
            {
                "type": "stepStarted",
                "step": "",
                "message": "",
                "meta": None,
                "timestamp_millis": 42,
            }
        ]

    def test_clear(self, client, application):
        """Test the clear action."""
        client.post(
            INVOKE_URL, json={"method": "onKycEvent", "arguments": {"type": "flowStarted"}}
        )

        response = client.delete("/api/logs")

        assert response.json() == {"status": "ok"}
        assert application.store.snapshot() == ()
        assert client.get("/api/logs").json() == []


class TestBridgeStatsRoute:
    """Tests for GET /api/bridge/stats."""

    def test_stats(self, client):
        """Test counters after mixed calls."""
        client.post(INVOKE_URL, json={"method": "onKycEvent", "arguments": {}})
        client.post(INVOKE_URL, json={"method": "onKycEvent", "arguments": 5})
        client.post(INVOKE_URL, json={"method": "nope"})

        assert client.get("/api/bridge/stats").json() == {
            "received": 3,
            "appended": 1,
            "dropped": 1,
            "not_implemented": 1,
        }


class TestControlRoutes:
    """Tests for simulator control routes."""

    def test_sim_not_configured(self, client):
        """Test 404 without a simulator."""
        assert client.post("/api/control/sim/start").status_code == 404
        assert client.post("/api/control/sim/stop").status_code == 404

    def test_sim_start_stop(self, application):
        """Test start/stop are forwarded to the simulator."""
        sim = Mock()
        sim.start = AsyncMock()
        sim.stop = AsyncMock()

        with TestClient(create_fastapi_app(application, sim=sim)) as c:
            assert c.post("/api/control/sim/start").json() == {"status": "ok"}
            assert c.post("/api/control/sim/stop").json() == {"status": "ok"}

        sim.start.assert_awaited_once()
        # Once from the route, once on shutdown
        assert sim.stop.await_count == 2

    def test_sim_failure_is_500(self, application):
        """Test simulator errors surface as 500."""
        sim = Mock()
        sim.start = AsyncMock(side_effect=RuntimeError("boom"))
        sim.stop = AsyncMock()

        with TestClient(create_fastapi_app(application, sim=sim)) as c:
            response = c.post("/api/control/sim/start")

        assert response.status_code == 500
        assert response.json()["detail"] == "boom"


def test_lifespan_starts_application():
    """Test the app starts its own Application when none is passed."""
    app = create_fastapi_app()
    with TestClient(app) as c:
        response = c.post(
            INVOKE_URL, json={"method": "onKycEvent", "arguments": {"type": "t"}}
        )
        assert response.json()["status"] == "success"
        assert len(app.state.application.store.snapshot()) == 1


def test_second_session_on_same_app():
    """Test events are handled again after the app is served a second time."""
    app = create_fastapi_app()
    with TestClient(app) as c:
        c.post(INVOKE_URL, json={"method": "onKycEvent", "arguments": {"type": "flowStarted"}})

    with TestClient(app) as c:
        response = c.post(
            INVOKE_URL, json={"method": "onKycEvent", "arguments": {"type": "flowCompleted"}}
        )
        assert response.json()["status"] == "success"
        assert [r["badge"] for r in c.get("/api/logs").json()] == [
            "FLOWCOMPLETED",
            "FLOWSTARTED",
        ]
