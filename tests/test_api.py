"""Tests for the HTTP layer: thin adapters over one in-process ScenarioEngine."""

import time

import pytest
from fastapi.testclient import TestClient

import trainer.api.deps as deps
from conftest import make_engine
from trainer.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(deps, "engine", make_engine())
    with TestClient(app) as c:
        yield c


def settle(client, rounds=100):
    for _ in range(rounds):
        snap = client.get("/state").json()
        if not snap["composing"]:
            return snap
        time.sleep(0.01)
    raise AssertionError("engine never went idle")


class TestMeta:
    def test_root(self, client):
        body = client.get("/").json()
        assert body["health"] == "/health"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestState:
    def test_state_lazily_starts_a_scenario(self, client):
        snap = client.get("/state").json()
        assert snap["phase"] == "CHAT"
        assert snap["scenario_id"]
        assert snap["checklist"]

    def test_new_scenario_by_id(self, client):
        resp = client.post("/scenario/new", json={"scenario_id": "comm_channel"})
        assert resp.status_code == 200
        snap = resp.json()
        assert snap["scenario_id"] == "comm_channel"
        assert snap["counterpart_name"] == "BYD Representative"

    def test_new_scenario_unknown_id(self, client):
        resp = client.post("/scenario/new", json={"scenario_id": "nope"})
        assert resp.status_code == 404


class TestChat:
    def test_chat_is_accepted_and_answered(self, client):
        client.post("/scenario/new", json={"scenario_id": "parts_delivery"})
        settle(client)

        resp = client.post("/chat", json={"text": "I need BYD-FB-2024"})
        assert resp.status_code == 200
        assert resp.json()["accepted"] is True

        snap = settle(client)
        assert [m["role"] for m in snap["messages"]] == ["counterpart", "user", "counterpart"]
        done = {c["id"]: c["completed"] for c in snap["checklist"]}
        assert done == {"cat_num": True, "ask_date": False}

    def test_proceed_outside_transition(self, client):
        settle(client)
        resp = client.post("/chat/proceed")
        assert resp.json()["accepted"] is False


class TestEmail:
    def test_email_during_chat_is_a_conflict(self, client):
        resp = client.post("/email", json={"subject": "Order confirmed", "body": "Dear Team, done. Regards"})
        assert resp.status_code == 409

    def test_email_graded_after_chat(self, client):
        client.post("/scenario/new", json={"scenario_id": "parts_delivery"})
        settle(client)
        client.post("/chat", json={"text": "When will BYD-FB-2024 arrive?"})
        settle(client)
        client.post("/chat/proceed")
        assert settle(client)["phase"] == "EMAIL"

        resp = client.post("/email", json={"subject": "Update", "body": "the part is late. pls check"})
        body = resp.json()
        assert resp.status_code == 200
        assert body["is_valid"] is False
        assert body["errors"]
        assert body["phase"] == "EMAIL"
