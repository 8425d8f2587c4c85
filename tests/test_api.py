"""Tests for the HTTP surface: rounds, state, reset, roster, stream."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from kitchenking.app import create_app
from kitchenking.features.kitchen.app.orchestrator import ChefOrchestrator
from kitchenking.features.kitchen.app.state import KitchenState
from kitchenking.features.kitchen.domain.models import Recipe
from kitchenking.shared.config.settings import settings
from kitchenking.shared.eventbus.events import InProcEventBus
from kitchenking.shared.llm.errors import HttpError


class NullCue:
    def start(self):
        pass

    def stop(self):
        pass


@pytest.fixture
def dish(recipe_dict):
    return Recipe.model_validate(recipe_dict)


@pytest.fixture
def seen():
    return []


@pytest.fixture
def gate():
    ev = asyncio.Event()
    ev.set()
    return ev


@pytest.fixture
def orchestrator(dish, seen, gate):
    async def fake_request(ingredients, cuisine, api_key, allergies):
        seen.append((cuisine, api_key, allergies))
        await gate.wait()
        if cuisine == "俄罗斯菜":
            raise HttpError(503)
        return dish

    return ChefOrchestrator(KitchenState(), request=fake_request, cue=NullCue(), bus=InProcEventBus())


@pytest.fixture
def app(orchestrator):
    return create_app(orchestrator=orchestrator)


@pytest.fixture
def client_factory(app):
    def _make():
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
    return _make


class TestRounds:
    @pytest.mark.asyncio
    async def test_generate_then_read_state(self, client_factory, orchestrator, seen):
        async with client_factory() as client:
            resp = await client.post("/v1/kitchen/rounds", json={
                "ingredients": "鸡蛋，番茄",
                "api_key": "sk-body",
                "allergies": "葱",
                "cuisines": ["湘菜", "俄罗斯菜", "粤菜"],
            })
            assert resp.status_code == 200
            body = resp.json()
            assert body["status"] == "cooking"

            await orchestrator.wait_idle()
            state = (await client.get("/v1/kitchen/state")).json()

        assert state["round_id"] == body["round_id"]
        assert state["is_generating"] is False
        assert state["all_finished"] is True
        assert state["completion_order"] == ["湘菜", "粤菜"]
        assert (state["completed"], state["errored"], state["cooking"]) == (2, 1, 0)
        assert [c["id"] for c in state["chefs"]] == ["湘菜", "粤菜", "俄罗斯菜"]
        assert state["chefs"][0]["recipe"]["dish_name"] == "番茄炒蛋"
        assert state["chefs"][0]["rank"] == 1
        assert state["chefs"][2]["status"] == "errored"
        assert state["chefs"][2]["recipe"] is None
        assert {s[1] for s in seen} == {"sk-body"}
        assert {s[2] for s in seen} == {"葱"}

    @pytest.mark.asyncio
    async def test_falls_back_to_configured_key(self, client_factory, orchestrator, seen, monkeypatch):
        monkeypatch.setattr(settings, "DEEPSEEK_API_KEY", "sk-env")
        async with client_factory() as client:
            resp = await client.post("/v1/kitchen/rounds", json={"ingredients": "土豆", "cuisines": ["川菜"]})
            await orchestrator.wait_idle()
        assert resp.status_code == 200
        assert seen == [("川菜", "sk-env", None)]

    @pytest.mark.asyncio
    async def test_missing_key(self, client_factory, monkeypatch):
        monkeypatch.setattr(settings, "DEEPSEEK_API_KEY", "")
        async with client_factory() as client:
            resp = await client.post("/v1/kitchen/rounds", json={"ingredients": "土豆"})
        assert resp.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"ingredients": "  ", "api_key": "k"},
        {"ingredients": "土豆", "api_key": "k", "cuisines": []},
        {"ingredients": "土豆", "api_key": "k", "cuisines": ["川菜", "川菜"]},
    ])
    async def test_invalid_request(self, client_factory, payload):
        async with client_factory() as client:
            resp = await client.post("/v1/kitchen/rounds", json=payload)
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_conflict_while_cooking(self, client_factory, orchestrator, gate):
        gate.clear()
        async with client_factory() as client:
            first = await client.post("/v1/kitchen/rounds", json={"ingredients": "土豆", "api_key": "k"})
            second = await client.post("/v1/kitchen/rounds", json={"ingredients": "土豆", "api_key": "k"})
            gate.set()
            await orchestrator.wait_idle()
        assert first.status_code == 200
        assert second.status_code == 409

    @pytest.mark.asyncio
    async def test_reset(self, client_factory, orchestrator):
        async with client_factory() as client:
            await client.post("/v1/kitchen/rounds", json={"ingredients": "土豆", "api_key": "k"})
            await orchestrator.wait_idle()
            snap = (await client.post("/v1/kitchen/reset")).json()
        assert snap["round_id"] is None
        assert snap["chefs"] == []
        assert snap["completion_order"] == []


class TestRoster:
    @pytest.mark.asyncio
    async def test_cuisines(self, client_factory):
        async with client_factory() as client:
            cuisines = (await client.get("/v1/kitchen/cuisines")).json()
        assert [c["name"] for c in cuisines] == ["湘菜", "粤菜", "川菜", "法国菜", "泰国菜", "俄罗斯菜"]
        assert cuisines[0]["chef_name"] == "辣椒王老张"

    @pytest.mark.asyncio
    async def test_random_ingredients(self, client_factory):
        async with client_factory() as client:
            picked = (await client.get("/v1/kitchen/random-ingredients")).json()["ingredients"].split("，")
            too_many = await client.get("/v1/kitchen/random-ingredients", params={"count": 50})
        assert len(picked) == 3
        assert len(set(picked)) == 3
        assert too_many.status_code == 422

    @pytest.mark.asyncio
    async def test_health(self, client_factory):
        async with client_factory() as client:
            body = (await client.get("/health")).json()
        assert body["ok"] is True
        assert body["generating"] is False


class TestStream:
    def test_unknown_round(self, app):
        with TestClient(app) as client:
            with client.websocket_connect("/v1/stream/nope") as ws:
                assert ws.receive_json() == {"round_id": "nope", "type": "unknown_round"}

    def test_finished_round_sends_snapshot_then_done(self, app, orchestrator):
        orchestrator.state.round_id = "r1"
        with TestClient(app) as client:
            with client.websocket_connect("/v1/stream/r1") as ws:
                first = ws.receive_json()
                second = ws.receive_json()
        assert first["type"] == "snapshot"
        assert first["state"]["round_id"] == "r1"
        assert second == {"round_id": "r1", "type": "done"}
