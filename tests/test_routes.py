"""HTTP API tests against the ASGI app."""

import httpx
import pytest

from living_chronicle.app import create_app
from living_chronicle.demo import create_demo_data
from living_chronicle.storage import Storage


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    create_demo_data(Storage(path))
    return path


@pytest.fixture
async def client(data_dir):
    transport = httpx.ASGITransport(app=create_app(data_dir))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_list_civilizations(client):
    resp = await client.get("/api/civilizations")
    assert [c["id"] for c in resp.json()] == ["thalor", "valdoria"]


async def test_get_chronicle(client):
    resp = await client.get("/api/civilizations/valdoria/chronicle")
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "The Chronicles of Valdoria"
    assert "CHAPTER 1" in body["text"]
    assert body["total_entries"] == len([c for c in body["chapters"] for _ in c["events"]])


async def test_get_chronicle_unknown(client):
    resp = await client.get("/api/civilizations/atlantis/chronicle")
    assert resp.status_code == 404


async def test_malformed_event_reported_with_context(client):
    await client.post("/api/civilizations/valdoria/events", json={"events": [
        {"id": "v-bad", "year": 60, "type": "Sporting", "category": "Conflict", "significance": 1.0},
    ]})
    resp = await client.get("/api/civilizations/valdoria/chronicle")
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["event_id"] == "v-bad"
    assert detail["field"] == "type"
    assert detail["value"] == "Sporting"
    assert "message" in detail


async def test_create_civilization(client):
    resp = await client.post("/api/civilizations", json={"id": "aster", "name": "Aster"})
    assert resp.status_code == 201
    resp = await client.get("/api/civilizations/aster/chronicle")
    assert resp.json()["chapters"][0]["is_mythological"] is True


async def test_create_duplicate_civilization(client):
    resp = await client.post("/api/civilizations", json={"id": "thalor", "name": "Thalor"})
    assert resp.status_code == 409


async def test_create_civilization_bad_id(client):
    resp = await client.post("/api/civilizations", json={"id": "../x", "name": "X"})
    assert resp.status_code == 422


async def test_append_and_get_events(client):
    resp = await client.post("/api/civilizations/thalor/events", json={"events": [
        {"id": "t-002", "year": 9, "type": "Religious", "category": "Spiritual", "significance": 1.2},
    ]})
    assert resp.status_code == 200
    events = (await client.get("/api/civilizations/thalor/events")).json()
    assert [e["id"] for e in events] == ["t-001", "t-002"]
    chronicle = (await client.get("/api/civilizations/thalor/chronicle")).json()
    assert chronicle["chapters"][0]["is_mythological"] is False


async def test_append_events_requires_id(client):
    resp = await client.post("/api/civilizations/thalor/events", json={"events": [{"year": 1}]})
    assert resp.status_code == 422


async def test_events_unknown_civilization(client):
    assert (await client.get("/api/civilizations/atlantis/events")).status_code == 404


async def test_compile_batch(client):
    resp = await client.post("/api/chronicles", json={})
    assert [c["civilization_id"] for c in resp.json()] == ["thalor", "valdoria"]
    resp = await client.post("/api/chronicles", json={"civ_ids": ["valdoria"]})
    assert [c["civilization_id"] for c in resp.json()] == ["valdoria"]


async def test_compile_batch_unknown(client):
    resp = await client.post("/api/chronicles", json={"civ_ids": ["atlantis"]})
    assert resp.status_code == 404


async def test_preview(client):
    resp = await client.post("/api/chronicles/preview", json={
        "civ_id": "valdoria", "civ_name": "Valdoria",
        "events": [
            {"id": "a", "year": 10, "type": "Religious", "category": "Spiritual", "significance": 1.0},
            {"id": "b", "year": 14, "type": "Military", "category": "Conflict", "significance": 2.5},
        ],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["chapters"]) == 1
    assert body["chapters"][0]["links"][0]["link_type"] == "None"


async def test_preview_blank_name(client):
    resp = await client.post("/api/chronicles/preview", json={"civ_id": "x", "civ_name": " "})
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "civ_name"


async def test_settings_roundtrip(client):
    resp = await client.patch("/api/settings", json={"causal_window": 12})
    assert resp.status_code == 200
    assert (await client.get("/api/settings")).json()["causal_window"] == 12


async def test_settings_rejects_invalid(client):
    resp = await client.patch("/api/settings", json={"chapter_max_span": -1})
    assert resp.status_code == 422


async def test_append_events_rejects_non_string_id(client):
    resp = await client.post("/api/civilizations/thalor/events", json={"events": [{"id": ["x"]}]})
    assert resp.status_code == 422
    events = (await client.get("/api/civilizations/thalor/events")).json()
    assert [e["id"] for e in events] == ["t-001"]


async def test_null_record_in_stored_log(client, data_dir):
    (data_dir / "civilizations" / "thalor" / "events.json").write_text("[null]")
    resp = await client.get("/api/civilizations/thalor/chronicle")
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "<record>"


async def test_stored_log_not_a_list(client, data_dir):
    (data_dir / "civilizations" / "thalor" / "events.json").write_text('{"id": "t-001"}')
    assert (await client.get("/api/civilizations/thalor/events")).status_code == 422
    assert (await client.get("/api/civilizations/thalor/chronicle")).status_code == 422


async def test_broken_config_file(data_dir):
    (data_dir / "config.json").write_text("{broken")
    transport = httpx.ASGITransport(app=create_app(data_dir))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        resp = await c.get("/api/settings")
    assert resp.status_code == 200
    assert resp.json()["causal_window"] == 20
