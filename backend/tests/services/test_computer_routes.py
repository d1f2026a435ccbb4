"""Computer routes — HTTP contract of the dashboard API.

Tests cover:
    - GET /computers: defaults, search, sort/order parsing, page bounds → 400
    - GET /computers/{id}: 200 and 404
    - POST /computers: 201, body validation → 400, dangling company → 400
    - PUT /computers/{id}: 200 with refreshed company name, unknown id → 400
    - DELETE /computers/{id} and POST /computers/delete: 204
    - Ids beyond the id column range: 404 on GET, 400 everywhere else
"""

from datetime import date

import pytest

BASE = "/api/v1/computers"


@pytest.fixture
async def seeded(make_company, make_computer):
    apple = await make_company("Apple Inc.")
    ibm = await make_company("IBM")
    mac = await make_computer("Macintosh", apple.id, date(1984, 1, 24))
    pc = await make_computer("IBM PC", ibm.id, date(1981, 8, 12))
    await make_computer("Z3")
    return {"apple": apple.id, "ibm": ibm.id, "mac": mac.id, "pc": pc.id}


# ─── Listing ─────────────────────────────────────────────────────

async def test_list_defaults(client, seeded):
    resp = await client.get(BASE)
    assert resp.status_code == 200
    body = resp.json()
    assert body["current_page"] == 0
    assert body["page_size"] == 10
    assert body["total_elements"] == 3
    assert body["total_pages"] == 1
    assert [c["name"] for c in body["elements"]] == ["IBM PC", "Macintosh", "Z3"]
    assert body["elements"][1]["company_name"] == "Apple Inc."
    assert body["elements"][1]["introduced"] == "1984-01-24"


async def test_list_search_and_sort(client, seeded):
    resp = await client.get(
        BASE, params={"search": "i", "sort": "company_name", "order": "desc"},
    )
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()["elements"]] == ["IBM PC", "Macintosh"]


async def test_list_company_scope(client, seeded):
    resp = await client.get(BASE, params={"company_id": seeded["apple"]})
    assert [c["name"] for c in resp.json()["elements"]] == ["Macintosh"]


@pytest.mark.parametrize("params, field", [
    ({"sort": "price"}, "sort"),
    ({"order": "sideways"}, "order"),
    ({"page": 2}, "page"),
    ({"page": -1}, "page"),
    ({"page_size": 0}, "page_size"),
    ({"company_id": 0}, "company_id"),
])
async def test_list_bad_parameters(client, seeded, params, field):
    resp = await client.get(BASE, params=params)
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "INVALID_ARGUMENT"
    assert error["field"] == field


async def test_list_page_size_is_capped(client, seeded):
    resp = await client.get(BASE, params={"page_size": 100000})
    assert resp.json()["page_size"] == 100


async def test_list_empty_database(client):
    resp = await client.get(BASE)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_pages"] == 0
    assert body["elements"] == []


# ─── Single record ───────────────────────────────────────────────

async def test_get_computer(client, seeded):
    resp = await client.get(f"{BASE}/{seeded['pc']}")
    assert resp.status_code == 200
    assert resp.json()["company_name"] == "IBM"


async def test_get_missing_computer(client, seeded):
    resp = await client.get(f"{BASE}/9999")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_computer(client, seeded):
    resp = await client.post(BASE, json={
        "name": "  Lisa ", "introduced": "1983-01-19", "company_id": seeded["apple"],
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] > 0
    assert body["name"] == "Lisa"

    listed = await client.get(BASE, params={"search": "lisa"})
    assert listed.json()["total_elements"] == 1


@pytest.mark.parametrize("payload", [
    {},
    {"name": ""},
    {"name": "   "},
    {"name": "x" * 256},
    {"name": "Lisa", "company_id": 0},
    {"name": "Lisa", "introduced": "not-a-date"},
])
async def test_create_invalid_body(client, payload):
    resp = await client.post(BASE, json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_with_dangling_company(client, seeded):
    resp = await client.post(BASE, json={"name": "Ghost", "company_id": 999})
    assert resp.status_code == 400
    assert resp.json()["error"]["field"] == "company_id"


async def test_update_computer(client, seeded):
    resp = await client.put(f"{BASE}/{seeded['mac']}", json={
        "name": "Macintosh Plus", "company_id": seeded["ibm"],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Macintosh Plus"
    assert body["company_name"] == "IBM"
    assert body["introduced"] is None


async def test_update_unknown_computer(client, seeded):
    resp = await client.put(f"{BASE}/9999", json={"name": "Nobody"})
    assert resp.status_code == 400
    assert resp.json()["error"]["field"] == "id"


# ─── Deletes ─────────────────────────────────────────────────────

async def test_delete_computer(client, seeded):
    resp = await client.delete(f"{BASE}/{seeded['mac']}")
    assert resp.status_code == 204
    assert (await client.get(f"{BASE}/{seeded['mac']}")).status_code == 404


async def test_delete_unknown_computer(client, seeded):
    resp = await client.delete(f"{BASE}/9999")
    assert resp.status_code == 400


async def test_delete_selection(client, seeded):
    resp = await client.post(
        f"{BASE}/delete", json={"ids": [seeded["mac"], seeded["pc"], 9999]},
    )
    assert resp.status_code == 204
    remaining = (await client.get(BASE)).json()
    assert [c["name"] for c in remaining["elements"]] == ["Z3"]


async def test_delete_selection_rejects_non_positive_ids(client, seeded):
    resp = await client.post(f"{BASE}/delete", json={"ids": [seeded["mac"], -1]})
    assert resp.status_code == 400
    assert resp.json()["error"]["field"] == "ids"
    assert (await client.get(BASE)).json()["total_elements"] == 3


# ─── Id column range ─────────────────────────────────────────────

HUGE = 2**63


async def test_get_beyond_id_range_is_not_found(client, seeded):
    resp = await client.get(f"{BASE}/{HUGE}")
    assert resp.status_code == 404


async def test_company_scope_beyond_id_range(client, seeded):
    resp = await client.get(BASE, params={"company_id": HUGE})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_beyond_id_range(client, seeded):
    resp = await client.put(f"{BASE}/{HUGE}", json={"name": "Huge"})
    assert resp.status_code == 400


async def test_delete_beyond_id_range(client, seeded):
    resp = await client.delete(f"{BASE}/{HUGE}")
    assert resp.status_code == 400
    assert (await client.get(BASE)).json()["total_elements"] == 3


async def test_create_with_company_beyond_id_range(client, seeded):
    resp = await client.post(BASE, json={"name": "Huge", "company_id": HUGE})
    assert resp.status_code == 400


async def test_delete_selection_beyond_id_range(client, seeded):
    resp = await client.post(f"{BASE}/delete", json={"ids": [seeded["mac"], HUGE]})
    assert resp.status_code == 400
    assert resp.json()["error"]["field"] == "ids"
    assert (await client.get(BASE)).json()["total_elements"] == 3
