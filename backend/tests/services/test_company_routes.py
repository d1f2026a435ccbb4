"""Company routes — listing, lookup, cascading delete over HTTP."""

BASE = "/api/v1/companies"


async def test_list_companies(client, make_company):
    for name in ("Tandy", "Apple", "Commodore"):
        await make_company(name)

    resp = await client.get(BASE, params={"page_size": 2, "page": 1})

    assert resp.status_code == 200
    body = resp.json()
    assert body["total_elements"] == 3
    assert body["total_pages"] == 2
    assert [c["name"] for c in body["elements"]] == ["Tandy"]


async def test_get_company(client, make_company):
    apple = await make_company("Apple")
    resp = await client.get(f"{BASE}/{apple.id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": apple.id, "name": "Apple"}


async def test_get_missing_company(client):
    resp = await client.get(f"{BASE}/77")
    assert resp.status_code == 404


async def test_delete_company_cascades(client, make_company, make_computer):
    apple = await make_company("Apple")
    ibm = await make_company("IBM")
    await make_computer("Apple II", apple.id)
    await make_computer("Macintosh", apple.id)
    await make_computer("IBM PC", ibm.id)

    resp = await client.delete(f"{BASE}/{apple.id}")

    assert resp.status_code == 204
    assert (await client.get(f"{BASE}/{apple.id}")).status_code == 404
    computers = (await client.get("/api/v1/computers")).json()
    assert [c["name"] for c in computers["elements"]] == ["IBM PC"]


async def test_delete_unknown_company(client):
    resp = await client.delete(f"{BASE}/77")
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"


async def test_get_company_beyond_id_range(client):
    resp = await client.get(f"{BASE}/{2**63}")
    assert resp.status_code == 404


async def test_delete_company_beyond_id_range(client):
    resp = await client.delete(f"{BASE}/{2**63}")
    assert resp.status_code == 400
