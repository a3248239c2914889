"""Club Procedures — tests for the JSON procedure endpoints.

Tests cover:
    - envelopes returned with HTTP 200 for success and refusal alike
    - camelCase accessToken on the wire
    - malformed bodies rejected with the structured 400 envelope
    - example scenario end to end
"""

RPC = "/api/v1/rpc"
CHESS = {"name": "Chess Club", "description": "We play chess", "linktree": ""}


async def _create(client, token, club=CHESS):
    res = await client.post(f"{RPC}/createClub", json={"accessToken": token, "club": club})
    assert res.status_code == 200
    return res.json()


async def test_create_and_get_club(client, admin_token):
    body = await _create(client, admin_token)
    assert body["success"] is True
    club = body["club"]
    assert club["image"] == "/images/default-club-image.png"
    assert club["linktree"] == ""

    res = await client.post(f"{RPC}/getClub", json={"id": club["id"]})
    assert res.status_code == 200
    assert res.json() == {"success": True, "club": club}


async def test_create_refused_for_member(client, member_token):
    assert await _create(client, member_token) == {"success": False, "club": None}
    res = await client.post(f"{RPC}/getAllClubs")
    assert res.json() == {"success": True, "clubs": []}


async def test_invalid_payload_is_refusal_not_http_error(client, admin_token):
    body = await _create(client, admin_token, {"name": "", "description": "x"})
    assert body == {"success": False, "club": None}


async def test_wrong_types_are_rejected_by_transport(client, admin_token):
    res = await client.post(
        f"{RPC}/createClub",
        json={"accessToken": admin_token, "club": {"name": ["not", "a", "string"]}},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_missing_access_token_is_rejected_by_transport(client):
    res = await client.post(f"{RPC}/deleteClub", json={"id": "abc"})
    assert res.status_code == 400


async def test_update_club(client, admin_token):
    club = (await _create(client, admin_token))["club"]
    res = await client.post(f"{RPC}/updateClub", json={
        "accessToken": admin_token,
        "club": {"id": club["id"], "name": "Chess Society", "description": "We still play chess"},
    })
    body = res.json()
    assert body["success"] is True
    assert body["club"]["id"] == club["id"]
    assert body["club"]["name"] == "Chess Society"


async def test_get_all_clubs_lists_created(client, admin_token):
    await _create(client, admin_token)
    await _create(client, admin_token, {"name": "Go Club", "description": "We play go"})
    res = await client.post(f"{RPC}/getAllClubs")
    body = res.json()
    assert body["success"] is True
    assert sorted(c["name"] for c in body["clubs"]) == ["Chess Club", "Go Club"]


async def test_get_unknown_club(client):
    res = await client.post(f"{RPC}/getClub", json={"id": "missing"})
    assert res.json() == {"success": False, "club": None}


async def test_chess_club_scenario(client, admin_token, member_token):
    club = (await _create(client, admin_token))["club"]

    res = await client.post(
        f"{RPC}/deleteClub", json={"accessToken": member_token, "id": club["id"]},
    )
    assert res.json() == {"success": False, "club": None}

    res = await client.post(f"{RPC}/getClub", json={"id": club["id"]})
    assert res.json()["club"] == club

    res = await client.post(
        f"{RPC}/deleteClub", json={"accessToken": admin_token, "id": club["id"]},
    )
    assert res.json() == {"success": True, "club": club}

    res = await client.post(
        f"{RPC}/deleteClub", json={"accessToken": admin_token, "id": club["id"]},
    )
    assert res.json() == {"success": False, "club": None}
