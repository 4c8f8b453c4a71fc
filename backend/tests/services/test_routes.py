"""HTTP Routes — identity resolution, status codes, envelopes, and display rules."""

from uuid import uuid4

OWNER = "user-owner"
OTHER = "user-other"


def as_user(identity: str) -> dict:
    return {"X-User-ID": identity}


async def _create_team(client, identity=OWNER, name="Core Team") -> dict:
    res = await client.post(
        "/api/v1/teams", json={"name": name}, headers=as_user(identity),
    )
    assert res.status_code == 201
    return res.json()


async def _create_project(client, team_id, identity=OWNER) -> dict:
    res = await client.post("/api/v1/projects", json={
        "name": "Billing",
        "description": "Invoices and payments",
        "team_id": team_id,
        "visibility": "PRIVATE",
    }, headers=as_user(identity))
    assert res.status_code == 201
    return res.json()


async def test_liveness_needs_no_identity(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_missing_identity_is_unauthenticated(client):
    res = await client.get("/api/v1/teams")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_blank_identity_is_unauthenticated(client):
    res = await client.get("/api/v1/session", headers=as_user("   "))
    assert res.status_code == 401


async def test_session_returns_identity(client):
    res = await client.get("/api/v1/session", headers=as_user(OWNER))
    assert res.status_code == 200
    assert res.json() == {"identity": OWNER}


async def test_team_create_list_show(client):
    team = await _create_team(client)
    listed = await client.get("/api/v1/teams", headers=as_user(OWNER))
    assert [t["id"] for t in listed.json()] == [team["id"]]

    shown = await client.get(f"/api/v1/teams/{team['id']}", headers=as_user(OWNER))
    assert shown.status_code == 200
    assert shown.json()["name"] == "Core Team"

    hidden = await client.get(f"/api/v1/teams/{team['id']}", headers=as_user(OTHER))
    assert hidden.status_code == 404
    assert hidden.json()["error"]["message"] == "Team not found"


async def test_team_validation_error_envelope(client):
    res = await client.post(
        "/api/v1/teams", json={"name": "ab"}, headers=as_user(OWNER),
    )
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "body.name"


async def test_project_show_lowercases_visibility(client):
    team = await _create_team(client)
    project = await _create_project(client, team["id"])
    assert project["visibility"] == "PRIVATE"

    shown = await client.get(
        f"/api/v1/projects/{project['id']}", headers=as_user(OWNER),
    )
    assert shown.status_code == 200
    assert shown.json()["visibility"] == "private"
    assert shown.json()["name"] == "Billing"


async def test_project_list_requires_team_id(client):
    res = await client.get("/api/v1/projects", headers=as_user(OWNER))
    assert res.status_code == 400


async def test_project_list_excludes_non_members(client):
    team = await _create_team(client)
    await _create_project(client, team["id"])
    res = await client.get(
        "/api/v1/projects", params={"team_id": team["id"]}, headers=as_user(OTHER),
    )
    assert res.status_code == 200
    assert res.json() == []


async def test_project_update_and_delete_by_non_member(client):
    team = await _create_team(client)
    project = await _create_project(client, team["id"])
    update = await client.put(f"/api/v1/projects/{project['id']}", json={
        "name": "Hijacked", "description": "nope", "visibility": "PUBLIC",
    }, headers=as_user(OTHER))
    assert update.status_code == 404
    delete = await client.delete(
        f"/api/v1/projects/{project['id']}", headers=as_user(OTHER),
    )
    assert delete.status_code == 404


async def test_project_update_and_delete_by_owner(client):
    team = await _create_team(client)
    project = await _create_project(client, team["id"])
    update = await client.put(f"/api/v1/projects/{project['id']}", json={
        "name": "Billing v2", "description": "Rebuilt", "visibility": "PUBLIC",
    }, headers=as_user(OWNER))
    assert update.status_code == 200
    assert update.json() == {"status": "ok"}

    shown = await client.get(
        f"/api/v1/projects/{project['id']}", headers=as_user(OWNER),
    )
    assert shown.json()["visibility"] == "public"

    delete = await client.delete(
        f"/api/v1/projects/{project['id']}", headers=as_user(OWNER),
    )
    assert delete.status_code == 200
    gone = await client.get(
        f"/api/v1/projects/{project['id']}", headers=as_user(OWNER),
    )
    assert gone.status_code == 404


async def test_api_create_and_list(client):
    team = await _create_team(client)
    project = await _create_project(client, team["id"])
    payload = {
        "endpoint": "/invoices",
        "method": "POST",
        "params": {},
        "body": {"amount": 10},
        "headers": {},
        "authorization": {},
        "pre_request_script": "",
        "post_response_script": "",
        "tags": ["billing"],
        "versions": ["v1"],
        "order": 0,
        "project_id": project["id"],
    }
    created = await client.post("/api/v1/apis", json=payload, headers=as_user(OWNER))
    assert created.status_code == 201
    assert created.json()["body"] == {"amount": 10}

    denied = await client.post("/api/v1/apis", json=payload, headers=as_user(OTHER))
    assert denied.status_code == 404
    assert denied.json()["error"]["message"] == "Project not found"

    listed = await client.get(
        "/api/v1/apis", params={"project_id": project["id"]}, headers=as_user(OWNER),
    )
    assert [a["endpoint"] for a in listed.json()] == ["/invoices"]


async def test_api_create_rejects_unknown_method(client):
    res = await client.post("/api/v1/apis", json={
        "endpoint": "/x", "method": "FETCH", "params": {}, "body": {},
        "headers": {}, "authorization": {}, "pre_request_script": "",
        "post_response_script": "", "tags": [], "versions": [], "order": 0,
        "project_id": str(uuid4()),
    }, headers=as_user(OWNER))
    assert res.status_code == 400


async def test_team_delete_by_owner(client):
    team = await _create_team(client)
    res = await client.delete(f"/api/v1/teams/{team['id']}", headers=as_user(OWNER))
    assert res.status_code == 200
    listed = await client.get("/api/v1/teams", headers=as_user(OWNER))
    assert listed.json() == []
