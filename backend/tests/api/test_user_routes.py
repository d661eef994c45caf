"""User routes — create/modify validation and status selection.

Invariants:
    - POST /users with name+email → 201 with the fixed placeholder id
    - PUT /users and PUT /users/modify with name+email → 204, empty body
    - Missing or empty fields → 400 "Name and Email are required"
    - Undecodable or mistyped body → 400 "Invalid JSON format"
    - Any other method → 405 "Method Not Allowed" with an Allow header
    - Method mismatch wins over a bad body
    - Bodies decode as JSON whatever the Content-Type; keys match case-insensitively
    - A null body is an empty record (missing fields, not invalid JSON)
"""

import logging

import pytest


# --- POST /users --------------------------------------------------------------

async def test_create_user_returns_201_with_placeholder_id(client, valid_user):
    res = await client.post("/users", json=valid_user)
    assert res.status_code == 201
    assert res.json() == {
        "message": "User created successfully",
        "id": "auto-generated-id-123",
    }


async def test_create_user_logs_received_user(client, valid_user, caplog):
    with caplog.at_level(logging.INFO, logger="hello_api.api.routes.users"):
        await client.post("/users", json=valid_user)
    assert "Received new user: Name=Alice, Email=alice@example.com" in caplog.text


async def test_create_user_missing_email_is_bad_request(client):
    res = await client.post("/users", json={"name": "Alice"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name and Email are required"}


async def test_create_user_empty_name_is_bad_request(client):
    res = await client.post("/users", json={"name": "", "email": "a@b.c"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name and Email are required"}


async def test_create_user_ignores_unknown_fields(client, valid_user):
    res = await client.post("/users", json={**valid_user, "age": 30})
    assert res.status_code == 201


@pytest.mark.parametrize("body", [
    b"{not json",
    b"",
    b'{"name": 42, "email": "a@b.c"}',
    b'["Alice", "alice@example.com"]',
])
async def test_create_user_undecodable_body_is_invalid_json(client, body):
    res = await client.post(
        "/users", content=body, headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON format"}


# --- PUT /users, PUT /users/modify -------------------------------------------

@pytest.mark.parametrize("path", ["/users", "/users/modify"])
async def test_modify_user_returns_204_empty_body(client, valid_user, path):
    res = await client.put(path, json=valid_user)
    assert res.status_code == 204
    assert res.content == b""


async def test_modify_user_logs_received_user(client, valid_user, caplog):
    with caplog.at_level(logging.INFO, logger="hello_api.api.routes.users"):
        await client.put("/users/modify", json=valid_user)
    assert "Received modify user: Name=Alice, Email=alice@example.com" in caplog.text


@pytest.mark.parametrize("path", ["/users", "/users/modify"])
async def test_modify_user_missing_fields_is_bad_request(client, path):
    res = await client.put(path, json={"email": "alice@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name and Email are required"}


async def test_modify_user_malformed_json_is_bad_request(client):
    res = await client.put(
        "/users/modify", content=b"{",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON format"}


# --- 405 ----------------------------------------------------------------------

@pytest.mark.parametrize("method", ["GET", "DELETE", "PATCH"])
async def test_users_rejects_other_methods(client, method):
    res = await client.request(method, "/users")
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert res.headers["allow"] == "POST, PUT"


async def test_users_modify_only_allows_put(client, valid_user):
    res = await client.post("/users/modify", json=valid_user)
    assert res.status_code == 405
    assert res.headers["allow"] == "PUT"


async def test_method_check_precedes_body_parsing(client):
    res = await client.request(
        "DELETE", "/users", content=b"{",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 405


# --- Body decoding ------------------------------------------------------------

@pytest.mark.parametrize("content_type", [
    None, "text/plain", "application/x-www-form-urlencoded",
])
async def test_create_user_decodes_json_whatever_content_type(
    client, content_type,
):
    headers = {"Content-Type": content_type} if content_type else {}
    res = await client.post(
        "/users", content=b'{"name": "Alice", "email": "alice@example.com"}',
        headers=headers,
    )
    assert res.status_code == 201
    assert res.json()["id"] == "auto-generated-id-123"


@pytest.mark.parametrize("content_type", [
    None, "text/plain", "application/x-www-form-urlencoded",
])
async def test_modify_user_decodes_json_whatever_content_type(
    client, content_type,
):
    headers = {"Content-Type": content_type} if content_type else {}
    res = await client.put(
        "/users/modify",
        content=b'{"name": "Alice", "email": "alice@example.com"}',
        headers=headers,
    )
    assert res.status_code == 204


async def test_create_user_matches_keys_case_insensitively(client):
    res = await client.post("/users", json={"Name": "A", "EMAIL": "b"})
    assert res.status_code == 201


async def test_create_user_null_body_reports_missing_fields(client):
    res = await client.post(
        "/users", content=b"null",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Name and Email are required"}
