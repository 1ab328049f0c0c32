"""Tests for the notes, assignments, old questions and blogs endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def create_note(client: AsyncClient, headers: dict[str, str], payload: dict) -> dict:
    response = await client.post("/api/notes", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# AUTHORIZATION
# =============================================================================


async def test_anonymous_create_is_unauthenticated(client: AsyncClient, note_payload) -> None:
    response = await client.post("/api/notes", json=note_payload())

    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


async def test_student_create_is_forbidden(
    client: AsyncClient, student_headers: dict[str, str], note_payload
) -> None:
    response = await client.post("/api/notes", json=note_payload(), headers=student_headers)

    assert response.status_code == 403
    assert "error" in response.json()


async def test_authorization_checked_before_body(client: AsyncClient, student_headers: dict[str, str]) -> None:
    response = await client.post("/api/notes", json={}, headers=student_headers)
    assert response.status_code == 403


async def test_invalid_token_on_public_list_is_anonymous(client: AsyncClient) -> None:
    response = await client.get("/api/notes", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 200


async def test_invalid_token_on_admin_route(client: AsyncClient, note_payload) -> None:
    response = await client.post(
        "/api/notes", json=note_payload(), headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


# =============================================================================
# CRUD
# =============================================================================


async def test_note_lifecycle(client: AsyncClient, admin_headers: dict[str, str], note_payload) -> None:
    created = await create_note(client, admin_headers, note_payload(seoKeywords=["dsa", "stack"]))
    note_id = created["id"]

    assert created["isPublished"] is True
    assert created["seoKeywords"] == ["dsa", "stack"]
    assert created["author"] == {
        "id": created["author"]["id"],
        "name": "Admin",
        "email": "admin@example.com",
    }

    fetched = await client.get(f"/api/notes/{note_id}")
    assert fetched.status_code == 200
    assert fetched.json()["title"] == "Data Structures Unit 1"

    updated = await client.put(f"/api/notes/{note_id}", json={"title": "Unit 1 (revised)"}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["title"] == "Unit 1 (revised)"
    assert updated.json()["content"] == created["content"]

    deleted = await client.delete(f"/api/notes/{note_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Note deleted successfully", "id": note_id}

    gone = await client.get(f"/api/notes/{note_id}")
    assert gone.status_code == 404
    assert gone.json() == {"error": "Note not found"}


async def test_create_validation_lists_every_field(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post("/api/notes", json={"year": "soon"}, headers=admin_headers)

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"title", "content", "fileUrl", "year"} <= fields


async def test_invalid_id_is_bad_request(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    assert (await client.get("/api/notes/abc")).json() == {"error": "Invalid note ID"}
    assert (await client.get("/api/notes/abc")).status_code == 400
    assert (await client.put("/api/notes/abc", json={}, headers=admin_headers)).status_code == 400
    assert (await client.delete("/api/notes/abc", headers=admin_headers)).status_code == 400


async def test_missing_id_is_not_found(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    missing = str(uuid4())
    assert (await client.get(f"/api/notes/{missing}")).status_code == 404
    assert (await client.put(f"/api/notes/{missing}", json={"title": "x"}, headers=admin_headers)).status_code == 404
    assert (await client.delete(f"/api/notes/{missing}", headers=admin_headers)).status_code == 404


async def test_empty_update_returns_item_unchanged(
    client: AsyncClient, admin_headers: dict[str, str], note_payload
) -> None:
    created = await create_note(client, admin_headers, note_payload())

    response = await client.put(f"/api/notes/{created['id']}", json={}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["title"] == created["title"]
    assert response.json()["updatedAt"] == created["updatedAt"]


async def test_update_rejects_null_required_field(
    client: AsyncClient, admin_headers: dict[str, str], note_payload
) -> None:
    created = await create_note(client, admin_headers, note_payload())

    response = await client.put(f"/api/notes/{created['id']}", json={"fileUrl": None}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "fileUrl"


# =============================================================================
# LISTING
# =============================================================================


async def test_search_and_pagination(client: AsyncClient, admin_headers: dict[str, str], note_payload) -> None:
    for i in range(12):
        await create_note(client, admin_headers, note_payload(title=f"Graph algorithms {i}"))
    await create_note(client, admin_headers, note_payload(title="Calculus", content="Limits"))

    response = await client.get("/api/notes", params={"search": "algo", "page": 2, "limit": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 5
    assert body["total"] == 12
    assert body["page"] == 2
    assert body["limit"] == 5
    assert body["totalPages"] == 3

    last = (await client.get("/api/notes", params={"search": "graph", "page": 3, "limit": 5})).json()
    assert last["count"] == 2


async def test_pages_do_not_overlap(client: AsyncClient, admin_headers: dict[str, str], note_payload) -> None:
    for i in range(7):
        await create_note(client, admin_headers, note_payload(title=f"Note {i}"))

    seen: list[str] = []
    for page in (1, 2, 3):
        body = (await client.get("/api/notes", params={"page": page, "limit": 3})).json()
        seen.extend(item["id"] for item in body["items"])

    assert len(seen) == 7
    assert len(set(seen)) == 7


async def test_filters_and_sorting(client: AsyncClient, admin_headers: dict[str, str], note_payload) -> None:
    await create_note(client, admin_headers, note_payload(title="B draft", isPublished=False))
    await create_note(client, admin_headers, note_payload(title="C published"))
    await create_note(client, admin_headers, note_payload(title="A published"))

    response = await client.get("/api/notes", params={"isPublished": "true", "sortBy": "title", "order": "asc"})

    assert [item["title"] for item in response.json()["items"]] == ["A published", "C published"]


@pytest.mark.parametrize(
    "params",
    [
        {"sortBy": "passwordHash"},
        {"page": "0"},
        {"limit": "101"},
        {"order": "random"},
        {"page": str(10**20)},
        {"year": str(10**20)},
        {"limit": str(10**20)},
    ],
)
async def test_bad_list_params(client: AsyncClient, params: dict) -> None:
    response = await client.get("/api/notes", params=params)

    assert response.status_code == 400
    assert "errors" in response.json()


async def test_order_is_case_insensitive(
    client: AsyncClient, admin_headers: dict[str, str], note_payload
) -> None:
    await create_note(client, admin_headers, note_payload(title="Beta"))
    await create_note(client, admin_headers, note_payload(title="Alpha"))

    response = await client.get("/api/notes", params={"sortBy": "title", "order": "ASC"})

    assert response.status_code == 200
    assert [item["title"] for item in response.json()["items"]] == ["Alpha", "Beta"]


async def test_default_page_size(client: AsyncClient) -> None:
    body = (await client.get("/api/notes")).json()

    assert body == {"items": [], "count": 0, "total": 0, "page": 1, "limit": 10, "totalPages": 0}


# =============================================================================
# OTHER RESOURCE TYPES
# =============================================================================


async def test_assignment_crud(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    payload = {
        "title": "Lab 3: Queues",
        "description": "Implement a circular queue",
        "fileUrl": "https://files.example.com/lab3.pdf",
        "dueDate": "2026-11-30T23:59:00+00:00",
        "totalMarks": 20,
        "difficulty": "medium",
    }
    created = await client.post("/api/assignments", json=payload, headers=admin_headers)
    assert created.status_code == 201
    assert created.json()["totalMarks"] == 20

    oversized = await client.post("/api/assignments", json={**payload, "totalMarks": 10**20}, headers=admin_headers)
    assert oversized.status_code == 400
    assert oversized.json()["errors"][0]["field"] == "totalMarks"

    missing_due = await client.post(
        "/api/assignments", json={k: v for k, v in payload.items() if k != "dueDate"}, headers=admin_headers
    )
    assert missing_due.status_code == 400

    listed = (await client.get("/api/assignments", params={"difficulty": "medium", "sortBy": "dueDate"})).json()
    assert listed["total"] == 1

    deleted = await client.delete(f"/api/assignments/{created.json()['id']}", headers=admin_headers)
    assert deleted.json()["message"] == "Assignment deleted successfully"


async def test_old_question_crud(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    payload = {
        "title": "2079 Q4",
        "question": "What is a deadlock?",
        "answer": "A cycle of processes waiting on each other.",
        "subject": "Operating System",
        "fileUrl": "https://files.example.com/q4.pdf",
    }
    created = await client.post("/api/old-questions", json=payload, headers=admin_headers)
    assert created.status_code == 201

    found = (await client.get("/api/old-questions", params={"search": "deadlock"})).json()
    assert [item["id"] for item in found["items"]] == [created.json()["id"]]

    invalid = await client.get("/api/old-questions/xyz")
    assert invalid.json() == {"error": "Invalid old question ID"}

    deleted = await client.delete(f"/api/old-questions/{created.json()['id']}", headers=admin_headers)
    assert deleted.json()["message"] == "Old question deleted successfully"


async def test_blog_crud(client: AsyncClient, admin_headers: dict[str, str], student_headers: dict[str, str]) -> None:
    payload = {
        "title": "How to prepare for finals",
        "sections": [{"text": "Start early."}, {"imageUrl": "https://img.example.com/plan.png"}],
        "fileUrl": "https://files.example.com/finals.pdf",
        "category": "tips",
        "isFeatured": True,
    }
    created = await client.post("/api/blogs", json=payload, headers=admin_headers)
    assert created.status_code == 201
    blog = created.json()
    assert blog["sections"][1]["imageUrl"] == "https://img.example.com/plan.png"

    forbidden = await client.put(f"/api/blogs/{blog['id']}", json={"title": "Hijacked"}, headers=student_headers)
    assert forbidden.status_code == 403

    featured = (await client.get("/api/blogs", params={"isFeatured": "true", "category": "tips"})).json()
    assert featured["total"] == 1

    updated = await client.put(f"/api/blogs/{blog['id']}", json={"isFeatured": False}, headers=admin_headers)
    assert updated.json()["isFeatured"] is False
