"""Tests for the read-only catalog API"""
import pytest
from fastapi.testclient import TestClient

from reading_app.server.api_server import create_api_app


@pytest.fixture
def client(repository):
    return TestClient(create_api_app(repository))


def test_list_passages(client):
    response = client.get("/passages")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["page_count"] == 1
    assert [item["id"] for item in body["items"]] == ["e1", "e2", "e3"]
    assert body["items"][0]["difficulty"] == "Easy"
    assert body["items"][0]["question_count"] == 4


def test_list_passages_with_filters(client):
    body = client.get("/passages", params={"q": "memory", "difficulty": "Hard"}).json()
    assert [item["id"] for item in body["items"]] == ["e3"]

    body = client.get("/passages", params={"page_size": 2, "page": 2}).json()
    assert [item["id"] for item in body["items"]] == ["e3"]


def test_list_passages_rejects_bad_paging(client):
    assert client.get("/passages", params={"page": 0}).status_code == 422
    assert client.get("/passages", params={"page_size": 0}).status_code == 422


def test_get_passage_hides_correct_answers(client):
    response = client.get("/passages/e2")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Cities and the Night Sky"
    assert "<p>" in body["content_html"]
    assert len(body["questions"]) == 4
    for question in body["questions"]:
        for option in question["options"]:
            assert set(option) == {"id", "text"}


def test_get_missing_passage_returns_404(client):
    response = client.get("/passages/missing")
    assert response.status_code == 404
