"""
Tests for the dataset HTTP API.
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client(collection):
    return TestClient(app)


def test_create_and_fetch(client, collection, valid_payload):
    response = client.post("/datasets", json=valid_payload)
    assert response.status_code == 200
    dataset = response.json()["dataset"]
    assert dataset["name"] == "Morning focus"
    assert dataset["wordCount"] == 3
    assert "words" not in dataset
    assert "createdAt" in dataset

    response = client.get(f"/datasets/{dataset['id']}")
    assert response.status_code == 200
    assert response.json()["dataset"]["words"] == ["energy", "clarity", "flow"]


def test_create_validation_error(client, collection, valid_payload):
    valid_payload["words"] = []
    response = client.post("/datasets", json=valid_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Provide at least one word for your list."}
    assert collection.docs == []


def test_create_rejects_invalid_json(client):
    response = client.post(
        "/datasets", content=b"{not json", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be valid JSON."}


def test_create_storage_failure(client, collection, valid_payload):
    collection.down = True
    response = client.post("/datasets", json=valid_payload)
    assert response.status_code == 500
    assert response.json() == {"error": "Unable to save that word list. Please try again later."}


def test_list_with_query(client, stored_dataset):
    stored_dataset(name="Focus words")
    stored_dataset(name="Poems")
    response = client.get("/datasets", params={"q": "focus"})
    assert response.status_code == 200
    assert [d["name"] for d in response.json()["datasets"]] == ["Focus words"]


def test_list_storage_failure(client, collection):
    collection.down = True
    response = client.get("/datasets")
    assert response.status_code == 500
    assert "error" in response.json()


def test_get_invalid_id(client, collection):
    response = client.get("/datasets/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid dataset id."}


def test_get_not_found(client, collection):
    response = client.get(f"/datasets/{ObjectId()}")
    assert response.status_code == 404
    assert response.json() == {"error": "Word list not found."}


def test_health(client, stored_dataset):
    stored_dataset()
    body = client.get("/health").json()
    assert body["database"] == "connected"
    assert body["datasets"] == 1


def test_unexpected_error_returns_json(collection, caplog):
    collection.docs.append({"_id": ObjectId(), "username": "ada", "createdAt": datetime(2026, 1, 1, tzinfo=timezone.utc)})
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/datasets")

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong. Please try again later."}
    assert "Unhandled error on GET /datasets" in caplog.text
