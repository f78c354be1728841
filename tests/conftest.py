"""Shared test fixtures."""

import json

import pytest

from api_mocker.generation.route_generator import generate_documentation
from api_mocker.storage.document_store import InMemoryDocumentStore


# ── Sample JSON Content ──────────────────────────────────────────────────

USERS_SAMPLE = {"users": [{"id": 1, "name": "Ana"}]}

SHOP_SAMPLE = {
    "shop": {
        "name": "Corner Store",
        "address": {"city": "Lyon", "zip": "69001"},
        "products": [
            {"id": 1, "title": "Pen", "price": 1.5, "inStock": True, "tags": ["office", "cheap"]},
            {"id": 2, "title": "Book", "price": 12.0, "inStock": False, "tags": []},
        ],
    },
    "orders": [
        {"id": 10, "quantity": 2, "customer": {"name": "Ana", "email": "ana@example.com"}},
    ],
    "version": 3,
}


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def users_sample():
    return json.loads(json.dumps(USERS_SAMPLE))


@pytest.fixture
def shop_sample():
    return json.loads(json.dumps(SHOP_SAMPLE))


@pytest.fixture
def users_store(users_sample):
    """In-memory store seeded with documentation for the users sample."""
    store = InMemoryDocumentStore()
    store.save(generate_documentation(users_sample, '/api/v1'))
    return store


@pytest.fixture
def tmp_json(tmp_path):
    """Write content to a temp file and return its path."""
    def _write(content: str, filename: str = "sample.json") -> str:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
