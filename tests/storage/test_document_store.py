"""Tests for documentation persistence."""

import json

import pytest

from api_mocker.generation.route_generator import generate_documentation
from api_mocker.storage.document_store import (
    InMemoryDocumentStore,
    JsonFileDocumentStore,
    default_store_path,
)


@pytest.fixture(params=['memory', 'file'])
def store(request, tmp_path):
    if request.param == 'memory':
        return InMemoryDocumentStore()
    return JsonFileDocumentStore(tmp_path / 'nested' / 'store.json')


class TestDocumentStore:
    """Behaviour shared by every store implementation."""

    def test_empty_store(self, store):
        assert store.load() is None
        assert not store.has_documentation()

    def test_save_and_load(self, store, users_sample):
        doc = generate_documentation(users_sample, '/api/v1')
        store.save(doc)
        loaded = store.load()
        assert loaded.routes == doc.routes
        assert loaded.api_prefix == '/api/v1'
        assert loaded.json_structure == users_sample
        assert loaded.json_data == users_sample
        assert loaded.timestamp == doc.timestamp
        assert store.has_documentation()

    def test_loaded_copies_are_independent(self, store, users_sample):
        store.save(generate_documentation(users_sample))
        first = store.load()
        first.json_data['users'].clear()
        assert store.load().json_data == users_sample

    def test_update_json_data(self, store, users_sample):
        store.save(generate_documentation(users_sample))
        store.update_json_data({'users': []})
        loaded = store.load()
        assert loaded.json_data == {'users': []}
        assert loaded.json_structure == users_sample

    def test_update_without_documentation(self, store):
        with pytest.raises(LookupError):
            store.update_json_data({})

    def test_clear(self, store, users_sample):
        store.save(generate_documentation(users_sample))
        store.clear()
        assert store.load() is None

    def test_clear_empty_store(self, store):
        store.clear()
        assert store.load() is None

    def test_no_routes_means_no_documentation(self, store):
        store.save(generate_documentation(42))
        assert store.load() is not None
        assert not store.has_documentation()


class TestJsonFileDocumentStore:
    """File-specific behaviour."""

    def test_blob_kept_under_key(self, tmp_path, users_sample):
        path = tmp_path / 'store.json'
        store = JsonFileDocumentStore(path, key='docs')
        store.save(generate_documentation(users_sample))
        with open(path, encoding='utf-8') as f:
            raw = json.load(f)
        assert list(raw) == ['docs']
        assert json.loads(raw['docs'])['apiPrefix'] == '/api/v1'

    def test_keys_do_not_collide(self, tmp_path, users_sample):
        path = tmp_path / 'store.json'
        a = JsonFileDocumentStore(path, key='a')
        b = JsonFileDocumentStore(path, key='b')
        a.save(generate_documentation(users_sample))
        assert b.load() is None
        b.save(generate_documentation({'x': []}))
        a.clear()
        assert a.load() is None
        assert b.load() is not None

    def test_no_temp_files_left(self, tmp_path, users_sample):
        store = JsonFileDocumentStore(tmp_path / 'store.json')
        store.save(generate_documentation(users_sample))
        assert [p.name for p in tmp_path.iterdir()] == ['store.json']


class TestDefaultStorePath:
    """Tests for store location configuration."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv('API_MOCKER_STORE', '/tmp/custom.json')
        assert default_store_path() == '/tmp/custom.json'

    def test_default(self, monkeypatch):
        monkeypatch.delenv('API_MOCKER_STORE', raising=False)
        assert default_store_path() == '.api_mocker/documentation.json'
