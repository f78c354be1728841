"""Tests for JSON output writing."""

import json
import os

from api_mocker.fingerprint import FingerprintService
from api_mocker.generation.route_generator import generate_documentation
from api_mocker.output.json_dumper import JSONDumper


class TestJSONDumper:
    """Tests for the output directory layout."""

    def test_write_all(self, tmp_path, users_sample):
        doc = generate_documentation(users_sample)
        paths = JSONDumper(str(tmp_path / 'out')).write_all(doc)
        assert sorted(os.path.basename(p) for p in paths) == ['data.json', 'documentation.json', 'routes.json']

    def test_documentation_envelope(self, tmp_path, users_sample):
        doc = generate_documentation(users_sample)
        path = JSONDumper(str(tmp_path)).write_documentation(doc)
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        assert data['_metadata']['route_count'] == 6
        assert data['_metadata']['route_table_hash'] == FingerprintService.hash_routes(doc.routes)
        assert data['apiPrefix'] == '/api/v1'
        assert data['routes'][2]['url'] == '/api/v1/users/{id}'

    def test_routes_file(self, tmp_path, users_sample):
        doc = generate_documentation(users_sample)
        path = JSONDumper(str(tmp_path)).write_routes(doc.routes)
        with open(path, encoding='utf-8') as f:
            routes = json.load(f)
        assert routes[3]['method'] == 'POST'
        assert 'requestExample' in routes[3]
        assert 'requestExample' not in routes[0]

    def test_no_data_file_without_document(self, tmp_path):
        assert JSONDumper(str(tmp_path)).write_document(None) is None
        assert not os.path.exists(tmp_path / 'data.json')

    def test_compact_output(self, tmp_path):
        path = JSONDumper(str(tmp_path), pretty=False).write_document({'a': [1, 2]})
        with open(path, encoding='utf-8') as f:
            assert f.read() == '{"a": [1, 2]}'

    def test_non_ascii_preserved(self, tmp_path):
        path = JSONDumper(str(tmp_path)).write_document({'label': 'catégorie'})
        with open(path, encoding='utf-8') as f:
            assert 'catégorie' in f.read()
