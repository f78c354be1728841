"""Tests for domain models and method descriptions."""

import pytest

from api_mocker.domain.constants import describe_method
from api_mocker.domain.models import Documentation, Route, RouteParam, SimulatedResponse


class TestDescribeMethod:
    """Tests for method labels."""

    @pytest.mark.parametrize('method,label', [
        ('GET', 'Méthode : GET (lecture)'),
        ('post', 'Méthode : POST (création)'),
        ('PUT', 'Méthode : PUT (modification)'),
        ('DELETE', 'Méthode : DELETE (suppression)'),
        ('patch', 'Méthode : PATCH'),
    ])
    def test_labels(self, method, label):
        assert describe_method(method) == label


class TestSerialization:
    """Tests for the persisted camelCase shape."""

    def test_route_round_trip(self):
        route = Route(
            method='PUT',
            url='/api/users/{id}',
            description='d',
            params=(RouteParam('id', 'string/number', 'x'),),
            request_example='{}',
            response_example='{"success": true}',
        )
        data = route.to_dict()
        assert data['requestExample'] == '{}'
        assert data['params'] == [{'name': 'id', 'type': 'string/number', 'description': 'x', 'required': True}]
        assert Route.from_dict(data) == route

    def test_route_without_examples(self):
        data = Route('GET', '/api', 'd').to_dict()
        assert 'requestExample' not in data
        assert 'responseExample' not in data

    def test_documentation_keys(self):
        doc = Documentation(routes=[], api_prefix='/x', json_structure={}, json_data={}, timestamp='t')
        assert set(doc.to_dict()) == {'routes', 'apiPrefix', 'jsonStructure', 'jsonData', 'timestamp'}
        assert not doc.has_routes()

    def test_documentation_defaults(self):
        doc = Documentation.from_dict({'routes': []})
        assert doc.api_prefix == '/api/v1'
        assert doc.json_data is None

    def test_response_ok(self):
        assert SimulatedResponse(201, {}).ok
        assert not SimulatedResponse(404, {}).ok
