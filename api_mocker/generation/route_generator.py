"""Route inference from a JSON sample.

Walks the sample depth-first and emits one route group per container:
  - every object or array gets a GET for the whole node
  - an array whose first element is an object also gets item GET, POST,
    PUT and DELETE routes
  - objects are descended field by field (container fields only);
    arrays are not descended, so each collection yields one group
"""

import copy
import json
from datetime import datetime, timezone
from typing import Any

from api_mocker.domain.constants import COLLECTION_LABEL, DEFAULT_PREFIX, ROOT_LABEL
from api_mocker.domain.enums import JsonKind, kind_of
from api_mocker.domain.models import Documentation, Route, RouteParam
from api_mocker.domain.path_resolver import normalize_prefix
from api_mocker.generation.example_synthesizer import build_request_example

_CONTAINER_KINDS = (JsonKind.OBJECT, JsonKind.ARRAY)

_ID_PARAM = RouteParam('id', 'string/number', "L'identifiant de l'élément")


def to_json_text(value: Any) -> str:
    """Pretty-print a JSON value for route examples."""
    return json.dumps(value, indent=2, ensure_ascii=False)


class RouteGenerator:
    """Derives a CRUD route table from an arbitrary JSON value.

    Args:
        prefix: URL prefix every route starts with; a trailing slash is dropped.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self._prefix = normalize_prefix(prefix)

    def generate(self, json_data: Any) -> list[Route]:
        routes: list[Route] = []
        self._walk(json_data, [], routes)
        return routes

    # ── Private Methods ──────────────────────────────────────────────────

    def _walk(self, node: Any, path: list[str], routes: list[Route]) -> None:
        kind = kind_of(node)
        if kind not in _CONTAINER_KINDS:
            return

        url = self._prefix + ''.join(f'/{segment}' for segment in path)
        routes.append(Route(
            method='GET',
            url=url,
            description=f'Récupérer {path[-1] if path else ROOT_LABEL}',
            response_example=to_json_text(node),
        ))

        if kind == JsonKind.ARRAY:
            if node and kind_of(node[0]) == JsonKind.OBJECT:
                routes.extend(self._collection_routes(url, path, node[0]))
            return

        for key, value in node.items():
            if kind_of(value) in _CONTAINER_KINDS:
                self._walk(value, path + [key], routes)

    @staticmethod
    def _collection_routes(url: str, path: list[str], sample: dict[str, Any]) -> list[Route]:
        label = path[-1] if path else COLLECTION_LABEL
        item_url = f'{url}/{{id}}'
        request_example = to_json_text(build_request_example(sample))

        return [
            Route(
                method='GET',
                url=item_url,
                description=f'Récupérer un élément spécifique de {label}',
                params=(_ID_PARAM,),
                response_example=to_json_text(sample),
            ),
            Route(
                method='POST',
                url=url,
                description=f'Créer un nouvel élément dans {label}',
                params=(RouteParam('body', 'object', "Les données de l'élément à créer"),),
                request_example=request_example,
                response_example=to_json_text({'success': True, 'id': 'new-id'}),
            ),
            Route(
                method='PUT',
                url=item_url,
                description=f'Mettre à jour un élément existant dans {label}',
                params=(_ID_PARAM, RouteParam('body', 'object', 'Les données mises à jour')),
                request_example=request_example,
                response_example=to_json_text({'success': True}),
            ),
            Route(
                method='DELETE',
                url=item_url,
                description=f'Supprimer un élément de {label}',
                params=(RouteParam('id', 'string/number', "L'identifiant de l'élément à supprimer"),),
                response_example=to_json_text({'success': True}),
            ),
        ]


def generate_routes(json_data: Any, prefix: str = DEFAULT_PREFIX) -> list[Route]:
    """Derive the ordered route table for ``json_data``."""
    return RouteGenerator(prefix).generate(json_data)


def generate_documentation(json_data: Any, prefix: str = DEFAULT_PREFIX) -> Documentation:
    """Run route inference and seed the live dataset with a copy of the sample."""
    return Documentation(
        routes=generate_routes(json_data, prefix),
        api_prefix=prefix,
        json_structure=json_data,
        json_data=copy.deepcopy(json_data),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
