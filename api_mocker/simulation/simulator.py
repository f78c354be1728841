"""Mock request simulator.

Answers GET/POST/PUT/DELETE calls against the live JSON document of the
stored documentation. Every call works on a deep copy taken at entry; the
copy replaces the stored document only when the call succeeds, so a failed
call never alters persisted state.
"""

import copy
import logging
import math
import threading
from typing import Any, Callable, Mapping

from api_mocker.domain.constants import (
    DEFAULT_PREFIX,
    MSG_BODY_REQUIRED,
    MSG_COLLECTION_NOT_FOUND,
    MSG_ITEM_NOT_FOUND,
    MSG_NOT_A_COLLECTION,
    MSG_RESOURCE_NOT_FOUND,
)
from api_mocker.domain.enums import HttpMethod, JsonKind, kind_of
from api_mocker.domain.models import Documentation, Route, SimulatedResponse
from api_mocker.domain.path_resolver import (
    NOT_FOUND,
    find_index_by_id,
    resolve,
    resolve_url,
    split_segments,
    strip_prefix,
    substitute_params,
)
from api_mocker.simulation.errors import (
    BadRequest,
    MethodNotSupported,
    NotFound,
    NotInitialized,
    SimulatorError,
)
from api_mocker.simulation.route_matcher import match_route
from api_mocker.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)

Handler = Callable[[Route, Mapping[str, Any], Any, Any, str], SimulatedResponse]


def handle(
    route: Route,
    params: Mapping[str, Any] | None,
    body: Any,
    document: Any,
    prefix: str = DEFAULT_PREFIX,
) -> SimulatedResponse:
    """Simulate one call against ``document`` without touching it.

    Args:
        route: Route template being called.
        params: Path parameter values keyed by placeholder name.
        body: Decoded JSON body for POST/PUT, or None.
        document: Current live document (read only).
        prefix: API prefix the route URLs are rooted at.

    Returns:
        The response. On a successful mutation ``response.document`` holds
        the full replacement document.
    """
    params = params or {}
    method = route.method.upper()
    logger.debug("Simulating %s %s params=%s", method, route.url, dict(params))

    try:
        if document is None:
            raise NotInitialized()
        handler = _HANDLERS.get(method)
        if handler is None:
            raise MethodNotSupported()
        return handler(route, params, body, copy.deepcopy(document), prefix)
    except SimulatorError as e:
        logger.info("%s %s failed with %d: %s", method, route.url, e.status, e.message)
        return _error_response(e)


def next_id(collection: list[Any]) -> int | float:
    """One more than the highest numeric id in the collection (1 if empty)."""
    if not collection:
        return 1
    return max(_numeric_id(item) for item in collection) + 1


# ── Method Handlers ──────────────────────────────────────────────────────

def _handle_get(route, params, body, data, prefix) -> SimulatedResponse:
    result = resolve_url(route.url, prefix, params, data)
    if result is NOT_FOUND:
        raise NotFound(MSG_RESOURCE_NOT_FOUND)
    return SimulatedResponse(status=200, data=result)


def _handle_post(route, params, body, data, prefix) -> SimulatedResponse:
    _require_body(body)
    collection = resolve_url(route.url, prefix, params, data)
    if kind_of(collection) != JsonKind.ARRAY:
        raise BadRequest(MSG_NOT_A_COLLECTION)

    new_item = {**body, 'id': next_id(collection)}
    collection.append(new_item)
    return SimulatedResponse(status=201, data=copy.deepcopy(new_item), document=data)


def _handle_put(route, params, body, data, prefix) -> SimulatedResponse:
    _require_body(body)
    collection, index = _locate_item(route, params, data, prefix)

    existing = collection[index]
    collection[index] = {**existing, **body, 'id': existing['id']}
    return SimulatedResponse(status=200, data=copy.deepcopy(collection[index]), document=data)


def _handle_delete(route, params, body, data, prefix) -> SimulatedResponse:
    collection, index = _locate_item(route, params, data, prefix)

    deleted = collection.pop(index)
    return SimulatedResponse(status=200, data={'success': True, 'deleted': deleted}, document=data)


_HANDLERS: dict[str, Handler] = {
    HttpMethod.GET.value: _handle_get,
    HttpMethod.POST.value: _handle_post,
    HttpMethod.PUT.value: _handle_put,
    HttpMethod.DELETE.value: _handle_delete,
}


# ── Helpers ──────────────────────────────────────────────────────────────

def _require_body(body: Any) -> None:
    if kind_of(body) != JsonKind.OBJECT:
        raise BadRequest(MSG_BODY_REQUIRED)


def _locate_item(route: Route, params: Mapping[str, Any], data: Any, prefix: str) -> tuple[list, int]:
    """Resolve the parent collection of an item route and the item's index."""
    segments = split_segments(strip_prefix(route.url, prefix))
    if not segments:
        raise NotFound(MSG_COLLECTION_NOT_FOUND)

    parent = [substitute_params(segment, params) for segment in segments[:-1]]
    collection = resolve(parent, data)
    if kind_of(collection) != JsonKind.ARRAY:
        raise NotFound(MSG_COLLECTION_NOT_FOUND)

    wanted = params.get('id')
    if wanted is None:
        wanted = substitute_params(segments[-1], params)
    index = find_index_by_id(collection, wanted)
    if index < 0:
        raise NotFound(MSG_ITEM_NOT_FOUND)
    return collection, index


def _numeric_id(item: Any) -> int | float:
    """Numeric value of an element's id; 0 when absent or not numeric.

    true counts as 1 and false as 0.
    """
    if kind_of(item) != JsonKind.OBJECT:
        return 0
    value = item.get('id')
    kind = kind_of(value)
    if kind == JsonKind.BOOLEAN:
        return int(value)
    if kind == JsonKind.NUMBER:
        number = value
    elif kind == JsonKind.STRING:
        try:
            number = float(value.strip()) if value.strip() else 0
        except ValueError:
            return 0
    else:
        return 0
    if not isinstance(number, float):
        return number
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


# ── Stateful Front Door ──────────────────────────────────────────────────

class MockSimulator:
    """Serves simulated calls against the documentation held by a store.

    Calls are serialized with a lock so that each read-modify-write of the
    live document completes before the next one starts.

    Args:
        store: Persistence collaborator holding the documentation.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._lock = threading.RLock()

    def request(
        self,
        route: Route,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> SimulatedResponse:
        """Simulate a call to ``route`` and persist the outcome on success."""
        with self._lock:
            documentation = self._store.load()
            if documentation is None or documentation.json_data is None:
                return _error_response(NotInitialized())
            return self._simulate(documentation, route, params, body)

    def request_path(self, method: str, path: str, body: Any = None) -> SimulatedResponse:
        """Simulate a call given a concrete path such as ``/api/v1/users/3``."""
        with self._lock:
            documentation = self._store.load()
            if documentation is None or documentation.json_data is None:
                return _error_response(NotInitialized())

            if method.upper() not in _HANDLERS:
                return _error_response(MethodNotSupported())

            matched = match_route(documentation.routes, method, path)
            if matched is None:
                logger.info("No route for %s %s", method.upper(), path)
                return _error_response(NotFound(MSG_RESOURCE_NOT_FOUND))

            route, params = matched
            return self._simulate(documentation, route, params, body)

    def _simulate(
        self,
        documentation: Documentation,
        route: Route,
        params: Mapping[str, Any] | None,
        body: Any,
    ) -> SimulatedResponse:
        response = handle(route, params, body, documentation.json_data, documentation.api_prefix)
        if response.ok and response.document is not None:
            self._store.update_json_data(response.document)
        return response


def _error_response(error: SimulatorError) -> SimulatedResponse:
    return SimulatedResponse(status=error.status, data=error.to_body())
