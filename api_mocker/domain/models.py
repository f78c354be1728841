"""Shared data models used across generation, simulation, and storage."""

import copy
from dataclasses import dataclass
from typing import Any

from api_mocker.domain.constants import DEFAULT_PREFIX


@dataclass(frozen=True)
class RouteParam:
    """A documented route parameter."""

    name: str
    type: str
    description: str
    required: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'type': self.type,
            'description': self.description,
            'required': self.required,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RouteParam':
        return cls(
            name=data.get('name', ''),
            type=data.get('type', ''),
            description=data.get('description', ''),
            required=bool(data.get('required', False)),
        )


@dataclass(frozen=True)
class Route:
    """One simulated endpoint, with example payloads as JSON text."""

    method: str
    url: str
    description: str
    params: tuple[RouteParam, ...] = ()
    request_example: str | None = None
    response_example: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'method': self.method,
            'url': self.url,
            'description': self.description,
            'params': [p.to_dict() for p in self.params],
        }
        if self.request_example is not None:
            data['requestExample'] = self.request_example
        if self.response_example is not None:
            data['responseExample'] = self.response_example
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Route':
        return cls(
            method=data.get('method', 'GET'),
            url=data.get('url', ''),
            description=data.get('description', ''),
            params=tuple(RouteParam.from_dict(p) for p in data.get('params') or []),
            request_example=data.get('requestExample'),
            response_example=data.get('responseExample'),
        )


@dataclass
class Documentation:
    """A generated route table together with the sample and live dataset.

    ``json_structure`` is the sample used for inference and is never
    mutated; ``json_data`` is the live document simulated calls act upon.
    """

    routes: list[Route]
    api_prefix: str = DEFAULT_PREFIX
    json_structure: Any = None
    json_data: Any = None
    timestamp: str | None = None

    def has_routes(self) -> bool:
        return len(self.routes) > 0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'routes': [r.to_dict() for r in self.routes],
            'apiPrefix': self.api_prefix,
            'jsonStructure': self.json_structure,
        }
        if self.json_data is not None:
            data['jsonData'] = self.json_data
        if self.timestamp is not None:
            data['timestamp'] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Documentation':
        return cls(
            routes=[Route.from_dict(r) for r in data.get('routes') or []],
            api_prefix=data.get('apiPrefix', DEFAULT_PREFIX),
            json_structure=data.get('jsonStructure'),
            json_data=copy.deepcopy(data.get('jsonData')),
            timestamp=data.get('timestamp'),
        )


@dataclass
class SimulatedResponse:
    """Outcome of one simulated call.

    ``document`` carries the full replacement document after a successful
    mutation and is None for reads and failures.
    """

    status: int
    data: Any
    document: Any = None

    @property
    def ok(self) -> bool:
        return self.status < 400


@dataclass
class GenerateOptions:
    """Options controlling documentation generation and output."""

    prefix: str = DEFAULT_PREFIX
    pretty: bool = True
    output_dir: str | None = None
    store_path: str | None = None
