"""Map concrete request paths back onto route templates."""

import re
from typing import Any

from api_mocker.domain.models import Route
from api_mocker.domain.path_resolver import split_segments

_PLACEHOLDER_SEGMENT_RE = re.compile(r'^\{([^{}/]+)\}$')


def match_route(routes: list[Route], method: str, path: str) -> tuple[Route, dict[str, str]] | None:
    """Find the route whose template matches a concrete path.

    Literal segments must match exactly; ``{name}`` segments capture the
    concrete value. When several templates match, the one with the fewest
    placeholders wins.

    Returns:
        (route, params) or None.
    """
    method = method.upper()
    concrete = split_segments(path)
    best: tuple[int, Route, dict[str, str]] | None = None

    for route in routes:
        if route.method.upper() != method:
            continue
        params = _match_segments(split_segments(route.url), concrete)
        if params is None:
            continue
        if best is None or len(params) < best[0]:
            best = (len(params), route, params)

    if best is None:
        return None
    return best[1], best[2]


def _match_segments(template: list[str], concrete: list[str]) -> dict[str, Any] | None:
    if len(template) != len(concrete):
        return None
    params: dict[str, Any] = {}
    for expected, actual in zip(template, concrete):
        m = _PLACEHOLDER_SEGMENT_RE.match(expected)
        if m:
            params[m.group(1)] = actual
        elif expected != actual:
            return None
    return params
