"""Resolve concrete URL paths against a JSON document.

A path is split into segments after the API prefix is stripped:
  - '/users'            → the 'users' field of the root object
  - '/users/3'          → the element of 'users' whose id is "3"
  - '/shop/items/7'     → field, field, then id lookup
Arrays are always addressed by element id, objects by field name.
"""

import re
from typing import Any, Mapping

from api_mocker.domain.enums import JsonKind, kind_of


class _NotFound:
    """Sentinel for a failed resolution (distinct from a JSON null)."""

    def __repr__(self) -> str:
        return 'NOT_FOUND'


NOT_FOUND = _NotFound()

_PLACEHOLDER_RE = re.compile(r'\{([^{}/]+)\}')


def strip_prefix(url: str, prefix: str) -> str:
    """Drop the API prefix (trailing slash ignored) from a URL."""
    clean = normalize_prefix(prefix)
    if clean and url.startswith(clean):
        return url[len(clean):]
    return url


def normalize_prefix(prefix: str) -> str:
    return prefix[:-1] if prefix.endswith('/') else prefix


def substitute_params(template: str, params: Mapping[str, Any] | None) -> str:
    """Replace each {name} placeholder with its parameter value.

    Placeholders without a supplied value are left untouched.
    """
    if not params:
        return template

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in params and params[name] is not None:
            return id_text(params[name])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


def split_segments(path: str) -> list[str]:
    return [segment for segment in path.split('/') if segment]


def id_text(value: Any) -> str:
    """Stringify an id the way the documents were authored (JSON style)."""
    kind = kind_of(value)
    if kind == JsonKind.BOOLEAN:
        return 'true' if value else 'false'
    if kind == JsonKind.NULL:
        return 'null'
    if kind == JsonKind.NUMBER and isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def ids_match(item: Any, wanted: Any) -> bool:
    """True if ``item`` is an object whose id equals ``wanted`` as text."""
    if kind_of(item) != JsonKind.OBJECT or 'id' not in item:
        return False
    return id_text(item['id']) == id_text(wanted)


def find_index_by_id(collection: list[Any], wanted: Any) -> int:
    """Index of the first element whose id matches, or -1."""
    for index, item in enumerate(collection):
        if ids_match(item, wanted):
            return index
    return -1


def resolve(segments: list[str], root: Any) -> Any:
    """Descend into ``root`` one segment at a time.

    Args:
        segments: Path segments after placeholder substitution.
        root: JSON document to walk.

    Returns:
        The value found, or NOT_FOUND. A JSON null reached on the way
        counts as not found.
    """
    current = root
    for segment in segments:
        kind = kind_of(current)
        if kind == JsonKind.NULL:
            return NOT_FOUND
        if kind == JsonKind.ARRAY:
            index = find_index_by_id(current, segment)
            if index < 0:
                return NOT_FOUND
            current = current[index]
        elif kind == JsonKind.OBJECT and segment in current:
            current = current[segment]
        else:
            return NOT_FOUND
    if current is None:
        return NOT_FOUND
    return current


def resolve_url(url: str, prefix: str, params: Mapping[str, Any] | None, root: Any) -> Any:
    """Strip the prefix, substitute placeholders, then resolve."""
    path = substitute_params(strip_prefix(url, prefix), params)
    return resolve(split_segments(path), root)
