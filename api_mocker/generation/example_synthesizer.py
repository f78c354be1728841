"""Example request body synthesis.

Builds a plausible create/update payload from a sample collection element
by swapping each value for a placeholder chosen from the field name and
value type. Ids are dropped since the server assigns them.
"""

import math
from typing import Any

from api_mocker.domain.constants import (
    NUMBER_EXAMPLE_RULES,
    NUMBER_FALLBACK,
    NUMBER_SCALE_FACTOR,
    STRING_EXAMPLE_RULES,
)
from api_mocker.domain.enums import JsonKind, kind_of


def build_request_example(sample: Any) -> dict[str, Any]:
    """Synthesize a request body from a sample object.

    Args:
        sample: A JSON object taken from a collection. Anything else
            yields an empty body.

    Returns:
        A new dict; ``sample`` is never modified.
    """
    if kind_of(sample) != JsonKind.OBJECT:
        return {}

    example: dict[str, Any] = {}
    for key, value in sample.items():
        if key.lower() == 'id':
            continue
        example[key] = _example_value(key, value)
    return example


def string_example(field_name: str) -> str:
    field = field_name.lower()
    for needles, replacement in STRING_EXAMPLE_RULES:
        if _matches(field, needles):
            return replacement
    return f'Nouveau {field}'


def number_example(field_name: str, original: Any) -> int | float:
    field = field_name.lower()
    for needles, replacement in NUMBER_EXAMPLE_RULES:
        if _matches(field, needles):
            return replacement
    if kind_of(original) != JsonKind.NUMBER:
        return NUMBER_FALLBACK
    try:
        scaled = original * NUMBER_SCALE_FACTOR
    except OverflowError:
        return NUMBER_FALLBACK
    # inf and nan have no JSON literal
    if not math.isfinite(scaled):
        return NUMBER_FALLBACK
    return _round_half_up(scaled)


def _example_value(key: str, value: Any) -> Any:
    kind = kind_of(value)
    if kind == JsonKind.STRING:
        return string_example(key)
    if kind == JsonKind.NUMBER:
        return number_example(key, value)
    if kind == JsonKind.BOOLEAN:
        return True
    if kind == JsonKind.ARRAY:
        return [value[0]] if value else []
    if kind == JsonKind.OBJECT:
        return build_request_example(value)
    return value


def _matches(field: str, needles: tuple[str, ...]) -> bool:
    return any(needle in field for needle in needles)


def _round_half_up(value: float) -> int:
    # Halves round towards +infinity, not to even.
    return int(math.floor(value + 0.5))
