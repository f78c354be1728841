"""Domain enums for the API mocker."""
from enum import Enum


class HttpMethod(Enum):
    """Methods the simulator understands."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class JsonKind(Enum):
    """Structural variants of a decoded JSON value."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"


def kind_of(value) -> JsonKind:
    """Classify a decoded JSON value.

    bool is checked before numbers since it subclasses int.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    return JsonKind.OTHER
