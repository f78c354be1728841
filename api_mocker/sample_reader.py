"""Reads JSON sample files."""
import json
from typing import Any

MSG_INVALID_JSON = "Le fichier n'est pas un JSON valide"
MSG_READ_FAILED = "Erreur lors de la lecture du fichier"


class SampleReadError(Exception):
    """Error reading a JSON sample."""
    pass


def read_json_file(path: str) -> Any:
    """Read and decode a JSON sample file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SampleReadError(f"{MSG_READ_FAILED}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SampleReadError(f"{MSG_INVALID_JSON}: {e}") from e


def validate_json(text: str) -> bool:
    """True if ``text`` is any valid JSON document, scalars included."""
    try:
        json.loads(text)
        return True
    except (json.JSONDecodeError, TypeError):
        return False
