"""Fingerprints for route tables and documents."""
import hashlib
import json
from typing import Any

from api_mocker.domain.models import Route


class FingerprintService:
    """Service for hashing JSON-compatible data."""

    @staticmethod
    def generate_hash(data: Any) -> str:
        """Generate SHA-512 hash of the canonical JSON form."""
        json_str = json.dumps(data, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
        return hashlib.sha512(json_str.encode('utf-8')).hexdigest()

    @staticmethod
    def hash_routes(routes: list[Route]) -> str:
        """Hash a route table; order matters."""
        return FingerprintService.generate_hash([r.to_dict() for r in routes])
