"""JSON output generation.

Writes the route table, the full documentation, and the live document to
a flat output directory.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any

from api_mocker import __version__
from api_mocker.domain.models import Documentation, Route
from api_mocker.fingerprint import FingerprintService


class JSONDumper:
    """Writes generated documentation to a JSON directory.

    Output structure:
        output_dir/
        ├── documentation.json
        ├── routes.json
        └── data.json (only if a live document exists)

    Args:
        output_dir: Root directory for output files.
        pretty: Whether to pretty-print JSON (default True).
    """

    def __init__(self, output_dir: str, pretty: bool = True) -> None:
        self._output_dir = output_dir
        self._indent = 2 if pretty else None

    def write_routes(self, routes: list[Route]) -> str:
        """Write the route table as a list of route dicts."""
        return self._write_json('routes.json', [r.to_dict() for r in routes])

    def write_documentation(self, documentation: Documentation) -> str:
        """Write the documentation wrapped in a metadata envelope."""
        envelope = {
            '_metadata': {
                'generator_version': __version__,
                'generated_at': datetime.now(timezone.utc).isoformat(),
                'route_count': len(documentation.routes),
                'route_table_hash': FingerprintService.hash_routes(documentation.routes),
            },
            **documentation.to_dict(),
        }
        return self._write_json('documentation.json', envelope)

    def write_document(self, data: Any) -> str | None:
        """Write the live document (only if there is one)."""
        if data is None:
            return None
        return self._write_json('data.json', data)

    def write_all(self, documentation: Documentation) -> list[str]:
        paths = [
            self.write_documentation(documentation),
            self.write_routes(documentation.routes),
        ]
        data_path = self.write_document(documentation.json_data)
        if data_path:
            paths.append(data_path)
        return paths

    def _write_json(self, filename: str, data: Any) -> str:
        """Write data as JSON to a file in the output directory."""
        os.makedirs(self._output_dir, exist_ok=True)
        path = os.path.join(self._output_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self._indent, ensure_ascii=False, default=str)
        return path
