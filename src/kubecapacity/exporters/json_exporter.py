import json
from typing import Any, Dict, List

from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "kubecapacity-report.json"

    def render(self, records: List[Dict[str, Any]]) -> str:
        return json.dumps(records, ensure_ascii=False, indent=2)
