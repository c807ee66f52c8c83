import csv
import io
from typing import Any, Dict, List

from .base_exporter import BaseExporter


class CSVExporter(BaseExporter):
    DEFAULT_FILENAME = "kubecapacity-report.csv"

    def render(self, records: List[Dict[str, Any]]) -> str:
        """Renders records as CSV with a header row.

        Every record carries the same keys for a given export, so the first
        record defines the column order.
        """
        if not records:
            return ""

        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(records[0].keys()))
        writer.writeheader()
        for record in records:
            writer.writerow({k: self._sanitize_cell(v) for k, v in record.items()})
        return output.getvalue()

    def _sanitize_cell(self, value: Any) -> Any:
        """
        Sanitize value to prevent CSV formula injection.
        Pod, namespace and node names come from the cluster, so prefix any
        string starting with =, +, -, or @ with a single quote.
        """
        if isinstance(value, str) and value.startswith(("=", "+", "-", "@")):
            return f"'{value}"
        return value
