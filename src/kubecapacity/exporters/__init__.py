"""Exporters package for file-based capacity reports."""

from .base_exporter import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .records import cluster_to_records

__all__ = ["BaseExporter", "CSVExporter", "JSONExporter", "cluster_to_records"]
